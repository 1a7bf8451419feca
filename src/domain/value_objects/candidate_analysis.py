"""候補者分析結果の値オブジェクト — Domain layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CandidateAnalysis:
    """候補者1人分の分析結果.

    名称フィールドは所属チェーン（選挙区→県→地方）から解決する。
    参照先が存在しない場合はNone。
    """

    id: int
    full_name: str
    party_id: int
    constituency_id: int
    score: int
    party_name: str | None
    party_color: str | None
    area_name: str | None
    province_id: int | None
    province_name: str | None
    region_id: int | None
    region_name: str | None
    rank: int
    is_winner: bool
    total_votes: int
    margin_votes: int
    margin_percent: float
    vote_share: float
    potential_score: int
    competitive_index: int

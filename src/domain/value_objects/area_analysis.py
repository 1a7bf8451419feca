"""県・地方単位の集計結果の値オブジェクト — Domain layer."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PartySeatShare:
    """ある地域における政党の獲得議席."""

    party_id: int
    party_name: str
    party_color: str
    seats: int
    votes: int


@dataclass(frozen=True)
class ProvinceAnalysis:
    """県単位の集計."""

    id: int
    name: str
    region_id: int
    region_name: str
    total_votes: int
    total_seats: int
    party_breakdown: dict[int, int] = field(default_factory=dict)
    dominant_party_id: int | None = None
    competitive_seats: int = 0


@dataclass(frozen=True)
class RegionAnalysis:
    """地方単位の集計."""

    id: int
    name: str
    province_count: int
    total_votes: int
    total_seats: int
    party_breakdown: dict[int, int] = field(default_factory=dict)
    dominant_party_id: int | None = None
    dominant_party_name: str = "-"
    dominant_party_seats: int = 0
    competitive_seats: int = 0
    competitive_percent: float = 0.0
    top_parties: list[PartySeatShare] = field(default_factory=list)

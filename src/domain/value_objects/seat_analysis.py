"""議席分析結果の値オブジェクト — Domain layer."""

from dataclasses import dataclass, field
from enum import StrEnum

from src.domain.value_objects.candidate_analysis import CandidateAnalysis


class SeatCategory(StrEnum):
    """選挙区の接戦度カテゴリ.

    LOSTは既存ダッシュボードとの互換のために残しているキーで、
    実際の意味は「当落が読めない（too close to call）」。
    当選者はその議席を得ている。
    """

    SAFE = "safe"
    MARGINAL = "marginal"
    COMPETITIVE = "competitive"
    LOST = "lost"

    @property
    def label(self) -> str:
        """表示用ラベル（タイ語）."""
        return _CATEGORY_LABELS[self]

    @property
    def color(self) -> str:
        """表示用カラートークン."""
        return _CATEGORY_COLORS[self]


_CATEGORY_LABELS: dict[SeatCategory, str] = {
    SeatCategory.SAFE: "ชนะแน่นอน",
    SeatCategory.MARGINAL: "ชนะห่างน้อย",
    SeatCategory.COMPETITIVE: "ดุเดือด",
    SeatCategory.LOST: "แพ้/ไม่แน่นอน",
}

_CATEGORY_COLORS: dict[SeatCategory, str] = {
    SeatCategory.SAFE: "#10b981",
    SeatCategory.MARGINAL: "#f59e0b",
    SeatCategory.COMPETITIVE: "#ef4444",
    SeatCategory.LOST: "#6b7280",
}


@dataclass(frozen=True)
class SeatAnalysis:
    """選挙区1つ分の議席分析."""

    id: int
    area_name: str
    province_id: int | None
    province_name: str
    region_id: int | None
    region_name: str
    winner: CandidateAnalysis
    runner_up: CandidateAnalysis | None
    margin: int
    margin_percent: float
    total_votes: int
    category: SeatCategory
    competitive_index: int


@dataclass(frozen=True)
class SeatClassification:
    """カテゴリ別に分割した議席分析. 4区分は互いに素で、和集合がall."""

    all: list[SeatAnalysis] = field(default_factory=list)
    safe: list[SeatAnalysis] = field(default_factory=list)
    marginal: list[SeatAnalysis] = field(default_factory=list)
    competitive: list[SeatAnalysis] = field(default_factory=list)
    lost: list[SeatAnalysis] = field(default_factory=list)

    def by_category(self, category: SeatCategory) -> list[SeatAnalysis]:
        """カテゴリに対応する区分を返す."""
        return getattr(self, category.value)

    def counts(self) -> dict[SeatCategory, int]:
        """カテゴリ別の議席数."""
        return {c: len(self.by_category(c)) for c in SeatCategory}

"""選挙全体の概要の値オブジェクト — Domain layer."""

from dataclasses import dataclass, field

from src.domain.value_objects.area_analysis import PartySeatShare


@dataclass(frozen=True)
class ElectionOverview:
    """1回の選挙の全体像."""

    total_votes: int
    turnout: float
    total_seats: int
    total_candidates: int
    top_parties: list[PartySeatShare] = field(default_factory=list)
    competitive_count: int = 0
    competitive_percent: float = 0.0
    safe_seats: int = 0
    marginal_seats: int = 0

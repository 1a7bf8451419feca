"""政党の実績分析の値オブジェクト — Domain layer."""

from dataclasses import dataclass, field

from src.domain.value_objects.candidate_analysis import CandidateAnalysis


@dataclass(frozen=True)
class ProvincePerformance:
    """ある県での政党の成績."""

    province_id: int
    province_name: str
    votes: int
    seats: int
    candidates: int

    @property
    def win_rate(self) -> float:
        """当選率（％）."""
        if self.candidates == 0:
            return 0.0
        return self.seats / self.candidates * 100


@dataclass(frozen=True)
class RegionalStrength:
    """ある地方での政党の成績."""

    region_id: int
    region_name: str
    votes: int
    seats: int
    candidates: int


@dataclass(frozen=True)
class PartyPerformance:
    """政党1つ分の実績分析."""

    party_id: int
    party_name: str
    party_color: str
    total_candidates: int
    winners: int
    losers: int
    total_votes: int
    average_votes: float
    win_rate: float
    average_winning_margin: float
    seats_won: int
    safe_seats: int
    marginal_seats: int
    competitive_seats: int
    top_provinces: list[ProvincePerformance] = field(default_factory=list)
    best_province: ProvincePerformance | None = None
    top_candidates: list[CandidateAnalysis] = field(default_factory=list)
    regional_strength: list[RegionalStrength] = field(default_factory=list)

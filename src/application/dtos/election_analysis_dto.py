"""選挙分析に関するDTO."""

from dataclasses import dataclass, field

from src.domain.value_objects.area_analysis import ProvinceAnalysis, RegionAnalysis
from src.domain.value_objects.candidate_analysis import CandidateAnalysis
from src.domain.value_objects.election_overview import ElectionOverview
from src.domain.value_objects.election_snapshot import ElectionSnapshot
from src.domain.value_objects.party_stats import PartyListMethod, PartyStats
from src.domain.value_objects.party_trend import InsufficientTrendData, TrendAnalysis
from src.domain.value_objects.seat_analysis import SeatClassification


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class AnalyzeElectionInputDto:
    """1回の選挙の分析の入力DTO."""

    party_list_method: PartyListMethod | None = None


@dataclass
class AnalyzeTrendsInputDto:
    """複数年トレンド分析の入力DTO."""

    years: list[int]
    limit: int | None = 10


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class ElectionAnalysisOutputDto:
    """1回の選挙の分析結果一式."""

    year: int
    snapshot: ElectionSnapshot
    candidates: list[CandidateAnalysis]
    seats: SeatClassification
    provinces: list[ProvinceAnalysis]
    regions: list[RegionAnalysis]
    party_stats: list[PartyStats]
    overview: ElectionOverview
    party_list_method: PartyListMethod


@dataclass
class TrendAnalysisOutputDto:
    """複数年トレンド分析の出力DTO."""

    result: TrendAnalysis | InsufficientTrendData
    years_loaded: list[int] = field(default_factory=list)

    @property
    def is_sufficient(self) -> bool:
        """トレンド分析が成立したか."""
        return isinstance(self.result, TrendAnalysis)

"""政党の実績分析ドメインサービス.

1政党の候補者・獲得議席を県別、地方別に集計し、当選率や
最も強い県を求める。
"""

from dataclasses import dataclass

from src.domain.services.candidate_analysis_service import CandidateAnalysisService
from src.domain.services.seat_classification_service import (
    UNKNOWN_LABEL,
    SeatClassificationService,
)
from src.domain.utils.vote_math import safe_percent
from src.domain.value_objects.candidate_analysis import CandidateAnalysis
from src.domain.value_objects.election_snapshot import ElectionSnapshot
from src.domain.value_objects.party_performance import (
    PartyPerformance,
    ProvincePerformance,
    RegionalStrength,
)
from src.domain.value_objects.seat_analysis import SeatAnalysis, SeatCategory


TOP_PROVINCE_COUNT = 10
TOP_CANDIDATE_COUNT = 10
BEST_PROVINCE_MIN_CANDIDATES = 2


@dataclass
class _Tally:
    votes: int = 0
    seats: int = 0
    candidates: int = 0

    def add(self, analysis: CandidateAnalysis) -> None:
        self.votes += analysis.score
        self.candidates += 1
        if analysis.is_winner:
            self.seats += 1


def pick_best_province(
    provinces: list[ProvincePerformance],
) -> ProvincePerformance | None:
    """候補者2人以上の県のうち当選率が最も高い県.

    同率なら得票の多い県、さらに同じなら県IDの小さい県。
    """
    eligible = [p for p in provinces if p.candidates >= BEST_PROVINCE_MIN_CANDIDATES]
    if not eligible:
        return None
    return min(eligible, key=lambda p: (-p.win_rate, -p.votes, p.province_id))


class PartyPerformanceService:
    """政党の実績分析を行うドメインサービス."""

    def __init__(
        self,
        candidate_service: CandidateAnalysisService | None = None,
        seat_service: SeatClassificationService | None = None,
    ):
        self._candidate_service = candidate_service or CandidateAnalysisService()
        self._seat_service = seat_service or SeatClassificationService(
            self._candidate_service
        )

    def analyze_party_performance(
        self,
        snapshot: ElectionSnapshot,
        party_id: int,
        analyses: list[CandidateAnalysis] | None = None,
        seats: list[SeatAnalysis] | None = None,
    ) -> PartyPerformance | None:
        """政党の実績を分析する.

        Args:
            snapshot: 分析対象の選挙スナップショット
            party_id: 対象の政党ID
            analyses: 計算済みの候補者分析（省略時はsnapshotから計算）
            seats: 計算済みの議席分析（省略時はanalysesから計算）

        Returns:
            政党の実績。政党が存在しなければNone
        """
        party = snapshot.party_by_id().get(party_id)
        if party is None:
            return None

        if analyses is None:
            analyses = self._candidate_service.analyze_candidates(snapshot)
        if seats is None:
            seats = self._seat_service.build_seats(analyses)

        candidates = [a for a in analyses if a.party_id == party_id]
        winners = [a for a in candidates if a.is_winner]
        total_votes = sum(a.score for a in candidates)

        seats_won = [s for s in seats if s.winner.party_id == party_id]
        category_counts = {c: 0 for c in SeatCategory}
        for seat in seats_won:
            category_counts[seat.category] += 1

        province_tallies: dict[int, _Tally] = {}
        region_tallies: dict[int, _Tally] = {}
        for analysis in candidates:
            if analysis.province_id is None:
                continue
            province_tallies.setdefault(analysis.province_id, _Tally()).add(analysis)
            if analysis.region_id is not None:
                region_tallies.setdefault(analysis.region_id, _Tally()).add(analysis)

        province_names = {p.id: p.name for p in snapshot.provinces}
        provinces = [
            ProvincePerformance(
                province_id=province_id,
                province_name=province_names.get(province_id, UNKNOWN_LABEL),
                votes=tally.votes,
                seats=tally.seats,
                candidates=tally.candidates,
            )
            for province_id, tally in province_tallies.items()
        ]

        regional_strength: list[RegionalStrength] = []
        for region in snapshot.regions:
            tally = region_tallies.get(region.id, _Tally())
            regional_strength.append(
                RegionalStrength(
                    region_id=region.id,
                    region_name=region.name,
                    votes=tally.votes,
                    seats=tally.seats,
                    candidates=tally.candidates,
                )
            )

        return PartyPerformance(
            party_id=party.id,
            party_name=party.name,
            party_color=party.color,
            total_candidates=len(candidates),
            winners=len(winners),
            losers=len(candidates) - len(winners),
            total_votes=total_votes,
            average_votes=total_votes / len(candidates) if candidates else 0.0,
            win_rate=safe_percent(len(winners), len(candidates)),
            average_winning_margin=(
                sum(w.margin_percent for w in winners) / len(winners)
                if winners
                else 0.0
            ),
            seats_won=len(seats_won),
            safe_seats=category_counts[SeatCategory.SAFE],
            marginal_seats=category_counts[SeatCategory.MARGINAL],
            competitive_seats=(
                category_counts[SeatCategory.COMPETITIVE]
                + category_counts[SeatCategory.LOST]
            ),
            top_provinces=sorted(provinces, key=lambda p: (-p.votes, p.province_id))[
                :TOP_PROVINCE_COUNT
            ],
            best_province=pick_best_province(provinces),
            top_candidates=sorted(candidates, key=lambda a: (-a.score, a.id))[
                :TOP_CANDIDATE_COUNT
            ],
            regional_strength=regional_strength,
        )

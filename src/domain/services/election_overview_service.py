"""選挙全体の概要を求めるドメインサービス."""

from src.domain.services.area_aggregation_service import (
    REGION_COMPETITIVE,
    AreaTotals,
    aggregate_seats,
    top_parties,
)
from src.domain.services.seat_classification_service import SeatClassificationService
from src.domain.utils.vote_math import safe_percent
from src.domain.value_objects.election_overview import ElectionOverview
from src.domain.value_objects.election_snapshot import NATIONWIDE_KEY, ElectionSnapshot
from src.domain.value_objects.seat_analysis import SeatClassification


class ElectionOverviewService:
    """選挙全体の概要を求めるドメインサービス."""

    def __init__(self, seat_service: SeatClassificationService | None = None):
        self._seat_service = seat_service or SeatClassificationService()

    def build_overview(
        self,
        snapshot: ElectionSnapshot,
        classification: SeatClassification | None = None,
    ) -> ElectionOverview:
        """概要を作る.

        接戦議席はcompetitiveとlostの合計。総議席は選挙区数。

        Args:
            snapshot: 分析対象の選挙スナップショット
            classification: 計算済みの議席分類（省略時はsnapshotから計算）

        Returns:
            選挙の概要
        """
        if classification is None:
            classification = self._seat_service.analyze_seats_by_category(snapshot)

        nationwide = snapshot.nationwide_turnout
        total_seats = len(snapshot.constituencies)
        competitive_count = len(classification.competitive) + len(classification.lost)

        totals = aggregate_seats(
            classification.all, lambda _: NATIONWIDE_KEY, REGION_COMPETITIVE
        ).get(NATIONWIDE_KEY, AreaTotals())

        return ElectionOverview(
            total_votes=nationwide.total_votes if nationwide else 0,
            turnout=nationwide.percent_voter if nationwide else 0.0,
            total_seats=total_seats,
            total_candidates=len(snapshot.candidates),
            top_parties=top_parties(totals, snapshot.party_by_id()),
            competitive_count=competitive_count,
            competitive_percent=safe_percent(competitive_count, total_seats),
            safe_seats=len(classification.safe),
            marginal_seats=len(classification.marginal),
        )

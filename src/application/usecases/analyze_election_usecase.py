"""選挙分析ユースケース.

データソースからスナップショットを取得し、候補者分析・議席分類・
県/地方集計・政党別集計・概要を一括で求める。

処理フロー:
    1. データソースからスナップショットを取得
    2. 候補者分析 → 議席分析（以降の集計はこの結果を共有）
    3. 県・地方・政党・概要の集計
"""

from src.application.dtos.election_analysis_dto import (
    AnalyzeElectionInputDto,
    ElectionAnalysisOutputDto,
)
from src.common.logging import get_logger
from src.domain.services.area_aggregation_service import AreaAggregationService
from src.domain.services.candidate_analysis_service import CandidateAnalysisService
from src.domain.services.election_overview_service import ElectionOverviewService
from src.domain.services.interfaces.election_snapshot_source import (
    IElectionSnapshotSource,
)
from src.domain.services.party_stats_service import (
    DEFAULT_TOTAL_SEATS,
    PartyStatsService,
    method_for_year,
)
from src.domain.services.seat_classification_service import SeatClassificationService


logger = get_logger(__name__)


class AnalyzeElectionUseCase:
    """1回の選挙を分析するユースケース."""

    def __init__(
        self,
        snapshot_source: IElectionSnapshotSource,
        party_list_total_seats: int = DEFAULT_TOTAL_SEATS,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            snapshot_source: スナップショットのデータソース
            party_list_total_seats: 比例代表の近似計算で使う総定数
        """
        self._source = snapshot_source
        self._candidate_service = CandidateAnalysisService()
        self._seat_service = SeatClassificationService(self._candidate_service)
        self._area_service = AreaAggregationService(self._seat_service)
        self._party_stats_service = PartyStatsService(
            self._seat_service, total_seats=party_list_total_seats
        )
        self._overview_service = ElectionOverviewService(self._seat_service)

    async def execute(
        self, input_dto: AnalyzeElectionInputDto | None = None
    ) -> ElectionAnalysisOutputDto:
        """分析を実行する.

        Raises:
            InfrastructureError: データソースの取得に失敗した
        """
        input_dto = input_dto or AnalyzeElectionInputDto()
        snapshot = await self._source.produce_snapshot()
        logger.info(
            "選挙分析を開始",
            year=snapshot.year,
            constituencies=len(snapshot.constituencies),
            candidates=len(snapshot.candidates),
        )

        method = input_dto.party_list_method or method_for_year(
            snapshot.year, bool(snapshot.reported_party_results)
        )
        candidates = self._candidate_service.analyze_candidates(snapshot)
        classification = self._seat_service.classify(
            self._seat_service.build_seats(candidates)
        )

        output = ElectionAnalysisOutputDto(
            year=snapshot.year,
            snapshot=snapshot,
            candidates=candidates,
            seats=classification,
            provinces=self._area_service.analyze_provinces(
                snapshot, seats=classification.all
            ),
            regions=self._area_service.analyze_regions(
                snapshot, seats=classification.all
            ),
            party_stats=self._party_stats_service.compute_party_stats(
                snapshot, method, seats=classification.all
            ),
            overview=self._overview_service.build_overview(snapshot, classification),
            party_list_method=method,
        )

        logger.info(
            "選挙分析が完了",
            year=snapshot.year,
            seats=len(classification.all),
            party_list_method=method.value,
        )
        return output

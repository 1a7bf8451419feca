"""複数年トレンド分析ユースケース."""

from collections.abc import Callable
from datetime import date

from src.application.dtos.election_analysis_dto import (
    AnalyzeTrendsInputDto,
    TrendAnalysisOutputDto,
)
from src.common.logging import get_logger
from src.domain.services.election_trend_service import ElectionTrendService
from src.domain.services.interfaces.election_snapshot_source import (
    IElectionSnapshotSource,
)
from src.domain.services.party_stats_service import (
    DEFAULT_TOTAL_SEATS,
    PartyStatsService,
)
from src.domain.value_objects.election_snapshot import (
    ElectionSnapshot,
    ElectionYear,
    MultiYearData,
)


logger = get_logger(__name__)

# 選挙年（仏暦）→ 投票日
ELECTION_DATES: dict[int, date] = {
    2562: date(2019, 3, 24),
    2566: date(2023, 5, 14),
}


def to_election_year(snapshot: ElectionSnapshot) -> ElectionYear:
    """スナップショットに表示用の年度情報を付ける."""
    return ElectionYear(
        year=snapshot.year,
        label=str(snapshot.year),
        description=f"การเลือกตั้งทั่วไป พ.ศ. {snapshot.year}",
        election_date=ELECTION_DATES.get(snapshot.year),
        snapshot=snapshot,
    )


class AnalyzeTrendsUseCase:
    """複数年のトレンドを分析するユースケース."""

    def __init__(
        self,
        source_for_year: Callable[[int], IElectionSnapshotSource],
        party_list_total_seats: int = DEFAULT_TOTAL_SEATS,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            source_for_year: 選挙年からデータソースを作る関数
            party_list_total_seats: 比例代表の近似計算で使う総定数
        """
        self._source_for_year = source_for_year
        self._trend_service = ElectionTrendService(
            PartyStatsService(total_seats=party_list_total_seats)
        )

    async def execute(self, input_dto: AnalyzeTrendsInputDto) -> TrendAnalysisOutputDto:
        """トレンド分析を実行する.

        年ごとのスナップショットは順番に取得する。1年でも取得に
        失敗した場合は例外をそのまま送出する。

        Raises:
            InfrastructureError: データソースの取得に失敗した
        """
        years = sorted(set(input_dto.years))
        logger.info("トレンド分析を開始", years=years)

        election_years: list[ElectionYear] = []
        for year in years:
            snapshot = await self._source_for_year(year).produce_snapshot()
            election_years.append(to_election_year(snapshot))

        multi_year = MultiYearData(years=tuple(election_years))
        result = self._trend_service.analyze_trends(multi_year, limit=input_dto.limit)

        output = TrendAnalysisOutputDto(
            result=result, years_loaded=[y.year for y in multi_year.years]
        )
        if not output.is_sufficient:
            logger.warning("トレンド分析に必要な年数が不足", years_loaded=output.years_loaded)
        else:
            logger.info("トレンド分析が完了", years_loaded=output.years_loaded)
        return output

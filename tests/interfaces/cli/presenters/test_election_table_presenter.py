"""ElectionTablePresenterのテスト."""

from src.application.usecases.analyze_trends_usecase import to_election_year
from src.domain.services.area_aggregation_service import AreaAggregationService
from src.domain.services.election_trend_service import ElectionTrendService
from src.domain.services.party_stats_service import PartyStatsService
from src.domain.services.seat_classification_service import SeatClassificationService
from src.domain.value_objects.election_snapshot import MultiYearData
from src.domain.value_objects.party_trend import TrendAnalysis
from src.interfaces.cli.presenters.election_table_presenter import (
    SEAT_COLUMNS,
    ElectionTablePresenter,
)
from tests.fixtures.election_factories import make_standard_snapshot


class TestElectionTablePresenter:
    def test_seats_formatted(self) -> None:
        seats = SeatClassificationService().analyze_seats_by_category(
            make_standard_snapshot()
        )
        frame = ElectionTablePresenter().seats_to_dataframe(seats.all)

        assert list(frame.columns) == SEAT_COLUMNS
        assert frame.loc[0, "winner_votes"] == "60,000"
        assert frame.loc[0, "margin_percent"] == "20.0%"
        assert frame.loc[0, "category"] == "marginal"

    def test_seats_raw(self) -> None:
        seats = SeatClassificationService().analyze_seats_by_category(
            make_standard_snapshot()
        )
        frame = ElectionTablePresenter(raw=True).seats_to_dataframe(seats.all)
        assert frame.loc[0, "winner_votes"] == 60_000
        assert frame.loc[0, "margin_percent"] == 20.0

    def test_empty_frame_keeps_columns(self) -> None:
        frame = ElectionTablePresenter().seats_to_dataframe([])
        assert frame.empty
        assert list(frame.columns) == SEAT_COLUMNS

    def test_provinces_resolve_party_names(self) -> None:
        snapshot = make_standard_snapshot()
        provinces = AreaAggregationService().analyze_provinces(snapshot)
        frame = ElectionTablePresenter().provinces_to_dataframe(
            provinces, {p.id: p.name for p in snapshot.parties}
        )
        assert frame.loc[0, "dominant_party"] == "ก้าวไกล"

    def test_party_stats(self) -> None:
        stats = PartyStatsService().compute_party_stats(make_standard_snapshot())
        frame = ElectionTablePresenter(raw=True).party_stats_to_dataframe(stats)
        assert frame["total_seats"].tolist() == [2, 1, 0]

    def test_trends_show_change(self) -> None:
        result = ElectionTrendService().analyze_trends(
            MultiYearData(
                years=(
                    to_election_year(make_standard_snapshot(2562)),
                    to_election_year(make_standard_snapshot(2566)),
                )
            )
        )
        assert isinstance(result, TrendAnalysis)
        frame = ElectionTablePresenter().trends_to_dataframe(
            result.years, result.party_trends
        )
        assert list(frame.columns) == ["id", "party", "2562", "2566"]
        first = frame.iloc[0]
        assert first["2562"] == 332
        assert first["2566"] == "2 (-330)"

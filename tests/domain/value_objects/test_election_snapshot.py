"""選挙スナップショット関連の値オブジェクトのテスト."""

from src.domain.value_objects.election_snapshot import (
    AreaTurnout,
    ElectionYear,
    MultiYearData,
)
from src.domain.value_objects.filter_options import CandidateStatus, FilterOptions
from src.domain.value_objects.seat_analysis import SeatCategory
from tests.fixtures.election_factories import make_snapshot, make_standard_snapshot


class TestElectionSnapshot:
    def test_lookup_tables(self) -> None:
        snapshot = make_standard_snapshot()
        assert snapshot.province_by_id()[50].name == "เชียงใหม่"
        assert snapshot.region_by_id()[2].name == "ภาคกลาง"
        assert snapshot.constituency_by_id()[1002].area_number == 2
        assert snapshot.party_by_id()[3].name == "ภูมิใจไทย"

    def test_nationwide_turnout(self) -> None:
        assert make_standard_snapshot().nationwide_turnout == AreaTurnout(
            total_votes=300_000, percent_voter=75.5
        )
        assert make_snapshot().nationwide_turnout is None


class TestMultiYearData:
    def test_years_sorted_and_current_year(self) -> None:
        years = tuple(
            ElectionYear(year=y, label=str(y), snapshot=make_snapshot(year=y))
            for y in (2566, 2554, 2562)
        )
        data = MultiYearData(years=years)
        assert [y.year for y in data.years] == [2554, 2562, 2566]
        assert data.current_year == 2566


class TestSeatCategory:
    def test_label_and_color(self) -> None:
        assert SeatCategory.SAFE.label == "ชนะแน่นอน"
        assert SeatCategory.LOST.color == "#6b7280"


class TestFilterOptions:
    def test_default_has_no_active_filters(self) -> None:
        assert FilterOptions().active_filter_count == 0

    def test_active_filter_count(self) -> None:
        options = FilterOptions(
            search_query="abc",
            party_ids=frozenset({1, 2}),
            status=CandidateStatus.WINNER,
            seat_category=SeatCategory.SAFE,
        )
        assert options.active_filter_count == 5

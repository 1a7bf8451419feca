"""PartyStatsServiceのテスト."""

import pytest

from src.domain.services.party_stats_service import (
    PartyStatsService,
    approximate_party_list_seats,
    method_for_year,
)
from src.domain.value_objects.election_snapshot import ReportedPartyResult
from src.domain.value_objects.party_stats import PartyListMethod
from tests.fixtures.election_factories import (
    make_candidate,
    make_snapshot,
    make_standard_snapshot,
)


@pytest.fixture
def service() -> PartyStatsService:
    return PartyStatsService()


class TestMethodForYear:
    """method_for_yearのテスト."""

    def test_reported_results_take_priority(self) -> None:
        assert method_for_year(2562, True) is PartyListMethod.REPORTED

    def test_2562_uses_approximation(self) -> None:
        assert method_for_year(2562) is PartyListMethod.MMA_APPROXIMATION

    def test_other_years_have_no_party_list(self) -> None:
        assert method_for_year(2566) is PartyListMethod.NONE


class TestApproximatePartyListSeats:
    """approximate_party_list_seatsのテスト."""

    def test_theoretical_minus_constituency(self) -> None:
        # 199,000 / (300,000 / 500) = 331.67 → 332
        assert approximate_party_list_seats(199_000, 300_000, 2, 500) == 330

    def test_half_rounds_up(self) -> None:
        # 150 / (1,000 / 10) = 1.5 → 2
        assert approximate_party_list_seats(150, 1_000, 0, 10) == 2

    def test_never_negative(self) -> None:
        assert approximate_party_list_seats(100, 1_000_000, 50, 500) == 0

    def test_zero_total_votes(self) -> None:
        assert approximate_party_list_seats(0, 0, 0, 500) == 0


class TestComputePartyStats:
    """compute_party_statsのテスト."""

    def test_constituency_only(self, service: PartyStatsService) -> None:
        stats = service.compute_party_stats(make_standard_snapshot(2566))

        assert [s.party_id for s in stats] == [1, 2, 3]
        first = stats[0]
        assert first.party_name == "ก้าวไกล"
        assert first.total_votes == 199_000
        assert first.constituency_seats_won == 2
        assert first.party_list_seats_won == 0
        assert first.total_seats == 2
        assert stats[2].total_votes == 10_000
        assert stats[2].total_seats == 0

    def test_mma_approximation_for_2562(self, service: PartyStatsService) -> None:
        stats = service.compute_party_stats(make_standard_snapshot(2562))
        by_id = {s.party_id: s for s in stats}

        assert by_id[1].party_list_seats_won == 330
        assert by_id[2].party_list_seats_won == 151
        assert by_id[3].party_list_seats_won == 17
        assert [s.party_id for s in stats] == [1, 2, 3]

    def test_total_seats_parameter(self) -> None:
        service = PartyStatsService(total_seats=100)
        stats = service.compute_party_stats(make_standard_snapshot(2562))
        by_id = {s.party_id: s for s in stats}
        # 199,000 / 3,000 = 66.3 → 66
        assert by_id[1].total_seats == 66

    def test_mma_excludes_unresolved_party_votes(self) -> None:
        # 政党ID 0（未登録政党）と存在しない政党99の得票は分母に入らない
        snapshot = make_snapshot(
            [
                make_candidate(1, 1001, 1, 600),
                make_candidate(2, 1001, 0, 300),
                make_candidate(3, 1002, 99, 100),
            ],
            year=2562,
        )
        stats = PartyStatsService(total_seats=10).compute_party_stats(snapshot)
        by_id = {s.party_id: s for s in stats}

        # 600 / (600 / 10) = 10 → 区1議席を引いて9
        assert by_id[1].constituency_seats_won == 1
        assert by_id[1].party_list_seats_won == 9
        assert set(by_id) == {1}

    def test_reported_results(self, service: PartyStatsService) -> None:
        snapshot = make_snapshot(
            make_standard_snapshot().candidates,
            reported=[ReportedPartyResult(party_id=2, party_list_seats=39)],
        )
        stats = service.compute_party_stats(snapshot)
        by_id = {s.party_id: s for s in stats}

        assert by_id[2].party_list_seats_won == 39
        assert by_id[1].party_list_seats_won == 0
        assert [s.party_id for s in stats] == [2, 1, 3]

    def test_explicit_method_overrides_year(self, service: PartyStatsService) -> None:
        stats = service.compute_party_stats(
            make_standard_snapshot(2562), method=PartyListMethod.NONE
        )
        assert all(s.party_list_seats_won == 0 for s in stats)

    def test_party_without_votes_or_seats_is_omitted(
        self, service: PartyStatsService
    ) -> None:
        snapshot = make_snapshot([make_candidate(1, 1001, 1, 100)])
        stats = service.compute_party_stats(snapshot)
        assert [s.party_id for s in stats] == [1]

    def test_zero_vote_winner_does_not_take_seat(
        self, service: PartyStatsService
    ) -> None:
        snapshot = make_snapshot(
            [
                make_candidate(1, 1001, 1, 0),
                make_candidate(2, 1001, 2, 0),
                make_candidate(3, 1002, 2, 10),
            ]
        )
        stats = service.compute_party_stats(snapshot)
        assert [(s.party_id, s.total_seats) for s in stats] == [(2, 1)]

    def test_equal_seats_ordered_by_party_id(self, service: PartyStatsService) -> None:
        snapshot = make_snapshot(
            [make_candidate(1, 1001, 3, 100), make_candidate(2, 1002, 2, 100)]
        )
        stats = service.compute_party_stats(snapshot)
        assert [s.party_id for s in stats] == [2, 3]

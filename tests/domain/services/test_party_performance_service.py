"""PartyPerformanceServiceのテスト."""

import pytest

from src.domain.services.party_performance_service import (
    PartyPerformanceService,
    pick_best_province,
)
from src.domain.value_objects.party_performance import ProvincePerformance
from tests.fixtures.election_factories import make_standard_snapshot


def _make_province(
    province_id: int, seats: int, candidates: int, votes: int = 1_000
) -> ProvincePerformance:
    return ProvincePerformance(
        province_id=province_id,
        province_name=f"จังหวัด {province_id}",
        votes=votes,
        seats=seats,
        candidates=candidates,
    )


@pytest.fixture
def service() -> PartyPerformanceService:
    return PartyPerformanceService()


class TestPickBestProvince:
    """pick_best_provinceのテスト."""

    def test_requires_two_candidates(self) -> None:
        assert pick_best_province([_make_province(1, 1, 1)]) is None

    def test_highest_win_rate(self) -> None:
        best = pick_best_province([_make_province(1, 1, 2), _make_province(2, 3, 3)])
        assert best is not None
        assert best.province_id == 2

    def test_tie_prefers_more_votes_then_lower_id(self) -> None:
        best = pick_best_province(
            [
                _make_province(3, 1, 2, votes=500),
                _make_province(2, 1, 2, votes=900),
                _make_province(1, 1, 2, votes=900),
            ]
        )
        assert best is not None
        assert best.province_id == 1


class TestAnalyzePartyPerformance:
    """analyze_party_performanceのテスト."""

    def test_unknown_party(self, service: PartyPerformanceService) -> None:
        assert service.analyze_party_performance(make_standard_snapshot(), 99) is None

    def test_summary(self, service: PartyPerformanceService) -> None:
        performance = service.analyze_party_performance(make_standard_snapshot(), 1)
        assert performance is not None

        assert performance.party_name == "ก้าวไกล"
        assert performance.total_candidates == 3
        assert performance.winners == 2
        assert performance.losers == 1
        assert performance.total_votes == 199_000
        assert performance.average_votes == pytest.approx(199_000 / 3)
        assert performance.win_rate == pytest.approx(200 / 3)
        assert performance.average_winning_margin == pytest.approx(50.0)
        assert performance.seats_won == 2
        assert performance.safe_seats == 1
        assert performance.marginal_seats == 1
        assert performance.competitive_seats == 0

    def test_provinces(self, service: PartyPerformanceService) -> None:
        performance = service.analyze_party_performance(make_standard_snapshot(), 1)
        assert performance is not None

        assert [p.province_id for p in performance.top_provinces] == [10, 50]
        bangkok = performance.top_provinces[0]
        assert (bangkok.votes, bangkok.seats, bangkok.candidates) == (109_000, 1, 2)
        assert performance.best_province is not None
        assert performance.best_province.province_id == 10
        assert performance.best_province.win_rate == pytest.approx(50.0)

    def test_regional_strength_follows_region_order(
        self, service: PartyPerformanceService
    ) -> None:
        performance = service.analyze_party_performance(make_standard_snapshot(), 1)
        assert performance is not None
        strength = [(r.region_id, r.votes, r.seats) for r in performance.regional_strength]
        assert strength == [(1, 90_000, 1), (2, 109_000, 1)]

    def test_top_candidates_by_votes(self, service: PartyPerformanceService) -> None:
        performance = service.analyze_party_performance(make_standard_snapshot(), 1)
        assert performance is not None
        assert [c.id for c in performance.top_candidates] == [501, 101, 202]

    def test_party_without_wins(self, service: PartyPerformanceService) -> None:
        performance = service.analyze_party_performance(make_standard_snapshot(), 3)
        assert performance is not None
        assert performance.winners == 0
        assert performance.win_rate == 0.0
        assert performance.average_winning_margin == 0.0
        assert performance.best_province is None
        assert performance.seats_won == 0

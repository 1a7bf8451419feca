"""CandidateFilterServiceのテスト."""

import pytest

from src.domain.services.candidate_analysis_service import CandidateAnalysisService
from src.domain.services.candidate_filter_service import CandidateFilterService
from src.domain.value_objects.candidate_analysis import CandidateAnalysis
from src.domain.value_objects.filter_options import CandidateStatus, FilterOptions
from src.domain.value_objects.seat_analysis import SeatCategory
from tests.fixtures.election_factories import (
    make_candidate,
    make_snapshot,
    make_standard_snapshot,
)


@pytest.fixture
def service() -> CandidateFilterService:
    return CandidateFilterService()


@pytest.fixture
def analyses() -> list[CandidateAnalysis]:
    return CandidateAnalysisService().analyze_candidates(make_standard_snapshot())


def _ids(results: list[CandidateAnalysis]) -> list[int]:
    return [a.id for a in results]


class TestFilterCandidates:
    """filter_candidatesのテスト."""

    def test_empty_options_return_everything(
        self, service: CandidateFilterService, analyses: list[CandidateAnalysis]
    ) -> None:
        assert service.filter_candidates(analyses, FilterOptions()) == analyses

    def test_query_matches_province_name(
        self, service: CandidateFilterService, analyses: list[CandidateAnalysis]
    ) -> None:
        results = service.filter_candidates(
            analyses, FilterOptions(search_query="เชียง")
        )
        assert _ids(results) == [501, 502]

    def test_query_is_case_insensitive(self, service: CandidateFilterService) -> None:
        snapshot = make_snapshot(
            [
                make_candidate(1, 1001, 1, 100, full_name="Somchai Jaidee"),
                make_candidate(2, 1001, 2, 50, full_name="Malee Rakthai"),
            ]
        )
        analyses = CandidateAnalysisService().analyze_candidates(snapshot)
        results = service.filter_candidates(
            analyses, FilterOptions(search_query="  SOMCHAI ")
        )
        assert _ids(results) == [1]

    def test_party_filter(
        self, service: CandidateFilterService, analyses: list[CandidateAnalysis]
    ) -> None:
        results = service.filter_candidates(
            analyses, FilterOptions(party_ids=frozenset({2}))
        )
        assert _ids(results) == [102, 201]

    def test_region_filter(
        self, service: CandidateFilterService, analyses: list[CandidateAnalysis]
    ) -> None:
        results = service.filter_candidates(
            analyses, FilterOptions(region_ids=frozenset({1}))
        )
        assert _ids(results) == [501, 502]

    def test_province_filter(
        self, service: CandidateFilterService, analyses: list[CandidateAnalysis]
    ) -> None:
        results = service.filter_candidates(
            analyses, FilterOptions(province_ids=frozenset({10}))
        )
        assert _ids(results) == [101, 102, 201, 202]

    def test_score_range_is_inclusive(
        self, service: CandidateFilterService, analyses: list[CandidateAnalysis]
    ) -> None:
        results = service.filter_candidates(
            analyses, FilterOptions(score_range=(40_000, 60_000))
        )
        assert _ids(results) == [101, 102, 201, 202]

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (CandidateStatus.WINNER, [101, 201, 501]),
            (CandidateStatus.LOSER, [102, 202, 502]),
            (CandidateStatus.COMPETITIVE, [201, 202]),
        ],
    )
    def test_status(
        self,
        service: CandidateFilterService,
        analyses: list[CandidateAnalysis],
        status: CandidateStatus,
        expected: list[int],
    ) -> None:
        results = service.filter_candidates(analyses, FilterOptions(status=status))
        assert _ids(results) == expected

    def test_seat_category(
        self, service: CandidateFilterService, analyses: list[CandidateAnalysis]
    ) -> None:
        results = service.filter_candidates(
            analyses, FilterOptions(seat_category=SeatCategory.SAFE)
        )
        assert _ids(results) == [501, 502]

    def test_conditions_are_combined(
        self, service: CandidateFilterService, analyses: list[CandidateAnalysis]
    ) -> None:
        options = FilterOptions(
            party_ids=frozenset({1}), status=CandidateStatus.WINNER, search_query="กรุง"
        )
        assert _ids(service.filter_candidates(analyses, options)) == [101]

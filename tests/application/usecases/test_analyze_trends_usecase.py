"""AnalyzeTrendsUseCaseのテスト."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.application.dtos.election_analysis_dto import AnalyzeTrendsInputDto
from src.application.usecases.analyze_trends_usecase import (
    AnalyzeTrendsUseCase,
    to_election_year,
)
from src.domain.value_objects.party_trend import InsufficientTrendData, TrendAnalysis
from src.infrastructure.exceptions import DataSourceError
from tests.fixtures.election_factories import make_standard_snapshot


def _make_source(year: int) -> AsyncMock:
    source = AsyncMock()
    source.produce_snapshot.return_value = make_standard_snapshot(year)
    return source


class TestToElectionYear:
    def test_known_election_date(self) -> None:
        election_year = to_election_year(make_standard_snapshot(2566))
        assert election_year.label == "2566"
        assert election_year.election_date == date(2023, 5, 14)

    def test_unknown_election_date(self) -> None:
        assert to_election_year(make_standard_snapshot(2554)).election_date is None


class TestAnalyzeTrendsUseCase:
    """executeのテスト."""

    @pytest.mark.asyncio
    async def test_two_years(self) -> None:
        requested: list[int] = []

        def source_for_year(year: int) -> AsyncMock:
            requested.append(year)
            return _make_source(year)

        output = await AnalyzeTrendsUseCase(source_for_year).execute(
            AnalyzeTrendsInputDto(years=[2566, 2562, 2566])
        )

        assert requested == [2562, 2566]
        assert output.years_loaded == [2562, 2566]
        assert output.is_sufficient is True
        assert isinstance(output.result, TrendAnalysis)
        assert [y.year for y in output.result.years] == [2562, 2566]

    @pytest.mark.asyncio
    async def test_limit(self) -> None:
        output = await AnalyzeTrendsUseCase(_make_source).execute(
            AnalyzeTrendsInputDto(years=[2562, 2566], limit=1)
        )
        assert isinstance(output.result, TrendAnalysis)
        assert len(output.result.party_trends) == 1

    @pytest.mark.asyncio
    async def test_single_year_is_insufficient(self) -> None:
        output = await AnalyzeTrendsUseCase(_make_source).execute(
            AnalyzeTrendsInputDto(years=[2566])
        )
        assert output.is_sufficient is False
        assert isinstance(output.result, InsufficientTrendData)

    @pytest.mark.asyncio
    async def test_source_error_propagates(self) -> None:
        def source_for_year(year: int) -> AsyncMock:
            source = AsyncMock()
            source.produce_snapshot.side_effect = DataSourceError("取得に失敗")
            return source

        with pytest.raises(DataSourceError):
            await AnalyzeTrendsUseCase(source_for_year).execute(
                AnalyzeTrendsInputDto(years=[2562, 2566])
            )

"""AnalyzeElectionUseCaseのテスト."""

from unittest.mock import AsyncMock

import pytest

from src.application.dtos.election_analysis_dto import AnalyzeElectionInputDto
from src.application.usecases.analyze_election_usecase import AnalyzeElectionUseCase
from src.domain.value_objects.party_stats import PartyListMethod
from src.infrastructure.exceptions import DataSourceError
from tests.fixtures.election_factories import make_standard_snapshot


def _make_source(year: int = 2566) -> AsyncMock:
    source = AsyncMock()
    source.produce_snapshot.return_value = make_standard_snapshot(year)
    return source


class TestAnalyzeElectionUseCase:
    """executeのテスト."""

    @pytest.mark.asyncio
    async def test_produces_all_views(self) -> None:
        source = _make_source()
        output = await AnalyzeElectionUseCase(source).execute()

        source.produce_snapshot.assert_awaited_once()
        assert output.year == 2566
        assert len(output.candidates) == 6
        assert [s.id for s in output.seats.all] == [1001, 1002, 5001]
        assert [p.id for p in output.provinces] == [10, 50]
        assert [r.id for r in output.regions] == [1, 2]
        assert [s.party_id for s in output.party_stats] == [1, 2, 3]
        assert output.overview.total_seats == 3
        assert output.party_list_method is PartyListMethod.NONE

    @pytest.mark.asyncio
    async def test_2562_uses_approximation(self) -> None:
        output = await AnalyzeElectionUseCase(_make_source(2562)).execute()
        assert output.party_list_method is PartyListMethod.MMA_APPROXIMATION
        assert output.party_stats[0].party_list_seats_won == 330

    @pytest.mark.asyncio
    async def test_total_seats_is_configurable(self) -> None:
        usecase = AnalyzeElectionUseCase(_make_source(2562), party_list_total_seats=100)
        output = await usecase.execute()
        assert output.party_stats[0].total_seats == 66

    @pytest.mark.asyncio
    async def test_explicit_method(self) -> None:
        output = await AnalyzeElectionUseCase(_make_source(2562)).execute(
            AnalyzeElectionInputDto(party_list_method=PartyListMethod.NONE)
        )
        assert output.party_list_method is PartyListMethod.NONE
        assert all(s.party_list_seats_won == 0 for s in output.party_stats)

    @pytest.mark.asyncio
    async def test_source_error_propagates(self) -> None:
        source = AsyncMock()
        source.produce_snapshot.side_effect = DataSourceError("取得に失敗")
        with pytest.raises(DataSourceError):
            await AnalyzeElectionUseCase(source).execute()

"""warroomコマンド共通の処理."""

import asyncio

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import click
import pandas as pd

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.dtos.election_analysis_dto import (
    AnalyzeElectionInputDto,
    AnalyzeTrendsInputDto,
    ElectionAnalysisOutputDto,
    TrendAnalysisOutputDto,
)
from src.application.usecases.analyze_election_usecase import AnalyzeElectionUseCase
from src.application.usecases.analyze_trends_usecase import AnalyzeTrendsUseCase
from src.domain.services.interfaces.election_snapshot_source import (
    IElectionSnapshotSource,
)
from src.domain.value_objects.party_stats import PartyListMethod
from src.infrastructure.config.async_database import async_db, get_async_session
from src.infrastructure.config.settings import get_settings
from src.interfaces.factories.snapshot_source_factory import (
    SnapshotSourceFactory,
    SourceKind,
    resolve_source_kind,
)


DEFAULT_YEAR = 2566


def source_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """--year/--source/--data-dirオプションを付ける."""
    func = click.option(
        "--data-dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="CSVデータのディレクトリ（省略時は設定値）",
    )(func)
    func = click.option(
        "--source",
        type=click.Choice([k.value for k in SourceKind]),
        default=SourceKind.AUTO.value,
        show_default=True,
        help="データソース（autoは年から自動選択）",
    )(func)
    func = click.option(
        "--year", type=int, default=DEFAULT_YEAR, show_default=True, help="選挙年（仏暦）"
    )(func)
    return func


@asynccontextmanager
async def database_session() -> AsyncIterator[AsyncSession]:
    """セッションを開き、終了時に現在のループのエンジンを破棄する.

    コマンドごとにasyncio.runで新しいループを作るため、エンジンは持ち越さない。
    """
    try:
        async with get_async_session() as session:
            yield session
    finally:
        await async_db.dispose()


async def analyze(
    year: int,
    source: str,
    data_dir: Path | None = None,
    party_list_method: PartyListMethod | None = None,
) -> ElectionAnalysisOutputDto:
    """データソースを作って1回の選挙を分析する."""
    settings = get_settings()
    kind = resolve_source_kind(source, year)
    input_dto = AnalyzeElectionInputDto(party_list_method=party_list_method)

    async def _run(
        snapshot_source: IElectionSnapshotSource,
    ) -> ElectionAnalysisOutputDto:
        usecase = AnalyzeElectionUseCase(
            snapshot_source, party_list_total_seats=settings.party_list_total_seats
        )
        return await usecase.execute(input_dto)

    if kind is SourceKind.DB:
        async with database_session() as session:
            return await _run(
                SnapshotSourceFactory.create(
                    kind, year, session=session, settings=settings
                )
            )
    return await _run(
        SnapshotSourceFactory.create(kind, year, data_dir=data_dir, settings=settings)
    )


def run_analysis(
    year: int,
    source: str,
    data_dir: Path | None = None,
    party_list_method: PartyListMethod | None = None,
) -> ElectionAnalysisOutputDto:
    """analyzeを同期的に実行する."""
    return asyncio.run(analyze(year, source, data_dir, party_list_method))


async def analyze_trends(years: list[int], limit: int | None) -> TrendAnalysisOutputDto:
    """年ごとにデータソースを自動選択してトレンドを分析する.

    データベースが必要な年が含まれる場合のみセッションを開く。
    """
    settings = get_settings()

    async def _run(session: AsyncSession | None) -> TrendAnalysisOutputDto:
        def source_for_year(year: int) -> IElectionSnapshotSource:
            return SnapshotSourceFactory.create(
                SourceKind.AUTO, year, session=session, settings=settings
            )

        usecase = AnalyzeTrendsUseCase(
            source_for_year, party_list_total_seats=settings.party_list_total_seats
        )
        return await usecase.execute(AnalyzeTrendsInputDto(years=years, limit=limit))

    if any(resolve_source_kind(SourceKind.AUTO, y) is SourceKind.DB for y in years):
        async with database_session() as session:
            return await _run(session)
    return await _run(None)


def run_trend_analysis(years: list[int], limit: int | None) -> TrendAnalysisOutputDto:
    """analyze_trendsを同期的に実行する."""
    return asyncio.run(analyze_trends(years, limit))


def echo_frame(frame: pd.DataFrame, empty_message: str = "該当するデータがありません") -> None:
    """DataFrameを表として表示する."""
    if frame.empty:
        click.echo(click.style(empty_message, fg="yellow"))
        return
    click.echo(frame.to_string(index=False))

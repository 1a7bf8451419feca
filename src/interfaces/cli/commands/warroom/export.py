"""分析結果のCSVエクスポートコマンド."""

import logging

from collections.abc import Callable
from pathlib import Path

import click
import pandas as pd

from src.application.dtos.election_analysis_dto import ElectionAnalysisOutputDto
from src.interfaces.cli.base import BaseCommand, with_error_handling
from src.interfaces.cli.commands.warroom._common import run_analysis, source_options
from src.interfaces.cli.presenters.election_table_presenter import (
    ElectionTablePresenter,
)


logger = logging.getLogger(__name__)


def _seats(p: ElectionTablePresenter, r: ElectionAnalysisOutputDto) -> pd.DataFrame:
    return p.seats_to_dataframe(r.seats.all)


def _candidates(
    p: ElectionTablePresenter, r: ElectionAnalysisOutputDto
) -> pd.DataFrame:
    return p.candidates_to_dataframe(r.candidates)


def _provinces(p: ElectionTablePresenter, r: ElectionAnalysisOutputDto) -> pd.DataFrame:
    party_names = {party.id: party.name for party in r.snapshot.parties}
    return p.provinces_to_dataframe(r.provinces, party_names)


def _regions(p: ElectionTablePresenter, r: ElectionAnalysisOutputDto) -> pd.DataFrame:
    return p.regions_to_dataframe(r.regions)


def _parties(p: ElectionTablePresenter, r: ElectionAnalysisOutputDto) -> pd.DataFrame:
    return p.party_stats_to_dataframe(r.party_stats)


EXPORTERS: dict[
    str, Callable[[ElectionTablePresenter, ElectionAnalysisOutputDto], pd.DataFrame]
] = {
    "seats": _seats,
    "candidates": _candidates,
    "provinces": _provinces,
    "regions": _regions,
    "parties": _parties,
}


class ExportCommands(BaseCommand):
    """分析結果をCSVに書き出すコマンド."""

    def get_commands(self) -> list[click.Command]:
        """エクスポート関連のコマンド一覧."""
        return [ExportCommands.export]

    @staticmethod
    @click.command()
    @click.argument("kind", type=click.Choice(list(EXPORTERS)))
    @source_options
    @click.option(
        "--output",
        "-o",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="出力先（省略時は warroom_<kind>_<year>.csv）",
    )
    @with_error_handling
    def export(
        kind: str, year: int, source: str, data_dir: Path | None, output: Path | None
    ):
        """分析結果をCSVファイルに書き出す（数値は書式なし）."""
        result = run_analysis(year, source, data_dir)
        frame = EXPORTERS[kind](ElectionTablePresenter(raw=True), result)

        output = output or Path(f"warroom_{kind}_{result.year}.csv")
        output.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(output, index=False, encoding="utf-8-sig")
        logger.info("Exported %d rows to %s", len(frame), output)
        ExportCommands.success(f"{len(frame)}件を書き出しました: {output}")


def get_export_commands() -> list[click.Command]:
    """エクスポートコマンドを取得する."""
    return ExportCommands().get_commands()

"""候補者の詳細コマンド."""

from pathlib import Path

import click

from src.domain.services.candidate_analysis_service import CandidateAnalysisService
from src.domain.utils.number_format import format_number, format_percent
from src.interfaces.cli.base import BaseCommand, with_error_handling
from src.interfaces.cli.commands.warroom._common import (
    echo_frame,
    run_analysis,
    source_options,
)
from src.interfaces.cli.presenters.election_table_presenter import (
    ElectionTablePresenter,
)


@click.command()
@click.argument("candidate_id", type=int)
@source_options
@with_error_handling
def candidate(candidate_id: int, year: int, source: str, data_dir: Path | None):
    """候補者の成績と同じ選挙区の対立候補を表示する."""
    result = run_analysis(year, source, data_dir)
    target = next((a for a in result.candidates if a.id == candidate_id), None)
    if target is None:
        BaseCommand.error(f"候補者が見つかりません: {candidate_id}", exit_code=1)
        return

    status = "当選" if target.is_winner else f"{target.rank}位"
    click.echo(f"=== {target.full_name} ({target.party_name or '-'}) ===")
    click.echo(f"  選挙区:       {target.province_name or '-'} {target.area_name or '-'}")
    click.echo(f"  結果:         {status}")
    click.echo(
        f"  得票:         {format_number(target.score)} "
        f"({format_percent(target.vote_share)})"
    )
    click.echo(
        f"  得票差:       {format_number(target.margin_votes)} "
        f"({format_percent(target.margin_percent)})"
    )
    click.echo(f"  ポテンシャル: {target.potential_score}")
    click.echo(f"  接戦度指数:   {target.competitive_index}")

    competitors = CandidateAnalysisService().find_competitors(
        result.candidates, candidate_id
    )
    click.echo("\n=== 対立候補 ===")
    echo_frame(
        ElectionTablePresenter().candidates_to_dataframe(competitors),
        empty_message="対立候補はいません",
    )

"""得票スイングのシミュレーションコマンド."""

from pathlib import Path

import click

from src.domain.services.swing_simulation_service import SwingSimulationService
from src.domain.utils.number_format import format_number, format_percent
from src.interfaces.cli.base import BaseCommand, with_error_handling
from src.interfaces.cli.commands.warroom._common import run_analysis, source_options


@click.command()
@click.argument("constituency_id", type=int)
@source_options
@click.option("--swing", type=float, default=0.0, show_default=True, help="増減率（％）")
@click.option("--party", "party_id", type=int, default=None, help="スイングを適用する政党ID")
@with_error_handling
def simulate(
    constituency_id: int,
    year: int,
    source: str,
    data_dir: Path | None,
    swing: float,
    party_id: int | None,
):
    """選挙区の得票を増減させたときの結果を表示する."""
    result = run_analysis(year, source, data_dir)
    simulation = SwingSimulationService().simulate_swing(
        result.snapshot, constituency_id, swing, party_id=party_id
    )
    if simulation is None:
        BaseCommand.error(f"選挙区が見つかりません: {constituency_id}", exit_code=1)
        return

    party_names = {p.id: p.name for p in result.snapshot.parties}
    click.echo(f"=== シミュレーション: 選挙区{constituency_id} スイング{swing:+.1f}% ===")
    for rank, c in enumerate(simulation.candidates, 1):
        click.echo(
            f"  {rank}. {c.full_name} ({party_names.get(c.party_id, '-')}): "
            f"{format_number(c.score)}"
        )
    click.echo(f"\n  総得票数: {format_number(simulation.total_votes)}")
    click.echo(
        f"  得票差:   {format_number(simulation.margin)} "
        f"({format_percent(simulation.margin_percent)})"
    )
    if simulation.winner_changed:
        BaseCommand.warning("  当選者が入れ替わります")

"""選挙概要コマンド."""

from pathlib import Path

import click

from src.domain.utils.number_format import format_number, format_percent
from src.domain.value_objects.party_stats import PartyListMethod
from src.domain.value_objects.seat_analysis import SeatCategory
from src.interfaces.cli.base import with_error_handling
from src.interfaces.cli.commands.warroom._common import (
    echo_frame,
    run_analysis,
    source_options,
)
from src.interfaces.cli.presenters.election_table_presenter import (
    ElectionTablePresenter,
)


@click.command()
@source_options
@click.option(
    "--party-list",
    type=click.Choice([m.value for m in PartyListMethod]),
    default=None,
    help="比例代表議席の求め方（省略時は年とデータから自動選択）",
)
@with_error_handling
def overview(year: int, source: str, data_dir: Path | None, party_list: str | None):
    """選挙全体の概要と政党別議席を表示する."""
    method = PartyListMethod(party_list) if party_list else None
    result = run_analysis(year, source, data_dir, method)
    stats = result.overview

    click.echo(f"=== {result.year}年 選挙概要 ===")
    click.echo(f"  総得票数:   {format_number(stats.total_votes)}")
    click.echo(f"  投票率:     {format_percent(stats.turnout)}")
    click.echo(f"  総議席数:   {format_number(stats.total_seats)}")
    click.echo(f"  候補者数:   {format_number(stats.total_candidates)}")
    click.echo(
        f"  接戦区:     {stats.competitive_count} "
        f"({format_percent(stats.competitive_percent)})"
    )

    click.echo("\n=== 議席上位の政党 ===")
    for index, party in enumerate(stats.top_parties, 1):
        click.echo(f"  {index}. {party.party_name}: {party.seats}議席")

    click.echo("\n=== カテゴリ別議席 ===")
    counts = result.seats.counts()
    for category in SeatCategory:
        click.echo(f"  {category.value:<12} {category.label}: {counts[category]}")

    click.echo(f"\n=== 政党別集計（比例代表: {result.party_list_method.value}） ===")
    echo_frame(ElectionTablePresenter().party_stats_to_dataframe(result.party_stats))

"""議席分析コマンド."""

from pathlib import Path

import click

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
    "--category",
    type=click.Choice([c.value for c in SeatCategory]),
    default=None,
    help="指定したカテゴリの議席のみ表示",
)
@click.option(
    "--sort-by-margin", is_flag=True, help="得票差（％）の小さい順に並べる（接戦順）"
)
@click.option("--limit", type=int, default=None, help="表示件数の上限")
@with_error_handling
def seats(
    year: int,
    source: str,
    data_dir: Path | None,
    category: str | None,
    sort_by_margin: bool,
    limit: int | None,
):
    """選挙区ごとの当選者・次点・得票差・カテゴリを表示する."""
    result = run_analysis(year, source, data_dir)
    selected = (
        result.seats.by_category(SeatCategory(category))
        if category
        else result.seats.all
    )
    if sort_by_margin:
        selected = sorted(selected, key=lambda s: (s.margin_percent, s.id))
    if limit is not None:
        selected = selected[:limit]

    click.echo(f"=== {result.year}年 議席分析 ({len(selected)}件) ===")
    echo_frame(ElectionTablePresenter().seats_to_dataframe(selected))

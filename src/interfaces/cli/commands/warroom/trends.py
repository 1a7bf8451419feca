"""複数年トレンド分析コマンド."""

import click

from src.domain.utils.number_format import format_number
from src.interfaces.cli.base import BaseCommand, with_error_handling
from src.interfaces.cli.commands.warroom._common import echo_frame, run_trend_analysis
from src.interfaces.cli.presenters.election_table_presenter import (
    ElectionTablePresenter,
)


DEFAULT_YEARS = (2562, 2566)


@click.command()
@click.option(
    "--year",
    "years",
    type=int,
    multiple=True,
    default=DEFAULT_YEARS,
    show_default=True,
    help="比較する選挙年（複数指定可）",
)
@click.option("--limit", type=int, default=10, show_default=True, help="表示する政党数")
@with_error_handling
def trends(years: tuple[int, ...], limit: int):
    """選挙年をまたいだ政党の議席推移を表示する."""
    output = run_trend_analysis(list(years), limit)
    if not output.is_sufficient:
        BaseCommand.warning(output.result.message)
        return

    result = output.result
    click.echo("=== 年別集計 ===")
    for summary in result.years:
        click.echo(
            f"  {summary.label}: 総得票 {format_number(summary.total_votes)} "
            f"投票率 {summary.turnout:.1f}% 議席 {summary.total_seats}"
        )

    insights = result.insights
    click.echo("\n=== 直近2回の比較 ===")
    click.echo(f"  投票率: {insights.turnout_change:+.1f}pt")
    click.echo(f"  総得票: {insights.vote_change:+,}")
    if insights.biggest_gainer:
        gainer = insights.biggest_gainer
        click.echo(f"  最大の議席増: {gainer.party_name} ({gainer.seat_change:+d})")
    if insights.biggest_loser:
        loser = insights.biggest_loser
        click.echo(f"  最大の議席減: {loser.party_name} ({loser.seat_change:+d})")

    click.echo("\n=== 政党別の議席推移 ===")
    echo_frame(
        ElectionTablePresenter().trends_to_dataframe(result.years, result.party_trends)
    )

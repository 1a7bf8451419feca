"""政党の実績分析コマンド."""

from pathlib import Path

import click

from src.domain.services.party_performance_service import PartyPerformanceService
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
@click.argument("party_id", type=int)
@source_options
@with_error_handling
def party(party_id: int, year: int, source: str, data_dir: Path | None):
    """政党の当選率・県別成績・地方別の強さを表示する."""
    result = run_analysis(year, source, data_dir)
    performance = PartyPerformanceService().analyze_party_performance(
        result.snapshot, party_id, analyses=result.candidates, seats=result.seats.all
    )
    if performance is None:
        BaseCommand.error(f"政党が見つかりません: {party_id}", exit_code=1)
        return

    click.echo(f"=== {performance.party_name} ({result.year}年) ===")
    click.echo(f"  候補者数:       {performance.total_candidates}")
    click.echo(f"  当選 / 落選:    {performance.winners} / {performance.losers}")
    click.echo(f"  当選率:         {format_percent(performance.win_rate)}")
    click.echo(f"  総得票数:       {format_number(performance.total_votes)}")
    click.echo(f"  平均得票数:     {format_number(round(performance.average_votes))}")
    click.echo(f"  平均得票差:     {format_percent(performance.average_winning_margin)}")
    click.echo(
        f"  議席内訳:       safe {performance.safe_seats} / "
        f"marginal {performance.marginal_seats} / "
        f"competitive {performance.competitive_seats}"
    )

    best = performance.best_province
    if best is not None:
        click.echo(
            f"  最も強い県:     {best.province_name} "
            f"({best.seats}/{best.candidates}, {format_percent(best.win_rate)})"
        )

    click.echo("\n=== 得票上位の県 ===")
    for province in performance.top_provinces:
        click.echo(
            f"  {province.province_name}: {format_number(province.votes)}票 "
            f"{province.seats}議席 / {province.candidates}人"
        )

    click.echo("\n=== 地方別 ===")
    for region in performance.regional_strength:
        click.echo(
            f"  {region.region_name}: {format_number(region.votes)}票 "
            f"{region.seats}議席 / {region.candidates}人"
        )

    click.echo("\n=== 得票上位の候補者 ===")
    presenter = ElectionTablePresenter()
    echo_frame(presenter.candidates_to_dataframe(performance.top_candidates))

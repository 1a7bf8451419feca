"""県・地方別集計コマンド."""

from pathlib import Path

import click

from src.domain.services.area_aggregation_service import (
    PROVINCE_COMPETITIVE,
    REGION_COMPETITIVE,
    AreaAggregationService,
)
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


def competitive_option(func):
    """--competitiveオプションを付ける."""
    return click.option(
        "--competitive",
        "competitive",
        type=click.Choice([c.value for c in SeatCategory]),
        multiple=True,
        help="接戦議席として数えるカテゴリ（複数指定可、省略時はビューの既定値）",
    )(func)


def _categories(
    values: tuple[str, ...], default: frozenset[SeatCategory]
) -> frozenset[SeatCategory]:
    return frozenset(SeatCategory(v) for v in values) if values else default


@click.command()
@source_options
@competitive_option
@with_error_handling
def provinces(
    year: int, source: str, data_dir: Path | None, competitive: tuple[str, ...]
):
    """県ごとの議席・得票・優勢政党を表示する."""
    result = run_analysis(year, source, data_dir)
    analyses = result.provinces
    if competitive:
        analyses = AreaAggregationService().analyze_provinces(
            result.snapshot,
            _categories(competitive, PROVINCE_COMPETITIVE),
            seats=result.seats.all,
        )
    party_names = {p.id: p.name for p in result.snapshot.parties}

    click.echo(f"=== {result.year}年 県別集計 ===")
    echo_frame(ElectionTablePresenter().provinces_to_dataframe(analyses, party_names))


@click.command()
@source_options
@competitive_option
@with_error_handling
def regions(
    year: int, source: str, data_dir: Path | None, competitive: tuple[str, ...]
):
    """地方ごとの議席・優勢政党・上位政党を表示する."""
    result = run_analysis(year, source, data_dir)
    analyses = result.regions
    if competitive:
        analyses = AreaAggregationService().analyze_regions(
            result.snapshot,
            _categories(competitive, REGION_COMPETITIVE),
            seats=result.seats.all,
        )

    click.echo(f"=== {result.year}年 地方別集計 ===")
    echo_frame(ElectionTablePresenter().regions_to_dataframe(analyses))

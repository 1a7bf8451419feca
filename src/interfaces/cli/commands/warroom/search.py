"""候補者検索コマンド."""

import sys

from pathlib import Path

import click

from src.domain.services.candidate_filter_service import CandidateFilterService
from src.domain.value_objects.filter_options import CandidateStatus, FilterOptions
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
@click.option("--query", "-q", default="", help="氏名・政党・選挙区・県名の部分一致")
@click.option("--party", "party_ids", type=int, multiple=True, help="政党ID（複数指定可）")
@click.option(
    "--province", "province_ids", type=int, multiple=True, help="県ID（複数指定可）"
)
@click.option("--region", "region_ids", type=int, multiple=True, help="地方ID（複数指定可）")
@click.option("--min-score", type=int, default=None, help="得票数の下限")
@click.option("--max-score", type=int, default=None, help="得票数の上限")
@click.option(
    "--status",
    type=click.Choice([s.value for s in CandidateStatus]),
    default=CandidateStatus.ALL.value,
    show_default=True,
    help="当落による絞り込み（competitiveは得票差10％未満）",
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in SeatCategory]),
    default=None,
    help="選挙区のカテゴリ",
)
@click.option("--limit", type=int, default=50, show_default=True, help="表示件数の上限")
@with_error_handling
def search(
    year: int,
    source: str,
    data_dir: Path | None,
    query: str,
    party_ids: tuple[int, ...],
    province_ids: tuple[int, ...],
    region_ids: tuple[int, ...],
    min_score: int | None,
    max_score: int | None,
    status: str,
    category: str | None,
    limit: int,
):
    """条件に合う候補者を検索する."""
    score_range = None
    if min_score is not None or max_score is not None:
        score_range = (
            min_score or 0,
            max_score if max_score is not None else sys.maxsize,
        )

    options = FilterOptions(
        search_query=query,
        party_ids=frozenset(party_ids),
        province_ids=frozenset(province_ids),
        region_ids=frozenset(region_ids),
        score_range=score_range,
        status=CandidateStatus(status),
        seat_category=SeatCategory(category) if category else None,
    )

    result = run_analysis(year, source, data_dir)
    matches = CandidateFilterService().filter_candidates(
        result.candidates, options, seats=result.seats.all
    )

    click.echo(
        f"=== 検索結果: {len(matches)}人（条件{options.active_filter_count}件） ==="
    )
    echo_frame(ElectionTablePresenter().candidates_to_dataframe(matches[:limit]))

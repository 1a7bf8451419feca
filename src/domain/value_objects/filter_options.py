"""候補者検索条件の値オブジェクト — Domain layer."""

from dataclasses import dataclass
from enum import StrEnum

from src.domain.value_objects.seat_analysis import SeatCategory


class CandidateStatus(StrEnum):
    """当落による絞り込み."""

    ALL = "all"
    WINNER = "winner"
    LOSER = "loser"
    # 得票差10％未満
    COMPETITIVE = "competitive"


@dataclass(frozen=True)
class FilterOptions:
    """候補者の絞り込み条件. 空の条件は「絞り込まない」を意味する."""

    search_query: str = ""
    party_ids: frozenset[int] = frozenset()
    province_ids: frozenset[int] = frozenset()
    region_ids: frozenset[int] = frozenset()
    score_range: tuple[int, int] | None = None
    status: CandidateStatus = CandidateStatus.ALL
    seat_category: SeatCategory | None = None

    @property
    def active_filter_count(self) -> int:
        """有効な条件の数."""
        return (
            (1 if self.search_query.strip() else 0)
            + len(self.party_ids)
            + len(self.province_ids)
            + len(self.region_ids)
            + (1 if self.status is not CandidateStatus.ALL else 0)
            + (1 if self.seat_category is not None else 0)
        )

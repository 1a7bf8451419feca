"""県・地方単位の集計ドメインサービス.

議席分析を県または地方ごとにまとめ、得票・議席・政党内訳・
優勢政党・接戦議席数を求める。県と地方は同じ集計関数を使い、
「接戦」とみなすカテゴリだけを引数で切り替える。
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from src.domain.entities import DEFAULT_PARTY_COLOR, Party
from src.domain.services.seat_classification_service import (
    UNKNOWN_LABEL,
    SeatClassificationService,
)
from src.domain.utils.vote_math import safe_percent
from src.domain.value_objects.area_analysis import (
    PartySeatShare,
    ProvinceAnalysis,
    RegionAnalysis,
)
from src.domain.value_objects.election_snapshot import ElectionSnapshot
from src.domain.value_objects.seat_analysis import SeatAnalysis, SeatCategory


# 県ビューの接戦議席: competitive + marginal
PROVINCE_COMPETITIVE: frozenset[SeatCategory] = frozenset(
    {SeatCategory.COMPETITIVE, SeatCategory.MARGINAL}
)
# 地方ビューの接戦議席: competitive + lost
REGION_COMPETITIVE: frozenset[SeatCategory] = frozenset(
    {SeatCategory.COMPETITIVE, SeatCategory.LOST}
)

TOP_PARTY_COUNT = 3
UNKNOWN_PARTY_NAME = "Unknown"


@dataclass
class AreaTotals:
    """集計途中の値."""

    total_votes: int = 0
    total_seats: int = 0
    party_breakdown: dict[int, int] = field(default_factory=dict)
    party_votes: dict[int, int] = field(default_factory=dict)
    competitive_seats: int = 0

    def add(self, seat: SeatAnalysis, is_competitive: bool) -> None:
        """議席を1つ加算する."""
        party_id = seat.winner.party_id
        self.total_votes += seat.total_votes
        self.total_seats += 1
        self.party_breakdown[party_id] = self.party_breakdown.get(party_id, 0) + 1
        self.party_votes[party_id] = (
            self.party_votes.get(party_id, 0) + seat.winner.score
        )
        if is_competitive:
            self.competitive_seats += 1


def aggregate_seats(
    seats: Iterable[SeatAnalysis],
    key: Callable[[SeatAnalysis], int | None],
    competitive_categories: frozenset[SeatCategory],
) -> dict[int, AreaTotals]:
    """議席をkeyでグループ化して集計する. keyがNoneの議席は除外する.

    Args:
        seats: 議席分析
        key: 議席から集計単位のIDを取り出す関数
        competitive_categories: 接戦議席として数えるカテゴリ

    Returns:
        集計単位ID → 集計値
    """
    totals: dict[int, AreaTotals] = {}
    for seat in seats:
        area_id = key(seat)
        if area_id is None:
            continue
        totals.setdefault(area_id, AreaTotals()).add(
            seat, seat.category in competitive_categories
        )
    return totals


def rank_parties(party_breakdown: dict[int, int]) -> list[tuple[int, int]]:
    """(政党ID, 議席数)を議席数の降順、同数なら政党IDの昇順で返す."""
    return sorted(party_breakdown.items(), key=lambda item: (-item[1], item[0]))


def find_dominant_party(party_breakdown: dict[int, int]) -> int | None:
    """最多議席の政党ID. 同数なら最小ID、内訳が空ならNone."""
    ranked = rank_parties(party_breakdown)
    return ranked[0][0] if ranked else None


def top_parties(
    totals: AreaTotals, parties: dict[int, Party], limit: int = TOP_PARTY_COUNT
) -> list[PartySeatShare]:
    """議席上位の政党を返す. 並び順はfind_dominant_partyと同じ."""
    shares: list[PartySeatShare] = []
    for party_id, seats in rank_parties(totals.party_breakdown)[:limit]:
        party = parties.get(party_id)
        shares.append(
            PartySeatShare(
                party_id=party_id,
                party_name=party.name if party else UNKNOWN_PARTY_NAME,
                party_color=party.color if party else DEFAULT_PARTY_COLOR,
                seats=seats,
                votes=totals.party_votes.get(party_id, 0),
            )
        )
    return shares


class AreaAggregationService:
    """県・地方単位の集計を行うドメインサービス."""

    def __init__(self, seat_service: SeatClassificationService | None = None):
        """初期化する.

        Args:
            seat_service: 議席分類サービス（省略時は既定の実装）
        """
        self._seat_service = seat_service or SeatClassificationService()

    def analyze_provinces(
        self,
        snapshot: ElectionSnapshot,
        competitive_categories: frozenset[SeatCategory] = PROVINCE_COMPETITIVE,
        seats: list[SeatAnalysis] | None = None,
    ) -> list[ProvinceAnalysis]:
        """県ごとの集計を返す. 議席のない県も0件として含める.

        Args:
            snapshot: 分析対象の選挙スナップショット
            competitive_categories: 接戦議席として数えるカテゴリ
            seats: 計算済みの議席分析（省略時はsnapshotから計算）

        Returns:
            snapshot.provincesと同じ順の県別集計
        """
        if seats is None:
            seats = self._seat_service.analyze_seats_by_category(snapshot).all
        regions = snapshot.region_by_id()
        totals = aggregate_seats(seats, lambda s: s.province_id, competitive_categories)

        results: list[ProvinceAnalysis] = []
        for province in snapshot.provinces:
            area = totals.get(province.id, AreaTotals())
            region = regions.get(province.region_id)
            results.append(
                ProvinceAnalysis(
                    id=province.id,
                    name=province.name,
                    region_id=province.region_id,
                    region_name=region.name if region else UNKNOWN_LABEL,
                    total_votes=area.total_votes,
                    total_seats=area.total_seats,
                    party_breakdown=dict(area.party_breakdown),
                    dominant_party_id=find_dominant_party(area.party_breakdown),
                    competitive_seats=area.competitive_seats,
                )
            )
        return results

    def analyze_regions(
        self,
        snapshot: ElectionSnapshot,
        competitive_categories: frozenset[SeatCategory] = REGION_COMPETITIVE,
        seats: list[SeatAnalysis] | None = None,
    ) -> list[RegionAnalysis]:
        """地方ごとの集計を返す.

        Args:
            snapshot: 分析対象の選挙スナップショット
            competitive_categories: 接戦議席として数えるカテゴリ
            seats: 計算済みの議席分析（省略時はsnapshotから計算）

        Returns:
            snapshot.regionsと同じ順の地方別集計
        """
        if seats is None:
            seats = self._seat_service.analyze_seats_by_category(snapshot).all
        parties = snapshot.party_by_id()
        totals = aggregate_seats(seats, lambda s: s.region_id, competitive_categories)

        results: list[RegionAnalysis] = []
        for region in snapshot.regions:
            area = totals.get(region.id, AreaTotals())
            dominant_id = find_dominant_party(area.party_breakdown)
            dominant = parties.get(dominant_id) if dominant_id is not None else None
            results.append(
                RegionAnalysis(
                    id=region.id,
                    name=region.name,
                    province_count=sum(
                        1 for p in snapshot.provinces if p.region_id == region.id
                    ),
                    total_votes=area.total_votes,
                    total_seats=area.total_seats,
                    party_breakdown=dict(area.party_breakdown),
                    dominant_party_id=dominant_id,
                    dominant_party_name=dominant.name if dominant else UNKNOWN_LABEL,
                    dominant_party_seats=(
                        area.party_breakdown[dominant_id]
                        if dominant_id is not None
                        else 0
                    ),
                    competitive_seats=area.competitive_seats,
                    competitive_percent=safe_percent(
                        area.competitive_seats, area.total_seats
                    ),
                    top_parties=top_parties(area, parties),
                )
            )
        return results

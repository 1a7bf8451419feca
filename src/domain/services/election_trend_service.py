"""複数年トレンド分析ドメインサービス.

年度ごとに独立して政党別集計を行い、年をまたいだ議席・得票の増減と
直近2回の選挙の比較（最大の議席増・議席減の政党）を求める。
"""

from src.domain.services.party_stats_service import PartyStatsService
from src.domain.value_objects.election_snapshot import ElectionYear, MultiYearData
from src.domain.value_objects.party_stats import PartyStats
from src.domain.value_objects.party_trend import (
    InsufficientTrendData,
    PartySeatChange,
    PartyTrend,
    TrendAnalysis,
    TrendInsights,
    YearlyPartyData,
    YearSummary,
)


MIN_TREND_YEARS = 2


def summarize_year(election_year: ElectionYear, stats: list[PartyStats]) -> YearSummary:
    """1年分の全体集計を作る.

    得票総数・投票率は全国集計（キー0）を使い、ない場合は
    候補者得票の合計と0.0で代替する。
    """
    snapshot = election_year.snapshot
    nationwide = snapshot.nationwide_turnout
    if nationwide is not None:
        total_votes = nationwide.total_votes
        turnout = nationwide.percent_voter
    else:
        total_votes = sum(c.score for c in snapshot.candidates)
        turnout = 0.0

    return YearSummary(
        year=election_year.year,
        label=election_year.label,
        total_votes=total_votes,
        turnout=turnout,
        total_seats=len(snapshot.constituencies),
        party_seats={s.party_id: s.total_seats for s in stats},
    )


def _pick_largest_change(
    changes: list[PartySeatChange], positive: bool
) -> PartySeatChange | None:
    """符号が一致する増減のうち絶対値最大のもの. 同値なら政党IDが最小のもの."""
    candidates = [
        c for c in changes if (c.seat_change > 0 if positive else c.seat_change < 0)
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda c: (-abs(c.seat_change), c.party_id))


class ElectionTrendService:
    """複数年トレンド分析を行うドメインサービス."""

    def __init__(self, party_stats_service: PartyStatsService | None = None):
        """初期化する.

        Args:
            party_stats_service: 政党別集計サービス（省略時は既定の実装）
        """
        self._party_stats_service = party_stats_service or PartyStatsService()

    def analyze_trends(
        self, multi_year: MultiYearData, limit: int | None = None
    ) -> TrendAnalysis | InsufficientTrendData:
        """年度間のトレンドを分析する.

        Args:
            multi_year: 年の昇順に並んだ複数年度のデータ
            limit: 返す政党トレンドの上限数（Noneなら全件）

        Returns:
            トレンド分析結果。2年分未満ならInsufficientTrendData
        """
        years = list(multi_year.years)
        if len(years) < MIN_TREND_YEARS:
            return InsufficientTrendData(
                years_available=len(years), years_required=MIN_TREND_YEARS
            )

        stats_by_year = [
            self._party_stats_service.compute_party_stats(y.snapshot) for y in years
        ]
        summaries = [
            summarize_year(y, stats)
            for y, stats in zip(years, stats_by_year, strict=True)
        ]

        trends = self._build_party_trends(years, stats_by_year)
        insights = self._build_insights(summaries, trends)

        trends.sort(key=lambda t: (-t.latest.seats, t.party_id))
        if limit is not None:
            trends = trends[:limit]

        return TrendAnalysis(years=summaries, party_trends=trends, insights=insights)

    def _build_party_trends(
        self, years: list[ElectionYear], stats_by_year: list[list[PartyStats]]
    ) -> list[PartyTrend]:
        """全年度に現れた政党ごとに、欠けた年を0で埋めた推移を作る."""
        indexed = [{s.party_id: s for s in stats} for stats in stats_by_year]

        # 名称・色は政党が現れた最新の年のものを使う
        identity: dict[int, tuple[str, str]] = {}
        for stats in stats_by_year:
            for s in stats:
                identity[s.party_id] = (s.party_name, s.party_color)

        trends: list[PartyTrend] = []
        for party_id in sorted(identity):
            yearly: list[YearlyPartyData] = []
            previous: YearlyPartyData | None = None
            for election_year, by_party in zip(years, indexed, strict=True):
                stat = by_party.get(party_id)
                seats = stat.total_seats if stat else 0
                votes = stat.total_votes if stat else 0
                current = YearlyPartyData(
                    year=election_year.year,
                    seats=seats,
                    votes=votes,
                    seat_change=seats - previous.seats if previous else None,
                    vote_change=votes - previous.votes if previous else None,
                )
                yearly.append(current)
                previous = current

            name, color = identity[party_id]
            trends.append(
                PartyTrend(
                    party_id=party_id,
                    party_name=name,
                    party_color=color,
                    yearly_data=yearly,
                )
            )
        return trends

    def _build_insights(
        self, summaries: list[YearSummary], trends: list[PartyTrend]
    ) -> TrendInsights:
        """直近2回の選挙を比較する."""
        latest, previous = summaries[-1], summaries[-2]
        changes = [
            PartySeatChange(
                party_id=t.party_id,
                party_name=t.party_name,
                party_color=t.party_color,
                seat_change=t.latest.seat_change or 0,
            )
            for t in trends
        ]
        return TrendInsights(
            turnout_change=latest.turnout - previous.turnout,
            vote_change=latest.total_votes - previous.total_votes,
            biggest_gainer=_pick_largest_change(changes, positive=True),
            biggest_loser=_pick_largest_change(changes, positive=False),
        )

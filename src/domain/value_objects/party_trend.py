"""複数年トレンド分析の値オブジェクト — Domain layer."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class YearlyPartyData:
    """ある年の政党実績. 最初の年は増減がNone."""

    year: int
    seats: int
    votes: int
    seat_change: int | None = None
    vote_change: int | None = None


@dataclass(frozen=True)
class PartyTrend:
    """政党ごとの年次推移."""

    party_id: int
    party_name: str
    party_color: str
    yearly_data: list[YearlyPartyData] = field(default_factory=list)

    @property
    def latest(self) -> YearlyPartyData:
        """最新年のデータ."""
        return self.yearly_data[-1]


@dataclass(frozen=True)
class YearSummary:
    """年ごとの全体集計."""

    year: int
    label: str
    total_votes: int
    turnout: float
    total_seats: int
    party_seats: dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class PartySeatChange:
    """直近2回の選挙間での政党の議席増減."""

    party_id: int
    party_name: str
    party_color: str
    seat_change: int


@dataclass(frozen=True)
class TrendInsights:
    """直近2回の選挙の比較."""

    turnout_change: float
    vote_change: int
    biggest_gainer: PartySeatChange | None = None
    biggest_loser: PartySeatChange | None = None


@dataclass(frozen=True)
class TrendAnalysis:
    """トレンド分析の結果."""

    years: list[YearSummary]
    party_trends: list[PartyTrend]
    insights: TrendInsights


@dataclass(frozen=True)
class InsufficientTrendData:
    """トレンド分析に必要な年数が揃っていないことを示す結果."""

    years_available: int
    years_required: int = 2

    @property
    def message(self) -> str:
        """利用者向けメッセージ."""
        return (
            f"トレンド分析には{self.years_required}年分以上のデータが必要です"
            f"（現在{self.years_available}年分）"
        )

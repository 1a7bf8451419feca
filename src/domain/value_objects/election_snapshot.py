"""選挙スナップショットの値オブジェクト — Domain layer.

1回の選挙（1年分）の全エンティティを保持する。取り込み時に一度だけ
作られ、以降は読み取り専用。分析サービスは常にこのスナップショットを
引数として受け取り、自身ではコピーを保持しない。
"""

from dataclasses import dataclass, field
from datetime import date

from src.domain.entities import Candidate, Constituency, Party, Province, Region


# AreaTurnoutのキー0は全国集計
NATIONWIDE_KEY = 0


@dataclass(frozen=True)
class AreaTurnout:
    """選挙区（またはキー0で全国）の投票数と投票率."""

    total_votes: int
    percent_voter: float = 0.0


@dataclass(frozen=True)
class ReportedPartyResult:
    """データソースが公表している政党別の議席数."""

    party_id: int
    constituency_seats: int = 0
    party_list_seats: int = 0
    total_votes: int | None = None


@dataclass(frozen=True)
class ElectionSnapshot:
    """1回の選挙の正規化済みデータ一式."""

    year: int
    regions: tuple[Region, ...] = ()
    provinces: tuple[Province, ...] = ()
    parties: tuple[Party, ...] = ()
    constituencies: tuple[Constituency, ...] = ()
    candidates: tuple[Candidate, ...] = ()
    turnout: dict[int, AreaTurnout] = field(default_factory=dict)
    reported_party_results: tuple[ReportedPartyResult, ...] = ()

    def region_by_id(self) -> dict[int, Region]:
        """ID→地方の辞書を返す."""
        return {r.id: r for r in self.regions}

    def province_by_id(self) -> dict[int, Province]:
        """ID→県の辞書を返す."""
        return {p.id: p for p in self.provinces}

    def party_by_id(self) -> dict[int, Party]:
        """ID→政党の辞書を返す."""
        return {p.id: p for p in self.parties}

    def constituency_by_id(self) -> dict[int, Constituency]:
        """ID→選挙区の辞書を返す."""
        return {c.id: c for c in self.constituencies}

    @property
    def nationwide_turnout(self) -> AreaTurnout | None:
        """全国集計の投票数・投票率. 未提供ならNone."""
        return self.turnout.get(NATIONWIDE_KEY)


@dataclass(frozen=True)
class ElectionYear:
    """年度付きのスナップショット."""

    year: int
    label: str
    snapshot: ElectionSnapshot
    description: str = ""
    election_date: date | None = None


@dataclass(frozen=True)
class MultiYearData:
    """複数年度のスナップショット. yearsは年の昇順に並べ替えて保持する."""

    years: tuple[ElectionYear, ...]
    current_year: int | None = None

    def __post_init__(self) -> None:
        """年の昇順に正規化する."""
        ordered = tuple(sorted(self.years, key=lambda y: y.year))
        object.__setattr__(self, "years", ordered)
        if self.current_year is None and ordered:
            object.__setattr__(self, "current_year", ordered[-1].year)

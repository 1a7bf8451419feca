"""分析結果を表形式（pandas.DataFrame）に変換するプレゼンター."""

import pandas as pd

from src.domain.utils.number_format import format_number, format_percent
from src.domain.value_objects.area_analysis import ProvinceAnalysis, RegionAnalysis
from src.domain.value_objects.candidate_analysis import CandidateAnalysis
from src.domain.value_objects.party_stats import PartyStats
from src.domain.value_objects.party_trend import PartyTrend, YearSummary
from src.domain.value_objects.seat_analysis import SeatAnalysis


UNKNOWN = "-"


class ElectionTablePresenter:
    """分析結果の表を作るプレゼンター.

    raw=Trueの場合は数値をそのまま残す（CSVエクスポート用）。
    Falseの場合は桁区切り・％表記の文字列にする（画面表示用）。
    """

    def __init__(self, raw: bool = False) -> None:
        self.raw = raw

    def _num(self, value: int | float) -> int | float | str:
        return value if self.raw else format_number(value)

    def _pct(self, value: float) -> float | str:
        return round(value, 2) if self.raw else format_percent(value)

    def seats_to_dataframe(self, seats: list[SeatAnalysis]) -> pd.DataFrame:
        """議席分析の表."""
        rows = []
        for seat in seats:
            rows.append(
                {
                    "id": seat.id,
                    "area": seat.area_name,
                    "province": seat.province_name,
                    "region": seat.region_name,
                    "winner": seat.winner.full_name,
                    "winner_party": seat.winner.party_name or UNKNOWN,
                    "winner_votes": self._num(seat.winner.score),
                    "runner_up": (
                        seat.runner_up.full_name if seat.runner_up else UNKNOWN
                    ),
                    "runner_up_party": (
                        (seat.runner_up.party_name or UNKNOWN)
                        if seat.runner_up
                        else UNKNOWN
                    ),
                    "margin": self._num(seat.margin),
                    "margin_percent": self._pct(seat.margin_percent),
                    "total_votes": self._num(seat.total_votes),
                    "category": seat.category.value,
                    "competitive_index": seat.competitive_index,
                }
            )
        return pd.DataFrame(rows, columns=SEAT_COLUMNS)

    def candidates_to_dataframe(
        self, analyses: list[CandidateAnalysis]
    ) -> pd.DataFrame:
        """候補者分析の表."""
        rows = []
        for a in analyses:
            rows.append(
                {
                    "id": a.id,
                    "name": a.full_name,
                    "party": a.party_name or UNKNOWN,
                    "area": a.area_name or UNKNOWN,
                    "province": a.province_name or UNKNOWN,
                    "rank": a.rank,
                    "winner": a.is_winner,
                    "votes": self._num(a.score),
                    "vote_share": self._pct(a.vote_share),
                    "margin": self._num(a.margin_votes),
                    "margin_percent": self._pct(a.margin_percent),
                    "potential": a.potential_score,
                    "competitive_index": a.competitive_index,
                }
            )
        return pd.DataFrame(rows, columns=CANDIDATE_COLUMNS)

    def provinces_to_dataframe(
        self, provinces: list[ProvinceAnalysis], party_names: dict[int, str]
    ) -> pd.DataFrame:
        """県別集計の表."""
        rows = []
        for p in provinces:
            rows.append(
                {
                    "id": p.id,
                    "province": p.name,
                    "region": p.region_name,
                    "seats": p.total_seats,
                    "votes": self._num(p.total_votes),
                    "dominant_party": _party_name(p.dominant_party_id, party_names),
                    "competitive_seats": p.competitive_seats,
                }
            )
        return pd.DataFrame(rows, columns=PROVINCE_COLUMNS)

    def regions_to_dataframe(self, regions: list[RegionAnalysis]) -> pd.DataFrame:
        """地方別集計の表."""
        rows = []
        for r in regions:
            rows.append(
                {
                    "id": r.id,
                    "region": r.name,
                    "provinces": r.province_count,
                    "seats": r.total_seats,
                    "votes": self._num(r.total_votes),
                    "dominant_party": r.dominant_party_name,
                    "dominant_seats": r.dominant_party_seats,
                    "competitive_seats": r.competitive_seats,
                    "competitive_percent": self._pct(r.competitive_percent),
                    "top_parties": ", ".join(
                        f"{t.party_name}({t.seats})" for t in r.top_parties
                    ),
                }
            )
        return pd.DataFrame(rows, columns=REGION_COLUMNS)

    def party_stats_to_dataframe(self, stats: list[PartyStats]) -> pd.DataFrame:
        """政党別集計の表."""
        rows = []
        for s in stats:
            rows.append(
                {
                    "id": s.party_id,
                    "party": s.party_name,
                    "votes": self._num(s.total_votes),
                    "constituency_seats": s.constituency_seats_won,
                    "party_list_seats": s.party_list_seats_won,
                    "total_seats": s.total_seats,
                }
            )
        return pd.DataFrame(rows, columns=PARTY_COLUMNS)

    def trends_to_dataframe(
        self, years: list[YearSummary], trends: list[PartyTrend]
    ) -> pd.DataFrame:
        """政党×年の議席推移の表. 2年目以降は増減を併記する."""
        rows = []
        for trend in trends:
            row: dict[str, object] = {"id": trend.party_id, "party": trend.party_name}
            for data in trend.yearly_data:
                if data.seat_change is None:
                    row[str(data.year)] = data.seats
                else:
                    row[str(data.year)] = f"{data.seats} ({data.seat_change:+d})"
            rows.append(row)
        columns = ["id", "party", *(str(y.year) for y in years)]
        return pd.DataFrame(rows, columns=columns)


SEAT_COLUMNS = [
    "id",
    "area",
    "province",
    "region",
    "winner",
    "winner_party",
    "winner_votes",
    "runner_up",
    "runner_up_party",
    "margin",
    "margin_percent",
    "total_votes",
    "category",
    "competitive_index",
]
CANDIDATE_COLUMNS = [
    "id",
    "name",
    "party",
    "area",
    "province",
    "rank",
    "winner",
    "votes",
    "vote_share",
    "margin",
    "margin_percent",
    "potential",
    "competitive_index",
]
PROVINCE_COLUMNS = [
    "id",
    "province",
    "region",
    "seats",
    "votes",
    "dominant_party",
    "competitive_seats",
]
REGION_COLUMNS = [
    "id",
    "region",
    "provinces",
    "seats",
    "votes",
    "dominant_party",
    "dominant_seats",
    "competitive_seats",
    "competitive_percent",
    "top_parties",
]
PARTY_COLUMNS = [
    "id",
    "party",
    "votes",
    "constituency_seats",
    "party_list_seats",
    "total_seats",
]


def _party_name(party_id: int | None, party_names: dict[int, str]) -> str:
    if party_id is None:
        return UNKNOWN
    return party_names.get(party_id, UNKNOWN)

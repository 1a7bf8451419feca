"""政党別集計ドメインサービス.

候補者の得票を政党ごとに合算し、小選挙区の獲得議席と
比例代表議席（公表値または近似）を求める。
"""

from collections import Counter

from src.domain.services.seat_classification_service import SeatClassificationService
from src.domain.utils.vote_math import round_half_up
from src.domain.value_objects.election_snapshot import ElectionSnapshot
from src.domain.value_objects.party_stats import PartyListMethod, PartyStats
from src.domain.value_objects.seat_analysis import SeatAnalysis


DEFAULT_TOTAL_SEATS = 500
MMA_ELECTION_YEAR = 2562


def method_for_year(year: int, has_reported_results: bool = False) -> PartyListMethod:
    """年度とデータの有無から比例代表議席の求め方を決める.

    公表値があればそれを優先し、なければ2562年のみ近似を使う。
    """
    if has_reported_results:
        return PartyListMethod.REPORTED
    if year == MMA_ELECTION_YEAR:
        return PartyListMethod.MMA_APPROXIMATION
    return PartyListMethod.NONE


def approximate_party_list_seats(
    party_votes: int, all_votes: int, constituency_seats: int, total_seats: int
) -> int:
    """2562年（MMA方式）の比例代表議席の簡易近似.

    得票から理論上の総議席を求め、小選挙区議席を差し引く。
    選挙法に基づく正式な配分計算ではない。
    """
    if all_votes <= 0:
        return 0
    votes_per_seat = all_votes / total_seats
    theoretical = round_half_up(party_votes / votes_per_seat)
    return max(0, theoretical - constituency_seats)


class PartyStatsService:
    """政党別集計を行うドメインサービス."""

    def __init__(
        self,
        seat_service: SeatClassificationService | None = None,
        total_seats: int = DEFAULT_TOTAL_SEATS,
    ):
        """初期化する.

        Args:
            seat_service: 議席分類サービス（省略時は既定の実装）
            total_seats: 近似計算で使う議会の総定数
        """
        self._seat_service = seat_service or SeatClassificationService()
        self._total_seats = total_seats

    def compute_party_stats(
        self,
        snapshot: ElectionSnapshot,
        method: PartyListMethod | None = None,
        seats: list[SeatAnalysis] | None = None,
    ) -> list[PartyStats]:
        """政党別の集計を返す.

        得票も議席もない政党は含めない。並び順は総議席の降順、
        同数なら政党IDの昇順。

        Args:
            snapshot: 分析対象の選挙スナップショット
            method: 比例代表議席の求め方（省略時はmethod_for_yearで決定）
            seats: 計算済みの議席分析（省略時はsnapshotから計算）

        Returns:
            政党別集計のリスト
        """
        if method is None:
            method = method_for_year(
                snapshot.year, bool(snapshot.reported_party_results)
            )
        if seats is None:
            seats = self._seat_service.analyze_seats_by_category(snapshot).all

        party_votes: Counter[int] = Counter()
        for candidate in snapshot.candidates:
            party_votes[candidate.party_id] += candidate.score
        # 政党に解決できない得票（政党ID 0や未登録の政党）は分母に含めない
        known_parties = snapshot.party_by_id()
        all_votes = sum(
            votes
            for party_id, votes in party_votes.items()
            if party_id > 0 and party_id in known_parties
        )

        constituency_seats: Counter[int] = Counter(
            seat.winner.party_id for seat in seats if seat.winner.score > 0
        )
        reported = {r.party_id: r for r in snapshot.reported_party_results}

        stats: list[PartyStats] = []
        for party in snapshot.parties:
            votes = party_votes.get(party.id, 0)
            won = constituency_seats.get(party.id, 0)

            if method is PartyListMethod.REPORTED:
                result = reported.get(party.id)
                party_list = result.party_list_seats if result else 0
            elif method is PartyListMethod.MMA_APPROXIMATION:
                party_list = approximate_party_list_seats(
                    votes, all_votes, won, self._total_seats
                )
            else:
                party_list = 0

            if votes == 0 and won + party_list == 0:
                continue

            stats.append(
                PartyStats(
                    party_id=party.id,
                    party_name=party.name,
                    party_color=party.color,
                    total_votes=votes,
                    constituency_seats_won=won,
                    party_list_seats_won=party_list,
                )
            )

        stats.sort(key=lambda s: (-s.total_seats, s.party_id))
        return stats

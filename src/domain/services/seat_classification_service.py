"""議席分類ドメインサービス.

選挙区ごとに当選者と次点を求め、得票差の割合で4カテゴリに分類する。
"""

from collections.abc import Iterable
from itertools import groupby

from src.domain.services.candidate_analysis_service import CandidateAnalysisService
from src.domain.utils.vote_math import safe_percent
from src.domain.value_objects.candidate_analysis import CandidateAnalysis
from src.domain.value_objects.election_snapshot import ElectionSnapshot
from src.domain.value_objects.seat_analysis import (
    SeatAnalysis,
    SeatCategory,
    SeatClassification,
)


UNKNOWN_LABEL = "-"

SAFE_THRESHOLD = 20.0
MARGINAL_THRESHOLD = 10.0
COMPETITIVE_THRESHOLD = 5.0


def classify_margin(margin_percent: float) -> SeatCategory:
    """得票差（％）からカテゴリを決める. 境界はすべて「より大きい」で判定."""
    if margin_percent > SAFE_THRESHOLD:
        return SeatCategory.SAFE
    if margin_percent > MARGINAL_THRESHOLD:
        return SeatCategory.MARGINAL
    if margin_percent > COMPETITIVE_THRESHOLD:
        return SeatCategory.COMPETITIVE
    return SeatCategory.LOST


class SeatClassificationService:
    """議席分類を行うドメインサービス."""

    def __init__(self, candidate_service: CandidateAnalysisService | None = None):
        """初期化する.

        Args:
            candidate_service: 候補者分析サービス（省略時は既定の実装）
        """
        self._candidate_service = candidate_service or CandidateAnalysisService()

    def build_seats(self, analyses: Iterable[CandidateAnalysis]) -> list[SeatAnalysis]:
        """候補者分析から選挙区ごとの議席分析を組み立てる.

        analysesは選挙区IDの昇順・順位順に並んでいること
        （analyze_candidatesの出力順）。
        """
        seats: list[SeatAnalysis] = []
        by_area = groupby(analyses, key=lambda a: a.constituency_id)
        for constituency_id, group in by_area:
            ranked = list(group)
            winner = ranked[0]
            runner_up = ranked[1] if len(ranked) > 1 else None
            margin = winner.score - runner_up.score if runner_up else winner.score
            margin_percent = safe_percent(margin, winner.total_votes)

            seats.append(
                SeatAnalysis(
                    id=constituency_id,
                    area_name=winner.area_name or UNKNOWN_LABEL,
                    province_id=winner.province_id,
                    province_name=winner.province_name or UNKNOWN_LABEL,
                    region_id=winner.region_id,
                    region_name=winner.region_name or UNKNOWN_LABEL,
                    winner=winner,
                    runner_up=runner_up,
                    margin=margin,
                    margin_percent=margin_percent,
                    total_votes=winner.total_votes,
                    category=classify_margin(margin_percent),
                    competitive_index=winner.competitive_index,
                )
            )
        return seats

    def classify(self, seats: Iterable[SeatAnalysis]) -> SeatClassification:
        """議席分析をカテゴリ別に振り分ける."""
        buckets: dict[SeatCategory, list[SeatAnalysis]] = {c: [] for c in SeatCategory}
        all_seats: list[SeatAnalysis] = []
        for seat in seats:
            all_seats.append(seat)
            buckets[seat.category].append(seat)

        return SeatClassification(
            all=all_seats,
            safe=buckets[SeatCategory.SAFE],
            marginal=buckets[SeatCategory.MARGINAL],
            competitive=buckets[SeatCategory.COMPETITIVE],
            lost=buckets[SeatCategory.LOST],
        )

    def analyze_seats_by_category(
        self, snapshot: ElectionSnapshot
    ) -> SeatClassification:
        """スナップショット全体の議席を分類する.

        候補者のいない選挙区は議席分析に含まれない。

        Args:
            snapshot: 分析対象の選挙スナップショット

        Returns:
            カテゴリ別の議席分析（各区分は選挙区IDの昇順）
        """
        analyses = self._candidate_service.analyze_candidates(snapshot)
        return self.classify(self.build_seats(analyses))

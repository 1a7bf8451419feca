"""候補者の検索・絞り込みを行うドメインサービス."""

from src.domain.services.seat_classification_service import SeatClassificationService
from src.domain.value_objects.candidate_analysis import CandidateAnalysis
from src.domain.value_objects.filter_options import CandidateStatus, FilterOptions
from src.domain.value_objects.seat_analysis import SeatAnalysis


COMPETITIVE_MARGIN_PERCENT = 10.0


def matches_query(analysis: CandidateAnalysis, query: str) -> bool:
    """氏名・政党名・選挙区名・県名のいずれかにqueryを含むか（大文字小文字を区別しない）."""
    needle = query.strip().lower()
    if not needle:
        return True
    fields = (
        analysis.full_name,
        analysis.party_name,
        analysis.area_name,
        analysis.province_name,
    )
    return any(needle in value.lower() for value in fields if value)


def matches_status(analysis: CandidateAnalysis, status: CandidateStatus) -> bool:
    """当落条件に合うか."""
    if status is CandidateStatus.WINNER:
        return analysis.is_winner
    if status is CandidateStatus.LOSER:
        return not analysis.is_winner
    if status is CandidateStatus.COMPETITIVE:
        return analysis.margin_percent < COMPETITIVE_MARGIN_PERCENT
    return True


class CandidateFilterService:
    """候補者の検索・絞り込みを行うドメインサービス."""

    def __init__(self, seat_service: SeatClassificationService | None = None):
        self._seat_service = seat_service or SeatClassificationService()

    def filter_candidates(
        self,
        analyses: list[CandidateAnalysis],
        options: FilterOptions,
        seats: list[SeatAnalysis] | None = None,
    ) -> list[CandidateAnalysis]:
        """条件に合う候補者を入力順のまま返す.

        Args:
            analyses: 候補者分析（analyze_candidatesの出力）
            options: 絞り込み条件
            seats: 計算済みの議席分析。seat_category指定時に使う

        Returns:
            条件に合う候補者分析
        """
        category_by_area = None
        if options.seat_category is not None:
            if seats is None:
                seats = self._seat_service.build_seats(analyses)
            category_by_area = {s.id: s.category for s in seats}

        results: list[CandidateAnalysis] = []
        for analysis in analyses:
            if not matches_query(analysis, options.search_query):
                continue
            if options.party_ids and analysis.party_id not in options.party_ids:
                continue
            if (
                options.province_ids
                and analysis.province_id not in options.province_ids
            ):
                continue
            if options.region_ids and analysis.region_id not in options.region_ids:
                continue
            if options.score_range is not None:
                low, high = options.score_range
                if not low <= analysis.score <= high:
                    continue
            if not matches_status(analysis, options.status):
                continue
            if (
                category_by_area is not None
                and category_by_area.get(analysis.constituency_id)
                != options.seat_category
            ):
                continue
            results.append(analysis)
        return results

"""候補者分析ドメインサービス.

選挙区ごとに候補者を順位付けし、当落・差（票数/％）・得票率と
2つの合成スコア（ポテンシャル、接戦度指数）を求める。
"""

from collections import defaultdict
from collections.abc import Iterable

from src.domain.entities import Candidate
from src.domain.utils.vote_math import safe_percent
from src.domain.value_objects.candidate_analysis import CandidateAnalysis
from src.domain.value_objects.election_snapshot import ElectionSnapshot


# (差の上限％, 指数) を上から順に評価する
_COMPETITIVE_INDEX_STEPS: tuple[tuple[float, int], ...] = (
    (3.0, 100),
    (5.0, 80),
    (10.0, 60),
    (15.0, 40),
    (20.0, 20),
)


def candidate_rank_key(candidate: Candidate) -> tuple[int, int]:
    """選挙区内の全順序: 得票の降順、同票なら候補者IDの昇順."""
    return (-candidate.score, candidate.id)


def rank_candidates(candidates: Iterable[Candidate]) -> list[Candidate]:
    """候補者を全順序で並べ替えた新しいリストを返す."""
    return sorted(candidates, key=candidate_rank_key)


def group_by_constituency(
    candidates: Iterable[Candidate],
) -> dict[int, list[Candidate]]:
    """候補者を選挙区IDごとにまとめる."""
    groups: dict[int, list[Candidate]] = defaultdict(list)
    for candidate in candidates:
        groups[candidate.constituency_id].append(candidate)
    return dict(groups)


def calculate_competitive_index(margin_percent: float) -> int:
    """差（％）を0〜100の段階的な接戦度指数に変換する."""
    for upper_bound, index in _COMPETITIVE_INDEX_STEPS:
        if margin_percent < upper_bound:
            return index
    return 0


def calculate_potential_score(
    score: int, is_winner: bool, margin_percent: float
) -> int:
    """候補者のポテンシャルスコア（0〜100）を求める.

    統計的な推定ではなく、「伸びしろのある候補者か」を示す経験則。
    基本50点に、当選+30、または僅差（5％未満+20、10％未満+10）、
    さらに得票数（10万超+10、5万超+5）を加える。
    """
    points = 50
    if is_winner:
        points += 30
    elif margin_percent < 5:
        points += 20
    elif margin_percent < 10:
        points += 10

    if score > 100_000:
        points += 10
    elif score > 50_000:
        points += 5

    return max(0, min(100, points))


class CandidateAnalysisService:
    """候補者分析を行うドメインサービス."""

    def analyze_candidates(self, snapshot: ElectionSnapshot) -> list[CandidateAnalysis]:
        """全候補者の分析結果を返す.

        並び順は選挙区IDの昇順、選挙区内は順位順。参照先（選挙区・県・
        地方・政党）が見つからない場合、名称フィールドはNoneになる。

        Args:
            snapshot: 分析対象の選挙スナップショット

        Returns:
            入力候補者1人につき1件の分析結果
        """
        constituencies = snapshot.constituency_by_id()
        provinces = snapshot.province_by_id()
        regions = snapshot.region_by_id()
        parties = snapshot.party_by_id()

        analyzed: list[CandidateAnalysis] = []
        groups = group_by_constituency(snapshot.candidates)

        for constituency_id in sorted(groups):
            ranked = rank_candidates(groups[constituency_id])
            total_votes = sum(c.score for c in ranked)
            top_score = ranked[0].score
            runner_up_score = ranked[1].score if len(ranked) > 1 else 0
            seat_margin = top_score - runner_up_score
            # 接戦度は候補者個人ではなく選挙区の差で決まる
            competitive_index = calculate_competitive_index(
                safe_percent(seat_margin, total_votes)
            )

            area = constituencies.get(constituency_id)
            province = provinces.get(area.province_id) if area else None
            region = regions.get(province.region_id) if province else None

            for index, candidate in enumerate(ranked):
                is_winner = index == 0
                margin_votes = seat_margin if is_winner else top_score - candidate.score
                margin_percent = safe_percent(margin_votes, total_votes)
                party = parties.get(candidate.party_id)

                analyzed.append(
                    CandidateAnalysis(
                        id=candidate.id,
                        full_name=candidate.full_name,
                        party_id=candidate.party_id,
                        constituency_id=constituency_id,
                        score=candidate.score,
                        party_name=party.name if party else None,
                        party_color=party.color if party else None,
                        area_name=area.name if area else None,
                        province_id=province.id if province else None,
                        province_name=province.name if province else None,
                        region_id=region.id if region else None,
                        region_name=region.name if region else None,
                        rank=index + 1,
                        is_winner=is_winner,
                        total_votes=total_votes,
                        margin_votes=margin_votes,
                        margin_percent=margin_percent,
                        vote_share=safe_percent(candidate.score, total_votes),
                        potential_score=calculate_potential_score(
                            candidate.score, is_winner, margin_percent
                        ),
                        competitive_index=competitive_index,
                    )
                )

        return analyzed

    def find_competitors(
        self, analyses: list[CandidateAnalysis], candidate_id: int
    ) -> list[CandidateAnalysis]:
        """同じ選挙区の他候補者を順位順に返す. 候補者が見つからなければ空リスト."""
        target = next((a for a in analyses if a.id == candidate_id), None)
        if target is None:
            return []
        competitors = [
            a
            for a in analyses
            if a.constituency_id == target.constituency_id and a.id != candidate_id
        ]
        return sorted(competitors, key=lambda a: a.rank)

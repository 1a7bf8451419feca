"""得票スイングのシミュレーションを行うドメインサービス."""

import dataclasses
import math

from src.domain.entities import Candidate
from src.domain.services.candidate_analysis_service import rank_candidates
from src.domain.utils.vote_math import safe_percent
from src.domain.value_objects.election_snapshot import ElectionSnapshot
from src.domain.value_objects.swing_simulation import SwingSimulation


def apply_swing(score: int, swing_percent: float) -> int:
    """得票にスイングを適用する. 小数は切り捨て、0未満にはしない."""
    return max(0, math.floor(score * (1 + swing_percent / 100)))


class SwingSimulationService:
    """得票スイングのシミュレーションを行うドメインサービス."""

    def simulate_swing(
        self,
        snapshot: ElectionSnapshot,
        constituency_id: int,
        swing_percent: float,
        party_id: int | None = None,
    ) -> SwingSimulation | None:
        """選挙区の得票をswing_percentだけ増減させて再集計する.

        Args:
            snapshot: 分析対象の選挙スナップショット
            constituency_id: 対象の選挙区ID
            swing_percent: 増減率（％）。-10なら1割減
            party_id: 指定した場合はその政党の候補者だけに適用する

        Returns:
            シミュレーション結果。選挙区が存在しないか候補者がいなければNone
        """
        if constituency_id not in snapshot.constituency_by_id():
            return None
        original = [
            c for c in snapshot.candidates if c.constituency_id == constituency_id
        ]
        if not original:
            return None

        simulated = rank_candidates(
            dataclasses.replace(c, score=apply_swing(c.score, swing_percent))
            if party_id is None or c.party_id == party_id
            else c
            for c in original
        )
        total_votes = sum(c.score for c in simulated)
        winner = simulated[0]
        runner_up_score = simulated[1].score if len(simulated) > 1 else 0
        margin = winner.score - runner_up_score

        return SwingSimulation(
            constituency_id=constituency_id,
            swing_percent=swing_percent,
            original_winner_id=rank_candidates(original)[0].id,
            candidates=simulated,
            total_votes=total_votes,
            winner=winner,
            margin=margin,
            margin_percent=safe_percent(margin, total_votes),
        )

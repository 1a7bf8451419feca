"""得票スイングのシミュレーション結果の値オブジェクト — Domain layer."""

from dataclasses import dataclass, field

from src.domain.entities import Candidate


@dataclass(frozen=True)
class SwingSimulation:
    """1選挙区の得票を増減させた結果."""

    constituency_id: int
    swing_percent: float
    original_winner_id: int
    candidates: list[Candidate] = field(default_factory=list)
    total_votes: int = 0
    winner: Candidate | None = None
    margin: int = 0
    margin_percent: float = 0.0

    @property
    def winner_changed(self) -> bool:
        """当選者が入れ替わったか."""
        return self.winner is not None and self.winner.id != self.original_winner_id

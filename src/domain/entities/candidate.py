"""Candidate entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """選挙区の候補者を表すエンティティ.

    1候補者は1政党・1選挙区に属する。scoreは得票数（0以上の整数）。
    """

    id: int
    full_name: str
    party_id: int
    constituency_id: int
    score: int
    candidate_number: int | None = None

    def __post_init__(self) -> None:
        """得票数の不変条件を検証する."""
        if self.score < 0:
            raise ValueError(f"score must be non-negative: {self.score}")

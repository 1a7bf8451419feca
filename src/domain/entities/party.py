"""Party entity."""

from dataclasses import dataclass


DEFAULT_PARTY_COLOR = "#ccc"


@dataclass(frozen=True)
class Party:
    """政党を表すエンティティ.

    colorは表示用のトークン（"#ef4444"など）で、解釈せずにそのまま伝搬する。
    """

    id: int
    name: str
    color: str = DEFAULT_PARTY_COLOR

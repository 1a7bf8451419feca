"""Region entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """地方（ภาค）を表すエンティティ.

    地理的階層の最上位。静的な参照データ。
    """

    id: int
    name: str

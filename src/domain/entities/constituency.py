"""Constituency entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Constituency:
    """選挙区（เขตเลือกตั้ง）を表すエンティティ.

    1議席を争う単位。1つの県に属する。
    """

    id: int
    name: str
    province_id: int
    area_number: int

    def __str__(self) -> str:
        """文字列表現を返す."""
        return f"{self.name} (#{self.id})"

"""Province entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Province:
    """県（จังหวัด）を表すエンティティ. 1つの地方に属する."""

    id: int
    name: str
    region_id: int

"""Domain entities."""

from src.domain.entities.candidate import Candidate
from src.domain.entities.constituency import Constituency
from src.domain.entities.party import DEFAULT_PARTY_COLOR, Party
from src.domain.entities.province import Province
from src.domain.entities.region import Region


__all__ = [
    "Candidate",
    "Constituency",
    "DEFAULT_PARTY_COLOR",
    "Party",
    "Province",
    "Region",
]

"""政党別集計の値オブジェクト — Domain layer."""

from dataclasses import dataclass
from enum import StrEnum


class PartyListMethod(StrEnum):
    """比例代表議席の求め方."""

    # データソースが公表した値をそのまま使う
    REPORTED = "reported"
    # 2562年（MMA方式）の簡易近似。選挙法どおりの計算ではない
    MMA_APPROXIMATION = "mma_approximation"
    NONE = "none"


@dataclass(frozen=True)
class PartyStats:
    """政党別の得票・議席集計（候補者データから導出）."""

    party_id: int
    party_name: str
    party_color: str
    total_votes: int
    constituency_seats_won: int
    party_list_seats_won: int

    @property
    def total_seats(self) -> int:
        """小選挙区＋比例の合計議席."""
        return self.constituency_seats_won + self.party_list_seats_won

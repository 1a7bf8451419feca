"""得票計算の共通関数."""

import math


def safe_percent(part: int | float, whole: int | float) -> float:
    """part / whole * 100 を返す. wholeが0以下なら0.0."""
    if whole <= 0:
        return 0.0
    return part / whole * 100


def round_half_up(value: float) -> int:
    """0.5を切り上げる四捨五入（組み込みroundの偶数丸めは使わない）."""
    return math.floor(value + 0.5)

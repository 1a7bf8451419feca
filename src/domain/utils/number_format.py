"""表示用の数値フォーマット.

分析結果そのものは丸めずに保持し、表示時にのみここで整形する。
"""


def format_number(value: int | float) -> str:
    """3桁区切りで整形する（例: 1234567 → "1,234,567"）."""
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.2f}"
    return f"{int(value):,}"


def format_percent(value: float, decimals: int = 1) -> str:
    """パーセント表記に整形する（例: 12.345 → "12.3%"）."""
    return f"{value:.{decimals}f}%"

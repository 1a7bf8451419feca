"""表示用フォーマットのテスト."""

from src.domain.utils.number_format import format_number, format_percent


def test_format_number_thousands_separator() -> None:
    assert format_number(1234567) == "1,234,567"


def test_format_number_whole_float() -> None:
    assert format_number(1000.0) == "1,000"


def test_format_number_fraction() -> None:
    assert format_number(1234.5) == "1,234.50"


def test_format_percent() -> None:
    assert format_percent(12.345) == "12.3%"
    assert format_percent(5, decimals=0) == "5%"

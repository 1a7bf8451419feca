"""インポーターモジュール共通のユーティリティ関数."""

import re

from src.infrastructure.importers._constants import AREA_ID_MULTIPLIER


_NON_DIGIT = re.compile(r"[\"',\s]")


def parse_vote_count(text: str) -> int:
    """'"23,246"'のような得票数の文字列を整数にする. 解釈できなければ0."""
    cleaned = _NON_DIGIT.sub("", text or "")
    try:
        return max(0, int(cleaned))
    except ValueError:
        return 0


def parse_optional_int(value: object) -> int | None:
    """値をint | Noneに変換."""
    if value is None or value == "":
        return None
    try:
        return int(value)  # type: ignore[call-overload]
    except (ValueError, TypeError):
        return None


def make_area_id(province_id: int, zone_number: int) -> int:
    """県IDと区番号から選挙区IDを作る."""
    return province_id * AREA_ID_MULTIPLIER + zone_number


def make_candidate_id(area_id: int, candidate_number: int) -> int:
    """選挙区IDとゼロ埋め3桁の候補者番号を連結して候補者IDを作る."""
    return int(f"{area_id}{candidate_number:03d}")


def area_display_name(zone_number: int) -> str:
    """区番号からの表示名（เขต N）."""
    return f"เขต {zone_number}"

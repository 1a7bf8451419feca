"""2562年開票結果CSVのパーサー.

CSVはタイ語ヘッダー（จังหวัด, เขต, หมายเลข, ชื่อ, พรรค, คะแนน）の行から
始まり、それより前の行は説明文として読み飛ばす。県・区のセルは
グループ化のため空欄になっていることがあり、その場合は直前の値を引き継ぐ。
"""

import csv
import logging

from dataclasses import dataclass
from pathlib import Path

from src.infrastructure.importers._constants import (
    CSV_COLUMN_COUNT,
    CSV_HEADER_PREFIX,
)
from src.infrastructure.importers._utils import parse_optional_int, parse_vote_count


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultCsvRow:
    """CSVの1行（空欄の引き継ぎ処理済み）."""

    province: str
    zone: str
    number: str
    name: str
    party: str
    score: int

    @property
    def zone_number(self) -> int | None:
        """区番号. 数値でなければNone."""
        return parse_optional_int(self.zone)

    @property
    def candidate_number(self) -> int | None:
        """候補者番号. 数値でなければNone."""
        return parse_optional_int(self.number)


def parse_result_csv(text: str) -> list[ResultCsvRow]:
    """CSVテキストを行のリストに変換する.

    Args:
        text: CSVファイルの内容

    Returns:
        ヘッダー行以降の有効な行。ヘッダーが見つからなければ空リスト
    """
    lines = text.splitlines()
    header_index = next(
        (i for i, line in enumerate(lines) if line.startswith(CSV_HEADER_PREFIX)),
        None,
    )
    if header_index is None:
        logger.warning("CSVのヘッダー行（%s）が見つかりません", CSV_HEADER_PREFIX)
        return []

    rows: list[ResultCsvRow] = []
    current_province = ""
    current_zone = ""
    body = (line for line in lines[header_index + 1 :] if line.strip())
    for cells in csv.reader(body):
        if len(cells) < CSV_COLUMN_COUNT:
            continue

        raw_province = cells[0].strip()
        raw_zone = cells[1].strip()
        if raw_province:
            current_province = raw_province
        if raw_zone:
            current_zone = raw_zone

        rows.append(
            ResultCsvRow(
                province=current_province,
                zone=current_zone,
                number=cells[2].strip(),
                name=cells[3].strip(),
                party=cells[4].strip(),
                score=parse_vote_count(cells[5]),
            )
        )

    logger.info("CSVから%d行を読み込みました", len(rows))
    return rows


def parse_result_csv_file(file_path: Path) -> list[ResultCsvRow]:
    """CSVファイルを読み込んで解析する. BOM付きUTF-8にも対応."""
    return parse_result_csv(file_path.read_text(encoding="utf-8-sig"))

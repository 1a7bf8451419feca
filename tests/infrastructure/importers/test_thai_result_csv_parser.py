"""2562年開票結果CSVパーサーのテスト."""

from pathlib import Path

from src.infrastructure.importers.thai_result_csv_parser import (
    parse_result_csv,
    parse_result_csv_file,
)


CSV_TEXT = """ผลการเลือกตั้ง ส.ส. แบบแบ่งเขต พ.ศ. 2562
ข้อมูลไม่เป็นทางการ
จังหวัด,เขต,หมายเลข,ชื่อ,พรรค,คะแนน
กรุงเทพมหานคร,1,1,นาย ก,พรรค ก,"23,246"
,,2,นาง ข,พรรค ข,"18,001"
,2,1,นาย ค,พรรค ก,900

เชียงใหม่,1,3,นาย ง,พรรค ค,-
ไม่ครบ,1
"""


class TestParseResultCsv:
    """parse_result_csvのテスト."""

    def test_preamble_is_skipped(self) -> None:
        rows = parse_result_csv(CSV_TEXT)
        assert rows[0].province == "กรุงเทพมหานคร"
        assert rows[0].name == "นาย ก"

    def test_quoted_scores(self) -> None:
        rows = parse_result_csv(CSV_TEXT)
        assert rows[0].score == 23_246
        assert rows[1].score == 18_001

    def test_blank_cells_inherit_previous_values(self) -> None:
        rows = parse_result_csv(CSV_TEXT)
        assert (rows[1].province, rows[1].zone) == ("กรุงเทพมหานคร", "1")
        assert (rows[2].province, rows[2].zone) == ("กรุงเทพมหานคร", "2")

    def test_invalid_score_becomes_zero(self) -> None:
        rows = parse_result_csv(CSV_TEXT)
        assert rows[3].province == "เชียงใหม่"
        assert rows[3].score == 0

    def test_short_and_blank_rows_are_ignored(self) -> None:
        assert len(parse_result_csv(CSV_TEXT)) == 4

    def test_numbers(self) -> None:
        row = parse_result_csv(CSV_TEXT)[3]
        assert row.zone_number == 1
        assert row.candidate_number == 3

    def test_missing_header(self) -> None:
        assert parse_result_csv("a,b,c\n1,2,3\n") == []


class TestParseResultCsvFile:
    """parse_result_csv_fileのテスト."""

    def test_reads_utf8_with_bom(self, tmp_path: Path) -> None:
        path = tmp_path / "result.csv"
        path.write_text(CSV_TEXT, encoding="utf-8-sig")
        assert len(parse_result_csv_file(path)) == 4

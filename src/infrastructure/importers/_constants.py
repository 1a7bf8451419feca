"""インポーターモジュール共通の定数."""

# 2562年（2019年）選挙の地方区分（元データに地方マスタがないため固定）
REGIONS_2562: list[tuple[int, str]] = [
    (1, "ภาคเหนือ"),
    (2, "ภาคตะวันออกเฉียงเหนือ"),
    (3, "ภาคกลาง"),
    (4, "ภาคใต้"),
]

# 2562年の参照ファイル（data_dir/information/配下）
PROVINCES_FILE = "_provinces.json"
ZONES_FILE = "_zones.json"
PARTIES_FILE = "_parties.json"
SUMMARY_FILE = "Summary20190322080003.json"
INFORMATION_DIR = "information"

# 2562年の開票結果CSV（data_dir直下）
RESULT_CSV_FILE = "ผลคะแนน.csv"

# CSVのヘッダー行の先頭セル
CSV_HEADER_PREFIX = "จังหวัด"
# CSVの列: จังหวัด, เขต, หมายเลข, ชื่อ, พรรค, คะแนน
CSV_COLUMN_COUNT = 6

# 選挙区IDは 県ID * 100 + 区番号
AREA_ID_MULTIPLIER = 100

# 政党名が解決できない候補者の政党ID
UNKNOWN_PARTY_ID = 0

# バンコク都の県ID（名称の揺れ対策）
BANGKOK_NAME = "กรุงเทพมหานคร"
BANGKOK_PROVINCE_ID = 10

# 選挙年（仏暦）ごとの既定のデータソース
CSV_ELECTION_YEAR = 2562
API_ELECTION_YEAR = 2566

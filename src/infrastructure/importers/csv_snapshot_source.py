"""CSVスナップショットソースの実装 — Infrastructure layer.

IElectionSnapshotSourceの2562年（2019年）データ実装。参照用のJSON
（県・区・政党）と開票結果CSVからスナップショットを組み立てる。
"""

import asyncio
import json
import logging

from pathlib import Path
from typing import Any

from src.domain.entities import (
    DEFAULT_PARTY_COLOR,
    Candidate,
    Constituency,
    Party,
    Province,
    Region,
)
from src.domain.utils.vote_math import safe_percent
from src.domain.value_objects.election_snapshot import (
    NATIONWIDE_KEY,
    AreaTurnout,
    ElectionSnapshot,
)
from src.infrastructure.exceptions import DataSourceError
from src.infrastructure.importers._constants import (
    BANGKOK_NAME,
    BANGKOK_PROVINCE_ID,
    CSV_ELECTION_YEAR,
    INFORMATION_DIR,
    PARTIES_FILE,
    PROVINCES_FILE,
    REGIONS_2562,
    RESULT_CSV_FILE,
    SUMMARY_FILE,
    UNKNOWN_PARTY_ID,
    ZONES_FILE,
)
from src.infrastructure.importers._utils import (
    area_display_name,
    make_area_id,
    make_candidate_id,
)
from src.infrastructure.importers.thai_result_csv_parser import (
    ResultCsvRow,
    parse_result_csv_file,
)


logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8-sig"))
    except FileNotFoundError as e:
        raise DataSourceError("参照ファイルが見つかりません", {"path": str(path)}) from e
    except json.JSONDecodeError as e:
        raise DataSourceError(
            "参照ファイルのJSONが不正です", {"path": str(path), "error": str(e)}
        ) from e


class CsvSnapshotSource:
    """2562年のCSV・JSONファイルからのスナップショットソース実装."""

    def __init__(self, data_dir: Path, year: int = CSV_ELECTION_YEAR):
        """初期化する.

        Args:
            data_dir: information/とCSVを含むディレクトリ
            year: スナップショットの選挙年（仏暦）
        """
        self.data_dir = Path(data_dir)
        self.year = year

    async def produce_snapshot(self) -> ElectionSnapshot:
        """ファイルを読み込んでスナップショットを組み立てる."""
        logger.info("%d年のデータをCSVから読み込み中: %s", self.year, self.data_dir)
        snapshot = await asyncio.to_thread(self._build_snapshot)
        logger.info(
            "%d年: 選挙区%d件、候補者%d人を読み込みました",
            self.year,
            len(snapshot.constituencies),
            len(snapshot.candidates),
        )
        return snapshot

    def _build_snapshot(self) -> ElectionSnapshot:
        info_dir = self.data_dir / INFORMATION_DIR
        raw_provinces = _read_json(info_dir / PROVINCES_FILE)
        raw_zones = _read_json(info_dir / ZONES_FILE)
        raw_parties = _read_json(info_dir / PARTIES_FILE)
        summary_path = info_dir / SUMMARY_FILE
        raw_summary = _read_json(summary_path) if summary_path.is_file() else {}

        csv_path = self.data_dir / RESULT_CSV_FILE
        if not csv_path.is_file():
            raise DataSourceError("開票結果CSVが見つかりません", {"path": str(csv_path)})
        rows = parse_result_csv_file(csv_path)

        regions = tuple(Region(id=rid, name=name) for rid, name in REGIONS_2562)
        provinces = tuple(
            Province(id=int(p["id"]), name=p["name"], region_id=int(p["regionId"]))
            for p in raw_provinces
        )
        parties = tuple(
            Party(
                id=int(p["id"]),
                name=p["name"],
                color=p.get("color") or DEFAULT_PARTY_COLOR,
            )
            for p in raw_parties
        )
        constituencies = tuple(
            Constituency(
                id=make_area_id(int(z["provinceId"]), int(z["no"])),
                name=area_display_name(int(z["no"])),
                province_id=int(z["provinceId"]),
                area_number=int(z["no"]),
            )
            for z in raw_zones
        )

        candidates = self._build_candidates(rows, provinces, parties)
        turnout = self._build_turnout(
            constituencies, candidates, raw_zones, raw_summary
        )

        return ElectionSnapshot(
            year=self.year,
            regions=regions,
            provinces=provinces,
            parties=parties,
            constituencies=constituencies,
            candidates=candidates,
            turnout=turnout,
        )

    def _build_candidates(
        self,
        rows: list[ResultCsvRow],
        provinces: tuple[Province, ...],
        parties: tuple[Party, ...],
    ) -> tuple[Candidate, ...]:
        province_ids = {p.name.strip(): p.id for p in provinces}
        province_ids.setdefault(BANGKOK_NAME, BANGKOK_PROVINCE_ID)
        party_ids = {p.name.strip(): p.id for p in parties}

        candidates: list[Candidate] = []
        seen: set[int] = set()
        skipped = 0
        for row in rows:
            province_id = province_ids.get(row.province)
            zone_number = row.zone_number
            if province_id is None or zone_number is None:
                skipped += 1
                continue

            area_id = make_area_id(province_id, zone_number)
            number = row.candidate_number or 0
            candidate_id = make_candidate_id(area_id, number)
            if candidate_id in seen:
                continue
            seen.add(candidate_id)

            candidates.append(
                Candidate(
                    id=candidate_id,
                    full_name=row.name,
                    party_id=party_ids.get(row.party, UNKNOWN_PARTY_ID),
                    constituency_id=area_id,
                    score=row.score,
                    candidate_number=number,
                )
            )

        if skipped:
            logger.warning("県・区を解決できない行を%d件スキップしました", skipped)
        return tuple(candidates)

    def _build_turnout(
        self,
        constituencies: tuple[Constituency, ...],
        candidates: tuple[Candidate, ...],
        raw_zones: list[dict[str, Any]],
        raw_summary: dict[str, Any],
    ) -> dict[int, AreaTurnout]:
        area_votes: dict[int, int] = {}
        for candidate in candidates:
            area_votes[candidate.constituency_id] = (
                area_votes.get(candidate.constituency_id, 0) + candidate.score
            )

        zone_stats = raw_summary.get("zoneStatsMap") or {}
        zone_eligible = {
            make_area_id(int(z["provinceId"]), int(z["no"])): int(
                z.get("eligible") or 0
            )
            for z in raw_zones
        }

        turnout: dict[int, AreaTurnout] = {}
        total_votes = 0
        total_eligible = 0
        for area in constituencies:
            votes = area_votes.get(area.id, 0)
            # 速報ファイルの値を優先し、なければ区マスタの値
            province_stats = zone_stats.get(str(area.province_id), {})
            stats = province_stats.get(str(area.area_number), {})
            eligible = int(stats.get("eligible") or 0) or zone_eligible.get(area.id, 0)

            total_votes += votes
            total_eligible += eligible
            turnout[area.id] = AreaTurnout(
                total_votes=votes, percent_voter=safe_percent(votes, eligible)
            )

        turnout[NATIONWIDE_KEY] = AreaTurnout(
            total_votes=total_votes,
            percent_voter=safe_percent(total_votes, total_eligible),
        )
        return turnout

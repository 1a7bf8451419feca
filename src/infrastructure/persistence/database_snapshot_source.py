"""データベーススナップショットソースの実装 — Infrastructure layer.

IElectionSnapshotSourceのリレーショナルDB実装。選挙年（仏暦）を指定して
マスタと候補者の得票を読み込み、スナップショットに変換する。
"""

import logging

from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

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
from src.infrastructure.exceptions import DatabaseError, DataSourceError
from src.infrastructure.importers._utils import (
    area_display_name,
    make_candidate_id,
    parse_optional_int,
)


logger = logging.getLogger(__name__)


_ELECTION_QUERY = text("""
    SELECT id, year_th
    FROM elections
    WHERE year_th = :year
    ORDER BY id
    LIMIT 1
""")

_REGIONS_QUERY = text("SELECT id, name FROM regions ORDER BY id")

_PROVINCES_QUERY = text("SELECT id, name, region_id FROM provinces ORDER BY id")

_PARTIES_QUERY = text("SELECT id, name, color FROM parties ORDER BY id")

_CONSTITUENCIES_QUERY = text("""
    SELECT
        c.id,
        c.name,
        c.province_id,
        c.district_number,
        s.total_eligible_voters,
        s.turnout_voters
    FROM constituencies c
    LEFT JOIN constituency_election_stats s
        ON s.constituency_id = c.id
        AND s.election_id = :election_id
    ORDER BY c.id
""")

_PARTICIPATIONS_QUERY = text("""
    SELECT
        cp.id,
        cp.constituency_id,
        cp.candidate_no,
        cp.party_id,
        cp.score,
        p.first_name,
        p.last_name
    FROM candidate_participations cp
    JOIN persons p ON p.id = cp.person_id
    WHERE cp.election_id = :election_id
    AND cp.constituency_id IS NOT NULL
    ORDER BY cp.constituency_id, cp.candidate_no
""")


def _row_to_dict(row: Any) -> dict[str, Any]:
    if hasattr(row, "_asdict"):
        return row._asdict()  # type: ignore[attr-defined]
    if hasattr(row, "_mapping"):
        return dict(row._mapping)  # type: ignore[attr-defined]
    return dict(row)


class DatabaseSnapshotSource:
    """データベースからのスナップショットソース実装."""

    def __init__(self, session: AsyncSession, year: int):
        """初期化する.

        Args:
            session: 読み取りに使うAsyncSession
            year: 選挙年（仏暦）
        """
        self.session = session
        self.year = year

    async def produce_snapshot(self) -> ElectionSnapshot:
        """選挙年のスナップショットを組み立てる.

        Raises:
            DataSourceError: 指定年の選挙が登録されていない
            DatabaseError: データベース操作に失敗した
        """
        logger.info("%d年のデータをデータベースから取得中...", self.year)
        try:
            election_id = await self._find_election_id()
            # AsyncSessionは同時に1クエリまで
            regions = await self._fetch_all(_REGIONS_QUERY)
            provinces = await self._fetch_all(_PROVINCES_QUERY)
            parties = await self._fetch_all(_PARTIES_QUERY)
            areas = await self._fetch_all(
                _CONSTITUENCIES_QUERY, {"election_id": election_id}
            )
            participations = await self._fetch_all(
                _PARTICIPATIONS_QUERY, {"election_id": election_id}
            )
        except SQLAlchemyError as e:
            logger.error("Database error producing snapshot: %s", e)
            raise DatabaseError(
                "Failed to load election snapshot", {"year": self.year, "error": str(e)}
            ) from e

        logger.info("%d年: 候補者%d人を取得しました", self.year, len(participations))
        return self._to_snapshot(regions, provinces, parties, areas, participations)

    async def _find_election_id(self) -> int:
        result = await self.session.execute(_ELECTION_QUERY, {"year": self.year})
        row = result.fetchone()
        if row is None:
            logger.warning("%d年の選挙がデータベースに見つかりません", self.year)
            raise DataSourceError("選挙が見つかりません", {"year": self.year})
        return int(_row_to_dict(row)["id"])

    async def _fetch_all(
        self, query: Any, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        result = await self.session.execute(query, params or {})
        return [_row_to_dict(row) for row in result.fetchall()]

    def _to_snapshot(
        self,
        regions: list[dict[str, Any]],
        provinces: list[dict[str, Any]],
        parties: list[dict[str, Any]],
        areas: list[dict[str, Any]],
        participations: list[dict[str, Any]],
    ) -> ElectionSnapshot:
        candidates: list[Candidate] = []
        seen: set[int] = set()
        for row in participations:
            area_id = int(row["constituency_id"])
            number = parse_optional_int(row["candidate_no"])
            # 候補者番号が未登録なら立候補記録のIDを候補者IDに使う
            candidate_id = (
                make_candidate_id(area_id, number)
                if number is not None
                else int(row["id"])
            )
            if candidate_id in seen:
                logger.warning(
                    "重複した候補者をスキップしました: 選挙区%d 候補者ID %d",
                    area_id,
                    candidate_id,
                )
                continue
            seen.add(candidate_id)
            candidates.append(
                Candidate(
                    id=candidate_id,
                    full_name=f"{row['first_name']} {row['last_name']}".strip(),
                    party_id=int(row["party_id"]),
                    constituency_id=area_id,
                    score=max(0, int(row["score"] or 0)),
                    candidate_number=number,
                )
            )

        area_votes: dict[int, int] = {}
        for candidate in candidates:
            area_votes[candidate.constituency_id] = (
                area_votes.get(candidate.constituency_id, 0) + candidate.score
            )

        constituencies: list[Constituency] = []
        turnout: dict[int, AreaTurnout] = {}
        total_votes = 0
        total_eligible = 0
        for row in areas:
            area_id = int(row["id"])
            district = int(row["district_number"])
            constituencies.append(
                Constituency(
                    id=area_id,
                    name=row["name"] or area_display_name(district),
                    province_id=int(row["province_id"]),
                    area_number=district,
                )
            )
            eligible = int(row.get("total_eligible_voters") or 0)
            # 集計値が未登録なら候補者の得票合計
            votes = int(row.get("turnout_voters") or 0) or area_votes.get(area_id, 0)
            total_votes += votes
            total_eligible += eligible
            turnout[area_id] = AreaTurnout(
                total_votes=votes, percent_voter=safe_percent(votes, eligible)
            )

        turnout[NATIONWIDE_KEY] = AreaTurnout(
            total_votes=total_votes,
            percent_voter=safe_percent(total_votes, total_eligible),
        )

        return ElectionSnapshot(
            year=self.year,
            regions=tuple(Region(id=int(r["id"]), name=r["name"]) for r in regions),
            provinces=tuple(
                Province(id=int(p["id"]), name=p["name"], region_id=int(p["region_id"]))
                for p in provinces
            ),
            parties=tuple(
                Party(
                    id=int(p["id"]),
                    name=p["name"],
                    color=p["color"] or DEFAULT_PARTY_COLOR,
                )
                for p in parties
            ),
            constituencies=tuple(constituencies),
            candidates=tuple(candidates),
            turnout=turnout,
        )

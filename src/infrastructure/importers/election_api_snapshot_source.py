"""選挙結果APIスナップショットソースの実装 — Infrastructure layer.

IElectionSnapshotSourceの2566年（2023年）REST API実装。マスタと開票結果の
2つのJSONドキュメントを並行して取得し、スナップショットに変換する。
"""

import asyncio
import logging

from typing import Any

import httpx

from pydantic import ValidationError

from src.domain.entities import (
    DEFAULT_PARTY_COLOR,
    Candidate,
    Constituency,
    Party,
    Province,
    Region,
)
from src.domain.value_objects.election_snapshot import (
    AreaTurnout,
    ElectionSnapshot,
    ReportedPartyResult,
)
from src.infrastructure.exceptions import DataSourceError
from src.infrastructure.importers._constants import API_ELECTION_YEAR
from src.infrastructure.importers._utils import parse_optional_int
from src.infrastructure.importers.election_api_types import MasterData, ResultData


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def convert_to_snapshot(
    year: int, master: MasterData, result: ResultData
) -> ElectionSnapshot:
    """APIのレスポンスをスナップショットに変換する.

    得票のない候補者は0票として扱う。
    """
    scores: dict[int, int] = {}
    for area in result.area_ballot_scores:
        for score in area.candidates:
            scores[score.id] = score.total_votes

    candidates = tuple(
        Candidate(
            id=c.id,
            full_name=c.full_name,
            party_id=c.party_id,
            constituency_id=c.election_area_id,
            score=max(0, scores.get(c.id, 0)),
            candidate_number=c.no,
        )
        for c in master.candidates
    )

    reported: list[ReportedPartyResult] = []
    for key, party_score in result.party_scores.items():
        party_id = (
            party_score.id if party_score.id is not None else parse_optional_int(key)
        )
        if party_id is None:
            continue
        reported.append(
            ReportedPartyResult(
                party_id=party_id,
                constituency_seats=party_score.area_seats,
                party_list_seats=party_score.party_list_seats,
                total_votes=party_score.total_votes,
            )
        )

    turnout: dict[int, AreaTurnout] = {}
    for key, election_score in result.election_scores.items():
        area_id = parse_optional_int(key)
        if area_id is None:
            continue
        turnout[area_id] = AreaTurnout(
            total_votes=election_score.total_votes,
            percent_voter=election_score.percent_voter,
        )

    return ElectionSnapshot(
        year=year,
        regions=tuple(Region(id=r.id, name=r.name) for r in master.regions.values()),
        provinces=tuple(
            Province(id=p.id, name=p.name, region_id=p.region_id)
            for p in master.provinces
        ),
        parties=tuple(
            Party(id=p.id, name=p.name, color=p.color or DEFAULT_PARTY_COLOR)
            for p in master.parties.values()
        ),
        constituencies=tuple(
            Constituency(
                id=a.id, name=a.name, province_id=a.province_id, area_number=a.area_no
            )
            for a in master.election_areas
        ),
        candidates=candidates,
        turnout=turnout,
        reported_party_results=tuple(sorted(reported, key=lambda r: r.party_id)),
    )


class ElectionApiSnapshotSource:
    """選挙結果API（httpx async）からのスナップショットソース実装."""

    def __init__(
        self,
        master_data_url: str,
        result_url: str,
        year: int = API_ELECTION_YEAR,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.master_data_url = master_data_url
        self.result_url = result_url
        self.year = year
        self._external_client = client
        self._timeout = timeout

    async def produce_snapshot(self) -> ElectionSnapshot:
        """マスタと開票結果を取得してスナップショットを組み立てる."""
        logger.info("%d年のデータをAPIから取得中...", self.year)

        if self._external_client is not None:
            master_json, result_json = await self._fetch_all(self._external_client)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                master_json, result_json = await self._fetch_all(client)

        try:
            master = MasterData.model_validate(master_json)
            result = ResultData.model_validate(result_json)
        except ValidationError as e:
            logger.error("APIレスポンスの形式が不正です: %s", e)
            raise DataSourceError(
                "APIレスポンスの形式が不正です",
                {"year": self.year, "error": str(e)},
            ) from e

        snapshot = convert_to_snapshot(self.year, master, result)
        logger.info(
            "%d年: 選挙区%d件、候補者%d人を取得しました",
            self.year,
            len(snapshot.constituencies),
            len(snapshot.candidates),
        )
        return snapshot

    async def _fetch_all(self, client: httpx.AsyncClient) -> tuple[Any, Any]:
        master_json, result_json = await asyncio.gather(
            self._fetch_json(client, self.master_data_url),
            self._fetch_json(client, self.result_url),
        )
        return master_json, result_json

    async def _fetch_json(self, client: httpx.AsyncClient, url: str) -> Any:
        """JSONドキュメントを1つ取得する."""
        try:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error("APIリクエストエラー: %s %d", url, e.response.status_code)
            raise DataSourceError(
                f"APIリクエストエラー: {e.response.status_code}",
                {"url": url, "status_code": e.response.status_code},
            ) from e
        except httpx.TimeoutException as e:
            logger.error("APIリクエストタイムアウト: %s", url)
            raise DataSourceError("APIリクエストタイムアウト", {"url": url}) from e
        except httpx.HTTPError as e:
            logger.error("HTTPエラー: %s %s", url, e)
            raise DataSourceError(f"HTTPエラー: {e}", {"url": url}) from e
        except ValueError as e:
            raise DataSourceError(
                "APIレスポンスがJSONではありません", {"url": url, "error": str(e)}
            ) from e

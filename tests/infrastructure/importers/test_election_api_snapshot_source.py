"""ElectionApiSnapshotSourceのテスト."""

import httpx
import pytest

from src.infrastructure.exceptions import DataSourceError
from src.infrastructure.importers.election_api_snapshot_source import (
    ElectionApiSnapshotSource,
    convert_to_snapshot,
)
from src.infrastructure.importers.election_api_types import MasterData, ResultData


MASTER_URL = "https://example.test/master-data.json"
RESULT_URL = "https://example.test/result.json"


def _make_candidate(candidate_id: int, name: str, party_id: int, no: int) -> dict:
    return {
        "id": candidate_id,
        "fullName": name,
        "partyId": party_id,
        "electionAreaId": 1001,
        "no": no,
    }


def _make_master(**overrides: object) -> dict:
    """テスト用のmaster-data.jsonを生成."""
    defaults: dict = {
        "regions": {
            "1": {"id": 1, "name": "ภาคเหนือ"},
            "3": {"id": 3, "name": "ภาคกลาง"},
        },
        "provinces": [
            {"id": 10, "name": "กรุงเทพมหานคร", "regionId": 3, "code": "BKK"},
        ],
        "electionAreas": [
            {"id": 1001, "name": "เขต 1", "areaNo": 1, "provinceId": 10},
        ],
        "parties": {
            "1": {"id": 1, "name": "ก้าวไกล", "color": "#f47933"},
            "2": {"id": 2, "name": "เพื่อไทย"},
        },
        "candidates": [
            _make_candidate(11, "นาย ก", 1, 1),
            _make_candidate(12, "นาง ข", 2, 2),
        ],
    }
    defaults.update(overrides)
    return defaults


def _make_result(**overrides: object) -> dict:
    """テスト用のresult.jsonを生成."""
    defaults: dict = {
        "areaBallotScores": [
            {"candidates": [{"id": 11, "totalVotes": 45_000}]},
        ],
        "partyScores": {
            "1": {"id": 1, "areaSeats": 112, "partyListSeats": 39, "totalVotes": 100},
            "2": {"areaSeats": 112, "partyListSeats": 29},
        },
        "electionScores": {
            "0": {"totalVotes": 39_000_000, "percentVoter": 75.71},
            "1001": {"totalVotes": 45_000, "percentVoter": 70.0},
        },
    }
    defaults.update(overrides)
    return defaults


def _make_transport(
    master: object, result: object, status: int = 200
) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if status != 200:
            return httpx.Response(status)
        if str(request.url) == MASTER_URL:
            return httpx.Response(200, json=master)
        return httpx.Response(200, json=result)

    return httpx.MockTransport(handler)


class TestConvertToSnapshot:
    """convert_to_snapshotのテスト."""

    def test_entities(self) -> None:
        snapshot = convert_to_snapshot(
            2566,
            MasterData.model_validate(_make_master()),
            ResultData.model_validate(_make_result()),
        )
        assert [r.id for r in snapshot.regions] == [1, 3]
        assert snapshot.provinces[0].region_id == 3
        assert snapshot.constituencies[0].area_number == 1
        assert snapshot.party_by_id()[2].color == "#ccc"

    def test_missing_score_is_zero(self) -> None:
        snapshot = convert_to_snapshot(
            2566,
            MasterData.model_validate(_make_master()),
            ResultData.model_validate(_make_result()),
        )
        scores = {c.id: c.score for c in snapshot.candidates}
        assert scores == {11: 45_000, 12: 0}

    def test_reported_results_use_key_when_id_missing(self) -> None:
        snapshot = convert_to_snapshot(
            2566,
            MasterData.model_validate(_make_master()),
            ResultData.model_validate(_make_result()),
        )
        reported = {r.party_id: r for r in snapshot.reported_party_results}
        assert reported[1].party_list_seats == 39
        assert reported[2].constituency_seats == 112
        assert reported[2].total_votes is None

    def test_turnout_includes_nationwide(self) -> None:
        snapshot = convert_to_snapshot(
            2566,
            MasterData.model_validate(_make_master()),
            ResultData.model_validate(_make_result()),
        )
        assert snapshot.nationwide_turnout is not None
        assert snapshot.nationwide_turnout.percent_voter == pytest.approx(75.71)
        assert snapshot.turnout[1001].total_votes == 45_000


class TestProduceSnapshot:
    """produce_snapshotのテスト."""

    @pytest.mark.asyncio
    async def test_fetches_both_documents(self) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            if str(request.url) == MASTER_URL:
                return httpx.Response(200, json=_make_master())
            return httpx.Response(200, json=_make_result())

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            source = ElectionApiSnapshotSource(MASTER_URL, RESULT_URL, client=client)
            snapshot = await source.produce_snapshot()

        assert sorted(requested) == sorted([MASTER_URL, RESULT_URL])
        assert snapshot.year == 2566
        assert len(snapshot.candidates) == 2

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        transport = _make_transport({}, {}, status=503)
        async with httpx.AsyncClient(transport=transport) as client:
            source = ElectionApiSnapshotSource(MASTER_URL, RESULT_URL, client=client)
            with pytest.raises(DataSourceError, match="503"):
                await source.produce_snapshot()

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timeout", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            source = ElectionApiSnapshotSource(MASTER_URL, RESULT_URL, client=client)
            with pytest.raises(DataSourceError, match="タイムアウト"):
                await source.produce_snapshot()

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, content=b"<html>")
        )
        async with httpx.AsyncClient(transport=transport) as client:
            source = ElectionApiSnapshotSource(MASTER_URL, RESULT_URL, client=client)
            with pytest.raises(DataSourceError, match="JSONではありません"):
                await source.produce_snapshot()

    @pytest.mark.asyncio
    async def test_invalid_shape(self) -> None:
        master = _make_master(candidates=[{"id": "x"}])
        transport = _make_transport(master, _make_result())
        async with httpx.AsyncClient(transport=transport) as client:
            source = ElectionApiSnapshotSource(MASTER_URL, RESULT_URL, client=client)
            with pytest.raises(DataSourceError, match="形式が不正"):
                await source.produce_snapshot()

"""スナップショットソースファクトリー

選挙年と指定された種別から、適切なIElectionSnapshotSource実装を提供します。
"""

import logging

from enum import StrEnum
from pathlib import Path

import httpx

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.services.interfaces.election_snapshot_source import (
    IElectionSnapshotSource,
)
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.importers._constants import API_ELECTION_YEAR, CSV_ELECTION_YEAR
from src.infrastructure.importers.csv_snapshot_source import CsvSnapshotSource
from src.infrastructure.importers.election_api_snapshot_source import (
    ElectionApiSnapshotSource,
)
from src.infrastructure.persistence.database_snapshot_source import (
    DatabaseSnapshotSource,
)


logger = logging.getLogger(__name__)


class SourceKind(StrEnum):
    """データソースの種別."""

    API = "api"
    CSV = "csv"
    DB = "db"
    AUTO = "auto"


def resolve_source_kind(kind: SourceKind | str, year: int) -> SourceKind:
    """AUTOを年に応じた具体的な種別に解決する.

    2562年はCSV、2566年はAPI、それ以外はデータベース。
    """
    kind = SourceKind(kind)
    if kind is not SourceKind.AUTO:
        return kind
    if year == CSV_ELECTION_YEAR:
        return SourceKind.CSV
    if year == API_ELECTION_YEAR:
        return SourceKind.API
    return SourceKind.DB


class SnapshotSourceFactory:
    """スナップショットソースファクトリー"""

    @staticmethod
    def create(
        kind: SourceKind | str,
        year: int,
        *,
        session: AsyncSession | None = None,
        data_dir: Path | None = None,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> IElectionSnapshotSource:
        """種別と年からデータソースを作成

        Args:
            kind: データソースの種別（autoなら年から決定）
            year: 選挙年（仏暦）
            session: DB種別で使うAsyncSession
            data_dir: CSV種別のデータディレクトリ（省略時は設定値）
            client: API種別で使うhttpxクライアント（省略時は都度生成）
            settings: 設定（省略時はget_settings()）

        Returns:
            IElectionSnapshotSource: 種別に対応する実装

        Raises:
            ValueError: DB種別でsessionが指定されていない
        """
        settings = settings or get_settings()
        resolved = resolve_source_kind(kind, year)
        logger.info("Creating %s snapshot source for %d", resolved.value, year)

        if resolved is SourceKind.API:
            return ElectionApiSnapshotSource(
                master_data_url=settings.election_master_data_url,
                result_url=settings.election_result_url,
                year=year,
                client=client,
                timeout=settings.http_timeout,
            )
        if resolved is SourceKind.CSV:
            return CsvSnapshotSource(
                data_dir=data_dir or settings.election_2562_data_dir, year=year
            )
        if session is None:
            raise ValueError("データベースのデータソースにはsessionが必要です")
        return DatabaseSnapshotSource(session=session, year=year)

"""選挙スナップショットのデータソースのインターフェース — Domain layer."""

from typing import Protocol

from src.domain.value_objects.election_snapshot import ElectionSnapshot


class IElectionSnapshotSource(Protocol):
    """選挙スナップショットを生成するデータソースのインターフェース.

    REST API・CSV・データベースなど取得方法は問わない。分析エンジンは
    このインターフェースが返すElectionSnapshotだけに依存する。
    """

    async def produce_snapshot(self) -> ElectionSnapshot:
        """1回の選挙のスナップショットを生成する.

        Returns:
            正規化済みの選挙スナップショット
        """
        ...

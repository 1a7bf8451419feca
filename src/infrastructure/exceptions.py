"""Infrastructure layer exceptions."""

from typing import Any


class InfrastructureError(Exception):
    """インフラ層の例外の基底クラス.

    Attributes:
        message: エラーメッセージ
        details: 調査用の付加情報
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        detail_text = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({detail_text})"


class DataSourceError(InfrastructureError):
    """外部データソース（API・ファイル）の取得・解析に失敗した."""


class DatabaseError(InfrastructureError):
    """データベース操作に失敗した."""

"""ログ設定のテスト."""

import logging

from collections.abc import Iterator

import pytest

from src.common.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_configures_root_logger(self) -> None:
        setup_logging("warning")

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("verbose", json_logs=True)
        assert logging.getLogger().level == logging.INFO

    def test_get_logger_accepts_kwargs(self) -> None:
        setup_logging("INFO")
        get_logger(__name__).info("テスト", year=2566)

"""
Configuration module for the election war-room.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from src.infrastructure.config.async_database import (
    AsyncDatabase,
    async_db,
    get_async_session,
)
from src.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
    settings,
)


__all__ = [
    # Settings
    "Settings",
    "settings",
    "get_settings",
    "reload_settings",
    "find_env_file",
    "ENV_FILE_PATH",
    # Async database
    "AsyncDatabase",
    "async_db",
    "get_async_session",
]

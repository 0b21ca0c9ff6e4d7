"""
Configuration module for parrainages.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from parrainages.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
)


__all__ = [
    "ENV_FILE_PATH",
    "Settings",
    "find_env_file",
    "get_settings",
    "reload_settings",
]

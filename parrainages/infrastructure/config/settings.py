"""アプリケーション設定.

環境変数（PARRAINAGES_ プレフィックス）と .env ファイルから読み込む。
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATA_URL_TEMPLATE = (
    "https://media.lesechos.fr/infographie/embed-tracker-parrainages/data-{year}.json"
)
DEFAULT_DEMO_URLS = [
    "https://example.com",
    "https://tomfevrier.io",
    "https://lesechos.fr",
]


def find_env_file(start: Path | None = None) -> Path | None:
    """カレントディレクトリから親方向に .env を探す."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """parrainages の設定値."""

    model_config = SettingsConfigDict(
        env_prefix="PARRAINAGES_",
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_url_template: str = DEFAULT_DATA_URL_TEMPLATE
    current_year: int = 2022
    prior_year_file: Path = Path("data-2017.json")
    focus_candidate: str = "zemmour"
    demo_urls: list[str] = Field(default_factory=lambda: list(DEFAULT_DEMO_URLS))
    demo_delay_seconds: float = Field(default=2.0, ge=0)
    # Noneでタイムアウトなし
    http_timeout_seconds: float | None = 30.0
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """設定のシングルトンを返す."""
    return Settings()


def reload_settings() -> Settings:
    """キャッシュを破棄して設定を再読み込みする."""
    get_settings.cache_clear()
    return get_settings()

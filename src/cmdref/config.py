"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (CMDREF__CACHE__BACKEND=memory)
  2. cmdref.yaml            (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional; all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_DATA_DIR = platformdirs.user_data_dir("cmdref")
_DEFAULT_DB_PATH = str(Path(_DEFAULT_DATA_DIR) / "cache.db")


def _find_config_file() -> str | None:
    """Return the path of the first cmdref.yaml found, or None."""
    candidates = [
        Path("cmdref.yaml"),
        Path(platformdirs.user_config_dir("cmdref")) / "cmdref.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class SourceSettings(BaseModel):
    index_url: str = "https://unpkg.com/linux-command/dist/data.json"
    detail_url_base: str = "https://unpkg.com/linux-command/command"


class CacheSettings(BaseModel):
    catalog_ttl_days: int = 7
    detail_ttl_days: int = 30
    backend: Literal["sqlite", "memory"] = "sqlite"
    db_path: str = _DEFAULT_DB_PATH


class FetcherSettings(BaseModel):
    timeout_seconds: float = 30.0


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: CMDREF__CACHE__DETAIL_TTL_DAYS=7
        env_prefix="CMDREF__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    source: SourceSettings = SourceSettings()
    cache: CacheSettings = CacheSettings()
    fetcher: FetcherSettings = FetcherSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
        )

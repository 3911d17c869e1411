"""Application configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _default_seed_file() -> Optional[Path]:
    """Resolve the optional JSON seed file."""

    override = os.environ.get("INVENTORY_VIS_SEED_FILE")
    if override:
        return Path(override).expanduser()
    return None


def _default_trend_seed() -> Optional[int]:
    raw = os.environ.get("INVENTORY_VIS_TREND_SEED")
    if raw is None or not raw.strip():
        return None
    return int(raw)


def _default_cors_origins() -> list[str]:
    raw = os.environ.get("INVENTORY_VIS_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(slots=True)
class Settings:
    """Runtime configuration loaded from environment variables."""

    app_name: str = field(default_factory=lambda: os.environ.get("INVENTORY_VIS_APP_NAME", "Inventory Visibility"))
    host: str = field(default_factory=lambda: os.environ.get("INVENTORY_VIS_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.environ.get("INVENTORY_VIS_PORT", "4000")))
    reload: bool = field(default_factory=lambda: _env_flag("INVENTORY_VIS_RELOAD", "false"))
    log_level: str = field(default_factory=lambda: os.environ.get("INVENTORY_VIS_LOG_LEVEL", "info"))
    seed_file: Optional[Path] = field(default_factory=_default_seed_file)
    trend_seed: Optional[int] = field(default_factory=_default_trend_seed)
    max_page_size: int = field(default_factory=lambda: int(os.environ.get("INVENTORY_VIS_MAX_PAGE_SIZE", "200")))
    cors_origins: list[str] = field(default_factory=_default_cors_origins)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()

"""Application configuration loader.

Loads configuration from config/roster.yaml (or the file named by the
ROSTER_CONFIG environment variable), falling back to built-in defaults.

Usage:
    from schoolroster.config.app_config import load_app_config

    config = load_app_config()
    config.cascade.mode  # "sequential" | "atomic"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("config/roster.yaml")

CASCADE_MODES = ("sequential", "atomic")


@dataclass
class DatabaseConfig:
    """SQLite database settings."""

    path: Path = Path("db/roster.db")


@dataclass
class CascadeConfig:
    """How dependent repair and deletion are committed.

    sequential: repair and delete are two separate store transactions.
    atomic: both run inside a single transaction.
    """

    mode: str = "sequential"


@dataclass
class ApiConfig:
    """Web API settings."""

    title: str = "School Roster API"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class AppConfig:
    """Application-wide configuration."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    cascade: CascadeConfig = field(default_factory=CascadeConfig)
    api: ApiConfig = field(default_factory=ApiConfig)


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "database": {"path": "db/roster.db"},
        "cascade": {"mode": "sequential"},
        "api": {"title": "School Roster API", "cors_origins": ["*"]},
    }


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    defaults = _get_defaults()

    db_data = {**defaults["database"], **(data.get("database") or {})}
    db_path = os.environ.get("ROSTER_DB_PATH") or db_data["path"]

    cascade_data = {**defaults["cascade"], **(data.get("cascade") or {})}
    mode = cascade_data["mode"]
    if mode not in CASCADE_MODES:
        raise ValueError(
            f"Unknown cascade mode '{mode}', expected one of {CASCADE_MODES}"
        )

    api_data = {**defaults["api"], **(data.get("api") or {})}

    return AppConfig(
        database=DatabaseConfig(path=Path(db_path)),
        cascade=CascadeConfig(mode=mode),
        api=ApiConfig(
            title=api_data["title"],
            cors_origins=list(api_data["cors_origins"]),
        ),
    )


def get_config_file() -> Path:
    """Resolve the config file path, honouring ROSTER_CONFIG."""
    override = os.environ.get("ROSTER_CONFIG")
    return Path(override) if override else CONFIG_FILE


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.

    Raises:
        ValueError: If the file names an unknown cascade mode
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    config_file = get_config_file()
    data: dict[str, Any]

    if config_file.exists():
        logger.debug("loading_app_config", source=str(config_file))
        data = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None

"""Configuration package for the school roster."""

from schoolroster.config.app_config import (
    ApiConfig,
    AppConfig,
    CascadeConfig,
    DatabaseConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "ApiConfig",
    "AppConfig",
    "CascadeConfig",
    "DatabaseConfig",
    "clear_config_cache",
    "load_app_config",
]

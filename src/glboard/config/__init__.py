"""Configuration - Dashboard settings and the persisted sync clock."""

from glboard.config.env import config_from_env
from glboard.config.exceptions import ConfigError
from glboard.config.models import (
    DEFAULT_REFRESH_INTERVAL,
    DEFAULT_TILE_COUNT,
    DashboardConfig,
    DisplayConfig,
    GitLabConfig,
)
from glboard.config.store import CONFIG_KEY, ConfigStore

__all__ = [
    "CONFIG_KEY",
    "DEFAULT_REFRESH_INTERVAL",
    "DEFAULT_TILE_COUNT",
    "ConfigError",
    "ConfigStore",
    "DashboardConfig",
    "DisplayConfig",
    "GitLabConfig",
    "config_from_env",
]

"""ConfigStore - Loads and saves the dashboard configuration."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import ValidationError

from glboard.config.exceptions import ConfigError
from glboard.config.models import DashboardConfig, GitLabConfig
from glboard.logging import get_logger

if TYPE_CHECKING:
    from glboard.state_store import StateStore

logger = get_logger("config")

CONFIG_KEY = "config"


class ConfigStore:
    """Dashboard configuration persisted as JSON in the state store."""

    def __init__(self, state_store: StateStore, key: str = CONFIG_KEY) -> None:
        self.state_store = state_store
        self.key = key

    def load(self) -> DashboardConfig:
        """Load the stored configuration.

        Returns:
            The stored configuration, or defaults (no GitLab section) if
            nothing was saved yet.

        Raises:
            ConfigError: If the stored document fails validation
        """
        raw = self.state_store.get(self.key)
        if raw is None:
            return DashboardConfig()
        try:
            return DashboardConfig.model_validate_json(raw)
        except ValidationError as e:
            logger.error("Stored configuration under %r failed validation", self.key)
            raise ConfigError(f"Stored configuration is invalid: {e}") from e

    def save(self, config: DashboardConfig) -> None:
        """Replace the stored configuration."""
        self.state_store.put(self.key, config.model_dump_json())

    def synced(self, synced_at: datetime) -> DashboardConfig:
        """Return the stored configuration with last_update set, unsaved.

        Reloads first so concurrent edits to other fields survive.
        """
        config = self.load()
        if config.gitlab is None:
            config.gitlab = GitLabConfig()
        config.gitlab.last_update = synced_at
        return config

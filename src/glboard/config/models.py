"""Pydantic models for dashboard configuration."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

DEFAULT_REFRESH_INTERVAL = 15  # minutes
DEFAULT_TILE_COUNT = 15
DEFAULT_PAGE_FLIP_INTERVAL = 60.0  # seconds
DEFAULT_SYNC_CHECK_INTERVAL = 60.0  # seconds


class GitLabConfig(BaseModel):
    """Connection settings and sync clock for the GitLab instance."""

    host: str = Field(default="", description="GitLab instance URL")
    token: str = Field(default="", description="Access token with read_api scope")
    refresh_interval: int = Field(
        default=DEFAULT_REFRESH_INTERVAL,
        ge=1,
        description="Minutes between data refreshes",
    )
    max_project_count: int | None = Field(
        default=None,
        ge=1,
        description="Upper bound on synchronized projects (None = all)",
    )
    last_update: datetime | None = Field(
        default=None,
        description="Time of the last successful sync",
    )

    @property
    def has_credentials(self) -> bool:
        return bool(self.host.strip()) and bool(self.token.strip())


class DisplayConfig(BaseModel):
    """Board layout and timer periods."""

    number_of_pipelines: int = Field(
        default=DEFAULT_TILE_COUNT,
        ge=1,
        description="Tiles per primary board page",
    )
    page_flip_interval: float = Field(
        default=DEFAULT_PAGE_FLIP_INTERVAL,
        gt=0,
        description="Seconds between automatic page advances",
    )
    sync_check_interval: float = Field(
        default=DEFAULT_SYNC_CHECK_INTERVAL,
        gt=0,
        description="Seconds between staleness checks",
    )


class DashboardConfig(BaseModel):
    """Top-level dashboard configuration."""

    gitlab: GitLabConfig | None = None
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @property
    def page_size(self) -> int:
        return self.display.number_of_pipelines

"""Overlay environment variables onto a dashboard configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ValidationError

from glboard.config.exceptions import ConfigError
from glboard.config.models import DashboardConfig, GitLabConfig

# Environment variable -> (section, field)
ENV_FIELDS = {
    "GITLAB_HOST": ("gitlab", "host"),
    "GITLAB_TOKEN": ("gitlab", "token"),
    "GLBOARD_REFRESH_INTERVAL": ("gitlab", "refresh_interval"),
    "GLBOARD_MAX_PROJECTS": ("gitlab", "max_project_count"),
    "GLBOARD_TILE_COUNT": ("display", "number_of_pipelines"),
    "GLBOARD_PAGE_FLIP_INTERVAL": ("display", "page_flip_interval"),
}


def config_from_env(
    base: DashboardConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> DashboardConfig:
    """Return base with any set environment variables applied on top.

    Empty variables are ignored. The sync clock (``last_update``) is never
    taken from the environment.

    Raises:
        ConfigError: If a variable holds an invalid value
    """
    if environ is None:
        environ = os.environ
    config = base if base is not None else DashboardConfig()

    updates: dict[str, dict[str, str]] = {"gitlab": {}, "display": {}}
    for var, (section, field) in ENV_FIELDS.items():
        value = environ.get(var, "").strip()
        if value:
            updates[section][field] = value

    if not updates["gitlab"] and not updates["display"]:
        return config

    data = config.model_dump()
    if updates["gitlab"]:
        gitlab = data.get("gitlab") or GitLabConfig().model_dump()
        gitlab.update(updates["gitlab"])
        data["gitlab"] = gitlab
    data["display"].update(updates["display"])

    try:
        return DashboardConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in environment: {e}") from e

"""ProjectCache - Persists the synchronized project list as one document."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from glboard.gitlab.models import Project
from glboard.logging import get_logger

if TYPE_CHECKING:
    from glboard.state_store import StateStore

logger = get_logger("cache")

CACHE_KEY = "GitLab"


class ProjectCache:
    """Ordered project list stored under a single state store key.

    ``store`` replaces the whole list; there is no merging with what was
    stored before.
    """

    def __init__(self, state_store: StateStore, key: str = CACHE_KEY) -> None:
        self.state_store = state_store
        self.key = key

    def load(self) -> list[Project]:
        """Return the cached projects, or an empty list if none are usable."""
        raw = self.state_store.get(self.key)
        if raw is None:
            return []
        try:
            return [Project.from_dict(item) for item in json.loads(raw)]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable project cache under %r: %s", self.key, e)
            return []

    def dump(self, projects: list[Project]) -> str:
        """Serialize projects to the stored document format."""
        return json.dumps([project.to_dict() for project in projects])

    def store(self, projects: list[Project]) -> None:
        """Replace the cached projects."""
        self.state_store.put(self.key, self.dump(projects))
        logger.debug("Cached %d project(s)", len(projects))

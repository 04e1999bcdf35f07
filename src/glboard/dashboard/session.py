"""DashboardSession - Long-lived display state driven by two timers."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from glboard.rotation import PageRotationController, View, filter_projects_with_pipelines, select_view
from glboard.scheduler import Scheduler
from glboard.sync import AbortReason, SyncResult, is_stale

if TYPE_CHECKING:
    from glboard.cache import ProjectCache
    from glboard.config import ConfigStore, DashboardConfig
    from glboard.gitlab import Project
    from glboard.sync import SyncEngine

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DashboardSession:
    """One running dashboard.

    Starts from the cached projects, refreshes them when the sync clock says
    they are stale, and rotates through the board pages. The ``sync`` and
    ``rotate`` timers are independent tasks on the scheduler.

    When a sync aborts, the projects already on display are kept rather
    than replaced by an empty list.
    """

    def __init__(
        self,
        config_store: ConfigStore,
        cache: ProjectCache,
        engine: SyncEngine,
        scheduler: Scheduler | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.config_store = config_store
        self.cache = cache
        self.engine = engine
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.clock = clock
        self.cancel = threading.Event()
        self._lock = threading.Lock()

        config = config_store.load()
        self._projects = cache.load()
        self.controller = PageRotationController(config.page_size)
        self._loading = self._is_due(config) and not self._projects

    @property
    def projects(self) -> list[Project]:
        with self._lock:
            return list(self._projects)

    @property
    def loading(self) -> bool:
        """True until the first sync attempt when there was nothing cached."""
        return self._loading

    def _is_due(self, config: DashboardConfig) -> bool:
        if config.gitlab is None:
            return is_stale(None, now=self.clock())
        return is_stale(config.gitlab.last_update, config.gitlab.refresh_interval, self.clock())

    def sync_tick(self) -> SyncResult | None:
        """Sync if the data is stale.

        Returns:
            The sync result, or None if no sync was due.
        """
        config = self.config_store.load()
        if not self._is_due(config):
            logger.debug("Dashboard data is fresh, skipping sync")
            return None
        return self._sync(config)

    def refresh(self) -> SyncResult:
        """Sync now regardless of the sync clock."""
        return self._sync(self.config_store.load())

    def _sync(self, config: DashboardConfig) -> SyncResult:
        self.controller.page_size = config.page_size
        result = self.engine.run(config, cancel=self.cancel)
        if result.reason == AbortReason.SYNC_IN_PROGRESS:
            return result

        with self._lock:
            if result.ok:
                self._projects = list(result.projects)
                self.controller.reset()
            self._loading = False

        if not result.ok:
            logger.info(
                "Sync aborted (%s), keeping %d displayed project(s)",
                result.reason,
                len(self._projects),
            )
        return result

    def rotate_tick(self) -> int:
        """Advance to the next page and return it."""
        count = len(filter_projects_with_pipelines(self.projects))
        return self.controller.advance(count).current_page

    def select_page(self, page: int) -> int:
        """Show a page chosen by the user."""
        return self.controller.select(page).current_page

    def current_view(self) -> View | None:
        """The view for the current page, None while the first sync is pending."""
        if self._loading:
            return None
        return select_view(self.projects, self.controller.current_page, self.controller.page_size)

    def start(self) -> None:
        """Register and start the sync and rotate timers."""
        display = self.config_store.load().display
        self.cancel.clear()
        self.scheduler.add("sync", display.sync_check_interval, self.sync_tick)
        self.scheduler.add("rotate", display.page_flip_interval, self.rotate_tick)
        self.scheduler.start()
        logger.info("Dashboard session started with %d cached project(s)", len(self._projects))

    def stop(self, timeout: float | None = 5.0) -> None:
        """Cancel any running sync and stop both timers."""
        self.cancel.set()
        self.scheduler.stop(timeout)
        logger.info("Dashboard session stopped")

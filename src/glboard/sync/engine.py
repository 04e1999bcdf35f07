"""SyncEngine - Refreshes the project cache from GitLab."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from glboard.config import ConfigError
from glboard.gitlab import LIST_PAGE_SIZE, GitLabClient, GitLabError
from glboard.logging import sanitize_for_log
from glboard.state_store import StateStoreError
from glboard.sync.models import AbortReason, FetchFailure, SyncResult

if TYPE_CHECKING:
    from glboard.cache import ProjectCache
    from glboard.config import ConfigStore, DashboardConfig
    from glboard.gitlab import Pipeline, Project

logger = logging.getLogger(__name__)

# Pipeline query: newest run only, at most two page requests
PIPELINE_PAGE_SIZE = 1
PIPELINE_MAX_PAGES = 2

ClientFactory = Callable[[str, str], GitLabClient]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SyncEngine:
    """Fetches projects and their latest pipelines, then replaces the cache.

    A run either replaces the cache and advances the sync clock, or leaves
    both untouched and reports why. Pipeline fetch failures for single
    projects do not end the run; those projects are cached without a
    pipeline. Errors are never raised to the caller.

    Pipelines are fetched one project at a time unless ``max_concurrency``
    is raised, which keeps request bursts against GitLab small.
    """

    def __init__(
        self,
        cache: ProjectCache,
        config_store: ConfigStore,
        client_factory: ClientFactory = GitLabClient,
        max_concurrency: int = 1,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the SyncEngine.

        Args:
            cache: Cache replaced on every successful run.
            config_store: Receives the new sync time after a successful run.
                Must share the state store of cache, so both are written in
                one transaction.
            client_factory: Builds a GitLab client from (host, token).
            max_concurrency: Parallel pipeline fetches; 1 means sequential.
            clock: Source of the current time.
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        if cache.state_store is not config_store.state_store:
            raise ValueError("cache and config_store must use the same state store")
        self.cache = cache
        self.config_store = config_store
        self.client_factory = client_factory
        self.max_concurrency = max_concurrency
        self.clock = clock
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._lock.locked()

    def run(self, config: DashboardConfig, cancel: threading.Event | None = None) -> SyncResult:
        """Run one sync.

        Args:
            config: Current dashboard configuration.
            cancel: Checked before each pipeline fetch; once set the run
                aborts without writing anything.

        Returns:
            SyncResult describing the outcome.
        """
        if not self._lock.acquire(blocking=False):
            logger.info("Sync already in progress, skipping")
            return SyncResult.aborted(AbortReason.SYNC_IN_PROGRESS, "Another sync is running")
        try:
            return self._run(config, cancel)
        finally:
            self._lock.release()

    def _run(self, config: DashboardConfig, cancel: threading.Event | None) -> SyncResult:
        gitlab = config.gitlab
        if gitlab is None or not gitlab.has_credentials:
            logger.info("Can't update dashboard data: missing GitLab configuration")
            return SyncResult.aborted(AbortReason.CONFIG_MISSING, "GitLab host or token missing")

        logger.debug("Starting update of dashboard data")
        client = self.client_factory(gitlab.host, gitlab.token)
        try:
            try:
                projects = client.list_projects(
                    max_count=gitlab.max_project_count,
                    per_page=LIST_PAGE_SIZE,
                )
            except GitLabError as e:
                message = sanitize_for_log(str(e))
                logger.warning("Failed to get list of projects: %s", message)
                return SyncResult.aborted(AbortReason.LIST_FETCH_FAILURE, message)

            failures = self._attach_pipelines(client, projects, cancel)
        finally:
            client.close()

        if failures is None:
            logger.info("Sync cancelled before completion, cache left unchanged")
            return SyncResult.aborted(AbortReason.CANCELLED, "Sync cancelled")

        synced_at = self.clock()
        try:
            self._persist(projects, synced_at)
        except (StateStoreError, ConfigError) as e:
            message = sanitize_for_log(str(e))
            logger.error("Failed to store sync results: %s", message)
            return SyncResult.aborted(AbortReason.PERSIST_FAILURE, message)
        gitlab.last_update = synced_at

        logger.info(
            "Sync complete: %d project(s), %d pipeline fetch failure(s)",
            len(projects),
            len(failures),
        )
        return SyncResult.synced(projects, failures)

    def _persist(self, projects: list[Project], synced_at: datetime) -> None:
        """Write the cache and the new sync time in one transaction."""
        config = self.config_store.synced(synced_at)
        self.cache.state_store.put_many(
            {
                self.cache.key: self.cache.dump(projects),
                self.config_store.key: config.model_dump_json(),
            }
        )

    def _attach_pipelines(
        self,
        client: GitLabClient,
        projects: list[Project],
        cancel: threading.Event | None,
    ) -> list[FetchFailure] | None:
        """Set each project's pipeline in place.

        Returns:
            The per-project failures, or None if the run was cancelled.
        """

        def cancelled() -> bool:
            return cancel is not None and cancel.is_set()

        def fetch(project: Project) -> tuple[Pipeline | None, FetchFailure | None] | None:
            if cancelled():
                return None
            return self._fetch_pipeline(client, project)

        if self.max_concurrency == 1:
            outcomes = []
            for project in projects:
                outcome = fetch(project)
                if outcome is None:
                    return None
                outcomes.append(outcome)
        else:
            with ThreadPoolExecutor(
                max_workers=self.max_concurrency, thread_name_prefix="glboard-sync"
            ) as pool:
                outcomes = list(pool.map(fetch, projects))
            if cancelled() or any(outcome is None for outcome in outcomes):
                return None

        failures = []
        for project, (pipeline, failure) in zip(projects, outcomes, strict=True):
            project.pipeline = pipeline
            if failure is not None:
                failures.append(failure)
        return failures

    def _fetch_pipeline(
        self, client: GitLabClient, project: Project
    ) -> tuple[Pipeline | None, FetchFailure | None]:
        logger.debug("Getting pipeline status for project %s", project.name)
        try:
            pipelines = client.list_pipelines(
                project.id,
                per_page=PIPELINE_PAGE_SIZE,
                max_pages=PIPELINE_MAX_PAGES,
                order_by="updated_at",
                sort="desc",
            )
        except GitLabError as e:
            message = sanitize_for_log(str(e))
            logger.warning("Failed to get pipeline status for project %s: %s", project.name, message)
            return None, FetchFailure(project.id, project.name, message)
        return (pipelines[0] if pipelines else None), None

"""Data models for the Sync module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glboard.gitlab import Project


class SyncStatus(StrEnum):
    """Outcome of a sync run."""

    SYNCED = "synced"
    ABORTED = "aborted"


class AbortReason(StrEnum):
    """Why a sync run ended without touching the cache."""

    CONFIG_MISSING = "config_missing"
    LIST_FETCH_FAILURE = "list_fetch_failure"
    CANCELLED = "cancelled"
    SYNC_IN_PROGRESS = "sync_in_progress"
    PERSIST_FAILURE = "persist_failure"


@dataclass
class FetchFailure:
    """A project whose pipeline could not be fetched during a sync."""

    project_id: int
    project_name: str
    message: str


@dataclass
class SyncResult:
    """Result of a sync operation.

    Attributes:
        status: SYNCED if the cache was replaced, ABORTED otherwise.
        projects: The synchronized projects; empty when aborted.
        reason: Abort reason, None when synced.
        failures: Per-project pipeline fetch failures (sync still succeeded).
        message: Human-readable detail for aborted runs.
    """

    status: SyncStatus
    projects: list[Project] = field(default_factory=list)
    reason: AbortReason | None = None
    failures: list[FetchFailure] = field(default_factory=list)
    message: str = ""

    @classmethod
    def synced(cls, projects: list[Project], failures: list[FetchFailure]) -> SyncResult:
        return cls(status=SyncStatus.SYNCED, projects=projects, failures=failures)

    @classmethod
    def aborted(cls, reason: AbortReason, message: str = "") -> SyncResult:
        return cls(status=SyncStatus.ABORTED, reason=reason, message=message)

    @property
    def ok(self) -> bool:
        return self.status == SyncStatus.SYNCED

"""Sync - Mirrors GitLab projects and pipelines into the local cache."""

from glboard.sync.engine import SyncEngine
from glboard.sync.models import AbortReason, FetchFailure, SyncResult, SyncStatus
from glboard.sync.staleness import is_stale

__all__ = [
    "AbortReason",
    "FetchFailure",
    "SyncEngine",
    "SyncResult",
    "SyncStatus",
    "is_stale",
]

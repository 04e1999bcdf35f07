"""State Store - Key-value persistence for the project cache and configuration."""

from glboard.state_store.exceptions import EntryNotFoundError, StateStoreError
from glboard.state_store.models import Entry
from glboard.state_store.store import StateStore

__all__ = [
    "Entry",
    "EntryNotFoundError",
    "StateStore",
    "StateStoreError",
]

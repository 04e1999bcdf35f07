"""Custom exceptions for State Store."""


class StateStoreError(Exception):
    """Base exception for State Store errors."""


class EntryNotFoundError(StateStoreError):
    """No entry is stored under the given key."""

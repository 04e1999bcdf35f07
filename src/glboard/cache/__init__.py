"""Project cache - Last successfully synchronized project list."""

from glboard.cache.cache import CACHE_KEY, ProjectCache

__all__ = [
    "CACHE_KEY",
    "ProjectCache",
]

"""Decides whether cached data is due for a refresh."""

from __future__ import annotations

from datetime import UTC, datetime

from glboard.config.models import DEFAULT_REFRESH_INTERVAL


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def is_stale(
    last_update: datetime | None,
    refresh_interval: int | None = DEFAULT_REFRESH_INTERVAL,
    now: datetime | None = None,
) -> bool:
    """Return True when a refresh is due.

    Never-synced data is always stale. Otherwise the data is stale once the
    minutes between ``last_update`` and ``now`` reach ``refresh_interval``.
    The distance is absolute, so a clock that moved backwards also counts.

    Args:
        last_update: Time of the last successful sync, None if never
        refresh_interval: Minutes between refreshes; unset or non-positive
            values fall back to the default of 15
        now: Reference time, defaults to the current time
    """
    if last_update is None:
        return True
    if not refresh_interval or refresh_interval <= 0:
        refresh_interval = DEFAULT_REFRESH_INTERVAL
    if now is None:
        now = datetime.now(UTC)

    elapsed_minutes = abs((_as_utc(now) - _as_utc(last_update)).total_seconds()) / 60
    return elapsed_minutes >= refresh_interval

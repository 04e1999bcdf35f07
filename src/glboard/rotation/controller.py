"""Page rotation state machine.

The primary board spans ``ceil(count / page_size)`` pages and the secondary
board always adds exactly one more. Transitions are pure functions over
``RotationState``; ``PageRotationController`` wraps them for the timer and
user-input paths that share one state.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SECONDARY_PAGES = 1


@dataclass(frozen=True)
class RotationState:
    """Currently displayed page."""

    current_page: int = 0


@dataclass(frozen=True)
class Advance:
    """Move to the next page, wrapping after the last one."""


@dataclass(frozen=True)
class SelectPage:
    """Jump to a page chosen by the user."""

    page: int


@dataclass(frozen=True)
class Reset:
    """Return to the first page, e.g. after new data arrived."""


Command = Advance | SelectPage | Reset


def primary_pages(count: int, page_size: int) -> int:
    """Number of primary board pages for count projects."""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return math.ceil(count / page_size)


def total_pages(count: int, page_size: int) -> int:
    """Primary board pages plus the single secondary board page."""
    return primary_pages(count, page_size) + SECONDARY_PAGES


def advance(state: RotationState, total: int) -> RotationState:
    return RotationState(current_page=(state.current_page + 1) % total)


def select(state: RotationState, page: int) -> RotationState:  # noqa: ARG001
    # Manual selection is not wrapped; callers pass a valid index
    return RotationState(current_page=page)


def apply(state: RotationState, command: Command, total: int) -> RotationState:
    """Apply a command to a state and return the new state."""
    if isinstance(command, Advance):
        return advance(state, total)
    if isinstance(command, SelectPage):
        return select(state, command.page)
    if isinstance(command, Reset):
        return RotationState()
    raise TypeError(f"Unknown rotation command: {command!r}")


class PageRotationController:
    """Holds the rotation state for one display session."""

    def __init__(self, page_size: int, state: RotationState | None = None) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self._state = state if state is not None else RotationState()
        self._lock = threading.Lock()

    @property
    def state(self) -> RotationState:
        return self._state

    @property
    def current_page(self) -> int:
        return self._state.current_page

    def total_pages(self, count: int) -> int:
        return total_pages(count, self.page_size)

    def dispatch(self, command: Command, count: int) -> RotationState:
        """Apply a command given the current number of primary board projects."""
        with self._lock:
            self._state = apply(self._state, command, self.total_pages(count))
            logger.debug("Rotation %s -> page %d", type(command).__name__, self._state.current_page)
            return self._state

    def advance(self, count: int) -> RotationState:
        return self.dispatch(Advance(), count)

    def select(self, page: int) -> RotationState:
        return self.dispatch(SelectPage(page), 0)

    def reset(self) -> RotationState:
        return self.dispatch(Reset(), 0)

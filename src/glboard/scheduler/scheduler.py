"""Scheduler - Runs named callbacks at fixed periods until stopped."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class PeriodicTask:
    """Calls a function every ``interval`` seconds on a daemon thread.

    The first call happens one interval after ``start``. Waiting is done on
    a stop event, so ``cancel`` interrupts the wait immediately; a tick that
    is already running finishes first. Exceptions from a tick are logged and
    the task keeps running.
    """

    def __init__(self, name: str, interval: float, callback: Callable[[], object]) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.name = name
        self.interval = interval
        self.callback = callback
        self.ticks = 0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop,
            name=f"glboard-{self.name}",
            daemon=True,
        )
        self._thread.start()
        logger.info("Started task %s (every %.1fs)", self.name, self.interval)

    def cancel(self, timeout: float | None = None) -> None:
        """Stop the task and wait up to timeout seconds for its thread."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        logger.info("Stopped task %s", self.name)

    def run_once(self) -> None:
        """Execute one tick in the calling thread."""
        self.ticks += 1
        try:
            self.callback()
        except Exception as e:
            logger.exception("Task %s failed: %s", self.name, e)

    def _loop(self) -> None:
        while not self._stop.wait(self.interval):
            self.run_once()


class Scheduler:
    """Owns a set of independent periodic tasks."""

    def __init__(self) -> None:
        self._tasks: dict[str, PeriodicTask] = {}

    @property
    def tasks(self) -> dict[str, PeriodicTask]:
        return dict(self._tasks)

    def add(self, name: str, interval: float, callback: Callable[[], object]) -> PeriodicTask:
        """Register a task. Replaces (and cancels) a task with the same name."""
        existing = self._tasks.pop(name, None)
        if existing is not None:
            existing.cancel()
        task = PeriodicTask(name, interval, callback)
        self._tasks[name] = task
        return task

    def start(self) -> None:
        for task in self._tasks.values():
            task.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        """Cancel every task."""
        for task in self._tasks.values():
            task.cancel(timeout)

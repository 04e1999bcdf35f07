"""Scheduler - Cancellable periodic tasks on background threads."""

from glboard.scheduler.scheduler import PeriodicTask, Scheduler

__all__ = [
    "PeriodicTask",
    "Scheduler",
]

"""Dashboard - Display session combining sync, cache and page rotation."""

from glboard.dashboard.session import DashboardSession

__all__ = [
    "DashboardSession",
]

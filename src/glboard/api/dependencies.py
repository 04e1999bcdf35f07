"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from glboard.dashboard import DashboardSession

# Global DashboardSession instance (initialized on app startup)
_session: DashboardSession | None = None


def init_session(session: DashboardSession) -> DashboardSession:
    """Initialize the global DashboardSession instance."""
    global _session  # noqa: PLW0603
    _session = session
    return _session


def close_session() -> None:
    """Stop and drop the global DashboardSession instance."""
    global _session  # noqa: PLW0603
    if _session is not None:
        _session.stop()
        _session = None


def get_session() -> Generator[DashboardSession, None, None]:
    """Dependency that provides the DashboardSession instance."""
    if _session is None:
        raise RuntimeError("DashboardSession not initialized. Call init_session() first.")
    yield _session


# Type alias for dependency injection
SessionDep = Annotated[DashboardSession, Depends(get_session)]

"""Shared pytest fixtures and configuration."""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from glboard.gitlab import Pipeline, Project
from glboard.state_store import StateStore


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def store():
    """Create an in-memory StateStore."""
    s = StateStore(":memory:")
    yield s
    s.close()


def _pipeline(pipeline_id: int = 1, status: str = "success") -> Pipeline:
    return Pipeline(
        id=pipeline_id,
        status=status,
        updated_at=datetime(2026, 10, 1, 12, 0, tzinfo=UTC),
        ref="main",
    )


def _project(project_id: int, name: str, with_pipeline: bool = True) -> Project:
    return Project(
        id=project_id,
        name=name,
        web_url=f"https://gitlab.example.com/group/{name}",
        pipeline=_pipeline(project_id * 10) if with_pipeline else None,
    )


@pytest.fixture
def make_pipeline() -> Callable[..., Pipeline]:
    """Factory for pipelines with a fixed timestamp."""
    return _pipeline


@pytest.fixture
def make_project() -> Callable[..., Project]:
    """Factory for projects, with a pipeline unless with_pipeline=False."""
    return _project

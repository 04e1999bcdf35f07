"""Unit tests for project routes."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from glboard.api.dependencies import get_session
from glboard.api.routes import projects


@pytest.fixture
def session() -> MagicMock:
    """Create a mock DashboardSession."""
    return MagicMock()


@pytest.fixture
def app(session: MagicMock):
    """Create a test FastAPI app with mocked dependencies."""
    app = FastAPI()

    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    app.include_router(projects.router, prefix="/api/v1")
    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.unit
class TestListProjects:
    """Tests for GET /api/v1/projects."""

    def test_list_empty(self, client: TestClient, session: MagicMock) -> None:
        """Test listing with nothing cached."""
        session.projects = []

        response = client.get("/api/v1/projects")

        assert response.status_code == 200
        assert response.json() == {"data": [], "error": None}

    def test_list_keeps_cache_order(self, client: TestClient, session: MagicMock, make_project) -> None:
        """Projects come back unsorted and include those without a pipeline."""
        session.projects = [make_project(2, "zeta"), make_project(1, "alpha", with_pipeline=False)]

        response = client.get("/api/v1/projects")

        data = response.json()["data"]
        assert [p["name"] for p in data] == ["zeta", "alpha"]
        assert data[0]["web_url"] == "https://gitlab.example.com/group/zeta"
        assert data[0]["pipeline"]["id"] == 20
        assert data[0]["pipeline"]["ref"] == "main"
        assert data[1]["pipeline"] is None

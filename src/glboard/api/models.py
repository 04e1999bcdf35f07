"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Project models


class PipelineResponse(BaseModel):
    """Latest pipeline of a project."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    status: str
    updated_at: datetime
    ref: str | None = None
    web_url: str | None = None


class ProjectResponse(BaseModel):
    """Response model for a cached project."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    web_url: str | None = None
    pipeline: PipelineResponse | None = None


def project_to_response(project: Any) -> ProjectResponse:
    """Convert a Project dataclass to ProjectResponse."""
    return ProjectResponse.model_validate(project)


# View models


class ViewResponse(BaseModel):
    """The page currently on display."""

    loading: bool
    board: str | None = None
    page: int
    total_pages: int
    projects: list[ProjectResponse] = Field(default_factory=list)


class PageSelect(BaseModel):
    """Request model for manual page selection."""

    page: int = Field(..., ge=0)


# Sync models


class FetchFailureResponse(BaseModel):
    """A project whose pipeline could not be fetched."""

    model_config = ConfigDict(from_attributes=True)

    project_id: int
    project_name: str
    message: str


class SyncResultResponse(BaseModel):
    """Response model for a manual sync."""

    status: str
    reason: str | None = None
    message: str = ""
    project_count: int
    failures: list[FetchFailureResponse] = Field(default_factory=list)

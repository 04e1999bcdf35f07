"""Data models for GitLab projects and pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value)


@dataclass
class Pipeline:
    """Most recent pipeline run of a project."""

    id: int
    status: str  # GitLab pipeline status, e.g. "success", "failed", "running"
    updated_at: datetime
    ref: str | None = None
    web_url: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Pipeline:
        """Build from a GitLab ``/pipelines`` list item."""
        return cls(
            id=int(data["id"]),
            status=str(data["status"]),
            updated_at=_parse_timestamp(data["updated_at"]),
            ref=data.get("ref"),
            web_url=data.get("web_url"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "updated_at": self.updated_at.isoformat(),
            "ref": self.ref,
            "web_url": self.web_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pipeline:
        return cls(
            id=int(data["id"]),
            status=str(data["status"]),
            updated_at=_parse_timestamp(data["updated_at"]),
            ref=data.get("ref"),
            web_url=data.get("web_url"),
        )


@dataclass
class Project:
    """A tracked GitLab project, with its latest pipeline when one exists."""

    id: int
    name: str
    web_url: str | None = None
    pipeline: Pipeline | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any], pipeline: Pipeline | None = None) -> Project:
        """Build from a GitLab ``/projects`` list item."""
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            web_url=data.get("web_url"),
            pipeline=pipeline,
        )

    @property
    def has_pipeline(self) -> bool:
        return self.pipeline is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "web_url": self.web_url,
            "pipeline": self.pipeline.to_dict() if self.pipeline is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        pipeline_data = data.get("pipeline")
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            web_url=data.get("web_url"),
            pipeline=Pipeline.from_dict(pipeline_data) if pipeline_data else None,
        )

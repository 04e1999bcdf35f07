"""REST API for glboard."""

from glboard.api.app import app, create_app
from glboard.api.models import (
    APIResponse,
    ProjectResponse,
    SyncResultResponse,
    ViewResponse,
)

__all__ = [
    "APIResponse",
    "ProjectResponse",
    "SyncResultResponse",
    "ViewResponse",
    "app",
    "create_app",
]

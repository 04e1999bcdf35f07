"""Cached project endpoints."""

from fastapi import APIRouter

from glboard.api.dependencies import SessionDep
from glboard.api.models import APIResponse, ProjectResponse, project_to_response

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=APIResponse[list[ProjectResponse]])
def list_projects(session: SessionDep) -> APIResponse[list[ProjectResponse]]:
    """List all displayed projects in cache order, with or without a pipeline."""
    return APIResponse(data=[project_to_response(p) for p in session.projects])

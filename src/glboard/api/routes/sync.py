"""Sync endpoint for manual refresh."""

from fastapi import APIRouter

from glboard.api.dependencies import SessionDep
from glboard.api.models import APIResponse, FetchFailureResponse, SyncResultResponse

router = APIRouter(tags=["sync"])


@router.post("/sync", response_model=APIResponse[SyncResultResponse])
def sync_now(session: SessionDep) -> APIResponse[SyncResultResponse]:
    """Refresh from GitLab now, ignoring the refresh interval."""
    result = session.refresh()
    return APIResponse(
        data=SyncResultResponse(
            status=result.status.value,
            reason=result.reason.value if result.reason is not None else None,
            message=result.message,
            project_count=len(result.projects),
            failures=[FetchFailureResponse.model_validate(f) for f in result.failures],
        ),
        error=None if result.ok else result.message or str(result.reason),
    )

"""Endpoints for the page on display."""

from fastapi import APIRouter

from glboard.api.dependencies import SessionDep
from glboard.api.models import APIResponse, PageSelect, ViewResponse, project_to_response
from glboard.dashboard import DashboardSession

router = APIRouter(prefix="/view", tags=["view"])


def _view_response(session: DashboardSession) -> ViewResponse:
    view = session.current_view()
    if view is None:
        return ViewResponse(loading=True, page=session.controller.current_page, total_pages=0)
    return ViewResponse(
        loading=False,
        board=view.board.value,
        page=view.page,
        total_pages=view.total_pages,
        projects=[project_to_response(p) for p in view.projects],
    )


@router.get("", response_model=APIResponse[ViewResponse])
def get_view(session: SessionDep) -> APIResponse[ViewResponse]:
    """Get the board and projects for the current page."""
    return APIResponse(data=_view_response(session))


@router.put("/page", response_model=APIResponse[ViewResponse])
def select_page(body: PageSelect, session: SessionDep) -> APIResponse[ViewResponse]:
    """Jump to a page. Pages past the primary board show the secondary board."""
    session.select_page(body.page)
    return APIResponse(data=_view_response(session))

"""Maps the current page onto the board and projects to display."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from glboard.rotation.controller import primary_pages

if TYPE_CHECKING:
    from glboard.gitlab import Project


class Board(StrEnum):
    """Which board a page belongs to."""

    PRIMARY = "pipelines"  # paginated, projects with a pipeline
    SECONDARY = "projects"  # single page, whole cache


@dataclass
class View:
    """What to render for one page."""

    board: Board
    page: int
    total_pages: int
    projects: list[Project] = field(default_factory=list)


def filter_projects_with_pipelines(projects: list[Project]) -> list[Project]:
    """Projects that have a pipeline, sorted case-insensitively by name.

    The sort is stable, so projects with equal names keep their cache order
    and page windows stay the same across calls.
    """
    with_pipeline = [project for project in projects if project.has_pipeline]
    return sorted(with_pipeline, key=lambda project: project.name.casefold())


def select_view(projects: list[Project], current_page: int, page_size: int) -> View:
    """Pick the view for current_page.

    Pages below the primary page count show a window of the filtered,
    sorted projects. Any later page shows the secondary board with the full
    unfiltered project list.
    """
    board_projects = filter_projects_with_pipelines(projects)
    primary = primary_pages(len(board_projects), page_size)
    total = primary + 1

    if 0 <= current_page < primary:
        start = current_page * page_size
        end = min(len(board_projects), start + page_size)
        return View(Board.PRIMARY, current_page, total, board_projects[start:end])

    return View(Board.SECONDARY, current_page, total, list(projects))

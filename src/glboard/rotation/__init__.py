"""Rotation - Page windowing and timed advancement over the two boards."""

from glboard.rotation.controller import (
    Advance,
    Command,
    PageRotationController,
    Reset,
    RotationState,
    SelectPage,
    advance,
    apply,
    primary_pages,
    select,
    total_pages,
)
from glboard.rotation.selector import (
    Board,
    View,
    filter_projects_with_pipelines,
    select_view,
)

__all__ = [
    "Advance",
    "Board",
    "Command",
    "PageRotationController",
    "Reset",
    "RotationState",
    "SelectPage",
    "View",
    "advance",
    "apply",
    "filter_projects_with_pipelines",
    "primary_pages",
    "select",
    "select_view",
    "total_pages",
]

"""GitLab client - Paginated access to projects and their pipelines."""

from glboard.gitlab.client import LIST_PAGE_SIZE, GitLabClient
from glboard.gitlab.exceptions import AuthenticationError, GitLabError
from glboard.gitlab.models import Pipeline, Project

__all__ = [
    "LIST_PAGE_SIZE",
    "AuthenticationError",
    "GitLabClient",
    "GitLabError",
    "Pipeline",
    "Project",
]

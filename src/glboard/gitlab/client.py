"""GitLabClient - Reads projects and pipelines from the GitLab REST API."""

from __future__ import annotations

from typing import Any

import httpx

from glboard.gitlab.exceptions import AuthenticationError, GitLabError
from glboard.gitlab.models import Pipeline, Project
from glboard.logging import get_logger, sanitize_for_log, truncate_output

logger = get_logger("gitlab")

# Projects are listed in pages of this size
LIST_PAGE_SIZE = 20

NEXT_PAGE_HEADER = "x-next-page"


class GitLabClient:
    """Client for the GitLab v4 REST API.

    Only the read endpoints the dashboard needs are wrapped. Every failure,
    whether transport, HTTP status or malformed payload, surfaces as
    GitLabError.
    """

    def __init__(
        self,
        host: str,
        token: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize GitLab client.

        Args:
            host: GitLab instance URL, e.g. "https://gitlab.example.com"
            token: Personal or project access token with read_api scope
            timeout: Request timeout in seconds
        """
        self.host = host.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return f"{self.host}/api/v4"

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the GitLab API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "PRIVATE-TOKEN": self.token,
                    "Accept": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> GitLabClient:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def _get_page(self, path: str, params: dict[str, Any]) -> tuple[list[dict[str, Any]], int | None]:
        """GET one page of a list endpoint.

        Returns:
            The page items and the next page number (None on the last page)

        Raises:
            AuthenticationError: If the token is rejected
            GitLabError: On any other failure
        """
        try:
            response = self.client.get(path, params=params)
        except httpx.HTTPError as e:
            raise GitLabError(f"Request to {path} failed: {sanitize_for_log(str(e))}") from e

        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"GitLab rejected the token for {path}: {response.status_code}"
            )
        if response.status_code != 200:
            body = sanitize_for_log(truncate_output(response.text, 500))
            raise GitLabError(f"GET {path} failed: {response.status_code} - {body}")

        try:
            items = response.json()
        except ValueError as e:
            raise GitLabError(f"GET {path} returned invalid JSON") from e
        if not isinstance(items, list):
            raise GitLabError(f"GET {path} returned {type(items).__name__}, expected a list")

        next_page = response.headers.get(NEXT_PAGE_HEADER)
        if not next_page:
            return items, None
        try:
            return items, int(next_page)
        except ValueError as e:
            raise GitLabError(f"GET {path} returned invalid {NEXT_PAGE_HEADER} header: {next_page!r}") from e

    def list_projects(
        self,
        max_count: int | None = None,
        per_page: int = LIST_PAGE_SIZE,
    ) -> list[Project]:
        """List projects visible to the token, page by page.

        Args:
            max_count: Stop after this many projects (None = all)
            per_page: Page size requested from GitLab

        Returns:
            Projects in the order GitLab returns them, without pipelines

        Raises:
            GitLabError: If any page fails
        """
        projects: list[Project] = []
        page: int | None = 1
        while page is not None:
            logger.debug("Fetching project page %d", page)
            items, page = self._get_page("/projects", {"per_page": per_page, "page": page})
            try:
                projects.extend(Project.from_api(item) for item in items)
            except (KeyError, TypeError, ValueError) as e:
                raise GitLabError(f"Malformed project in response: {e}") from e

            if max_count is not None and len(projects) >= max_count:
                del projects[max_count:]
                break
            if not items:
                break

        logger.info("Listed %d project(s)", len(projects))
        return projects

    def list_pipelines(
        self,
        project_id: int,
        per_page: int = 1,
        max_pages: int = 2,
        order_by: str = "updated_at",
        sort: str = "desc",
    ) -> list[Pipeline]:
        """List pipelines of a project, newest first by default.

        Args:
            project_id: GitLab project ID
            per_page: Page size requested from GitLab
            max_pages: Upper bound on page requests
            order_by: Sort field
            sort: "asc" or "desc"

        Returns:
            Pipelines from at most max_pages pages

        Raises:
            GitLabError: If any page fails
        """
        pipelines: list[Pipeline] = []
        page: int | None = 1
        pages_fetched = 0
        while page is not None and pages_fetched < max_pages:
            items, page = self._get_page(
                f"/projects/{project_id}/pipelines",
                {"per_page": per_page, "page": page, "order_by": order_by, "sort": sort},
            )
            pages_fetched += 1
            try:
                pipelines.extend(Pipeline.from_api(item) for item in items)
            except (KeyError, TypeError, ValueError) as e:
                raise GitLabError(f"Malformed pipeline in response: {e}") from e
            if not items:
                break

        return pipelines

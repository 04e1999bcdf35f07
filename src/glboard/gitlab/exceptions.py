"""Custom exceptions for the GitLab client."""


class GitLabError(Exception):
    """Base exception for GitLab API errors (HTTP, transport, payload)."""


class AuthenticationError(GitLabError):
    """The token was rejected by the GitLab instance."""

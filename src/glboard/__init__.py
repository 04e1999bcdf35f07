"""glboard - GitLab pipeline dashboard with cached sync and page rotation."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the package version."""
    return __version__

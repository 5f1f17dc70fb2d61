"""GitHub REST API access."""

from .client import GitHubApiClient

__all__ = ["GitHubApiClient"]

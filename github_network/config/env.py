"""github_network.config.env
=========================

Centralized environment variable names and helpers for GitHub credentials.

Design Notes
------------
- ``TOKEN_ENV_VARS`` lists acceptable token variables in priority order.
  ``GITHUB_TOKEN`` is what GitHub Actions and most tooling export,
  ``GH_TOKEN`` is the GitHub CLI convention and ``GITHUB_OAUTH`` is the
  historical name read by older Java and Ruby API clients.
- Helpers never raise on unset variables; callers decide how to proceed
  (anonymous access is valid, with a lower rate limit).
"""

from __future__ import annotations

import os
from typing import Iterable, Optional, Tuple

TOKEN_ENV_VARS: Tuple[str, ...] = ("GITHUB_TOKEN", "GH_TOKEN", "GITHUB_OAUTH")

CONFIG_FILE_ENV = "GITHUB_NETWORK_CONFIG_FILE"
DOTENV_FILE_ENV = "GITHUB_NETWORK_DOTENV"
API_URL_ENV = "GITHUB_API_URL"
USER_AGENT_ENV = "GITHUB_NETWORK_USER_AGENT"
WORKERS_ENV = "GITHUB_NETWORK_WORKERS"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_token_env_candidates() -> Iterable[str]:
    """Yield acceptable token environment variable names in priority order."""
    yield from TOKEN_ENV_VARS


def resolve_token() -> Tuple[Optional[str], Optional[str]]:
    """Resolve a GitHub token from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        variable; ``(None, None)`` when nothing usable is set.
    """
    for name in get_token_env_candidates():
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val.strip(), name
    return None, None


__all__ = [
    "TOKEN_ENV_VARS",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "API_URL_ENV",
    "USER_AGENT_ENV",
    "WORKERS_ENV",
    "is_placeholder",
    "get_token_env_candidates",
    "resolve_token",
]

"""
Normalized network error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the REST client, the HTML scraper
and the retry policy. Values are lowercase snake_case and are considered a
stable public contract for logging and CLI output.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    PARSE = "parse"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]

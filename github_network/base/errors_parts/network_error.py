"""
Structured network error exception type.

Wraps transport, HTTP and payload failures with a normalized `ErrorCode` for
consistent handling, retry logic, and structured logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class NetworkError(Exception):
    """Represents a structured GitHub access error with a normalized code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        target: What was being accessed (URL, ``owner/name`` or login).
        status: HTTP status code when the failure came from a response.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
        retry_after: Seconds the server asked to wait (``Retry-After``), if any.
    """

    code: ErrorCode
    message: str
    target: Optional[str] = None
    status: Optional[int] = None
    retryable: bool = False
    raw: Optional[Exception] = None
    retry_after: Optional[float] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining target, code, and message."""
        return f"{self.target or '-'} {self.code.value}: {self.message}"


__all__ = ["NetworkError"]

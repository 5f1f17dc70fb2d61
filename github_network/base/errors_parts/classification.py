"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements httpx exception handling, HTTP status extraction, status-to-code
mapping, and message-based heuristics as a fallback.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Mapping, Optional

import httpx

from .error_code import ErrorCode
from .network_error import NetworkError

RETRYABLE_CODES = (ErrorCode.TRANSIENT, ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT)


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    410: ErrorCode.NOT_FOUND,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without a status."""
    PATTERN_GROUPS = (
        (ErrorCode.RATE_LIMIT, ("rate", "limit")),
        (ErrorCode.TIMEOUT, ("timeout",)),
        (ErrorCode.TIMEOUT, ("timed out",)),
        (ErrorCode.AUTH, ("unauthorized",)),
        (ErrorCode.AUTH, ("bad credentials",)),
        (ErrorCode.NOT_FOUND, ("not found",)),
        (ErrorCode.NOT_FOUND, ("does not exist",)),
        (ErrorCode.UNAVAILABLE, ("unavailable",)),
        (ErrorCode.TRANSIENT, ("connection reset",)),
        (ErrorCode.TRANSIENT, ("connection refused",)),
        (ErrorCode.VALIDATION, ("invalid",)),
        (ErrorCode.VALIDATION, ("malformed",)),
        (ErrorCode.SERVER_ERROR, ("server error",)),
    )
    for code, patterns in PATTERN_GROUPS:
        if code is ErrorCode.RATE_LIMIT and patterns == ("rate", "limit"):
            if all(p in msg for p in patterns):
                return code
            continue
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. NetworkError passthrough.
        2. Timeout exceptions (builtin, asyncio and httpx).
        3. Other httpx transport failures (connect, read, protocol).
        4. HTTP status mapping.
        5. Substring heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, NetworkError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def classify_response(status: int, headers: Optional[Mapping[str, str]] = None) -> ErrorCode:
    """Classify a non-success HTTP response.

    GitHub reports an exhausted primary rate limit as ``403`` with
    ``X-RateLimit-Remaining: 0`` and a secondary limit as ``403`` with a
    ``Retry-After`` header; both map to ``RATE_LIMIT`` rather than ``AUTH``.
    """
    headers = headers or {}
    if status == 403 and (
        headers.get("x-ratelimit-remaining") == "0" or "retry-after" in headers
    ):
        return ErrorCode.RATE_LIMIT
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def to_network_error(exc: Exception, target: Optional[str] = None) -> NetworkError:
    """Wrap ``exc`` in a :class:`NetworkError` unless it already is one."""
    if isinstance(exc, NetworkError):
        return exc
    code = classify_exception(exc)
    return NetworkError(
        code=code,
        message=str(exc) or exc.__class__.__name__,
        target=target,
        status=_extract_status(exc),
        retryable=code in RETRYABLE_CODES,
        raw=exc,
    )


__all__ = [
    "RETRYABLE_CODES",
    "classify_exception",
    "classify_response",
    "to_network_error",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]

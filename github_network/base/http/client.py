"""Shared HTTP client pool and GET helper.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so the REST client and the HTML scraper share connections
    instead of allocating a client per request. Timeouts derive exclusively
    from :func:`get_timeout_config`.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Lifecycle & cleanup:
    - Clients are cached by a composite key of ``base_url`` and ``purpose``
      string. Purposes keep the JSON API pool ("api") apart from the HTML
      page pool ("html").
    - Pooled clients carry no per-caller state; credentials and identity
      headers are sent per request by :func:`http_get`.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Mapping, Optional, Tuple

import httpx

from ..errors import RETRYABLE_CODES, NetworkError, classify_response, to_network_error
from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    The first request for a key creates a client configured with timeouts from
    :func:`get_timeout_config` that follows redirects. Subsequent requests
    reuse the same instance.

    Parameters:
        base_url: Optional base URL to associate with the client so relative
            requests can be used by callers. ``None`` groups clients under a
            shared key.
        purpose: A short string discriminating separate pools (e.g.,
            "api", "html"). Keep stable to maximize reuse.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        timeout = get_timeout_config().as_httpx_timeout()
        if base_url:
            client = httpx.Client(base_url=base_url, timeout=timeout, follow_redirects=True)
        else:
            client = httpx.Client(timeout=timeout, follow_redirects=True)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            with contextlib.suppress(Exception):  # nosec B110 - best-effort shutdown
                c.close()
        _CLIENTS.clear()


def _error_message(resp: httpx.Response) -> str:
    """Best-effort human message for a failed response.

    GitHub's REST API returns ``{"message": ...}`` bodies; HTML endpoints
    return markup, for which the reason phrase is used instead.
    """
    if "json" in resp.headers.get("content-type", ""):
        with contextlib.suppress(ValueError):
            body = resp.json()
            if isinstance(body, dict) and body.get("message"):
                return str(body["message"])
    return resp.reason_phrase or f"HTTP {resp.status_code}"


def _retry_after(resp: httpx.Response) -> Optional[float]:
    """Parse a delay-seconds ``Retry-After`` header; HTTP-date values are ignored."""
    raw = resp.headers.get("retry-after")
    if raw is None:
        return None
    try:
        return max(float(raw), 0.0)
    except ValueError:
        return None


def http_get(
    client: httpx.Client,
    url: str,
    *,
    headers: Optional[Mapping[str, str]] = None,
) -> httpx.Response:
    """Issue a GET and return the response, raising on any failure.

    Raises:
        NetworkError: transport failures are classified via
            :func:`to_network_error`; non-2xx responses via
            :func:`classify_response` (GitHub's ``403`` rate-limit shape maps
            to ``RATE_LIMIT``).
    """
    try:
        resp = client.get(url, headers=dict(headers or {}))
    except httpx.HTTPError as e:
        raise to_network_error(e, target=url) from e
    if resp.is_success:
        return resp
    code = classify_response(resp.status_code, resp.headers)
    raise NetworkError(
        code=code,
        message=_error_message(resp),
        target=url,
        status=resp.status_code,
        retryable=code in RETRYABLE_CODES,
        retry_after=_retry_after(resp),
    )


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients", "http_get"]

"""GitHub REST API client.

Behavior
--------
- ``GET /orgs/{login}``, ``GET /users/{login}`` and ``GET /repos/{owner}/{name}``
  against the configured API base URL (``https://api.github.com`` by default,
  ``https://<host>/api/v3`` for GitHub Enterprise).
- Payloads are validated through pydantic DTOs and converted to the frozen
  domain models in ``base.models``; owners are bound to this client so
  ``owner.get_repository(name)`` works.
- Requests carry ``Accept``, ``X-GitHub-Api-Version``, ``User-Agent`` and,
  when a token is configured, ``Authorization: Bearer``.

Failure Modes
-------------
All failures surface as :class:`NetworkError`. Retryable codes (transient,
rate limit, timeout) are retried with exponential backoff according to the
client's :class:`RetryConfig`; the final failure propagates unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..base.dto import OwnerDTO, RepositoryDTO
from ..base.errors import ErrorCode, NetworkError
from ..base.http import get_httpx_client, http_get
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ORGANIZATION, USER, Owner, Repository
from ..base.resilience import RetryConfig, retry
from ..config import NetworkConfig, get_network_config
from ..config.defaults import DEFAULT_RETRY_DELAY_BASE, GITHUB_API_ACCEPT, GITHUB_API_VERSION

_logger = get_logger("github_network.api")


class GitHubApiClient:
    """Thin synchronous client for the GitHub REST endpoints the scraper needs.

    Parameters
    ----------
    token:
        Personal access token. When omitted, the configuration layer resolves
        one from the environment; anonymous access is used if none is found.
    api_url:
        REST base URL override.
    http_client:
        ``httpx.Client`` to use instead of the shared pool (tests inject one
        backed by ``httpx.MockTransport``).
    retry_config:
        Retry policy override; defaults derive from the configuration.
    config:
        Pre-resolved :class:`NetworkConfig`; explicit arguments win over it.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        api_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        retry_config: Optional[RetryConfig] = None,
        config: Optional[NetworkConfig] = None,
    ) -> None:
        cfg = config or get_network_config()
        self.api_url = (api_url or cfg.api_url).rstrip("/")
        self._token = token or cfg.token
        self._user_agent = cfg.user_agent
        self._http = http_client or get_httpx_client(self.api_url, "api")
        policy = retry_config or RetryConfig(
            max_attempts=cfg.retry_attempts,
            delay_base=DEFAULT_RETRY_DELAY_BASE,
            attempt_logger=self._log_attempt,
        )
        self._get_json = retry(policy)(self._get_json_once)

    @property
    def authenticated(self) -> bool:
        return bool(self._token)

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": GITHUB_API_ACCEPT,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": self._user_agent,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _log_attempt(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: NetworkError | None,
    ) -> None:
        if error is None:
            return
        log_event(
            _logger,
            "api.attempt_failed",
            LogContext(target=error.target),
            level=logging.DEBUG,
            attempt=attempt + 1,
            max_attempts=max_attempts,
            retry_in=delay,
            error_code=error.code.value,
            status=error.status,
        )

    def _get_json_once(self, path: str) -> Dict[str, Any]:
        url = f"{self.api_url}{path}"
        resp = http_get(self._http, url, headers=self._headers())
        try:
            data = resp.json()
        except ValueError as e:
            raise NetworkError(
                code=ErrorCode.PARSE,
                message="response body is not JSON",
                target=url,
                status=resp.status_code,
                raw=e,
            ) from e
        if not isinstance(data, dict):
            raise NetworkError(code=ErrorCode.PARSE, message="expected a JSON object", target=url)
        return data

    def _get_owner(self, kind: str, path: str) -> Owner:
        data = self._get_json(path)
        try:
            return OwnerDTO.model_validate(data).to_model(client=self, default_kind=kind)
        except ValidationError as e:
            raise NetworkError(code=ErrorCode.PARSE, message=str(e), target=path, raw=e) from e

    def get_organization(self, login: str) -> Owner:
        """Fetch an organization by login (``NOT_FOUND`` if it is a user or missing)."""
        return self._get_owner(ORGANIZATION, f"/orgs/{quote(login, safe='')}")

    def get_user(self, login: str) -> Owner:
        """Fetch a user account by login."""
        return self._get_owner(USER, f"/users/{quote(login, safe='')}")

    def get_repository(self, owner: str, name: str) -> Repository:
        """Fetch ``owner/name``.

        Raises:
            NetworkError: ``NOT_FOUND`` for missing or private repositories.
        """
        path = f"/repos/{quote(owner, safe='')}/{quote(name, safe='')}"
        data = self._get_json(path)
        try:
            return RepositoryDTO.model_validate(data).to_model()
        except ValidationError as e:
            raise NetworkError(code=ErrorCode.PARSE, message=str(e), target=path, raw=e) from e


__all__ = ["GitHubApiClient"]

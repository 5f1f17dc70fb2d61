"""Dependency network scraper.

GitHub exposes a repository's dependents ("Used by") only as HTML under
``<html_url>/network/dependents``. This module loads those pages, parses them
with :mod:`github_network.html.parsing`, and resolves dependent rows to
:class:`Repository` objects through the REST client.

Scan semantics
--------------
``list_dependents`` walks every page of the listing iteratively, following
the "Next" link until it disappears or a page URL repeats. Each dependent row
is resolved and filtered:

1. The row's ``owner/name`` must resolve through the REST API; failures are
   logged and the row is skipped.
2. With ``same_language`` the dependent's primary language must equal the
   scanned repository's (``None`` only matches ``None``).
3. With ``min_dependents > 0`` the dependent's own dependents count must reach
   the threshold. Counts are memoized per client; a failing count skips the
   row.

Rows of a page may be evaluated by a bounded thread pool (``workers``); the
resulting set is identical to a sequential scan.
"""

from __future__ import annotations

import concurrent.futures as cf
import logging
import threading
from typing import Dict, Iterator, List, Optional, Set, Tuple
from urllib.parse import quote

import httpx
from bs4 import BeautifulSoup

from ..api import GitHubApiClient
from ..base.errors import ErrorCode, NetworkError
from ..base.http import get_httpx_client, http_get
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Owner, Package, Repository
from ..base.resilience import RetryConfig, retry
from ..config import NetworkConfig, get_network_config
from ..config.defaults import DEFAULT_RETRY_DELAY_BASE, DEPENDENTS_PATH, MAX_WORKERS
from .parsing import (
    parse_dependent_rows,
    parse_dependents_count,
    parse_html,
    parse_next_page,
    parse_packages,
)

_logger = get_logger("github_network.html")

HTML_ACCEPT = "text/html,application/xhtml+xml"


class GitHubHtmlClient:
    """Scrapes package and dependents information from github.com pages.

    Parameters
    ----------
    api_client:
        REST client used to resolve owners and repositories. Created from the
        configuration when omitted.
    http_client:
        ``httpx.Client`` for page loads instead of the shared pool.
    workers:
        Thread pool size for evaluating the rows of one page (``1`` is
        sequential). Clamped to ``[1, MAX_WORKERS]``.
    retry_config:
        Retry policy for page loads.
    config:
        Pre-resolved :class:`NetworkConfig`.
    """

    def __init__(
        self,
        api_client: Optional[GitHubApiClient] = None,
        *,
        http_client: Optional[httpx.Client] = None,
        workers: Optional[int] = None,
        retry_config: Optional[RetryConfig] = None,
        config: Optional[NetworkConfig] = None,
    ) -> None:
        cfg = config or get_network_config()
        self._config = cfg
        self.api = api_client or GitHubApiClient(config=cfg)
        self._http = http_client or get_httpx_client(cfg.html_url, "html")
        self._headers = {"Accept": HTML_ACCEPT, "User-Agent": cfg.user_agent}
        self.workers = max(1, min(workers if workers is not None else cfg.workers, MAX_WORKERS))
        self._counts: Dict[Tuple[str, Optional[str]], int] = {}
        self._counts_lock = threading.Lock()
        policy = retry_config or RetryConfig(
            max_attempts=cfg.retry_attempts,
            delay_base=DEFAULT_RETRY_DELAY_BASE,
        )
        self._load_page = retry(policy)(self._load_page_once)

    # ------------------------------------------------------------------ pages

    def _load_page_once(self, url: str) -> BeautifulSoup:
        resp = http_get(self._http, url, headers=self._headers)
        return parse_html(resp.text)

    def load_page(self, url: str) -> BeautifulSoup:
        """GET ``url`` and parse it as HTML, retrying transient failures."""
        return self._load_page(url)

    @staticmethod
    def dependents_url(repo: Repository, package_id: Optional[str] = None) -> str:
        """Return the dependents page URL for ``repo``, optionally filtered by package."""
        url = repo.html_url.rstrip("/") + DEPENDENTS_PATH
        if package_id is not None:
            url += "?package_id=" + quote(package_id, safe="")
        return url

    # ----------------------------------------------------------------- owners

    def get_owner(self, login: str) -> Owner:
        """Return the organization named ``login``, or the user if no such org exists."""
        try:
            return self.api.get_organization(login)
        except NetworkError as e:
            if e.code is not ErrorCode.NOT_FOUND:
                raise
        return self.api.get_user(login)

    # --------------------------------------------------------------- packages

    def list_packages(self, repo: Repository) -> Set[Package]:
        """Return the packages ``repo`` publishes, as listed on its dependents page."""
        return parse_packages(self.load_page(self.dependents_url(repo)))

    # ----------------------------------------------------------------- counts

    def get_dependents_count(self, repo: Repository, package_id: Optional[str] = None) -> int:
        """Return the number of repositories depending on ``repo`` (and ``package_id``)."""
        key = (repo.full_name.lower(), package_id)
        with self._counts_lock:
            cached = self._counts.get(key)
        if cached is not None:
            return cached
        count = parse_dependents_count(self.load_page(self.dependents_url(repo, package_id)))
        with self._counts_lock:
            self._counts[key] = count
        return count

    # ------------------------------------------------------------- dependents

    def _evaluate(
        self,
        repo: Repository,
        owner: str,
        name: str,
        min_dependents: int,
        same_language: bool,
        ctx: LogContext,
    ) -> Optional[Repository]:
        full_name = f"{owner}/{name}"
        try:
            dependent = self.get_owner(owner).get_repository(name)
        except NetworkError as e:
            log_event(
                _logger, "dependents.skip", ctx, level=logging.WARNING,
                dependent=full_name, error_code=e.code.value,
                reason="not_found" if e.code is ErrorCode.NOT_FOUND else "resolve_failed",
            )
            return None

        if same_language and dependent.language != repo.language:
            log_event(
                _logger, "dependents.skip", ctx, level=logging.WARNING,
                dependent=full_name, reason="language",
                language=dependent.language, expected=repo.language,
            )
            return None

        if min_dependents > 0:
            try:
                count = self.get_dependents_count(dependent)
            except NetworkError as e:
                log_event(
                    _logger, "dependents.skip", ctx, level=logging.WARNING,
                    dependent=full_name, reason="count_failed", error_code=e.code.value,
                )
                return None
            if count < min_dependents:
                log_event(
                    _logger, "dependents.skip", ctx, level=logging.DEBUG,
                    dependent=full_name, reason="threshold", count=count, min_dependents=min_dependents,
                )
                return None

        return dependent

    def _evaluate_page(
        self,
        executor: Optional[cf.ThreadPoolExecutor],
        repo: Repository,
        rows: List[Tuple[str, str]],
        min_dependents: int,
        same_language: bool,
        ctx: LogContext,
    ) -> List[Optional[Repository]]:
        def evaluate(row: Tuple[str, str]) -> Optional[Repository]:
            return self._evaluate(repo, row[0], row[1], min_dependents, same_language, ctx)

        if executor is None:
            return [evaluate(row) for row in rows]
        return list(executor.map(evaluate, rows))

    def iter_dependents(
        self,
        repo: Repository,
        package_id: Optional[str] = None,
        min_dependents: Optional[int] = None,
        same_language: bool = True,
    ) -> Iterator[Repository]:
        """Yield retained dependents page by page (duplicates included).

        Page load failures propagate as :class:`NetworkError`; per-row
        failures are logged and skipped.
        """
        threshold = self._config.min_dependents if min_dependents is None else min_dependents
        ctx = LogContext(target=repo.full_name, package_id=package_id)
        url: Optional[str] = self.dependents_url(repo, package_id)
        visited: Set[str] = set()
        executor = cf.ThreadPoolExecutor(max_workers=self.workers) if self.workers > 1 else None
        try:
            retained: Set[str] = set()
            while url is not None and url not in visited:
                visited.add(url)
                page_ctx = ctx.child(url=url, page=len(visited))
                log_event(_logger, "dependents.page", page_ctx, level=logging.DEBUG, size=len(retained))
                doc = self.load_page(url)
                rows = parse_dependent_rows(doc)
                for dependent in self._evaluate_page(executor, repo, rows, threshold, same_language, page_ctx):
                    if dependent is not None:
                        retained.add(dependent.full_name.lower())
                        yield dependent
                url = parse_next_page(doc, url)
            log_event(_logger, "dependents.done", ctx, level=logging.DEBUG, pages=len(visited), retained=len(retained))
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

    def list_dependents(
        self,
        repo: Repository,
        package_id: Optional[str] = None,
        min_dependents: Optional[int] = None,
        same_language: bool = True,
    ) -> Set[Repository]:
        """Return the set of repositories depending on ``repo``.

        Parameters
        ----------
        repo:
            Repository to scan.
        package_id:
            Restrict to dependents of one package (see :meth:`list_packages`).
        min_dependents:
            Only dependents having at least this many dependents themselves
            are retained. Defaults to the configured value (``1``); ``0``
            disables the check and its extra page loads.
        same_language:
            Only dependents with the same primary language as ``repo`` are
            retained.
        """
        return set(self.iter_dependents(repo, package_id, min_dependents, same_language))


__all__ = ["GitHubHtmlClient"]

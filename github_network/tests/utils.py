"""Shared testing utilities: an in-memory GitHub served over ``httpx.MockTransport``.

Exports:
    - FakeGitHub: routes REST and HTML requests to canned responses
    - load_fixture(name): read a saved page from ``fixtures/``
    - count_page(count): minimal dependents page showing a total
    - ListHandler: logging handler collecting records and decoded events
"""

from __future__ import annotations

import json
import logging
import zlib
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx

FIXTURES = Path(__file__).parent / "fixtures"
API = "https://api.github.com"
WEB = "https://github.com"

RouteKey = Tuple[str, str, Tuple[Tuple[str, str], ...]]
Responder = Callable[[httpx.Request], httpx.Response]


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def count_page(count: Union[int, str]) -> str:
    """Minimal dependents page showing ``count`` repositories and no rows."""
    total = f"{count:,}" if isinstance(count, int) else count
    return (
        "<html><body><div class='table-list-header-toggle'>"
        f"<a class='btn-link selected' href='#'>\n  {total}\n  Repositories\n</a>"
        "<a class='btn-link' href='#'>0 Packages</a>"
        "</div></body></html>"
    )


def _stable_id(text: str) -> int:
    return zlib.crc32(text.lower().encode("utf-8")) % 1_000_000


def _route_key(url: Union[str, httpx.URL]) -> RouteKey:
    # GitHub paths are case-insensitive; query values are compared decoded.
    u = httpx.URL(url) if isinstance(url, str) else url
    return (u.host.lower(), u.path.lower(), tuple(sorted(u.params.multi_items())))


class FakeGitHub:
    """Routes requests to registered canned responses; unknown URLs are 404."""

    def __init__(self) -> None:
        self.routes: Dict[RouteKey, Responder] = {}
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self.routes.get(_route_key(request.url))
        if responder is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return responder(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler), follow_redirects=True)

    def add(self, url: str, responder: Responder) -> None:
        self.routes[_route_key(url)] = responder

    def add_json(
        self,
        path: str,
        payload: Any,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.add(API + path, lambda _req: httpx.Response(status, json=payload, headers=headers))

    def add_page(self, url: str, html: str, status: int = 200) -> None:
        self.add(url, lambda _req: httpx.Response(status, text=html, headers={"content-type": "text/html"}))

    def add_org(self, login: str) -> None:
        self.add_json(
            f"/orgs/{login}",
            {"login": login, "id": _stable_id(login), "type": "Organization", "html_url": f"{WEB}/{login}"},
        )

    def add_user(self, login: str) -> None:
        self.add_json(
            f"/users/{login}",
            {"login": login, "id": _stable_id(login), "type": "User", "html_url": f"{WEB}/{login}"},
        )

    def add_repo(self, owner: str, name: str, language: Optional[str] = "Java", **extra: Any) -> None:
        payload = {
            "id": _stable_id(f"{owner}/{name}"),
            "name": name,
            "full_name": f"{owner}/{name}",
            "owner": {"login": owner},
            "html_url": f"{WEB}/{owner}/{name}",
            "language": language,
            "description": None,
            "stargazers_count": 0,
            "fork": False,
            "archived": False,
            "visibility": "public",
        }
        payload.update(extra)
        self.add_json(f"/repos/{owner}/{name}", payload)

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self, name: Optional[str] = None) -> List[Dict[str, Any]]:
        out = []
        for rec in self.records:
            try:
                payload = json.loads(rec.getMessage())
            except ValueError:
                continue
            if isinstance(payload, dict) and (name is None or payload.get("event") == name):
                payload["_level"] = rec.levelno
                out.append(payload)
        return out

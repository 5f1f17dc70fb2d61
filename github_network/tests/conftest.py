"""Pytest configuration for the github_network test suite.

Provides an in-memory GitHub (REST + HTML) served through
``httpx.MockTransport`` so no test touches the network, plus environment
isolation so a developer's real ``GITHUB_TOKEN`` or config file never leaks
into assertions.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterator

import pytest

from github_network.api import GitHubApiClient
from github_network.base.http import close_all_clients
from github_network.config import NetworkConfig, reset_config_cache
from github_network.config.env import TOKEN_ENV_VARS
from github_network.html import GitHubHtmlClient
from github_network.tests.utils import WEB, FakeGitHub, ListHandler, count_page, load_fixture


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Strip GitHub-related environment, disable backoff sleeps, reset caches."""
    for name in TOKEN_ENV_VARS + (
        "GITHUB_API_URL",
        "GITHUB_SERVER_URL",
        "GITHUB_NETWORK_CONFIG_FILE",
        "GITHUB_NETWORK_USER_AGENT",
        "GITHUB_NETWORK_WORKERS",
        "GITHUB_NETWORK_LOG_LEVEL",
        "GITHUB_NETWORK_HTTP_TIMEOUT_SECONDS",
        "GITHUB_NETWORK_CONNECT_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GITHUB_NETWORK_DOTENV", str(tmp_path / "missing.env"))
    monkeypatch.setattr(time, "sleep", lambda *_: None)
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture()
def test_config() -> NetworkConfig:
    return NetworkConfig(retry_attempts=2)


@pytest.fixture()
def api_client(fake_github: FakeGitHub, test_config: NetworkConfig) -> GitHubApiClient:
    return GitHubApiClient(http_client=fake_github.client(), config=test_config)


@pytest.fixture()
def html_client(
    fake_github: FakeGitHub, api_client: GitHubApiClient, test_config: NetworkConfig
) -> GitHubHtmlClient:
    return GitHubHtmlClient(api_client, http_client=fake_github.client(), config=test_config)


@pytest.fixture()
def network(fake_github: FakeGitHub) -> FakeGitHub:
    """A small dependency network rooted at FasterXML/jackson-dataformats-binary.

    Listing (two pages): alice/avro-tool (Java, 10 dependents), acme/pipeline
    (Java, 3), bob/pyscript (Python, 7), ghost/deleted-repo (missing),
    ALICE/avro-tool (case duplicate), carol/tiny (Java, 0).
    """
    fake_github.add_org("FasterXML")
    fake_github.add_repo("FasterXML", "jackson-dataformats-binary", "Java")
    root = f"{WEB}/FasterXML/jackson-dataformats-binary/network/dependents"
    fake_github.add_page(root, load_fixture("dependents_page1.html"))
    fake_github.add_page(root + "?dependents_after=MjAxNTk", load_fixture("dependents_page2.html"))

    fake_github.add_org("acme")
    for login in ("alice", "bob", "carol"):
        fake_github.add_user(login)
    for owner, name, language, count in (
        ("alice", "avro-tool", "Java", 10),
        ("acme", "pipeline", "Java", 3),
        ("bob", "pyscript", "Python", 7),
        ("carol", "tiny", "Java", 0),
    ):
        fake_github.add_repo(owner, name, language)
        fake_github.add_page(f"{WEB}/{owner}/{name}/network/dependents", count_page(count))
    return fake_github


@pytest.fixture()
def log_capture() -> Iterator[ListHandler]:
    """Capture records from the shared ``github_network`` logger at DEBUG."""
    logger = logging.getLogger("github_network")
    handler = ListHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)

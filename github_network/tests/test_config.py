"""Configuration merge order, token resolution and value normalization."""

from __future__ import annotations

import json

import pytest

from github_network.config import NetworkConfig, get_network_config, reset_config_cache
from github_network.config.env import get_token_env_candidates, is_placeholder, resolve_token


@pytest.fixture()
def config_file(tmp_path, monkeypatch):
    """Write a config file and point GITHUB_NETWORK_CONFIG_FILE at it."""

    def _write(text: str, name: str = "network.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv("GITHUB_NETWORK_CONFIG_FILE", str(path))
        reset_config_cache()
        return path

    return _write


def test_defaults():
    cfg = get_network_config()
    assert cfg == NetworkConfig()
    assert cfg.api_url == "https://api.github.com"
    assert cfg.html_url == "https://github.com"
    assert cfg.token is None
    assert cfg.min_dependents == 1
    assert cfg.workers == 1


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-token")
    assert is_placeholder("test_token")
    assert not is_placeholder("ghp_real")
    assert not is_placeholder(None)


def test_token_candidates_order():
    assert list(get_token_env_candidates()) == ["GITHUB_TOKEN", "GH_TOKEN", "GITHUB_OAUTH"]


def test_resolve_token_priority(monkeypatch):
    monkeypatch.setenv("GH_TOKEN", "gh-cli")
    monkeypatch.setenv("GITHUB_OAUTH", "legacy")
    assert resolve_token() == ("gh-cli", "GH_TOKEN")
    monkeypatch.setenv("GITHUB_TOKEN", "actions")
    assert resolve_token() == ("actions", "GITHUB_TOKEN")


def test_resolve_token_skips_placeholders(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "changeme")
    monkeypatch.setenv("GITHUB_OAUTH", "legacy")
    assert resolve_token() == ("legacy", "GITHUB_OAUTH")


def test_resolve_token_none():
    assert resolve_token() == (None, None)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.org/api/v3/")
    monkeypatch.setenv("GITHUB_SERVER_URL", "https://ghe.example.org/")
    monkeypatch.setenv("GITHUB_NETWORK_USER_AGENT", "scanner/2")
    monkeypatch.setenv("GITHUB_NETWORK_WORKERS", "4")
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_env")
    cfg = get_network_config()
    assert cfg.api_url == "https://ghe.example.org/api/v3"
    assert cfg.html_url == "https://ghe.example.org"
    assert cfg.user_agent == "scanner/2"
    assert cfg.workers == 4
    assert cfg.token == "ghp_env"


def test_yaml_file_then_env_then_overrides(config_file, monkeypatch):
    config_file("workers: 2\nmin_dependents: 10\nuser_agent: from-file/1\nunknown_key: 1\n")
    monkeypatch.setenv("GITHUB_NETWORK_WORKERS", "3")
    cfg = get_network_config()
    assert cfg.min_dependents == 10
    assert cfg.user_agent == "from-file/1"
    assert cfg.workers == 3

    cfg = get_network_config({"workers": 5, "min_dependents": None, "bogus": True})
    assert cfg.workers == 5
    assert cfg.min_dependents == 10


def test_json_file(config_file):
    config_file(json.dumps({"html_url": "https://ghe.example.org/", "retry_attempts": 5}), name="network.json")
    cfg = get_network_config()
    assert cfg.html_url == "https://ghe.example.org"
    assert cfg.retry_attempts == 5


def test_env_token_beats_file_token(config_file, monkeypatch):
    config_file("token: ghp_file\n")
    assert get_network_config().token == "ghp_file"
    monkeypatch.setenv("GH_TOKEN", "ghp_env")
    assert get_network_config().token == "ghp_env"


def test_placeholder_token_from_file_is_dropped(config_file):
    config_file("token: example-token\n")
    assert get_network_config().token is None


def test_non_mapping_file_is_ignored(config_file):
    config_file("- just\n- a list\n")
    assert get_network_config() == NetworkConfig()


def test_unreadable_yaml_is_ignored(config_file):
    config_file("workers: [1, 2\n")
    assert get_network_config().workers == 1


@pytest.mark.parametrize(
    "overrides, field, expected",
    [
        ({"workers": 99}, "workers", 16),
        ({"workers": 0}, "workers", 1),
        ({"workers": "many"}, "workers", 1),
        ({"min_dependents": -5}, "min_dependents", 0),
        ({"min_dependents": "7"}, "min_dependents", 7),
        ({"retry_attempts": 0}, "retry_attempts", 1),
    ],
)
def test_values_are_normalized(overrides, field, expected):
    assert getattr(get_network_config(overrides), field) == expected


def test_dotenv_fills_placeholder_values(tmp_path, monkeypatch):
    dotenv = tmp_path / ".env"
    dotenv.write_text("# local secrets\nGITHUB_TOKEN='ghp_dotenv'\n\nnot a pair\n", encoding="utf-8")
    monkeypatch.setenv("GITHUB_NETWORK_DOTENV", str(dotenv))
    monkeypatch.setenv("GITHUB_TOKEN", "changeme")
    reset_config_cache()
    assert get_network_config().token == "ghp_dotenv"


def test_redacted_masks_token():
    cfg = NetworkConfig(token="ghp_secret")
    data = cfg.redacted()
    assert data["token"] == "***"
    assert "ghp_secret" not in json.dumps(data)
    assert NetworkConfig().redacted()["token"] is None

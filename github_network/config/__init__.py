"""Unified configuration layer.

Goals
-----
* Centralize defaults (endpoints, user agent, scan parameters).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       GITHUB_NETWORK_CONFIG_FILE
    3. Environment variables (GITHUB_API_URL, GITHUB_SERVER_URL,
       GITHUB_NETWORK_USER_AGENT, GITHUB_NETWORK_WORKERS)
    4. Token from GITHUB_TOKEN / GH_TOKEN / GITHUB_OAUTH
    5. In-code overrides passed to the helper
* Provide a single call site: ``get_network_config(overrides)``.

External Config File
--------------------
JSON is tried first, then YAML. Structure example:

```
api_url: https://github.example.com/api/v3
html_url: https://github.example.com
user_agent: my-scanner/1.0
workers: 4
min_dependents: 10
```

A ``.env`` file (path from GITHUB_NETWORK_DOTENV, default ``.env``) is read
once before environment lookups; it never overrides real values.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.logging import get_logger
from .defaults import (
    DEFAULT_MIN_DEPENDENTS,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_USER_AGENT,
    DEFAULT_WORKERS,
    GITHUB_DEFAULT_API_URL,
    GITHUB_DEFAULT_HTML_URL,
    MAX_WORKERS,
)
from .env import (
    API_URL_ENV,
    CONFIG_FILE_ENV,
    DOTENV_FILE_ENV,
    USER_AGENT_ENV,
    WORKERS_ENV,
    is_placeholder,
    resolve_token,
)

HTML_URL_ENV = "GITHUB_SERVER_URL"

_logger = get_logger("github_network.config")


@dataclass(frozen=True)
class NetworkConfig:
    """Resolved configuration for the API and HTML clients."""

    api_url: str = GITHUB_DEFAULT_API_URL
    html_url: str = GITHUB_DEFAULT_HTML_URL
    token: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    workers: int = DEFAULT_WORKERS
    min_dependents: int = DEFAULT_MIN_DEPENDENTS
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS

    def redacted(self) -> Dict[str, Any]:
        """Return a dict safe to print or log (token masked)."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["token"] = "***" if self.token else None
        return data


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            _logger.warning("config file %s is neither JSON nor YAML: %s", path, e)
            data = {}
    if not isinstance(data, dict):
        _logger.warning("config file %s does not contain a mapping; ignored", path)
        data = {}
    _FILE_CACHE = data
    return data


def _coerce_int(value: Any, default: int, *, minimum: int, maximum: Optional[int] = None) -> int:
    try:
        val = int(value)
    except (TypeError, ValueError):
        return default
    val = max(minimum, val)
    return min(val, maximum) if maximum is not None else val


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, env_name in (
        ("api_url", API_URL_ENV),
        ("html_url", HTML_URL_ENV),
        ("user_agent", USER_AGENT_ENV),
        ("workers", WORKERS_ENV),
    ):
        val = os.getenv(env_name)
        if val:
            out[key] = val
    return out


def get_network_config(overrides: Optional[Dict[str, Any]] = None) -> NetworkConfig:
    """Return merged configuration.

    Merge order (later wins): defaults -> external config -> env vars ->
    token env chain -> overrides. Unknown keys are ignored; ``None`` override
    values are skipped so CLI flags left unset do not mask lower layers.
    """
    _load_dotenv_once()
    known = {f.name for f in fields(NetworkConfig)}
    merged: Dict[str, Any] = {}

    merged |= {k: v for k, v in _load_external_config().items() if k in known}
    merged |= _env_overrides()
    token, _ = resolve_token()
    if token:
        merged["token"] = token
    if overrides:
        merged |= {k: v for k, v in overrides.items() if k in known and v is not None}

    base = NetworkConfig()
    if merged.get("token") is not None and is_placeholder(merged["token"]):
        merged["token"] = None
    for url_key in ("api_url", "html_url"):
        if url_key in merged:
            merged[url_key] = str(merged[url_key]).rstrip("/")
    if "workers" in merged:
        merged["workers"] = _coerce_int(merged["workers"], base.workers, minimum=1, maximum=MAX_WORKERS)
    if "min_dependents" in merged:
        merged["min_dependents"] = _coerce_int(merged["min_dependents"], base.min_dependents, minimum=0)
    if "retry_attempts" in merged:
        merged["retry_attempts"] = _coerce_int(merged["retry_attempts"], base.retry_attempts, minimum=1)
    return replace(base, **merged)


def reset_config_cache() -> None:
    """Forget the cached config file and .env state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "NetworkConfig",
    "get_network_config",
    "reset_config_cache",
]

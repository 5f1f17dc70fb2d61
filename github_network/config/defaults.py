"""github_network.config.defaults
===============================

Central place for small, stable default values. These defaults can be
overridden via environment variables or an external configuration file, but
provide sensible fallbacks for local use and tests.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Endpoints ----
GITHUB_DEFAULT_API_URL = "https://api.github.com"
GITHUB_DEFAULT_HTML_URL = "https://github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"

# Path appended to a repository's html_url to reach its dependency network.
DEPENDENTS_PATH = "/network/dependents"

# ---- Client identity ----
DEFAULT_USER_AGENT = "github-network/0.1.0"

# ---- Scan defaults ----
# Minimum number of dependents a dependent must have itself to be retained.
DEFAULT_MIN_DEPENDENTS = 1
# Thread pool size used to evaluate the rows of one dependents page.
DEFAULT_WORKERS = 1
# Upper bound for the workers setting, keeps page evaluation polite.
MAX_WORKERS = 16

# ---- Retry ----
DEFAULT_RETRY_ATTEMPTS = 3
DEFAULT_RETRY_DELAY_BASE = 2.0

"""github_network package

Access to GitHub's dependency network: the packages a repository publishes,
how many repositories depend on it, and which ones.

Public API (re-exported):
    - Version: ``__version__``
    - Clients: :class:`GitHubApiClient`, :class:`GitHubHtmlClient`
    - Models: :class:`Owner`, :class:`Package`, :class:`Repository`
    - Exceptions: :class:`NetworkError`, :class:`ErrorCode`
    - Configuration: :func:`get_network_config`, :class:`NetworkConfig`

Example::

    from github_network import GitHubHtmlClient

    client = GitHubHtmlClient()
    repo = client.get_owner("FasterXML").get_repository("jackson-core")
    print(client.get_dependents_count(repo))
"""

from .base.errors import ErrorCode, NetworkError
from .base.models import Owner, Package, Repository
from .config import NetworkConfig, get_network_config
from .api import GitHubApiClient
from .html import GitHubHtmlClient

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorCode",
    "NetworkError",
    "Owner",
    "Package",
    "Repository",
    "NetworkConfig",
    "get_network_config",
    "GitHubApiClient",
    "GitHubHtmlClient",
]

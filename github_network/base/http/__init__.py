"""HTTP utilities package.

Exposes pooled httpx clients and the error-mapping GET helper.
"""

from .client import close_all_clients, get_httpx_client, http_get

__all__ = ["get_httpx_client", "close_all_clients", "http_get"]

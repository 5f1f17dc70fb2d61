"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `github_network.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .network_error import NetworkError
from .classification import classify_exception, classify_response, to_network_error

__all__ = ["ErrorCode", "NetworkError", "classify_exception", "classify_response", "to_network_error"]

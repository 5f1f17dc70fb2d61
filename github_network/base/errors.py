"""Unified network error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``github_network.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.network_error import NetworkError
from .errors_parts.classification import (
    RETRYABLE_CODES,
    classify_exception,
    classify_response,
    to_network_error,
)

__all__ = [
    "ErrorCode",
    "NetworkError",
    "RETRYABLE_CODES",
    "classify_exception",
    "classify_response",
    "to_network_error",
]

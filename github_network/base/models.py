"""
Domain models public surface.

This module re-exports the one-class-per-file implementations under
``github_network.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.owner import ORGANIZATION, USER, Owner
from .models_parts.package import Package
from .models_parts.repository import Repository

__all__ = [
    "ORGANIZATION",
    "USER",
    "Owner",
    "Package",
    "Repository",
]

"""Models parts package: one class per file, re-exported by ``base.models``."""

from .owner import ORGANIZATION, USER, Owner
from .package import Package
from .repository import Repository

__all__ = ["ORGANIZATION", "USER", "Owner", "Package", "Repository"]

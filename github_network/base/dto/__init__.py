"""Pydantic DTOs validating GitHub REST payloads before model conversion."""

from .owner_dto import OwnerDTO
from .repository_dto import RepositoryDTO, RepositoryOwnerDTO

__all__ = ["OwnerDTO", "RepositoryDTO", "RepositoryOwnerDTO"]

"""DTO for ``/repos/{owner}/{name}`` REST payloads."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from ..models_parts.repository import Repository


class RepositoryOwnerDTO(BaseModel):
    login: str


class RepositoryDTO(BaseModel):
    """Validated repository payload.

    Parameters mirror the GitHub REST field names. Validation errors are
    raised by Pydantic if required fields are missing or mistyped; the REST
    client converts them to ``ErrorCode.PARSE``.
    """

    full_name: str
    name: str
    owner: RepositoryOwnerDTO
    html_url: str
    id: Optional[int] = None
    language: Optional[str] = None
    description: Optional[str] = None
    stargazers_count: int = 0
    fork: bool = False
    archived: bool = False

    def to_model(self) -> Repository:
        return Repository(
            full_name=self.full_name,
            owner=self.owner.login,
            name=self.name,
            html_url=self.html_url,
            language=self.language,
            id=self.id,
            description=self.description,
            stargazers_count=self.stargazers_count,
            fork=self.fork,
            archived=self.archived,
        )


__all__ = ["RepositoryDTO", "RepositoryOwnerDTO"]

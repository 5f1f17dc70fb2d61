"""
Repository model used as both scan input and dependents output.

Equality is by ``full_name`` compared case-insensitively (GitHub logins and
repository names are case-insensitive), so a set of repositories collapses
duplicate rows that differ only in case.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True, eq=False)
class Repository:
    """A GitHub repository.

    Attributes:
        full_name: ``owner/name``.
        owner: Owner login.
        name: Repository name.
        html_url: Web URL (``https://github.com/owner/name``); the dependents
            page lives under it.
        language: Primary language as detected by GitHub, or ``None``.
        id: Numeric repository id.
        description: Repository description.
        stargazers_count: Star count at fetch time.
        fork: Whether the repository is a fork.
        archived: Whether the repository is archived.
    """

    full_name: str
    owner: str
    name: str
    html_url: str
    language: Optional[str] = None
    id: Optional[int] = None
    description: Optional[str] = None
    stargazers_count: int = 0
    fork: bool = False
    archived: bool = False

    def _key(self) -> str:
        return self.full_name.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "Repository") -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self._key() < other._key()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "full_name": self.full_name,
            "html_url": self.html_url,
            "language": self.language,
            "id": self.id,
            "description": self.description,
            "stargazers_count": self.stargazers_count,
            "fork": self.fork,
            "archived": self.archived,
        }


__all__ = ["Repository"]

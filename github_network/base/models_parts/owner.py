"""
Owner model representing a GitHub user or organization.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .repository import Repository

ORGANIZATION = "Organization"
USER = "User"


@dataclass(frozen=True)
class Owner:
    """A GitHub account that owns repositories.

    Attributes:
        login: Account login (case preserved as returned by the API).
        kind: ``"Organization"`` or ``"User"``.
        html_url: Profile page URL.
        id: Numeric account id.
        client: REST client that produced this owner; used by
            :meth:`get_repository`. Excluded from equality and repr.
    """

    login: str
    kind: str = USER
    html_url: Optional[str] = None
    id: Optional[int] = None
    client: Any = field(default=None, repr=False, compare=False)

    @property
    def is_organization(self) -> bool:
        return self.kind == ORGANIZATION

    def get_repository(self, name: str) -> "Repository":
        """Fetch one of this owner's repositories by name.

        Raises:
            RuntimeError: If the owner was not produced by a REST client.
            NetworkError: On API failures (``NOT_FOUND`` when missing).
        """
        if self.client is None:
            raise RuntimeError(f"owner '{self.login}' is not bound to an API client")
        return self.client.get_repository(self.login, name)

    def to_dict(self) -> Dict[str, Any]:
        return {"login": self.login, "kind": self.kind, "html_url": self.html_url, "id": self.id}


__all__ = ["Owner", "ORGANIZATION", "USER"]

"""DTO for ``/users/{login}`` and ``/orgs/{login}`` REST payloads.

Only the fields the package uses are declared; unknown keys are ignored.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from ..models_parts.owner import ORGANIZATION, Owner


class OwnerDTO(BaseModel):
    """Validated owner payload.

    Notes
    -----
    The ``/orgs/{login}`` endpoint omits ``type`` on some GitHub Enterprise
    versions, so ``default_kind`` lets the caller supply it.
    """

    login: str
    id: Optional[int] = None
    type: Optional[str] = None
    html_url: Optional[str] = None

    def to_model(self, client: Any = None, default_kind: str = ORGANIZATION) -> Owner:
        return Owner(
            login=self.login,
            kind=self.type or default_kind,
            html_url=self.html_url,
            id=self.id,
            client=client,
        )


__all__ = ["OwnerDTO"]

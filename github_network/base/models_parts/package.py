"""
Package model for artifacts published by a repository.

A single repository may publish several packages (for example the modules of
a multi-module Maven build); GitHub's dependency network page lets callers
filter dependents by the package's opaque id.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Package:
    """A package published by a repository.

    Attributes:
        id: GitHub's opaque package id (e.g. ``UGFja2FnZS0xODAwNDIzMjY=``).
        name: Display name, usually the ecosystem coordinate
            (``group:artifact`` for Maven, the package name for npm/PyPI).

    Equality and hashing use both fields; ordering uses ``name`` only so
    sorted listings read alphabetically.
    """

    id: str
    name: str

    def __lt__(self, other: "Package") -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        return self.name < other.name

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


__all__ = ["Package"]

"""Scan context attached to structured log events.

A :class:`LogContext` names the repository being scanned, the package filter
and, while walking a dependents listing, the current page. ``log_event``
merges it into every event so skip records can be traced back to the page
that produced them.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LogContext:
    target: Optional[str] = None
    package_id: Optional[str] = None
    url: Optional[str] = None
    page: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def child(self, **changes: Any) -> "LogContext":
        """Copy with ``changes`` applied (e.g. the next page's url and number)."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to a dict: ``extra`` is merged in and ``None`` values pruned."""
        data = asdict(self)
        extra = data.pop("extra") or {}
        data.update(extra)
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]

"""CLI action handlers.

Purpose
-------
Subcommand handlers for the github-network CLI, keeping the entrypoint thin.
This module has no top-level side effects and is safe to import in tests.

Error Semantics
---------------
Handlers let :class:`NetworkError` propagate; ``main`` renders it as JSON on
stderr and returns exit code 1. Malformed repository references raise
``ValueError`` which ``main`` reports as a usage error (exit code 2).
"""

from __future__ import annotations

import argparse
import json
import re
from typing import Any, Iterable, Optional, Tuple

from ...base.models import Repository
from ...html import GitHubHtmlClient

_REPO_REF = re.compile(
    r"^(?:https?://[^/]+/)?(?P<owner>[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)/(?P<name>[A-Za-z0-9._-]+?)(?:\.git)?/?$"
)


def parse_repo_ref(ref: str) -> Tuple[str, str]:
    """Split ``owner/name`` (or a repository URL) into its parts.

    Raises
    ------
    ValueError
        When ``ref`` does not name a single repository.
    """
    m = _REPO_REF.match(ref.strip())
    if not m:
        raise ValueError(f"expected OWNER/REPO, got {ref!r}")
    return m.group("owner"), m.group("name")


def build_client(args: argparse.Namespace) -> GitHubHtmlClient:
    """Create the scraper for a parsed command line."""
    return GitHubHtmlClient(workers=getattr(args, "workers", None))


def resolve_repository(client: GitHubHtmlClient, ref: str) -> Repository:
    owner, name = parse_repo_ref(ref)
    return client.get_owner(owner).get_repository(name)


def _print(payload: Any, as_json: bool, lines: Iterable[str]) -> None:
    if as_json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    for line in lines:
        print(line)


def handle_packages(args: argparse.Namespace, client: GitHubHtmlClient) -> int:
    repo = resolve_repository(client, args.repo)
    packages = sorted(client.list_packages(repo))
    _print(
        {"repository": repo.full_name, "packages": [p.to_dict() for p in packages]},
        args.json,
        (f"{p.id}\t{p.name}" for p in packages),
    )
    return 0


def handle_count(args: argparse.Namespace, client: GitHubHtmlClient) -> int:
    repo = resolve_repository(client, args.repo)
    count = client.get_dependents_count(repo, args.package_id)
    _print(
        {"repository": repo.full_name, "package_id": args.package_id, "dependents": count},
        args.json,
        [str(count)],
    )
    return 0


def handle_dependents(args: argparse.Namespace, client: GitHubHtmlClient) -> int:
    repo = resolve_repository(client, args.repo)
    dependents = sorted(
        client.list_dependents(
            repo,
            package_id=args.package_id,
            min_dependents=args.min_dependents,
            same_language=args.same_language,
        )
    )
    _print(
        {
            "repository": repo.full_name,
            "package_id": args.package_id,
            "same_language": args.same_language,
            "dependents": [d.to_dict() for d in dependents],
        },
        args.json,
        (d.full_name for d in dependents),
    )
    return 0


HANDLERS = {
    "packages": handle_packages,
    "count": handle_count,
    "dependents": handle_dependents,
}


def dispatch(args: argparse.Namespace, client: Optional[GitHubHtmlClient] = None) -> int:
    handler = HANDLERS[args.cmd]
    return handler(args, client or build_client(args))


__all__ = [
    "parse_repo_ref",
    "build_client",
    "resolve_repository",
    "handle_packages",
    "handle_count",
    "handle_dependents",
    "dispatch",
]

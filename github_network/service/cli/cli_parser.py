"""CLI parser construction for github-network.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ...config.defaults import MAX_WORKERS


def _non_negative_int(v: str) -> int:
    try:
        val = int(v)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {v!r}") from e
    if val < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {val}")
    return val


def _workers(v: str) -> int:
    val = _non_negative_int(v)
    if not 1 <= val <= MAX_WORKERS:
        raise argparse.ArgumentTypeError(f"workers must be between 1 and {MAX_WORKERS}")
    return val


def _add_repo_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("repo", metavar="OWNER/REPO", help="Repository as owner/name or its github.com URL")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of plain lines")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``packages``, ``count`` and ``dependents``
        subcommands. No I/O or network calls occur here.
    """
    p = argparse.ArgumentParser(
        prog="github-network",
        description="Inspect GitHub's dependency network (packages and dependents) for a repository",
    )
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    p.add_argument("--log-file", default=None, help="Also write JSON logs to this file")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_packages = sub.add_parser("packages", help="List the packages a repository publishes")
    _add_repo_argument(p_packages)

    p_count = sub.add_parser("count", help="Print the number of dependent repositories")
    _add_repo_argument(p_count)
    p_count.add_argument("--package-id", default=None)

    p_dep = sub.add_parser("dependents", help="List dependent repositories")
    _add_repo_argument(p_dep)
    p_dep.add_argument("--package-id", default=None)
    p_dep.add_argument(
        "--min-dependents",
        type=_non_negative_int,
        default=None,
        help="Keep only dependents that have at least N dependents themselves (0 disables)",
    )
    p_dep.add_argument(
        "--any-language",
        dest="same_language",
        action="store_false",
        help="Keep dependents whose primary language differs from the repository's",
    )
    p_dep.add_argument("--workers", type=_workers, default=None)

    return p


__all__ = ["build_parser"]

"""github-network CLI (package entrypoint).

This package wires argument parsing to action handlers kept in small, focused
modules. It performs no scraping logic directly.
"""

from __future__ import annotations

import json
import sys
from typing import Optional

from ...base.errors import NetworkError
from ...base.logging import configure_logger
from .cli_actions import dispatch, parse_repo_ref
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
	"""CLI entrypoint.

	Parameters
	----------
	argv: Optional[list[str]]
		Argument vector; when ``None`` uses ``sys.argv[1:]``.

	Returns
	-------
	int
		Process exit code: 0 success, 1 GitHub access failure, 2 usage error.
	"""
	p = build_parser()
	args = p.parse_args(list(sys.argv[1:] if argv is None else argv))
	configure_logger(level=args.log_level, file_path=args.log_file)

	try:
		parse_repo_ref(args.repo)
	except ValueError as e:
		print(f"{p.prog}: error: {e}", file=sys.stderr)
		return 2

	try:
		return dispatch(args)
	except NetworkError as e:
		payload = {"error": {"code": e.code.value, "message": e.message, "target": e.target}}
		print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
		return 1


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())

"""Run the CLI as ``python -m github_network.service.cli [args]``."""

from __future__ import annotations

import sys

from . import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))

"""Entry point of the server."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

BANNER = "Sidequest Server "


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog="server", description="Sidequest server.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the server banner and return the exit status."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    # Extra arguments are accepted and ignored.
    _parser().parse_known_args(arguments)
    sys.stdout.write(BANNER + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
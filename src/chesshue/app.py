"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chesshue", description="Heat-history viewer for chess games."
    )
    parser.add_argument("pgn", nargs="?", type=Path, help="PGN file to open")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Launch the Chesshue application."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from chesshue.ui.bootstrap import run_application

    sys.exit(run_application([sys.argv[0]], pgn_path=args.pgn))


if __name__ == "__main__":
    main()

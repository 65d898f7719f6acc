#!/usr/bin/env python3
"""Main entry point for Startup Manager."""

import logging
import sys

from .cli import build_parser, run_cli
from .core.manager import StartupManager
from .core.settings import Settings


def setup_logging(level: str = "INFO") -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    manager = StartupManager(settings=settings)

    if args.cmd not in (None, "gui"):
        return run_cli(args, manager, default_output=settings.default_output)

    try:
        from .gui.app import run

        return run(manager)
    except ImportError as e:
        logging.error(f"Failed to import GUI: {e}")
        logging.error("Make sure PySide6 is installed:")
        logging.error("  pip install PySide6")
        return 1


if __name__ == "__main__":
    sys.exit(main())

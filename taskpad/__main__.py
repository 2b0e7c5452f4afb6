"""Entry point for Taskpad.

This module allows running Taskpad as a module:
    python -m taskpad

Or as an installed command:
    taskpad
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from taskpad.logging_config import setup_logging, get_logger

# Initialize logger for this module
logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskpad", description="A simple task list.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.ini (default: ~/.taskpad/config.ini)",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy async database URL (overrides config and TASKPAD_DATABASE_URL)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(args: Optional[list[str]] = None) -> int:
    """Main entry point for Taskpad.

    Args:
        args: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if args is None:
        args = sys.argv[1:]
    options = build_parser().parse_args(args)

    # Initialize logging before any other operations
    setup_logging(log_level=options.log_level)

    if options.database_url:
        os.environ["TASKPAD_DATABASE_URL"] = options.database_url

    # Import here to improve startup time
    from taskpad.config import Config
    from taskpad.ui.app import TaskpadApp

    try:
        app = TaskpadApp(config=Config(options.config))
        app.run()
        logger.info("Taskpad application exited normally")
        return 0
    except KeyboardInterrupt:
        logger.info("Taskpad closed by user (Ctrl+C)")
        return 0
    except Exception:
        logger.error("Error running Taskpad", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

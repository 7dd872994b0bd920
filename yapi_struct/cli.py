"""Command-line entry point for yapi_struct."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from . import __version__
from .codegen.cli_integration import add_codegen_args, handle_codegen_command
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``yapi-struct`` command."""
    parser = argparse.ArgumentParser(
        prog="yapi-struct",
        description="Generate Go struct declarations from a YApi export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  yapi-struct -i api.json -o types.go
  yapi-struct -i api.json -c "User" -p /user/info
  curl -s $EXPORT_URL | yapi-struct --sort-fields
  yapi-struct -i api.json --list-classifications
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    add_codegen_args(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.INFO if args.verbose and args.log_level == "WARNING" else args.log_level
    configure_logging(level)
    logger.debug("Arguments: %s", vars(args))

    return handle_codegen_command(args)

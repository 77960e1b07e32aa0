#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Command-line interface for dev-cleanup.

This module parses the command-line flags with argparse, sets up logging and
runs the cleanup catalog.
"""

import argparse
import logging
import sys
from typing import List, Optional

from devcleanup import __version__
from devcleanup.core.config import Configuration
from devcleanup.core.console import Reporter
from devcleanup.core.environment import Environment
from devcleanup.core.orchestrator import run_cleanup
from devcleanup.core.section import CleanupError, CommandFailedError

# Configure logging
logger = logging.getLogger("devcleanup")

PROG_NAME = "dev-cleanup"

EPILOG = """
Android emulators/AVDs and Xcode simulator devices are never removed.

Examples:
  # See what would be removed
  dev-cleanup --dry-run

  # Full cleanup including Xcode and Docker
  dev-cleanup --include-xcode --include-docker --aggressive
"""


class UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""
    pass


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors to the caller instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(message)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Whether to enable verbose logging (INFO level)
        debug: Whether to enable debug logging (DEBUG level)
    """
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = logging.ERROR

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Configure root logger
    logging.basicConfig(level=log_level, format=log_format)


def create_parser() -> OptionParser:
    """
    Create the command-line argument parser.

    Returns:
        Configured argument parser
    """
    parser = OptionParser(
        prog=PROG_NAME,
        description="Remove developer toolchain caches to reclaim disk space on macOS",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Show what would be removed, but don't remove it"
    )
    parser.add_argument(
        "--include-xcode", action="store_true",
        help="Also clean Xcode caches (DerivedData, DeviceSupport, etc.)"
    )
    parser.add_argument(
        "--include-docker", action="store_true",
        help="Also prune Docker (stopped containers, dangling images, build cache)"
    )
    parser.add_argument(
        "--aggressive", action="store_true",
        help="Remove larger language caches (pub hosted/git packages)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "-X", "--debug", action="store_true", help="Enable debug logging (DEBUG level)"
    )
    parser.add_argument(
        "--version", action="version", version=f"{PROG_NAME} {__version__}"
    )
    return parser


def first_unknown_token(parser: OptionParser, args: List[str]) -> str:
    """Return the first token that is not exactly one of the parser's option strings."""
    known = set()
    for action in parser._actions:
        known.update(action.option_strings)
    for token in args:
        if token not in known:
            return token
    return " ".join(args)


def parse_options(parser: OptionParser, args: List[str]) -> Configuration:
    """
    Parse the argument vector into a Configuration.

    ``-h``/``--help`` and ``--version`` print and exit with status 0 through
    argparse.

    Raises:
        UsageError: On the first token that is not a recognized flag
    """
    try:
        parsed, unknown = parser.parse_known_args(args)
    except UsageError:
        # argparse rejected a malformed flag such as --dry-run=yes or -vq
        raise UsageError(f"Unknown option: {first_unknown_token(parser, args)}")
    if unknown:
        raise UsageError(f"Unknown option: {unknown[0]}")
    return Configuration(
        dry_run=parsed.dry_run,
        include_xcode=parsed.include_xcode,
        include_docker=parsed.include_docker,
        aggressive=parsed.aggressive,
        verbose=parsed.verbose,
        debug=parsed.debug,
    )


def main(args: Optional[List[str]] = None, env: Optional[Environment] = None,
         reporter: Optional[Reporter] = None) -> int:
    """
    Main entry point for the application.

    Args:
        args: Command-line arguments (if None, use sys.argv)
        env: Machine to clean (defaults to the real one)
        reporter: Console output (defaults to stdout)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if args is None:
        args = sys.argv[1:]

    parser = create_parser()
    try:
        config = parse_options(parser, args)
    except UsageError as e:
        print(str(e))
        parser.print_help()
        return 1

    # Set up logging
    setup_logging(config.verbose, config.debug)
    logger.debug(f"Configuration: {config}")

    env = env or Environment()
    reporter = reporter or Reporter()

    try:
        total = run_cleanup(config, env, reporter)
    except CommandFailedError as e:
        logger.error(str(e))
        logger.debug("Exception details:", exc_info=True)
        return e.returncode
    except CleanupError as e:
        logger.error(f"Cleanup failed: {e}")
        logger.debug("Exception details:", exc_info=True)
        return 1
    except OSError as e:
        logger.error(f"File operation error: {e}")
        logger.debug("Exception details:", exc_info=True)
        return 1

    logger.info(f"Freed {total} bytes by direct removal")
    return 0


if __name__ == "__main__":
    sys.exit(main())

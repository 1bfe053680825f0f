"""Command-line interface for the BibTeX entry scanner."""

import argparse
import logging
import sys
from pathlib import Path

from .config import ScannerConfig
from .exceptions import BibscanError, UnterminatedContentError
from .scanner import scan
from .serialize import encode_tokens


def setup_logging(verbosity: int = 0) -> None:
    """Configure logging for the CLI application.

    Args:
        verbosity: Logging verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s:%(lineno)d – %(message)s",
    )


def read_entry(path: str) -> str:
    """Read entry source from ``path``, or from stdin when ``path`` is ``-``.

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    if path == "-":
        return sys.stdin.read()

    entry_path = Path(path)
    if not entry_path.exists():
        raise FileNotFoundError(f"Entry file not found: {entry_path}")

    return entry_path.read_text(encoding="utf-8")


def cmd_tokens(args: argparse.Namespace) -> None:
    """Print the token sequence for a single entry."""
    logger = logging.getLogger(__name__)
    config = ScannerConfig.from_args(args)

    try:
        tokens = scan(read_entry(args.path), config)
    except (FileNotFoundError, BibscanError) as e:
        logger.error(f"Scan error: {e}")
        sys.exit(1)

    logger.info(f"✓ Scanned {len(tokens)} tokens from {args.path}")

    if args.format == "json":
        sys.stdout.write(encode_tokens(tokens).decode("utf-8"))
        sys.stdout.write("\n")
    else:
        for token in tokens:
            sys.stdout.write(f"{token.kind.name:<16} {token.text}\n")

    sys.exit(0)


def cmd_check(args: argparse.Namespace) -> None:
    """Check that an entry scans without leftover content."""
    logger = logging.getLogger(__name__)
    config = ScannerConfig.from_args(args)

    try:
        tokens = scan(read_entry(args.path), config)
    except UnterminatedContentError as e:
        logger.error(f"✗ Unterminated content in {args.path}: {e.remaining!r}")
        sys.exit(1)
    except (FileNotFoundError, BibscanError) as e:
        logger.error(f"Check error: {e}")
        sys.exit(1)

    logger.info(f"✓ {args.path} scanned cleanly ({len(tokens)} tokens)")
    sys.exit(0)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bibscan",
        description="Scan a BibTeX entry into typed tokens.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (use -v for INFO, -vv for DEBUG)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Options shared by every scanning subcommand
    scan_options = argparse.ArgumentParser(add_help=False)
    scan_options.add_argument("path", help="Path to a file holding one entry ('-' for stdin)")
    scan_options.add_argument(
        "--track-brace-depth",
        action="store_true",
        help="Treat ',', '=' and '@' inside nested braces as value content",
    )

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens", parents=[scan_options], help="Print the token sequence of an entry"
    )
    tokens_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    tokens_parser.set_defaults(func=cmd_tokens)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check", parents=[scan_options], help="Check that an entry scans without leftovers"
    )
    check_parser.set_defaults(func=cmd_check)

    return parser


def main() -> None:
    """Main entry point for the bibscan CLI."""
    parser = create_parser()
    args = parser.parse_args()

    # Setup logging based on verbosity
    setup_logging(args.verbose)

    # Handle case where no subcommand is provided
    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()

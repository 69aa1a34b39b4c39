"""Command-line interface for the directory exploder."""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from tqdm import tqdm

from . import __version__
from .errors import ExploderError
from .exploder import explode
from .models import ExplodeConfig


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="explode",
        description="Move the contents of a directory into another directory "
                    "and remove the emptied directory.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s downloads/album
  %(prog)s -v --dry-run downloads/album music
  %(prog)s --force downloads/album music
        """
    )

    parser.add_argument("source", type=Path, help="The directory to explode")
    parser.add_argument(
        "destination",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The output directory (default: current directory)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print what is being done"
    )

    parser.add_argument(
        "--dry-run", "-d",
        action="store_true",
        help="Don't change anything, only report what would be done"
    )

    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite entries that already exist in the output directory"
    )

    parser.add_argument(
        "--progress", "-p",
        action="store_true",
        help="Show a progress bar while moving entries"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ExplodeConfig:
    """Turn parsed arguments into an explode configuration."""
    return ExplodeConfig(
        source=args.source,
        destination=args.destination,
        force=args.force,
        dry_run=args.dry_run,
        verbose=args.verbose,
        progress=args.progress,
    )


def report_error(error: ExploderError) -> None:
    """Print an error and its underlying cause to stderr."""
    print(f"Error: {error}", file=sys.stderr)
    if error.__cause__ is not None:
        print(f"  Caused by: {error.__cause__}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)

    # Keep notifications from tearing the progress bar
    notify = tqdm.write if config.progress else print

    try:
        explode(config, notify)
    except ExploderError as e:
        report_error(e)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nInterrupted! Entries moved so far stay in the destination.")
        print("Run the same command again to move the rest.")
        sys.exit(1)

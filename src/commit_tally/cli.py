"""CLI entry point for commit-tally."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commit-tally",
        description=(
            "Count commits per author across every Git repository below a "
            "directory and list each repository's origin URL."
        ),
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory to search for repositories (default: current directory)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Scan the requested directory and print the tally."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    from commit_tally.aggregator import tally_directory
    from commit_tally.report import render_report

    root = Path(args.directory)
    if not root.is_dir():
        print(f"commit-tally: {root} is not a directory", file=sys.stderr)
        sys.exit(1)

    try:
        report = tally_directory(root)
    except OSError as e:
        print(f"commit-tally: cannot scan {root}: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(render_report(report))


if __name__ == "__main__":
    main()

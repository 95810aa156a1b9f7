"""Command-line argument parsing for git-branch-sweeper."""

import argparse
from typing import Optional, Sequence

from git_branch_sweeper.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-branch-sweeper",
        description="Delete local branches whose GitHub pull requests are all merged",
        epilog="Setup: Requires the GitHub CLI (gh) to be installed and logged in "
        "('gh auth login'). Run from inside a clone of a GitHub repository.",
    )
    parser.add_argument(
        "-safe",
        "--safe",
        dest="safe",
        action="store_true",
        help="Safe mode - report which branches would be deleted without deleting them",
    )
    parser.add_argument(
        "-force",
        "--force",
        dest="force",
        action="store_true",
        help="Also delete branches whose pull requests were closed without merging",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-branch-sweeper {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)

"""Command-line argument parsing for git-branch-sweeper."""

import argparse
import os

from git_branch_sweeper.__version__ import __version__
from git_branch_sweeper.constants import DEFAULT_BASE_BRANCH, DEFAULT_STALE_DAYS


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-branch-sweeper",
        description="Delete local and remote git branches that are merged into a base branch "
        "or have gone stale",
        epilog="Merged branches are detected through merge commits on the base branch; "
        "squash and rebase merges are not detected.",
    )
    parser.add_argument(
        "-b",
        "--base",
        default=DEFAULT_BASE_BRANCH,
        help=f"Base branch for comparison, local and remote (default: {DEFAULT_BASE_BRANCH})",
    )
    parser.add_argument(
        "-r",
        "--remote",
        action="store_true",
        help="Also clean up branches on the 'origin' remote",
    )
    parser.add_argument(
        "--stale",
        type=int,
        nargs="?",
        const=DEFAULT_STALE_DAYS,
        default=None,
        metavar="DAYS",
        help=f"Also offer branches with no commits for DAYS days (default: {DEFAULT_STALE_DAYS})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - list candidates without deleting anything",
    )
    parser.add_argument("--protected", nargs="*", default=[], help="Branches never to delete")
    parser.add_argument("--ignore", nargs="*", default=[], help="Branch patterns to ignore")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Pick branches in a full-screen list instead of the console prompt",
    )
    parser.add_argument(
        "-C",
        "--repo",
        default=os.getcwd(),
        metavar="PATH",
        help="Repository to clean up (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-branch-sweeper {__version__}")

    return parser.parse_args(argv)

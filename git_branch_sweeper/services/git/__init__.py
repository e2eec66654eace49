"""Git access for git-branch-sweeper."""

from .runner import CommandRunner
from .repository import GitRepository

__all__ = [
    "CommandRunner",
    "GitRepository",
]

"""Core orchestration for git-branch-sweeper."""

from .sweeper import BranchSweeper

__all__ = ["BranchSweeper"]

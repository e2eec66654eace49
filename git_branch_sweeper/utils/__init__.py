"""Utility functions for git-branch-sweeper."""

from .logging import LevelColorFormatter, get_log_file, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "get_log_file",
    "LevelColorFormatter",
]

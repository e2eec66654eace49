"""Formatting utilities for git-branch-sweeper."""

from .branch import format_candidate_items, format_category, format_scope
from .date import format_timestamp

__all__ = [
    "format_candidate_items",
    "format_category",
    "format_scope",
    "format_timestamp",
]

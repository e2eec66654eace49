"""Data models for git-branch-sweeper."""

from .branch import Branch, Category, Scope
from .results import CandidateSet, DeletionOutcome, RunSummary, ScopeReport

__all__ = [
    "Branch",
    "Category",
    "Scope",
    "CandidateSet",
    "DeletionOutcome",
    "RunSummary",
    "ScopeReport",
]

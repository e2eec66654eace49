"""Candidate set construction: exclusion and precedence rules."""

from fnmatch import fnmatchcase
from typing import Collection, Iterable, Optional, Set

from git_branch_sweeper.models.branch import Scope
from git_branch_sweeper.models.results import CandidateSet


def matches_any(name: str, patterns: Iterable[str]) -> bool:
    """Check a branch name against glob patterns."""
    return any(fnmatchcase(name, pattern) for pattern in patterns)


def collect_exclusions(
    names: Iterable[str],
    protected_branches: Collection[str] = (),
    ignore_patterns: Collection[str] = (),
) -> Set[str]:
    """Branch names that must never become candidates because of configuration."""
    excluded = set()
    for name in names:
        if name in protected_branches or matches_any(name, ignore_patterns):
            excluded.add(name)
    return excluded


def build_candidate_set(
    scope: Scope,
    merged: Iterable[str],
    stale: Iterable[str],
    base_branch: str,
    current_branch: Optional[str] = None,
    excluded: Collection[str] = (),
) -> CandidateSet:
    """Combine classifier results into the deletion candidates of a scope.

    The base branch and the excluded names are dropped in every scope, the
    checked-out branch only in the local scope. A branch that is both merged
    and stale is kept as merged only. Order is preserved and duplicates are
    removed.
    """
    blocked = set(excluded)
    blocked.add(base_branch)
    if scope is Scope.LOCAL and current_branch:
        blocked.add(current_branch)

    merged_names = _unique(name for name in merged if name not in blocked)
    merged_lookup = set(merged_names)
    stale_names = _unique(
        name for name in stale if name not in blocked and name not in merged_lookup
    )
    return CandidateSet(scope=scope, merged=merged_names, stale=stale_names)


def _unique(names: Iterable[str]) -> list:
    seen = set()
    result = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result

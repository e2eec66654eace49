"""Result models threaded through the sweep pipeline."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from git_branch_sweeper.models.branch import Category, Scope


@dataclass
class CandidateSet:
    """Deletion candidates of one scope.

    A name in ``merged`` is never repeated in ``stale``.
    """

    scope: Scope
    merged: List[str] = field(default_factory=list)
    stale: List[str] = field(default_factory=list)

    def __post_init__(self):
        merged = set(self.merged)
        self.stale = [name for name in self.stale if name not in merged]

    def __len__(self) -> int:
        return len(self.merged) + len(self.stale)

    def __bool__(self) -> bool:
        return len(self) > 0

    def names(self, category: Category) -> List[str]:
        return self.merged if category is Category.MERGED else self.stale

    def items(self) -> List[Tuple[str, Category]]:
        """All candidates as (name, category), merged first."""
        return [(name, Category.MERGED) for name in self.merged] + [
            (name, Category.STALE) for name in self.stale
        ]


@dataclass
class DeletionOutcome:
    """Counts for one deletion batch. Failures carry (branch, error)."""

    attempted: int = 0
    deleted: int = 0
    failed: int = 0
    failures: List[Tuple[str, str]] = field(default_factory=list)

    def __add__(self, other: "DeletionOutcome") -> "DeletionOutcome":
        return DeletionOutcome(
            attempted=self.attempted + other.attempted,
            deleted=self.deleted + other.deleted,
            failed=self.failed + other.failed,
            failures=self.failures + other.failures,
        )


@dataclass
class ScopeReport:
    """What happened in one scope during a run."""

    scope: Scope
    candidates: CandidateSet
    outcome: DeletionOutcome = field(default_factory=DeletionOutcome)
    declined: bool = False  # Operator chose nothing for this scope


@dataclass
class RunSummary:
    """Everything the orchestrator produced in one invocation."""

    local: ScopeReport
    remote: Optional[ScopeReport] = None
    dry_run: bool = False
    cancelled: bool = False
    final_prune: bool = False

    @property
    def total(self) -> DeletionOutcome:
        outcome = self.local.outcome
        if self.remote is not None:
            outcome = outcome + self.remote.outcome
        return outcome

    @property
    def candidate_count(self) -> int:
        count = len(self.local.candidates)
        if self.remote is not None:
            count += len(self.remote.candidates)
        return count

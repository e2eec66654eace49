"""Deletion of confirmed candidates."""

from typing import Iterable, Optional

from git_branch_sweeper.exceptions import GitOperationError
from git_branch_sweeper.models.branch import Category, Scope
from git_branch_sweeper.models.results import DeletionOutcome
from git_branch_sweeper.services.display_service import DisplayService
from git_branch_sweeper.services.git.repository import GitRepository
from git_branch_sweeper.utils.logging import get_logger

logger = get_logger(__name__)


def requires_force(scope: Scope, category: Category) -> bool:
    """Whether deleting a branch of this scope and category needs a forcing delete.

    Merged local branches use the non-forcing delete so git re-checks that the
    branch is fully merged. Stale local branches are force-deleted because they
    are unmerged by definition. Remote deletes have no force variant.
    """
    return scope is Scope.LOCAL and category is Category.STALE


class DeletionExecutor:
    """Deletes branches one at a time and accounts for each result."""

    def __init__(self, repository: GitRepository, display: Optional[DisplayService] = None):
        self.repository = repository
        self.display = display

    def execute(self, scope: Scope, category: Category, branches: Iterable[str]) -> DeletionOutcome:
        """Delete a batch of branches of one scope and category.

        A failing branch is recorded and the batch continues with the next
        one. Only infrastructure errors propagate.

        Args:
            scope: Scope of the branches
            category: Candidate category, selects the delete operation
            branches: Branch names (without remote prefix)

        Returns:
            DeletionOutcome with attempted, deleted and failed counts
        """
        branches = list(branches)
        outcome = DeletionOutcome()
        if not branches:
            return outcome

        force = requires_force(scope, category)
        if self.display:
            self.display.deleting(scope, category, len(branches))

        for name in branches:
            outcome.attempted += 1
            try:
                self.repository.delete_branch(scope, name, force=force)
            except GitOperationError as e:
                error = e.message or str(e)
                logger.debug(f"Deleting {scope.value} branch {name} failed: {e}")
                outcome.failed += 1
                outcome.failures.append((name, error))
                if self.display:
                    self.display.branch_failed(scope, name, error)
                continue

            outcome.deleted += 1
            logger.info(f"Deleted {scope.value} branch {name} ({category.value})")
            if self.display:
                self.display.branch_deleted(scope, name)

        return outcome

"""Merge detection for git-branch-sweeper.

A branch merged with a regular two-parent merge commit has its tip recorded
as the second parent of that merge commit on the base branch's first-parent
history. Collecting those second parents gives an exact set of merged tips
without an ancestry check per branch, and cannot match a branch whose tip
merely equals some commit that happens to be reachable from the base.

Squash merges and rebase merges leave no merge commit and are therefore not
detected. That is deliberate: the fallbacks that would find them (patch or
ancestry comparisons) also flag branches that are not safe to delete.
"""

from typing import Collection, List, Optional, Set

from git_branch_sweeper.exceptions import GitOperationError
from git_branch_sweeper.models.branch import Scope
from git_branch_sweeper.services.git.repository import GitRepository
from git_branch_sweeper.services.ref_inventory import RefInventory
from git_branch_sweeper.utils.logging import get_logger

logger = get_logger(__name__)


class MergeClassifier:
    """Finds the branches of a scope that were merged into the base branch."""

    def __init__(self, repository: GitRepository):
        self.repository = repository

    def merged_set(self, scope: Scope, base_branch: str) -> Set[str]:
        """Commit hashes merged into the base branch through merge commits.

        Walks the base branch's first-parent history and records the second
        parent of every commit that has two or more parents.

        Raises:
            GitOperationError: If the history cannot be read
        """
        merged = set()
        merge_commits = 0
        for commit, parents in self.repository.mainline(scope, base_branch):
            if len(parents) >= 2:
                merge_commits += 1
                merged.add(parents[1])
        logger.debug(
            f"{merge_commits} merge commits on the mainline of {scope.value} {base_branch}"
        )
        return merged

    def classify(
        self,
        inventory: RefInventory,
        base_branch: str,
        current_branch: Optional[str] = None,
        excluded: Collection[str] = (),
    ) -> List[str]:
        """Names of branches whose tip was merged into the base branch.

        Args:
            inventory: Branch inventory of the scope
            base_branch: Base branch name (without remote prefix)
            current_branch: Checked-out branch, never reported (local scope)
            excluded: Further names that are never reported

        Returns:
            Merged branch names in inventory order; empty when the base branch
            is missing from the scope or its history cannot be read
        """
        scope = inventory.scope
        base_display = self.repository.display_name(scope, base_branch)

        if not self.repository.ref_exists(scope, base_branch):
            logger.warning(
                f"Skipping {scope.value} merged check: base branch '{base_display}' does not exist"
            )
            return []

        try:
            merged_tips = self.merged_set(scope, base_branch)
        except GitOperationError as e:
            logger.warning(
                f"Skipping {scope.value} merged check: could not read history of '{base_display}': {e}"
            )
            return []

        merged = []
        for branch in inventory.branches():
            name = branch.name
            if name == base_branch or name == current_branch or name in excluded:
                continue
            if branch.tip in merged_tips:
                logger.info(f"{scope.value} branch {name} is merged into {base_display}")
                merged.append(name)
        return merged

"""Branch inventory of one scope."""

from typing import Dict, List, Optional

from git_branch_sweeper.exceptions import GitOperationError
from git_branch_sweeper.models.branch import Branch, Scope
from git_branch_sweeper.services.git.repository import GitRepository
from git_branch_sweeper.utils.logging import get_logger

logger = get_logger(__name__)


class RefInventory:
    """Branch names, tips and commit timestamps of a single scope.

    The branch listing is read once and then held for the rest of the run.
    A scope whose branches cannot be listed (no remote configured, for
    example) behaves as an empty inventory.
    """

    def __init__(self, repository: GitRepository, scope: Scope):
        self.repository = repository
        self.scope = scope
        self._tips: Optional[Dict[str, str]] = None
        self._timestamps: Dict[str, Optional[int]] = {}

    def _load(self) -> Dict[str, str]:
        if self._tips is None:
            try:
                self._tips = dict(self.repository.list_branches(self.scope))
                logger.debug(f"Found {len(self._tips)} {self.scope.value} branches")
            except GitOperationError as e:
                logger.warning(
                    f"Could not list {self.scope.value} branches, skipping merged and stale checks: {e}"
                )
                self._tips = {}
        return self._tips

    def branches(self) -> List[Branch]:
        """Branches of the scope in the order git lists them.

        Timestamps are filled in only for branches whose timestamp was
        already read through :meth:`commit_timestamp`.
        """
        return [
            Branch(name, self.scope, tip, self._timestamps.get(name))
            for name, tip in self._load().items()
        ]

    def list_branch_tips(self) -> Dict[str, str]:
        """Mapping of branch name to tip commit."""
        return dict(self._load())

    def list_all_branch_names(self) -> List[str]:
        return list(self._load())

    def __contains__(self, name: str) -> bool:
        return name in self._load()

    def commit_timestamp(self, name: str) -> Optional[int]:
        """Last commit timestamp of a branch in unix seconds, None when unknown."""
        if name not in self._timestamps:
            self._timestamps[name] = self.repository.commit_timestamp(self.scope, name)
        return self._timestamps[name]

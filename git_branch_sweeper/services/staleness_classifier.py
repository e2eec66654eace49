"""Staleness detection for git-branch-sweeper."""

from typing import Collection, List, Optional

from git_branch_sweeper.constants import SECONDS_PER_DAY
from git_branch_sweeper.formatters.date import format_timestamp
from git_branch_sweeper.models.branch import Scope
from git_branch_sweeper.services.display_service import DisplayService
from git_branch_sweeper.services.ref_inventory import RefInventory
from git_branch_sweeper.utils.logging import get_logger

logger = get_logger(__name__)


class StalenessClassifier:
    """Finds branches whose last commit is older than a day threshold.

    ``now`` is fixed when the classifier is created so that every branch of a
    run is measured against the same cutoff.
    """

    def __init__(self, stale_days: int, now: int, display: Optional[DisplayService] = None):
        """
        Args:
            stale_days: Threshold in days, must be positive
            now: Unix timestamp taken once for the whole run
            display: Receives the per-branch age report, which is logged otherwise
        """
        if stale_days <= 0:
            raise ValueError(f"stale_days must be positive, got {stale_days}")
        self.stale_days = stale_days
        self.now = now
        self.display = display

    @property
    def cutoff(self) -> int:
        """Branches with a last commit strictly before this timestamp are stale."""
        return self.now - self.stale_days * SECONDS_PER_DAY

    def is_stale(self, timestamp: Optional[int]) -> bool:
        if timestamp is None:
            return False
        return timestamp < self.cutoff

    def classify(
        self,
        inventory: RefInventory,
        merged: Collection[str],
        base_branch: str,
        current_branch: Optional[str] = None,
        excluded: Collection[str] = (),
    ) -> List[str]:
        """Names of stale branches that are not already merged candidates.

        Branches whose timestamp cannot be read are skipped with a warning.
        """
        scope = inventory.scope.value
        merged = set(merged)
        stale = []

        for name in inventory.list_all_branch_names():
            if name in merged or name == base_branch or name == current_branch:
                continue
            if name in excluded:
                continue

            timestamp = inventory.commit_timestamp(name)
            if timestamp is None:
                logger.warning(
                    f"Skipping {scope} stale check for {name}: could not get commit timestamp"
                )
                continue

            is_stale = self.is_stale(timestamp)
            if is_stale:
                stale.append(name)
            self._report(inventory.scope, name, timestamp, is_stale)

        return stale

    def _report(self, scope: Scope, name: str, timestamp: int, is_stale: bool) -> None:
        date = format_timestamp(timestamp)
        if self.display is not None:
            self.display.branch_age(scope, name, date, is_stale)
        elif is_stale:
            logger.info(f"Queuing {scope.value} {name} (inactive since {date})")
        else:
            logger.info(f"Keeping {scope.value} {name} (active since {date})")

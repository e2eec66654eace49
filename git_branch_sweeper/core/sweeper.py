"""Core functionality for git-branch-sweeper"""

import time
from typing import Callable, List, Optional

from git_branch_sweeper.config import Config
from git_branch_sweeper.exceptions import GitOperationError, SelectionCancelledError
from git_branch_sweeper.models.branch import Category, Scope
from git_branch_sweeper.models.results import CandidateSet, RunSummary, ScopeReport
from git_branch_sweeper.services.candidates import build_candidate_set, collect_exclusions
from git_branch_sweeper.services.deletion_executor import DeletionExecutor
from git_branch_sweeper.services.display_service import DisplayService
from git_branch_sweeper.services.git import CommandRunner, GitRepository
from git_branch_sweeper.services.merge_classifier import MergeClassifier
from git_branch_sweeper.services.ref_inventory import RefInventory
from git_branch_sweeper.services.staleness_classifier import StalenessClassifier
from git_branch_sweeper.ui.prompt import ConsoleSelectionPrompt
from git_branch_sweeper.utils.logging import get_logger

logger = get_logger(__name__)


class BranchSweeper:
    """Classifies branches and deletes the ones the operator confirms.

    One call to :meth:`run` walks the local scope and then, when enabled, the
    remote scope. Classification failures only empty the affected scope;
    infrastructure errors propagate to the caller.
    """

    def __init__(
        self,
        repository: GitRepository,
        config: Config,
        prompt=None,
        display: Optional[DisplayService] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize BranchSweeper.

        Args:
            repository: Git access for the repository being cleaned
            config: Configuration object
            prompt: Object with a select(scope, items) method, defaults to the console prompt
            display: Console output, defaults to the shared console
            clock: Source of the single "now" snapshot used for staleness
        """
        self.repository = repository
        self.config = config
        self.display = display or DisplayService(remote_name=config.remote_name)
        self.prompt = prompt or ConsoleSelectionPrompt(remote_name=config.remote_name)
        self.merge_classifier = MergeClassifier(repository)
        self.executor = DeletionExecutor(repository, self.display)

        self.now = int(clock())
        self.staleness: Optional[StalenessClassifier] = None
        if config.stale_enabled:
            self.staleness = StalenessClassifier(config.stale_days, self.now, self.display)

    @classmethod
    def from_path(cls, repo_path: str, config: Config, **kwargs) -> "BranchSweeper":
        """Create a sweeper for the repository at ``repo_path``."""
        runner = CommandRunner(repo_path, max_output_bytes=config.max_output_bytes)
        return cls(GitRepository(runner, remote_name=config.remote_name), config, **kwargs)

    def run(self) -> RunSummary:
        """Run the whole sweep and return what happened."""
        self.display.show_configuration(self.config)

        self.display.step(1, "Pruning remote-tracking branches...")
        self._prune()

        self.display.step(
            2, f"Checking local branches against local '{self.config.base_branch}'..."
        )
        summary = RunSummary(
            local=ScopeReport(Scope.LOCAL, self.classify(Scope.LOCAL)),
            dry_run=self.config.dry_run,
        )

        try:
            self._select_and_delete(summary.local)

            if self.config.remote_enabled:
                self.display.step(
                    3,
                    f"Checking remote branches on '{self.config.remote_name}' "
                    f"against '{self.config.remote_base_branch}'...",
                )
                summary.remote = ScopeReport(Scope.REMOTE, self.classify(Scope.REMOTE))
                self._select_and_delete(summary.remote)

                if summary.remote.outcome.attempted > 0:
                    self.display.step(4, "Pruning remote-tracking branches after remote deletions...")
                    self._prune()
                    summary.final_prune = True
                else:
                    self.display.step(4, "No remote branches deleted, skipping final prune.")
        except SelectionCancelledError as e:
            logger.info(f"Selection cancelled: {e}")
            summary.cancelled = True
            self.display.cancelled()
            if self.config.remote_enabled and summary.remote is None:
                summary.remote = ScopeReport(Scope.REMOTE, CandidateSet(Scope.REMOTE))

        self.display.show_summary(summary)
        return summary

    def classify(self, scope: Scope) -> CandidateSet:
        """Compute the deletion candidates of a scope without side effects."""
        base_branch = self.config.base_branch
        inventory = RefInventory(self.repository, scope)

        current_branch = None
        if scope is Scope.LOCAL:
            current_branch = self.repository.current_branch()
            if current_branch:
                self.display.current_branch(current_branch)
            else:
                logger.info("HEAD is detached, no current local branch")

        excluded = collect_exclusions(
            inventory.list_all_branch_names(),
            self.config.protected_branches,
            self.config.ignore_patterns,
        )
        if excluded:
            logger.info(f"Excluded by configuration ({scope.value}): {', '.join(sorted(excluded))}")

        merged: List[str] = []
        try:
            merged = self.merge_classifier.classify(inventory, base_branch, current_branch, excluded)
        except GitOperationError as e:
            logger.warning(f"Skipping {scope.value} merged check: {e}")

        stale: List[str] = []
        if self.staleness is not None:
            try:
                stale = self.staleness.classify(
                    inventory, merged, base_branch, current_branch, excluded
                )
            except GitOperationError as e:
                logger.warning(f"Skipping {scope.value} stale check: {e}")

        candidates = build_candidate_set(
            scope, merged, stale, base_branch, current_branch, excluded
        )
        self.display.show_candidates(candidates)
        return candidates

    def _select_and_delete(self, report: ScopeReport) -> None:
        """Ask which candidates to delete and delete them, category by category."""
        candidates = report.candidates
        if not candidates or self.config.dry_run:
            return

        chosen = self.prompt.select(report.scope, candidates.items())
        if not chosen:
            report.declined = True
            self.display.declined(report.scope)
            return

        for category in (Category.MERGED, Category.STALE):
            names = [name for name, item_category in chosen if item_category is category]
            report.outcome = report.outcome + self.executor.execute(report.scope, category, names)

    def _prune(self) -> None:
        if self.config.dry_run:
            self.display.info("Dry run: skipping prune.")
            return
        try:
            self.repository.prune()
        except GitOperationError as e:
            logger.warning(f"Could not prune remote '{self.config.remote_name}': {e}")

"""Console output for git-branch-sweeper"""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_branch_sweeper.config import Config
from git_branch_sweeper.constants import CATEGORY_COLORS, SYMBOL_DELETED, SYMBOL_FAILED
from git_branch_sweeper.formatters import format_scope
from git_branch_sweeper.models.branch import Category, Scope
from git_branch_sweeper.models.results import CandidateSet, RunSummary, ScopeReport
from git_branch_sweeper.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


class DisplayService:
    """Operator-facing output. Diagnostics go to the logger instead."""

    def __init__(self, remote_name: str = "origin", output: Optional[Console] = None):
        self.remote_name = remote_name
        self.console = output or console

    def _scope_label(self, scope: Scope) -> str:
        return format_scope(scope, self.remote_name)

    def show_configuration(self, config: Config) -> None:
        """Print what this run is going to do."""
        self.console.print(f"Using base branch: [bold]{escape(config.base_branch)}[/bold]")
        if config.remote_enabled:
            self.console.print(f"Remote deletion enabled for '{escape(config.remote_name)}'.")
        if config.stale_enabled:
            self.console.print(
                f"Stale check enabled: branches inactive for more than {config.stale_days} days."
            )
        if config.dry_run:
            self.console.print("[yellow]Dry run: no branches will be deleted.[/yellow]")

    def step(self, number: int, message: str) -> None:
        self.console.print(f"\n[bold]Step {number}:[/bold] {message}")

    def info(self, message: str) -> None:
        self.console.print(message)

    def current_branch(self, name: str) -> None:
        self.console.print(f"Current local branch: {escape(name)}")

    def branch_age(self, scope: Scope, name: str, date: str, stale: bool) -> None:
        """One line of the stale check age report."""
        if stale:
            self.console.print(f"[yellow]Queuing {scope.value} {escape(name)} (inactive since {date})[/yellow]")
        else:
            self.console.print(f"[dim]Keeping {scope.value} {escape(name)} (active since {date})[/dim]")

    def show_candidates(self, candidates: CandidateSet) -> None:
        """List the candidates of a scope, merged first."""
        label = self._scope_label(candidates.scope)
        if not candidates:
            self.console.print(f"No {label} branches to delete.")
            return

        table = Table(title=f"{len(candidates)} {label} candidate(s) for deletion")
        table.add_column("#", justify="right")
        table.add_column("Branch")
        table.add_column("Reason")
        for index, (name, category) in enumerate(candidates.items(), start=1):
            color = CATEGORY_COLORS.get(category.value)
            table.add_row(str(index), escape(name), category.value, style=color)
        self.console.print(table)

    def deleting(self, scope: Scope, category: Category, count: int) -> None:
        self.console.print(
            f"\nDeleting {count} {category.value} {self._scope_label(scope)} branch(es)..."
        )

    def branch_deleted(self, scope: Scope, name: str) -> None:
        self.console.print(f"[green]{SYMBOL_DELETED} Deleted {scope.value} {escape(name)}[/green]")

    def branch_failed(self, scope: Scope, name: str, error: str) -> None:
        self.console.print(
            f"[red]{SYMBOL_FAILED} Failed to delete {scope.value} {escape(name)}: {escape(error)}[/red]"
        )

    def declined(self, scope: Scope) -> None:
        self.console.print(f"[yellow]{self._scope_label(scope).capitalize()} deletion skipped.[/yellow]")

    def cancelled(self) -> None:
        self.console.print("\n[yellow]Operation cancelled by user. Nothing further will be deleted.[/yellow]")

    def _scope_summary(self, title: str, report: ScopeReport) -> None:
        outcome = report.outcome
        self.console.print(
            f"{title}: {len(report.candidates)} candidate(s), "
            f"{outcome.deleted} deleted, {outcome.failed} failed."
        )
        for name, error in outcome.failures:
            self.console.print(f"[red]  • {escape(name)}: {escape(error)}[/red]")

    def show_summary(self, summary: RunSummary) -> None:
        """Print the final counts of a run."""
        self.console.print("\n[bold]--- Summary ---[/bold]")
        self._scope_summary("Local branches", summary.local)
        if summary.remote is not None:
            self._scope_summary(f"Remote branches ('{escape(self.remote_name)}')", summary.remote)
        else:
            self.console.print("Remote branch cleanup was not enabled (--remote).")

        if summary.dry_run:
            self.console.print(
                f"[yellow]Dry run: {summary.candidate_count} candidate(s) listed, "
                "no branches were deleted.[/yellow]"
            )
        elif summary.cancelled:
            self.console.print("[yellow]Cleanup cancelled.[/yellow]")
        else:
            self.console.print("[green]Cleanup complete.[/green]")

"""Console selection prompt for git-branch-sweeper."""

from typing import List, Optional, Sequence, Tuple

from rich.console import Console

from git_branch_sweeper.exceptions import SelectionCancelledError
from git_branch_sweeper.formatters import format_candidate_items, format_scope
from git_branch_sweeper.models.branch import Category, Scope

console = Console()

CandidateItem = Tuple[str, Category]


def _to_number(text: str, part: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid selection: {part}") from None


def parse_selection(answer: str, count: int) -> List[int]:
    """Parse "1,3-5" style input into sorted zero-based indices.

    Raises:
        ValueError: If the input is malformed or out of range
    """
    indices = set()
    for part in answer.replace(" ", ",").split(","):
        if not part:
            continue
        if "-" in part:
            start_text, _, end_text = part.partition("-")
            start, end = _to_number(start_text, part), _to_number(end_text, part)
            if start > end:
                raise ValueError(f"Invalid range: {part}")
        else:
            start = end = _to_number(part, part)
        if start < 1 or end > count:
            raise ValueError(f"Choose numbers between 1 and {count}")
        indices.update(range(start - 1, end))
    if not indices:
        raise ValueError("Nothing selected")
    return sorted(indices)


class ConsoleSelectionPrompt:
    """Asks on the console which candidates of a scope to delete.

    ENTER confirms every candidate, numbers and ranges pick a subset, "n"
    skips the scope and "q" cancels the remaining run.
    """

    def __init__(self, remote_name: str = "origin", output: Optional[Console] = None):
        self.remote_name = remote_name
        self.console = output or console

    def select(self, scope: Scope, items: Sequence[CandidateItem]) -> List[CandidateItem]:
        items = list(items)
        if not items:
            return []

        label = format_scope(scope, self.remote_name)
        self.console.print(f"\nSelect {label} branches to delete:")
        self.console.print(format_candidate_items(items, numbered=True))
        question = (
            f"\nPress ENTER to delete all {len(items)} {scope.value} branch(es), "
            "enter numbers (e.g. 1,3-4) to choose, 'n' to skip or 'q' to quit: "
        )

        while True:
            try:
                answer = self.console.input(question).strip().lower()
            except EOFError:
                raise SelectionCancelledError("Input closed")

            if answer == "":
                return items
            if answer in ("n", "no"):
                return []
            if answer in ("q", "quit"):
                raise SelectionCancelledError()

            try:
                indices = parse_selection(answer, len(items))
            except ValueError as e:
                self.console.print(f"[yellow]{e}[/yellow]")
                continue
            return [items[index] for index in indices]

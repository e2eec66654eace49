"""Full-screen candidate picker for git-branch-sweeper."""

from typing import List, Optional, Sequence, Tuple

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, SelectionList, Static
from textual.widgets.selection_list import Selection

from git_branch_sweeper.constants import CATEGORY_COLORS
from git_branch_sweeper.exceptions import SelectionCancelledError
from git_branch_sweeper.formatters import format_scope
from git_branch_sweeper.models.branch import Category, Scope

CandidateItem = Tuple[str, Category]


class BranchSelectionApp(App[Optional[List[int]]]):
    """Lists candidates with every entry pre-selected and returns the chosen indices."""

    DEFAULT_CSS = """
    #instructions {
        padding: 1 2;
    }

    #candidates {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("d", "confirm", "Delete selected"),
        Binding("escape", "skip", "Skip"),
        Binding("q", "cancel", "Quit"),
        Binding("ctrl+c", "interrupt", "Interrupt", show=False, priority=True),
    ]

    def __init__(self, title: str, items: Sequence[CandidateItem]):
        super().__init__()
        self.items = list(items)
        self.title = title
        self.cancelled = False
        self.interrupted = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(
            "space: toggle   d: delete selected   escape: skip   q: quit",
            id="instructions",
        )
        yield SelectionList[int](
            *(
                Selection(self._label(name, category), index, True)
                for index, (name, category) in enumerate(self.items)
            ),
            id="candidates",
        )
        yield Footer()

    @staticmethod
    def _label(name: str, category: Category) -> Text:
        return Text.assemble(name, "  ", (category.value, CATEGORY_COLORS.get(category.value) or ""))

    def action_confirm(self) -> None:
        selection = self.query_one("#candidates", SelectionList)
        self.exit(sorted(selection.selected))

    def action_skip(self) -> None:
        self.exit([])

    def action_cancel(self) -> None:
        self.cancelled = True
        self.exit(None)

    def action_interrupt(self) -> None:
        self.interrupted = True
        self.exit(None)


class TuiSelectionPrompt:
    """Selection prompt backed by :class:`BranchSelectionApp`."""

    def __init__(self, remote_name: str = "origin"):
        self.remote_name = remote_name

    def select(self, scope: Scope, items: Sequence[CandidateItem]) -> List[CandidateItem]:
        items = list(items)
        if not items:
            return []

        app = BranchSelectionApp(f"Delete {format_scope(scope, self.remote_name)} branches", items)
        chosen = app.run()

        if app.interrupted:
            raise KeyboardInterrupt
        if app.cancelled or chosen is None:
            raise SelectionCancelledError()
        return [items[index] for index in chosen]

"""Tests for the full-screen candidate picker"""
import asyncio
from unittest.mock import patch

import pytest
from textual.widgets import SelectionList

from git_branch_sweeper.exceptions import SelectionCancelledError
from git_branch_sweeper.models.branch import Category, Scope
from git_branch_sweeper.ui.selection_app import BranchSelectionApp, TuiSelectionPrompt

ITEMS = [
    ("feature/a", Category.MERGED),
    ("feature/c", Category.MERGED),
    ("old", Category.STALE),
]


def run_app(keys, deselect=()):
    app = BranchSelectionApp("Delete local branches", ITEMS)

    async def drive():
        async with app.run_test() as pilot:
            selection = app.query_one("#candidates", SelectionList)
            for value in deselect:
                selection.deselect(value)
            await pilot.pause()
            await pilot.press(*keys)

    asyncio.run(drive())
    return app


class TestBranchSelectionApp:
    """Test the picker key bindings."""

    def test_everything_preselected(self):
        app = run_app(["d"])
        assert app.return_value == [0, 1, 2]

    def test_deselected_entries_are_dropped(self):
        app = run_app(["d"], deselect=[1])
        assert app.return_value == [0, 2]

    def test_escape_skips(self):
        app = run_app(["escape"])
        assert app.return_value == []
        assert app.cancelled is False

    def test_quit_cancels(self):
        app = run_app(["q"])
        assert app.return_value is None
        assert app.cancelled is True


class TestTuiSelectionPrompt:
    """Test translation of picker results."""

    def test_selected_indices_map_to_items(self):
        with patch.object(BranchSelectionApp, "run", return_value=[0, 2]):
            chosen = TuiSelectionPrompt().select(Scope.LOCAL, ITEMS)
        assert chosen == [ITEMS[0], ITEMS[2]]

    def test_cancel_raises(self):
        with patch.object(BranchSelectionApp, "run", return_value=None):
            with pytest.raises(SelectionCancelledError):
                TuiSelectionPrompt().select(Scope.REMOTE, ITEMS)

    def test_interrupt_raises_keyboard_interrupt(self):
        def interrupted(app):
            app.interrupted = True
            return None

        with patch.object(BranchSelectionApp, "run", autospec=True, side_effect=interrupted):
            with pytest.raises(KeyboardInterrupt):
                TuiSelectionPrompt().select(Scope.LOCAL, ITEMS)

    def test_no_items_skips_picker(self):
        with patch.object(BranchSelectionApp, "run") as run:
            assert TuiSelectionPrompt().select(Scope.LOCAL, []) == []
        run.assert_not_called()

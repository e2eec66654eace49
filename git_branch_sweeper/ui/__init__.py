"""Interactive selection prompts for git-branch-sweeper.

The full-screen picker lives in :mod:`git_branch_sweeper.ui.selection_app`
and is imported on demand so that textual is only loaded for --interactive.
"""

from .prompt import ConsoleSelectionPrompt, parse_selection

__all__ = [
    "ConsoleSelectionPrompt",
    "parse_selection",
]

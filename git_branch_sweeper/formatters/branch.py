"""Branch formatting for console output."""

from typing import List, Tuple

from rich.markup import escape

from git_branch_sweeper.constants import CATEGORY_COLORS
from git_branch_sweeper.models.branch import Category, Scope


def format_scope(scope: Scope, remote_name: str) -> str:
    """Label of a scope, e.g. "local" or "remote ('origin')"."""
    if scope is Scope.LOCAL:
        return "local"
    return f"remote ('{remote_name}')"


def format_category(category: Category) -> str:
    """Category label with Rich markup."""
    color = CATEGORY_COLORS.get(category.value)
    if color:
        return f"[{color}]{category.value}[/{color}]"
    return category.value


def format_candidate_items(items: List[Tuple[str, Category]], numbered: bool = False) -> str:
    """Format candidates as a bullet (or numbered) list with their category."""
    lines = []
    for index, (name, category) in enumerate(items, start=1):
        marker = f"{index:>3}." if numbered else "  -"
        lines.append(f"{marker} {escape(name)} ({format_category(category)})")
    return "\n".join(lines)

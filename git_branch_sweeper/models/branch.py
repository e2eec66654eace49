"""Branch model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class Scope(Enum):
    """Branch namespace that is classified independently."""
    LOCAL = "local"
    REMOTE = "remote"


class Category(Enum):
    """Reason a branch is a deletion candidate."""
    MERGED = "merged"
    STALE = "stale"


@dataclass(frozen=True)
class Branch:
    """A branch in one scope. Identity is (scope, name)."""
    name: str
    scope: Scope
    tip: str
    last_commit_timestamp: Optional[int] = None  # None = unknown

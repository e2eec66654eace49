"""Configuration handling for git-branch-sweeper"""

from dataclasses import dataclass, field
from typing import List, Optional

from git_branch_sweeper.constants import (
    DEFAULT_BASE_BRANCH,
    DEFAULT_MAX_OUTPUT_BYTES,
    DEFAULT_REMOTE_NAME,
)


@dataclass
class Config:
    """Configuration for git-branch-sweeper with validation."""

    # Branch selection
    base_branch: str = DEFAULT_BASE_BRANCH
    protected_branches: List[str] = field(default_factory=list)
    ignore_patterns: List[str] = field(default_factory=list)

    # Remote scope
    remote_enabled: bool = False
    remote_name: str = DEFAULT_REMOTE_NAME

    # Stale branch threshold (None disables staleness classification)
    stale_days: Optional[int] = None

    # Execution modes
    dry_run: bool = False
    interactive: bool = False  # Full-screen picker instead of the console prompt
    verbose: bool = False
    debug: bool = False

    # Command execution
    max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_base_branch()
        self._validate_remote_name()
        self._validate_stale_days()
        self._validate_branch_lists()
        self._validate_max_output_bytes()

    def _validate_base_branch(self):
        """Validate base_branch is not empty."""
        if not self.base_branch or not self.base_branch.strip():
            raise ValueError("base_branch cannot be empty")
        self.base_branch = self.base_branch.strip()

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def _validate_stale_days(self):
        """Validate stale_days is positive when set."""
        if self.stale_days is not None and self.stale_days <= 0:
            raise ValueError(f"stale_days must be positive, got {self.stale_days}")

    def _validate_branch_lists(self):
        """Validate protected_branches and ignore_patterns are lists."""
        if not isinstance(self.protected_branches, list):
            raise ValueError("protected_branches must be a list")
        if not isinstance(self.ignore_patterns, list):
            raise ValueError("ignore_patterns must be a list")

    def _validate_max_output_bytes(self):
        """Validate max_output_bytes is positive."""
        if self.max_output_bytes <= 0:
            raise ValueError(f"max_output_bytes must be positive, got {self.max_output_bytes}")

    @property
    def stale_enabled(self) -> bool:
        return self.stale_days is not None

    @property
    def remote_base_branch(self) -> str:
        """Display name of the base branch in the remote scope, e.g. origin/main."""
        return f"{self.remote_name}/{self.base_branch}"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "base_branch": self.base_branch,
            "protected_branches": self.protected_branches,
            "ignore_patterns": self.ignore_patterns,
            "remote_enabled": self.remote_enabled,
            "remote_name": self.remote_name,
            "stale_days": self.stale_days,
            "dry_run": self.dry_run,
            "interactive": self.interactive,
            "verbose": self.verbose,
            "debug": self.debug,
            "max_output_bytes": self.max_output_bytes,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "base_branch",
            "protected_branches",
            "ignore_patterns",
            "remote_enabled",
            "remote_name",
            "stale_days",
            "dry_run",
            "interactive",
            "verbose",
            "debug",
            "max_output_bytes",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

"""Shared constants for git-branch-sweeper."""

DEFAULT_BASE_BRANCH = "main"
DEFAULT_REMOTE_NAME = "origin"

# Threshold used when --stale is given without a value
DEFAULT_STALE_DAYS = 120

SECONDS_PER_DAY = 24 * 60 * 60

# Largest command output accepted before the command is treated as failed
DEFAULT_MAX_OUTPUT_BYTES = 5 * 1024 * 1024

# Exit status used after SIGINT (128 + signal number)
EXIT_INTERRUPTED = 130


# Symbol constants
SYMBOL_DELETED = "✓"
SYMBOL_FAILED = "✗"


# CLI colors (Rich color names) per candidate category
CATEGORY_COLORS = {
    "merged": "green",
    "stale": "yellow",
}

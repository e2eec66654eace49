"""Custom exceptions for git-branch-sweeper"""

from typing import Optional


class BranchSweeperError(Exception):
    """Base exception for all git-branch-sweeper errors."""
    pass


class GitOperationError(BranchSweeperError):
    """Exception raised when a git command fails.

    Recoverable: callers degrade the affected scope or count the branch as failed.
    """

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class CommandInfrastructureError(BranchSweeperError):
    """Exception raised when git itself (or the repository) cannot be used at all."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class OutputLimitExceededError(CommandInfrastructureError):
    """Exception raised when command output does not fit the output buffer."""

    def __init__(self, command: str, limit: int):
        self.command = command
        self.limit = limit
        super().__init__(f"Output of '{command}' exceeded {limit} bytes")


class SelectionCancelledError(BranchSweeperError):
    """Exception raised when the operator cancels the run from a prompt."""

    def __init__(self, message: str = "Operation cancelled by user"):
        super().__init__(message)

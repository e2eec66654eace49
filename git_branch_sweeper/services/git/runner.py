"""Git command execution for git-branch-sweeper."""

from typing import Optional, Sequence

import git

from git_branch_sweeper.constants import DEFAULT_MAX_OUTPUT_BYTES
from git_branch_sweeper.exceptions import (
    CommandInfrastructureError,
    GitOperationError,
    OutputLimitExceededError,
)
from git_branch_sweeper.utils.logging import get_logger

logger = get_logger(__name__)


class CommandRunner:
    """Runs git commands against one repository, one at a time."""

    def __init__(self, repo_path: str, max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES):
        """Initialize the runner.

        Args:
            repo_path: Path to the git repository
            max_output_bytes: Largest stdout accepted before the command counts as failed
        """
        self.repo_path = repo_path
        self.max_output_bytes = max_output_bytes
        self._repo: Optional[git.Repo] = None

    def _get_repo(self) -> git.Repo:
        """Open the repository on first use.

        Raises:
            CommandInfrastructureError: If the path is missing or not a git repository
        """
        if self._repo is None:
            try:
                self._repo = git.Repo(self.repo_path, search_parent_directories=True)
            except git.exc.NoSuchPathError:
                raise CommandInfrastructureError(f"Repository path does not exist: {self.repo_path}")
            except git.exc.InvalidGitRepositoryError:
                raise CommandInfrastructureError(f"Not a git repository: {self.repo_path}")
        return self._repo

    def run(self, args: Sequence[str], ignore_failure: bool = False) -> str:
        """Run ``git <args>`` and return its trimmed stdout.

        Args:
            args: Arguments passed to git (without the leading "git")
            ignore_failure: Return "" instead of raising when git exits non-zero

        Returns:
            Trimmed standard output

        Raises:
            GitOperationError: git exited non-zero (unless ignore_failure)
            OutputLimitExceededError: stdout exceeded max_output_bytes (never ignored)
            CommandInfrastructureError: git could not be executed at all
        """
        command = ["git", *args]
        display = " ".join(command)
        repo = self._get_repo()
        logger.debug(f"> {display}")

        try:
            status, stdout, stderr = repo.git.execute(
                command, with_extended_output=True, with_exceptions=False
            )
        except git.exc.GitCommandNotFound as e:
            raise CommandInfrastructureError(f"git executable not found: {e}")
        except OSError as e:
            raise CommandInfrastructureError(f"Could not run '{display}': {e}")

        stdout = stdout or ""
        if len(stdout.encode("utf-8", errors="replace")) > self.max_output_bytes:
            raise OutputLimitExceededError(display, self.max_output_bytes)

        if status != 0:
            message = (stderr or "").strip() or f"exit status {status}"
            if ignore_failure:
                logger.debug(f"Ignoring failure of '{display}': {message}")
                return ""
            raise GitOperationError(display, message=message)

        return stdout.strip()

"""Typed query interface over a git repository.

The classification and deletion services only talk to git through
:class:`GitRepository`, which keeps them testable against in-memory histories.
"""

from typing import Dict, List, Optional, Tuple

from git_branch_sweeper.exceptions import GitOperationError
from git_branch_sweeper.models.branch import Scope
from git_branch_sweeper.services.git.runner import CommandRunner
from git_branch_sweeper.utils.logging import get_logger

logger = get_logger(__name__)

# for-each-ref output fields are separated by a tab, which git forbids in ref names
_REF_FORMAT = "%(refname)%09%(objectname)%09%(symref)"


class GitRepository:
    """Branch, history and deletion queries for the local and one remote scope."""

    def __init__(self, runner: CommandRunner, remote_name: str = "origin"):
        self.runner = runner
        self.remote_name = remote_name

    def _ref_prefix(self, scope: Scope) -> str:
        if scope is Scope.LOCAL:
            return "refs/heads/"
        return f"refs/remotes/{self.remote_name}/"

    def full_ref(self, scope: Scope, name: str) -> str:
        """Fully qualified ref of a branch, e.g. refs/remotes/origin/feature."""
        return f"{self._ref_prefix(scope)}{name}"

    def display_name(self, scope: Scope, name: str) -> str:
        """Human-readable branch name, e.g. origin/feature for remote branches."""
        if scope is Scope.LOCAL:
            return name
        return f"{self.remote_name}/{name}"

    def list_branches(self, scope: Scope) -> List[Tuple[str, str]]:
        """List (name, tip) pairs of a scope in refname order.

        Remote names are returned without the remote prefix and symbolic refs
        such as origin/HEAD are skipped.

        Raises:
            GitOperationError: If git cannot list the refs
        """
        prefix = self._ref_prefix(scope)
        output = self.runner.run(["for-each-ref", f"--format={_REF_FORMAT}", prefix.rstrip("/")])

        branches = []
        for line in output.splitlines():
            if not line.strip():
                continue
            parts = line.split("\t")
            if len(parts) < 2:
                logger.debug(f"Unexpected for-each-ref line: {line!r}")
                continue
            refname, tip = parts[0], parts[1]
            symref = parts[2] if len(parts) > 2 else ""
            if symref or "->" in refname:
                continue
            if not refname.startswith(prefix):
                continue
            name = refname[len(prefix):]
            if scope is Scope.REMOTE and name == "HEAD":
                continue
            branches.append((name, tip))
        return branches

    def current_branch(self) -> Optional[str]:
        """Name of the checked-out local branch, or None when HEAD is detached."""
        name = self.runner.run(["symbolic-ref", "--quiet", "--short", "HEAD"], ignore_failure=True)
        return name or None

    def ref_exists(self, scope: Scope, name: str) -> bool:
        """Check whether a branch exists in a scope."""
        try:
            self.runner.run(["show-ref", "--verify", "--quiet", self.full_ref(scope, name)])
            return True
        except GitOperationError:
            return False

    def tip_of(self, scope: Scope, name: str) -> str:
        """Commit hash a branch points to."""
        return self.runner.run(["rev-parse", "--verify", f"{self.full_ref(scope, name)}^{{commit}}"])

    def commit_timestamp(self, scope: Scope, name: str) -> Optional[int]:
        """Committer timestamp (unix seconds) of a branch tip, None when unknown."""
        try:
            output = self.runner.run(
                ["--no-pager", "log", "-1", "--format=%ct", self.full_ref(scope, name), "--"]
            )
        except GitOperationError as e:
            logger.debug(f"Could not read commit timestamp of {name}: {e}")
            return None
        try:
            return int(output)
        except ValueError:
            logger.debug(f"Unparseable commit timestamp for {name}: {output!r}")
            return None

    def mainline(self, scope: Scope, name: str) -> List[Tuple[str, List[str]]]:
        """Merge commits on the first-parent history of a branch, newest first.

        Returns (commit, parents) pairs. Ordinary commits are left out by git
        so the output grows with the number of merges, not the history length.

        Raises:
            GitOperationError: If the history cannot be read
        """
        output = self.runner.run(
            [
                "--no-pager", "log", "--first-parent", "--merges", "--format=%H %P",
                self.full_ref(scope, name), "--",
            ]
        )
        history = []
        for line in output.splitlines():
            fields = line.split()
            if not fields:
                continue
            history.append((fields[0], fields[1:]))
        return history

    def delete_branch(self, scope: Scope, name: str, force: bool = False) -> None:
        """Delete a branch.

        Local branches use ``git branch -d`` (or ``-D`` when forced); remote
        branches are deleted with a delete push.

        Raises:
            GitOperationError: If git refuses or fails to delete the branch
        """
        if scope is Scope.LOCAL:
            self.runner.run(["branch", "-D" if force else "-d", name])
        else:
            self.runner.run(["push", self.remote_name, "--delete", name])

    def prune(self) -> None:
        """Fetch the remote and prune remote-tracking branches that no longer exist."""
        self.runner.run(["fetch", self.remote_name, "--prune"])

    def snapshot(self, scope: Scope) -> Dict[str, str]:
        """Mapping of branch name to tip, used to compare states."""
        return dict(self.list_branches(scope))

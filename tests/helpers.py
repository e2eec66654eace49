"""In-memory test doubles shared by the test modules"""
from git_branch_sweeper.exceptions import GitOperationError
from git_branch_sweeper.models.branch import Scope

DAY = 24 * 60 * 60
NOW = 1_700_000_000


class FakeRepository:
    """In-memory history with the same query surface as GitRepository."""

    def __init__(self, remote_name="origin"):
        self.remote_name = remote_name
        self.parents = {}
        self.timestamps = {}
        self.branches = {Scope.LOCAL: {}, Scope.REMOTE: {}}
        self.current = None
        self.failing_deletes = set()
        self.failing_listings = set()
        self.failing_mainlines = set()
        self.fail_prune = False
        self.deleted = []
        self.prune_calls = 0

    # Building histories

    def commit(self, sha, parents=(), timestamp=NOW):
        self.parents[sha] = list(parents)
        self.timestamps[sha] = timestamp
        return sha

    def branch(self, scope, name, tip):
        self.branches[scope][name] = tip

    # GitRepository interface

    def display_name(self, scope, name):
        return name if scope is Scope.LOCAL else f"{self.remote_name}/{name}"

    def list_branches(self, scope):
        if scope in self.failing_listings:
            raise GitOperationError("git for-each-ref", message="fatal: listing failed")
        return sorted(self.branches[scope].items())

    def current_branch(self):
        return self.current

    def ref_exists(self, scope, name):
        return name in self.branches[scope]

    def tip_of(self, scope, name):
        if name not in self.branches[scope]:
            raise GitOperationError("git rev-parse", message=f"unknown revision {name}")
        return self.branches[scope][name]

    def commit_timestamp(self, scope, name):
        tip = self.branches[scope].get(name)
        return self.timestamps.get(tip)

    def mainline(self, scope, name):
        if (scope, name) in self.failing_mainlines:
            raise GitOperationError("git log", message="fatal: bad object")
        history = []
        sha = self.branches[scope][name]
        while sha is not None:
            parents = self.parents.get(sha, [])
            if len(parents) >= 2:
                history.append((sha, list(parents)))
            sha = parents[0] if parents else None
        return history

    def delete_branch(self, scope, name, force=False):
        self.deleted.append((scope, name, force))
        if name in self.failing_deletes:
            raise GitOperationError("git branch -d", message=f"error: the branch '{name}' is not fully merged")
        del self.branches[scope][name]

    def prune(self):
        self.prune_calls += 1
        if self.fail_prune:
            raise GitOperationError("git fetch origin --prune", message="fatal: 'origin' does not appear to be a git repository")


class RecordingPrompt:
    """Selection prompt that returns scripted answers and records what it was shown."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def select(self, scope, items):
        self.calls.append((scope, list(items)))
        answer = self.answers.pop(0) if self.answers else "all"
        if isinstance(answer, BaseException) or (
            isinstance(answer, type) and issubclass(answer, BaseException)
        ):
            raise answer
        if answer == "all":
            return list(items)
        if answer == "none":
            return []
        return [item for item in items if item[0] in answer]

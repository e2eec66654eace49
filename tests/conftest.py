"""Pytest fixtures for git-branch-sweeper tests"""
import io
import tempfile
from pathlib import Path

import git
import pytest
from rich.console import Console

from git_branch_sweeper.models.branch import Scope
from git_branch_sweeper.services.display_service import DisplayService
from git_branch_sweeper.services.git import CommandRunner, GitRepository

from tests.helpers import DAY, NOW, FakeRepository


@pytest.fixture
def fake_repo():
    """Repository history used by most classifier tests.

    main:      c0 - c1 - m1 (merge of feature/a)
    feature/a: c0 - a1
    feature/b: c0 - b1 (never merged)
    """
    repo = FakeRepository()
    repo.commit("c0", timestamp=NOW - 200 * DAY)
    repo.commit("c1", ["c0"], timestamp=NOW - 100 * DAY)
    repo.commit("a1", ["c0"], timestamp=NOW - 150 * DAY)
    repo.commit("m1", ["c1", "a1"], timestamp=NOW - 10 * DAY)
    repo.commit("b1", ["c0"], timestamp=NOW - 5 * DAY)
    repo.branch(Scope.LOCAL, "main", "m1")
    repo.branch(Scope.LOCAL, "feature/a", "a1")
    repo.branch(Scope.LOCAL, "feature/b", "b1")
    repo.current = "main"
    return repo


@pytest.fixture
def output():
    """Console that writes into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def display(output):
    return DisplayService(remote_name="origin", output=output)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def _commit_file(repo, name, content, message, timestamp=None):
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    if timestamp is None:
        return repo.index.commit(message)
    date = f"{timestamp} +0000"
    return repo.index.commit(message, author_date=date, commit_date=date)


@pytest.fixture
def commit_file():
    return _commit_file


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    _commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a Git repository with a merged and an unmerged branch."""
    repo = git_repo

    # Unmerged feature branch
    repo.git.checkout("-b", "feature/test-feature")
    _commit_file(repo, "feature.txt", "Feature content\n", "Add feature")

    # Branch merged back with a merge commit
    repo.git.checkout("main")
    repo.git.checkout("-b", "feature/to-merge")
    _commit_file(repo, "merge.txt", "Merge content\n", "Feature to merge")

    repo.git.checkout("main")
    _commit_file(repo, "main.txt", "Main content\n", "Work on main")
    repo.git.merge("feature/to-merge", "--no-ff", "-m", "Merge feature/to-merge")

    yield repo


@pytest.fixture
def git_repo_with_remote(git_repo_with_branches, temp_dir):
    """Repository whose branches are pushed to a bare 'origin' remote."""
    repo = git_repo_with_branches
    remote_path = temp_dir / "origin.git"
    remote = git.Repo.init(remote_path, bare=True)

    repo.create_remote("origin", str(remote_path))
    repo.git.push("origin", "main", "feature/test-feature", "feature/to-merge")
    repo.git.remote("set-head", "origin", "main")

    yield repo

    remote.close()


@pytest.fixture
def repository(git_repo_with_branches):
    runner = CommandRunner(git_repo_with_branches.working_dir)
    return GitRepository(runner)


@pytest.fixture
def remote_repository(git_repo_with_remote):
    runner = CommandRunner(git_repo_with_remote.working_dir)
    return GitRepository(runner)

"""Integration tests against real repositories"""
from git_branch_sweeper.config import Config
from git_branch_sweeper.core.sweeper import BranchSweeper
from git_branch_sweeper.models.branch import Scope

from tests.helpers import RecordingPrompt


def sweeper_for(repo, display, prompt=None, **options):
    config = Config(**options)
    return BranchSweeper.from_path(
        repo.working_dir, config, prompt=prompt or RecordingPrompt(), display=display
    )


class TestDryRunIntegration:
    """Test that a dry run changes nothing."""

    def test_refs_unchanged(self, git_repo_with_remote, remote_repository, display):
        local_before = remote_repository.snapshot(Scope.LOCAL)
        remote_before = remote_repository.snapshot(Scope.REMOTE)
        prompt = RecordingPrompt()

        summary = sweeper_for(
            git_repo_with_remote, display, prompt, remote_enabled=True, stale_days=1, dry_run=True
        ).run()

        assert summary.local.candidates.merged == ["feature/to-merge"]
        assert summary.remote.candidates.merged == ["feature/to-merge"]
        assert summary.total.attempted == 0
        assert prompt.calls == []
        assert remote_repository.snapshot(Scope.LOCAL) == local_before
        assert remote_repository.snapshot(Scope.REMOTE) == remote_before


class TestSweepIntegration:
    """Test real deletions."""

    def test_local_and_remote_merged_branches_deleted(self, git_repo_with_remote, remote_repository, display):
        summary = sweeper_for(git_repo_with_remote, display, remote_enabled=True).run()

        assert summary.local.outcome.deleted == 1
        assert summary.remote.outcome.deleted == 1
        assert summary.final_prune is True

        local = remote_repository.snapshot(Scope.LOCAL)
        remote = remote_repository.snapshot(Scope.REMOTE)
        assert set(local) == {"main", "feature/test-feature"}
        assert set(remote) == {"main", "feature/test-feature"}

    def test_local_only_leaves_remote(self, git_repo_with_remote, remote_repository, display, output):
        summary = sweeper_for(git_repo_with_remote, display).run()

        assert summary.remote is None
        assert "feature/to-merge" in remote_repository.snapshot(Scope.REMOTE)
        assert "feature/to-merge" not in remote_repository.snapshot(Scope.LOCAL)
        assert "Remote branch cleanup was not enabled" in output.file.getvalue()

    def test_repository_without_remote(self, git_repo_with_branches, repository, display):
        # The initial prune fails and only logs a warning
        summary = sweeper_for(git_repo_with_branches, display).run()

        assert summary.local.outcome.deleted == 1
        assert "feature/to-merge" not in repository.snapshot(Scope.LOCAL)

    def test_declined_scope_keeps_branches(self, git_repo_with_branches, repository, display):
        before = repository.snapshot(Scope.LOCAL)
        summary = sweeper_for(git_repo_with_branches, display, RecordingPrompt("none")).run()

        assert summary.local.declined is True
        assert repository.snapshot(Scope.LOCAL) == before

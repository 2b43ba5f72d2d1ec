"""
Tests for the git collaborator. subprocess.run is replaced, no git needed.

Run with:
    pytest tests/test_git.py -v
"""

import subprocess

import pytest

from ghl.git import GitError, GitRepo, parse_github_remote


class FakeGit:
    """Records git invocations and answers with canned stdout."""

    def __init__(self, outputs=None, fail_on=None):
        self.calls = []
        self.outputs = outputs or {}
        self.fail_on = fail_on

    def __call__(self, cmd, **kwargs):
        self.calls.append(cmd[1:])
        if self.fail_on and cmd[1] == self.fail_on:
            raise subprocess.CalledProcessError(128, cmd, stderr="fatal: boom")
        return subprocess.CompletedProcess(cmd, 0, stdout=self.outputs.get(cmd[1], ""), stderr="")


@pytest.fixture
def fake_git(monkeypatch):
    def _install(**kwargs):
        fake = FakeGit(**kwargs)
        monkeypatch.setattr(subprocess, 'run', fake)
        return fake
    return _install


# ---------------------------------------------------------------------------
# Remote parsing
# ---------------------------------------------------------------------------

class TestParseGithubRemote:

    @pytest.mark.parametrize("url", [
        "https://github.com/acme/widgets",
        "https://github.com/acme/widgets.git",
        "https://github.com/acme/widgets/",
        "https://user@github.com/acme/widgets.git",
        "git@github.com:acme/widgets.git",
        "git@github.com:acme/widgets",
        "ssh://git@github.com/acme/widgets.git",
        "git@github.com:acme/widgets.git\n",
    ])
    def test_github_urls(self, url):
        assert parse_github_remote(url) == "acme/widgets"

    @pytest.mark.parametrize("url", [
        "https://gitlab.com/acme/widgets.git",
        "git@bitbucket.org:acme/widgets.git",
        "/srv/git/widgets.git",
        "",
    ])
    def test_other_urls(self, url):
        assert parse_github_remote(url) is None


# ---------------------------------------------------------------------------
# GitRepo
# ---------------------------------------------------------------------------

class TestGitRepo:

    def test_current_repository(self, fake_git):
        git = fake_git(outputs={'remote': "git@github.com:acme/widgets.git\n"})
        assert GitRepo().current_repository() == "acme/widgets"
        assert git.calls == [['remote', 'get-url', 'origin']]

    def test_current_repository_uses_configured_remote(self, fake_git):
        git = fake_git(outputs={'remote': "https://github.com/acme/fork.git\n"})
        GitRepo(remote="upstream").current_repository()
        assert git.calls == [['remote', 'get-url', 'upstream']]

    def test_non_github_remote_raises(self, fake_git):
        fake_git(outputs={'remote': "https://gitlab.com/acme/widgets.git\n"})
        with pytest.raises(GitError, match="not a GitHub repository"):
            GitRepo().current_repository()

    def test_missing_remote_raises(self, fake_git):
        fake_git(fail_on='remote')
        with pytest.raises(GitError, match="Could not read remote 'origin'"):
            GitRepo().current_repository()

    def test_git_not_installed(self, monkeypatch):
        def _missing(*args, **kwargs):
            raise FileNotFoundError("git")
        monkeypatch.setattr(subprocess, 'run', _missing)
        with pytest.raises(GitError, match="not installed"):
            GitRepo().create_branch("fix/x")

    def test_executors(self, fake_git):
        git = fake_git()
        repo = GitRepo(remote="origin")
        repo.create_branch("fix/handle-expired-tokens")
        repo.commit("fix(auth): handle expired tokens")
        repo.commit("feat: add login", allow_empty=True)
        repo.push("fix/handle-expired-tokens")

        assert git.calls == [
            ['checkout', '-b', 'fix/handle-expired-tokens'],
            ['commit', '-m', 'fix(auth): handle expired tokens'],
            ['commit', '-m', 'feat: add login', '--allow-empty'],
            ['push', '-u', 'origin', 'fix/handle-expired-tokens'],
        ]

    def test_failure_includes_stderr(self, fake_git):
        fake_git(fail_on='push')
        with pytest.raises(GitError, match="fatal: boom"):
            GitRepo().push("fix/x")

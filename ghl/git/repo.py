"""Git Repository - Resolve the GitHub repository and run branch/commit/push."""

import re
import subprocess

# owner/repo from the common GitHub remote URL shapes
GITHUB_REMOTE_PATTERNS = [
    re.compile(r'^https://(?:[^@/]+@)?github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$'),
    re.compile(r'^git@github\.com:([^/]+)/([^/]+?)(?:\.git)?$'),
    re.compile(r'^ssh://git@github\.com(?::\d+)?/([^/]+)/([^/]+?)(?:\.git)?$'),
]


class GitError(Exception):
    """Raised when git operations fail."""
    pass


def parse_github_remote(url: str) -> str | None:
    """Return "owner/repo" for a GitHub remote URL, or None."""
    url = url.strip()
    for pattern in GITHUB_REMOTE_PATTERNS:
        match = pattern.match(url)
        if match:
            return f"{match.group(1)}/{match.group(2)}"
    return None


class GitRepo:
    """The git repository in the current working directory."""

    def __init__(self, remote: str = "origin"):
        self.remote = remote

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def current_repository(self) -> str:
        """Resolve "owner/repo" from the configured remote."""
        try:
            url = self._run_git('remote', 'get-url', self.remote)
        except GitError as e:
            raise GitError(f"Could not read remote '{self.remote}'. Is this a git repository?\n{e}")

        repo = parse_github_remote(url)
        if repo is None:
            raise GitError(f"Remote '{self.remote}' is not a GitHub repository: {url.strip()}")
        return repo

    def create_branch(self, name: str) -> None:
        self._run_git('checkout', '-b', name)

    def commit(self, message: str, allow_empty: bool = False) -> None:
        args = ['commit', '-m', message]
        if allow_empty:
            args.append('--allow-empty')
        self._run_git(*args)

    def push(self, branch: str) -> None:
        self._run_git('push', '-u', self.remote, branch)


def resolve_current_repository() -> str:
    """Resolve "owner/repo" for the working directory's origin remote."""
    return GitRepo().current_repository()

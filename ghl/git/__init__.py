"""Git Operations Package"""

from ghl.git.repo import GitRepo, GitError, parse_github_remote, resolve_current_repository

__all__ = [
    "GitRepo",
    "GitError",
    "parse_github_remote",
    "resolve_current_repository",
]

"""GitHub API Package"""

from ghl.github.client import GitHubClient, GitHubError, PullRequest

__all__ = [
    "GitHubClient",
    "GitHubError",
    "PullRequest",
]

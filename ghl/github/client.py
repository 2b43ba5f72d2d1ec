"""GitHub Client - Open and assign pull requests through the REST API."""

import http.client
import json
import os
import socket
import urllib.error
import urllib.request
from dataclasses import dataclass


class GitHubError(Exception):
    """Raised when a GitHub API call fails."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


@dataclass
class PullRequest:
    """The parts of a created pull request ghl reports back."""
    number: int
    url: str


class GitHubClient:
    """Minimal GitHub REST client. Authenticates with a personal access token."""

    DEFAULT_API_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30

    def __init__(self, token: str, api_url: str | None = None):
        if not token or not token.strip():
            raise GitHubError("No GitHub token. Run: ghl token")
        self.token = token.strip()
        self.api_url = (api_url or os.environ.get("GHL_API_URL", self.DEFAULT_API_URL)).rstrip('/')
        self.timeout = int(os.environ.get("GHL_TIMEOUT", self.DEFAULT_TIMEOUT))

    def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        """Make a single API call and return the decoded JSON body."""
        url = f"{self.api_url}{path}"
        data = json.dumps(payload).encode('utf-8') if payload is not None else None
        req = urllib.request.Request(url, data=data, method=method, headers={
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "X-GitHub-Api-Version": "2022-11-28",
        })

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                body = response.read().decode('utf-8')
                return json.loads(body) if body else {}
        except urllib.error.HTTPError as e:
            if e.code == 401:
                raise GitHubError("Invalid GitHub token. Run: ghl token", status=e.code)
            raise GitHubError(f"GitHub error ({e.code}) on {method} {path}: {self._error_message(e)}", status=e.code)
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise GitHubError(f"Request to GitHub timed out after {self.timeout}s")
            raise GitHubError(f"GitHub request failed: {e.reason}")
        except socket.timeout:
            raise GitHubError(f"Request to GitHub timed out after {self.timeout}s")
        except json.JSONDecodeError:
            raise GitHubError(f"Invalid response from GitHub on {method} {path}")
        except http.client.HTTPException as e:
            raise GitHubError(f"Incomplete response from GitHub: {e}")

    @staticmethod
    def _error_message(e: urllib.error.HTTPError) -> str:
        """Pull the "message" field out of a GitHub error body if there is one."""
        try:
            data = json.loads(e.read().decode('utf-8'))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError):
            return str(e.reason)
        message = data.get('message', e.reason)
        errors = [err.get('message') for err in data.get('errors', []) if isinstance(err, dict) and err.get('message')]
        if errors:
            message = f"{message}: {'; '.join(errors)}"
        return message

    def default_branch(self, repo: str) -> str:
        data = self._request("GET", f"/repos/{repo}")
        return data.get('default_branch', 'main')

    def current_user(self) -> str:
        """Login of the token's owner."""
        data = self._request("GET", "/user")
        login = data.get('login')
        if not login:
            raise GitHubError("Could not determine the authenticated user")
        return login

    def create_pull_request(self, repo: str, title: str, head: str, base: str, body: str = "") -> PullRequest:
        data = self._request("POST", f"/repos/{repo}/pulls", {
            "title": title,
            "head": head,
            "base": base,
            "body": body,
        })
        return PullRequest(number=data['number'], url=data['html_url'])

    def assign(self, repo: str, number: int, logins: list[str]) -> None:
        self._request("POST", f"/repos/{repo}/issues/{number}/assignees", {"assignees": logins})

"""GitHub REST API provider."""

from __future__ import annotations

import logging
import time

import requests

from RepoTree.ingestion import entries_from_api
from RepoTree.models import Entry, RepoInfo
from RepoTree.providers.base import RepoProvider

logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """Raised for GitHub API errors."""


class RateLimitError(GitHubError):
    """Raised when GitHub rate limit is exceeded."""

    def __init__(self, reset_at: int):
        self.reset_at = reset_at
        wait = max(0, reset_at - int(time.time()))
        super().__init__(
            f"GitHub API rate limit exceeded. Resets in {wait} seconds. "
            "Add a personal access token to increase your rate limit."
        )


class GitHubProvider(RepoProvider):
    """Provider for GitHub repositories using the REST API."""

    API_BASE = "https://api.github.com"

    def __init__(self, token: str | None = None):
        self.session = requests.Session()
        self.session.headers["Accept"] = "application/vnd.github+json"
        self.session.headers["User-Agent"] = "RepoTree/1.0"
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _check_rate_limit(self, response: requests.Response) -> None:
        remaining = response.headers.get("X-RateLimit-Remaining")
        if remaining is not None and int(remaining) == 0:
            reset_at = int(response.headers.get("X-RateLimit-Reset", 0))
            raise RateLimitError(reset_at)

    def _api_get(self, path: str, params: dict | None = None) -> dict:
        url = f"{self.API_BASE}{path}"
        try:
            resp = self.session.get(url, params=params, timeout=30)
        except requests.RequestException as exc:
            raise GitHubError(f"Failed to reach GitHub: {exc}") from exc

        if resp.status_code in (403, 429):
            self._check_rate_limit(resp)

        if resp.status_code == 404:
            raise GitHubError(
                "Repository not found. Check the URL, or provide a token for private repos."
            )
        if resp.status_code == 401:
            raise GitHubError(
                "Invalid or expired personal access token. Check your GitHub token."
            )
        if resp.status_code == 403:
            raise GitHubError(
                "Access denied. You may need a personal access token for this repository."
            )
        if not resp.ok:
            raise GitHubError(
                f"Failed to fetch GitHub repository structure: HTTP {resp.status_code}"
            )
        return resp.json()

    def get_default_branch(self, repo_info: RepoInfo) -> str:
        data = self._api_get(f"/repos/{repo_info.owner}/{repo_info.repo}")
        return data["default_branch"]

    def list_entries(self, repo_info: RepoInfo) -> list[Entry]:
        branch = repo_info.branch
        if not branch:
            branch = self.get_default_branch(repo_info)
            repo_info.branch = branch

        data = self._api_get(
            f"/repos/{repo_info.owner}/{repo_info.repo}/git/trees/{branch}",
            params={"recursive": "1"},
        )

        tree = data.get("tree")
        if not isinstance(tree, list):
            raise GitHubError("Invalid repository structure received.")
        if data.get("truncated"):
            logger.warning(
                "GitHub truncated the tree listing of %s; showing %d entries",
                repo_info.full_name,
                len(tree),
            )
        return entries_from_api(tree)

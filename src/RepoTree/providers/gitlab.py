"""GitLab REST API (v4) provider."""

from __future__ import annotations

from urllib.parse import quote

import requests

from RepoTree.ingestion import entries_from_api
from RepoTree.models import Entry, RepoInfo
from RepoTree.providers.base import RepoProvider


class GitLabError(Exception):
    """Raised for GitLab API errors."""


class GitLabProvider(RepoProvider):
    """Provider for gitlab.com repositories using the REST API."""

    API_BASE = "https://gitlab.com/api/v4"
    PER_PAGE = 100

    def __init__(self, token: str | None = None):
        self.session = requests.Session()
        self.session.headers["User-Agent"] = "RepoTree/1.0"
        if token:
            self.session.headers["PRIVATE-TOKEN"] = token

    def _project_url(self, repo_info: RepoInfo) -> str:
        project_id = quote(repo_info.full_name, safe="")
        return f"{self.API_BASE}/projects/{project_id}"

    def _api_get(self, url: str, params: dict | None = None) -> requests.Response:
        try:
            resp = self.session.get(url, params=params, timeout=30)
        except requests.RequestException as exc:
            raise GitLabError(f"Failed to reach GitLab: {exc}") from exc

        if resp.status_code == 404:
            raise GitLabError(
                "Repository not found. Check the URL, or provide a token for private repos."
            )
        if resp.status_code == 401:
            raise GitLabError(
                "Invalid or expired personal access token. Check your GitLab token."
            )
        if resp.status_code == 403:
            raise GitLabError(
                "Access denied. You may need a personal access token for this repository."
            )
        if not resp.ok:
            raise GitLabError(
                f"Failed to fetch GitLab repository structure: HTTP {resp.status_code}"
            )
        return resp

    def get_default_branch(self, repo_info: RepoInfo) -> str:
        data = self._api_get(self._project_url(repo_info)).json()
        return data.get("default_branch") or "main"

    def list_entries(self, repo_info: RepoInfo) -> list[Entry]:
        params: dict = {"recursive": "true", "per_page": self.PER_PAGE}
        if repo_info.branch:
            params["ref"] = repo_info.branch

        url = f"{self._project_url(repo_info)}/repository/tree"
        items: list[dict] = []
        page = "1"
        while page:
            params["page"] = page
            resp = self._api_get(url, params=params)
            data = resp.json()
            if not isinstance(data, list):
                raise GitLabError("Invalid repository structure received.")
            items.extend(data)
            page = resp.headers.get("X-Next-Page", "").strip()

        return entries_from_api(items)

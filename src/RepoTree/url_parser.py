"""URL parsing and provider auto-detection."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from RepoTree.models import ProviderType, RepoInfo

DEFAULT_REPO_NAME = "Repository"

_GITHUB_URL = re.compile(
    r"^https?://github\.com/[\w-]+/[\w.-]+(/tree/[^\s?#]+)?/?$"
)
_GITLAB_URL = re.compile(r"^https?://gitlab\.com/[\w-]+(/[\w.-]+)+/?$")


class URLParseError(Exception):
    """Raised when a URL cannot be parsed."""


def validate_github_url(url: str) -> bool:
    return bool(_GITHUB_URL.match(url.strip()))


def validate_gitlab_url(url: str) -> bool:
    return bool(_GITLAB_URL.match(url.strip()))


def extract_repo_name(url: str) -> str:
    """Return the repository name of a repository URL.

    Known hosts go through ``parse_repo_url`` so branch URLs still yield the
    repository. Anything else uses the last path segment, then
    ``"Repository"`` when nothing usable is found.
    """
    if not url or not url.strip():
        return DEFAULT_REPO_NAME
    try:
        return parse_repo_url(url).repo or DEFAULT_REPO_NAME
    except URLParseError:
        pass
    path = urlparse(url.strip()).path.rstrip("/")
    name = path.rsplit("/", maxsplit=1)[-1].removesuffix(".git")
    return name or DEFAULT_REPO_NAME


def parse_repo_url(url: str) -> RepoInfo:
    """Parse a repository URL and return RepoInfo.

    Supported formats:
      - https://github.com/owner/repo
      - https://github.com/owner/repo/tree/branch
      - https://github.com/owner/repo/tree/branch/with/slashes
      - https://gitlab.com/group/repo
      - https://gitlab.com/group/subgroup/repo
      - https://gitlab.com/group/repo/-/tree/branch
    """
    url = url.strip()
    if not url:
        raise URLParseError("URL is empty.")

    parsed = urlparse(url)
    if not parsed.scheme:
        raise URLParseError(f"Invalid URL (no scheme): {url}")
    if parsed.scheme not in ("http", "https"):
        raise URLParseError(f"Unsupported scheme: {parsed.scheme}")

    host = parsed.hostname or ""
    path = parsed.path.strip("/")

    if host == "github.com":
        return _parse_github(path, url)
    elif host == "gitlab.com":
        return _parse_gitlab(path, url)
    else:
        raise URLParseError(f"Unsupported host: {host}")


def _parse_github(path: str, raw_url: str) -> RepoInfo:
    """Parse a GitHub URL path."""
    # path: owner/repo[/tree/branch[/...]]
    parts = path.split("/")
    if len(parts) < 2 or not parts[1]:
        raise URLParseError(f"GitHub URL must include owner/repo: {raw_url}")

    owner, repo = parts[0], parts[1].removesuffix(".git")
    branch = None

    if len(parts) >= 4 and parts[2] == "tree":
        # Everything after /tree/ is the branch name (may contain slashes)
        branch = "/".join(parts[3:])

    return RepoInfo(
        provider=ProviderType.GITHUB,
        owner=owner,
        repo=repo,
        branch=branch,
        raw_url=raw_url,
    )


def _parse_gitlab(path: str, raw_url: str) -> RepoInfo:
    """Parse a GitLab URL path: namespace[/subgroups]/repo[/-/tree/branch]"""
    project_path, _, rest = path.partition("/-/")
    parts = [p for p in project_path.split("/") if p]
    if len(parts) < 2:
        raise URLParseError(f"GitLab URL must include namespace/repo: {raw_url}")

    branch = None
    if rest.startswith("tree/") and len(rest) > len("tree/"):
        branch = rest[len("tree/"):]

    return RepoInfo(
        provider=ProviderType.GITLAB,
        owner="/".join(parts[:-1]),
        repo=parts[-1].removesuffix(".git"),
        branch=branch,
        raw_url=raw_url,
    )

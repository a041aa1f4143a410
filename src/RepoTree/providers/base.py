"""Abstract base class for repository providers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from RepoTree.models import Entry, RepoInfo, RepoValidationResult
from RepoTree.repo_validation import validate_repository_structure

logger = logging.getLogger(__name__)


class RepoProvider(ABC):
    """Base class for Git hosting service providers."""

    @abstractmethod
    def get_default_branch(self, repo_info: RepoInfo) -> str:
        """Return the default branch name for the repository."""

    @abstractmethod
    def list_entries(self, repo_info: RepoInfo) -> list[Entry]:
        """List every file and directory of the repository."""

    def fetch_structure(
        self, repo_info: RepoInfo
    ) -> tuple[list[Entry], RepoValidationResult]:
        """List the repository and check the listing against size limits."""
        entries = self.list_entries(repo_info)
        validation = validate_repository_structure(entries)
        for warning in validation.warnings:
            logger.warning("%s: %s", repo_info.full_name, warning)
        return entries, validation

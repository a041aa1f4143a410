"""Tests for repo_validation module."""

from RepoTree.models import Entry
from RepoTree.repo_validation import (
    LARGE_REPO_ENTRIES,
    MAX_ENTRIES,
    MAX_RECOMMENDED_ENTRIES,
    estimate_size,
    validate_repository_structure,
)


def _entries(count: int, path_length: int = 1) -> list[Entry]:
    return [Entry(path="x" * path_length) for _ in range(count)]


class TestEstimateSize:
    def test_formula(self):
        assert estimate_size([Entry(path="abc"), Entry(path="de")]) == 206 + 204

    def test_empty(self):
        assert estimate_size([]) == 0


class TestValidateRepositoryStructure:
    def test_small_repo(self):
        result = validate_repository_structure(_entries(3))
        assert result.is_valid
        assert result.warnings == []
        assert result.errors == []
        assert result.total_entries == 3
        assert result.estimated_size == 3 * 202

    def test_empty_repo(self):
        result = validate_repository_structure([])
        assert result.is_valid
        assert result.total_entries == 0

    def test_medium_repo_warning(self):
        result = validate_repository_structure(_entries(LARGE_REPO_ENTRIES + 1))
        assert result.is_valid
        assert len(result.warnings) == 1
        assert "Medium-sized" in result.warnings[0]

    def test_large_repo_warning(self):
        result = validate_repository_structure(_entries(MAX_RECOMMENDED_ENTRIES + 1))
        assert "Large repository" in result.warnings[0]

    def test_too_many_entries(self):
        result = validate_repository_structure(_entries(MAX_ENTRIES + 1))
        assert not result.is_valid
        assert any("100,000 entries" in e for e in result.errors)

    def test_too_large(self):
        result = validate_repository_structure(_entries(1000, path_length=5000))
        assert not result.is_valid
        assert any("7MB" in e for e in result.errors)

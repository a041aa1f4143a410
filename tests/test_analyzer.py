"""Tests for analyzer module."""

import pytest

from RepoTree.analyzer import analyze_repository, get_extension, get_language
from RepoTree.models import DirectoryNode
from RepoTree.search_filter import filter_tree
from RepoTree.tree_builder import build_hierarchy, count_files

from conftest import blob, tree


class TestGetExtension:
    def test_simple(self):
        assert get_extension("main.py") == "py"

    def test_last_dot_wins(self):
        assert get_extension("archive.tar.gz") == "gz"

    def test_no_extension(self):
        assert get_extension("Makefile") == "unknown"

    def test_trailing_dot(self):
        assert get_extension("weird.") == "unknown"

    def test_dotfile(self):
        assert get_extension(".gitignore") == "gitignore"


class TestGetLanguage:
    def test_known(self):
        assert get_language("ts") == "TypeScript"
        assert get_language("PY") == "Python"

    def test_unknown(self):
        assert get_language("xyz") == "Other"
        assert get_language("unknown") == "Other"


class TestAnalyzeRepository:
    def test_scenario(self):
        root = build_hierarchy([blob("a.ts"), blob("b.ts"), blob("c.py")])
        analysis = analyze_repository(root)
        assert analysis.file_type_counts == {"ts": 2, "py": 1}
        assert analysis.language_percentages == {
            "TypeScript": pytest.approx(66.67, abs=0.01),
            "Python": pytest.approx(33.33, abs=0.01),
        }

    def test_empty_tree(self):
        analysis = analyze_repository(DirectoryNode())
        assert analysis.file_type_counts == {}
        assert analysis.language_percentages == {}
        assert analysis.total_files == 0

    def test_only_directories(self):
        analysis = analyze_repository(build_hierarchy([tree("a"), tree("a/b")]))
        assert analysis.file_type_counts == {}
        assert analysis.language_percentages == {}

    def test_other_bucket(self):
        root = build_hierarchy([blob("LICENSE"), blob("x.weird"), blob("y.py")])
        analysis = analyze_repository(root)
        assert analysis.file_type_counts == {"unknown": 1, "weird": 1, "py": 1}
        assert analysis.language_percentages["Other"] == pytest.approx(200 / 3)

    def test_totals(self, sample_tree):
        analysis = analyze_repository(sample_tree)
        assert sum(analysis.file_type_counts.values()) == count_files(sample_tree)
        assert sum(analysis.language_percentages.values()) == pytest.approx(100)

    def test_counts_nested_files(self, sample_tree):
        analysis = analyze_repository(sample_tree)
        assert analysis.file_type_counts["py"] == 3
        assert analysis.file_type_counts["txt"] == 2

    def test_filtered_view_differs_from_full(self, sample_tree):
        full = analyze_repository(sample_tree)
        filtered = analyze_repository(filter_tree(sample_tree, "py"))
        assert filtered.total_files == 3
        assert full.total_files == 10


class TestChartRows:
    def test_rows(self):
        analysis = analyze_repository(build_hierarchy([blob("a.ts"), blob("b.py")]))
        assert sorted(r["name"] for r in analysis.file_type_rows()) == ["py", "ts"]
        assert {r["name"]: r["percentage"] for r in analysis.language_rows()} == {
            "TypeScript": 50.0,
            "Python": 50.0,
        }

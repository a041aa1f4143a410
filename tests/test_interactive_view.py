"""Tests for interactive_view module."""

from RepoTree.interactive_view import count_rows, render_interactive_html
from RepoTree.models import DirectoryNode, FormattingOptions
from RepoTree.tree_builder import build_hierarchy
from RepoTree.tree_renderer import FILE_ICON, FOLDER_ICON

from conftest import blob


class TestRenderInteractiveHtml:
    def test_nested_details(self, scenario_tree):
        result = render_interactive_html(scenario_tree)
        assert "<details open><summary>src</summary>" in result
        assert "<details open><summary>utils</summary>" in result
        assert '<div class="file">app.ts</div>' in result
        assert result.count("<details") == result.count("</details>") == 2

    def test_order_matches_ascii_tree(self, scenario_tree):
        result = render_interactive_html(scenario_tree)
        assert result.index("utils") < result.index("app.ts") < result.index("README.md")

    def test_deep_directories_start_collapsed(self):
        root = build_hierarchy([blob("a/b/c/d.txt")])
        result = render_interactive_html(root)
        assert "<details open><summary>a</summary>" in result
        assert "<details open><summary>b</summary>" in result
        assert "<details><summary>c</summary>" in result

    def test_icons(self, scenario_tree):
        result = render_interactive_html(scenario_tree, FormattingOptions(use_icons=True))
        assert f"<summary>{FOLDER_ICON}src</summary>" in result
        assert f'<div class="file">{FILE_ICON}README.md</div>' in result

    def test_escapes_names(self):
        result = render_interactive_html(build_hierarchy([blob("a&b.txt")]))
        assert "a&amp;b.txt" in result

    def test_empty(self):
        result = render_interactive_html(DirectoryNode())
        assert "<details" not in result
        assert 'class="file"' not in result


class TestCountRows:
    def test_counts_all_entries(self, scenario_tree):
        assert count_rows(scenario_tree) == 4

    def test_empty(self):
        assert count_rows(DirectoryNode()) == 0

    def test_deep_tree(self):
        root = build_hierarchy([blob("d/" * 1200 + "f.txt")])
        assert count_rows(root) == 1201


class TestDeepTrees:
    def test_renders_every_level(self):
        root = build_hierarchy([blob("d/" * 1200 + "f.txt")])
        result = render_interactive_html(root)
        assert result.count("<details") == result.count("</details>") == 1200
        assert result.count('<div class="file">f.txt</div>') == 1

    def test_closing_tags_nest(self):
        root = build_hierarchy([blob("a/b.txt"), blob("c.txt")])
        result = render_interactive_html(root)
        assert result.index('<div class="file">b.txt</div>') < result.index("</details>")
        assert result.index("</details>") < result.index('<div class="file">c.txt</div>')

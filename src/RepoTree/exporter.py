"""Export of directory trees as downloadable documents."""

from __future__ import annotations

import html
import json

from RepoTree.models import (
    DirectoryNode,
    ExportFormat,
    ExportPayload,
    FormattingOptions,
)
from RepoTree.tree_renderer import MAX_DEPTH, render_tree, sorted_children


class UnsupportedExportFormat(ValueError):
    """Raised when asked for an export format that does not exist."""


MIME_TYPES: dict[ExportFormat, str] = {
    ExportFormat.TXT: "text/plain",
    ExportFormat.MD: "text/markdown",
    ExportFormat.JSON: "application/json",
    ExportFormat.HTML: "text/html",
}

FILE_NAMES: dict[ExportFormat, str] = {
    ExportFormat.TXT: "directory-structure.txt",
    ExportFormat.MD: "README.md",
    ExportFormat.JSON: "directory-structure.json",
    ExportFormat.HTML: "directory-structure.html",
}

_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Repository Structure</title>
  <style>
    body {{ font-family: monospace; }}
  </style>
</head>
<body>
<pre>{tree}</pre>
</body>
</html>
"""


def tree_to_json(node: DirectoryNode, max_depth: int = MAX_DEPTH) -> list[dict]:
    """Project *node* into ``[{"type", "name", "children"?}]``.

    Children are ordered like the ASCII tree: directories first, then by name.
    Directories nested deeper than *max_depth* are cut off with an empty
    ``children`` list, at the same level where the ASCII tree stops.
    """
    result: list[dict] = []
    stack = [(node, result, max_depth)]
    while stack:
        current, out, depth_left = stack.pop()
        if depth_left <= 0:
            continue
        for name, child in sorted_children(current):
            if child.is_directory:
                children: list[dict] = []
                out.append({"type": "folder", "name": name, "children": children})
                stack.append((child, children, depth_left - 1))
            else:
                out.append({"type": "file", "name": name})
    return result


def to_markdown(tree_text: str) -> str:
    return f"# Directory Structure\n\n```\n{tree_text}```"


def to_html(tree_text: str) -> str:
    return _HTML_TEMPLATE.format(tree=html.escape(tree_text))


def serialize(
    root: DirectoryNode,
    fmt: ExportFormat | str,
    options: FormattingOptions | None = None,
    repo_url: str = "",
) -> ExportPayload:
    """Serialize *root* into one of the export formats.

    Args:
        root: Tree to export (the filtered tree when a search is active).
        fmt: ``ExportFormat`` or its value (``"txt"``, ``"md"``, ``"json"``, ``"html"``).
        options: Formatting used for the text-based formats.
        repo_url: Repository URL, for the optional root label.

    Raises:
        UnsupportedExportFormat: if *fmt* is not a known format.
    """
    try:
        fmt = ExportFormat(fmt)
    except ValueError:
        raise UnsupportedExportFormat(f"Unsupported export format: {fmt!r}") from None

    if fmt is ExportFormat.JSON:
        content = json.dumps(tree_to_json(root), indent=2, ensure_ascii=False)
    else:
        tree_text = render_tree(root, options, repo_url=repo_url)
        if fmt is ExportFormat.MD:
            content = to_markdown(tree_text)
        elif fmt is ExportFormat.HTML:
            content = to_html(tree_text)
        else:
            content = tree_text

    return ExportPayload(
        content=content,
        mime_type=MIME_TYPES[fmt],
        file_name=FILE_NAMES[fmt],
    )

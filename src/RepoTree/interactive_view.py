"""Click-to-expand HTML view of a directory tree.

Directories are rendered as nested ``<details>`` elements so the browser
owns the expand/collapse state.
"""

from __future__ import annotations

import html

from RepoTree.models import DirectoryNode, FormattingOptions, Node
from RepoTree.tree_renderer import FILE_ICON, FOLDER_ICON, sorted_children

# Directories shallower than this start expanded
DEFAULT_OPEN_DEPTH = 2

_STYLE = """<style>
.repo-tree { font-family: monospace; font-size: 14px; line-height: 1.6; }
.repo-tree details > :not(summary) { margin-left: 1.25rem; }
.repo-tree summary { cursor: pointer; }
.repo-tree .file { margin-left: 1.25rem; }
</style>"""


def render_interactive_html(
    root: DirectoryNode,
    options: FormattingOptions | None = None,
    open_depth: int = DEFAULT_OPEN_DEPTH,
) -> str:
    options = options or FormattingOptions()
    folder_icon = FOLDER_ICON if options.use_icons else ""
    file_icon = FILE_ICON if options.use_icons else ""
    parts = [_STYLE, '<div class="repo-tree">']

    # None marks the end of a directory
    stack: list[tuple[str, Node, int] | None] = [
        (name, child, 0) for name, child in reversed(sorted_children(root))
    ]
    while stack:
        item = stack.pop()
        if item is None:
            parts.append("</details>")
            continue
        name, child, depth = item
        label = html.escape(name)
        if child.is_directory:
            is_open = " open" if depth < open_depth else ""
            parts.append(f"<details{is_open}><summary>{folder_icon}{label}</summary>")
            stack.append(None)
            stack.extend(
                (sub_name, sub_child, depth + 1)
                for sub_name, sub_child in reversed(sorted_children(child))
            )
        else:
            parts.append(f'<div class="file">{file_icon}{label}</div>')

    parts.append("</div>")
    return "\n".join(parts)


def count_rows(root: DirectoryNode) -> int:
    """Number of entries in the tree, used to size the HTML frame."""
    total = 0
    stack = [root]
    while stack:
        node = stack.pop()
        total += len(node.children)
        stack.extend(child for child in node.children.values() if child.is_directory)
    return total

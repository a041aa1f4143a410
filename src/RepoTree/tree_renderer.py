"""ASCII tree rendering for directory structures."""

from __future__ import annotations

import logging

from RepoTree.descriptions import describe
from RepoTree.models import AsciiStyle, DirectoryNode, FormattingOptions, Node
from RepoTree.url_parser import extract_repo_name

logger = logging.getLogger(__name__)

MAX_DEPTH = 50
MAX_DEPTH_SENTINEL = "... (max depth reached)"

FOLDER_ICON = "📂 "
FILE_ICON = "📄 "

# style -> (connector, last connector, child prefix, last child prefix)
STYLE_GLYPHS: dict[AsciiStyle, tuple[str, str, str, str]] = {
    AsciiStyle.BASIC: ("├── ", "└── ", "│   ", "    "),
    AsciiStyle.DETAILED: ("├─── ", "└─── ", "│   ", "    "),
    AsciiStyle.MINIMAL: ("  ", "  ", "  ", "  "),
}


def sorted_children(node: DirectoryNode) -> list[tuple[str, Node]]:
    """Return the children of *node*: directories first, then by name."""
    return sorted(
        node.children.items(),
        key=lambda item: (not item[1].is_directory, item[0]),
    )


def render_tree(
    root: DirectoryNode,
    options: FormattingOptions | None = None,
    repo_url: str = "",
    max_depth: int = MAX_DEPTH,
) -> str:
    """Render *root* as an ASCII tree, one newline-terminated line per entry.

    Example (basic style)::

        ├── src
        │   └── app.ts
        └── README.md

    An empty tree renders to an empty string.
    """
    options = options or FormattingOptions()
    if root.is_empty():
        return ""

    rows: list[tuple[str, str]] = []

    if options.show_root_directory:
        icon = FOLDER_ICON if options.use_icons else ""
        rows.append((f"{icon}{extract_repo_name(repo_url)}", ""))

    _render_children(root, options, rows, prefix="", path="", depth_left=max_depth)

    if options.show_descriptions:
        width = max(
            (len(text) for text, description in rows if description), default=0
        )
        lines = [
            f"{text.ljust(width)}  # {description}" if description else text
            for text, description in rows
        ]
    else:
        lines = [text for text, _ in rows]

    return "".join(f"{line}\n" for line in lines)


def _render_children(
    node: DirectoryNode,
    options: FormattingOptions,
    rows: list[tuple[str, str]],
    prefix: str,
    path: str,
    depth_left: int,
) -> None:
    """Recursively append ``(text, description)`` rows for *node*'s children."""
    if node.is_empty():
        return
    if depth_left <= 0:
        logger.debug("Tree truncated at %r", path)
        rows.append((f"{prefix}{MAX_DEPTH_SENTINEL}", ""))
        return

    connector, last_connector, pipe, blank = STYLE_GLYPHS[options.ascii_style]
    entries = sorted_children(node)

    for i, (name, child) in enumerate(entries):
        is_last = i == len(entries) - 1
        is_dir = child.is_directory
        item_path = f"{path}/{name}" if path else name

        icon = ""
        if options.use_icons:
            icon = FOLDER_ICON if is_dir else FILE_ICON
        display_name = f"{name}/" if is_dir and options.show_trailing_slash else name
        description = (
            describe(name, is_dir, item_path) if options.show_descriptions else ""
        )

        text = f"{prefix}{last_connector if is_last else connector}{icon}{display_name}"
        rows.append((text, description))

        if is_dir:
            _render_children(
                child,
                options,
                rows,
                prefix=prefix + (blank if is_last else pipe),
                path=item_path,
                depth_left=depth_left - 1,
            )

"""Fold a flat repository listing into a nested directory tree."""

from __future__ import annotations

import logging
from typing import Iterable

from RepoTree.ingestion import iter_segments
from RepoTree.models import DirectoryNode, Entry, EntryKind, FileLeaf

logger = logging.getLogger(__name__)


def build_hierarchy(entries: Iterable[Entry]) -> DirectoryNode:
    """Build the directory tree for a list of entries.

    Intermediate segments always become directories. The final segment is
    a ``FileLeaf`` for blobs and a directory otherwise. When a listing
    names the same key both as a directory and as a file, the directory
    wins regardless of the order of the entries.

    Example, for ``src/app.ts`` (blob), ``src/utils`` (tree) and
    ``README.md`` (blob)::

        {"src": {"app.ts": FileLeaf, "utils": {}}, "README.md": FileLeaf}
    """
    root = DirectoryNode()

    for entry, segments in iter_segments(entries):
        node = root
        last = len(segments) - 1
        for i, part in enumerate(segments):
            current = node.children.get(part)

            if i == last and entry.kind is EntryKind.BLOB:
                if current is None:
                    node.children[part] = FileLeaf(name=part)
                elif current.is_directory:
                    logger.debug(
                        "Keeping directory %r over file entry %r", part, entry.path
                    )
                break

            if current is None or not current.is_directory:
                if current is not None:
                    logger.debug(
                        "Replacing file %r with directory for %r", part, entry.path
                    )
                current = DirectoryNode(name=part)
                node.children[part] = current
            node = current

    return root


def count_files(node: DirectoryNode) -> int:
    """Return the number of file leaves below *node*."""
    total = 0
    stack = [node]
    while stack:
        for child in stack.pop().children.values():
            if child.is_directory:
                stack.append(child)
            else:
                total += 1
    return total


def iter_paths(node: DirectoryNode, prefix: str = "") -> list[tuple[str, bool]]:
    """List ``(path, is_directory)`` for every descendant of *node*, depth first."""
    paths: list[tuple[str, bool]] = []
    stack = [
        (f"{prefix}{name}", child) for name, child in reversed(node.children.items())
    ]
    while stack:
        path, child = stack.pop()
        paths.append((path, child.is_directory))
        if child.is_directory:
            stack.extend(
                (f"{path}/{name}", sub_child)
                for name, sub_child in reversed(child.children.items())
            )
    return paths

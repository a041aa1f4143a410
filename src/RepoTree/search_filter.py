"""Search filtering of directory trees."""

from __future__ import annotations

from RepoTree.models import DirectoryNode, FileLeaf


def filter_tree(node: DirectoryNode, term: str) -> DirectoryNode:
    """Return a new tree keeping only entries that match *term*.

    Matching is a case-insensitive substring test on entry names. A file is
    kept when its name matches. A directory is kept when its own name
    matches or when any descendant is kept; either way its children are the
    filtered children. An empty term keeps everything.

    The input tree is never modified.
    """
    needle = term.lower()
    filtered = DirectoryNode(name=node.name)

    # Copy the directory skeleton top-down, then prune it bottom-up
    copied: list[tuple[DirectoryNode, str, DirectoryNode]] = []
    stack = [(node, filtered)]
    while stack:
        source, target = stack.pop()
        for key, value in source.children.items():
            if isinstance(value, FileLeaf):
                if needle in key.lower():
                    target.children[key] = value
                continue
            sub_tree = DirectoryNode(name=value.name)
            target.children[key] = sub_tree
            copied.append((target, key, sub_tree))
            stack.append((value, sub_tree))

    # Every directory is listed after its parent
    for parent, key, sub_tree in reversed(copied):
        if not sub_tree.children and needle not in key.lower():
            del parent.children[key]

    return filtered

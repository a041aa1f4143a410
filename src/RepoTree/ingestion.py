"""Normalization of raw repository listings into path segments."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from RepoTree.models import Entry

logger = logging.getLogger(__name__)


def split_segments(path: str) -> list[str]:
    """Split a slash-delimited path, skipping empty segments.

    >>> split_segments("/src//app.ts/")
    ['src', 'app.ts']
    """
    return [part for part in path.split("/") if part]


def entries_from_api(items: Iterable[dict]) -> list[Entry]:
    """Convert provider tree items into entries."""
    return [Entry.from_api_item(item) for item in items]


def iter_segments(
    entries: Iterable[Entry],
    presort: bool = True,
) -> Iterator[tuple[Entry, list[str]]]:
    """Yield ``(entry, segments)`` for every entry with a usable path.

    With *presort* the entries are ordered by path first so the fold that
    consumes them does not depend on the order the hosting API used.
    Entries without any usable segment are dropped.
    """
    if presort:
        entries = sorted(entries, key=lambda e: e.path)

    for entry in entries:
        segments = split_segments(entry.path)
        if not segments:
            logger.debug("Dropping entry with empty path: %r", entry.path)
            continue
        yield entry, segments

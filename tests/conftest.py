"""Shared fixtures and helpers for the test suite."""

from __future__ import annotations

import pytest

from RepoTree.models import Entry, EntryKind
from RepoTree.tree_builder import build_hierarchy


def blob(path: str) -> Entry:
    return Entry(path=path, kind=EntryKind.BLOB)


def tree(path: str) -> Entry:
    return Entry(path=path, kind=EntryKind.TREE)


@pytest.fixture
def scenario_entries() -> list[Entry]:
    return [blob("src/app.ts"), tree("src/utils"), blob("README.md")]


@pytest.fixture
def scenario_tree(scenario_entries):
    return build_hierarchy(scenario_entries)


@pytest.fixture
def sample_tree():
    return build_hierarchy(
        [
            blob("README.md"),
            blob("LICENSE"),
            blob("src/main.py"),
            blob("src/utils.py"),
            blob("src/api/routes.py"),
            blob("src/components/Button.tsx"),
            blob("docs/index.md"),
            tree("docs/images"),
            blob(".github/workflows/ci.yml"),
            blob("Zeta.txt"),
            blob("alpha.txt"),
        ]
    )

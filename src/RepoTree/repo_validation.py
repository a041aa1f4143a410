"""Size and entry-count checks for fetched repository listings."""

from __future__ import annotations

from typing import Iterable

from RepoTree.models import Entry, RepoValidationResult

# GitHub API limits for a recursive tree listing
MAX_ENTRIES = 100_000
MAX_SIZE_MB = 7
MAX_SIZE_BYTES = MAX_SIZE_MB * 1024 * 1024

LARGE_REPO_ENTRIES = 10_000
MAX_RECOMMENDED_ENTRIES = 50_000


def estimate_size(entries: Iterable[Entry]) -> int:
    """Rough listing size in bytes: path text plus ~200 bytes of metadata each."""
    return sum(len(e.path) * 2 + 200 for e in entries)


def validate_repository_structure(entries: list[Entry]) -> RepoValidationResult:
    """Check a listing against API limits and flag large repositories."""
    result = RepoValidationResult(
        total_entries=len(entries),
        estimated_size=estimate_size(entries),
    )

    if result.total_entries > MAX_ENTRIES:
        result.is_valid = False
        result.errors.append(
            f"Repository exceeds API limit of {MAX_ENTRIES:,} entries. "
            f"Found {result.total_entries:,} entries."
        )

    if result.estimated_size > MAX_SIZE_BYTES:
        result.is_valid = False
        result.errors.append(
            f"Repository exceeds API size limit of {MAX_SIZE_MB}MB. "
            f"Estimated size: {result.estimated_size / (1024 * 1024):.2f}MB."
        )

    if result.total_entries > MAX_RECOMMENDED_ENTRIES:
        result.warnings.append(
            f"Large repository detected ({result.total_entries:,} entries). "
            "This may cause performance issues."
        )
    elif result.total_entries > LARGE_REPO_ENTRIES:
        result.warnings.append(
            f"Medium-sized repository detected ({result.total_entries:,} entries). "
            "Processing may take longer than usual."
        )

    return result

"""Persistence of formatting options and UI state.

The options are stored as JSON under a single key of a ``KeyValueStore``.
``JsonFileStore`` keeps everything in one settings file in the user's home
directory; ``MemoryStore`` is used in tests.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from RepoTree.models import FormattingOptions

logger = logging.getLogger(__name__)

OPTIONS_KEY = "treeCustomizationOptions"
LAST_REPO_URL_KEY = "lastRepoUrl"

DEFAULT_SETTINGS_PATH = Path.home() / ".repotree" / "settings.json"


class KeyValueStore(ABC):
    """Minimal string key-value storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value for *key*, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove *key* if present."""


class MemoryStore(KeyValueStore):
    def __init__(self, data: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """Key-value store backed by a single JSON object on disk."""

    def __init__(self, path: Path | str = DEFAULT_SETTINGS_PATH):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


def load_config(store: KeyValueStore) -> FormattingOptions:
    """Load the saved formatting options, merged over the defaults.

    Unreadable or corrupt settings fall back to the defaults.
    """
    try:
        saved = store.get(OPTIONS_KEY)
        if saved:
            parsed = json.loads(saved)
            if isinstance(parsed, dict):
                return FormattingOptions.from_dict(parsed)
            logger.warning("Ignoring saved formatting options: not an object")
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load formatting options: %s", exc)
    return FormattingOptions()


def save_config(store: KeyValueStore, options: FormattingOptions) -> bool:
    """Persist *options*. Returns True on success."""
    try:
        store.set(OPTIONS_KEY, json.dumps(options.to_dict()))
        return True
    except (OSError, ValueError) as exc:
        logger.warning("Failed to save formatting options: %s", exc)
        return False


def load_last_repo_url(store: KeyValueStore) -> str:
    try:
        return store.get(LAST_REPO_URL_KEY) or ""
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load last repository URL: %s", exc)
        return ""


def save_last_repo_url(store: KeyValueStore, url: str) -> None:
    try:
        if url:
            store.set(LAST_REPO_URL_KEY, url)
        else:
            store.delete(LAST_REPO_URL_KEY)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to save last repository URL: %s", exc)

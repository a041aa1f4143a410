"""Data classes for RepoTree."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Union


class ProviderType(Enum):
    GITHUB = "github"
    GITLAB = "gitlab"


class EntryKind(Enum):
    TREE = "tree"
    BLOB = "blob"


class AsciiStyle(Enum):
    BASIC = "basic"
    DETAILED = "detailed"
    MINIMAL = "minimal"


class ExportFormat(Enum):
    TXT = "txt"
    MD = "md"
    JSON = "json"
    HTML = "html"


@dataclass
class RepoInfo:
    provider: ProviderType
    owner: str
    repo: str
    branch: str | None = None
    raw_url: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class Entry:
    """One record of a repository tree listing."""

    path: str
    kind: EntryKind = EntryKind.BLOB
    name: str = ""
    size: int = 0

    @classmethod
    def from_api_item(cls, item: dict) -> Entry:
        """Build an entry from a provider tree item (``{"path", "type", ...}``).

        Anything that is not a ``blob`` (GitHub submodules show up as
        ``commit``) is treated as a directory.
        """
        path = item.get("path") or ""
        kind = EntryKind.BLOB if item.get("type") == "blob" else EntryKind.TREE
        name = item.get("name") or path.rstrip("/").rsplit("/", maxsplit=1)[-1]
        return cls(path=path, kind=kind, name=name, size=item.get("size") or 0)


@dataclass(frozen=True)
class FileLeaf:
    name: str

    @property
    def is_directory(self) -> bool:
        return False


@dataclass
class DirectoryNode:
    """A directory: child name -> ``DirectoryNode`` or ``FileLeaf``.

    The root node has an empty name.
    """

    name: str = ""
    children: dict[str, Node] = field(default_factory=dict)

    @property
    def is_directory(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return not self.children


Node = Union[DirectoryNode, FileLeaf]


_OPTION_KEYS = {
    "ascii_style": "asciiStyle",
    "use_icons": "useIcons",
    "show_line_numbers": "showLineNumbers",
    "show_root_directory": "showRootDirectory",
    "show_trailing_slash": "showTrailingSlash",
    "show_descriptions": "showDescriptions",
}


@dataclass(frozen=True)
class FormattingOptions:
    ascii_style: AsciiStyle = AsciiStyle.BASIC
    use_icons: bool = False
    show_line_numbers: bool = False  # display only
    show_root_directory: bool = False
    show_trailing_slash: bool = False
    show_descriptions: bool = False

    def to_dict(self) -> dict:
        """Serialize using the camelCase keys of the persisted settings."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[_OPTION_KEYS[f.name]] = (
                value.value if isinstance(value, AsciiStyle) else value
            )
        return data

    @classmethod
    def from_dict(cls, data: dict) -> FormattingOptions:
        """Merge *data* over the defaults; unknown or invalid values are ignored."""
        kwargs = {}
        for attr, key in _OPTION_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            if attr == "ascii_style":
                try:
                    kwargs[attr] = AsciiStyle(value)
                except ValueError:
                    continue
            elif isinstance(value, bool):
                kwargs[attr] = value
        return cls(**kwargs)


@dataclass
class RepoAnalysis:
    file_type_counts: dict[str, int] = field(default_factory=dict)
    language_percentages: dict[str, float] = field(default_factory=dict)

    @property
    def total_files(self) -> int:
        return sum(self.file_type_counts.values())

    def file_type_rows(self) -> list[dict]:
        return [{"name": k, "value": v} for k, v in self.file_type_counts.items()]

    def language_rows(self) -> list[dict]:
        return [
            {"name": k, "percentage": v}
            for k, v in self.language_percentages.items()
        ]


@dataclass
class ExportPayload:
    content: str
    mime_type: str
    file_name: str


@dataclass
class RepoValidationResult:
    is_valid: bool = True
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    total_entries: int = 0
    estimated_size: int = 0

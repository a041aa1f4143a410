"""Repository statistics: file-type counts and language share."""

from __future__ import annotations

from RepoTree.models import DirectoryNode, RepoAnalysis

UNKNOWN_EXTENSION = "unknown"
OTHER_LANGUAGE = "Other"

LANGUAGE_MAP: dict[str, str] = {
    "js": "JavaScript",
    "ts": "TypeScript",
    "py": "Python",
    "java": "Java",
    "html": "HTML",
    "css": "CSS",
    "json": "JSON",
    "md": "Markdown",
    "rb": "Ruby",
    "cpp": "C++",
    "c": "C",
    "go": "Go",
    "php": "PHP",
    "swift": "Swift",
    "kt": "Kotlin",
    "sql": "SQL",
    "yaml": "YAML",
    "yml": "YAML",
    "xml": "XML",
    "bash": "Bash",
    "lua": "Lua",
    "r": "R",
    "dart": "Dart",
    "rs": "Rust",
    "vue": "Vue",
    "sh": "Shell Script",
    "cs": "C#",
    "fs": "F#",
    "scala": "Scala",
    "m": "Objective-C",
    "pl": "Perl",
    "groovy": "Groovy",
    "tex": "LaTeX",
    "vhd": "VHDL",
    "pug": "Pug",
    "styl": "Stylus",
    "sass": "Sass",
    "scss": "Sass",
    "less": "Less",
    "tsx": "TypeScript JSX",
    "jsx": "JavaScript JSX",
    "erb": "Ruby on Rails",
    "hbs": "Handlebars",
    "coffee": "CoffeeScript",
}


def get_extension(name: str) -> str:
    """Return the text after the last ``.`` of *name*, or ``"unknown"``."""
    if "." not in name:
        return UNKNOWN_EXTENSION
    return name.rsplit(".", maxsplit=1)[-1] or UNKNOWN_EXTENSION


def get_language(extension: str) -> str:
    return LANGUAGE_MAP.get(extension.lower(), OTHER_LANGUAGE)


def analyze_repository(root: DirectoryNode) -> RepoAnalysis:
    """Count files per extension and compute each language's share in percent.

    Run this on the full tree, not on a search-filtered view.
    """
    file_types: dict[str, int] = {}
    languages: dict[str, int] = {}

    stack = [root]
    while stack:
        node = stack.pop()
        for child in node.children.values():
            if child.is_directory:
                stack.append(child)
                continue
            ext = get_extension(child.name)
            file_types[ext] = file_types.get(ext, 0) + 1
            lang = get_language(ext)
            languages[lang] = languages.get(lang, 0) + 1

    total_files = sum(file_types.values())
    if not total_files:
        return RepoAnalysis()

    percentages = {
        lang: count / total_files * 100 for lang, count in languages.items()
    }
    return RepoAnalysis(file_type_counts=file_types, language_percentages=percentages)

"""Human-readable annotations for well-known files and directories."""

from __future__ import annotations

from functools import lru_cache

DIRECTORY_DESCRIPTIONS: dict[str, str] = {
    # Build / config
    ".github": "GitHub workflows and templates",
    ".vscode": "VS Code workspace settings",
    ".next": "Next.js build output",
    "dist": "Distribution/build files",
    "build": "Compiled application files",
    "out": "Output directory",
    "public": "Static assets and public files",
    "static": "Static assets",
    "assets": "Project assets and resources",
    # Source
    "src": "Source code",
    "app": "Application pages and routing",
    "pages": "Application pages",
    "components": "React components",
    "lib": "Utility functions and libraries",
    "utils": "Utility functions",
    "helpers": "Helper functions",
    "hooks": "Custom React hooks",
    "context": "React context providers",
    "store": "State management",
    "styles": "CSS and styling files",
    "css": "Stylesheets",
    "scss": "Sass stylesheets",
    "images": "Image assets",
    "fonts": "Font files",
    "icons": "Icon assets",
    # API / backend
    "api": "API routes and endpoints",
    "server": "Server-side code",
    "backend": "Backend application code",
    "routes": "Application routes",
    "controllers": "Route controllers",
    "models": "Data models",
    "middleware": "Express middleware",
    "database": "Database files and migrations",
    "migrations": "Database migrations",
    "seeds": "Database seed files",
    # Tests
    "test": "Test files",
    "tests": "Test files",
    "__tests__": "Jest test files",
    "spec": "Test specifications",
    "e2e": "End-to-end tests",
    "cypress": "Cypress test files",
    # Docs
    "docs": "Documentation files",
    "documentation": "Project documentation",
    # Config
    "config": "Configuration files",
    "configs": "Configuration files",
    # Dependencies
    "node_modules": "NPM dependencies",
    "vendor": "Third-party libraries",
    # UI
    "ui": "UI components",
    "layout": "Layout components",
    "layouts": "Page layouts",
    "templates": "Component templates",
    # Types
    "types": "TypeScript type definitions",
    "@types": "TypeScript declarations",
    "workflows": "CI/CD workflow files",
}

# Checked in order against the lower-cased full path
DIRECTORY_PATH_PATTERNS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("workflow", ".github"), "CI/CD workflows"),
    (("component",), "Component files"),
    (("page",), "Page components"),
    (("api",), "API endpoints"),
)

FILENAME_DESCRIPTIONS: dict[str, str] = {
    "readme.md": "Project documentation",
    "license": "Project license",
    "license.txt": "Project license",
    "license.md": "Project license",
    "changelog.md": "Version history",
    "contributing.md": "Contribution guidelines",
    "package.json": "NPM package configuration",
    "package-lock.json": "Dependency lock file",
    "yarn.lock": "Yarn dependency lock file",
    "tsconfig.json": "TypeScript configuration",
    "next.config.js": "Next.js configuration",
    "next.config.ts": "Next.js configuration",
    "tailwind.config.js": "Tailwind CSS configuration",
    "tailwind.config.ts": "Tailwind CSS configuration",
    "postcss.config.js": "PostCSS configuration",
    "eslint.config.js": "ESLint configuration",
    ".eslintrc.json": "ESLint rules",
    ".gitignore": "Git ignore rules",
    ".env": "Environment variables",
    ".env.example": "Environment variables template",
    ".env.local": "Local environment variables",
    "vercel.json": "Vercel deployment config",
    "dockerfile": "Docker container config",
    "docker-compose.yml": "Docker compose config",
    "makefile": "Build automation",
    "components.json": "Component configuration",
    "prettier.config.js": "Code formatting rules",
    "pyproject.toml": "Python project configuration",
    "requirements.txt": "Python dependencies",
}

EXTENSION_DESCRIPTIONS: dict[str, str] = {
    # Web
    "js": "JavaScript file",
    "jsx": "React component",
    "ts": "TypeScript file",
    "tsx": "React TypeScript component",
    "html": "HTML page",
    "css": "Stylesheet",
    "scss": "Sass stylesheet",
    "sass": "Sass stylesheet",
    "less": "Less stylesheet",
    # Config
    "json": "JSON configuration",
    "yaml": "YAML configuration",
    "yml": "YAML configuration",
    "toml": "TOML configuration",
    "xml": "XML file",
    # Docs
    "md": "Markdown documentation",
    "txt": "Text file",
    "pdf": "PDF document",
    # Images
    "png": "PNG image",
    "jpg": "JPEG image",
    "jpeg": "JPEG image",
    "gif": "GIF image",
    "svg": "SVG vector image",
    "webp": "WebP image",
    "ico": "Icon file",
    # Media
    "mp4": "MP4 video",
    "webm": "WebM video",
    "avi": "AVI video",
    "mov": "QuickTime video",
    "mp3": "MP3 audio",
    "wav": "WAV audio",
    # Other languages
    "py": "Python script",
    "java": "Java source file",
    "cpp": "C++ source file",
    "c": "C source file",
    "php": "PHP script",
    "rb": "Ruby script",
    "go": "Go source file",
    "rs": "Rust source file",
    "swift": "Swift source file",
    "kt": "Kotlin source file",
    # Database
    "sql": "SQL script",
    "db": "Database file",
    # Archives
    "zip": "ZIP archive",
    "tar": "TAR archive",
    "gz": "Gzip archive",
    # Scripts
    "sh": "Shell script",
    "bat": "Batch script",
    "ps1": "PowerShell script",
}

DEFAULT_FILE_DESCRIPTION = "File"
DEFAULT_DIRECTORY_DESCRIPTION = "Directory"


def describe_directory(name: str, path: str = "") -> str:
    lower_name = name.lower()
    if lower_name in DIRECTORY_DESCRIPTIONS:
        return DIRECTORY_DESCRIPTIONS[lower_name]

    lower_path = (path or name).lower()
    for needles, description in DIRECTORY_PATH_PATTERNS:
        if any(needle in lower_path for needle in needles):
            return description
    return DEFAULT_DIRECTORY_DESCRIPTION


def describe_file(name: str) -> str:
    lower_name = name.lower()
    if lower_name in FILENAME_DESCRIPTIONS:
        return FILENAME_DESCRIPTIONS[lower_name]

    if "." not in lower_name:
        return DEFAULT_FILE_DESCRIPTION
    extension = lower_name.rsplit(".", maxsplit=1)[-1]
    return EXTENSION_DESCRIPTIONS.get(extension, DEFAULT_FILE_DESCRIPTION)


@lru_cache(maxsize=1024)
def describe(name: str, is_directory: bool, path: str = "") -> str:
    """Return the annotation for an entry.

    Files are looked up by exact filename, then by extension. Directories
    are looked up by name, then by patterns in their full path. Anything
    unknown gets a generic label.
    """
    if is_directory:
        return describe_directory(name, path)
    return describe_file(name)

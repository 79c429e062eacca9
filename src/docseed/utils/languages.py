"""
Language lookup by filename: display names for prompts and markdown fence tags.
"""
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Dict, Union
from urllib.parse import unquote, urlparse


class Language(str, Enum):
    TYPESCRIPT = "TypeScript"
    JAVASCRIPT = "JavaScript"
    JAVA = "Java"
    PYTHON = "Python"
    GO = "Go"
    C = "C"
    CPP = "C++"
    CSHARP = "C#"
    RUST = "Rust"
    RUBY = "Ruby"
    PHP = "PHP"
    KOTLIN = "Kotlin"
    SWIFT = "Swift"
    SCALA = "Scala"
    SHELL = "Shell"
    MARKDOWN = "Markdown"
    HTML = "HTML"
    CSS = "CSS"
    SCSS = "SCSS"
    JSON = "JSON"
    YAML = "YAML"
    SQL = "SQL"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


FileURI = Union[str, Path]

EXTENSION_LANGUAGES: Dict[str, Language] = {
    '.ts': Language.TYPESCRIPT, '.tsx': Language.TYPESCRIPT, '.mts': Language.TYPESCRIPT,
    '.cts': Language.TYPESCRIPT,
    '.js': Language.JAVASCRIPT, '.jsx': Language.JAVASCRIPT, '.mjs': Language.JAVASCRIPT,
    '.cjs': Language.JAVASCRIPT,
    '.java': Language.JAVA,
    '.py': Language.PYTHON, '.pyi': Language.PYTHON,
    '.go': Language.GO,
    '.c': Language.C, '.h': Language.C,
    '.cpp': Language.CPP, '.cc': Language.CPP, '.cxx': Language.CPP, '.hpp': Language.CPP,
    '.cs': Language.CSHARP,
    '.rs': Language.RUST,
    '.rb': Language.RUBY,
    '.php': Language.PHP,
    '.kt': Language.KOTLIN, '.kts': Language.KOTLIN,
    '.swift': Language.SWIFT,
    '.scala': Language.SCALA,
    '.sh': Language.SHELL, '.bash': Language.SHELL, '.zsh': Language.SHELL,
    '.md': Language.MARKDOWN, '.markdown': Language.MARKDOWN,
    '.html': Language.HTML, '.htm': Language.HTML,
    '.css': Language.CSS,
    '.scss': Language.SCSS,
    '.json': Language.JSON,
    '.yaml': Language.YAML, '.yml': Language.YAML,
    '.sql': Language.SQL,
}

# Fence tags that differ from the lower-cased display name.
CODE_BLOCK_IDS: Dict[Language, str] = {
    Language.CPP: 'cpp',
    Language.CSHARP: 'csharp',
    Language.SHELL: 'bash',
    Language.UNKNOWN: '',
}

EXTENSION_CODE_BLOCK_IDS: Dict[str, str] = {
    '.tsx': 'tsx',
    '.jsx': 'jsx',
}


def _path_of(file_uri: FileURI) -> PurePosixPath:
    if isinstance(file_uri, Path):
        return PurePosixPath(file_uri.as_posix())
    parsed = urlparse(file_uri)
    if parsed.scheme == 'file':
        return PurePosixPath(unquote(parsed.path))
    return PurePosixPath(file_uri.replace('\\', '/'))


def extension_of(file_uri: FileURI) -> str:
    """Lower-cased extension including the dot, or '' when there is none."""
    return _path_of(file_uri).suffix.lower()


def language_from_filename(file_uri: FileURI) -> Language:
    return EXTENSION_LANGUAGES.get(extension_of(file_uri), Language.UNKNOWN)


def language_display_name(file_uri: FileURI) -> str:
    """Name used inside prompt text; unknown languages fall back to the bare extension."""
    language = language_from_filename(file_uri)
    if language is Language.UNKNOWN:
        return extension_of(file_uri).lstrip('.') or language.value
    return language.value


def markdown_code_block_language_id_for_filename(file_uri: FileURI) -> str:
    """Get the markdown code fence tag for a file, '' when the language is unknown."""
    ext = extension_of(file_uri)
    if ext in EXTENSION_CODE_BLOCK_IDS:
        return EXTENSION_CODE_BLOCK_IDS[ext]
    language = language_from_filename(file_uri)
    return CODE_BLOCK_IDS.get(language, language.value.lower())

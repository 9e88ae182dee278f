# src/treepeek/languages.py

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from loguru import logger

from .errors import UnsupportedLanguageError

# 1) Grammar name → extensions, for grammars shipped by tree-sitter-language-pack
LANG_EXT_MAP: Mapping[str, List[str]] = MappingProxyType(
    {
        "bash": ["sh", "bash", "zsh"],
        "c": ["c", "h"],
        "cpp": ["cpp", "cc", "cxx", "hpp", "hh", "hxx"],
        "csharp": ["cs"],
        "css": ["css"],
        "go": ["go"],
        "html": ["html", "htm"],
        "java": ["java"],
        "javascript": ["js", "jsx", "mjs", "cjs"],
        "json": ["json"],
        "kotlin": ["kt", "kts"],
        "lua": ["lua"],
        "php": ["php", "phtml"],
        "python": ["py", "pyw", "pyi"],
        "ruby": ["rb", "rake", "gemspec"],
        "rust": ["rs"],
        "toml": ["toml"],
        "tsx": ["tsx"],
        "typescript": ["ts", "mts", "cts"],
        "yaml": ["yml", "yaml"],
    }
)

# 2) Accepted --lang values → grammar name (every grammar plus short aliases)
_ALIASES: Dict[str, str] = {
    "js": "javascript",
    "py": "python",
    "ts": "typescript",
    "yml": "yaml",
    "sh": "bash",
    "rb": "ruby",
    "rs": "rust",
    "c++": "cpp",
    "cs": "csharp",
}
LANGUAGES: Mapping[str, str] = MappingProxyType(
    {**{lang: lang for lang in LANG_EXT_MAP}, **_ALIASES}
)

# 3) Invert to extension → grammar name
EXT_LANG_MAP: Mapping[str, str] = MappingProxyType(
    {ext.lower(): lang for lang, exts in LANG_EXT_MAP.items() for ext in exts}
)


def supported_languages() -> List[str]:
    """All accepted language names and aliases, sorted."""
    return sorted(LANGUAGES)


def resolve_language(name: str) -> str:
    """Map a user supplied name or alias to a grammar name."""
    grammar = LANGUAGES.get(name.lower())
    if grammar is None:
        raise UnsupportedLanguageError(name, supported_languages())
    if grammar != name:
        logger.debug(f"Resolved language '{name}' to grammar '{grammar}'")
    return grammar


def language_for_path(path: Path) -> Optional[str]:
    """Guess the grammar from a file extension; None when unknown."""
    lang = EXT_LANG_MAP.get(path.suffix.lstrip(".").lower())
    logger.trace(f"Extension lookup for '{path.name}' -> {lang}")
    return lang

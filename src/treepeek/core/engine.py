from functools import lru_cache
from typing import Iterator, Protocol

from tree_sitter import Language, Parser
from tree_sitter_language_pack import get_language
from loguru import logger

from .node import NodeWrapper
from .parser import ParserEngine
from .query_engine import CompiledQuery, Match, QueryEngine, iter_matches
from ..errors import UnsupportedLanguageError
from ..languages import supported_languages


class GrammarEngine(Protocol):
    """Capabilities the renderers need from a parsing library."""

    def parse(self, grammar: str, source: bytes) -> NodeWrapper: ...

    def compile_query(self, grammar: str, pattern: str) -> CompiledQuery: ...

    def execute(self, query: CompiledQuery, root: NodeWrapper) -> Iterator[Match]: ...


@lru_cache(maxsize=None)
def load_language(grammar: str) -> Language:
    """Load a compiled grammar from tree-sitter-language-pack, once per process."""
    try:
        language = get_language(grammar)
    except Exception as e:
        logger.warning(f"No grammar for '{grammar}': {e}")
        raise UnsupportedLanguageError(grammar, supported_languages()) from e
    logger.info(f"Loaded grammar '{grammar}'")
    return language


class TreeSitterEngine:
    """GrammarEngine backed by py-tree-sitter and the language pack."""

    def parse(self, grammar: str, source: bytes) -> NodeWrapper:
        parser = ParserEngine(Parser(load_language(grammar)))
        return parser.parse(source)

    def compile_query(self, grammar: str, pattern: str) -> CompiledQuery:
        return QueryEngine(load_language(grammar)).compile(pattern)

    def execute(self, query: CompiledQuery, root: NodeWrapper) -> Iterator[Match]:
        return iter_matches(query, root)

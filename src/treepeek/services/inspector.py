# src/treepeek/services/inspector.py

from pathlib import Path
from typing import Iterator, Optional

from loguru import logger

from ..config import RenderOptions
from ..core.engine import GrammarEngine, TreeSitterEngine
from ..core.node import NodeWrapper
from ..core.query_engine import CompiledQuery
from ..errors import InputError
from ..languages import resolve_language
from ..render.matches import iter_match_lines
from ..render.tree import iter_tree_lines


def read_source(path: Optional[Path], stdin=None) -> bytes:
    """Read the whole input up front; `stdin` is a binary stream."""
    if path is not None:
        try:
            return path.read_bytes()
        except OSError as e:
            raise InputError(f"reading file: {e}") from e
    try:
        return stdin.read()
    except OSError as e:
        raise InputError(f"reading stdin: {e}") from e


class Inspector:
    """
    One inspection session for one language.

    Holds the tree, compiled query and match stream produced for a run and
    drops them all in close(), which the context manager calls on every
    exit path.
    """

    def __init__(
        self,
        language: str,
        engine: Optional[GrammarEngine] = None,
        options: Optional[RenderOptions] = None,
    ):
        self.grammar = resolve_language(language)
        self.engine = engine or TreeSitterEngine()
        self.options = options
        self.root: Optional[NodeWrapper] = None
        self.query: Optional[CompiledQuery] = None
        self._matches = None
        logger.info(f"Inspector opened for grammar '{self.grammar}'")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        close = getattr(self._matches, "close", None)
        if close is not None:
            close()
        self._matches = None
        self.query = None
        self.root = None
        logger.debug(f"Inspector for '{self.grammar}' released")

    def parse(self, source: bytes) -> NodeWrapper:
        self.root = self.engine.parse(self.grammar, source)
        return self.root

    def dump_tree(self, source: bytes) -> Iterator[str]:
        """Parse `source` and return the tree dump lines."""
        return iter_tree_lines(self.parse(source), self.options)

    def run_query(self, source: bytes, pattern: str) -> Iterator[str]:
        """
        Parse `source`, compile `pattern` and return the report lines.

        Compilation happens here, before any line is produced, so an
        invalid pattern raises InvalidQueryError with nothing printed.
        """
        root = self.parse(source)
        self.query = self.engine.compile_query(self.grammar, pattern)
        self._matches = self.engine.execute(self.query, root)
        return iter_match_lines(self._matches)

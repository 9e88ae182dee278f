from dataclasses import dataclass
from typing import Iterator, Tuple

from tree_sitter import Language, Query, QueryCursor, QueryError
from loguru import logger

from .node import NodeWrapper
from ..errors import InvalidQueryError


@dataclass(frozen=True)
class Capture:
    name: str
    node: NodeWrapper


@dataclass(frozen=True)
class Match:
    """One occurrence of a query pattern; captures keep engine order."""

    pattern_index: int
    captures: Tuple[Capture, ...]


@dataclass(frozen=True)
class CompiledQuery:
    query: Query


class QueryEngine:
    """Compiles S-expression queries against one grammar."""

    def __init__(self, language: Language):
        self.language = language
        logger.info(f"QueryEngine ready for {language!r}")

    def compile(self, pattern: str) -> CompiledQuery:
        logger.debug(f"Compiling query:\n{pattern.strip()}")
        try:
            q = Query(self.language, pattern)
        except QueryError as e:
            raise InvalidQueryError(str(e)) from e
        logger.debug(f"Query compiled with {q.capture_count} capture names")
        return CompiledQuery(query=q)


def iter_matches(compiled: CompiledQuery, root: NodeWrapper) -> Iterator[Match]:
    """Yield matches one at a time in cursor order.

    The bindings group a match's nodes by capture name. The engine lists
    captures in document order, outer node first, so a stable sort of the
    flattened groups restores it; ties keep first-seen name order.
    """
    cursor = QueryCursor(compiled.query)
    count = 0
    for pattern_index, groups in cursor.matches(root._node):
        count += 1
        flat = [(name, node) for name, nodes in groups.items() for node in nodes]
        flat.sort(key=lambda pair: (pair[1].start_byte, -pair[1].end_byte))
        captures = tuple(
            Capture(name, NodeWrapper(node, root.source)) for name, node in flat
        )
        logger.trace(
            f"Match {count} (pattern {pattern_index}) with {len(captures)} captures"
        )
        yield Match(pattern_index=pattern_index, captures=captures)
    logger.debug(f"Query produced {count} matches")

from typing import List, Tuple

from tree_sitter import Node
from loguru import logger

from ..errors import NodeRangeError


class NodeWrapper:
    """Read-only view of a tree-sitter Node and the source bytes it spans."""

    def __init__(self, node: Node, source: bytes):
        self._node = node
        self.source = source
        logger.trace(f"Wrapped node {node.type} [{node.start_byte}:{node.end_byte}]")

    @property
    def kind(self) -> str:
        return self._node.type

    @property
    def is_named(self) -> bool:
        return self._node.is_named

    @property
    def child_count(self) -> int:
        return self._node.child_count

    @property
    def children(self) -> List["NodeWrapper"]:
        return [NodeWrapper(c, self.source) for c in self._node.children]

    @property
    def start_byte(self) -> int:
        return self._node.start_byte

    @property
    def end_byte(self) -> int:
        return self._node.end_byte

    @property
    def start_point(self) -> Tuple[int, int]:
        row, column = self._node.start_point
        return row, column

    @property
    def end_point(self) -> Tuple[int, int]:
        row, column = self._node.end_point
        return row, column

    @property
    def raw(self) -> bytes:
        start, end = self.start_byte, self.end_byte
        if not 0 <= start <= end <= len(self.source):
            raise NodeRangeError(self.kind, start, end, len(self.source))
        return self.source[start:end]

    @property
    def text(self) -> str:
        return self.raw.decode("utf8", errors="replace")

    def __repr__(self):
        return f"NodeWrapper<{self.kind} [{self.start_byte}:{self.end_byte}]>"

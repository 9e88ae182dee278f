from tree_sitter import Parser
from .node import NodeWrapper
from ..errors import ParseError
from loguru import logger


class ParserEngine:
    """Parses raw bytes into a wrapped tree via tree-sitter."""

    def __init__(self, ts_parser: Parser):
        """
        ts_parser: a preconfigured tree_sitter.Parser (from get_parser).
        """
        self._parser = ts_parser
        logger.info(f"ParserEngine initialized for {ts_parser!r}")

    def parse(self, source: bytes) -> NodeWrapper:
        logger.debug(f"Parsing {len(source)} bytes")
        try:
            tree = self._parser.parse(source)
        except (TypeError, ValueError) as e:
            raise ParseError(f"parser rejected input: {e}") from e
        if tree is None:
            raise ParseError("parser returned no tree")
        root = tree.root_node
        logger.debug(f"Parsed tree rooted at '{root.type}'")
        return NodeWrapper(root, source)

from typing import Iterable


class TreepeekError(Exception):
    """Base class for every error treepeek reports."""


class InputError(TreepeekError):
    """The source file or stdin could not be read."""


class UnsupportedLanguageError(TreepeekError):
    def __init__(self, name: str, supported: Iterable[str] = ()):
        self.name = name
        self.supported = sorted(supported)
        super().__init__(f"unsupported language '{name}'")


class ParseError(TreepeekError):
    """The engine failed to produce a tree for the source."""


class InvalidQueryError(TreepeekError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"invalid query: {detail}")


class NodeRangeError(TreepeekError):
    """A node reported a byte range outside its source buffer.

    This is a contract violation by the parser, not a user error, so the
    CLI lets it propagate instead of turning it into an exit message.
    """

    def __init__(self, kind: str, start: int, end: int, size: int):
        self.kind = kind
        self.start = start
        self.end = end
        self.size = size
        super().__init__(
            f"node '{kind}' has range [{start}:{end}] outside a {size}-byte source"
        )

from typing import Iterable, Iterator

from loguru import logger

from ..core.query_engine import Match
from .text import format_point, split_lines

NO_MATCHES = "No matches found"


def iter_match_lines(matches: Iterable[Match]) -> Iterator[str]:
    """
    Yield the report for a stream of matches.

    Matches are pulled lazily and reported in the order given; captures
    inside a match keep their engine order. A blank line separates
    consecutive matches, and an empty stream yields only NO_MATCHES.
    Errors raised by the stream propagate and end the report.
    """
    count = 0
    for match in matches:
        count += 1
        if count > 1:
            yield ""
        for capture in match.captures:
            node = capture.node
            yield f"@{capture.name}"
            yield f"start: {format_point(node.start_point)}"
            yield f"end: {format_point(node.end_point)}"
            yield "content:"
            yield from split_lines(node.text)
            yield ""

    if count == 0:
        yield NO_MATCHES
    logger.debug(f"Reported {count} matches")


def render_matches(matches: Iterable[Match]) -> str:
    return "".join(f"{line}\n" for line in iter_match_lines(matches))

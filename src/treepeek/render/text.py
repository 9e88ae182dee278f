from typing import List, Tuple

_ESCAPES = str.maketrans({"\n": "\\n", "\t": "\\t"})


def escape_control(text: str) -> str:
    """Replace newlines and tabs with their two-character escapes."""
    return text.translate(_ESCAPES)


def truncate(text: str, width: int, ellipsis: str = "...") -> str:
    # counts characters, so multi-byte sequences are never cut in half
    if len(text) <= width:
        return text
    return text[: width - len(ellipsis)] + ellipsis


def split_lines(text: str) -> List[str]:
    """Split like a line scanner: no trailing empty line, CR stripped."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def format_point(point: Tuple[int, int]) -> str:
    """Render a 0-based (row, column) as 1-based row and 0-based column."""
    row, column = point
    return f"{row + 1}:{column}"

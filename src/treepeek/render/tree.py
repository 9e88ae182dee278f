from typing import Iterator, Optional

from loguru import logger

from ..config import DEFAULT_OPTIONS, RenderOptions
from ..core.node import NodeWrapper
from .text import escape_control, truncate

_CLOSE = object()


def iter_tree_lines(
    root: NodeWrapper, options: Optional[RenderOptions] = None
) -> Iterator[str]:
    """
    Yield the S-expression dump of `root`, one line at a time.

    Named parents open with `(kind` and close with `)` at the same
    indentation; named leaves print `(kind "text")` with the text escaped
    and truncated; anonymous nodes print `"text"` escaped but never
    truncated. Children follow in stored order one level deeper.
    """
    opts = options or DEFAULT_OPTIONS
    # explicit work-list keeps deep trees clear of the recursion limit
    stack = [(root, 0)]
    emitted = 0
    while stack:
        node, depth = stack.pop()
        indent = opts.indent * depth
        if node is _CLOSE:
            yield f"{indent})"
            continue

        children = node.children
        if node.is_named:
            if not children:
                shown = truncate(escape_control(node.text), opts.leaf_width, opts.ellipsis)
                yield f'{indent}({node.kind} "{shown}")'
            else:
                yield f"{indent}({node.kind}"
                stack.append((_CLOSE, depth))
        else:
            yield f'{indent}"{escape_control(node.text)}"'
        emitted += 1

        stack.extend((child, depth + 1) for child in reversed(children))
    logger.debug(f"Rendered {emitted} nodes")


def render_tree(root: NodeWrapper, options: Optional[RenderOptions] = None) -> str:
    return "".join(f"{line}\n" for line in iter_tree_lines(root, options))

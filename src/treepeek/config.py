from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """Layout knobs for the tree renderer.

    The defaults produce the fixed dump format; changing them is only
    meant for callers embedding the renderer elsewhere.
    """

    indent: str = "  "
    leaf_width: int = 50
    ellipsis: str = "..."

    def __post_init__(self):
        if self.leaf_width <= len(self.ellipsis):
            raise ValueError(
                f"leaf_width ({self.leaf_width}) must exceed the ellipsis length"
            )


DEFAULT_OPTIONS = RenderOptions()

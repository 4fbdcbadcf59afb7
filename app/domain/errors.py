from __future__ import annotations

__all__ = [
    "TreeError",
    "DepthExceededError",
]


class TreeError(ValueError):
    """Base class for link-tree errors.

    The `code` attribute gives the HTTP layer and the logs a stable machine code.
    """

    code: str = "tree_error"


class DepthExceededError(TreeError):
    """Raised when a path lies deeper than the configured tree bound."""

    code = "depth_exceeded"

    def __init__(self, depth: int, max_depth: int) -> None:
        super().__init__(f"path depth {depth} exceeds max depth {max_depth}")
        self.depth = depth
        self.max_depth = max_depth

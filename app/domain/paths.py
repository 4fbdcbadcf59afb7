from __future__ import annotations

__all__ = [
    "segments",
    "depth",
    "base_path",
    "child_paths",
]


def segments(path: str) -> list[str]:
    """Split a URL path on "/" and drop the empty pieces.

    Leading, trailing and repeated slashes therefore never count:
    "//a//b/" and "/a/b" both yield ["a", "b"].
    """
    return [seg for seg in path.split("/") if seg]


def depth(path: str) -> int:
    """Return the number of non-empty segments in `path`."""
    return len(segments(path))


def base_path(path: str, *, collapse_slashes: bool = True) -> str:
    """Return the prefix used to build child paths.

    Rules:
    - The root "/" maps to the empty string, so children look like "/0".
    - With `collapse_slashes` the base is rebuilt from the non-empty
      segments ("//a//b/" -> "/a/b"), which keeps it consistent with `depth`.
    - Without it the path is returned as given ("//a//b/" stays as is).
    """
    if path == "/":
        return ""
    if collapse_slashes:
        parts = segments(path)
        return "/" + "/".join(parts) if parts else ""
    return path


def child_paths(base: str, current_depth: int, *, max_depth: int, children_per_page: int) -> list[str]:
    """Synthesize the child paths of a page, in ascending index order.

    A page at or beyond `max_depth` is a leaf and has no children.
    """
    if current_depth >= max_depth:
        return []
    return [f"{base}/{i}" for i in range(children_per_page)]

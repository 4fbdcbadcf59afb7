from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from .errors import DepthExceededError
from .paths import base_path, child_paths, depth

__all__ = [
    "TreePage",
    "build_page",
    "render_page",
]


@dataclass(frozen=True)
class TreePage:
    """One synthetic page: its depth and the child paths it links to."""

    path: str
    depth: int
    children: list[str] = field(default_factory=list)
    link_prefix: str = ""

    def child_urls(self) -> list[str]:
        """Absolute URLs of the children, in the same order as `children`."""
        return [f"{self.link_prefix}{child}" for child in self.children]


def build_page(
    path: str,
    *,
    max_depth: int,
    children_per_page: int,
    link_prefix: str = "",
    collapse_slashes: bool = True,
) -> TreePage:
    """Compute the page for `path`.

    Raises:
        DepthExceededError: if the path has more than `max_depth` segments.
    """
    d = depth(path)
    if d > max_depth:
        raise DepthExceededError(d, max_depth)
    base = base_path(path, collapse_slashes=collapse_slashes)
    children = child_paths(base, d, max_depth=max_depth, children_per_page=children_per_page)
    return TreePage(path=path, depth=d, children=children, link_prefix=link_prefix)


def render_page(page: TreePage) -> str:
    """Render a page as a small HTML document."""
    items = "\n".join(
        f'      <li><a href="{escape(url)}">{escape(child)}</a></li>'
        for child, url in zip(page.children, page.child_urls())
    )
    lines = [
        "<html>",
        f"  <head><title>Depth {page.depth}</title></head>",
        "  <body>",
        f"    <h1>Depth {page.depth}</h1>",
        "    <ul>",
    ]
    if items:
        lines.append(items)
    lines += [
        "    </ul>",
        "  </body>",
        "</html>",
        "",
    ]
    return "\n".join(lines)

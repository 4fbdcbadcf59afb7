from __future__ import annotations

from dataclasses import dataclass

from ..config import TreeSettings
from ..domain.errors import DepthExceededError
from ..domain.pages import build_page, render_page
from ..logging_conf import get_logger

logger = get_logger("service.tree")

NOT_FOUND_BODY = "Not Found"


@dataclass(frozen=True)
class TreeResponse:
    """Transport-neutral result of answering one path."""

    status_code: int
    media_type: str
    body: str


class PathTreeResponder:
    """Map a request path to its synthetic page, or to a 404.

    Holds nothing but the immutable bounds it was built with, so one instance
    can serve any number of concurrent requests.
    """

    def __init__(
        self,
        *,
        max_depth: int,
        children_per_page: int,
        link_prefix: str = "http://localhost:3000",
        collapse_slashes: bool = True,
    ) -> None:
        if max_depth < 0 or children_per_page < 0:
            raise ValueError("max_depth and children_per_page must be non-negative")
        self.max_depth = max_depth
        self.children_per_page = children_per_page
        self.link_prefix = link_prefix
        self.collapse_slashes = collapse_slashes

    @classmethod
    def from_settings(cls, settings: TreeSettings) -> PathTreeResponder:
        return cls(
            max_depth=settings.max_depth,
            children_per_page=settings.children_per_page,
            link_prefix=settings.link_prefix,
            collapse_slashes=settings.collapse_slashes,
        )

    def respond(self, path: str) -> TreeResponse:
        """Return the response for `path`; the same path always gives the same bytes."""
        try:
            page = build_page(
                path,
                max_depth=self.max_depth,
                children_per_page=self.children_per_page,
                link_prefix=self.link_prefix,
                collapse_slashes=self.collapse_slashes,
            )
        except DepthExceededError as e:
            logger.debug(
                "tree.not_found",
                extra={"event": "tree_not_found", "path": path, "error_code": e.code, "depth": e.depth},
            )
            return TreeResponse(status_code=404, media_type="text/plain", body=NOT_FOUND_BODY)
        return TreeResponse(status_code=200, media_type="text/html", body=render_page(page))

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CrawledPage:
    """One fetched URL and what the crawler learned from it."""

    url: str
    depth: int
    status_code: int
    links: list[str] = field(default_factory=list)


@dataclass
class CrawlReport:
    """Everything a crawl visited, in breadth-first order."""

    root_url: str
    max_depth: int
    pages: list[CrawledPage] = field(default_factory=list)

    @property
    def ok_pages(self) -> list[CrawledPage]:
        return [p for p in self.pages if p.status_code == 200]

    def pages_at(self, depth: int) -> list[CrawledPage]:
        return [p for p in self.pages if p.depth == depth]


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., server never ready)."""


class ServerNotReadyError(SmokeError):
    """Raised when the server root does not answer 200 within the timeout."""


class CrawlError(SmokeError):
    """Raised when fetching a page fails after retries."""

from __future__ import annotations

import asyncio
import time

import httpx
from bs4 import BeautifulSoup

from app.logging_conf import get_logger
from runner.types import CrawledPage, CrawlError, CrawlReport, ServerNotReadyError

logger = get_logger("runner.client")


async def wait_for_server(base_url: str, timeout_s: float = 20.0) -> None:
    """Poll the server root until it answers 200 or raise after a timeout."""
    deadline = time.monotonic() + timeout_s
    async with httpx.AsyncClient(timeout=5.0) as client:
        while time.monotonic() < deadline:
            try:
                r = await client.get(base_url)
                if r.status_code == 200:
                    logger.info("server.ready", extra={"event": "server_ready", "url": base_url})
                    return
            except httpx.TransportError:
                pass
            await asyncio.sleep(0.25)
    raise ServerNotReadyError(f"{base_url} did not answer 200 within {timeout_s}s")


def extract_links(html: str) -> list[str]:
    """Return absolute http(s) hrefs of the anchors inside <body>, in document order."""
    soup = BeautifulSoup(html, "html.parser")
    if soup.body is None:
        return []
    links = []
    for a in soup.body.find_all("a", href=True):
        href = a["href"]
        if href.startswith(("http://", "https://")):
            links.append(href)
    return links


async def fetch_page(
    client: httpx.AsyncClient, url: str, depth: int, *, retries: int = 3
) -> CrawledPage:
    """Fetch one URL and extract its links, retrying transport failures.

    - Non-200 and non-HTML responses are recorded without links
    """
    last_err: Exception | None = None
    for attempt in range(retries):
        try:
            r = await client.get(url)
        except httpx.TransportError as e:
            last_err = e
            logger.warning(
                "fetch.retry",
                extra={"event": "fetch_retry", "url": url, "attempt": attempt + 1, "error": str(e)},
            )
            continue
        links: list[str] = []
        if r.status_code == 200 and r.headers.get("content-type", "").startswith("text/html"):
            links = extract_links(r.text)
        return CrawledPage(url=url, depth=depth, status_code=r.status_code, links=links)
    raise CrawlError(f"fetch failed for {url}: {last_err}")


async def crawl(
    root_url: str,
    max_depth: int,
    *,
    client: httpx.AsyncClient | None = None,
    concurrency: int = 8,
) -> CrawlReport:
    """Breadth-first crawl from `root_url`, following links `max_depth` levels deep.

    - Each level is fetched concurrently, bounded by `concurrency`
    - A URL is fetched at most once, at the first depth it was seen
    """
    own_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=10.0)
    semaphore = asyncio.Semaphore(concurrency)
    report = CrawlReport(root_url=root_url, max_depth=max_depth)

    async def _bounded(url: str, depth: int) -> CrawledPage:
        async with semaphore:
            return await fetch_page(client, url, depth)

    try:
        seen = {root_url}
        level = [root_url]
        depth = 0
        while level and depth <= max_depth:
            pages = await asyncio.gather(*(_bounded(u, depth) for u in level))
            report.pages.extend(pages)
            next_level: list[str] = []
            for page in pages:
                for link in page.links:
                    if link not in seen:
                        seen.add(link)
                        next_level.append(link)
            logger.info(
                "crawl.level",
                extra={"event": "crawl_level", "depth": depth, "fetched": len(pages)},
            )
            level = next_level
            depth += 1
    finally:
        if own_client:
            await client.aclose()
    return report

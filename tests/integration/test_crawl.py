"""
Crawl the app end to end through httpx.ASGITransport, as the smoke runner would.
"""
import asyncio

import httpx

from app.config import TreeSettings
from app.main import create_app
from runner.client import crawl
from runner.smoke import beyond_bound_url, run_smoke
from runner.utils import expected_page_count, pages_per_depth

BASE_URL = "http://localhost:3000"


def _client(settings):
    transport = httpx.ASGITransport(app=create_app(settings))
    return httpx.AsyncClient(transport=transport, base_url=BASE_URL)


def test_crawl_discovers_whole_tree():
    settings = TreeSettings(max_depth=3, children_per_page=3)

    async def go():
        async with _client(settings) as client:
            return await crawl(BASE_URL, 4, client=client, concurrency=4)

    report = asyncio.run(go())
    assert len(report.ok_pages) == expected_page_count(3, 3) == 40
    assert pages_per_depth(report) == {0: 1, 1: 3, 2: 9, 3: 27}
    assert all(not p.links for p in report.pages_at(3))
    assert report.pages_at(4) == []


def test_crawl_stops_at_requested_depth():
    settings = TreeSettings(max_depth=5, children_per_page=2)

    async def go():
        async with _client(settings) as client:
            return await crawl(BASE_URL, 1, client=client)

    report = asyncio.run(go())
    assert [p.url for p in report.pages] == [BASE_URL, f"{BASE_URL}/0", f"{BASE_URL}/1"]


def test_smoke_run_passes_against_app():
    settings = TreeSettings(max_depth=2, children_per_page=3)

    async def go():
        async with _client(settings) as client:
            return await run_smoke(
                base_url=BASE_URL, max_depth=2, children_per_page=3, client=client
            )

    assert asyncio.run(go()) == 0


def test_smoke_run_fails_on_wrong_expectation():
    settings = TreeSettings(max_depth=2, children_per_page=3)

    async def go():
        async with _client(settings) as client:
            return await run_smoke(
                base_url=BASE_URL, max_depth=2, children_per_page=4, client=client
            )

    assert asyncio.run(go()) == 1


def test_beyond_bound_url():
    assert beyond_bound_url("http://h:1/", 2) == "http://h:1/0/0/0"

#!/usr/bin/env python3
"""High-level crawl smoke run against a live link-tree server.

Steps:
- wait for the server root to answer
- crawl breadth-first one level past the leaf depth
- probe a path one level beyond the bound (expects 404)
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import contextlib
import sys

import httpx

from app.logging_conf import get_logger, setup_logging
from runner.cli import parse_args
from runner.client import crawl, fetch_page, wait_for_server
from runner.utils import summarize

setup_logging()
logger = get_logger("runner")


def beyond_bound_url(base_url: str, max_depth: int) -> str:
    """URL of a path with one more segment than the tree allows."""
    return base_url.rstrip("/") + "/0" * (max_depth + 1)


async def run_smoke(
    *,
    base_url: str,
    max_depth: int,
    children_per_page: int,
    timeout_s: float = 20.0,
    concurrency: int = 8,
    client: httpx.AsyncClient | None = None,
) -> int:
    if client is None:
        await wait_for_server(base_url, timeout_s)
        ctx = httpx.AsyncClient(timeout=10.0)
    else:
        # caller owns the client (tests pass one bound to the ASGI app)
        ctx = contextlib.nullcontext(client)
    async with ctx as c:
        report = await crawl(base_url, max_depth + 1, client=c, concurrency=concurrency)
        probe = await fetch_page(c, beyond_bound_url(base_url, max_depth), max_depth + 1)
    summary, exit_code = summarize(
        report,
        tree_max_depth=max_depth,
        children_per_page=children_per_page,
        beyond_status=probe.status_code,
    )
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            max_depth=args.max_depth,
            children_per_page=args.children_per_page,
            timeout_s=args.timeout,
            concurrency=args.concurrency,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()

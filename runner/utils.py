from __future__ import annotations

from runner.types import CrawlReport


def expected_page_count(max_depth: int, children_per_page: int) -> int:
    """Number of pages a full tree holds: sum of children**k for k in 0..max_depth."""
    return sum(children_per_page**k for k in range(max_depth + 1))


def pages_per_depth(report: CrawlReport) -> dict[int, int]:
    """Count successfully served pages at each depth."""
    counts: dict[int, int] = {}
    for page in report.ok_pages:
        counts[page.depth] = counts.get(page.depth, 0) + 1
    return counts


def summarize(
    report: CrawlReport, *, tree_max_depth: int, children_per_page: int, beyond_status: int | None = None
) -> tuple[dict, int]:
    """Compare a crawl against the expected tree shape and compute an exit code.

    `beyond_status` is the status of a probe one level past the bound; it
    should be 404.
    """
    expected = expected_page_count(tree_max_depth, children_per_page)
    found = len(report.ok_pages)
    failed = [{"url": p.url, "status_code": p.status_code} for p in report.pages if p.status_code != 200]
    leaves_with_links = [
        p.url for p in report.ok_pages if p.depth == tree_max_depth and p.links
    ]
    summary = {
        "component": "runner",
        "event": "summary",
        "root_url": report.root_url,
        "expected_pages": expected,
        "found_pages": found,
        "per_depth": pages_per_depth(report),
        "failures": failed,
        "leaves_with_links": leaves_with_links,
        "beyond_bound_status": beyond_status,
    }
    ok = found == expected and not failed and not leaves_with_links
    if beyond_status is not None:
        ok = ok and beyond_status == 404
    return summary, 0 if ok else 1

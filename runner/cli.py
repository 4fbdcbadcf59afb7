from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the crawl smoke runner."""
    parser = argparse.ArgumentParser(description="Link-tree crawl smoke runner")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://localhost:3000"))
    parser.add_argument(
        "--max-depth", type=int, default=int(os.getenv("TREE_MAX_DEPTH", "5")), dest="max_depth"
    )
    parser.add_argument(
        "--children",
        type=int,
        default=int(os.getenv("TREE_CHILDREN_PER_PAGE", "3")),
        dest="children_per_page",
    )
    parser.add_argument("--timeout", type=float, default=20.0)
    parser.add_argument("--concurrency", type=int, default=8)
    return parser.parse_args(argv)

from __future__ import annotations

import argparse


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the server; unset flags fall back to TREE_* env vars."""
    parser = argparse.ArgumentParser(description="Synthetic link-tree fixture server")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--max-depth", type=int, default=None, dest="max_depth")
    parser.add_argument("--children", type=int, default=None, dest="children_per_page")
    parser.add_argument("--public-url", default=None, dest="public_url")
    parser.add_argument(
        "--raw-slashes",
        action="store_const",
        const=False,
        default=None,
        dest="collapse_slashes",
        help="build child links from the path exactly as requested",
    )
    parser.add_argument("--log-level", default=None, dest="log_level")
    return parser.parse_args(argv)

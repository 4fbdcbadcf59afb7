"""Link-tree fixture server.

Serves a bounded tree of synthetic HTML pages for exercising crawlers.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("link-tree-fixture")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

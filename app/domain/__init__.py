"""Pure domain utilities: paths, pages, errors.

These modules are intentionally free of FastAPI/HTTP concerns so they can be
unit-tested and reused by both the server and the crawl runner.
"""
__all__ = ["paths", "pages", "errors"]

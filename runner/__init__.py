"""Crawl smoke runner for the link-tree fixture server."""

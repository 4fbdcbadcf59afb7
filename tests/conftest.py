"""
Shared pytest fixtures for the link-tree fixture server test suite.
"""
import pytest
from fastapi.testclient import TestClient

from app.config import TreeSettings
from app.main import create_app
from app.service.tree_service import PathTreeResponder


# ── Settings / responder ────────────────────────────────────────────────────

@pytest.fixture
def settings():
    """Reference bounds: depth 5, three children per page."""
    return TreeSettings()


@pytest.fixture
def responder(settings):
    return PathTreeResponder.from_settings(settings)


# ── HTTP ────────────────────────────────────────────────────────────────────

@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient with startup/shutdown events run."""
    with TestClient(app) as c:
        yield c

"""FastAPI app factory for the link-tree fixture server."""
from __future__ import annotations

import time
from collections.abc import Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response

from app import __version__
from app.api import raw_request_path, tree_routes
from app.config import TreeSettings
from app.domain.paths import depth
from app.logging_conf import get_logger, setup_logging
from app.service.tree_service import PathTreeResponder

# Configure logging before anything else.
setup_logging()
logger = get_logger("app")


def create_app(settings: TreeSettings | None = None) -> FastAPI:
    settings = settings or TreeSettings.from_env()
    # Every path belongs to the tree, so the docs/openapi routes stay off.
    app = FastAPI(
        title="Link-Tree Fixture Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        routes=tree_routes,
    )
    app.state.settings = settings
    app.state.responder = PathTreeResponder.from_settings(settings)

    @app.on_event("startup")
    async def _on_startup() -> None:
        logger.info(
            "startup",
            extra={
                "event": "startup",
                "link_prefix": settings.link_prefix,
                "max_depth": settings.max_depth,
                "children_per_page": settings.children_per_page,
            },
        )

    @app.on_event("shutdown")
    async def _on_shutdown() -> None:
        logger.info("shutdown", extra={"event": "shutdown"})

    @app.middleware("http")
    async def request_logger(request: Request, call_next: Callable[[Request], Response]):
        """Log each request with its tree position and a correlation id.

        - Propagates the client's X-Request-ID or mints a new one
        - request.start carries the path depth and whether it lies past max_depth
        - request.end carries status and elapsed_ms; X-Request-ID is echoed back
        """
        path = raw_request_path(request.scope)
        fields = {
            "request_id": request.headers.get("X-Request-ID", str(uuid4())),
            "method": request.method,
            "path": path,
        }
        request.state.request_id = fields["request_id"]
        path_depth = depth(path)
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                **fields,
                "depth": path_depth,
                "beyond_bound": path_depth > settings.max_depth,
            },
        )

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request.error", extra={"event": "request_error", **fields})
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = fields["request_id"]
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                **fields,
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )
        return response

    return app


def __getattr__(name: str) -> FastAPI:
    """Build the module-level `app` on first access, for `uvicorn app.main:app`.

    Importing this module (as `python -m app` does) therefore never reads TREE_*
    settings by itself.
    """
    if name == "app":
        instance = create_app()
        globals()["app"] = instance
        return instance
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

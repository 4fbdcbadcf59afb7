from __future__ import annotations

from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from ..logging_conf import get_logger
from ..service.tree_service import PathTreeResponder

logger = get_logger("api")


def raw_request_path(scope: Scope) -> str:
    """Return the request path as the client sent it.

    scope["path"] is percent-decoded, which would turn "/a%2Fb" into two
    segments; raw_path keeps the encoding and any repeated slashes.
    """
    raw = scope.get("raw_path")
    if raw is None:
        return scope["path"]
    # some servers include the query string in raw_path
    return raw.decode("latin-1").split("?", 1)[0]


def get_responder(request: Request) -> PathTreeResponder:
    """Return the responder the app factory attached to app.state."""
    return request.app.state.responder


class TreePageEndpoint:
    """ASGI endpoint serving the page for any path and any method.

    A plain ASGI callable (rather than a function endpoint) makes Starlette's
    Route skip method matching, so TRACE or PROPFIND get the same page as GET.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        result = get_responder(request).respond(raw_request_path(scope))
        response: Response
        if result.status_code == 200:
            response = HTMLResponse(content=result.body, status_code=200)
        else:
            response = PlainTextResponse(content=result.body, status_code=result.status_code)
        await response(scope, receive, send)


tree_routes = [
    Route("/{tree_path:path}", endpoint=TreePageEndpoint(), include_in_schema=False),
]

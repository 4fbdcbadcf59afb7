"""Helpers shared by the unit and integration tests."""
import asyncio
from urllib.parse import unquote

from bs4 import BeautifulSoup

LINK_PREFIX = "http://localhost:3000"


def parse_page(html: str) -> dict:
    """Pull title, heading and (href, text) link pairs out of a rendered page."""
    soup = BeautifulSoup(html, "html.parser")
    return {
        "title": soup.title.string,
        "h1": soup.h1.string,
        "items": len(soup.find_all("li")),
        "links": [(a["href"], a.string) for a in soup.find_all("a")],
    }


async def asgi_request(app, method: str, raw_path: str, headers=()) -> tuple[int, dict, bytes]:
    """Send one HTTP request straight through the ASGI interface.

    The path goes in byte-exact as raw_path, so repeated slashes and
    percent-escapes reach the app exactly as a server would pass them.
    Returns (status, headers, body).
    """
    sent: list[dict] = []
    inbox: asyncio.Queue[dict] = asyncio.Queue()
    await inbox.put({"type": "http.request", "body": b"", "more_body": False})

    async def receive() -> dict:
        return await inbox.get()

    async def send(message: dict) -> None:
        sent.append(message)

    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": unquote(raw_path),
        "raw_path": raw_path.encode("latin-1"),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"localhost:3000"), *headers],
        "client": ("127.0.0.1", 50000),
        "server": ("localhost", 3000),
    }
    await app(scope, receive, send)

    start = next(m for m in sent if m["type"] == "http.response.start")
    body = b"".join(m.get("body", b"") for m in sent if m["type"] == "http.response.body")
    response_headers = {k.decode("latin-1").lower(): v.decode("latin-1") for k, v in start["headers"]}
    return start["status"], response_headers, body

"""Request handlers for the static page server and its small JSON API."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from netlab.http_request import HttpRequest
from netlab.http_response import HttpResponse

DEFAULT_PUBLIC_PATH = "public"
DEFAULT_DATA_PATH = "data"
ORDERS_FILE = "orders.json"

_CONTENT_TYPES = {
    ".css": "text/css",
    ".js": "text/javascript",
}


@dataclass
class OrderStatus:
    """One entry of the orders feed."""

    id: int
    date: str
    status: str


def _segments(request: HttpRequest) -> list[str]:
    segments = request.resource.split("/")
    if len(segments) < 2:
        raise ValueError(f"resource must start with '/': {request.resource!r}")
    return segments


def load_file(file_name: str) -> str | None:
    """Read a file from the public directory, or return None if it cannot be read.

    The directory is taken from PUBLIC_PATH, defaulting to ./public.
    """
    public_path = Path(os.environ.get("PUBLIC_PATH", DEFAULT_PUBLIC_PATH))
    try:
        return (public_path / file_name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def load_orders() -> list[OrderStatus]:
    """Load the orders from orders.json in DATA_PATH, defaulting to ./data."""
    data_path = Path(os.environ.get("DATA_PATH", DEFAULT_DATA_PATH))
    records = json.loads((data_path / ORDERS_FILE).read_text(encoding="utf-8"))
    return [OrderStatus(id=int(r["id"]), date=str(r["date"]), status=str(r["status"])) for r in records]


def page_not_found(request: HttpRequest) -> HttpResponse:
    """Answer with the 404 page."""
    return HttpResponse.create("404", None, load_file("404.html"))


def static_page(request: HttpRequest) -> HttpResponse:
    """Serve the landing page, the health page, or a file from the public directory."""
    path = _segments(request)[1]
    if path in ("", "health"):
        return HttpResponse.create("200", None, load_file("200.html"))
    content = load_file(path)
    if content is None:
        return page_not_found(request)
    content_type = _CONTENT_TYPES.get(Path(path).suffix, "text/html")
    return HttpResponse.create("200", {"Content-Type": content_type}, content)


def web_service(request: HttpRequest) -> HttpResponse:
    """Serve /api/shopping/orders as JSON; anything else is a 404."""
    segments = _segments(request)
    if len(segments) > 3 and segments[2] == "shopping" and segments[3] == "orders":
        body = json.dumps([asdict(order) for order in load_orders()], separators=(",", ":"))
        return HttpResponse.create("200", {"Content-type": "application/json"}, body)
    return page_not_found(request)
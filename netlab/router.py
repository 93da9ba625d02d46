"""Dispatch parsed requests to the right handler and send the answer."""

from __future__ import annotations

from typing import Any

from netlab.handlers import page_not_found, static_page, web_service
from netlab.http_request import HttpMethod, HttpRequest
from netlab.http_response import HttpResponse


def route(request: HttpRequest, stream: Any) -> HttpResponse | None:
    """Handle request, write the response to stream and return it.

    GET requests under /api go to the web service, other GETs to the static
    pages. POST requests get no answer; unknown methods get the 404 page.
    """
    if request.method is HttpMethod.POST:
        return None
    if request.method is HttpMethod.GET:
        segments = request.resource.split("/")
        if len(segments) < 2:
            raise ValueError(f"resource must start with '/': {request.resource!r}")
        handler = web_service if segments[1] == "api" else static_page
        response = handler(request)
    else:
        response = page_not_found(request)
    response.send(stream)
    return response
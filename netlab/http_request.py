"""Parsing of raw HTTP request text into a structured request."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class HttpMethod(Enum):
    """Request methods the server understands."""

    GET = "GET"
    POST = "POST"
    UNINITIALIZED = ""

    @classmethod
    def parse(cls, value: str) -> HttpMethod:
        """Map a method token to a member; unknown tokens are UNINITIALIZED."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNINITIALIZED


class HttpVersion(Enum):
    """Protocol versions the server recognises."""

    HTTP_10 = "HTTP/1.0"
    HTTP_11 = "HTTP/1.1"
    HTTP_20 = "HTTP/2.0"
    UNINITIALIZED = ""

    @classmethod
    def parse(cls, value: str) -> HttpVersion:
        """Map a version token to a member; unknown tokens are UNINITIALIZED."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNINITIALIZED


def _lines(text: str) -> list[str]:
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if text.endswith("\n"):
        lines.pop()
    return lines


def _parse_request_line(line: str) -> tuple[HttpMethod, str, HttpVersion]:
    words = line.split()
    if len(words) < 3:
        raise ValueError(f"malformed request line: {line!r}")
    method, resource, version = words[:3]
    return HttpMethod.parse(method), resource, HttpVersion.parse(version)


def _parse_header_line(line: str) -> tuple[str, str]:
    key, _, value = line.partition(":")
    return key.strip(), value.strip()


@dataclass
class HttpRequest:
    """A parsed HTTP request."""

    method: HttpMethod = HttpMethod.UNINITIALIZED
    version: HttpVersion = HttpVersion.UNINITIALIZED
    resource: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def parse(cls, text: str) -> HttpRequest:
        """Parse request text: request line, headers, a blank line, then the body.

        Only an HTTP/1.1 request line is recognised. The body is the last
        non-empty line of the message body.
        """
        request = cls()
        in_body = False
        for line in _lines(text):
            if in_body:
                if line:
                    request.body = line
            elif "HTTP/1.1" in line:
                request.method, request.resource, request.version = _parse_request_line(line)
            elif not line:
                in_body = True
            elif ":" in line:
                key, value = _parse_header_line(line)
                request.headers[key] = value
            else:
                request.body = line
        return request
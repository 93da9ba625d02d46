"""Building and sending HTTP responses."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import Any

_STATUS_TEXTS = {
    "200": "OK",
    "400": "Bad Request",
    "404": "Not Found",
    "500": "Internal Server Error",
}


@dataclass
class HttpResponse:
    """An HTTP response ready to be rendered onto the wire."""

    version: str = "HTTP/1.1"
    status_code: str = "200"
    status_text: str = "OK"
    headers: dict[str, str] | None = None
    body: str | None = None

    @classmethod
    def create(
        cls,
        status_code: str = "200",
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> HttpResponse:
        """Build a response; headers default to a JSON content type."""
        if headers is None:
            headers = {"Content-Type": "application/json"}
        return cls(
            status_code=status_code,
            status_text=_STATUS_TEXTS.get(status_code, "Not Found"),
            headers=headers,
            body=body,
        )

    def to_text(self) -> str:
        """Render the status line, headers, Content-Length and body."""
        if self.body is None:
            raise ValueError("response has no body")
        header_text = "".join(f"{key}:{value}\r\n" for key, value in (self.headers or {}).items())
        length = len(self.body.encode("utf-8"))
        return (
            f"{self.version} {self.status_code} {self.status_text}\r\n"
            f"{header_text}Content-Length: {length}\r\n\r\n{self.body}"
        )

    def send(self, stream: Any) -> None:
        """Write the rendered response to a socket or binary stream.

        Errors raised while writing are ignored.
        """
        data = self.to_text().encode("utf-8")
        with contextlib.suppress(OSError):
            if hasattr(stream, "sendall"):
                stream.sendall(data)
            else:
                stream.write(data)
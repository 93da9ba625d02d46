"""A single-threaded HTTP server built on the request parser and router."""

from __future__ import annotations

import argparse
import socket
import sys

from netlab.http_request import HttpRequest
from netlab.http_response import HttpResponse
from netlab.router import route

BUFFER_SIZE = 1024
DEFAULT_ADDRESS = "localhost:3000"


def _split_address(text: str) -> tuple[str, int]:
    host, sep, port = text.rpartition(":")
    if not sep or not host:
        raise ValueError(f"expected host:port, got {text!r}")
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"invalid port in {text!r}") from None


class Server:
    """Accepts connections and answers one request on each."""

    def __init__(self, socket_addr: str) -> None:
        self.socket_addr = socket_addr
        self.address = _split_address(socket_addr)

    def handle(self, conn: socket.socket) -> HttpResponse | None:
        """Read one request from conn, route it and return the response sent."""
        data = conn.recv(BUFFER_SIZE)
        request = HttpRequest.parse(data.decode("utf-8"))
        return route(request, conn)

    def run(self) -> None:
        """Serve connections until interrupted."""
        with socket.create_server(self.address) as listener:
            print(f"Server listening on {self.socket_addr}", flush=True)
            while True:
                conn, peer = listener.accept()
                with conn:
                    print(f"Connection from {peer[0]}:{peer[1]}", flush=True)
                    try:
                        self.handle(conn)
                    except (ValueError, UnicodeDecodeError, OSError) as err:
                        print(f"Request failed: {err}", file=sys.stderr, flush=True)


def main(argv: list[str] | None = None) -> int:
    """Start the HTTP server."""
    parser = argparse.ArgumentParser(description="Static page and JSON API server")
    parser.add_argument("address", nargs="?", default=DEFAULT_ADDRESS, help="host:port")
    args = parser.parse_args(argv)
    try:
        server = Server(args.address)
    except ValueError as err:
        parser.error(str(err))
    try:
        server.run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
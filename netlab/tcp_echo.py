"""A TCP echo server and a client that talks to it."""

from __future__ import annotations

import argparse
import socket
from itertools import count

BUFFER_SIZE = 1024
DEFAULT_ADDRESS = ("127.0.0.1", 3000)


def _parse_address(text: str) -> tuple[str, int]:
    host, sep, port = text.rpartition(":")
    if not sep or not host:
        raise argparse.ArgumentTypeError(f"expected host:port, got {text!r}")
    try:
        return host, int(port)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port in {text!r}") from None


def handle_connection(conn: socket.socket) -> bytes:
    """Read one buffer from conn and echo it back as a full zero-padded buffer.

    Returns the bytes that were received.
    """
    data = conn.recv(BUFFER_SIZE)
    conn.sendall(data.ljust(BUFFER_SIZE, b"\0"))
    return data


def serve(address: tuple[str, int] = DEFAULT_ADDRESS, limit: int | None = None) -> None:
    """Echo every connection on address; stop after limit connections if given."""
    with socket.create_server(address) as listener:
        host, port = listener.getsockname()[:2]
        print(f"Listening on: {host}:{port}", flush=True)
        connections = count() if limit is None else range(limit)
        for _ in connections:
            conn, _peer = listener.accept()
            with conn:
                print("Connection established!", flush=True)
                handle_connection(conn)


def send_message(address: tuple[str, int], message: str) -> str:
    """Send message to an echo server and return its reply without padding."""
    with socket.create_connection(address) as conn:
        conn.sendall(message.encode("utf-8"))
        reply = b""
        while len(reply) < BUFFER_SIZE:
            chunk = conn.recv(BUFFER_SIZE - len(reply))
            if not chunk:
                break
            reply += chunk
    return reply.decode("utf-8").rstrip("\0")


def server_main(argv: list[str] | None = None) -> int:
    """Run the echo server from the command line."""
    parser = argparse.ArgumentParser(description="TCP echo server")
    parser.add_argument(
        "address", nargs="?", type=_parse_address, default=DEFAULT_ADDRESS, help="host:port"
    )
    args = parser.parse_args(argv)
    serve(args.address)
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Send one message to the echo server and print the reply."""
    parser = argparse.ArgumentParser(description="TCP echo client")
    parser.add_argument("message", nargs="?", default="Hello")
    parser.add_argument(
        "address", nargs="?", type=_parse_address, default=DEFAULT_ADDRESS, help="host:port"
    )
    args = parser.parse_args(argv)
    print(send_message(args.address, args.message))
    return 0
import io
import socket

import pytest

from netlab.http_response import HttpResponse


def test_response_struct_creation_200():
    response = HttpResponse.create("200", None, "text")
    expected = HttpResponse(
        version="HTTP/1.1",
        status_code="200",
        status_text="OK",
        headers={"Content-Type": "application/json"},
        body="text",
    )
    assert response == expected


@pytest.mark.parametrize(
    "code, text",
    [
        ("200", "OK"),
        ("400", "Bad Request"),
        ("404", "Not Found"),
        ("500", "Internal Server Error"),
        ("302", "Not Found"),
    ],
)
def test_status_texts(code, text):
    response = HttpResponse.create(code, None, "")
    assert response.status_code == code
    assert response.status_text == text


def test_custom_headers_are_kept():
    response = HttpResponse.create("200", {"Content-Type": "text/css"}, "body")
    assert response.headers == {"Content-Type": "text/css"}


def test_to_text_layout():
    response = HttpResponse.create("404", {"Content-Type": "text/html"}, "<h1>x</h1>")
    assert response.to_text() == (
        "HTTP/1.1 404 Not Found\r\n"
        "Content-Type:text/html\r\n"
        "Content-Length: 10\r\n"
        "\r\n"
        "<h1>x</h1>"
    )


def test_content_length_counts_bytes():
    response = HttpResponse.create("200", {}, "é")
    assert "Content-Length: 2\r\n" in response.to_text()


def test_to_text_without_body_raises():
    with pytest.raises(ValueError):
        HttpResponse.create("200", None, None).to_text()


def test_send_to_binary_stream():
    response = HttpResponse.create("200", None, "text")
    buffer = io.BytesIO()
    response.send(buffer)
    assert buffer.getvalue() == response.to_text().encode("utf-8")


def test_send_to_socket():
    response = HttpResponse.create("500", None, "oops")
    left, right = socket.socketpair()
    with left, right:
        response.send(left)
        left.shutdown(socket.SHUT_WR)
        received = b""
        while chunk := right.recv(4096):
            received += chunk
    assert received.decode("utf-8") == response.to_text()
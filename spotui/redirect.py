"""A one-shot local web server that captures the authorisation redirect."""

from __future__ import annotations

import socket
from typing import Callable

_BUFFER_SIZE = 1000

_SUCCESS_PAGE = """<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"><title>Authenticated</title></head>
  <body>
    <h1>Authentication complete</h1>
    <p>You can close this window and return to the terminal.</p>
  </body>
</html>
"""


class MalformedRequest(Exception):
    """Raised when the redirect request cannot be understood."""


def parse_redirect_request(data: bytes) -> str:
    """Return the request target of an HTTP request line."""
    try:
        request = data[:_BUFFER_SIZE].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedRequest(f"Invalid UTF-8 sequence: {exc}") from None
    parts = request.split()
    if len(parts) > 1:
        return parts[1]
    raise MalformedRequest("Malformed request")


def success_response() -> bytes:
    return f"HTTP/1.1 200 OK\r\n\r\n{_SUCCESS_PAGE}".encode("utf-8")


def error_response(message: str) -> bytes:
    return (
        f"HTTP/1.1 400 Bad Request\r\n\r\n400 - Bad Request - {message}".encode("utf-8")
    )


def _handle_connection(conn: socket.socket) -> str | None:
    with conn:
        data = conn.recv(_BUFFER_SIZE)
        try:
            url = parse_redirect_request(data)
        except MalformedRequest as exc:
            print(f"Error: {exc}")
            conn.sendall(error_response(str(exc)))
            return None
        conn.sendall(success_response())
        return url


def redirect_uri_web_server(
    port: int, on_listening: Callable[[int], object] | None = None
) -> str:
    """Listen on 127.0.0.1 until a request arrives and return its URL path.

    ``on_listening`` is called with the bound port once the server accepts
    connections, which is the moment to send the user to the login page.
    Raises OSError if the port cannot be bound.
    """
    with socket.create_server(("127.0.0.1", port)) as listener:
        if on_listening is not None:
            on_listening(listener.getsockname()[1])
        while True:
            try:
                conn, _ = listener.accept()
            except OSError as exc:
                print(f"Error: {exc}")
                continue
            try:
                url = _handle_connection(conn)
            except OSError as exc:
                print(f"Error: {exc}")
                continue
            if url is not None:
                return url
"""A minimal echo and counter HTTP server."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Iterable, Mapping, Sequence
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import unquote, urlsplit

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def _quote(s: str) -> str:
    """Quote a string with double quotes and backslash escapes."""
    parts = ['"']
    for ch in s:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    parts.append('"')
    return "".join(parts)


def _quote_list(values: Iterable[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def _values(value: str | Iterable[str]) -> list[str]:
    return [value] if isinstance(value, str) else list(value)


def echo_path(path: str) -> str:
    """Return the response line that echoes a request path."""
    return f"URL.Path = {_quote(path)}\n"


def describe_request(
    method: str,
    url: str,
    proto: str,
    headers: Mapping[str, str | Iterable[str]],
    host: str,
    remote_addr: str,
    form: Mapping[str, str | Iterable[str]],
) -> str:
    """Describe a request: request line, headers, host, peer and form fields."""
    lines = [f"{method} {url} {proto}\n"]
    lines.extend(
        f"Header[{_quote(name)}] = {_quote_list(_values(value))}\n"
        for name, value in headers.items()
    )
    lines.append(f"Host = {_quote(host)}\n")
    lines.append(f"RemoteAddr = {_quote(remote_addr)}\n")
    lines.extend(
        f"Form[{_quote(name)}] = {_quote_list(_values(value))}\n"
        for name, value in form.items()
    )
    return "".join(lines)


class _CountingServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int]) -> None:
        super().__init__(address, _Handler)
        self.count = 0
        self.lock = threading.Lock()


class _Handler(BaseHTTPRequestHandler):
    server: _CountingServer

    def _respond(self) -> None:
        path = unquote(urlsplit(self.path).path)
        if path == "/count":
            with self.server.lock:
                body = f"Count {self.server.count}\n"
        else:
            with self.server.lock:
                self.server.count += 1
            body = echo_path(path)
        data = body.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _respond

    def log_message(self, format: str, *args: object) -> None:
        pass


def make_server(host: str = "localhost", port: int = 8000) -> ThreadingHTTPServer:
    """Create a server that echoes paths and reports its call count at /count."""
    return _CountingServer((host, port))


def main(argv: Sequence[str] | None = None) -> int:
    """Serve until interrupted."""
    parser = argparse.ArgumentParser(prog="server")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    with make_server(args.host, args.port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
import re
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from codedrills.fetch import fetch, fetch_all, main

BODY = b"hello from the test server\n"
MISSING_BODY = b"not here"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/missing":
            status, body = 404, MISSING_BODY
        else:
            status, body = 200, BODY
        self.send_response(status)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_url():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/"


def test_fetch_returns_body(base_url):
    assert fetch(base_url + "/page") == BODY


def test_fetch_returns_body_of_error_status(base_url):
    assert fetch(base_url + "/missing") == MISSING_BODY


def test_fetch_rejects_malformed_url():
    with pytest.raises(ValueError):
        fetch("notaurl")


def test_fetch_unreachable_raises_oserror(closed_url):
    with pytest.raises(OSError):
        fetch(closed_url)


def test_fetch_all_reports_every_url(base_url):
    urls = [base_url + "/one", base_url + "/two"]
    lines = list(fetch_all(urls))
    assert len(lines) == 2
    fields = [line.split() for line in lines]
    assert {f[2] for f in fields} == set(urls)
    assert all(int(f[1]) == len(BODY) for f in fields)
    assert all(re.fullmatch(r"\d+\.\d\ds", f[0]) for f in fields)


def test_fetch_all_reports_errors_as_text(base_url, closed_url):
    lines = list(fetch_all([closed_url, base_url + "/ok"]))
    assert len(lines) == 2
    successes = [line for line in lines if line.endswith("  " + base_url + "/ok")]
    failures = [line for line in lines if not re.match(r"\d+\.\d\ds  ", line)]
    assert len(successes) == 1
    assert len(failures) == 1


def test_fetch_all_empty():
    assert list(fetch_all([])) == []


def test_main_writes_body(base_url, capsysbinary):
    assert main([base_url + "/page"]) == 0
    assert capsysbinary.readouterr().out == BODY


def test_main_reports_error(capsys):
    assert main(["notaurl"]) == 1
    assert capsys.readouterr().err.startswith("fetch: ")


def test_main_all_prints_elapsed(base_url, capsys):
    assert main(["--all", base_url + "/page"]) == 0
    out_lines = capsys.readouterr().out.splitlines()
    assert len(out_lines) == 2
    assert out_lines[0].endswith(base_url + "/page")
    assert out_lines[1].endswith("s elapsed")
"""Fetch URLs and print their bodies, or time many fetches at once."""

from __future__ import annotations

import argparse
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any

_CHUNK = 64 * 1024


def _open(url: str) -> Any:
    """Open url; an HTTP error status still yields a readable response."""
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        return err


def fetch(url: str) -> bytes:
    """Return the body of the resource at url, whatever its status code.

    Raises ValueError for a malformed URL and OSError for network failures.
    """
    with _open(url) as resp:
        return resp.read()


def _summarize(url: str) -> str:
    start = time.monotonic()
    try:
        resp = _open(url)
    except (OSError, ValueError) as err:
        return str(err)
    try:
        with resp:
            nbytes = sum(len(chunk) for chunk in iter(lambda: resp.read(_CHUNK), b""))
    except OSError as err:
        return f"while reading {url}: {err}"
    secs = time.monotonic() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch all URLs concurrently, yielding one summary line per URL.

    Lines arrive in completion order. A successful fetch gives
    "<seconds>s  <bytes>  <url>"; a failure gives the error text.
    """
    targets = list(urls)
    if not targets:
        return
    with ThreadPoolExecutor(max_workers=len(targets)) as pool:
        futures = [pool.submit(_summarize, url) for url in targets]
        for future in as_completed(futures):
            yield future.result()


def main(argv: Sequence[str] | None = None) -> int:
    """Print each URL's body, or with --all print timing lines for each."""
    parser = argparse.ArgumentParser(prog="fetch")
    parser.add_argument(
        "--all",
        action="store_true",
        help="fetch concurrently and report time and size instead of bodies",
    )
    parser.add_argument("urls", nargs="*")
    args = parser.parse_args(argv)

    if args.all:
        start = time.monotonic()
        for line in fetch_all(args.urls):
            print(line)
        print(f"{time.monotonic() - start:.2f}s elapsed")
        return 0

    for url in args.urls:
        try:
            body = fetch(url)
        except (OSError, ValueError) as err:
            print(f"fetch: {err}", file=sys.stderr)
            return 1
        sys.stdout.flush()
        sys.stdout.buffer.write(body)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
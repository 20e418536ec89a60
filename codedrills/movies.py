"""Movie records and their JSON encoding."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Movie:
    """A film, its release year, whether it is in colour and its cast."""

    title: str
    year: int
    color: bool = False
    actors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form; "color" is left out when false."""
        data: dict[str, Any] = {"Title": self.title, "released": self.year}
        if self.color:
            data["color"] = True
        data["Actors"] = list(self.actors)
        return data


def _escape_html(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)


def marshal(movies: Iterable[Movie], indent: str | None = None) -> str:
    """Encode movies as a JSON array.

    Without indent the output is compact; with it, each nesting level is
    prefixed by the indent string. The characters <, > and & are escaped.
    """
    payload = [movie.to_dict() for movie in movies]
    if indent is None:
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    else:
        text = json.dumps(
            payload, indent=indent, separators=(",", ": "), ensure_ascii=False
        )
    return _escape_html(text)


def _title_of(obj: Any) -> str:
    if obj is None:
        return ""
    if not isinstance(obj, dict):
        raise ValueError(f"cannot decode {type(obj).__name__} into a movie")
    title: Any = ""
    for key, value in obj.items():
        if key.lower() == "title":
            title = value
    if title is None:
        return ""
    if not isinstance(title, str):
        raise ValueError(f"cannot decode {type(title).__name__} into Title")
    return title


def titles(data: str | bytes) -> list[str]:
    """Decode a JSON array of objects and return their titles.

    Keys are matched to "Title" without regard to case. Raises ValueError
    if the JSON is malformed or does not have that shape.
    """
    decoded = json.loads(data)
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise ValueError(f"cannot decode {type(decoded).__name__} into a list")
    return [_title_of(item) for item in decoded]
# codedrills

A collection of small, self-contained programs and helpers. Each module
covers one idea: reading and counting lines, converting temperatures,
formatting numbers, walking graphs, sorting, building small data types,
serving HTTP and drawing animated figures.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
|---|---|
| `drill-echo ARGS...` | Prints its arguments joined by single spaces. |
| `drill-dup [FILES...]` | Prints every line that occurs more than once, with its count. Reads standard input when no files are given. With `-u`/`--unique`, prints each distinct line of standard input once instead. |
| `drill-tempconv [--temp 100C]` | Prints the boiling and freezing points in both scales, then the given temperature (a number with a `C` or `F` unit, default 20C) in Celsius. |
| `drill-fetch URLS...` | Downloads each URL and writes the body to standard output. With `--all`, fetches all URLs at once and prints the time, size and URL of each, then the total elapsed time. |
| `drill-server [--host H] [--port P]` | Serves HTTP on `localhost:8000` by default, echoing the request path; `/count` reports how many requests have been served. |
| `drill-lissajous [--seed N] > out.gif` | Writes an animated GIF of a random Lissajous figure. |
| `drill-charcount < file` | Counts Unicode characters, UTF-8 encoding lengths and invalid bytes. |
| `drill-toposort` | Prints a course list in an order where every prerequisite comes first. |
| `drill-flags [-boolFlag] [-stringFlag S] [-intFlag N] [-help]` | Shows how the flags were parsed. |

## Library use

The modules can be imported as well:

```python
from codedrills.textutil import basename, comma
from codedrills.tempconv import c_to_f, f_to_c, parse_temperature
from codedrills.toposort import topo_sort
from codedrills.intset import IntSet
from codedrills.geometry import Point, Path

basename("a/b.c.go")          # "b.c"
comma("123456")               # "123,456"
f_to_c(212.0)                 # 100.0
parse_temperature("212F")     # 100.0

s = IntSet()
s.add(1)
s.add(144)
s.add(9)
str(s)                        # "{1 9 144}"
s.has(9)                      # True

Point(1, 2).distance(Point(4, 6))   # 5.0
```

Other modules:

- `codedrills.echo` – `join_args`
- `codedrills.dup` – `count_lines`, `duplicates`, `dedup`
- `codedrills.fetch` – `fetch`, `fetch_all`
- `codedrills.server` – `echo_path`, `describe_request`, `make_server`
- `codedrills.lissajous` – `render_frames`, `lissajous`
- `codedrills.movies` – `Movie`, `marshal`, `titles`
- `codedrills.maps` – `equal`, `key_of`, `ListCounter`, `Graph`
- `codedrills.charcount` – `CharStats`, `count_chars`, `format_report`
- `codedrills.sequences` – `reverse`, `tree_sort`, `sha256_hex`, `sort_strings`
- `codedrills.geometry` – `Point`, `ColoredPoint`, `Path`, `IntList`, `distance`, `list_sum`
- `codedrills.bytecounter` – `ByteCounter`
- `codedrills.flags` – `parse_flags`, `FlagValues`

## What is not included

The package has no command for searching an issue tracker, no TCP clock
server or client, no Fibonacci calculator with a spinner, and no examples
of closures, variadic functions or weekday and flag enumerations.
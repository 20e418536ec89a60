"""Small programming drills: text and line tools, temperatures, maps, sorting,
small data types, an HTTP echo server and Lissajous animations."""

__version__ = "0.1.0"
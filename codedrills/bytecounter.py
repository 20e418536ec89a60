"""A writer that counts the bytes written to it and discards them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ByteCounter:
    """Count bytes written; text is counted in its UTF-8 encoding."""

    count: int = 0

    def write(self, data: bytes | bytearray | memoryview | str) -> int:
        """Add the size of data to the count and return that size."""
        if isinstance(data, str):
            n = len(data.encode("utf-8"))
        else:
            n = memoryview(data).nbytes
        self.count += n
        return n

    def __int__(self) -> int:
        return self.count
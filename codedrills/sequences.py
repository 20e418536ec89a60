"""Sequence utilities: in-place reversal and sorting, and SHA-256 digests."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass
from typing import Any


def reverse(items: MutableSequence[Any]) -> None:
    """Reverse the sequence in place."""
    items[:] = items[::-1]


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


def _insert(root: _Node | None, value: int) -> _Node:
    node = _Node(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def _in_order(root: _Node | None) -> Iterator[int]:
    stack: list[_Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node.value
        current = node.right


def tree_sort(values: MutableSequence[int]) -> None:
    """Sort the values in place by way of a binary search tree."""
    root: _Node | None = None
    for value in values:
        root = _insert(root, value)
    values[:] = list(_in_order(root))


def sha256_hex(data: bytes | str) -> str:
    """Return the SHA-256 digest of data as lowercase hex; text is UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def sort_strings(items: MutableSequence[str]) -> None:
    """Sort strings in place in ascending order."""
    items[:] = sorted(items)
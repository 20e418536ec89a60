"""Order courses so that every prerequisite comes before what needs it."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

PREREQS: dict[str, list[str]] = {
    "algorithms": ["data structures"],
    "calculus": ["linear algebra"],
    "compilers": [
        "data structures",
        "formal languages",
        "computer organization",
    ],
    "data structures": ["discrete math"],
    "databases": ["data structures"],
    "discrete math": ["intro to programming"],
    "formal languages": ["discrete math"],
    "networks": ["operating systems"],
    "operating systems": ["data structures", "computer organization"],
    "programming languages": ["data structures", "computer organization"],
}

_ROOT = object()


def topo_sort(graph: Mapping[str, Iterable[str]]) -> list[str]:
    """Return every vertex after all of its prerequisites.

    Keys are visited in sorted order and prerequisites depth first, in the
    order given. A cycle does not loop; its members appear once each.
    """
    order: list[str] = []
    seen: set[str] = set()
    stack: list[tuple[object, Iterable[str]]] = [(_ROOT, iter(sorted(graph)))]
    while stack:
        parent, pending = stack[-1]
        for item in pending:
            if item not in seen:
                seen.add(item)
                stack.append((item, iter(graph.get(item, ()))))
                break
        else:
            stack.pop()
            if isinstance(parent, str):
                order.append(parent)
    return order


def main(argv: Sequence[str] | None = None) -> int:
    """Print the courses in an order that respects their prerequisites."""
    for i, course in enumerate(topo_sort(PREREQS), start=1):
        print(f"{i}:\t{course}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Sums of powers of three and five, and balancing values across components."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from contestkit.tokens import read_tokens


def find_exponents(n: int) -> tuple[int, int] | None:
    """Return positive ``(a, b)`` with ``3**a + 5**b == n``, or ``None``."""
    a = 1
    while 3**a <= n:
        first = 3**a
        b = 1
        while first + 5**b <= n:
            if first + 5**b == n:
                return a, b
            b += 1
        a += 1
    return None


def can_equalize(
    n: int,
    a: Sequence[int],
    b: Sequence[int],
    edges: Iterable[tuple[int, int]],
) -> bool:
    """Tell whether values ``a`` can be moved along edges (1-based) to become
    ``b``, i.e. whether both sum alike over every connected component."""
    if len(a) != n or len(b) != n:
        raise ValueError(f"both value lists must have {n} entries")
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} is outside 1..{n}")
        neighbours[u - 1].append(v - 1)
        neighbours[v - 1].append(u - 1)

    labels: list[int | None] = [None] * n
    for root in range(n):
        stack = [root]
        while stack:
            vertex = stack.pop()
            if labels[vertex] is not None:
                continue
            labels[vertex] = root
            stack.extend(neighbours[vertex])

    a_sums = [0] * n
    b_sums = [0] * n
    for label, a_value, b_value in zip(labels, a, b):
        a_sums[label] += a_value
        b_sums[label] += b_value
    return a_sums == b_sums


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="arc106")
    parser.add_argument("task", nargs="?", choices=("a", "b"), default="a")
    args = parser.parse_args(argv)
    tokens = read_tokens(sys.stdin)
    if args.task == "a":
        found = find_exponents(int(next(tokens)))
        print(-1 if found is None else f"{found[0]} {found[1]}")
        return
    n = int(next(tokens))
    m = int(next(tokens))
    a = [int(next(tokens)) for _ in range(n)]
    b = [int(next(tokens)) for _ in range(n)]
    edges = [(int(next(tokens)), int(next(tokens))) for _ in range(m)]
    print("Yes" if can_equalize(n, a, b, edges) else "No")
"""Upper-casing, card penalties, product decompositions and graph balance."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from math import isqrt

from contestkit.tokens import read_tokens


def shout(s: str) -> str:
    """Return ``s`` converted to upper case."""
    return s.upper()


def card_queries(n: int, queries: Iterable[tuple[int, int]]) -> list[bool]:
    """Process penalty queries on players ``1..n``.

    ``(1, x)`` gives player ``x`` a yellow card, ``(2, x)`` a red card (worth two
    yellows), and ``(3, x)`` asks whether ``x`` has been sent off. The answers to
    the ``3`` queries are returned in order.
    """
    yellow = [0] * n
    answers = []
    for kind, player in queries:
        if kind not in (1, 2, 3):
            continue
        if not 1 <= player <= n:
            raise ValueError(f"player {player} is outside 1..{n}")
        if kind == 1:
            yellow[player - 1] += 1
        elif kind == 2:
            yellow[player - 1] += 2
        else:
            answers.append(yellow[player - 1] >= 2)
    return answers


def count_multi_pattern(n: int) -> int:
    """Count the ordered pairs of positive integers whose product is ``n``."""
    patterns = 0
    for low in range(1, isqrt(n) + 1):
        if n % low == 0:
            patterns += 1 if low * low == n else 2
    return patterns


def count_abcd(n: int) -> int:
    """Count the positive quadruples ``(A, B, C, D)`` with ``AB + CD = n``."""
    total = 0
    for ab in range(1, (n + 1) // 2 + 1):
        pattern = count_multi_pattern(ab) * count_multi_pattern(n - ab)
        total += pattern * (2 if ab < n // 2 else 1)
    return total


def is_component_balanced(n: int, edges: Sequence[tuple[int, int]]) -> bool:
    """Tell whether every connected component of the graph on ``1..n`` has as
    many edges as vertices."""
    if n != len(edges):
        return False

    connections: dict[int, set[int]] = {}
    for v1, v2 in edges:
        for vertex in (v1, v2):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} is outside 1..{n}")
        connections.setdefault(v1, set()).add(v2)
        connections.setdefault(v2, set()).add(v1)

    labels: dict[int, int] = {}
    for root in range(1, n + 1):
        stack = [root]
        while stack:
            vertex = stack.pop()
            if vertex in labels:
                continue
            labels[vertex] = root
            stack.extend(connections.get(vertex, ()))

    vertex_counts: dict[int, int] = {}
    for label in labels.values():
        vertex_counts[label] = vertex_counts.get(label, 0) + 1
    edge_counts: dict[int, int] = {}
    for v1, v2 in edges:
        label = labels[min(v1, v2)]
        edge_counts[label] = edge_counts.get(label, 0) + 1

    return all(
        vertex_counts.get(label, 0) == edge_counts.get(label, 0)
        for label in vertex_counts.keys() | edge_counts.keys()
    )


def _pairs(tokens, count: int) -> list[tuple[int, int]]:
    return [(int(next(tokens)), int(next(tokens))) for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="abc292")
    parser.add_argument("task", nargs="?", choices=("a", "b", "c", "d"), default="a")
    args = parser.parse_args(argv)
    tokens = read_tokens(sys.stdin)
    if args.task == "a":
        print(shout(next(tokens)))
    elif args.task == "b":
        n = int(next(tokens))
        q = int(next(tokens))
        for answer in card_queries(n, _pairs(tokens, q)):
            print("Yes" if answer else "No")
    elif args.task == "c":
        print(count_abcd(int(next(tokens))))
    else:
        n = int(next(tokens))
        m = int(next(tokens))
        print("Yes" if is_component_balanced(n, _pairs(tokens, m)) else "No")
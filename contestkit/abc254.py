"""Sums of vertices reachable within a bounded number of steps."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from contestkit.tokens import read_tokens


def reachable_sums(
    n: int,
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """For each query ``(x, k)`` return the sum of the vertex numbers within
    ``k`` steps of ``x`` in the undirected graph on vertices ``1..n``."""
    adjacency: dict[int, set[int]] = {v: set() for v in range(1, n + 1)}
    for a, b in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) leaves vertices 1..{n}")
        adjacency[a].add(b)
        adjacency[b].add(a)

    results = []
    for start, steps in queries:
        seen = {start}
        frontier = {start}
        for _ in range(steps):
            following: set[int] = set()
            for vertex in frontier:
                neighbours = adjacency.get(vertex)
                if neighbours is None:
                    raise ValueError(f"vertex {vertex} is outside 1..{n}")
                following |= neighbours
            frontier = following - seen
            seen |= frontier
        results.append(sum(seen))
    return results


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(prog="abc254").parse_args(argv)
    tokens = read_tokens(sys.stdin)
    n = int(next(tokens))
    m = int(next(tokens))
    edges = [(int(next(tokens)), int(next(tokens))) for _ in range(m)]
    q = int(next(tokens))
    queries = [(int(next(tokens)), int(next(tokens))) for _ in range(q)]
    for result in reachable_sums(n, edges, queries):
        print(result)
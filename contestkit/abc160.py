"""Shortest walk visiting every house on a circular lake."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from contestkit.tokens import read_tokens


def shortest_tour(k: int, a: Sequence[int]) -> int:
    """Return the shortest distance covering all houses at sorted positions ``a``
    on a lake of perimeter ``k``: the perimeter minus the widest gap."""
    if not a:
        raise ValueError("at least one house is required")
    widest = k - a[-1] + a[0]
    widest = max([widest, *(right - left for left, right in zip(a, a[1:]))])
    return k - widest


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(prog="abc160").parse_args(argv)
    tokens = read_tokens(sys.stdin)
    k = int(next(tokens))
    n = int(next(tokens))
    a = [int(next(tokens)) for _ in range(n)]
    print(shortest_tour(k, a))
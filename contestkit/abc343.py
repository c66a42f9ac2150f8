"""Adjacency lists from an adjacency matrix."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from contestkit.tokens import read_tokens


def adjacency_lists(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """For each row return the 1-based columns whose entry is 1."""
    return [[j for j, value in enumerate(row, start=1) if value == 1] for row in matrix]


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(prog="abc343").parse_args(argv)
    tokens = read_tokens(sys.stdin)
    n = int(next(tokens))
    matrix = [[int(next(tokens)) for _ in range(n)] for _ in range(n)]
    print("\n".join(" ".join(map(str, row)) for row in adjacency_lists(matrix)))
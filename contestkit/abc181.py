"""Board colouring and collinear points."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import combinations

from contestkit.tokens import read_tokens

_COLORS = ("White", "Black")


def square_color(n: int) -> str:
    """Return ``"White"`` for an even ``n`` and ``"Black"`` for an odd one."""
    parity = n % 2
    color = _COLORS[parity]
    return color


def has_collinear_triple(points: Iterable[tuple[int, int]]) -> bool:
    """Tell whether any three of ``points`` lie on a single straight line."""
    for (x0, y0), (x1, y1), (x2, y2) in combinations(list(points), 3):
        if (y1 - y0) * (x2 - x0) == (y2 - y0) * (x1 - x0):
            return True
    return False


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="abc181")
    parser.add_argument("task", nargs="?", choices=("a", "c"), default="a")
    args = parser.parse_args(argv)
    tokens = read_tokens(sys.stdin)
    if args.task == "a":
        print(square_color(int(next(tokens))))
        return
    n = int(next(tokens))
    points = [(int(next(tokens)), int(next(tokens))) for _ in range(n)]
    print("Yes" if has_collinear_triple(points) else "No")
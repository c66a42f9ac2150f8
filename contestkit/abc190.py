"""Card game, spells, dish selection and arithmetic progressions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import product

from contestkit.tokens import read_tokens


def winner(a: int, b: int, c: int) -> str:
    """Return who wins the candy game: ``"Aoki"`` or ``"Takahashi"``."""
    aoki_wins = a < b or (a == b and c == 0)
    if aoki_wins:
        return "Aoki"
    return "Takahashi"


def can_hit(s: int, d: int, spells: Iterable[tuple[int, int]]) -> bool:
    """Tell whether some spell is faster than ``s`` and stronger than ``d``."""
    return any(x < s and y > d for x, y in spells)


def max_satisfied(
    n: int,
    conditions: Sequence[tuple[int, int]],
    humans: Sequence[tuple[int, int]],
) -> int:
    """Return the largest number of conditions that hold over all choices,
    each human putting a ball on one of their two dishes (numbered from 1)."""
    for dish in (d for pair in (*conditions, *humans) for d in pair):
        if not 1 <= dish <= n:
            raise ValueError(f"dish {dish} is outside 1..{n}")
    best = 0
    for choice in product(*humans):
        dishes = set(choice)
        satisfied = sum(1 for a, b in conditions if a in dishes and b in dishes)
        best = max(best, satisfied)
    return best


def count_progressions(n: int) -> int:
    """Count the arithmetic progressions of common difference 1 summing to ``n``."""
    two_n = 2 * n
    count = 0
    i = 1
    while i < two_n and i * i <= two_n:
        if i * i <= n and n % i == 0:
            other = n // i
            if i % 2 == 1:
                count += 1
            if i != other and other % 2 == 1:
                count += 1
        if two_n % i == 0:
            other = two_n // i
            if n % i != 0 and i % 2 == 0:
                count += 1
            if i != other and n % other != 0 and other % 2 == 0:
                count += 1
        i += 1
    return count


def _pairs(tokens, count: int) -> list[tuple[int, int]]:
    return [(int(next(tokens)), int(next(tokens))) for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="abc190")
    parser.add_argument("task", nargs="?", choices=("a", "b", "c", "d"), default="a")
    args = parser.parse_args(argv)
    tokens = read_tokens(sys.stdin)
    if args.task == "a":
        a, b, c = (int(next(tokens)) for _ in range(3))
        print(winner(a, b, c))
    elif args.task == "b":
        n, s, d = (int(next(tokens)) for _ in range(3))
        print("Yes" if can_hit(s, d, _pairs(tokens, n)) else "No")
    elif args.task == "c":
        n = int(next(tokens))
        m = int(next(tokens))
        conditions = _pairs(tokens, m)
        k = int(next(tokens))
        humans = _pairs(tokens, k)
        print(max_satisfied(n, conditions, humans))
    else:
        print(count_progressions(int(next(tokens))))
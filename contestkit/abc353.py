"""Pairwise sums modulo 10**8 and sums of concatenated pairs."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from collections.abc import Mapping, Sequence

from contestkit.tokens import read_tokens

_PAIR_MOD = 10**8
MOD = 998244353
_MAX_EXP = 9


def sum_mod_pairs(a: Sequence[int]) -> int:
    """Return the sum of ``(a_i + a_j) mod 10**8`` over all pairs ``i < j``,
    assuming every element is below ``10**8``."""
    if not a:
        raise ValueError("the sequence must not be empty")
    values = sorted(a)
    n = len(values)
    over = sum(
        n - bisect_left(values, _PAIR_MOD - value, lo=i + 1)
        for i, value in enumerate(values[:-1])
    )
    return sum(values) * (n - 1) - _PAIR_MOD * over


def _exponent(value: int) -> int:
    if value <= 0:
        raise ValueError(f"value {value} must be positive")
    exp = len(str(value)) - 1
    if exp > _MAX_EXP:
        raise ValueError(f"value {value} has more than {_MAX_EXP + 1} digits")
    return exp


def exp_count_maps(a: Sequence[int]) -> list[dict[int, int]]:
    """Return one map per position: entry ``i`` maps each exponent ``e`` in
    ``0..9`` to how many of ``a[i + 1:]`` lie in ``[10**e, 10**(e + 1))``."""
    counts = dict.fromkeys(range(_MAX_EXP + 1), 0)
    maps = [dict(counts)]
    for value in reversed(a[1:]):
        counts[_exponent(value)] += 1
        maps.append(dict(counts))
    maps.reverse()
    return maps


def effect_as_x(a_i: int, exp_counts: Mapping[int, int]) -> int:
    """Return, modulo 998244353, what ``a_i`` contributes as the leading part
    of concatenations with the later elements counted in ``exp_counts``."""
    effect = 0
    for exp in range(_MAX_EXP + 1):
        term = (a_i % MOD) * (10 ** (exp + 1) % MOD) % MOD * (exp_counts[exp] % MOD)
        effect = (effect + term) % MOD
    return effect


def effect_as_y(i: int, a_i: int) -> int:
    """Return, modulo 998244353, what ``a_i`` at index ``i`` contributes as the
    trailing part of concatenations with the ``i`` earlier elements."""
    return (a_i % MOD) * (i % MOD) % MOD


def solve_concat_sum(a: Sequence[int]) -> int:
    """Return the sum of ``int(str(a_i) + str(a_j))`` over ``i < j`` modulo
    998244353."""
    total = 0
    for i, (value, counts) in enumerate(zip(a, exp_count_maps(a))):
        total = (total + effect_as_x(value, counts) + effect_as_y(i, value)) % MOD
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="abc353")
    parser.add_argument("task", nargs="?", choices=("c", "d"), default="c")
    args = parser.parse_args(argv)
    tokens = read_tokens(sys.stdin)
    n = int(next(tokens))
    a = [int(next(tokens)) for _ in range(n)]
    if args.task == "c":
        print(sum_mod_pairs(a))
    else:
        print(solve_concat_sum(a))
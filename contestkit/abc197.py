"""Minimum XOR of the ORs of contiguous segments."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from contestkit.tokens import read_tokens

_UPPER_BOUND = 2**30


def min_xor_of_ors(a: Sequence[int]) -> int:
    """Split ``a`` into contiguous segments in every possible way and return
    the smallest XOR of the segments' ORs."""
    if not a:
        raise ValueError("the sequence must not be empty")
    first, *rest = a
    best = _UPPER_BOUND
    for mask in range(1 << len(rest)):
        total = 0
        current = first
        for bit, value in enumerate(rest):
            if mask >> bit & 1:
                total ^= current
                current = value
            else:
                current |= value
        best = min(best, total ^ current)
    return best


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(prog="abc197").parse_args(argv)
    tokens = read_tokens(sys.stdin)
    n = int(next(tokens))
    a = [int(next(tokens)) for _ in range(n)]
    print(min_xor_of_ors(a))
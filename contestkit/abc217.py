"""Lexicographic comparison of two strings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from contestkit.tokens import read_tokens


def is_lexicographically_smaller(s: str, t: str) -> bool:
    """Tell whether ``s`` comes strictly before ``t`` in lexicographic order."""
    return s < t


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(prog="abc217").parse_args(argv)
    tokens = read_tokens(sys.stdin)
    s = next(tokens)
    t = next(tokens)
    print("Yes" if is_lexicographically_smaller(s, t) else "No")
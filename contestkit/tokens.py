"""Whitespace-separated token reading for contest-style input."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO


def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield every whitespace-separated token of ``stream``, line by line."""
    for line in stream:
        yield from line.split()
"""Solutions to ten grid, string and graph problems of one practical exam."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections import Counter
from collections.abc import Iterable, Sequence

from contestkit.tokens import read_tokens

_UNREACHABLE = 2**64 - 1
_KIND = {"A": 0, "B": 1}
_TRANSFER_INDEX = {
    frozenset((0, 1)): 0,
    frozenset((0, 2)): 1,
    frozenset((1, 2)): 2,
}


def middle(a: int, b: int, c: int) -> str:
    """Return the label (``"A"``, ``"B"`` or ``"C"``) of the strictly middle value."""
    if a > b and a < c or a < b and a > c:
        return "A"
    if b > a and b < c or b < a and b > c:
        return "B"
    return "C"


def percentage(x: float, y: float) -> float:
    """Return ``x / y`` rounded down to two decimal places."""
    if y == 0:
        raise ZeroDivisionError("the divisor must not be zero")
    return math.floor(x / y * 100.0) / 100.0


def neighbour_counts(grid: Sequence[str]) -> list[list[int]]:
    """For each cell count the ``#`` cells in its 3x3 neighbourhood, itself included."""
    rows = len(grid)
    result = []
    for y, row in enumerate(grid):
        counts = []
        for x in range(len(row)):
            counts.append(
                sum(
                    1
                    for py in range(max(y - 1, 0), min(y + 2, rows))
                    for px in range(max(x - 1, 0), min(x + 2, len(grid[py])))
                    if grid[py][px] == "#"
                )
            )
        result.append(counts)
    return result


def ninja_moves(s: str) -> tuple[int, int]:
    """Return how far the ninjas in ``s`` (``#`` marks one) can move left and right."""
    before_first = True
    left = current = largest = 0
    for cell in s:
        if cell == "#":
            largest = max(largest, current)
            current = 0
            before_first = False
        else:
            current += 1
            if before_first:
                left += 1
    right = current
    if left + right < largest:
        right = largest - left
    return left, right


def swap_non_palindrome(s: str) -> str | None:
    """Swap the first pair of differing characters that are not mirror images
    of each other; return ``None`` when no such pair exists."""
    n = len(s)
    if n == 0:
        raise ValueError("the string must not be empty")
    chars = list(s)
    for i in range(n - 1):
        for j in range(i + 1, n):
            if chars[i] != chars[j] and i != n - j - 1:
                chars[i], chars[j] = chars[j], chars[i]
                return "".join(chars)
    return None


def kth_frequent(words: Iterable[str], k: int) -> str | None:
    """Return the word with the ``k``-th highest frequency, or ``None`` when
    its frequency is shared with a neighbour in the ranking."""
    ranking = Counter(words).most_common()
    if not 1 <= k <= len(ranking):
        raise ValueError(f"rank {k} is outside 1..{len(ranking)}")
    word, count = ranking[k - 1]
    if (k >= 2 and ranking[k - 2][1] == count) or (
        k < len(ranking) and ranking[k][1] == count
    ):
        return None
    return word


def count_removable_walls(grid: Sequence[str]) -> int:
    """Count the walls whose removal leaves every empty cell connected."""
    cells = {(y, x) for y, row in enumerate(grid) for x in range(len(row))}
    walls = {(y, x) for y, row in enumerate(grid) for x, c in enumerate(row) if c == "#"}
    count = 0
    for wall in walls:
        remaining = walls - {wall}
        empty = cells - remaining
        stack = [min(empty)]
        reached: set[tuple[int, int]] = set()
        while stack:
            point = stack.pop()
            if point in remaining or point in reached or point not in cells:
                continue
            reached.add(point)
            y, x = point
            stack.extend(((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)))
        if reached == empty:
            count += 1
    return count


def largest_square(grid: Sequence[str], k: int) -> int:
    """Return the side of the largest square of digits that can be made uniform
    by changing at most ``k`` of its cells."""
    digits = [[int(c) for c in row] for row in grid]
    n = len(digits)
    m = len(digits[0]) if digits else 0

    def fits(side: int) -> bool:
        for top in range(n - side + 1):
            for left in range(m - side + 1):
                counts = Counter(
                    digits[y][x]
                    for y in range(top, top + side)
                    for x in range(left, left + side)
                )
                if side * side - max(counts.values(), default=0) <= k:
                    return True
        return False

    ng, ok = 0, min(n, m)
    if fits(ok):
        return ok
    while ok - ng > 1:
        mid = (ng + ok) // 2
        if fits(mid):
            ng = mid
        else:
            ok = mid
    return ok - 1


def min_split_diff(a: Sequence[int]) -> int:
    """Cut the circular sequence ``a`` into two arcs and return the smallest
    difference between their sums."""
    n = len(a)
    if n == 0:
        raise ValueError("the sequence must not be empty")
    total = sum(a)
    half = total // 2
    left = right = 0
    current = a[0]
    best = total
    while True:
        if current <= half:
            right = (right + 1) % n
            current += a[right]
        else:
            current -= a[left]
            left += 1
            if left >= n:
                break
        other = total - current
        diff = other - current if current <= half else current - other
        best = min(best, diff)
    return best


def min_cost(
    n: int,
    x: Sequence[int],
    s: str,
    edges: Iterable[tuple[int, int, int]],
) -> int | None:
    """Return the cheapest way from town ``n`` to town ``1``, or ``None``.

    Roads ``(a, b, c)`` cost ``c``; a jump between towns of kinds A/B, A/C and
    B/C costs ``x[0]``, ``x[1]`` and ``x[2]``. Kinds other than A and B count as C.
    """
    if len(s) < n:
        raise ValueError(f"expected {n} town kinds, got {len(s)}")
    if len(x) != 3:
        raise ValueError("exactly three jump costs are required")
    kinds = [_KIND.get(c, 2) for c in s[:n]]
    roads: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, c in edges:
        for town in (a, b):
            if not 1 <= town <= n:
                raise ValueError(f"town {town} is outside 1..{n}")
        roads[a - 1].append((b - 1, c))
        roads[b - 1].append((a - 1, c))

    settled: dict[int, int] = {}
    heap = [(0, n - 1)]
    while heap:
        cost, town = heapq.heappop(heap)
        if town in settled:
            continue
        settled[town] = cost
        if town == 0:
            break
        for other, kind in enumerate(kinds):
            if kind != kinds[town] and other not in settled:
                jump = x[_TRANSFER_INDEX[frozenset((kind, kinds[town]))]]
                heapq.heappush(heap, (cost + jump, other))
        for other, road in roads[town]:
            if other not in settled:
                heapq.heappush(heap, (cost + road, other))
    return settled.get(0)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="past4")
    parser.add_argument("task", nargs="?", choices=tuple("abcdefghij"), default="a")
    args = parser.parse_args(argv)
    tokens = read_tokens(sys.stdin)
    task = args.task
    if task == "a":
        a, b, c = (int(next(tokens)) for _ in range(3))
        print(middle(a, b, c))
    elif task == "b":
        x = float(next(tokens))
        y = float(next(tokens))
        try:
            print(f"{percentage(x, y):.2f}")
        except ZeroDivisionError:
            print("ERROR")
    elif task == "c":
        n = int(next(tokens))
        int(next(tokens))
        grid = [next(tokens) for _ in range(n)]
        for row in neighbour_counts(grid):
            print("".join(map(str, row)))
    elif task == "d":
        n = int(next(tokens))
        left, right = ninja_moves(next(tokens)[:n])
        print(f"{left} {right}")
    elif task == "e":
        n = int(next(tokens))
        swapped = swap_non_palindrome(next(tokens)[:n])
        print("None" if swapped is None else swapped)
    elif task == "f":
        n = int(next(tokens))
        k = int(next(tokens))
        word = kth_frequent([next(tokens) for _ in range(n)], k)
        print("AMBIGUOUS" if word is None else word)
    elif task == "g":
        n = int(next(tokens))
        int(next(tokens))
        print(count_removable_walls([next(tokens) for _ in range(n)]))
    elif task == "h":
        n = int(next(tokens))
        int(next(tokens))
        k = int(next(tokens))
        print(largest_square([next(tokens) for _ in range(n)], k))
    elif task == "i":
        n = int(next(tokens))
        print(min_split_diff([int(next(tokens)) for _ in range(n)]))
    else:
        n = int(next(tokens))
        m = int(next(tokens))
        x = [int(next(tokens)) for _ in range(3)]
        s = next(tokens)
        edges = [
            (int(next(tokens)), int(next(tokens)), int(next(tokens))) for _ in range(m)
        ]
        cost = min_cost(n, x, s, edges)
        print(_UNREACHABLE if cost is None else cost)
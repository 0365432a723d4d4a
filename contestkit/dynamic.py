"""Dynamic-programming puzzles: barcodes, measurements, woodcutters, vacations and divisors."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate, product
from math import isqrt

__all__ = [
    "min_recolor_cost",
    "min_removals",
    "max_felled_trees",
    "min_rest_days",
    "divisor_sum",
]

_INVALID = 10**6
_MAX_MEASUREMENT = 5000

_REST = 0
_GYM = 1
_CONTEST = 2

_BLACK = 1
_WHITE = -1


def min_recolor_cost(picture: Sequence[str], x: int, y: int) -> int:
    """Fewest pixels to repaint so every column is one colour and runs are ``x``..``y`` wide.

    ``picture`` holds rows of ``#`` and ``.`` characters.
    """
    rows = list(picture)
    if not rows:
        raise ValueError("the picture has no rows")
    m = len(rows[0])
    if any(len(row) != m for row in rows):
        raise ValueError("all rows must have the same length")
    if not 1 <= x <= y:
        raise ValueError("widths must satisfy 1 <= x <= y")
    if x > m:
        raise ValueError("the picture is narrower than the minimum run width")

    n = len(rows)
    black = [column.count("#") for column in zip(*rows)]
    prefix = [0, *accumulate(black)]

    def block_cost(col: int, colour: int) -> int:
        # Cost of giving columns col .. col+x-1 the opposite of what is counted.
        marked = prefix[col + x] - prefix[col]
        return n * x - marked if colour == _BLACK else marked

    def column_cost(col: int, colour: int) -> int:
        return n - black[col] if colour == _BLACK else black[col]

    over = y + 1
    done = {_BLACK: [0] * (y + 2), _WHITE: [0] * (y + 2)}
    # table[col][colour][width] is the cost of columns col.. given the run so far.
    table: list[dict[int, list[int]]] = [done] * (m + 1)
    for col in reversed(range(m)):
        row: dict[int, list[int]] = {}
        for last in (_BLACK, _WHITE):
            if col + x <= m:
                base = block_cost(col, -last)
                ahead = table[col + x][-last]
                restart = base + ahead[x]
                overflow = base + ahead[over]
            else:
                restart = overflow = _INVALID
            following = table[col + 1][last]
            extend = column_cost(col, last)
            row[last] = [
                restart,
                *(min(extend + following[w + 1], restart) for w in range(1, y + 1)),
                overflow,
            ]
        table[col] = row

    best = min(block_cost(0, colour) + table[x][colour][x] for colour in (_BLACK, _WHITE))
    if best >= _INVALID:
        raise ValueError("no barcode can be formed")
    return best


def min_removals(measurements: Iterable[int]) -> int:
    """Fewest measurements to drop so that the largest is at most twice the smallest."""
    values = sorted(measurements)
    if not values:
        return 0
    if values[0] < 1 or values[-1] > _MAX_MEASUREMENT:
        raise ValueError(f"measurements must lie in 1..{_MAX_MEASUREMENT}")
    kept = max(
        bisect_right(values, 2 * low) - bisect_left(values, low) for low in set(values)
    )
    return len(values) - kept


def max_felled_trees(trees: Iterable[tuple[int, int]]) -> int:
    """Most trees that can be felled left or right without overlapping.

    Each tree is ``(position, height)``, given in increasing position order.
    """
    points = list(trees)
    n = len(points)
    if n <= 2:
        return n
    xs = [pos for pos, _ in points]
    hs = [height for _, height in points]

    # ahead[fell_right] for the tree after the current one.
    ahead = {0: 0, 1: 0}
    for i in range(n - 2, 0, -1):
        current = {}
        for last in (0, 1):
            reach = xs[i - 1] + (hs[i - 1] if last else 0)
            if reach < xs[i] - hs[i]:
                current[last] = 1 + ahead[0]
            elif xs[i + 1] > xs[i] + hs[i]:
                current[last] = max(ahead[0], 1 + ahead[1])
            else:
                current[last] = ahead[0]
        ahead = current
    return 2 + ahead[0]


def min_rest_days(days: Iterable[int]) -> int:
    """Fewest rest days when the gym and contests may not be repeated on consecutive days.

    Each day is 0 (nothing), 1 (contest only), 2 (gym only) or 3 (both).
    """
    schedule = list(days)
    if any(day not in (0, 1, 2, 3) for day in schedule):
        raise ValueError("each day must be 0, 1, 2 or 3")

    ahead = {_REST: 0, _GYM: 0, _CONTEST: 0}
    for day in reversed(schedule):
        current = {}
        for last in (_REST, _GYM, _CONTEST):
            if day == 1 and last != _CONTEST:
                current[last] = ahead[_CONTEST]
            elif day == 2 and last != _GYM:
                current[last] = ahead[_GYM]
            elif day == 3:
                if last == _REST:
                    current[last] = min(ahead[_GYM], ahead[_CONTEST])
                elif last == _GYM:
                    current[last] = ahead[_CONTEST]
                else:
                    current[last] = ahead[_GYM]
            else:
                current[last] = 1 + ahead[_REST]
        ahead = current
    return ahead[_REST]


def _divisor_count(value: int) -> int:
    return sum(
        1 if value // i == i else 2
        for i in range(1, isqrt(value) + 1)
        if value % i == 0
    )


def divisor_sum(a: int, b: int, c: int) -> int:
    """Sum of the divisor counts of ``i*j*k`` over ``1 <= i <= a``, ``j <= b``, ``k <= c``."""
    if min(a, b, c) < 1:
        raise ValueError("bounds must be positive")
    known: dict[int, int] = {}
    total = 0
    for i, j, k in product(range(1, a + 1), range(1, b + 1), range(1, c + 1)):
        value = i * j * k
        if value not in known:
            known[value] = _divisor_count(value)
        total += known[value]
    return total
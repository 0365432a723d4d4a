"""Plane and grid puzzles: hopscotch courts, radiators, walks, radii, lanterns, shots and offices."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from fractions import Fraction

__all__ = [
    "square_hopscotch",
    "uncovered_generals",
    "vasya_steps",
    "max_inner_radius",
    "lantern_radius",
    "shots_needed",
    "president_deputies",
]


def square_hopscotch(a: int, x: int, y: int) -> int:
    """Number of the hopscotch square of side ``a`` holding the point ``(x, y)``.

    Rows hold one, one, then alternately two and one squares. Returns ``-1``
    when the point lies on a border or outside the court.
    """
    if a <= 0:
        raise ValueError("square side must be positive")
    if y < 0:
        raise ValueError("the court lies at y >= 0")
    row, offset = divmod(y, a)
    if offset == 0:
        return -1
    inside_single = 2 * abs(x) < a
    if row <= 1:
        return row + 1 if inside_single else -1
    if row % 2 == 0:
        if abs(x) < a and x != 0:
            base = 3 * (row // 2)
            return base + 1 if x > 0 else base
        return -1
    if inside_single:
        return 2 + 3 * ((row + 1) // 2 - 1)
    return -1


def uncovered_generals(
    corner1: tuple[int, int],
    corner2: tuple[int, int],
    radiators: Iterable[tuple[int, int, int]],
) -> int:
    """Count the integer points on the rectangle's border that no radiator warms.

    Each radiator is ``(x, y, r)`` and warms the points within distance ``r``.
    """
    (xa, ya), (xb, yb) = corner1, corner2
    left, right = min(xa, xb), max(xa, xb)
    bottom, top = min(ya, yb), max(ya, yb)
    heaters = list(radiators)

    border = [(left, y) for y in range(bottom, top + 1)]
    border += [(right, y) for y in range(bottom, top + 1)]
    border += [(x, top) for x in range(left + 1, right)]
    border += [(x, bottom) for x in range(left + 1, right)]

    covered = {
        (px, py)
        for px, py in border
        if any((px - rx) ** 2 + (py - ry) ** 2 <= r * r for rx, ry, r in heaters)
    }
    return 2 * (top - bottom + 1) + 2 * (right - left - 1) - len(covered)


def _room(position: int, delta: int, size: int) -> int | None:
    if delta > 0:
        return (size - position) // delta
    if delta < 0:
        return (position - 1) // -delta
    return None


def vasya_steps(
    n: int,
    m: int,
    start: tuple[int, int],
    directions: Iterable[tuple[int, int]],
) -> int:
    """Total steps taken on an ``n`` by ``m`` grid, moving as far as possible along each vector."""
    row, col = start
    total = 0
    for dx, dy in directions:
        room_x = _room(row, dx, n)
        room_y = _room(col, dy, m)
        if room_x is None and room_y is None:
            steps = 0
        elif room_x is None:
            steps = room_y
        elif room_y is None:
            steps = room_x
        else:
            steps = min(room_x, room_y)
        row += steps * dx
        col += steps * dy
        total += steps
    return total


def max_inner_radius(
    xs: Sequence[int], ys: Sequence[int], zs: Sequence[int], a: int, b: int
) -> float:
    """Largest inner radius of a medal whose outer and inner masses keep the ratio ``a : b``."""
    return max(xs) / math.sqrt(1 + a * min(zs) / (b * max(ys)))


def lantern_radius(length: int, lanterns: Iterable[int]) -> float:
    """Smallest light radius so that lanterns light the whole street ``[0, length]``."""
    positions = sorted(lanterns)
    if not positions:
        raise ValueError("at least one lantern is needed")
    widest = max((b - a for a, b in zip(positions, positions[1:])), default=0)
    return max(widest / 2, float(max(positions[0], length - positions[-1])))


def shots_needed(origin: tuple[int, int], troopers: Iterable[tuple[int, int]]) -> int:
    """Shots a gun at ``origin`` needs, each destroying every trooper on one line through it."""
    x0, y0 = origin
    lines: set[Fraction | None] = set()
    at_origin = 0
    for x, y in troopers:
        dx, dy = x - x0, y - y0
        if dx == 0 and dy == 0:
            at_origin = 1
            continue
        lines.add(None if dx == 0 else Fraction(dy, dx))
    return max(at_origin, len(lines))


def president_deputies(grid: Sequence[str], color: str) -> int:
    """Count the distinct desk colours sharing a side with the desk of ``color``."""
    cells = {(i, j): ch for i, row in enumerate(grid) for j, ch in enumerate(row)}
    neighbours: set[str] = set()
    for (i, j), ch in cells.items():
        if ch != color:
            continue
        for cell in ((i, j - 1), (i, j + 1), (i + 1, j), (i - 1, j)):
            other = cells.get(cell)
            if other is not None and other not in (color, "."):
                neighbours.add(other)
    return len(neighbours)
"""Array puzzles: matchboxes, rainfall, searches, sign flips, progressions and more."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import prod

__all__ = [
    "max_matches",
    "max_watered_sections",
    "search_comparisons",
    "max_sum_after_flips",
    "arithmetic_positions",
    "min_fence_start",
    "stone_queries",
    "sort_by_reversal",
    "min_dollars",
    "chocolate_breaks",
    "catch_criminals",
    "can_equalize",
]


def max_matches(capacity: int, containers: Iterable[tuple[int, int]]) -> int:
    """Most matches a burglar carries in at most ``capacity`` boxes.

    Each container is ``(boxes, matches_per_box)``.
    """
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    total = 0
    room = capacity
    for boxes, matches in sorted(containers, key=lambda item: item[1], reverse=True):
        taken = min(boxes, room)
        total += taken * matches
        room -= taken
        if room <= 0:
            break
    return total


def max_watered_sections(heights: Sequence[int]) -> int:
    """Most sections watered when rain falls on one section and flows to lower-or-equal ones."""
    n = len(heights)
    if n == 0:
        raise ValueError("there must be at least one section")
    left = [0] * n
    right = [0] * n
    for i in range(1, n):
        if heights[i] >= heights[i - 1]:
            left[i] = left[i - 1] + 1
    for i in reversed(range(n - 1)):
        if heights[i] >= heights[i + 1]:
            right[i] = right[i + 1] + 1
    return 1 + max(a + b for a, b in zip(left, right))


def search_comparisons(
    permutation: Sequence[int], queries: Iterable[int]
) -> tuple[int, int]:
    """Comparisons made by forward and by backward linear search over all queries."""
    position = {value: index for index, value in enumerate(permutation)}
    n = len(permutation)
    forward = backward = 0
    for query in queries:
        if query not in position:
            raise ValueError(f"value {query} is not in the array")
        index = position[query]
        forward += index + 1
        backward += n - index
    return forward, backward


def max_sum_after_flips(values: Iterable[int], k: int) -> int:
    """Largest sum after exactly ``k`` sign changes of (possibly repeated) elements."""
    arr = sorted(values)
    if not arr:
        raise ValueError("the sequence must not be empty")
    if k < 0:
        raise ValueError("k must be non-negative")
    n = len(arr)
    negatives = [v for v in arr if v < 0]
    neg = len(negatives)
    sum_neg = sum(negatives)
    sum_pos = sum(arr) - sum_neg
    has_zero = 0 in arr

    if neg == 0:
        if k % 2 == 0 or has_zero:
            return sum_pos
        return sum_pos - 2 * arr[0]
    if neg == k:
        return sum_pos - sum_neg
    if k > neg:
        left = k - neg
        if left % 2 == 0 or has_zero:
            return sum_pos - sum_neg
        if neg == n or -arr[neg - 1] < arr[neg]:
            return 2 * arr[neg - 1] - sum_neg + sum_pos
        return sum_pos - sum_neg - 2 * arr[neg]
    flipped = -sum(arr[:k])
    return 2 * flipped + sum_neg + sum_pos


def arithmetic_positions(values: Sequence[int]) -> list[tuple[int, int]]:
    """Values whose positions form an arithmetic progression, with its step, by value."""
    positions: dict[int, list[int]] = {}
    for index, value in enumerate(values):
        positions.setdefault(value, []).append(index)
    result = []
    for value in sorted(positions):
        where = positions[value]
        if len(where) == 1:
            result.append((value, 0))
            continue
        step = where[1] - where[0]
        if all(b - a == step for a, b in zip(where, where[1:])):
            result.append((value, step))
    return result


def min_fence_start(heights: Sequence[int], k: int) -> int:
    """1-based start of the first ``k`` consecutive planks with the smallest total height."""
    n = len(heights)
    if not 1 <= k <= n:
        raise ValueError("k must lie between 1 and the number of planks")
    current = sum(heights[:k])
    best = current
    best_start = 0
    for end in range(k, n):
        current += heights[end] - heights[end - k]
        if current < best:
            best = current
            best_start = end - k + 1
    return best_start + 1


def stone_queries(
    costs: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Answer ``(type, l, r)`` range-sum queries, 1-based and inclusive.

    Type 1 sums the costs as given; any other type sums the sorted costs.
    """
    plain = [0, *accumulate(costs)]
    ordered = [0, *accumulate(sorted(costs))]
    n = len(costs)
    answers = []
    for kind, low, high in queries:
        if not 1 <= low <= high <= n:
            raise ValueError(f"range {low}..{high} outside 1..{n}")
        prefix = plain if kind == 1 else ordered
        answers.append(prefix[high] - prefix[low - 1])
    return answers


def sort_by_reversal(values: Sequence[int]) -> tuple[int, int] | None:
    """1-based bounds of one segment whose reversal sorts ``values``, or ``None``."""
    n = len(values)
    left = right = -1
    segments = 0
    in_segment = False
    for i in range(1, n):
        if values[i] < values[i - 1]:
            if not in_segment:
                in_segment = True
                left = i - 1
                segments += 1
                if segments > 1:
                    return None
            right = i
        else:
            in_segment = False
    if left == -1:
        return 1, 1
    if left != 0 and values[right] < values[left - 1]:
        return None
    if right != n - 1 and values[left] > values[right + 1]:
        return None
    return left + 1, right + 1


def min_dollars(heights: Iterable[int]) -> int:
    """Dollars needed to raise the start pylon so every jump keeps energy non-negative."""
    energy = 0
    height = 0
    paid = 0
    for target in heights:
        if height >= target or height + energy - target >= 0:
            energy += height - target
        else:
            paid += target - height - energy
            energy = 0
        height = target
    return paid


def chocolate_breaks(pieces: Iterable[int]) -> int:
    """Ways to break a bar so that each part holds exactly one nut (a 1)."""
    nuts = [index for index, piece in enumerate(pieces) if piece == 1]
    if not nuts:
        return 0
    return prod(b - a for a, b in zip(nuts, nuts[1:]))


def catch_criminals(cities: Sequence[int], city: int) -> int:
    """Criminals caught when the detector tells counts per distance from ``city`` (1-based)."""
    n = len(cities)
    if not 1 <= city <= n:
        raise ValueError(f"city {city} outside 1..{n}")
    home = city - 1
    caught = cities[home]
    distance = 1
    while home - distance >= 0 and home + distance < n:
        if cities[home - distance] and cities[home + distance]:
            caught += 2
        distance += 1
    caught += sum(cities[home + distance:])
    if home - distance >= 0:
        caught += sum(cities[:home - distance + 1])
    return caught


def can_equalize(values: Iterable[int]) -> bool:
    """Whether adding or subtracting one ``x`` to some elements can make all equal."""
    distinct = sorted(set(values))
    if len(distinct) in (1, 2):
        return True
    if len(distinct) == 3:
        return distinct[0] + distinct[2] == 2 * distinct[1]
    return False
"""Assorted puzzles: rescues, rankings, scores, debts, coins, maps and problem sets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from math import comb

__all__ = [
    "rescue_bijous",
    "mushroom_ranking",
    "distribute_points",
    "debt_total",
    "candy_matrix_moves",
    "suitable_times",
    "coin_order",
    "command_probability",
    "island_map",
    "problemset_count",
    "flagstones",
]

_COINS = "ABC"


def rescue_bijous(vp: int, vd: int, t: int, f: int, c: int) -> int:
    """Bijous the princess drops to distract the dragon before reaching the castle.

    The princess runs at ``vp``, the dragon flies at ``vd`` and notices her
    after ``t`` hours, needs ``f`` hours to recover each time, and the castle
    lies ``c`` miles away.
    """
    if vd <= vp:
        return 0
    elapsed = float(t)
    dropped = 0
    while True:
        catch_up = vp * elapsed / (vd - vp)
        elapsed += catch_up
        if vp * elapsed >= c:
            return dropped
        dropped += 1
        elapsed += catch_up + f


def mushroom_ranking(
    t1: int, t2: int, k: int, growers: Iterable[tuple[int, int]]
) -> list[tuple[int, float]]:
    """Rank growers by their best mushroom height, highest first, ties by number.

    Each grower is ``(a, b)``: the two speeds, usable in either order. The
    first part lasts ``t1`` seconds, after which the height shrinks by ``k``
    percent; the second part lasts ``t2`` seconds. Returns 1-based grower
    numbers with their heights.
    """
    shrink = 1 - k / 100
    heights = [
        (number, max(t1 * a * shrink + t2 * b, t1 * b * shrink + t2 * a))
        for number, (a, b) in enumerate(growers, start=1)
    ]
    return sorted(heights, key=lambda item: (-item[1], item[0]))


def distribute_points(
    n: int, k: int, l: int, r: int, s_all: int, s_k: int
) -> list[int]:
    """Scores of ``n`` students totalling ``s_all``, the top ``k`` totalling ``s_k``.

    Every score starts at ``l``; the upper bound ``r`` is assumed to be
    satisfiable by the given sums.
    """
    if not 1 <= k <= n:
        raise ValueError("k must lie between 1 and n")
    scores = [l] * n

    rest = s_all - s_k - (n - k) * l
    for i in range(k, n):
        if not rest:
            break
        if i == n - 1:
            scores[i] += rest
            break
        share = rest // (n - i)
        scores[i] += min(share, rest)
        rest -= share

    rest_k = s_k - k * l
    for i in range(k):
        if not rest_k:
            break
        share = rest_k // (k - i)
        scores[i] += min(rest_k, share)
        rest_k -= share
    return scores


def debt_total(n: int, debts: Iterable[tuple[int, int, int]]) -> int:
    """Smallest total of debts among ``n`` friends after cancelling cycles.

    Each debt is ``(debtor, creditor, amount)`` with 1-based friends.
    """
    owes: Counter[int] = Counter()
    owed: Counter[int] = Counter()
    for debtor, creditor, amount in debts:
        for person in (debtor, creditor):
            if not 1 <= person <= n:
                raise ValueError(f"friend {person} outside 1..{n}")
        owes[debtor] += amount
        owed[creditor] += amount
    return sum(max(owed[p] - owes[p], 0) for p in range(1, n + 1))


def candy_matrix_moves(rows: Iterable[str]) -> int:
    """Moves needed to bring each dwarf ``G`` to its candy ``S``, or ``-1`` if impossible."""
    gaps = set()
    for row in rows:
        dwarf = row.rfind("G")
        candy = row.rfind("S")
        if dwarf == -1 or candy == -1:
            raise ValueError(f"row {row!r} needs one G and one S")
        if dwarf > candy:
            return -1
        gaps.add(candy - dwarf)
    return len(gaps)


def suitable_times(
    z_ranges: Sequence[tuple[int, int]],
    x_ranges: Sequence[tuple[int, int]],
    l: int,
    r: int,
) -> int:
    """Count wake-up times ``t`` in ``l..r`` when the two schedules overlap.

    Both range lists are sorted and inclusive; ``x_ranges`` shift by ``t``.
    """
    count = 0
    for t in range(l, r + 1):
        zi = xi = 0
        while zi < len(z_ranges) and xi < len(x_ranges):
            z_start, z_end = z_ranges[zi]
            x_start, x_end = x_ranges[xi]
            if z_start > x_end + t:
                xi += 1
            elif x_start + t > z_end:
                zi += 1
            else:
                count += 1
                break
    return count


def coin_order(comparisons: Iterable[str]) -> str:
    """Order coins ``A``, ``B``, ``C`` from lightest to heaviest, or ``"Impossible"``.

    Each comparison reads like ``"A>B"`` or ``"C<B"``.
    """
    wins: Counter[str] = Counter()
    for text in comparisons:
        if len(text) != 3 or text[1] not in "<>" or not set(text[::2]) <= set(_COINS):
            raise ValueError(f"malformed comparison: {text!r}")
        heavier = text[0] if text[1] == ">" else text[2]
        wins[heavier] += 1
    if max(wins.values(), default=0) != 2:
        return "Impossible"
    return "".join(coin for j in range(3) for coin in _COINS if wins[coin] == j)


def command_probability(sent: str, received: str) -> float:
    """Probability that the received commands, with ``?`` as coin flips, end where the sent ones do."""
    plus_sent = sent.count("+")
    minus_sent = len(sent) - plus_sent
    plus_got = received.count("+")
    minus_got = received.count("-")
    unknown = len(received) - plus_got - minus_got

    if plus_got > plus_sent or minus_got > minus_sent:
        return 0.0
    if unknown == 0:
        return 1.0 if (plus_got, minus_got) == (plus_sent, minus_sent) else 0.0
    needed = min(plus_sent - plus_got, minus_sent - minus_got)
    return comb(unknown, needed) / 2**unknown


def island_map(n: int, k: int) -> list[str] | None:
    """An ``n`` by ``n`` map of sand ``S`` with exactly ``k`` separate land cells ``L``.

    Returns ``None`` when ``k`` islands cannot fit.
    """
    most = n * (n // 2) + ((n + 1) // 2 if n % 2 else 0)
    if k > most:
        return None
    rows = []
    left = k
    for i in range(n):
        cells = []
        for j in range(n):
            if left and i % 2 == j % 2:
                left -= 1
                cells.append("L")
            else:
                cells.append("S")
        rows.append("".join(cells))
    return rows


def problemset_count(
    difficulties: Sequence[int], low: int, high: int, min_diff: int
) -> int:
    """Count problem subsets with total in ``low..high`` and spread of at least ``min_diff``."""
    values = list(difficulties)
    count = 0
    for mask in range(3, 1 << len(values)):
        chosen = [v for j, v in enumerate(values) if mask >> j & 1]
        total = sum(chosen)
        if low <= total <= high and max(chosen) - min(chosen) >= min_diff:
            count += 1
    return count


def flagstones(n: int, m: int, a: int) -> int:
    """Whole ``a`` by ``a`` flagstones that fit side by side in an ``n`` by ``m`` square."""
    if a <= 0:
        raise ValueError("flagstone side must be positive")
    return (n // a) * (m // a)
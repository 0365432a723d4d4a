"""Graph puzzles: leaf stripping, king walks, reactions, coloured paths and a two-button device."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

__all__ = [
    "leaf_removal_rounds",
    "king_moves",
    "max_danger",
    "color_path_counts",
    "button_presses",
]

_BUTTON_LIMIT = 10000
_UNREACHABLE = 10000


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} outside 1..{vertex_count}")


def leaf_removal_rounds(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count the rounds in which vertices of degree one are stripped off together."""
    adjacency: dict[int, list[int]] = {v: [] for v in range(1, vertex_count + 1)}
    for a, b in edges:
        _check_vertex(a, vertex_count)
        _check_vertex(b, vertex_count)
        adjacency[a].append(b)
        adjacency[b].append(a)

    rounds = 0
    while True:
        leaves = [v for v, neighbours in adjacency.items() if len(neighbours) == 1]
        if not leaves:
            return rounds
        for leaf in leaves:
            # Two leaves tied to each other: the second is already detached.
            if not adjacency[leaf]:
                continue
            parent = adjacency[leaf][0]
            adjacency[parent].remove(leaf)
            adjacency[leaf].clear()
        rounds += 1


def king_moves(
    start: tuple[int, int],
    end: tuple[int, int],
    segments: Iterable[tuple[int, int, int]],
) -> int:
    """Fewest king moves from ``start`` to ``end`` over the allowed cells.

    ``segments`` holds ``(row, first_column, last_column)`` runs of allowed
    cells. Returns ``-1`` when ``end`` cannot be reached.
    """
    allowed = {(row, col) for row, a, b in segments for col in range(a, b + 1)}
    allowed.add(start)
    distance = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        row, col = current
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                cell = (row + dr, col + dc)
                if cell not in allowed:
                    continue
                if cell == end:
                    return distance[current] + 1
                if cell not in distance:
                    distance[cell] = distance[current] + 1
                    queue.append(cell)
    return -1


def max_danger(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Largest danger reachable when pouring ``n`` chemicals with the given reactions."""
    parent = list(range(n + 1))

    def find(v: int) -> int:
        while parent[v] != v:
            parent[v] = parent[parent[v]]
            v = parent[v]
        return v

    merges = 0
    for a, b in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        root_a, root_b = find(a), find(b)
        if root_a != root_b:
            parent[root_a] = root_b
            merges += 1
    return 2 ** merges


def _connected_by_color(
    adjacency: dict[int, list[tuple[int, int]]], source: int, target: int, color: int
) -> bool:
    if source == target:
        return True
    seen = {source}
    stack = [source]
    while stack:
        node = stack.pop()
        for neighbour, edge_color in adjacency.get(node, ()):
            if edge_color != color or neighbour in seen:
                continue
            if neighbour == target:
                return True
            seen.add(neighbour)
            stack.append(neighbour)
    return False


def color_path_counts(
    edges: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """For each ``(u, v)`` query, count the colours whose edges alone join ``u`` and ``v``."""
    adjacency: dict[int, list[tuple[int, int]]] = {}
    for a, b, color in edges:
        adjacency.setdefault(a, []).append((b, color))
        adjacency.setdefault(b, []).append((a, color))

    answers = []
    for u, v in queries:
        colors = dict.fromkeys(color for _, color in adjacency.get(u, ()))
        answers.append(
            sum(_connected_by_color(adjacency, u, v, color) for color in colors)
        )
    return answers


def button_presses(n: int, m: int) -> int:
    """Fewest presses (red doubles, blue subtracts one) to turn ``n`` into ``m``."""
    memo: dict[int, int | None] = {}

    def immediate(k: int) -> int | None:
        if k > _BUTTON_LIMIT or k == 0:
            return _UNREACHABLE
        if k == m:
            return 0
        if k in memo:
            known = memo[k]
            # Still on the search path: a cycle.
            return _UNREACHABLE if known is None else known
        memo[k] = None
        return None

    value = immediate(n)
    if value is not None:
        return value

    # Each frame is [number, result of the subtract branch or None].
    stack: list[list[int | None]] = [[n, None]]
    returned: int | None = None
    while stack:
        frame = stack[-1]
        if returned is not None:
            if frame[1] is None:
                frame[1] = returned
                returned = None
            else:
                result = 1 + min(frame[1], returned)
                memo[frame[0]] = result
                stack.pop()
                returned = result
                continue
        k, left = frame
        child = k - 1 if left is None else 2 * k
        value = immediate(child)
        if value is None:
            stack.append([child, None])
        else:
            returned = value
    assert returned is not None
    return returned
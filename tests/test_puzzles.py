import pytest

from contestkit.puzzles import (
    candy_matrix_moves,
    coin_order,
    command_probability,
    debt_total,
    distribute_points,
    flagstones,
    island_map,
    mushroom_ranking,
    problemset_count,
    rescue_bijous,
    suitable_times,
)


def test_rescue_slow_dragon_needs_nothing():
    assert rescue_bijous(5, 5, 1, 1, 100) == 0
    assert rescue_bijous(5, 3, 1, 1, 100) == 0


def test_rescue_worked_example():
    assert rescue_bijous(1, 2, 1, 1, 10) == 2


def test_rescue_grows_with_distance():
    counts = [rescue_bijous(1, 2, 1, 1, c) for c in range(1, 60)]
    assert counts == sorted(counts)


def test_mushroom_worked_example():
    assert mushroom_ranking(3, 3, 50, [(2, 4), (4, 2)]) == [(1, 15.0), (2, 15.0)]


def test_mushroom_ranking_is_ordered():
    growers = [(3, 9), (7, 1), (5, 5), (2, 8), (6, 6)]
    ranking = mushroom_ranking(2, 5, 30, growers)
    assert sorted(number for number, _ in ranking) == list(range(1, len(growers) + 1))
    heights = [h for _, h in ranking]
    assert heights == sorted(heights, reverse=True)


def test_mushroom_ties_keep_number_order():
    ranking = mushroom_ranking(1, 1, 0, [(1, 2), (2, 1), (3, 0)])
    assert [number for number, _ in ranking] == [1, 2, 3]


def test_distribute_worked_example():
    assert distribute_points(5, 3, 1, 3, 13, 9) == [3, 3, 3, 2, 2]


@pytest.mark.parametrize(
    "n, k, l, r, s_all, s_k",
    [(5, 3, 1, 3, 13, 9), (5, 3, 1, 3, 15, 9), (4, 2, 2, 5, 14, 9), (3, 3, 1, 5, 9, 9)],
)
def test_distribute_keeps_sums_and_bounds(n, k, l, r, s_all, s_k):
    scores = distribute_points(n, k, l, r, s_all, s_k)
    assert len(scores) == n
    assert sum(scores) == s_all
    assert sum(scores[:k]) == s_k
    assert all(l <= s <= r for s in scores)


def test_distribute_rejects_bad_k():
    with pytest.raises(ValueError):
        distribute_points(3, 0, 1, 3, 6, 0)


def test_debt_single():
    assert debt_total(3, [(1, 2, 7)]) == 7


def test_debt_cycle_cancels():
    assert debt_total(3, [(1, 2, 5), (2, 3, 5), (3, 1, 5)]) == 0


def test_debt_rejects_unknown_friend():
    with pytest.raises(ValueError):
        debt_total(2, [(1, 3, 4)])


def _row(dwarf, candy, width):
    cells = ["*"] * width
    cells[dwarf] = "G"
    cells[candy] = "S"
    return "".join(cells)


def test_candy_counts_distinct_gaps():
    gaps = [1, 2, 1, 3]
    rows = [_row(0, gap, 5) for gap in gaps]
    assert candy_matrix_moves(rows) == len(set(gaps))


def test_candy_impossible_when_candy_left_of_dwarf():
    assert candy_matrix_moves([_row(0, 2, 4), _row(3, 1, 4)]) == -1


def test_candy_rejects_missing_piece():
    with pytest.raises(ValueError):
        candy_matrix_moves(["**G*"])


def test_suitable_times_worked_example():
    assert suitable_times([(2, 3)], [(0, 1)], 0, 4) == 3


def test_suitable_times_identical_ranges():
    assert suitable_times([(4, 6)], [(4, 6)], 0, 0) == 1


def test_suitable_times_bounded_by_window():
    count = suitable_times([(0, 100)], [(0, 1), (5, 6)], 0, 30)
    assert count == 31


def test_suitable_times_never_meet():
    assert suitable_times([(0, 1)], [(50, 60)], 0, 5) == 0


def test_coin_order_worked_example():
    assert coin_order(["A>B", "C<B", "A>C"]) == "CBA"


def test_coin_order_is_permutation():
    result = coin_order(["B>A", "B>C", "C>A"])
    assert sorted(result) == ["A", "B", "C"]
    assert result[-1] == "B"


def test_coin_order_cycle_is_impossible():
    assert coin_order(["A>B", "B>C", "C>A"]) == "Impossible"


def test_coin_order_rejects_garbage():
    with pytest.raises(ValueError):
        coin_order(["A=B", "B>C", "C>A"])


def test_probability_exact_match():
    assert command_probability("++-+-", "+-+-+") == 1.0


def test_probability_impossible():
    assert command_probability("+++", "??-") == 0.0
    assert command_probability("++", "+-") == 0.0


def test_probability_symmetric_coin():
    assert command_probability("+-", "??") == command_probability("-+", "??")
    assert 0.0 < command_probability("+-", "??") < 1.0


def _adjacent_land(rows):
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell != "L":
                continue
            if j + 1 < len(row) and row[j + 1] == "L":
                return True
            if i + 1 < len(rows) and rows[i + 1][j] == "L":
                return True
    return False


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_island_map_valid_maps(n):
    for k in range(n * n + 1):
        rows = island_map(n, k)
        if rows is None:
            continue
        assert len(rows) == n
        assert sum(row.count("L") for row in rows) == k
        assert not _adjacent_land(rows)


def test_island_map_too_many():
    assert island_map(3, 6) is None
    rows = island_map(3, 5)
    assert sum(row.count("L") for row in rows) == 5


def test_problemset_worked_example():
    assert problemset_count([1, 2, 3], 5, 6, 1) == 2


def test_problemset_spread_too_large():
    assert problemset_count([10, 20, 30, 25], 0, 1000, 1000) == 0


def test_problemset_single_problem():
    assert problemset_count([7], 0, 100, 1) == 0


def test_problemset_wider_range_counts_more():
    values = [10, 10, 20, 10, 20]
    narrow = problemset_count(values, 25, 35, 10)
    wide = problemset_count(values, 0, 1000, 10)
    assert narrow <= wide


@pytest.mark.parametrize("a, p, q", [(1, 6, 6), (4, 2, 3), (7, 1, 5)])
def test_flagstones_whole_fit(a, p, q):
    assert flagstones(a * p, a * q, a) == p * q
    assert flagstones(a * p + a - 1, a * q + a - 1, a) == p * q


def test_flagstones_rejects_zero_side():
    with pytest.raises(ValueError):
        flagstones(6, 6, 0)
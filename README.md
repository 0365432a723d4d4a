# contestkit

Classic competitive programming problems, solved as plain Python functions.
Every solver takes ordinary Python values (integers, strings, lists and tuples)
and returns its answer. Nothing is read from standard input and nothing is
printed. The package has no dependencies outside the standard library.

## Installation

```
pip install contestkit
```

## Modules

### `contestkit.text`

- `digit_sum_steps(s)`: how many times the digits of a decimal string must be
  summed until one digit is left.
- `lucky_conversion_ops(a, b)`: fewest swaps and flips turning one string of
  4s and 7s into another of the same length.
- `bear_substring_count(s)`: number of substrings containing `"bear"`.
- `suffix_structures(s, t)`: `"array"`, `"automaton"`, `"both"` or
  `"need tree"`, depending on which operations turn `s` into `t`.
- `palindrome_of(s)`: `s` followed by its reverse.
- `complete_alphabet(s)`: fills `?` marks so that some 26-letter window holds
  every capital letter once; other `?` marks become `A`. Returns `None` when
  no window can be completed.
- `decode_median_word(s)`: rebuilds a word from its successively removed
  median letters.
- `bracket_sequences(n)`: `n` distinct balanced bracket sequences of length
  `2n`.

### `contestkit.graphs`

- `leaf_removal_rounds(vertex_count, edges)`: rounds in which all vertices of
  degree one are removed together.
- `king_moves(start, end, segments)`: fewest king moves over allowed cells
  given as `(row, first_column, last_column)` runs; `-1` if unreachable.
- `max_danger(n, edges)`: largest danger when pouring `n` chemicals, doubling
  for each reaction.
- `color_path_counts(edges, queries)`: for each `(u, v)` query, how many
  colours connect `u` and `v` on their own.
- `button_presses(n, m)`: fewest presses (double or subtract one) turning `n`
  into `m`.

### `contestkit.geometry`

- `square_hopscotch(a, x, y)`: number of the hopscotch square containing a
  point, or `-1` on a border or outside.
- `uncovered_generals(corner1, corner2, radiators)`: integer border points of
  a rectangle that no radiator `(x, y, r)` warms.
- `vasya_steps(n, m, start, directions)`: total steps taken when moving as far
  as possible along each vector on an `n` by `m` grid.
- `max_inner_radius(xs, ys, zs, a, b)`: largest inner radius of a medal.
- `lantern_radius(length, lanterns)`: smallest radius lighting the whole street.
- `shots_needed(origin, troopers)`: shots needed, each clearing one line
  through the gun.
- `president_deputies(grid, color)`: distinct desk colours adjacent to the
  president's desk.

### `contestkit.dynamic`

- `min_recolor_cost(picture, x, y)`: fewest pixels to repaint to get a barcode
  whose runs are between `x` and `y` columns wide.
- `min_removals(measurements)`: fewest values to drop so the largest is at most
  twice the smallest.
- `max_felled_trees(trees)`: most trees `(position, height)` that can be felled
  without overlap.
- `min_rest_days(days)`: fewest rest days when neither gym nor contest may be
  done two days running.
- `divisor_sum(a, b, c)`: sum of divisor counts of `i*j*k` over the ranges.

### `contestkit.arrays`

`max_matches`, `max_watered_sections`, `search_comparisons`,
`max_sum_after_flips`, `arithmetic_positions`, `min_fence_start`,
`stone_queries`, `sort_by_reversal` (returns `None` if one reversal cannot
sort), `min_dollars`, `chocolate_breaks`, `catch_criminals` and
`can_equalize`.

### `contestkit.puzzles`

`rescue_bijous`, `mushroom_ranking`, `distribute_points`, `debt_total`,
`candy_matrix_moves` (`-1` if impossible), `suitable_times`, `coin_order`
(`"Impossible"` for a contradictory set), `command_probability`,
`island_map` (`None` when `k` islands cannot fit), `problemset_count` and
`flagstones`.

Invalid input, such as out-of-range vertices or mismatched lengths, raises
`ValueError`.

## Example

```python
from contestkit.text import digit_sum_steps, palindrome_of, bracket_sequences
from contestkit.arrays import min_fence_start

digit_sum_steps("991")                      # 3
palindrome_of("ab")                         # "abba"
bracket_sequences(3)                        # ["((()))", "()(())", "()()()"]
min_fence_start([1, 2, 6, 1, 1, 7, 1], 3)   # 3
```

## What it does not do

The package is a library only. It installs no command and does not parse
problem input files or judge-formatted text; callers pass Python values and
format the results themselves.

## Running the tests

```
pip install contestkit[test]
pytest
```
# olympiad

Solutions to classic programming-contest problems, written as plain
functions and small classes that take Python values and return Python
values.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `olympiad.bigint`

Arbitrary-length integer arithmetic on decimal digit strings with an
optional leading `-`.

- Signed operations: `add`, `sub`, `mul`, `div` (truncates toward zero),
  `mod` (sign follows the dividend), `power` (non-negative exponent).
- Magnitude helpers: `strip_zeros`, `compare`, `add_abs`, `sub_abs`,
  `mul_abs`, `div_abs`, `mod_abs`, `half`, `is_even`.
- `difference(a, b)`: signed `a - b` of two non-negative digit strings.
- `six_square_sum(n)`: sum of the squares of 6, 66, 666, ... with `n` terms.

`div` and `mod` raise `ZeroDivisionError` for a zero divisor.

### `olympiad.decimal_arith`

Signed arithmetic on strings that may carry a fractional part, such as
`"-3.25"` or `".5"`.

- `parse(s)` returns a `ParsedNumber` (`negative`, `integer`, `fraction`).
- `strip`, `compare`, `add`, `sub`, `mul`.
- `divide(a, b, precision)`: quotient with `precision` digits after the
  point; raises `ValueError` for a negative precision.
- `mod(a, b)`: remainder carrying the sign of `a`.

`divide` and `mod` raise `ZeroDivisionError` for a zero divisor.

### `olympiad.graphs`

Edges are `(u, v, w)` triples; nodes are numbered from 1 to `n` unless
stated otherwise.

- `dijkstra(n, edges, start)`: distances to every reachable node, as a dict.
- `round_trip_total(n, edges)`: total time from node 1 to each other node
  and back, leaving out nodes that cannot be reached or cannot return.
- `relax_all(n, edges, source)`: distances to nodes 1..n by queue-driven
  relaxation, `None` for unreachable nodes.
- `has_negative_cycle(n, edges)`: whether a negative cycle is reachable
  from node 1.
- `cheapest_with_free_edges(n, edges, free, start, target)`: cheapest cost
  on an undirected graph when up to `free` edges cost nothing; `None` if
  unreachable.
- `escape_steps(grid)`: fewest moves from cell 2 to cell 3 with a health
  budget of 6; 0 is a wall, 4 restores full health; `None` if the exit
  cannot be reached.

### `olympiad.puzzles`

- `window_minima(values, k)`, `window_maxima(values, k)`.
- `flip_prefixes(bits)`: reverse and invert each prefix in turn.
- `apply_tree_moves(position, moves)`: binary-string position moved by
  `*`, `/`, `+` and `-`.
- `CursorEditor`: `insert`, `delete`, `left`, `right`, and `query(k)` for
  the largest prefix sum among the first `k` values left of the cursor.
- `spiral_number(n, x, y)`: value at a cell of a clockwise spiral matrix.
- `Genealogy`: `father`, `son`, and `ancestor(name)` for the earliest
  known ancestor.
- `total_height_cost(values)`: sum of the larger of each neighbouring pair.

### `olympiad.contests`

- `runner_up_by_halves(values)`, `runner_up(values)`: knockout runner-ups.
- `steps_to_cover(n, step, boosts)`: jumps needed to reach `n`.
- `split_sum(n, m)`: prime factors of `n` padded with ones to sum to `m`,
  or `None`.
- `CapsLockTyping(keys).query(x)`: the `x`-th word typed from a repeating
  key sequence that includes `"CapsLock"`.
- `assign_unique(values)`: bump repeated values to the next free value.
- `trimmed_averages(scores)`: running averages without highest and lowest.
- `day_number(date_text)`: day count for a date such as `"15OCT1582"`.
- `card_game_winner(hands)`: which of three players empties their hand first.

### `olympiad.grid_search`

- `generate_random_map(width, height, obstacle_prob, seed=None)`: a list of
  rows with 1 for obstacles; the top-left and bottom-right corners stay open.
- `bidirectional_bfs(grid, start, end)`: eight-connected reachability
  between `(x, y)` points, searching from both ends.
- Constants `DIRECTIONS` and `OBSTACLE`.

### `olympiad.merge_sort`

- `merge_sorted(left, right)`: stable merge of two sorted sequences.
- `parallel_merge_sort(data, depth=0)`: sorted copy; inputs longer than
  `BASE_SIZE` are halved and, while `depth` is below the processor count,
  the halves are sorted in separate threads.

## Example

```python
from olympiad import bigint, graphs

bigint.add("-123456789012345678901234567890", "1")
# '-123456789012345678901234567889'

graphs.dijkstra(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)], 1)
# {1: 0, 2: 4, 3: 5}
```

## What this package does not do

It has no command-line programs: nothing reads problem input from
standard input or prints answers. Each solution is a function or class to
call from Python with the input already parsed. It also does not time its
searches or sorts; `grid_search` and `merge_sort` only return results.
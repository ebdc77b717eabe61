# contestkit

Solutions to classic programming-contest problems, written as plain Python
functions, plus a small command for two of the test-case driven problems.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `contestkit.graphs`

Nodes are numbered `1..n`; a node outside that range raises `ValueError`.

- `nearest_source_distances(n, edges, sources)` – multi-source shortest
  paths. `edges` are undirected `(u, v, weight)` triples. Returns a list with
  the distance of nodes `1..n` to the nearest source; nodes no source reaches
  get `UNREACHABLE` (`10**9 + 7`).
- `largest_terminal_component(n, edges, terminals)` – on a tree given by
  undirected `(u, v)` edges, explores from each terminal in the given order,
  sharing one set of visited nodes. A terminal's subtree counts the terminal
  itself and every node lying on a path to a further terminal. Returns the
  largest such count, or 0 when there are no terminals.
- `happiness_days(n, k, friendships, gifts)` – each gift `(giver, amount)` on
  day `d` (counted from 1) adds `amount` to every friend of `giver`. Returns,
  for people `1..n`, the first day their total reaches `k`, or `NEVER` (`-1`).

### `contestkit.combinatorics`

Results marked "mod" are taken modulo `MOD = 10**9 + 7`.

- `color_boxes(n, m)` – `m!` mod; `n` does not affect the result.
- `largest_coprime_below(n)` – the largest `a <= n - 2` with
  `gcd(a, n) == 1`; raises `ValueError` for `n < 3`.
- `game_winner(n, k)` – the winner of the take-away game, `"Arpa"`
  (`FIRST_PLAYER`) or `"Dishant"` (`SECOND_PLAYER`).
- `permutation_difference_sum(n)` – `(0 + 1 + ... + (n - 1)) * n!` for
  `0 <= n <= 10`; other values raise `ValueError`.
- `count_partitions(x, k)` – the number of ordered ways to write `x` as a sum
  of parts of size `1..k`, mod; requires `0 <= x <= 10001` and
  `1 <= k <= 100`.
- `special_sets(n)` – the number of ordered selections from `1..n` with no
  two consecutive values, mod; `n` must be positive.

### `contestkit.strings`

- `limit_ones(s, k, m)` – greedily clears ones so that no window of `k`
  characters holds more than `m` ones: the first window keeps its earliest
  `m` ones, and later a one that would overflow its window is cleared.
  Returns `(changes, new_string)`.
- `rotation_shift(s, t)` – how many leading characters of `s` move to its end
  to give `t`; returns `len(s)` when no shorter shift is found or when the
  shift found is `len(s) - 1`. The strings must have equal length.
- `smallest_chosen_word(prefix, pool, suffix)` – returns `prefix`, then a
  subsequence of `pool` taken in sorted order with increasing positions
  (characters below the first of `suffix`, and characters equal to it when
  `suffix` later continues with a larger one), then `suffix`.
- `super_balanced_length(s)` – twice the number of `(` in the first half of
  `s`.

### `contestkit.sequences`

- `ArithmeticRuns(values)` splits the values into maximal runs with a
  constant step; `.longest(left, right, diff)` returns the longest stretch
  with step `diff` inside the 1-based range `left..right` (at least 1).
- `merge_sorted(a, b)` – merge two sorted sequences; on ties the element of
  `b` comes first.
- `single_number(values)` – the exclusive or of all values, i.e. the value
  appearing an odd number of times when all others appear in pairs.
- `choose_taxi(distance, online_base, online_free, online_rate,
  classic_wait_limit, classic_base, classic_wait_cost, classic_rate)` –
  returns `"Online Taxi"` or `"Classic Taxi"`, whichever is cheaper; the
  online taxi wins ties.

## Example

```python
from contestkit.graphs import nearest_source_distances
from contestkit.sequences import merge_sorted, single_number

print(merge_sorted([1, 4, 7], [2, 3, 9]))   # [1, 2, 3, 4, 7, 9]
print(single_number([5, 1, 5]))             # 1

edges = [(1, 2, 3), (2, 3, 4)]
print(nearest_source_distances(3, edges, [1]))  # [0, 3, 7]
```

## Command line

The `contestkit` command reads whitespace-separated integers from standard
input and prints one answer line per test case:

```
contestkit single-number
contestkit merge-sorted
```

- `single-number`: the number of cases, then for each case a count followed
  by that many values; prints the lone value.
- `merge-sorted`: the number of cases, then for each case `n m`, `n` sorted
  values and `m` sorted values; prints the merged values separated by spaces.

Malformed or short input prints an error to standard error and exits with
status 1.

## Limits

The command covers only the two problems above. The graph, combinatorics,
string and taxi functions are available from Python only; there is no
command that reads their input.
# contestkit

Solutions to a set of competitive programming tasks: tour lengths on a
circle, collinear points, bit-mask searches, graph reachability, component
checks, modular sums, grid flood fills, shortest paths and more.

Each contest lives in its own module, and each task is a plain function
that takes ordinary Python values and returns the answer. A command per
module reads the task's input from standard input and prints the answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the functions

```python
from contestkit.abc160 import shortest_tour
from contestkit.abc181 import square_color, has_collinear_triple
from contestkit.abc292 import count_multi_pattern
from contestkit.abc353 import solve_concat_sum

shortest_tour(20, [5, 10, 15])                      # 10
square_color(4)                                     # "White"
has_collinear_triple([(0, 1), (0, 2), (0, 3)])      # True
count_multi_pattern(4)                              # 3
solve_concat_sum([1, 1])                            # 11
```

Modules and their functions:

| Module   | Functions |
|----------|-----------|
| `abc160` | `shortest_tour` |
| `abc181` | `square_color`, `has_collinear_triple` |
| `abc190` | `winner`, `can_hit`, `max_satisfied`, `count_progressions` |
| `abc197` | `min_xor_of_ors` |
| `abc217` | `is_lexicographically_smaller` |
| `abc254` | `reachable_sums` |
| `abc292` | `shout`, `card_queries`, `count_multi_pattern`, `count_abcd`, `is_component_balanced` |
| `abc343` | `adjacency_lists` |
| `abc353` | `sum_mod_pairs`, `exp_count_maps`, `effect_as_x`, `effect_as_y`, `solve_concat_sum` |
| `arc106` | `find_exponents`, `can_equalize` |
| `past4`  | `middle`, `percentage`, `neighbour_counts`, `ninja_moves`, `swap_non_palindrome`, `kth_frequent`, `count_removable_walls`, `largest_square`, `min_split_diff`, `min_cost` |

Functions raise `ValueError` on input they cannot work with, such as an
empty sequence or a vertex number outside `1..n`; `past4.percentage` raises
`ZeroDivisionError` for a zero divisor. Where a task may have no answer the
function returns `None`: `arc106.find_exponents`,
`past4.swap_non_palindrome`, `past4.kth_frequent` (when the rank is shared)
and `past4.min_cost` (when town 1 cannot be reached).

`contestkit.tokens.read_tokens` splits a text stream into whitespace-separated
tokens and is what the commands use to read their input.

## Command line

Every module has a command that reads the task input from standard input
and prints the answer:

```
printf '20 3\n5 10 15\n' | contestkit-abc160
10
```

Modules holding more than one task take the task's letter as an optional
argument:

| Command              | Tasks          | Default |
|----------------------|----------------|---------|
| `contestkit-abc160`  | one task       |         |
| `contestkit-abc181`  | `a`, `c`       | `a`     |
| `contestkit-abc190`  | `a`–`d`        | `a`     |
| `contestkit-abc197`  | one task       |         |
| `contestkit-abc217`  | one task       |         |
| `contestkit-abc254`  | one task       |         |
| `contestkit-abc292`  | `a`–`d`        | `a`     |
| `contestkit-abc343`  | one task       |         |
| `contestkit-abc353`  | `c`, `d`       | `c`     |
| `contestkit-arc106`  | `a`, `b`       | `a`     |
| `contestkit-past4`   | `a`–`j`        | `a`     |

For example, `contestkit-abc190 d` counts progressions for the number read
from standard input. The answers are printed in the contest's own words:
`Yes`/`No`, `-1` from `contestkit-arc106 a` when no exponents exist, `ERROR`
from `contestkit-past4 b` for a zero divisor, `None` and `AMBIGUOUS` from
`contestkit-past4 e` and `f`, and `18446744073709551615` from
`contestkit-past4 j` when town 1 cannot be reached.

## Limits

The commands read only from standard input; they take no file names and
have no options beyond the task letter and `--help`.
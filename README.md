# studykit

Small, self-contained modules with classic algorithms, integer matrix
arithmetic, freelancer rate sums, Elo ratings kept in a text file, and the
standard thread-synchronisation patterns. It needs nothing beyond the
standard library.

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

| Module | What it offers |
| --- | --- |
| `studykit.pathfinding` | `manhattan`, and `a_star` on a 0/1 grid moving in four directions |
| `studykit.shortest_paths` | `floyd_warshall`, `dijkstra`, `dijkstra_with_predecessors`, `longest_round_trip` on graphs with vertices numbered from 1 |
| `studykit.sequences` | `longest_common_subsequence`, `longest_increasing_subsequence_length` (strictly increasing), `lower_bound`, `upper_bound` |
| `studykit.matrices` | `multiply`, `power_naive`, `power` (repeated squaring); the powers reduce modulo 1000 unless another modulus or `None` is given |
| `studykit.rates` | `daily_rate`, `apply_discount`, `monthly_rate` (rounded up), `days_in_budget` (rounded down) |
| `studykit.calculator` | `Calculator(a, b)` with `add` and `subtract` |
| `studykit.elo` | `elo_rating`, `RatingBook` (`load`, `save`, `add_user`, `rating`, `match`), `generate_dummy_users`, and the errors `UnknownUserError` and `DuplicateUserError` |
| `studykit.text` | `format_fixed` (single-precision value, fixed decimals), `interleave_commas` |
| `studykit.concurrency` | `BoundedBuffer`, `ReadersWriterLock`, `PhilosopherTable`, and the `producer_consumer`, `dining_philosophers` and `readers_writer` runs |

## Examples

```python
from studykit.sequences import longest_common_subsequence, lower_bound, upper_bound
from studykit.calculator import Calculator
from studykit.elo import elo_rating
from studykit.text import interleave_commas

longest_common_subsequence("abcde", "ace")   # 3
lower_bound([1, 3, 5, 7], 2)                 # 1
upper_bound([1, 3, 5, 7], 2)                 # 1
Calculator(3, 2).add()                       # 5
elo_rating(1000, 1000, 1)                    # (1008, 992)
interleave_commas("abc")                     # "a,b,c,"
```

Pathfinding on a grid, where `0` is open and anything else is an obstacle:

```python
from studykit.pathfinding import a_star

grid = [
    [0, 1, 0, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0],
]
path = a_star(grid, (0, 0), (4, 4))  # list of (row, column) cells; empty if unreachable
```

Shortest paths take edges as `(source, target, cost)` triples. Unreachable
vertices come back as `None`:

```python
from studykit.shortest_paths import dijkstra, floyd_warshall

edges = [(1, 2, 4), (1, 3, 1), (3, 2, 2)]
dijkstra(3, edges, 1)        # {1: 0, 2: 3, 3: 1}
floyd_warshall(3, edges)     # [[0, 3, 1], [None, 0, None], [None, 2, 0]]
```

Ratings kept in a plain-text file with one `name score` pair per line:

```python
from studykit.elo import RatingBook

book = RatingBook.load("rating_log.txt")
book.add_user("alice")
book.add_user("bob")
book.match("alice", "bob", 1)   # player 1 won
book.save("rating_log.txt")
```

The concurrency runs return what happened, so they can be checked:

```python
from studykit.concurrency import producer_consumer, dining_philosophers

result = producer_consumer(item_count=100, consumer_count=2)
sorted(result.consumed) == sorted(result.produced)   # True
result.remaining                                      # 0
sum(dining_philosophers(meals=50))                    # 50
```

## Commands

Installing the package provides four commands. Each reads whitespace-separated
input from standard input.

- `studykit-astar` asks for `1` to type a grid (rows, columns, then the cells)
  or any other number to use a built-in 5 by 5 grid, then a start and a goal
  cell, and prints the path found.
- `studykit-shortest-paths ALGORITHM`, where `ALGORITHM` is one of
  - `floyd`: reads `n m` and `m` edges `a b c`, prints the distance table
    (0 for unreachable pairs);
  - `dijkstra`: reads `V E start` and `E` edges, prints one distance per
    vertex (`INF` for unreachable ones);
  - `round-trip`: reads `N M X` and `M` edges, prints the longest shortest
    round trip between any vertex and `X`.
- `studykit-matrix OPERATION`, where `OPERATION` is one of
  - `multiply`: reads `N M`, an N by M matrix, `M K` and an M by K matrix,
    and prints the product;
  - `power` or `power-naive`: reads `N B` and an N by N matrix and prints its
    B-th power modulo 1000.
- `studykit-elo [play|generate] [--log FILE] [--count N]`
  - `play` (the default) loads the rating log (`rating_log.txt` unless
    `--log` says otherwise), asks for `1` to add a user, `2` to record a
    match, or `3` to look up a score, and writes the log back;
  - `generate` appends `--count` (default 20) numbered dummy users with
    random scores from 1000 to 2000 to the log.

The `studykit-elo` prompts and messages are in Korean.

## What it does not do

`studykit.text` and `studykit.calculator` offer functions only; there is no
command for them. The concurrency runs are library calls with no command of
their own and print nothing. `dijkstra_with_predecessors` is not reachable from
`studykit-shortest-paths`.
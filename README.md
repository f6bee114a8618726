# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. It prints every operation it performs, one per line,
on standard output. Replaying those operations on the input sorts stack `a`
in ascending order, with the smallest number on top.

## Installing

```
pip install .
```

## Running

```
push-swap 3 2 1
push-swap "5 4 9 1" 7
push-swap --complex --bench 42 -7 13 0
```

A number may be given as its own argument, or several numbers and flags may
share one argument separated by spaces. Each number is an optional `+` or `-`
followed by ASCII digits, and must fit in a signed 32-bit integer. Duplicates
are rejected. If any argument is invalid or empty, or no argument is given,
the program writes `Error` to standard error and exits with status 1. Input
that is already sorted prints nothing.

### Operations

| name                | effect                                      |
|---------------------|---------------------------------------------|
| `sa`, `sb`, `ss`    | swap the top two elements of a, b, or both  |
| `pa`, `pb`          | move the top of b onto a, or of a onto b    |
| `ra`, `rb`, `rr`    | rotate up: the top goes to the bottom       |
| `rra`, `rrb`, `rrr` | rotate down: the bottom goes to the top     |

### Strategies

- `--simple`: selection sort by repeatedly moving the minimum to `b`, O(n²).
- `--medium`: chunked sort with about √n value ranges, O(n√n).
- `--complex`: binary radix sort on the rank of each value, O(n log n).
- `--adaptive` (the default): picks a strategy from the input's disorder,
  the fraction of inverted pairs. Below 0.2 it uses simple, below 0.5 medium,
  and complex otherwise.

When several strategy flags are given, the last one wins.

### Benchmark

`--bench` additionally writes a summary to standard error: the disorder as a
percentage (truncated to two decimals), the strategy, the total number of
operations, and how often each operation was used. The total counts the
operations on stack a and the combined ones; `sb`, `rb` and `rrb` are listed
but not included in it.

## Using it as a library

```python
import io
from pushswap.stack import Board, compute_disorder
from pushswap.sorting import select_algorithm
from pushswap.parsing import Strategy

values = [3, 1, 2]
out = io.StringIO()
board = Board(values, out)
disorder = select_algorithm(board, Strategy.ADAPTIVE, min(values), max(values))
print(out.getvalue().split())
print(board.total_ops(), disorder, board.a.values())
```

- `pushswap.stack` holds `Stack`, `Board` (stacks `a` and `b` with methods
  `sa` … `rrr` that apply, print and count an operation), and the helpers
  `compute_disorder`, `is_sorted` and `has_duplicates`.
- `pushswap.sorting` holds `simple_sort`, `medium_sort`, `complex_sort`,
  `select_algorithm` and `estimate_sqrt`.
- `pushswap.parsing.parse_arguments` turns command-line words into a
  `ParsedInput` (numbers, `Strategy`, bench flag, running minimum and maximum,
  both starting from zero), raising `ParseError` on invalid input.
- `pushswap.formatting` provides `format_message` and `write_message`, a small
  printf-style formatter supporting `%c %s %p %d %i %u %x %X %D %%`.
- `pushswap.bench.format_bench` builds the benchmark report as a string.
- `pushswap.cli.run` runs the whole program against any output streams and
  returns its exit status.

## What it does not do

The package only produces a list of operations. It has no command for
reading a list of operations back and checking that it sorts a given input.
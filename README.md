# algolabs

A collection of classic algorithms and data structures. Each part is a small
library module plus a command-line tool that reads an input file, runs the
algorithm and prints or writes the result. The package has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it does |
| --- | --- |
| `algolabs.sorting` | In-place sorts of integer lists: `simple_quicksort`, `optimized_quicksort`, `quicksort_with_gathering` and `parallel_quicksort` (threaded), with fixed, random or median-of-three pivots (`PivotStrategy`); also `merge_sort`, `heap_sort`, `bubble_sort`, `selection_sort`, `full_insertion_sort`, and the helpers `is_sorted`, `strategy_name` and `write_sorted` |
| `algolabs.benchmark` | `read_data`, `run_benchmarks` and `format_report`: times several sorting algorithms over the same data and reports averages as `BenchmarkResult` records |
| `algolabs.closest_pair` | `Point`, `PairResult`, `naive_closest_pair` (brute force) and `closest_pair` (divide and conquer), plus `read_points` |
| `algolabs.rbtree` | `RedBlackTree`, whose `insert` returns the insert-fixup cases applied (`"1"` to `"6"`), with `preorder`, `inorder` and `level_order` traversals giving `(key, Color)` pairs |
| `algolabs.interval_tree` | `Interval` and `IntervalTree`, a red-black tree of intervals with `search_overlapping` |
| `algolabs.lcs` | `lcs_standard` (full table, returns an `LcsResult` with one subsequence and its length), `lcs_length_two_rows` and `lcs_length_one_row` |
| `algolabs.huffman` | Huffman codes over the non-whitespace bytes of data: `count_frequencies`, `build_tree`, `build_codes`, `encode`, `format_table` and `fixed_length_bits` |
| `algolabs.scheduler` | `schedule`: optimal assignment of jobs to identical machines by branch and bound, minimising the makespan; returns a `Schedule` |

## Using the library

```python
from algolabs.sorting import PivotStrategy, optimized_quicksort, is_sorted
from algolabs.lcs import lcs_standard
from algolabs.scheduler import schedule

values = [5, 3, 9, 1, 4]
optimized_quicksort(values, PivotStrategy.MEDIAN_OF_THREE, 10)
assert is_sorted(values)

result = lcs_standard("ABCBDAB", "BDCABA")
print(result.sequence, result.length)

plan = schedule([2, 14, 4, 16, 6, 5, 3], 3)
print(plan.makespan, plan.plan)  # plan.plan lists job indices per machine
```

The sorting functions sort the list they are given in place and return
nothing.

## Commands

Each command works on input files in the current directory by default.

- `algolabs-sort [DATA] [-o OUTPUT] [-r RUNS]` reads `data.txt` (first line:
  the number of values, second line: the values), times each sorting
  algorithm over `RUNS` runs (10 by default) and writes the result of the
  threaded quicksort to `sorted.txt`.
- `algolabs-closest-pair [DATA]` reads `data.txt` with one point per line
  (`id x y`) and prints the closest pair found by both the brute-force and the
  divide-and-conquer algorithm, with their running times.
- `algolabs-rbtree [INPUT] [-d DIR]` reads `insert.txt` (a count followed by
  the keys), prints the sequence of fixup cases and writes the preorder,
  inorder and level-order traversals to `NLR.txt`, `LNR.txt` and `LOT.txt`
  in `DIR` (the current directory by default).
- `algolabs-interval-tree [INPUT] [-q LOW HIGH]` reads `insert.txt` (a count
  followed by `low high` pairs) and lists the stored intervals that overlap
  the query; without `-q` it reads the query from standard input.
- `algolabs-lcs [TEXT1 TEXT2]` takes two strings as arguments, or reads them
  from standard input, and prints their longest common subsequence and the
  lengths computed by all three methods.
- `algolabs-huffman [INPUT] [-t TABLE] [-e ENCODED]` reads `orignal.txt`,
  writes the code table to `table.txt` and the bit string to `encoded.txt`,
  and prints the compression ratio against a fixed-length code.
- `algolabs-schedule [FILE ...]` reads `test1.txt`, `test2.txt` and
  `test3.txt` by default (first line `n m`, then the `n` job durations) and
  prints the best makespan and the job assignment for each.

## What it does not do

- The red-black tree and the interval tree support insertion and queries
  only; there is no deletion.
- The Huffman tool only encodes: there is no decoder, and the bit string is
  written as text of `0` and `1` characters, not packed into bytes.
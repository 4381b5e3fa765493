# algonotes

A collection of classic data structures and algorithms, written as plain,
readable Python with no dependencies beyond the standard library. Each module
covers one topic and can be used on its own, either to study how an algorithm
works or to drop into a script.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.searching` | `linear_search`, `sentinel_linear_search`, `binary_search_index`, `binary_search`, `lower`, `upper`, and edits on lists: `insert_sorted`, `remove_last_sorted`, `remove_all_sorted`, `remove_last_unsorted` |
| `algonotes.linked` | `Node`, `build_list`, `to_list`, `reverse`, `has_cycle`, `middle_fast_slow`, `middle_by_count`, and four ways to find the k-th node from the end: `count_and_find`, `front_and_back`, `updated_front_and_back`, `mod_updated_front_and_back` |
| `algonotes.collatz` | `collatz_length` and the memoizing `CollatzMemo` |
| `algonotes.radix` | `to_base` and `to_base_reversed` for bases 2 to 16 |
| `algonotes.sorting` | `insertion_sort`, `merge_sort`, `quicksort`, `randomized_quicksort`, `three_way_quicksort`, `counting_sort`, `bucket_sort`, `histogram_sort`, `radix_sort_strings`, `partition_lomuto`, `quickselect`, `merge_sorted` |
| `algonotes.heaps` | `swim` and `sink` on a heap stored from index 1, and `multiway_merge` |
| `algonotes.huffman` | `huffman_codes` from a list of weights |
| `algonotes.simulation` | `Event` and `simulate`, a discrete event simulation of buses along a line of stations |
| `algonotes.binary_tree` | `Node`, the four traversals, `tree_generation`, `left_most`, `right_most`, `next_position`, `prev_position`, `rebuild` from pre-order and in-order, and `construct_from_numbers` / `scan_construct_from_numbers` from heap numbering |
| `algonotes.disjoint_sets` | `DisjointSets` with union by rank and path compression |
| `algonotes.trie` | `Trie`, a character trie for whole-word membership |
| `algonotes.graph` | `transpose` of an adjacency list; `index_pairs` to number named vertices |
| `algonotes.brackets` | `validate_brackets` for `()`, `[]`, `{}`; `generalized_validate` with custom pairs, returning a `Status` |
| `algonotes.maze` | `Point`, `solve_with_stack`, `solve_with_stack_alternative` (depth-first) and `solve_with_queue` (breadth-first, shortest path) |
| `algonotes.ring_buffer` | `RingBuffer`, a fixed-capacity circular queue |
| `algonotes.bits` | `rotate_left` and `rotate_right` within a fixed bit width |
| `algonotes.matrix` | `diagonal_matrix`, a square matrix with one value on the diagonal and another elsewhere |

The sorting functions take any iterable and return a new sorted list;
`partition_lomuto` and `quickselect` rearrange the list they are given.
Invalid input, such as a value outside the range a counting or bucket sort
accepts, raises `ValueError`.

## A few examples

```python
from algonotes.searching import lower, upper
from algonotes.brackets import validate_brackets
from algonotes.collatz import collatz_length
from algonotes.radix import to_base
from algonotes.trie import Trie
from algonotes.sorting import quicksort

data = [1, 2, 2, 2, 3]
lower(2, data)   # 1, first position not less than 2
upper(2, data)   # 4, first position greater than 2

validate_brackets("([]{})")   # True
validate_brackets("([)]")     # False

collatz_length(6)   # 9: 6 3 10 5 16 8 4 2 1

to_base(255, 16)    # 'FF'
to_base(-5, 2)      # '-101'

quicksort([2, 1, 3, 4, 5])   # [1, 2, 3, 4, 5]

trie = Trie(["Apple", "X-Men", "42", "Algorithm", "Algorithms"])
"Algorithm" in trie   # True
"Pencil" in trie      # False
```

## Command-line tools

Three commands are installed with the package.

Convert an integer into a base between 2 and 16. The result is printed
twice, once by each conversion method:

```
algonotes-radix 255 16
```

Print the Huffman code of every letter of the English alphabet, built from
typical letter frequencies:

```
algonotes-huffman
```

Run the bus simulation and print each event as it is handled; `--seed`
makes the random delays repeatable:

```
algonotes-simulate --seed 1
```

## Not included

The package has no hash table implementations and no interval-counting or
set exercises; Python's own `dict` and `set` cover those needs.
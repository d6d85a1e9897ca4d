# algodrills

A collection of classic algorithm exercises as plain Python functions. Each
function takes ordinary Python values and returns its answer. None of them
read input or print output. The package has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

## Modules

### `algodrills.arrays`

- `max_index_diff(values)`: the largest `j - i` with `values[i] <= values[j]`.
  Raises `ValueError` for an empty input.
- `pair_nuts_and_bolts(nuts, bolts)`: the kinds found in both inputs, sorted.
- `closest_to_zero_sum(values)`: the sum of the two elements whose sum is
  closest to zero. Raises `ValueError` for fewer than two values.
- `wave_array(values)`: the sorted values rearranged as `a0 >= a1 <= a2 >= ...`.
- `majority_element(values)`: the element that occurs more than half the
  time, or `None`.
- `smallest_missing_positive(values)`: the smallest positive integer that is
  not in the input.
- `reverse_in_place(values)`: reverses a mutable sequence.
- `deque_demo()`: runs a fixed series of deque operations and returns a dict
  with the keys `front`, `back`, `index1`, `index2`, `empty` and `size`.

### `algodrills.strings`

- `excel_column(n)`: the spreadsheet column title for column `n`.
- `find_substring(text, pattern)`: the index of the first match found with
  the Knuth–Morris–Pratt search, or `-1`. An empty pattern matches at 0.
- `longest_unique_substring(s)`: the length of the longest substring with no
  repeated character.
- `to_roman(n)`: `n` in Roman numerals. Zero or less gives `""`.
- `is_alnum_palindrome(s)`: whether the ASCII letters and digits of `s` read
  the same both ways, ignoring case.
- `string_ignorance(s)`: keeps a character only when its lower-case form has
  been seen an even number of times before it.
- `is_rotation(s1, s2)`: whether `s2` is a rotation of `s1`.

### `algodrills.graph`

- `path_exists(grid)`: whether the source cell (1) reaches a destination cell
  (2) through cells that are not walls (0). Raises `ValueError` if there is no
  source.
- `snake_ladder_min_throws(jumps)`: the fewest die throws from cell 1 to
  cell 30. `jumps` maps the foot of a ladder or the head of a snake to where
  it leads, as a mapping or as `(from, to)` pairs. Returns `None` if cell 30
  cannot be reached.

### `algodrills.greedy`

- `spanning_tree_weight(graph)`: the weight of a minimum spanning tree of a
  square adjacency matrix, where 0 means no edge. Vertices that vertex 0
  cannot reach add nothing.
- `merge_sorted(left, right)` and `merge_sort(values)`.
- `max_meetings(starts, ends)`: the 1-based positions of a largest set of
  non-overlapping meetings, chosen by earliest end.
- `activity_selection(starts, ends)`: how many non-overlapping activities
  can be attended.

### `algodrills.backtracking`

- `n_queens(n)`: every solution, each listing the 1-based row of the queen in
  each column, in lexicographic order. Gives `[]` when there is no solution.
- `boggle_words(dictionary, board)`: the dictionary words, sorted, that can be
  traced through adjacent cells, including diagonal ones, without reusing a
  cell.
- `rat_in_maze_paths(maze)`: every path, sorted, from the top-left to the
  bottom-right of a square 0/1 maze, written with the moves `U`, `D`, `L` and
  `R`.

### `algodrills.heaps`

- `ListNode`, a linked-list node that iterates over its values, and
  `to_linked_list(values)`.
- `merge_k_sorted_lists(heads)`: merges sorted linked lists by relinking
  their nodes.
- `running_medians(values)`: the median after each value. With an even count
  the two middle values are averaged and truncated toward zero.
- `sort_nearly_sorted(values, k)`: sorts input in which each element is at
  most `k` places out of position.
- `kth_largest_stream(values, k)`: after each value, the k-th largest so far,
  or `None` until `k` values have arrived.
- `kth_smallest(values, k)`: the 1-based k-th smallest value.
- `MaxHeap`: `insert(value)` and `delete_max()`, which raises `IndexError` on
  an empty heap. `len()` gives the size and iteration yields the values in
  array order.
- `heap_sort(values)`: a new ascending list.

## Examples

```python
from algodrills.strings import excel_column, to_roman, find_substring
from algodrills.heaps import MaxHeap, heap_sort
from algodrills.greedy import merge_sort

excel_column(28)                        # 'AB'
to_roman(1994)                          # 'MCMXCIV'
find_substring("geeksforgeeks", "for")  # 5

heap = MaxHeap()
for value in (10, 30, 20, 50):
    heap.insert(value)
heap.delete_max()                       # 50
len(heap)                               # 3

heap_sort([10, 50, 30, 20, 5, 80])      # [5, 10, 20, 30, 50, 80]
merge_sort([3, 1, 2])                   # [1, 2, 3]
```

## What it does not do

The package is a library only. It has no command-line program and does not
read test cases from standard input. Call the functions from your own code.

## Running the tests

```
pip install ".[test]"
pytest
```
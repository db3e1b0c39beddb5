# dsakit

Classic data structures and algorithms in plain Python, using only the
standard library.

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `bubble_sort_adaptive`, `bubble_sort_recursive`, `insertion_sort`, `insertion_sort_recursive`, `selection_sort`, `selection_sort_recursive`, `merge_sort`, `quick_sort`, `heap_sort`, and the in-place helpers `partition` and `heapify` |
| `dsakit.arrayops` | `insert_at` (raises `CapacityError` when the array is at capacity, default 100), `delete_at`, `linear_search`, `binary_search`, `max_subarray_sum` |
| `dsakit.matrix` | `add`, `subtract`, `multiply`, `transpose`, `lower_triangular`, `upper_triangular`, `format_matrix` |
| `dsakit.graph` | `Graph` with `add_edge`, `neighbors`, `bfs` and `dfs`; `bfs_matrix` and `dfs_matrix` for adjacency matrices |
| `dsakit.queues` | `LinearQueue` and `CircularQueue`, raising `QueueFullError` and `QueueEmptyError` |
| `dsakit.stacks` | `Stack` (default size 10) and `DoubleStack` (default size 5) addressed by `Side.LOW` / `Side.HIGH`, raising `StackOverflowError` and `StackUnderflowError` |
| `dsakit.recursion` | `factorial`, `fibonacci`, `fibonacci_series`, `gcd`, `reverse_string`, `tower_of_hanoi` |
| `dsakit.cli` | the `dsakit` command and `format_array` |

## Installation

```
pip install dsakit
```

With the test extra:

```
pip install "dsakit[test]"
pytest
```

## Usage

```python
from dsakit.arrayops import binary_search
from dsakit.matrix import transpose
from dsakit.recursion import factorial, tower_of_hanoi
from dsakit.sorting import quick_sort

factorial(5)                                               # 120
binary_search([1, 3, 5, 56, 64, 73, 123, 225, 444], 444)   # 8
transpose([[1, 2, 3], [4, 5, 6]])                          # [[1, 4], [2, 5], [3, 6]]
quick_sort([9, 4, 4, 8, 7, 5, 6])                          # [4, 4, 5, 6, 7, 8, 9]
list(tower_of_hanoi(2))                                    # [(1, 's', 'a'), (2, 's', 'd'), (1, 'a', 'd')]
```

Notes on behaviour:

- Every sort takes any iterable and returns a new ascending list; the input is
  left unchanged. `partition` and `heapify` work in place on a list.
- `binary_search` expects an ascending sequence; both searches return `-1`
  when the element is absent. `max_subarray_sum` raises `ValueError` on an
  empty input.
- Matrix functions take lists of rows and raise `ValueError` for ragged rows,
  mismatched orders, or (for the triangular parts) non-square matrices.
- `Graph` adjacency lists keep the most recently added neighbour first, and
  traversals follow that order; the matrix traversals visit neighbours by
  ascending index.
- A `LinearQueue` accepts at most `capacity` elements over its whole life,
  since dequeued slots are not reused. A `CircularQueue` of `size` slots holds
  at most `size - 1` elements at a time.
- A `DoubleStack` holds at most `size` elements across both sides.
- `gcd` raises `ValueError` when the second number is zero; `factorial`,
  `fibonacci` and `fibonacci_series` raise it for negative arguments.

## Command line

```
dsakit --method quick 5 3 9 1
```

prints `1 3 5 9`. `--method` is one of `bubble` (the default), `heap`,
`insertion`, `merge`, `quick`, `reverse-selection` or `selection`.

Run without numbers, `dsakit` reads an array size and that many integers from
standard input, then offers a menu: 1 bubble sort, 2 selection sort,
3 reversed selection sort, 4 insertion sort, 5 exit. After each choice it
prints the sorted array; any other choice prints `Wrong choice!`. The menu
also ends at the end of input. Malformed input ends the command with an error
message and exit status 1.

## Limits

The command line only sorts integers; the other modules are available as a
library and have no command of their own.
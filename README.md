# dsakit

A small, dependency-free collection of classic data structures and
algorithms, written for learning and for reading. Every routine is a plain
function or class; sorting functions return new lists and leave their input
alone.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `merge_sort`, `selection_sort`, `bubble_sort`, `cocktail_sort`, `insertion_sort`, `quicksort`, `quicksort_first_pivot`, `heap_sort`, `count_inversions`, `merge_sorted`, `benchmark_quicksort`, `QuickSortTiming` |
| `dsakit.searching` | `binary_search`, `count_at_most` |
| `dsakit.arrays` | `four_sum`, `next_permutation`, `permutations`, `largest`, `longest_zero_run`, `with_longest_zero_run`, `swap_contents`, `count_keys`, `count_from` |
| `dsakit.numeric` | `determinant`, `factorial`, `factorial_digits`, `sum_of_factorials`, `matrix_multiply`, `fractional_knapsack` |
| `dsakit.strings` | `is_palindrome`, `reverse`, `is_balanced` |
| `dsakit.containers` | `RingDeque`, `CircularList`, `BoundedBuffer` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.graphs` | `Graph` (with breadth-first search), `Edge`, `kruskal`, `format_spanning_tree` |
| `dsakit.records` | `Employee`, `highest_paid` |

## Examples

### Sorting

```python
from dsakit.sorting import merge_sort, count_inversions, merge_sorted

merge_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
count_inversions([2, 4, 1, 3, 5])   # 3
merge_sorted([1, 4, 9], [2, 3, 10]) # [1, 2, 3, 4, 9, 10]
```

`quicksort` partitions around the last element, `quicksort_first_pivot`
around the first. `benchmark_quicksort(sizes)` times the first-pivot
version on ascending, random and descending input of each size and returns
a list of `QuickSortTiming` records (`size`, `best`, `average`, `worst`, in
microseconds).

### Searching

```python
from dsakit.searching import binary_search, count_at_most

binary_search([1, 3, 5, 7, 9], 7)   # 3
binary_search([1, 3, 5, 7, 9], 4)   # None
count_at_most([5, 1, 3, 3, 8], 3)   # 3
```

### Arrays

```python
from dsakit.arrays import four_sum, next_permutation, permutations, longest_zero_run

four_sum([1, 0, -1, 0, -2, 2], 0)
# [[-2, -1, 1, 2], [-2, 0, 0, 2], [-1, 0, 0, 1]]

next_permutation([1, 2, 3])   # [1, 3, 2]
next_permutation([3, 2, 1])   # [1, 2, 3]

list(permutations([1, 2, 3]))
# [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 2, 1], [3, 1, 2]]

longest_zero_run(20)          # 2   (binary 10100)
```

### Numeric helpers

```python
from dsakit.numeric import determinant, factorial, fractional_knapsack, matrix_multiply

determinant([[1, 2], [3, 4]])                          # -2
factorial(5)                                           # 120
matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])    # [[19, 22], [43, 50]]
fractional_knapsack([(10, 60), (20, 100), (30, 120)], 50)   # 240.0
```

`matrix_multiply` raises `ValueError` when the shapes do not fit, and
`fractional_knapsack` takes `(weight, profit)` pairs.

### Strings

```python
from dsakit.strings import is_balanced, is_palindrome, reverse

is_balanced("[4-6]((8){(9-8)})")   # True
is_balanced("(]")                  # False
is_palindrome("Level")             # True
reverse("abc")                     # "cba"
```

### Binary search tree

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree()
for key in (50, 30, 70, 20, 40):
    tree.insert(key)

40 in tree          # True
list(tree)          # [20, 30, 40, 50, 70]
tree.minimum()      # 20
tree.maximum()      # 70
tree.successor(40)  # 50
tree.predecessor(20)  # None
tree.delete(30)     # True
list(tree)          # [20, 40, 50, 70]
```

`successor` and `predecessor` raise `KeyError` for a key that is not in the
tree; `minimum` and `maximum` raise `ValueError` on an empty tree.

### Containers

```python
from dsakit.containers import RingDeque, CircularList, BoundedBuffer

ring = RingDeque(7)
ring.push_back(1)
ring.push_front(0)
list(ring)          # [0, 1]
ring.pop_back()     # 1

circle = CircularList()
for value in (1, 2, 3):
    circle.insert_front(value)
list(circle)        # [3, 2, 1]

buffer = BoundedBuffer(3)
buffer.produce()    # 1
buffer.produce()    # 2
buffer.consume()    # 2
```

A full `RingDeque` or `BoundedBuffer` raises `OverflowError`; taking from an
empty one raises `IndexError`.

### Graphs

```python
from dsakit.graphs import Graph, kruskal, format_spanning_tree

graph = Graph(6)
for src, dest in [(0, 1), (0, 2), (1, 2), (1, 4), (1, 3), (2, 4), (3, 4)]:
    graph.add_edge(src, dest)
graph.bfs(0)        # [0, 2, 1, 4, 3]

matrix = [
    [0, 4, 4, 0],
    [4, 0, 2, 0],
    [4, 2, 0, 3],
    [0, 0, 3, 0],
]
edges = kruskal(matrix)
print(format_spanning_tree(edges))
#
# C - B : 2
# D - C : 3
# B - A : 4
# Spanning tree cost: 9
```

### Records

```python
from dsakit.records import Employee, highest_paid

staff = [
    Employee("Ada", "ACC-0001", 5000),
    Employee("Ben", "ACC-0002", 7000),
]
highest_paid(staff).name   # "Ben"
```

## What it does not do

dsakit is a library only. It installs no commands and has no interactive
menus or prompts: every routine takes its input as arguments and returns its
result, and printing is left to the caller. Nothing reads or writes files;
`format_spanning_tree` returns its report as a string, and
`benchmark_quicksort` returns timing records rather than printing a table.
# dsakit

A small library of classic data-structure and algorithm routines. It has no
runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Modules

### `dsakit.linkedlist`

`ListNode` is a singly linked list node (`val`, `next`). Nodes compare by
identity, and iterating over a node yields it and every node after it,
raising `ValueError` if the chain loops. `build_list(values)` builds a list
and returns its head (`None` when empty); `list_values(head)` reads it back.

- `add_two_numbers(l1, l2)`: adds two numbers stored as reversed digit lists.
- `remove_nth_from_end(head, n)`: unlinks the n-th node from the end; raises
  `ValueError` if `n` is below 1 or longer than the list.
- `merge_two_lists(list1, list2)`: splices two sorted lists, reusing their
  nodes; on ties the node from `list1` comes first.
- `rotate_right(head, k)`: rotates right by `k` places (a negative `k` leaves
  the list unchanged).
- `has_cycle(head)` and `detect_cycle(head)`: cycle detection, the latter
  returning the node where the cycle begins.
- `get_intersection_node(head_a, head_b)`: the first node shared by both lists.
- `reverse_list(head)`: reverses in place and returns the new head.
- `is_palindrome(head)`: checks the values, leaving the list as it was found.
- `delete_node(node)`: removes a node by taking over its successor; raises
  `ValueError` for the last node.
- `middle_node(head)`: the middle node, the second of two for even lengths.

### `dsakit.randomlist`

`RandomNode` carries `val`, `next` and a `random` link to any node of the list
or `None`. `copy_random_list(head)` makes a deep copy with both links remapped.

### `dsakit.tree`

`TreeNode` is a binary tree node (`val`, `left`, `right`), compared by
identity. `build_tree(values)` builds a tree from a level-order list with
`None` for missing children.

- `inorder_traversal`, `preorder_traversal` (threaded traversals that restore
  the tree before returning) and `postorder_traversal`.
- `level_order` and `zigzag_level_order`.
- `is_same_tree(p, q)` and `is_balanced(root)`.
- `lowest_common_ancestor(root, p, q)`: nodes are matched by identity, and a
  node counts as its own descendant.
- `width_of_binary_tree(root)`: the widest level counting the gaps between its
  end nodes; 0 for an empty tree.
- `vertical_traversal(root)`: columns left to right, ordered by depth and then
  by value within a column.

### `dsakit.caches`

`LRUCache(capacity)` and `LFUCache(capacity)` with `get(key)` and
`put(key, value)`. Keys may be any hashable value; `get` returns `-1` for a
missing key. The LFU cache breaks frequency ties by evicting the least
recently used key, and a capacity of 0 stores nothing. Both support `len()` and
`in`, and raise `ValueError` for a negative capacity.

### `dsakit.stacks`

- `MinStack`: `push`, `pop`, `top` and `get_min` in constant time.
- `QueueStack`: a stack kept in one queue (`push`, `pop`, `top`, `is_empty`).
- `StackQueue`: a queue kept in two stacks (`push`, `pop`, `peek`, `is_empty`).
- `StockSpanner`: `next(price)` returns how many consecutive days up to today
  had a price no higher than today's.

Reading from an empty container raises `IndexError`; `MinStack.pop` on an
empty stack does nothing.

### `dsakit.arrays`

- `three_sum(nums)`: every distinct zero-sum triple, each sorted.
- `remove_duplicates(nums)`: compacts a sorted list in place and returns the
  number of distinct values.
- `trap(height)`: water held by an elevation profile.
- `find_max_consecutive_ones(nums)`: the longest run of 1s.
- `next_greater_element(nums1, nums2)`: for each value of `nums1`, the first
  larger value after it in `nums2`, or `-1`.

### `dsakit.strings`

- `longest_common_prefix(strs)`.
- `is_valid_parentheses(s)`: checks `()`, `[]` and `{}` nesting.
- `find_first(haystack, needle)`: index of the first occurrence or `-1`; an
  empty needle gives `-1`.
- `count_and_say(n)`: raises `ValueError` for `n` below 1.
- `compare_version(version1, version2)`: returns -1, 0 or 1; raises
  `ValueError` for a revision that is not a number.
- `is_anagram(s, t)`.

### `dsakit.backtracking`

- `solve_sudoku(board)`: fills the `"."` cells of a 9x9 board of one-character
  strings in place and returns `True`, or returns `False` leaving the board as
  it was. Raises `ValueError` for a board that is not 9 by 9.
- `permute(nums)`: every ordering of `nums`.
- `solve_n_queens(n)`: every placement as a list of row strings of `"Q"` and
  `"."`.
- `get_permutation(n, k)`: the k-th lexicographic permutation of 1..n as a
  string of digits.

### `dsakit.grid`

`oranges_rotting(grid)`: minutes until no fresh orange (1) is left as rot (2)
spreads to the four neighbours, or `-1` if one never rots. Empty cells are 0.

## Examples

```python
from dsakit.linkedlist import build_list, list_values, add_two_numbers

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))  # [7, 0, 8]
```

```python
from dsakit.tree import build_tree, level_order, zigzag_level_order

root = build_tree([3, 9, 20, None, None, 15, 7])
print(level_order(root))         # [[3], [9, 20], [15, 7]]
print(zigzag_level_order(root))  # [[3], [20, 9], [15, 7]]
```

```python
from dsakit.caches import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)       # 1
cache.put(3, 3)    # evicts key 2
cache.get(2)       # -1
```

```python
from dsakit.strings import compare_version, count_and_say

compare_version("1.01", "1.001")  # 0
count_and_say(4)                  # "1211"
```

```python
from dsakit.backtracking import solve_n_queens, get_permutation

solve_n_queens(4)      # two boards, each a list of strings
get_permutation(3, 3)  # "213"
```

## What it does not do

dsakit is a library only: it has no command-line tool, and nothing is stored
beyond the objects you create.

## Running the tests

```
pytest
```
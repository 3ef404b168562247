# listwork

Algorithms on singly linked lists, plus a few matrix and arithmetic helpers.
It has no dependencies outside the standard library and needs Python 3.10 or
later.

## Installing

```
pip install .
```

## Linked lists

Lists are chains of `ListNode` objects (`listwork.node`). A node has a `val`
(default `0`) and a `next` (default `None`). Nodes compare by identity, not by
value, so shared and cyclic structure can be told apart. Iterating over a
node yields the values from that node to the end of the list.

`from_values` builds a chain from any iterable of values (an empty one gives
`None`), `to_values` turns a chain back into a Python list (`None` gives
`[]`), and `walk` yields the nodes themselves.

```python
from listwork.node import from_values, to_values
from listwork.transform import reverse_list, rotate_right, partition
from listwork.merging import sort_list
from listwork.cycles import middle_node, has_cycle

print(to_values(sort_list(from_values([4, 2, 1, 3]))))            # [1, 2, 3, 4]
print(to_values(reverse_list(from_values([1, 2, 3]))))            # [3, 2, 1]
print(to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 2)))   # [4, 5, 1, 2, 3]
print(to_values(partition(from_values([1, 4, 3, 2, 5, 2]), 3)))  # [1, 2, 2, 4, 3, 5]
print(middle_node(from_values([1, 2, 3, 4, 5])).val)             # 3
print(has_cycle(from_values([1, 2, 3])))                          # False
```

### `listwork.cycles`

- `has_cycle(head)`: whether the list loops back on itself.
- `detect_cycle(head)`: the node where the cycle begins, or `None`.
- `middle_node(head)`: the middle node; for an even length, the second of
  the two middle nodes.
- `intersection_node(head_a, head_b)`: the first node shared by both lists,
  or `None`.

### `listwork.merging`

- `merge_two_lists(first, second)`: merge two sorted lists; on equal values
  the node from `first` comes first.
- `merge_k_lists(lists)`: merge any number of sorted lists by pairing them
  off from the front; an empty collection gives `None`.
- `sort_list(head)`: merge sort.

### `listwork.transform`

- `reverse_list(head)`: reverse in place and return the new head.
- `is_palindrome(head)`: whether the values read the same both ways; the
  list is left as it was found.
- `remove_nth_from_end(head, n)`: remove the `n`-th node from the end; if
  `n` is at least the length, the head is removed. Raises `ValueError` for
  `n < 1` or an empty list.
- `delete_node(node)`: remove a node given only that node, by copying the
  next node into it. Raises `ValueError` for the last node of a list.
- `rotate_right(head, k)`: rotate `k` places to the right. Raises
  `ValueError` for negative `k`.
- `delete_duplicates(head)`: collapse runs of equal adjacent values to one
  node.
- `partition(head, x)`: put nodes with values below `x` before the rest,
  keeping the relative order within each part.

These functions relink the nodes they are given instead of copying them, so
keep using the returned head rather than the one passed in.

## Matrices

`listwork.matrix`:

- `generate_matrix(n)`: an `n` x `n` matrix holding 1 to `n*n` in clockwise
  spiral order.
- `spiral_matrix(m, n, head)`: the list's values laid into an `m` x `n`
  matrix in spiral order; cells left over hold `-1`, and values beyond the
  matrix's size are ignored.
- `transpose(matrix)`: the transpose of a non-empty rectangular matrix.

Negative sizes, an empty matrix or ragged rows raise `ValueError`.

```python
from listwork.matrix import generate_matrix, spiral_matrix, transpose
from listwork.node import from_values

generate_matrix(3)        # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]
spiral_matrix(2, 3, from_values([1, 2, 3, 4]))  # [[1, 2, 3], [-1, -1, 4]]
transpose([[1, 2, 3], [4, 5, 6]])               # [[1, 4], [2, 5], [3, 6]]
```

## Arithmetic

`listwork.arith`:

- `corp_flight_bookings(bookings, n)`: total seats on each of flights 1 to
  `n`, where each booking is `(first, last, seats)` covering flights
  `first` to `last` inclusive. Raises `ValueError` for a negative `n` or a
  booking range outside `1..n`.
- `is_prime(n)`: whether `n` is prime.
- `min_steps(n)`: the fewest copy-all and paste steps needed to end up with
  `n` characters starting from one.

```python
from listwork.arith import corp_flight_bookings, min_steps, is_prime

corp_flight_bookings([[1, 2, 10], [2, 3, 20], [2, 5, 25]], 5)
# [10, 55, 45, 25, 25]
min_steps(3)    # 3
is_prime(7)     # True
```

## What it does not do

The package is a library only: it has no command-line program, and it does
not read or store lists anywhere.

## Running the tests

```
pip install .[test]
pytest
```
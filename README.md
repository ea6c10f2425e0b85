# algoshelf

Classic algorithms and data structures written as plain, readable Python,
with no third-party dependencies.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algoshelf.sorting`

Each function takes any iterable and returns a new sorted list. The input
is left as it was.

- `bubble_sort(values)`: stops early once a pass makes no swaps.
- `insertion_sort(values)`
- `heap_sort(values)`: builds a max-heap by insertion, then drains it.
- `merge_sort(values)`: stable, top-down.
- `counting_sort(values)`: non-negative integers only. Negative input
  raises `ValueError`.
- `radix_sort(values)`: base-10 least-significant-digit sort. It takes
  non-negative integers only and raises `ValueError` for negative input.

### `algoshelf.searching`

The searches that return an index give `None` when the key is absent.

- `binary_search(values, key)` and `recursive_binary_search(values, key)`
  work on an ascending sequence.
- `linear_search(values, key)` returns the index of the first match.
- `recursive_linear_search(values, key)` searches from the end and returns
  the index of the last match.
- `sorted_contains(values, key)` returns `True` or `False` for an ascending
  sequence.

### `algoshelf.expressions`

- `infix_to_postfix(expression)`: operands are single ASCII letters or
  digits. The operators are `+ - * / % ^`, and operators of equal
  precedence associate to the left.
- `infix_to_prefix(expression)`: any character that is not an operator or
  a parenthesis counts as an operand. `^` associates to the right and the
  other operators to the left.

Both raise `ExpressionError` (a `ValueError`) for unmatched parentheses.
`infix_to_postfix` also raises it for unexpected characters.

### `algoshelf.arrays`

- `left_rotate(values, d)` returns a new list rotated `d` places to the
  left.
- `wave_order(matrix)` reads a matrix column by column, going down and up
  in turn.
- `to_binary(number)` returns the binary digits of a non-negative integer.
- `is_composite(n)` reports whether `n` has a divisor other than 1 and
  itself.
- `fibonacci_twist(n)` returns the first `n` terms of a Fibonacci sequence.
  The first term is 1. After that, a term stays only when it is composite
  and not a multiple of 5. Any other term is replaced by 0.

### `algoshelf.yearcalendar`

- `day_of_week(day, month, year)` returns 0 for Sunday through 6 for
  Saturday. `month` runs from 1 to 12.
- `month_name(month_index)` and `days_in_month(month_index, year)` take 0
  for January.
- `format_calendar(year)` renders the whole year as text, one block per
  month.

### `algoshelf.linkedlists`

- `DoublyLinkedList` has `insert_front`, `insert_end` and
  `insert_after(node, data)`. Each of them returns the new `Node`. Iterating
  the list yields the stored data. `format()` renders the list as
  `10<==>20<==>NULL`.
- `IntrusiveList` has `push_front`, `pop_front` (which raises `IndexError`
  when the list is empty), iteration and `len()`.
- `Person` is a record with `name`, `age`, `weight` and `height`, and a
  `format()` method.

### `algoshelf.queues`

- `ArrayQueue(size=100)` is a linear queue over a fixed number of slots.
  Each slot is used only once: after `size` enqueues the queue reports
  full, even if values have been dequeued since.
  - `enqueue` raises `QueueFullError` when the queue is full.
  - `dequeue` raises `QueueEmptyError` when the queue is empty.
  - Iterating yields the queued values from rear to front.

### `algoshelf.trees`

- `TreeNode(data, left=None, right=None)`
- `inorder(root)` and `level_order(root)` return lists of values.
- `sum_at_level(root, k)` sums the values on level `k`, with the root at
  level 0. Levels below the bottom of the tree give 0. An empty tree
  raises `ValueError`.

### `algoshelf.graphs`

Graphs are square matrices of non-negative weights, where 0 means there
is no edge.

- `dijkstra(graph, source)` returns the shortest distance to every vertex.
  Unreachable vertices get `math.inf`.
- `greedy_tsp(distances, start=0)` always moves to the nearest unvisited
  city. Ties go to the lower-numbered city. It returns a `TourResult`
  whose `path` ends back at `start`, and whose `cost` includes that
  closing leg.

## Examples

```python
from algoshelf.sorting import merge_sort
from algoshelf.searching import binary_search
from algoshelf.expressions import infix_to_postfix, infix_to_prefix

merge_sort([12, 11, 13, 5, 6, 7])          # [5, 6, 7, 11, 12, 13]
binary_search([1, 3, 5, 7], 5)             # 2
binary_search([1, 3, 5, 7], 4)             # None

infix_to_postfix("a+b*c-d/e*h")            # "abc*+de/h*-"
infix_to_prefix("a+(b+c*d)-e/f+(g-h)/i")   # "+-+a+b*cd/ef/-ghi"
```

```python
from algoshelf.linkedlists import DoublyLinkedList

items = DoublyLinkedList()
items.insert_end(40)
second = items.insert_front(20)
items.insert_front(10)
items.insert_end(50)
items.insert_after(second, 30)
items.format()                             # "10<==>20<==>30<==>40<==>50<==>NULL"
```

## Command line

The package installs one command. It prints the calendar of a year:

```
algoshelf-calendar 2024
```

If you leave out the year, the command asks for one on standard input.

## What it does not do

The calendar is the only command. Every other routine is a library
function or class to call from Python. There are no interactive prompts
for them.
# dsakit

Classic data-structure and algorithm exercises as plain Python functions.
Each function takes ordinary Python values (ints, lists, strings, lists of
lists) and returns a result; nothing is printed and nothing is read from
standard input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.numbers`

- `mod_factorial(num)`: `num!` modulo `10**9 + 7` (1 for `num < 2`).
- `count_set_bits(n)`: number of 1 bits; `ValueError` for negative `n`.
- `counting_bits(n)`: set-bit counts for every integer `0..n`.
- `fast_power(num, k)`: `num ** k` by repeated squaring; `k` must be at least 1.
- `fibonacci(n)`: the n-th Fibonacci number, 0 for `n <= 0`.
- `is_happy(n)`: whether summing squared digits repeatedly reaches 1.
- `phone_combinations(digits)`: every letter string a keypad digit string spells.

### `dsakit.arrays`

- `format_matrix(matrix)`: lines of space-separated values.
- `wave_order(matrix)`: columns read top-down and bottom-up alternately.
- `rotate_left(values, shift)`: a new list rotated left by `shift`.
- `transpose(matrix)`: the transposed matrix.
- `single_unique(values)`: the value present once when all others appear twice.
- `spiral_order(matrix)`: elements in clockwise spiral order.
- `recursive_sum(values)`: the sum of the values.

### `dsakit.searching`

- `aggressive_cows(stalls, cows)`: largest minimum distance between placed cows.
- `binary_search(values, key)`: whether `key` is in a sorted sequence.
- `search_matrix(matrix, key)`: `(row, col)` of `key` in a row-major sorted matrix, or `None`.
- `book_allocation(pages, students)`: smallest possible maximum pages per student.
- `find_pivot(values)`: index of the smallest element of a rotated sorted sequence.
- `search_rotated(values, key)`: index of `key` in a rotated sorted sequence, or `None`.
- `integer_sqrt(n)`: floor of the square root.
- `refine_sqrt(n, whole, precision)`: extends an integer root to `precision` decimals.

### `dsakit.maze`

- `find_paths(maze)`: every path (letters `D`, `L`, `R`, `U`) from the top-left
  to the bottom-right of a square maze whose open cells are `1`.

### `dsakit.linked_list`

- `SinglyLinkedList(values=())`: with `append(value)`, `insert_at(position, value)`
  (1-based), `is_empty()`, iteration, `len()` and `str()` (space-separated values).

### `dsakit.sorting`

- `bubble_sort(values)`, `insertion_sort(values)`, `merge_sort(values)`: each
  returns a new sorted list.
- `is_sorted(values)`: whether the values are strictly increasing.
- `linear_search(values, key)`: whether `key` occurs.

### `dsakit.strings`

- `is_alnum_palindrome(text)`, `is_palindrome(text)`
- `compress(text)`, `subsequences(values)`, `remove_occurrences(text, part)`
- `max_occurring_char(text)`, `smallest_palindrome(text)`
- `contains_permutation(pattern, text)`, `permutations(text)`
- `has_redundant_brackets(expression)`, `remove_adjacent_duplicates(text)`
- `replace_spaces(text, replacement)`, `reverse(text)`

## Examples

```python
from dsakit.numbers import counting_bits, phone_combinations
from dsakit.arrays import spiral_order
from dsakit.searching import book_allocation
from dsakit.linked_list import SinglyLinkedList
from dsakit.strings import smallest_palindrome

counting_bits(5)                     # [0, 1, 1, 2, 1, 2]
phone_combinations("23")             # ['ad', 'ae', 'af', 'bd', ...]
spiral_order([[1, 2], [3, 4]])       # [1, 2, 4, 3]
book_allocation([10, 20, 30, 40], 2) # 60

items = SinglyLinkedList([10, 20, 30, 40])
items.insert_at(3, 25)
str(items)                           # '10 20 25 30 40'

smallest_palindrome("egcfe")         # 'efcfe'
```

Invalid input raises ordinary Python exceptions, such as `ValueError`, or
`IndexError` for an out-of-range `insert_at` position.

## What it does not do

The package is a library only: it has no command-line program and does not
read input from the console. Call the functions from your own code.
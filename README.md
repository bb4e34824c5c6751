# dsakit

A small collection of classic algorithms, written as plain Python functions.
Many problems come in several variants (a brute-force solution next to a
faster one), so approaches can be compared and checked against each other.

Functions never modify their arguments: sorting, permutation and merging
functions return new lists.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

- `dsakit.arrays`: majority element (`majority_element_brute_force`,
  `majority_element_sorted`, `majority_element` using Boyer-Moore voting),
  `subarrays`, maximum subarray sum (`max_subarray_sum_brute_force`,
  `max_subarray_sum` using Kadane's method), `next_permutation`, `pair_sum`
  on an ascending list, product of all other elements
  (`product_except_self_brute_force`, `product_except_self_prefix`,
  `product_except_self`, `product_except_self_division`), `max_profit`,
  `merge_sorted`, and container with most water (`max_water_brute_force`,
  `max_water`).
- `dsakit.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort`, and
  two ways of sorting a sequence of 0s, 1s and 2s: `dutch_flag_sort` and
  `counting_sort_012`.
- `dsakit.searching`: `binary_search`, `binary_search_recursive`,
  aggressive cows (`can_place_cows`, `largest_minimum_distance`), book
  allocation (`can_allocate`, `allocate_books`), painter's partition
  (`can_paint`, `min_paint_time`), `peak_index` of a mountain sequence,
  `search_rotated` in a rotated ascending sequence, and `single_element` in a
  sorted sequence of pairs.
- `dsakit.hashing`: two sum (`two_sum_brute_force`, `two_sum_sorted`,
  `two_sum`), three sum (`three_sum_brute_force`, `three_sum_hashing`,
  `three_sum`), `four_sum`, and counting subarrays with a given sum
  (`count_subarrays_with_sum_brute_force`, `count_subarrays_with_sum`).
- `dsakit.backtracking`: `n_queens`, subsets (`subsets` as a generator,
  `power_set`, `unique_subsets`, `subsets_with_duplicates`), `permutations`,
  `string_permutations`, rat in a maze (`maze_paths_visited`, `maze_paths`),
  and a sudoku solver (`is_valid_placement`, `solve_sudoku`).

## Example

```python
from dsakit.arrays import majority_element, max_subarray_sum, next_permutation
from dsakit.searching import binary_search, allocate_books
from dsakit.hashing import two_sum, three_sum
from dsakit.backtracking import n_queens

majority_element([1, 2, 2, 1, 1, 3, 3, 3, 3, 3, 3, 3])   # 3
max_subarray_sum([3, -4, 5, 4, -1, 7, -8])               # 15
next_permutation([1, 2, 3, 6, 5, 4])                     # [1, 2, 4, 3, 5, 6]

binary_search([-1, 0, 3, 4, 5, 9, 12], 12)               # 6
allocate_books([2, 1, 3, 4], 2)                          # 6

two_sum([5, 2, 11, 7, 15], 9)                            # (1, 3)
three_sum([-1, 0, 1, 2, -1, 4])                          # [[-1, -1, 2], [-1, 0, 1]]

len(n_queens(4))                                         # 2
```

## Missing answers and bad input

- Where there is no answer (a value not found, no valid pair, more students
  than books, an unsolvable sudoku), functions return `None`.
- Functions that need at least one element, such as `majority_element`,
  `max_subarray_sum` and `max_profit`, raise `ValueError` on an empty
  sequence.
- `dutch_flag_sort` and `counting_sort_012` raise `ValueError` for values
  other than 0, 1 and 2; `maze_paths` needs a square maze and `solve_sudoku`
  a 9x9 board of digits and `'.'`, and both raise `ValueError` otherwise.
- `product_except_self_division` raises `ZeroDivisionError` when an element
  is zero.

## What it does not do

dsakit is a library only. It has no command-line tool and prints nothing;
call the functions from your own code.
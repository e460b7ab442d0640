# algoset

A small library of well-known algorithms over integer sequences, strings,
matrices and numbers. Every algorithm is a plain function that takes Python
lists, strings and integers and returns a plain value. The package has no
dependencies outside the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

### `algoset.numbers`

Integers and their digits.

- `is_palindrome(x)`: whether the decimal digits read the same both ways
  (negative numbers never do).
- `difference_of_sums(n, m)`: sum of 1..n not divisible by `m`, minus the sum
  of those that are.
- `min_cutting_cost(n, m, k)`: cost of cutting two logs so every piece is at
  most `k` long.
- `assign_edge_weights(edges)`: for a tree rooted at node 1, the number of
  ways (modulo 1e9+7) to weight the deepest root path with an odd total.
  Raises `ValueError` for a tree with no edges or an isolated node 1.
- `find_even_numbers(digits)`: distinct even three-digit numbers that the
  given digits can form, in ascending order.
- `count_even_digit_numbers(nums)`: how many numbers have an even number of
  digits.
- `can_alice_win(nums)`: true unless the sum of one-digit numbers equals the
  sum of two-digit numbers.
- `minimum_equalindromic_cost(nums)`: least total change making every element
  the same palindromic number.
- `triangle_type(nums)`: `"equilateral"`, `"isosceles"`, `"scalene"` or
  `"none"` for three side lengths.

`numbers.MOD` is the modulus 1 000 000 007 used by the counting functions.

### `algoset.strings`

- `length_of_longest_substring(s)`
- `slowest_key(release_times, keys_pressed)`: ties go to the largest key.
- `find_words_containing(words, x)`: indices of words containing `x`.
- `sum_of_largest_primes(s)`: sum of the three largest distinct primes found
  as substrings (up to ten digits, no leading zero) of a digit string.
- `max_substrings(word)`: most disjoint substrings of length at least four
  whose first and last characters are equal.
- `resulting_string(s)`: repeatedly removes neighbouring letters that are
  consecutive in the alphabet (with `a` and `z` counting as consecutive).

### `algoset.searching`

- `find_min_rotated(nums)`, `find_min_rotated_with_duplicates(nums)`: minimum
  of a rotated sorted array by binary search.
- `search_matrix(matrix, target)`: lookup in a matrix whose rows and columns
  ascend.

### `algoset.matrices`

- `rotate(matrix)`: turns a square matrix a quarter clockwise, in place.
- `spiral_order(matrix)`, `generate_spiral(n)`,
  `spiral_fill(m, n, values)`: clockwise spiral reading and filling;
  `spiral_fill` leaves cells it has no value for at `-1`.
- `set_zeroes(matrix)`: zeroes every row and column holding a zero, in place.
- `word_exists(board, word)`: whether a word can be traced through
  orthogonally adjacent cells, each used once.
- `pascal_triangle(num_rows)`
- `find_rotation(mat, target)`: whether some quarter turn of `mat` equals
  `target`.
- `color_the_grid(m, n)`: colourings in three colours with no equal
  neighbours, modulo 1e9+7.
- `min_operations(grid, x)`: fewest steps of size `x` to make all cells equal,
  or `-1`.
- `construct_product_matrix(grid)`: each cell replaced by the product of all
  other cells, modulo 12345.

### `algoset.sums`

- `three_sum(nums)`, `four_sum(nums, target)`: distinct ascending tuples
  summing to zero or to `target`.
- `three_sum_closest(nums, target)`
- `maximum_product_of_three(nums)`
- `max_sub_array(nums)`, `max_product(nums)`: best contiguous sum and product.
- `product_except_self(nums)`
- `count_subarrays_product_less_than(nums, k)`
- `longest_ones(nums, k)`: longest run of ones after flipping at most `k`
  zeros.
- `max_score(card_points, k)`: best total of `k` cards taken from the ends.
- `running_sum(nums)`
- `find_max_consecutive_ones(nums)`
- `maximum_difference(nums)`: largest positive later-minus-earlier gap, or
  `-1`.
- `minimum_deletions(nums)`: fewest removals from the ends that take out both
  the minimum and the maximum.

### `algoset.counting`

- `majority_element(nums)`, `majority_elements(nums)`: the element occurring
  in more than half, and those occurring in more than a third, of positions.
- `contains_duplicate(nums)`, `contains_nearby_duplicate(nums, k)`
- `find_duplicate(nums)`: first value seen twice, or `0`.
- `min_moves(nums)`, `min_moves_to_median(nums)`
- `num_equiv_domino_pairs(dominoes)`
- `three_consecutive_odds(arr)`
- `count_good_meals(deliciousness)`: pairs summing to a power of two (up to
  2**21), modulo 1e9+7.
- `divide_array(nums)`, `is_possible_to_split(nums)`
- `min_cost(nums, cost)`: least weighted cost of making all elements equal.
- `divide_players(skill)`: total chemistry of equal-skill teams of two, or
  `-1`.
- `result_array(nums)`: deals elements into two piles and joins them.
- `sort_colors(nums)`: sorts a list of 0, 1 and 2 in place.

Functions raise `ValueError` on inputs they cannot answer for, such as an
empty sequence where a value is required.

## Example

```python
from algoset.strings import length_of_longest_substring
from algoset.matrices import spiral_order
from algoset.sums import three_sum

length_of_longest_substring("abcabcbb")       # 3
spiral_order([[1, 2, 3], [4, 5, 6]])          # [1, 2, 3, 6, 5, 4]
three_sum([-1, 0, 1, 2, -1, -4])              # [[-1, -1, 2], [-1, 0, 1]]
```

## Limitations

This is a library only: it has no command-line tool and reads no input files.
Call the functions from your own code.

## Running the tests

```
pip install ".[test]"
pytest
```
# cses_kit

This package solves a selection of CSES problems. They cover introductory
puzzles, sorting and searching, and dynamic programming. Each problem is a
plain Python function. A command reads a problem's input in the judge's format
and prints the answer the judge expects.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

The tests use pytest:

```
pip install ".[test]"
pytest
```

## Using the library

Each function takes ordinary Python values and returns the answer.

```python
from cses_kit.introductory_basic import bit_strings, trailing_zeros, weird_algorithm
from cses_kit.sorting_basic import distinct_numbers, missing_coin_sum
from cses_kit.dynamic import dice_combinations, minimizing_coins

weird_algorithm(3)                 # [3, 10, 5, 16, 8, 4, 2, 1]
bit_strings(3)                     # 8
trailing_zeros(20)                 # 4
distinct_numbers([2, 3, 2, 2, 3])  # 2
missing_coin_sum([2, 9, 1, 2, 7])  # 6
dice_combinations(3)               # 4
minimizing_coins([1, 5, 7], 11)    # 3
```

Some problems have no answer for certain inputs. In that case the function
returns `None`. This applies to:

- `beautiful_permutation`
- `palindrome_reorder`
- `sum_of_two_values`
- `minimizing_coins`
- each customer in the list that `concert_tickets` returns

Input that the problem does not allow raises `ValueError`. Examples are a
negative length, an empty list where at least one item is needed, or a list
that is not a permutation. `collecting_numbers_swaps` raises `IndexError` for
a swap position outside `1..n`.

The modules are grouped by topic:

- `cses_kit.introductory_basic`
  - `weird_algorithm`
  - `max_repetition`
  - `increasing_array`
  - `beautiful_permutation`
  - `number_spiral`
  - `two_knights`
  - `bit_strings`
  - `trailing_zeros`
  - `coin_piles`
- `cses_kit.introductory_search`
  - `palindrome_reorder`
  - `gray_code`
  - `tower_of_hanoi`
  - `creating_strings`
  - `apple_division`
  - `chessboard_queens`
  - `digit_query`
  - `grid_paths`
- `cses_kit.sorting_basic`
  - `distinct_numbers`
  - `apartments`
  - `ferris_wheel`
  - `concert_tickets`
  - `restaurant_customers`
  - `movie_festival`
  - `sum_of_two_values`
  - `maximum_subarray_sum`
  - `stick_lengths`
  - `missing_coin_sum`
- `cses_kit.sorting_advanced`
  - `collecting_numbers`
  - `collecting_numbers_swaps`
  - `playlist`
  - `towers`
  - `josephus_every_second`
  - `josephus`
- `cses_kit.dynamic`
  - `dice_combinations`
  - `minimizing_coins`

`cses_kit.scanner.Scanner` reads tokens separated by whitespace from any text
stream:

- Iterating over it yields string tokens.
- `read(convert)` returns the next token passed through `convert`. It raises
  `EOFError` when the input runs out.
- `read_many(count, convert)` returns a list of tokens.

## Using the command

`cses-kit` takes the name of a problem as its argument. It reads that
problem's input from standard input and prints the answer:

```
echo 3 | cses-kit weird-algorithm
printf '5 3\n2 3 2 2 3\n' | cses-kit distinct-numbers
```

The problem names are:

- `apartments`
- `apple-division`
- `bit-strings`
- `chessboard-and-queens`
- `coin-piles`
- `collecting-numbers`
- `collecting-numbers-ii`
- `concert-tickets`
- `creating-strings`
- `dice-combinations`
- `digit-queries`
- `distinct-numbers`
- `ferris-wheel`
- `gray-code`
- `grid-paths`
- `increasing-array`
- `josephus-problem-i`
- `josephus-problem-ii`
- `maximum-subarray-sum`
- `minimizing-coins`
- `missing-coin-sum`
- `movie-festival`
- `number-spiral`
- `palindrome-reorder`
- `permutations`
- `playlist`
- `repetitions`
- `restaurant-customers`
- `stick-lengths`
- `sum-of-two-values`
- `tower-of-hanoi`
- `towers`
- `trailing-zeros`
- `two-knights`
- `weird-algorithm`

Output follows the judge's conventions:

- `NO SOLUTION` for `permutations` and `palindrome-reorder` when no answer
  exists.
- `IMPOSSIBLE` for `sum-of-two-values` when no answer exists.
- `-1` for an unsold ticket or unreachable coin sum.
- `YES` or `NO` for `coin-piles`.

Malformed or incomplete input prints an error on standard error and exits
with status 1.

`cses_kit.cli.solve(problem, text)` does the same conversion from Python and
returns the output as a string.

## What it does not do

The package only solves the problems listed above, from input you give it. It
does not download problem statements or test data. It does not log in to a
judge or submit solutions. It does not measure or compare running times.
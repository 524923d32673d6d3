"""Command-line front end: read a problem's input from stdin and print its answer."""

from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Callable, Iterable

from .dynamic import dice_combinations, minimizing_coins
from .introductory_basic import (
    beautiful_permutation,
    bit_strings,
    coin_piles,
    increasing_array,
    max_repetition,
    number_spiral,
    trailing_zeros,
    two_knights,
    weird_algorithm,
)
from .introductory_search import (
    apple_division,
    chessboard_queens,
    creating_strings,
    digit_query,
    gray_code,
    grid_paths,
    palindrome_reorder,
    tower_of_hanoi,
)
from .scanner import Scanner
from .sorting_advanced import (
    collecting_numbers,
    collecting_numbers_swaps,
    josephus,
    josephus_every_second,
    playlist,
    towers,
)
from .sorting_basic import (
    apartments,
    concert_tickets,
    distinct_numbers,
    ferris_wheel,
    maximum_subarray_sum,
    missing_coin_sum,
    movie_festival,
    restaurant_customers,
    stick_lengths,
    sum_of_two_values,
)

NO_SOLUTION = "NO SOLUTION"
IMPOSSIBLE = "IMPOSSIBLE"
BOARD_SIZE = 8

Handler = Callable[[Scanner], str]
PROBLEMS: dict[str, Handler] = {}


def _problem(name: str) -> Callable[[Handler], Handler]:
    def register(handler: Handler) -> Handler:
        PROBLEMS[name] = handler
        return handler

    return register


def _join(values: Iterable[object]) -> str:
    return " ".join(map(str, values))


def _lines(values: Iterable[object]) -> str:
    return "\n".join(map(str, values))


def _ints(scanner: Scanner, count: int) -> list[int]:
    return scanner.read_many(count, int)


def _pairs(scanner: Scanner, count: int) -> list[tuple[int, int]]:
    return [(scanner.read(int), scanner.read(int)) for _ in range(count)]


@_problem("weird-algorithm")
def _weird_algorithm(scanner: Scanner) -> str:
    return _join(weird_algorithm(scanner.read(int)))


@_problem("repetitions")
def _repetitions(scanner: Scanner) -> str:
    return str(max_repetition(scanner.read()))


@_problem("increasing-array")
def _increasing_array(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(increasing_array(_ints(scanner, n)))


@_problem("permutations")
def _permutations(scanner: Scanner) -> str:
    result = beautiful_permutation(scanner.read(int))
    return NO_SOLUTION if result is None else _join(result)


@_problem("number-spiral")
def _number_spiral(scanner: Scanner) -> str:
    tests = scanner.read(int)
    return _lines(number_spiral(x, y) for x, y in _pairs(scanner, tests))


@_problem("two-knights")
def _two_knights(scanner: Scanner) -> str:
    return _lines(two_knights(scanner.read(int)))


@_problem("bit-strings")
def _bit_strings(scanner: Scanner) -> str:
    return str(bit_strings(scanner.read(int)))


@_problem("trailing-zeros")
def _trailing_zeros(scanner: Scanner) -> str:
    return str(trailing_zeros(scanner.read(int)))


@_problem("coin-piles")
def _coin_piles(scanner: Scanner) -> str:
    tests = scanner.read(int)
    return _lines("YES" if coin_piles(a, b) else "NO" for a, b in _pairs(scanner, tests))


@_problem("palindrome-reorder")
def _palindrome_reorder(scanner: Scanner) -> str:
    result = palindrome_reorder(scanner.read())
    return NO_SOLUTION if result is None else result


@_problem("gray-code")
def _gray_code(scanner: Scanner) -> str:
    return _lines(gray_code(scanner.read(int)))


@_problem("tower-of-hanoi")
def _tower_of_hanoi(scanner: Scanner) -> str:
    moves = tower_of_hanoi(scanner.read(int))
    return _lines([len(moves), *(f"{start} {end}" for start, end in moves)])


@_problem("creating-strings")
def _creating_strings(scanner: Scanner) -> str:
    arrangements = creating_strings(scanner.read())
    return _lines([len(arrangements), *arrangements])


@_problem("apple-division")
def _apple_division(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(apple_division(_ints(scanner, n)))


@_problem("chessboard-and-queens")
def _chessboard_queens(scanner: Scanner) -> str:
    return str(chessboard_queens(scanner.read_many(BOARD_SIZE)))


@_problem("digit-queries")
def _digit_queries(scanner: Scanner) -> str:
    queries = scanner.read(int)
    return _lines(digit_query(k) for k in _ints(scanner, queries))


@_problem("grid-paths")
def _grid_paths(scanner: Scanner) -> str:
    return str(grid_paths(scanner.read()))


@_problem("distinct-numbers")
def _distinct_numbers(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(distinct_numbers(_ints(scanner, n)))


@_problem("apartments")
def _apartments(scanner: Scanner) -> str:
    n, m, k = _ints(scanner, 3)
    applicants = _ints(scanner, n)
    sizes = _ints(scanner, m)
    return str(apartments(applicants, sizes, k))


@_problem("ferris-wheel")
def _ferris_wheel(scanner: Scanner) -> str:
    n, limit = _ints(scanner, 2)
    return str(ferris_wheel(_ints(scanner, n), limit))


@_problem("concert-tickets")
def _concert_tickets(scanner: Scanner) -> str:
    n, m = _ints(scanner, 2)
    prices = _ints(scanner, n)
    budgets = _ints(scanner, m)
    return _lines(-1 if paid is None else paid for paid in concert_tickets(prices, budgets))


@_problem("restaurant-customers")
def _restaurant_customers(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(restaurant_customers(_pairs(scanner, n)))


@_problem("movie-festival")
def _movie_festival(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(movie_festival(_pairs(scanner, n)))


@_problem("sum-of-two-values")
def _sum_of_two_values(scanner: Scanner) -> str:
    n, target = _ints(scanner, 2)
    found = sum_of_two_values(_ints(scanner, n), target)
    return IMPOSSIBLE if found is None else _join(found)


@_problem("maximum-subarray-sum")
def _maximum_subarray_sum(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(maximum_subarray_sum(_ints(scanner, n)))


@_problem("stick-lengths")
def _stick_lengths(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(stick_lengths(_ints(scanner, n)))


@_problem("missing-coin-sum")
def _missing_coin_sum(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(missing_coin_sum(_ints(scanner, n)))


@_problem("collecting-numbers")
def _collecting_numbers(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(collecting_numbers(_ints(scanner, n)))


@_problem("collecting-numbers-ii")
def _collecting_numbers_swaps(scanner: Scanner) -> str:
    n, m = _ints(scanner, 2)
    permutation = _ints(scanner, n)
    return _lines(collecting_numbers_swaps(permutation, _pairs(scanner, m)))


@_problem("playlist")
def _playlist(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(playlist(_ints(scanner, n)))


@_problem("towers")
def _towers(scanner: Scanner) -> str:
    n = scanner.read(int)
    return str(towers(_ints(scanner, n)))


@_problem("josephus-problem-i")
def _josephus_every_second(scanner: Scanner) -> str:
    return _join(josephus_every_second(scanner.read(int)))


@_problem("josephus-problem-ii")
def _josephus(scanner: Scanner) -> str:
    n, k = _ints(scanner, 2)
    return _join(josephus(n, k))


@_problem("dice-combinations")
def _dice_combinations(scanner: Scanner) -> str:
    return str(dice_combinations(scanner.read(int)))


@_problem("minimizing-coins")
def _minimizing_coins(scanner: Scanner) -> str:
    n, target = _ints(scanner, 2)
    best = minimizing_coins(_ints(scanner, n), target)
    return str(-1 if best is None else best)


def solve(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the output text.

    Raises ValueError for an unknown problem or malformed input, and EOFError
    when the input ends early.
    """
    handler = PROBLEMS.get(problem)
    if handler is None:
        raise ValueError(f"unknown problem: {problem}")
    answer = handler(Scanner(io.StringIO(text)))
    return answer + "\n" if answer else ""


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="cses-kit", description="Solve a problem from input on standard input."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS), help="problem to solve")
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except (ValueError, EOFError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
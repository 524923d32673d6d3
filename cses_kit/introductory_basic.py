"""Introductory problems with direct arithmetic solutions."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

MOD = 1_000_000_007


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence from ``n`` down to 1: halve evens, map odds to 3n+1."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def max_repetition(sequence: Sequence) -> int:
    """Return the length of the longest run of equal consecutive items."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(sequence))


def increasing_array(values: Sequence[int]) -> int:
    """Return the total increase needed to make ``values`` non-decreasing."""
    highest = 0
    cost = 0
    for value in values:
        highest = max(highest, value)
        cost += highest - value
    return cost


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by 1.

    Returns None when no such permutation exists.
    """
    if n == 1:
        return [1]
    if n in (2, 3):
        return None
    half = n // 2
    result = [2 * i + 2 for i in range(half)] + [2 * i + 1 for i in range(half)]
    if n % 2 == 1:
        result.append(n)
    return result


def number_spiral(x: int, y: int) -> int:
    """Return the number in row ``x``, column ``y`` of the number spiral."""
    if x < 1 or y < 1:
        raise ValueError("row and column must be positive")
    layer = max(x, y)
    if layer % 2 == 0:
        if x > y:
            return layer * layer - (y - 1)
        return (layer - 1) ** 2 + x
    if x > y:
        return (layer - 1) ** 2 + y
    return layer * layer - (x - 1)


def two_knights(n: int) -> list[int]:
    """Return, for each k in 1..n, the ways to place two non-attacking knights on k×k."""
    counts = [0, 6, 28][: max(n, 0)]
    for i in range(4, n + 1):
        total = 16 * (i * i - 4)
        total += 8 * (i - 4) * (i * i - 6)
        total += (i - 4) * (i - 4) * (i * i - 9)
        counts.append(total // 2)
    return counts


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n`` modulo 10**9+7."""
    if n < 0:
        raise ValueError("length must be non-negative")
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    count = 0
    while n > 4:
        n //= 5
        count += n
    return count


def coin_piles(a: int, b: int) -> bool:
    """Return whether both piles can be emptied by removing 2 from one and 1 from the other."""
    if a > b and a <= 2 * b:
        d = a - b
        a -= 2 * d
        b -= d
    elif a < b and 2 * a >= b:
        d = b - a
        a -= d
        b -= 2 * d
    return a == b and a % 3 == 0
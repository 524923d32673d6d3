"""Sorting and searching problems on permutations, windows and circles."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections import deque
from collections.abc import Iterable, Sequence


def _positions(permutation: Sequence[int]) -> list[int]:
    """Return 1-based positions indexed by value, with sentinels at 0 and n+1."""
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("input must be a permutation of 1..n")
    positions = [0] * (n + 2)
    for index, value in enumerate(permutation, start=1):
        positions[value] = index
    positions[n + 1] = n + 1
    return positions


def collecting_numbers(permutation: Sequence[int]) -> int:
    """Return the rounds needed to collect 1..n scanning left to right each round."""
    positions = _positions(permutation)
    n = len(permutation)
    return 1 + sum(positions[v] > positions[v + 1] for v in range(1, n))


def collecting_numbers_swaps(
    permutation: Sequence[int], swaps: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the round count after each swap of two 1-based positions."""
    values = [0, *permutation]
    positions = _positions(permutation)
    n = len(permutation)
    rounds = 1 + sum(positions[v] > positions[v + 1] for v in range(1, n))

    def inversions(pairs: set[int]) -> int:
        return sum(positions[v] > positions[v + 1] for v in pairs)

    results = []
    for a, b in swaps:
        if not (1 <= a <= n and 1 <= b <= n):
            raise IndexError("swap positions must lie in 1..n")
        first, second = values[a], values[b]
        pairs = {first - 1, first, second - 1, second}
        rounds -= inversions(pairs)
        values[a], values[b] = second, first
        positions[first], positions[second] = b, a
        rounds += inversions(pairs)
        results.append(rounds)
    return results


def playlist(songs: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive distinct songs."""
    last_seen: dict[int, int] = {}
    start = 0
    best = 0
    for index, song in enumerate(songs):
        previous = last_seen.get(song)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[song] = index
        best = max(best, index - start + 1)
    return best


def towers(cubes: Iterable[int]) -> int:
    """Return the fewest towers when each cube goes on a strictly larger top."""
    tops: list[int] = []
    for cube in cubes:
        position = bisect_right(tops, cube)
        if position == len(tops):
            tops.append(cube)
        else:
            tops[position] = cube
    return len(tops)


def josephus_every_second(n: int) -> list[int]:
    """Return the removal order of children 1..n when every second one leaves."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    circle = deque(range(1, n + 1))
    order = []
    while circle:
        circle.rotate(-1)
        order.append(circle.popleft())
    return order


def josephus(n: int, k: int) -> list[int]:
    """Return the removal order of children 1..n, skipping ``k`` before each removal."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    if k < 0:
        raise ValueError("k must be non-negative")
    size = max(1, math.isqrt(n))
    blocks = [list(range(s, min(s + size, n + 1))) for s in range(1, n + 1, size)]
    x = y = 0
    order = []
    for remaining in range(n, 0, -1):
        y += k % remaining
        while y >= len(blocks[x]):
            y -= len(blocks[x])
            x = (x + 1) % len(blocks)
        order.append(blocks[x].pop(y))
    return order
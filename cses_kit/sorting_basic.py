"""Sorting and searching problems solved by greedy scans over ordered data."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence


def distinct_numbers(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    return len(set(values))


def apartments(applicants: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """Return how many applicants get an apartment within ``tolerance`` of their wish."""
    wanted = sorted(applicants)
    available = sorted(sizes)
    reserved = i = j = 0
    while i < len(wanted) and j < len(available):
        desired, size = wanted[i], available[j]
        if desired - tolerance <= size <= desired + tolerance:
            i += 1
            j += 1
            reserved += 1
        elif desired - tolerance > size:
            j += 1
        else:
            i += 1
    return reserved


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Return the fewest gondolas, each holding one or two children up to ``limit``."""
    ordered = sorted(weights)
    if not ordered:
        raise ValueError("at least one child is required")
    left, right, count = 0, len(ordered) - 1, 0
    while left <= right:
        if ordered[left] + ordered[right] <= limit:
            left += 1
        count += 1
        right -= 1
    return count


def concert_tickets(prices: Iterable[int], budgets: Iterable[int]) -> list[int | None]:
    """Sell each customer the dearest remaining ticket within budget.

    Returns, per customer in order, the price paid, or None when no ticket is
    affordable.
    """
    remaining = sorted(prices)
    sold: list[int | None] = []
    for budget in budgets:
        position = bisect_right(remaining, budget)
        if position == 0:
            sold.append(None)
        else:
            sold.append(remaining.pop(position - 1))
    return sold


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of customers present at once.

    ``intervals`` holds (arrival, departure) pairs.
    """
    changes: Counter[int] = Counter()
    for arrival, departure in intervals:
        changes[arrival] += 1
        changes[departure] -= 1
    present = best = 0
    for moment in sorted(changes):
        present += changes[moment]
        best = max(best, present)
    return best


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most movies that can be watched in full; pairs are (start, end)."""
    last_end = 0
    count = 0
    for start, end in sorted(movies, key=lambda movie: (movie[1], movie[0])):
        if last_end <= start:
            last_end = end
            count += 1
    return count


def sum_of_two_values(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return 1-based positions of two values summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(values, start=1):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        if value <= target:
            seen[value] = index
    return None


def maximum_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    largest: int | None = None
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if largest is None or value > largest:
            largest = value
        if running < 0:
            running = 0
        elif best is None or running > best:
            best = running
    if largest is None:
        raise ValueError("values must not be empty")
    if best is not None and best > 0:
        return best
    return largest


def stick_lengths(values: Sequence[int]) -> int:
    """Return the least total change to make all sticks the same length."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("at least one stick is required")
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def missing_coin_sum(coins: Iterable[int]) -> int:
    """Return the smallest sum that no subset of ``coins`` can make."""
    reachable = 0
    for coin in sorted(coins):
        if coin > reachable + 1:
            break
        reachable += coin
    return reachable + 1
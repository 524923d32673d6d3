"""Dynamic programming problems."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007


def dice_combinations(n: int) -> int:
    """Return the ways to reach sum ``n`` with throws of a six-sided die, mod 10**9+7."""
    if n < 0:
        raise ValueError("sum must be non-negative")
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - 6):total]) % MOD)
    return ways[n]


def minimizing_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to ``target``, or None if it cannot be made."""
    if target < 0:
        raise ValueError("target must be non-negative")
    coins = list(coins)
    if any(coin < 0 for coin in coins):
        raise ValueError("coin values must be non-negative")
    usable = sorted({coin for coin in coins if 0 < coin <= target})
    unreachable = target + 1
    best = [0] + [unreachable] * target
    for amount in range(1, target + 1):
        for coin in usable:
            if coin > amount:
                break
            best[amount] = min(best[amount], best[amount - coin] + 1)
    return None if best[target] == unreachable else best[target]
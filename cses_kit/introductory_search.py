"""Introductory problems solved by construction, enumeration or backtracking."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_MOVES = {
    "R": (0, 1),
    "D": (1, 0),
    "L": (0, -1),
    "U": (-1, 0),
}


def palindrome_reorder(text: str) -> str | None:
    """Rearrange the capital letters of ``text`` into a palindrome.

    Returns None when no rearrangement is a palindrome. Raises ValueError for
    characters outside A-Z.
    """
    counts = Counter(text)
    if any(ch not in _ALPHABET for ch in counts):
        raise ValueError("text may contain only the letters A-Z")
    odd_letters = [ch for ch in _ALPHABET if counts[ch] % 2 == 1]
    if len(odd_letters) > 1:
        return None
    half = "".join(ch * (counts[ch] // 2) for ch in _ALPHABET if counts[ch] % 2 == 0)
    middle = "".join(ch * counts[ch] for ch in odd_letters)
    return half + middle + half[::-1]


def gray_code(n: int) -> list[str]:
    """Return all 2**n bit strings of length ``n``, each differing from the previous in one bit."""
    if n < 0:
        raise ValueError("length must be non-negative")
    codes = []
    for i in range(1 << n):
        gray = i ^ (i >> 1)
        codes.append("".join("1" if gray >> bit & 1 else "0" for bit in range(n)))
    return codes


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves (from, to) that carry ``n`` disks from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("number of disks must be positive")
    moves: list[tuple[int, int]] = []

    def carry(disks: int, start: int, end: int) -> None:
        if disks == 1:
            moves.append((start, end))
            return
        other = 6 - (start + end)
        carry(disks - 1, start, other)
        moves.append((start, end))
        carry(disks - 1, other, end)

    carry(n, 1, 3)
    return moves


def creating_strings(text: str) -> list[str]:
    """Return every distinct arrangement of the characters of ``text``, in sorted order."""
    counts = Counter(text)
    letters = sorted(counts)
    current: list[str] = []
    result: list[str] = []

    def extend(remaining: int) -> None:
        if remaining == 0:
            result.append("".join(current))
            return
        for ch in letters:
            if counts[ch]:
                counts[ch] -= 1
                current.append(ch)
                extend(remaining - 1)
                current.pop()
                counts[ch] += 1

    extend(len(text))
    return result


def apple_division(weights: Iterable[int]) -> int:
    """Return the minimum difference of weight between two groups of apples."""
    weights = list(weights)
    if len(weights) == 1:
        return weights[0]
    half = (sum(weights) + 1) // 2

    def split(index: int, left: int, right: int) -> int:
        if index == len(weights):
            return abs(left - right)
        weight = weights[index]
        options = []
        if left < half:
            options.append(split(index + 1, left + weight, right))
        if right < half:
            options.append(split(index + 1, left, right + weight))
        return min(options, default=abs(left - right))

    return split(0, 0, 0)


def chessboard_queens(board: Sequence[str]) -> int:
    """Count placements of one queen per row with no two attacking.

    ``board`` is a square of rows where '.' marks a free square and any other
    character a reserved one.
    """
    size = len(board)
    if any(len(row) != size for row in board):
        raise ValueError("board must be square")
    free = [[ch == "." for ch in row] for row in board]
    columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> int:
        if row == size:
            return 1
        total = 0
        for col, is_free in enumerate(free[row]):
            if not is_free or col in columns or col - row in falling or col + row in rising:
                continue
            columns.add(col)
            falling.add(col - row)
            rising.add(col + row)
            total += place(row + 1)
            columns.discard(col)
            falling.discard(col - row)
            rising.discard(col + row)
        return total

    return place(0)


def digit_query(k: int) -> int:
    """Return the ``k``-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("position must be positive")
    digits, count, start = 1, 9, 1
    while k > digits * count:
        k -= digits * count
        digits += 1
        count *= 10
        start *= 10
    number = start + (k - 1) // digits
    return int(str(number)[(k - 1) % digits])


def grid_paths(description: str) -> int:
    """Count paths from the upper-left to the lower-left corner that visit every cell once.

    ``description`` has one character per move: R, D, L, U or '?' for any
    direction. Its length must be one less than the number of cells of a
    square grid (48 for the 7x7 grid).
    """
    size = math.isqrt(len(description) + 1)
    if size * size != len(description) + 1:
        raise ValueError("description length must be one less than a square number")
    invalid = set(description) - set(_MOVES) - {"?"}
    if invalid:
        raise ValueError(f"invalid move characters: {''.join(sorted(invalid))}")
    last = size - 1
    visited = [[False] * size for _ in range(size)]

    def splits_board(i: int, j: int) -> bool:
        inner_col = 1 <= j < last
        inner_row = 1 <= i < last
        return (
            (
                inner_col
                and not visited[i][j + 1]
                and not visited[i][j - 1]
                and ((i == 0 and visited[i + 1][j]) or (i == last and visited[i - 1][j]))
            )
            or (
                inner_row
                and not visited[i + 1][j]
                and not visited[i - 1][j]
                and ((j == 0 and visited[i][j + 1]) or (j == last and visited[i][j - 1]))
            )
            or (
                inner_row
                and inner_col
                and visited[i + 1][j]
                and visited[i - 1][j]
                and not visited[i][j + 1]
                and not visited[i][j - 1]
            )
            or (
                inner_row
                and inner_col
                and visited[i][j + 1]
                and visited[i][j - 1]
                and not visited[i + 1][j]
                and not visited[i - 1][j]
            )
        )

    def walk(step: int, i: int, j: int) -> int:
        if splits_board(i, j):
            return 0
        if i == last and j == 0:
            return 1 if step == len(description) else 0
        move = description[step]
        directions = _MOVES.values() if move == "?" else (_MOVES[move],)
        visited[i][j] = True
        total = 0
        for di, dj in directions:
            ni, nj = i + di, j + dj
            if 0 <= ni < size and 0 <= nj < size and not visited[ni][nj]:
                total += walk(step + 1, ni, nj)
        visited[i][j] = False
        return total

    return walk(0, 0, 0)
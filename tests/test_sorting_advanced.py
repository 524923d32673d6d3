import pytest

from cses_kit.sorting_advanced import (
    collecting_numbers,
    collecting_numbers_swaps,
    josephus,
    josephus_every_second,
    playlist,
    towers,
)


def test_collecting_numbers_example():
    assert collecting_numbers([4, 2, 1, 5, 3]) == 3


def test_collecting_numbers_identity_and_reverse():
    assert collecting_numbers(list(range(1, 10))) == 1
    reverse = list(range(9, 0, -1))
    assert collecting_numbers(reverse) == len(reverse)


def test_collecting_numbers_rejects_non_permutation():
    with pytest.raises(ValueError):
        collecting_numbers([1, 2, 2])


@pytest.mark.parametrize(
    "permutation, swaps",
    [
        ([4, 2, 1, 5, 3], [(2, 3), (1, 5), (2, 3)]),
        ([1, 2, 3, 4, 5, 6], [(1, 2), (1, 6), (3, 4), (2, 5), (4, 4)]),
        ([3, 1, 2], [(1, 3), (2, 3), (1, 2)]),
    ],
)
def test_collecting_numbers_swaps_matches_recount(permutation, swaps):
    results = collecting_numbers_swaps(permutation, swaps)
    current = list(permutation)
    expected = []
    for a, b in swaps:
        current[a - 1], current[b - 1] = current[b - 1], current[a - 1]
        expected.append(collecting_numbers(current))
    assert results == expected


def test_collecting_numbers_swaps_same_position_keeps_count():
    permutation = [2, 1, 3]
    assert collecting_numbers_swaps(permutation, [(2, 2)]) == [
        collecting_numbers(permutation)
    ]


def test_collecting_numbers_swaps_bad_index():
    with pytest.raises(IndexError):
        collecting_numbers_swaps([1, 2, 3], [(0, 2)])


def test_playlist_example():
    assert playlist([1, 2, 1, 3, 2, 7, 4, 2]) == 5


def test_playlist_all_distinct_and_all_same():
    songs = [5, 9, 1, 7]
    assert playlist(songs) == len(songs)
    assert playlist([3, 3, 3, 3]) == 1
    assert playlist([]) == 0


def test_towers_increasing_and_decreasing():
    increasing = [1, 2, 3, 4, 5]
    assert towers(increasing) == len(increasing)
    assert towers([5, 4, 3, 2, 1]) == 1


def test_towers_equal_cubes_need_separate_towers():
    cubes = [2, 2, 2]
    assert towers(cubes) == len(cubes)


def test_towers_bounded_by_count():
    cubes = [3, 8, 2, 1, 5]
    assert 1 <= towers(cubes) <= len(cubes)
    assert towers(cubes) == towers(cubes[:4]) + (1 if towers(cubes) > towers(cubes[:4]) else 0)


def test_josephus_every_second_example():
    assert josephus_every_second(7) == [2, 4, 6, 1, 5, 3, 7]


@pytest.mark.parametrize("n", [1, 2, 3, 10, 37])
def test_josephus_every_second_is_permutation(n):
    assert sorted(josephus_every_second(n)) == list(range(1, n + 1))


@pytest.mark.parametrize("n", [1, 2, 5, 16, 50])
def test_josephus_with_one_skip_matches_every_second(n):
    assert josephus(n, 1) == josephus_every_second(n)


def test_josephus_without_skip_is_in_order():
    assert josephus(12, 0) == list(range(1, 13))


@pytest.mark.parametrize("n, k", [(7, 2), (30, 5), (100, 1000), (1, 9)])
def test_josephus_is_permutation(n, k):
    order = josephus(n, k)
    assert sorted(order) == list(range(1, n + 1))
    assert order[0] == k % n + 1


def test_josephus_errors():
    with pytest.raises(ValueError):
        josephus(0, 1)
    with pytest.raises(ValueError):
        josephus(5, -1)
    with pytest.raises(ValueError):
        josephus_every_second(0)
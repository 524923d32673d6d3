import pytest

from cses_kit.sorting_basic import (
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

SAMPLE = [2, 3, 2, 2, 3, 9, 14, 9]


def test_distinct_numbers_ignores_duplicates_and_order():
    assert distinct_numbers(SAMPLE + SAMPLE) == distinct_numbers(SAMPLE)
    assert distinct_numbers(reversed(SAMPLE)) == distinct_numbers(SAMPLE)


def test_distinct_numbers_counts_new_value():
    assert distinct_numbers(SAMPLE + [max(SAMPLE) + 1]) == distinct_numbers(SAMPLE) + 1


def test_apartments_identical_lists_all_match():
    wishes = [60, 45, 80, 60]
    assert apartments(wishes, list(wishes), 0) == len(wishes)


def test_apartments_bounded_and_order_independent():
    wishes = [60, 45, 80, 60]
    sizes = [30, 60, 75]
    result = apartments(wishes, sizes, 5)
    assert result <= min(len(wishes), len(sizes))
    assert apartments(reversed(wishes), reversed(sizes), 5) == result


def test_apartments_large_tolerance_fills_all():
    wishes = [60, 45, 80, 60]
    sizes = [30, 60, 75]
    assert apartments(wishes, sizes, 1000) == len(sizes)


def test_ferris_wheel_everyone_pairs_when_limit_is_large():
    weights = [7, 2, 3, 9, 5]
    assert ferris_wheel(weights, 2 * max(weights)) == (len(weights) + 1) // 2


def test_ferris_wheel_empty_raises():
    with pytest.raises(ValueError):
        ferris_wheel([], 10)


def test_concert_tickets_sells_best_affordable():
    prices = [5, 3, 7, 8, 5]
    assert concert_tickets(prices, [4, 8, 3]) == [3, 8, None]


def test_concert_tickets_respects_stock_and_budget():
    prices = [5, 3, 7, 8, 5]
    budgets = [10, 10, 6, 6, 6, 2]
    sold = concert_tickets(prices, budgets)
    assert len(sold) == len(budgets)
    for price, budget in zip(sold, budgets):
        assert price is None or price <= budget
    paid = sorted(p for p in sold if p is not None)
    assert all(paid.count(p) <= prices.count(p) for p in set(paid))
    assert sold[-1] is None


def test_restaurant_customers_nested_intervals():
    intervals = [(1, 20), (2, 19), (3, 18), (4, 17)]
    assert restaurant_customers(intervals) == len(intervals)


def test_restaurant_customers_disjoint_intervals_match_single():
    disjoint = [(1, 2), (3, 4), (5, 6)]
    assert restaurant_customers(disjoint) == restaurant_customers(disjoint[:1])


def test_movie_festival_disjoint_and_touching():
    movies = [(3, 5), (1, 3), (5, 9)]
    assert movie_festival(movies) == len(movies)


def test_movie_festival_overlapping_picks_one():
    movies = [(1, 10), (2, 9), (3, 8)]
    assert movie_festival(movies) == movie_festival(movies[:1])


def test_sum_of_two_values_finds_valid_pair():
    values = [2, 7, 5, 1]
    target = 8
    found = sum_of_two_values(values, target)
    assert found is not None
    i, j = found
    assert i < j
    assert values[i - 1] + values[j - 1] == target


def test_sum_of_two_values_equal_halves():
    values = [4, 1, 4]
    assert sum_of_two_values(values, 8) == (1, 3)


def test_sum_of_two_values_impossible():
    assert sum_of_two_values([1, 2, 3], 100) is None


def test_maximum_subarray_sum_all_negative():
    values = [-8, -3, -5]
    assert maximum_subarray_sum(values) == max(values)


def test_maximum_subarray_sum_all_positive():
    values = [4, 1, 6]
    assert maximum_subarray_sum(values) == sum(values)


def test_maximum_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        maximum_subarray_sum([])


def test_stick_lengths_equal_and_shifted():
    assert stick_lengths([5, 5, 5]) == stick_lengths([9])
    sticks = [2, 3, 1, 5, 2]
    assert stick_lengths([s + 100 for s in sticks]) == stick_lengths(sticks)


def test_stick_lengths_two_sticks():
    assert stick_lengths([1, 12]) == 12 - 1


def test_stick_lengths_empty_raises():
    with pytest.raises(ValueError):
        stick_lengths([])


def test_missing_coin_sum_powers_of_two():
    coins = [4, 1, 2, 8]
    assert missing_coin_sum(coins) == sum(coins) + 1


def test_missing_coin_sum_without_one():
    assert missing_coin_sum([2, 3, 9]) == missing_coin_sum([])


def test_missing_coin_sum_gap_stops_growth():
    assert missing_coin_sum([1, 2, 100]) == 1 + 2 + 1
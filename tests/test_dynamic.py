import pytest

from cses_kit.dynamic import MOD, dice_combinations, minimizing_coins


def test_dice_combinations_example():
    assert dice_combinations(3) == 4


def test_dice_combinations_zero():
    assert dice_combinations(0) == 1


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_dice_combinations_small_are_powers_of_two(n):
    assert dice_combinations(n) == 2 ** (n - 1)


@pytest.mark.parametrize("n", [7, 20, 500])
def test_dice_combinations_recurrence(n):
    previous = sum(dice_combinations(n - j) for j in range(1, 7)) % MOD
    assert dice_combinations(n) == previous
    assert 0 <= dice_combinations(n) < MOD


def test_dice_combinations_negative():
    with pytest.raises(ValueError):
        dice_combinations(-1)


def test_minimizing_coins_example():
    assert minimizing_coins([1, 5, 7], 11) == 3


def test_minimizing_coins_impossible():
    assert minimizing_coins([4, 6], 7) is None


def test_minimizing_coins_zero_target():
    assert minimizing_coins([3, 5], 0) == 0


@pytest.mark.parametrize("coin, multiple", [(1, 13), (4, 6), (9, 2)])
def test_minimizing_coins_single_denomination(coin, multiple):
    assert minimizing_coins([coin], coin * multiple) == multiple


def test_minimizing_coins_order_does_not_matter():
    assert minimizing_coins([7, 1, 5], 11) == minimizing_coins([1, 5, 7], 11)


def test_minimizing_coins_ignores_large_and_zero_coins():
    assert minimizing_coins([0, 2, 100], 6) == minimizing_coins([2], 6)


def test_minimizing_coins_errors():
    with pytest.raises(ValueError):
        minimizing_coins([1], -1)
    with pytest.raises(ValueError):
        minimizing_coins([-2, 1], 5)
import pytest

from codingdrills.prefix_sum import (
    adjusted_average,
    count_divisible_subarrays,
    digit_sum,
    grid_range_sums,
    range_sums,
)


def test_digit_sum_of_ones_is_length():
    text = "11111"
    assert digit_sum(text) == len(text)


@pytest.mark.parametrize("left,right", [("123", "456"), ("9", "99"), ("0", "70")])
def test_digit_sum_is_additive(left, right):
    assert digit_sum(left + right) == digit_sum(left) + digit_sum(right)


def test_digit_sum_rejects_letters():
    with pytest.raises(ValueError):
        digit_sum("12a")


def test_adjusted_average_equal_scores():
    assert adjusted_average([40, 40, 40]) == 100.0


def test_adjusted_average_mixed():
    assert adjusted_average([50, 100]) == pytest.approx(75.0)


def test_adjusted_average_errors():
    with pytest.raises(ValueError):
        adjusted_average([])
    with pytest.raises(ZeroDivisionError):
        adjusted_average([0, 0])


def test_range_sums_invariants():
    values = [5, 4, 3, 2, 1]
    assert range_sums(values, [(1, len(values))]) == [sum(values)]
    singles = range_sums(values, [(i, i) for i in range(1, len(values) + 1)])
    assert singles == values
    left, right = range_sums(values, [(1, 2), (3, 5)])
    assert left + right == sum(values)


def test_range_sums_out_of_range():
    with pytest.raises(IndexError):
        range_sums([1, 2, 3], [(0, 2)])
    with pytest.raises(IndexError):
        range_sums([1, 2, 3], [(2, 4)])


def test_grid_range_sums_invariants():
    grid = [[1, 2, 3, 4], [2, 3, 4, 5], [3, 4, 5, 6], [4, 5, 6, 7]]
    total = sum(map(sum, grid))
    assert grid_range_sums(grid, [(1, 1, 4, 4)]) == [total]
    cells = [(i, j, i, j) for i in range(1, 5) for j in range(1, 5)]
    assert grid_range_sums(grid, cells) == [v for row in grid for v in row]


def test_grid_range_sums_errors():
    with pytest.raises(ValueError):
        grid_range_sums([[1, 2], [3]], [])
    with pytest.raises(IndexError):
        grid_range_sums([[1, 2], [3, 4]], [(1, 1, 3, 2)])


def test_count_divisible_subarrays_example():
    assert count_divisible_subarrays([1, 2, 3, 1, 2], 3) == 7


def test_count_divisible_subarrays_all_count_for_one():
    values = [4, 7, 1, 9]
    n = len(values)
    assert count_divisible_subarrays(values, 1) == n * (n + 1) // 2


def test_count_divisible_subarrays_bad_divisor():
    with pytest.raises(ValueError):
        count_divisible_subarrays([1, 2], 0)
import pytest

from codingdrills.binary_search import (
    contains_all,
    kth_in_multiplication_table,
    min_blu_ray_size,
)


def test_contains_all_matches_membership():
    values = [4, 1, 5, 2, 3]
    targets = [1, 3, 7, 9, 5, -1]
    assert contains_all(values, targets) == [t in values for t in targets]


def test_contains_all_empty_values():
    targets = [1, 2]
    assert contains_all([], targets) == [False] * len(targets)


def test_blu_ray_example():
    assert min_blu_ray_size(range(1, 10), 3) == 17


def test_blu_ray_single_disc_holds_everything():
    lengths = [4, 8, 15, 16, 23, 42]
    assert min_blu_ray_size(lengths, 1) == sum(lengths)


def test_blu_ray_one_disc_each():
    lengths = [4, 8, 15, 16, 23, 42]
    assert min_blu_ray_size(lengths, len(lengths)) == max(lengths)


def test_blu_ray_more_discs_never_larger():
    lengths = [7, 2, 9, 4, 4, 1, 8]
    sizes = [min_blu_ray_size(lengths, c) for c in range(1, len(lengths) + 1)]
    assert sizes == sorted(sizes, reverse=True)


def test_multiplication_table_example():
    assert kth_in_multiplication_table(3, 7) == 6


@pytest.mark.parametrize("n", [1, 3, 6])
def test_multiplication_table_extremes(n):
    assert kth_in_multiplication_table(n, 1) == 1
    assert kth_in_multiplication_table(n, n * n) == n * n


def test_multiplication_table_monotonic():
    n = 5
    entries = [kth_in_multiplication_table(n, k) for k in range(1, n * n + 1)]
    assert entries == sorted(entries)
    assert sorted(entries) == sorted(i * j for i in range(1, n + 1) for j in range(1, n + 1))
import pytest

from codingdrills.union_find import (
    UnionFind,
    can_travel,
    count_lie_parties,
    process_set_queries,
)


def test_elements_start_apart():
    sets = UnionFind(4)
    assert sets.find(2) == 2
    assert not sets.connected(1, 2)


def test_union_is_transitive():
    sets = UnionFind(6)
    sets.union(1, 2)
    sets.union(3, 2)
    assert sets.connected(1, 3)
    assert sets.find(1) == sets.find(2) == sets.find(3)
    assert not sets.connected(1, 4)


def test_find_outside_range_raises():
    with pytest.raises(IndexError):
        UnionFind(3).find(3)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_set_queries_example():
    queries = [
        (0, 1, 3),
        (1, 1, 7),
        (0, 7, 6),
        (1, 7, 1),
        (0, 3, 7),
        (0, 4, 2),
        (0, 1, 1),
        (1, 1, 1),
    ]
    assert process_set_queries(7, queries) == [False, False, True]


def test_set_queries_without_questions_answer_nothing():
    assert process_set_queries(3, [(0, 1, 2), (0, 2, 3)]) == []


def test_travel_within_linked_region():
    matrix = [
        [0, 1, 0],
        [1, 0, 0],
        [0, 0, 0],
    ]
    assert can_travel(matrix, [1, 2, 1]) is True
    assert can_travel(matrix, [1, 3]) is False


def test_travel_through_intermediate_city():
    matrix = [
        [0, 1, 0],
        [1, 0, 1],
        [0, 1, 0],
    ]
    assert can_travel(matrix, [3, 1]) is True


def test_no_truth_knowers_allows_every_party():
    parties = [[1, 2], [3], [2, 4]]
    assert count_lie_parties(4, [], parties) == len(parties)


def test_truth_spreads_through_shared_guests():
    parties = [[1, 2], [2, 3], [3, 4]]
    assert count_lie_parties(4, [4], parties) == 0


def test_unrelated_parties_remain_safe():
    parties = [[1, 2], [3, 4], [5]]
    assert count_lie_parties(5, [1], parties) == len(parties) - 1
import pytest

from codingdrills.spanning_tree import donate_cables, minimum_spanning_weight


def test_triangle():
    assert minimum_spanning_weight(3, [(1, 2, 1), (2, 3, 2), (1, 3, 3)]) == 3


def test_tree_keeps_every_edge():
    edges = [(1, 2, 4), (2, 3, 9), (2, 4, 6)]
    assert minimum_spanning_weight(4, edges) == sum(w for _, _, w in edges)


def test_negative_weights_allowed():
    edges = [(1, 2, -5)]
    assert minimum_spanning_weight(2, edges) == -5


def test_disconnected_graph_raises():
    with pytest.raises(ValueError):
        minimum_spanning_weight(3, [(1, 2, 1)])


def test_single_computer_donates_its_own_cable():
    assert donate_cables(["a"]) == 1
    assert donate_cables(["A"]) == 27


def test_needed_cable_is_kept():
    assert donate_cables(["0a", "00"]) == 0


def test_disconnected_computers():
    assert donate_cables(["00", "00"]) is None


def test_donation_never_exceeds_total():
    grid = ["abc", "bcd", "cde"]
    donated = donate_cables(grid)
    assert 0 <= donated <= sum(ord(ch) - ord("a") + 1 for row in grid for ch in row)


def test_non_square_grid_rejected():
    with pytest.raises(ValueError):
        donate_cables(["ab"])
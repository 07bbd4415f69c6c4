import itertools

import pytest

from composer.domain.composition.reorder import move, reorder, reorder_selection


def test_move_forward():
    assert move(["A", "B", "C", "D"], 0, 2) == ("B", "C", "A", "D")


def test_move_backward():
    assert move(["A", "B", "C", "D"], 3, 1) == ("A", "D", "B", "C")


def test_move_does_not_touch_input():
    items = ["A", "B", "C"]
    move(items, 0, 2)
    assert items == ["A", "B", "C"]


@pytest.mark.parametrize(
    "selection,expected",
    [
        (0, 2),  # the moved element keeps its selection
        (1, 0),
        (2, 1),
        (3, 3),
        (None, None),
    ],
)
def test_selection_follows_forward_move(selection, expected):
    assert reorder_selection(selection, 0, 2) == expected


@pytest.mark.parametrize(
    "selection,expected",
    [
        (3, 1),
        (1, 2),
        (2, 3),
        (0, 0),
    ],
)
def test_selection_follows_backward_move(selection, expected):
    assert reorder_selection(selection, 3, 1) == expected


def test_every_move_is_a_permutation_and_selection_tracks_its_element():
    items = ("A", "B", "C", "D", "E")

    for from_index, to_index, selection in itertools.product(range(5), range(5), range(5)):
        moved, new_selection = reorder(items, from_index, to_index, selection)

        assert sorted(moved) == sorted(items)
        assert moved[to_index] == items[from_index]
        assert moved[new_selection] == items[selection]

import pytest

from nonogram_engine.models import InvalidPuzzleError
from nonogram_engine.selection import index_selections, selection_count


def test_single_list():
    assert list(index_selections([1])) == [(0,)]
    assert list(index_selections([3])) == [(0,), (1,), (2,)]


def test_multiple_single_element_lists():
    assert list(index_selections([1, 1, 1])) == [(0, 0, 0)]


def test_odometer_order_advances_rightmost_first():
    assert list(index_selections([1, 2, 3])) == [
        (0, 0, 0), (0, 0, 1), (0, 0, 2),
        (0, 1, 0), (0, 1, 1), (0, 1, 2),
    ]
    assert selection_count([1, 2, 3]) == 6


@pytest.mark.parametrize("counts", [[], [0], [-1], [1, 0], [0, 1], [-1, 0], [0, -1]])
def test_invalid_counts_rejected_immediately(counts):
    with pytest.raises(InvalidPuzzleError):
        index_selections(counts)


def test_selections_are_lazy():
    gen = index_selections([1000] * 10)
    assert next(gen) == (0,) * 10
    assert next(gen) == (0,) * 9 + (1,)

import pytest

from nonogram_engine.board import ColumnAccessor, MutablePuzzleState, PuzzleState, RowAccessor
from nonogram_engine.models import Cell, InvalidPuzzleError, NoSolutionError, PuzzleDefinition

O = Cell.OPEN
F = Cell.FILLED
X = Cell.BLOCKED


def test_new_state_is_all_open():
    s = PuzzleState(2, 3)
    assert s.grid == [[O, O, O], [O, O, O]]
    assert s.open_count() == 6
    assert not s.is_fully_marked()


def test_row_and_column_access():
    s = MutablePuzzleState(2, 3)
    s.mark_cell(0, 1, F)
    s.mark_cell(1, 2, X)
    assert s.get_cell(0, 1) == F
    assert s.get_row(0) == [O, F, O]
    assert s.get_row(1) == [O, O, X]
    assert s.get_column(1) == [F, O]
    assert s.get_column(2) == [O, X]


@pytest.mark.parametrize("r,c", [(-1, 0), (2, 0), (0, -1), (0, 3)])
def test_out_of_range_cells_rejected(r, c):
    s = MutablePuzzleState(2, 3)
    with pytest.raises(InvalidPuzzleError):
        s.get_cell(r, c)
    with pytest.raises(InvalidPuzzleError):
        s.mark_cell(r, c, F)


@pytest.mark.parametrize("r,c", [("1", 0), (0, 1.5), (None, 0), (True, 0)])
def test_non_integer_indices_rejected(r, c):
    s = MutablePuzzleState(2, 3)
    with pytest.raises(InvalidPuzzleError):
        s.get_cell(r, c)
    with pytest.raises(InvalidPuzzleError):
        s.mark_cell(r, c, F)
    with pytest.raises(InvalidPuzzleError):
        s.get_row("0")
    with pytest.raises(InvalidPuzzleError):
        s.get_column(2.0)


def test_out_of_range_lines_rejected():
    s = PuzzleState(2, 3)
    with pytest.raises(InvalidPuzzleError, match="row"):
        s.get_row(2)
    with pytest.raises(InvalidPuzzleError, match="column"):
        s.get_column(3)


def test_invalid_dimensions_rejected():
    with pytest.raises(InvalidPuzzleError):
        PuzzleState(0, 2)


def test_mark_cell_reports_change_and_never_flips():
    s = MutablePuzzleState(1, 2)
    assert s.mark_cell(0, 0, F) is True
    assert s.mark_cell(0, 0, F) is False
    with pytest.raises(NoSolutionError) as e:
        s.mark_cell(0, 0, X)
    assert e.value.state is s
    assert s.get_cell(0, 0) == F
    with pytest.raises(InvalidPuzzleError):
        s.mark_cell(0, 1, O)


def test_snapshot_is_detached():
    s = MutablePuzzleState(1, 2)
    snap = s.snapshot()
    s.mark_cell(0, 0, F)
    assert snap.get_cell(0, 0) == O
    assert not hasattr(snap, "mark_cell")
    assert s.snapshot() == s


def test_line_accessors_map_to_grid():
    p = PuzzleDefinition(rows=2, columns=3, row_hints=[[1], [2]], column_hints=[[1], [1], [1]])
    s = MutablePuzzleState(2, 3)
    row = RowAccessor(s, p, 1)
    col = ColumnAccessor(s, p, 2)
    assert row.hints == (2,)
    assert col.hints == (1,)
    row.mark(0, F)
    col.mark(0, X)
    assert s.get_cell(1, 0) == F
    assert s.get_cell(0, 2) == X
    assert row.cells() == [F, O, O]
    assert col.cells() == [X, O]
    assert repr(col) == "column 2"


def test_lines_yields_rows_then_columns():
    p = PuzzleDefinition(rows=2, columns=3, row_hints=[[1], [2]], column_hints=[[1], [1], [1]])
    labels = [repr(line) for line in MutablePuzzleState(2, 3).lines(p)]
    assert labels == ["row 0", "row 1", "column 0", "column 1", "column 2"]


def test_pretty():
    s = MutablePuzzleState(2, 2)
    s.mark_cell(0, 0, F)
    s.mark_cell(1, 1, X)
    assert s.pretty() == "# .\n. x"

from __future__ import annotations
from typing import Iterator, List

from nonogram_engine.models import Cell, InvalidPuzzleError, NoSolutionError, PuzzleDefinition

SYMBOLS = {Cell.OPEN: ".", Cell.FILLED: "#", Cell.BLOCKED: "x"}


class PuzzleState:
    """
    Read-only view of a rows x columns grid:
    - cells stored row-major, all OPEN at creation
    - every accessor validates its indices (no clamping)
    """

    def __init__(self, rows: int, columns: int):
        if rows <= 0 or columns <= 0:
            raise InvalidPuzzleError(f"Grid must have positive dimensions, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self._cells: List[Cell] = [Cell.OPEN] * (rows * columns)

    def _index(self, r: int, c: int) -> int:
        self._validate_row(r)
        self._validate_column(c)
        return r * self.columns + c

    def _validate_row(self, r: int) -> None:
        if type(r) != int or not 0 <= r < self.rows:
            raise InvalidPuzzleError(f"Invalid row index ({r}), must be from 0..{self.rows - 1}")

    def _validate_column(self, c: int) -> None:
        if type(c) != int or not 0 <= c < self.columns:
            raise InvalidPuzzleError(f"Invalid column index ({c}), must be from 0..{self.columns - 1}")

    def get_cell(self, r: int, c: int) -> Cell:
        return self._cells[self._index(r, c)]

    def get_row(self, r: int) -> List[Cell]:
        self._validate_row(r)
        start = r * self.columns
        return self._cells[start:start + self.columns]

    def get_column(self, c: int) -> List[Cell]:
        self._validate_column(c)
        return self._cells[c::self.columns]

    @property
    def grid(self) -> List[List[Cell]]:
        return [self.get_row(r) for r in range(self.rows)]

    def is_fully_marked(self) -> bool:
        return all(v != Cell.OPEN for v in self._cells)

    def open_count(self) -> int:
        return sum(1 for v in self._cells if v == Cell.OPEN)

    def snapshot(self) -> "PuzzleState":
        """Detached read-only copy, safe to hand to callers."""
        s = PuzzleState(self.rows, self.columns)
        s._cells = self._cells[:]
        return s

    def pretty(self) -> str:
        return "\n".join(" ".join(SYMBOLS[v] for v in self.get_row(r)) for r in range(self.rows))

    def __eq__(self, other):
        return (
            isinstance(other, PuzzleState)
            and self.rows == other.rows
            and self.columns == other.columns
            and self._cells == other._cells
        )

    def __repr__(self):
        return f"{type(self).__name__}({self.rows}x{self.columns}, open={self.open_count()})"


class MutablePuzzleState(PuzzleState):
    """Grid with a single mutation primitive. Marks are never undone or flipped."""

    def mark_cell(self, r: int, c: int, contents: Cell) -> bool:
        """Return True if the cell changed."""
        i = self._index(r, c)
        if contents == Cell.OPEN:
            raise InvalidPuzzleError(f"Cannot reset cell ({r}, {c}) to OPEN")
        before = self._cells[i]
        if before == contents:
            return False
        if before != Cell.OPEN:
            raise NoSolutionError(
                f"Cell ({r}, {c}) is already {before.value}, cannot mark it {contents.value}",
                self,
            )
        self._cells[i] = contents
        return True

    def lines(self, puzzle: PuzzleDefinition) -> Iterator["LineAccessor"]:
        """Every row accessor, then every column accessor."""
        for r in range(self.rows):
            yield RowAccessor(self, puzzle, r)
        for c in range(self.columns):
            yield ColumnAccessor(self, puzzle, c)


class LineAccessor:
    """One row or column of a mutable grid, addressed by line-relative index."""

    label = "line"

    def __init__(self, state: MutablePuzzleState, puzzle: PuzzleDefinition, index: int):
        self.state = state
        self.index = index
        self.hints = self._hints_for(puzzle)

    def _hints_for(self, puzzle: PuzzleDefinition):
        raise NotImplementedError

    def cells(self) -> List[Cell]:
        raise NotImplementedError

    def mark(self, i: int, contents: Cell) -> bool:
        raise NotImplementedError

    def __repr__(self):
        return f"{self.label} {self.index}"


class RowAccessor(LineAccessor):
    label = "row"

    def _hints_for(self, puzzle):
        return puzzle.row_hints[self.index]

    def cells(self):
        return self.state.get_row(self.index)

    def mark(self, i, contents):
        return self.state.mark_cell(self.index, i, contents)


class ColumnAccessor(LineAccessor):
    label = "column"

    def _hints_for(self, puzzle):
        return puzzle.column_hints[self.index]

    def cells(self):
        return self.state.get_column(self.index)

    def mark(self, i, contents):
        return self.state.mark_cell(i, self.index, contents)

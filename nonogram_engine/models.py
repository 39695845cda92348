from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from nonogram_engine.board import PuzzleState


class Cell(str, Enum):
    OPEN = "OPEN"
    FILLED = "FILLED"
    BLOCKED = "BLOCKED"


class SolveErrorKind(str, Enum):
    NO_SOLUTION = "NO_SOLUTION"
    NO_UNIQUE_SOLUTION = "NO_UNIQUE_SOLUTION"


class InvalidPuzzleError(ValueError):
    """Raised immediately for malformed definitions, indices or option counts."""


class SolverError(RuntimeError):
    """Base for solver failures. Carries the partial grid reached before failing."""

    kind: SolveErrorKind

    def __init__(self, message: str, state: Optional["PuzzleState"] = None):
        super().__init__(message)
        self.state = state


class NoSolutionError(SolverError):
    kind = SolveErrorKind.NO_SOLUTION


class NoUniqueSolutionError(SolverError):
    kind = SolveErrorKind.NO_UNIQUE_SOLUTION


def hint_length(hints: Sequence[int]) -> int:
    """Minimum cells needed for the hint groups, with one separator between groups."""
    if len(hints) == 1 and hints[0] == 0:
        return 0
    return sum(hints) + len(hints) - 1


def _check_hint_list(hints: Sequence[int], line_length: int, label: str) -> None:
    if len(hints) == 0:
        raise InvalidPuzzleError(f"{label} must have at least one hint value")
    if any(type(h) != int or h < 0 for h in hints):
        raise InvalidPuzzleError(f"{label} must have non-negative integer hint values, got {list(hints)}")
    if 0 in hints and len(hints) > 1:
        raise InvalidPuzzleError(f"{label}: a hint of zero must be the only value, got {list(hints)}")
    if hint_length(hints) > line_length:
        raise InvalidPuzzleError(
            f"{label}: hints {list(hints)} need {hint_length(hints)} cells but the line has {line_length}"
        )


@dataclass(frozen=True)
class PuzzleDefinition:
    """
    Nonogram definition (hints only, no cell contents).

    Validated on construction:
    - positive dimensions, one hint list per row and per column
    - every hint list non-empty and non-negative; a 0 must stand alone
    - row and column hints describe the same number of filled cells
    - every hint list fits its line with single-cell gaps
    """
    rows: int
    columns: int
    row_hints: Tuple[Tuple[int, ...], ...]
    column_hints: Tuple[Tuple[int, ...], ...]

    def __post_init__(self):
        if type(self.rows) != int or type(self.columns) != int or self.rows <= 0 or self.columns <= 0:
            raise InvalidPuzzleError(
                f"Grid must have positive dimensions, got {self.rows}x{self.columns}"
            )

        # freeze caller lists so the definition cannot change under a solve
        try:
            object.__setattr__(self, "row_hints", tuple(tuple(h) for h in self.row_hints))
            object.__setattr__(self, "column_hints", tuple(tuple(h) for h in self.column_hints))
        except TypeError:
            raise InvalidPuzzleError("Row and column hints must be lists of hint lists") from None

        if len(self.row_hints) != self.rows or len(self.column_hints) != self.columns:
            raise InvalidPuzzleError(
                f"Puzzle must have hints for every row and column "
                f"(expected {self.rows} row / {self.columns} column hint lists, "
                f"got {len(self.row_hints)} / {len(self.column_hints)})"
            )

        for r, hints in enumerate(self.row_hints):
            _check_hint_list(hints, self.columns, f"Row {r}")
        for c, hints in enumerate(self.column_hints):
            _check_hint_list(hints, self.rows, f"Column {c}")

        row_total = sum(sum(h) for h in self.row_hints)
        col_total = sum(sum(h) for h in self.column_hints)
        if row_total != col_total:
            raise InvalidPuzzleError(
                f"Puzzle must have the same total squares in row and column hints "
                f"(rows: {row_total}, columns: {col_total})"
            )

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns


@dataclass(frozen=True)
class PuzzleSolution:
    state: "PuzzleState"
    required_multi_line: bool = False


@dataclass(frozen=True)
class SolveResult:
    is_solved: bool
    state: "PuzzleState"
    required_multi_line: bool = False
    error: Optional[SolveErrorKind] = None
    message: str = ""

    def unwrap(self) -> PuzzleSolution:
        """Return the solution, or raise the solver error this result records."""
        if self.is_solved:
            return PuzzleSolution(self.state, self.required_multi_line)
        if self.error == SolveErrorKind.NO_SOLUTION:
            raise NoSolutionError(self.message, self.state)
        raise NoUniqueSolutionError(self.message, self.state)

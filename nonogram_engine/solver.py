from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from nonogram_engine.board import LineAccessor, MutablePuzzleState
from nonogram_engine.lines import placement_line, validate_complete_line, validate_placement
from nonogram_engine.models import (
    Cell,
    NoSolutionError,
    PuzzleDefinition,
    PuzzleSolution,
    SolveErrorKind,
    SolveResult,
)
from nonogram_engine.selection import index_selections, selection_count
from nonogram_engine.spacing import hint_spacings

logger = logging.getLogger(__name__)

MarkFn = Callable[[int, Cell], bool]


# ------------------ count voting ------------------
def apply_count_results(
    cells: Sequence[Cell],
    counts: Sequence[int],
    valid_count: int,
    mark: MarkFn,
) -> bool:
    """
    Mark FILLED every cell filled in all valid candidates and BLOCKED every
    cell filled in none. Returns True if any mark changed.
    """
    if valid_count == 0:
        raise NoSolutionError("Puzzle does not have a solution")

    changed = False
    for i, current in enumerate(cells):
        if counts[i] == valid_count and current != Cell.FILLED:
            changed = mark(i, Cell.FILLED) or changed
        elif counts[i] == 0 and current != Cell.BLOCKED:
            changed = mark(i, Cell.BLOCKED) or changed
    return changed


# ------------------ single-line reasoning ------------------
def apply_hints_to_line(cells: Sequence[Cell], hints: Sequence[int], mark: MarkFn) -> bool:
    """
    Deduce forced cells of one line from its hints and current marks.
    Returns True if any cell was marked. Raises NoSolutionError (without a
    state) if no placement of the hints fits the line.
    """
    size = len(cells)
    counts = [0] * size
    valid_count = 0

    for spacing in hint_spacings(hints, size):
        filled: List[int] = []

        def track(contents: Cell, i: int) -> None:
            if contents == Cell.FILLED:
                filled.append(i)

        if validate_placement(cells, hints, spacing, track):
            for i in filled:
                counts[i] += 1
            valid_count += 1

    return apply_count_results(cells, counts, valid_count, mark)


def apply_line_hints(line: LineAccessor) -> bool:
    try:
        return apply_hints_to_line(line.cells(), line.hints, line.mark)
    except NoSolutionError as e:
        if e.state is not None:
            raise
        raise NoSolutionError(
            f"Puzzle does not have a solution: no placement of {list(line.hints)} fits {line}",
            line.state,
        ) from e


def apply_single_line_hints(state: MutablePuzzleState, puzzle: PuzzleDefinition) -> bool:
    """Run every row then every column until a full pass marks nothing."""
    any_changes = False
    passes = 0
    while True:
        passes += 1
        changed = False
        for line in state.lines(puzzle):
            if apply_line_hints(line):
                changed = True
        if not changed:
            break
        any_changes = True

    logger.debug("single-line fixpoint after %d pass(es), %d open cell(s)", passes, state.open_count())
    return any_changes


# ------------------ multi-line reasoning ------------------
def surviving_row_spacings(state: MutablePuzzleState, puzzle: PuzzleDefinition) -> List[List[List[int]]]:
    # recomputed on every escalation; results are not cached between passes
    return [
        [s for s in hint_spacings(hints, state.columns) if validate_placement(state.get_row(r), hints, s)]
        for r, hints in enumerate(puzzle.row_hints)
    ]


def apply_multi_line_hints(state: MutablePuzzleState, puzzle: PuzzleDefinition) -> bool:
    """
    Combine every surviving placement of every row, keep the combinations
    whose columns all match their hints, and vote across the whole grid.
    Cost is the product of the per-row option counts.
    """
    options = surviving_row_spacings(state, puzzle)
    option_counts = [len(o) for o in options]
    if 0 in option_counts:
        r = option_counts.index(0)
        raise NoSolutionError(
            f"Puzzle does not have a solution: no placement of {list(puzzle.row_hints[r])} fits row {r}",
            state,
        )

    logger.debug(
        "multi-line reasoning: row options %s, %d candidate grid(s)",
        option_counts,
        selection_count(option_counts),
    )

    row_lines = [
        [placement_line(hints, s, state.columns) for s in options[r]]
        for r, hints in enumerate(puzzle.row_hints)
    ]

    counts = [0] * puzzle.cell_count
    valid_count = 0
    for selected in index_selections(option_counts):
        candidate = [row_lines[r][i] for r, i in enumerate(selected)]
        if all(
            validate_complete_line([row[c] for row in candidate], puzzle.column_hints[c])
            for c in range(state.columns)
        ):
            valid_count += 1
            for r, row in enumerate(candidate):
                for c, v in enumerate(row):
                    if v == Cell.FILLED:
                        counts[r * state.columns + c] += 1

    logger.debug("multi-line reasoning: %d consistent candidate grid(s)", valid_count)

    cells = [v for row in state.grid for v in row]
    try:
        return apply_count_results(
            cells,
            counts,
            valid_count,
            lambda i, contents: state.mark_cell(i // state.columns, i % state.columns, contents),
        )
    except NoSolutionError as e:
        if e.state is not None:
            raise
        raise NoSolutionError(
            "Puzzle does not have a solution: no combination of row placements satisfies the column hints",
            state,
        ) from e


# ------------------ public API ------------------
def solve_puzzle(puzzle: PuzzleDefinition) -> SolveResult:
    """
    Solve with single-line propagation, escalating to one multi-line pass
    whenever propagation stalls. Never raises for solver failures; the
    result carries the error kind and the partial grid instead.
    """
    state = MutablePuzzleState(puzzle.rows, puzzle.columns)
    required_multi_line = False

    try:
        while True:
            apply_single_line_hints(state, puzzle)
            if state.is_fully_marked():
                logger.info(
                    "solved %dx%d puzzle (multi-line reasoning: %s)",
                    puzzle.rows, puzzle.columns, required_multi_line,
                )
                return SolveResult(True, state.snapshot(), required_multi_line)

            required_multi_line = True
            if not apply_multi_line_hints(state, puzzle):
                logger.info("no unique solution, %d open cell(s) remain", state.open_count())
                return SolveResult(
                    False,
                    state.snapshot(),
                    required_multi_line,
                    SolveErrorKind.NO_UNIQUE_SOLUTION,
                    "Puzzle does not have a unique solution",
                )
    except NoSolutionError as e:
        logger.info("no solution: %s", e)
        return SolveResult(False, state.snapshot(), required_multi_line, SolveErrorKind.NO_SOLUTION, str(e))


def solve(puzzle: PuzzleDefinition) -> PuzzleSolution:
    """Like solve_puzzle, but raises NoSolutionError / NoUniqueSolutionError."""
    return solve_puzzle(puzzle).unwrap()

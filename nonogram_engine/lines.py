from __future__ import annotations
from itertools import groupby
from typing import Callable, List, Optional, Sequence

from nonogram_engine.models import Cell
from nonogram_engine.spacing import is_empty_hint

CellCallback = Callable[[Cell, int], None]

# the mark that rules out each required content
CONTRADICTS = {Cell.FILLED: Cell.BLOCKED, Cell.BLOCKED: Cell.FILLED}


def _validate_section(
    line: Sequence[Cell],
    contents: Cell,
    start: int,
    end: int,
    on_cell: Optional[CellCallback],
) -> bool:
    bad = CONTRADICTS[contents]
    for i in range(start, end):
        if line[i] == bad:
            return False
        if on_cell is not None:
            on_cell(contents, i)
    return True


def validate_placement(
    line: Sequence[Cell],
    hints: Sequence[int],
    spacing: Sequence[int],
    on_cell: Optional[CellCallback] = None,
) -> bool:
    """
    Check one spacing vector against the current marks of a line.

    Walks the line left to right: spacing[i] blocked cells, then hints[i]
    filled cells, and blocked cells for the remainder. on_cell(contents, i)
    is called for each cell that agrees with the placement. Stops at the
    first cell already marked with the opposite value.
    """
    pos = 0
    for gap, run in zip(spacing, hints):
        if not _validate_section(line, Cell.BLOCKED, pos, pos + gap, on_cell):
            return False
        pos += gap
        if not _validate_section(line, Cell.FILLED, pos, pos + run, on_cell):
            return False
        pos += run
    return _validate_section(line, Cell.BLOCKED, pos, len(line), on_cell)


def placement_line(hints: Sequence[int], spacing: Sequence[int], length: int) -> List[Cell]:
    """Fully marked line produced by applying a spacing vector to an all-OPEN line."""
    out = [Cell.OPEN] * length

    def mark(contents: Cell, i: int) -> None:
        out[i] = contents

    validate_placement(out[:], hints, spacing, mark)
    return out


def filled_runs(line: Sequence[Cell]) -> List[int]:
    return [len(list(group)) for value, group in groupby(line) if value == Cell.FILLED]


def validate_complete_line(line: Sequence[Cell], hints: Sequence[int]) -> bool:
    """True if the FILLED runs of a fully marked line are exactly the hints."""
    if len(hints) == 0:
        return False
    runs = filled_runs(line)
    if is_empty_hint(hints):
        return runs == []
    return runs == list(hints)

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence

from nonogram_engine.board import SYMBOLS, PuzzleState
from nonogram_engine.models import InvalidPuzzleError, PuzzleDefinition, SolveResult

_SEPARATORS = re.compile(r"[\s,]+")


def parse_hint_text(text: str, label: str) -> List[List[int]]:
    """One row/column per line, hint values separated by whitespace or commas."""
    def fail():
        return InvalidPuzzleError(f"{label} do not contain lines of valid space-separated numbers")

    hints: List[List[int]] = []
    for line in (text or "").splitlines():
        if not line.strip():
            continue
        values = []
        for token in _SEPARATORS.split(line.strip()):
            if not token:
                continue
            try:
                values.append(int(token))
            except ValueError:
                raise fail() from None
        hints.append(values)
    if not hints:
        raise fail()
    return hints


def parse_dimension(text: Any, label: str) -> int:
    try:
        return int(str(text).strip())
    except ValueError:
        raise InvalidPuzzleError(f"Number of {label} is not a valid number") from None


def puzzle_from_hints(
    row_hints: Sequence[Sequence[int]],
    column_hints: Sequence[Sequence[int]],
    rows: Optional[int] = None,
    columns: Optional[int] = None,
) -> PuzzleDefinition:
    """Build a puzzle, taking missing dimensions from the hint list lengths."""
    return PuzzleDefinition(
        rows=len(row_hints) if rows is None else rows,
        columns=len(column_hints) if columns is None else columns,
        row_hints=row_hints,
        column_hints=column_hints,
    )


def puzzle_from_text(rows: Any, columns: Any, row_hints: str, column_hints: str) -> PuzzleDefinition:
    return puzzle_from_hints(
        parse_hint_text(row_hints, "Row hints"),
        parse_hint_text(column_hints, "Column hints"),
        rows=parse_dimension(rows, "rows"),
        columns=parse_dimension(columns, "columns"),
    )


def state_to_strings(state: PuzzleState) -> List[str]:
    return ["".join(SYMBOLS[v] for v in state.get_row(r)) for r in range(state.rows)]


def result_to_dict(result: SolveResult) -> Dict[str, Any]:
    return {
        "ok": result.is_solved,
        "error": result.error.value if result.error is not None else None,
        "message": result.message,
        "required_multi_line": result.required_multi_line,
        "grid": state_to_strings(result.state),
    }

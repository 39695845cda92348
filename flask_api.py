from __future__ import annotations

import logging
import os

from flask import Flask, request, jsonify
from flask_cors import CORS

from nonogram_engine.models import PuzzleDefinition
from nonogram_engine.parsing import parse_dimension, puzzle_from_hints, puzzle_from_text, result_to_dict
from nonogram_engine.samples import SAMPLES
from nonogram_engine.solver import solve_puzzle

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


def _optional_dimension(data, key: str, label: str):
    raw = data.get(key)
    if raw is None or str(raw).strip() == "":
        return None
    return parse_dimension(raw, label)


def _puzzle_from_request(data) -> PuzzleDefinition:
    """
    Accepts either the text form used by the web page
    (rows/columns strings plus one hint line per row/column) or plain
    nested lists, where rows/columns may be omitted.
    """
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    row_hints = data.get("row_hints")
    column_hints = data.get("column_hints")

    if isinstance(row_hints, str) or isinstance(column_hints, str):
        return puzzle_from_text(
            data.get("rows", ""),
            data.get("columns", ""),
            row_hints or "",
            column_hints or "",
        )

    if not isinstance(row_hints, list) or not isinstance(column_hints, list):
        raise ValueError("row_hints and column_hints must both be text or lists of hint lists")
    return puzzle_from_hints(
        row_hints,
        column_hints,
        rows=_optional_dimension(data, "rows", "rows"),
        columns=_optional_dimension(data, "columns", "columns"),
    )


def _solve_response(puzzle: PuzzleDefinition):
    result = solve_puzzle(puzzle)
    return jsonify({
        "puzzle": {
            "rows": puzzle.rows,
            "columns": puzzle.columns,
            "row_hints": [list(h) for h in puzzle.row_hints],
            "column_hints": [list(h) for h in puzzle.column_hints],
        },
        "solver": result_to_dict(result),
    })


@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.post("/solve")
def solve():
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    try:
        puzzle = _puzzle_from_request(data)
    except (ValueError, TypeError) as e:
        # InvalidPuzzleError is a ValueError
        logger.info("rejected puzzle: %s", e)
        return jsonify({"error": str(e)}), 400
    return _solve_response(puzzle)


@app.get("/samples")
def list_samples():
    return jsonify({
        "samples": [
            {"name": name, "rows": p.rows, "columns": p.columns}
            for name, p in SAMPLES.items()
        ]
    })


@app.post("/samples/<name>/solve")
def solve_sample(name: str):
    puzzle = SAMPLES.get(name)
    if puzzle is None:
        return jsonify({"error": f"Unknown sample '{name}'"}), 404
    return _solve_response(puzzle)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(
        host=os.environ.get("NONOGRAM_API_HOST", "0.0.0.0"),
        port=int(os.environ.get("NONOGRAM_API_PORT", "8000")),
        debug=True,
    )

import argparse
import logging
import sys
import time
from pathlib import Path

from nonogram_engine.models import InvalidPuzzleError, PuzzleDefinition
from nonogram_engine.parsing import parse_hint_text, puzzle_from_hints
from nonogram_engine.samples import SAMPLES
from nonogram_engine.solver import solve_puzzle

EXIT_OK = 0
EXIT_UNSOLVED = 1
EXIT_INVALID = 2


def print_hints(puzzle: PuzzleDefinition):
    print(f"PUZZLE ({puzzle.rows} rows x {puzzle.columns} columns)")
    print("Row hints:")
    for r, hints in enumerate(puzzle.row_hints):
        print(f"  {r:>3}: {' '.join(str(h) for h in hints)}")
    print("Column hints:")
    for c, hints in enumerate(puzzle.column_hints):
        print(f"  {c:>3}: {' '.join(str(h) for h in hints)}")


def load_puzzle(args) -> PuzzleDefinition:
    if args.sample is not None:
        if args.sample not in SAMPLES:
            raise InvalidPuzzleError(f"Unknown sample '{args.sample}', choose from {', '.join(SAMPLES)}")
        return SAMPLES[args.sample]

    if args.row_hints is None or args.column_hints is None:
        raise InvalidPuzzleError("Provide --sample or both --row-hints and --column-hints")
    row_hints = parse_hint_text(Path(args.row_hints).read_text(), "Row hints")
    column_hints = parse_hint_text(Path(args.column_hints).read_text(), "Column hints")
    return puzzle_from_hints(row_hints, column_hints, rows=args.rows, columns=args.columns)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Solve a nonogram from row and column hints")
    p.add_argument("--rows", type=int, help="Number of rows (default: number of row hint lines)")
    p.add_argument("--columns", type=int, help="Number of columns (default: number of column hint lines)")
    p.add_argument("--row-hints", help="Text file with one row of space-separated hints per line")
    p.add_argument("--column-hints", help="Text file with one column of space-separated hints per line")
    p.add_argument("--sample", help="Solve a bundled sample puzzle instead")
    p.add_argument("--list-samples", action="store_true", help="List bundled sample puzzles and exit")
    p.add_argument("--time", action="store_true", help="Report solve time")
    p.add_argument("-v", "--verbose", action="store_true", help="Log solver progress")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_samples:
        for name, puzzle in SAMPLES.items():
            print(f"{name}: {puzzle.rows}x{puzzle.columns}")
        return EXIT_OK

    try:
        puzzle = load_puzzle(args)
    except (InvalidPuzzleError, OSError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_INVALID

    print()
    print_hints(puzzle)
    print()

    start = time.perf_counter()
    result = solve_puzzle(puzzle)
    elapsed = time.perf_counter() - start

    print("SOLVER REPORT")
    print("=" * 60)
    if result.is_solved:
        print("Status: PASS")
    else:
        print(f"Status: FAIL ({result.error.value})")
        print(f"Explanation: {result.message}")
        print("\nPartial grid:")
    print()
    print(result.state.pretty())
    print()
    if result.required_multi_line:
        print("Note: the puzzle required multi-line reasoning")
    if args.time:
        print(f"Solve time: {elapsed:.4f} seconds")
    print("=" * 60)
    print()

    return EXIT_OK if result.is_solved else EXIT_UNSOLVED


if __name__ == "__main__":
    sys.exit(main())

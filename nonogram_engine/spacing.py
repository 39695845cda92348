from __future__ import annotations
from math import comb
from typing import Iterator, List, Sequence

from nonogram_engine.models import hint_length

Spacing = List[int]


def is_empty_hint(hints: Sequence[int]) -> bool:
    return len(hints) == 1 and hints[0] == 0


def line_slack(hints: Sequence[int], line_length: int) -> int:
    """Spare cells beyond the tightest packing of the hint groups."""
    if is_empty_hint(hints):
        return 0
    return line_length - hint_length(hints)


def spacing_count(hints: Sequence[int], line_length: int) -> int:
    # slack is shared between the k leading gaps and the trailing gap
    if is_empty_hint(hints):
        return 1
    return comb(line_slack(hints, line_length) + len(hints), len(hints))


def hint_spacings(hints: Sequence[int], line_length: int) -> Iterator[Spacing]:
    """
    Yield every spacing vector for hints in a line of line_length cells.

    spacing[i] is the number of blocked cells directly before hint group i:
    group 0 may sit flush against the start, later groups need at least one
    separator. Cells after the last group are blocked. Assumes the hints
    already passed PuzzleDefinition validation.
    """
    slack = line_slack(hints, line_length)
    budget = line_length - sum(hints)

    # start packed to the left
    spacing = [0] + [1] * (len(hints) - 1)
    yield spacing[:]

    # the last vector pushes every spare cell in front of group 0
    while spacing[0] < slack:
        _advance(spacing, slack, budget)
        yield spacing[:]


def _advance(spacing: Spacing, slack: int, budget: int) -> None:
    while True:
        for i in reversed(range(len(spacing))):
            lo, hi = (0, slack) if i == 0 else (1, slack + 1)
            if spacing[i] < hi:
                spacing[i] += 1
                break
            spacing[i] = lo
        if sum(spacing) <= budget:
            return

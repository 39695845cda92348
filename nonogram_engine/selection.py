from __future__ import annotations
from itertools import product
from typing import Iterator, Sequence, Tuple

from nonogram_engine.models import InvalidPuzzleError


def index_selections(option_counts: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    """
    Lazily yield every choice of one index per option list.

    Counts like an odometer: the rightmost index advances first.
    Raises InvalidPuzzleError up front (not on first next()) for an empty
    list or a non-positive count.
    """
    if len(option_counts) == 0:
        raise InvalidPuzzleError("Must have at least one option list")
    if any(n <= 0 for n in option_counts):
        raise InvalidPuzzleError(f"All option counts must be positive, got {list(option_counts)}")
    return product(*(range(n) for n in option_counts))


def selection_count(option_counts: Sequence[int]) -> int:
    total = 1
    for n in option_counts:
        total *= n
    return total

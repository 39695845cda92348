from __future__ import annotations
from typing import Dict

from nonogram_engine.models import PuzzleDefinition
from nonogram_engine.parsing import puzzle_from_hints

# webpbn puzzles are from https://webpbn.com/survey/puzzles/ and are marked
# as freely redistributable with attribution.

SMILE = puzzle_from_hints(
    row_hints=[[0], [1, 1], [1, 1], [1, 1], [0], [1, 1], [4], [0]],
    column_hints=[[0], [1], [3, 1], [1], [1], [3, 1], [1], [0]],
)

FIVE_BY_FIVE = puzzle_from_hints(
    row_hints=[[5], [3], [3, 1], [4], [0]],
    column_hints=[[1, 1], [4], [4], [2, 1], [1, 2]],
)

# "Dancer" by Jan Wolter (https://webpbn.com/play.cgi?id=1)
WEBPBN_1 = puzzle_from_hints(
    row_hints=[[2], [2, 1], [1, 1], [3], [1, 1], [1, 1], [2], [1, 1], [1, 2], [2]],
    column_hints=[[2, 1], [2, 1, 3], [7], [1, 3], [2, 1]],
)

# "Scardy Cat" by Jan Wolter (https://webpbn.com/play.cgi?id=6)
WEBPBN_6 = puzzle_from_hints(
    row_hints=[
        [2], [2], [1], [1], [1, 3], [2, 5], [1, 7, 1, 1], [1, 8, 2, 2], [1, 9, 5], [2, 16],
        [1, 17], [7, 11], [5, 5, 3], [5, 4], [3, 3], [2, 2], [2, 1], [1, 1], [2, 2], [2, 2],
    ],
    column_hints=[
        [5], [5, 3], [2, 3, 4], [1, 7, 2], [8], [9], [9], [8], [7], [8],
        [9], [10], [13], [6, 2], [4], [6], [6], [5], [6], [6],
    ],
)

# "Slippery Conditions" by Jan Wolter (https://webpbn.com/play.cgi?id=21)
WEBPBN_21 = puzzle_from_hints(
    row_hints=[
        [9], [1, 1], [1, 1, 1], [1, 3, 1], [13], [13], [13], [13], [2, 2], [2, 2],
        [0], [2, 2], [2, 2], [2, 2], [2, 2], [2, 2], [2, 2], [2, 2], [2, 2], [2, 2],
        [2, 2], [2, 2], [2, 2], [2, 2], [2, 2],
    ],
    column_hints=[
        [2], [4, 6], [9, 4, 4, 2], [1, 6, 2, 6], [1, 5, 2], [1, 6], [1, 5], [1, 4], [1, 4],
        [1, 4, 2], [1, 4, 6], [1, 6, 4, 4, 2], [9, 2, 6], [4, 2],
    ],
)

SAMPLES: Dict[str, PuzzleDefinition] = {
    "smile": SMILE,
    "5x5": FIVE_BY_FIVE,
    "webpbn-1": WEBPBN_1,
    "webpbn-6": WEBPBN_6,
    "webpbn-21": WEBPBN_21,
}

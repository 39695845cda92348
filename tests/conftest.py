import pytest

from nonogram_engine.models import PuzzleDefinition


@pytest.fixture
def smile_puzzle():
    return PuzzleDefinition(
        rows=8,
        columns=8,
        row_hints=[[0], [1, 1], [1, 1], [1, 1], [0], [1, 1], [4], [0]],
        column_hints=[[0], [1], [3, 1], [1], [1], [3, 1], [1], [0]],
    )

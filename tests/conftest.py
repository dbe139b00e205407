import pytest

from connect_four.debug import debug, DebugLevel
from connect_four.game.board import Board
from connect_four.utils import COLUMNS, ROWS

# 1 when a column starts with the second mark at the bottom
TIE_COLUMN_OFFSETS = [0, 0, 1, 1, 0, 0, 1]


def tie_mark(row, col, marks=("X", "O")):
    """Mark at (row, col) of a full board without four in a row."""
    return marks[(row + TIE_COLUMN_OFFSETS[col]) % 2]


def tie_move_order():
    """1-based columns that fill the tie board with the two marks alternating."""
    order = []
    for first, second in [(1, 3), (2, 4), (5, 7)]:
        order += [first, second, second, first] * 3
    order += [6] * ROWS
    return order


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def tie_board():
    tie = Board()
    for col in range(COLUMNS):
        for row in range(ROWS):
            assert tie.update(col + 1, tie_mark(row, col))
    return tie


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    debug.configure(level=DebugLevel.INFO, enabled=True, log_file="", components=[])

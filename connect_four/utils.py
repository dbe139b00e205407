"""
utils.py - Constants and helper functions for the Connect Four rules engine

This module provides the fixed board dimensions, the empty-cell marker and
the small formatting helpers shared by the board and the console match.
"""

from enum import Enum, auto
from typing import Any, List, Tuple

import numpy as np

# Game constants
ROWS = 6
COLUMNS = 7
CONNECT_N = 4  # Number of marks in a row to win

EMPTY_SLOT = None  # Marks are compared with ==, None is never a valid mark

DEFAULT_SYMBOLS = ("X", "O")

CELL_WIDTH = 3  # Printable width of a cell, borders excluded

# ANSI color codes for terminal output
COLORS = {
    "red": "\033[31m",
    "RESET": "\033[0m"
}

CLEAR_SCREEN = "\033[2J\033[H"


class Direction(Enum):
    """Enumeration representing the four axes scanned for a win."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right


# Direction vectors (row, col) for each direction. Row 0 is the bottom row,
# so a positive row step moves up the board.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1)
}


def colorize(text: str, color: str) -> str:
    """Wrap text in an ANSI color sequence."""
    return f"{COLORS[color]}{text}{COLORS['RESET']}"


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLUMNS) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        rows: Number of rows on the board
        cols: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < rows and 0 <= col < cols


def is_winning_combination(cells: List[Any]) -> bool:
    """
    Check if a window of cells holds CONNECT_N identical marks.

    The first cell must be occupied and every other cell must equal it.
    """
    if len(cells) != CONNECT_N or cells[0] is EMPTY_SLOT:
        return False
    first = cells[0]
    return all(cell is not EMPTY_SLOT and cell == first for cell in cells[1:])


def window_starts(rows: int, cols: int, direction: Direction) -> List[Tuple[int, int]]:
    """
    List every starting position of a CONNECT_N window along an axis.

    Ranges are inclusive of the last start that still fits on the board and
    are simply empty when the board is too small for a window.

    Args:
        rows: Number of rows on the board
        cols: Number of columns on the board
        direction: Axis to scan

    Returns:
        List of (row, col) starting positions
    """
    span = CONNECT_N - 1
    if direction == Direction.HORIZONTAL:
        row_range, col_range = range(rows), range(cols - span)
    elif direction == Direction.VERTICAL:
        row_range, col_range = range(rows - span), range(cols)
    elif direction == Direction.DIAGONAL_UP:
        row_range, col_range = range(rows - span), range(cols - span)
    else:
        row_range, col_range = range(rows - span), range(span, cols)
    return [(row, col) for row in row_range for col in col_range]


def render_grid_text(grid: np.ndarray) -> str:
    """
    Render a grid as bordered text with column numbers on top.

    The top game row is printed first so the bottom row sits just above
    the floor line.

    Args:
        grid: The game grid, row 0 at the bottom

    Returns:
        Text representation of the grid, every line newline terminated
    """
    rows, cols = grid.shape
    separator = "+---" * cols + "+\n"
    column_numbers = " ".join(str(num).center(CELL_WIDTH) for num in range(1, cols + 1)).rstrip()

    result = [f" {column_numbers}\n", separator]
    for row in range(rows - 1, -1, -1):
        cells = [_cell_text(grid[row, col]).center(CELL_WIDTH) for col in range(cols)]
        result.append("|" + "|".join(cells) + "|\n")
        result.append(separator)

    return "".join(result)


def _cell_text(cell: Any) -> str:
    return "" if cell is EMPTY_SLOT else str(cell)


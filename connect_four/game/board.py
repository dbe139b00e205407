"""
board.py - Board representation and core rules for Connect Four

This module implements the Board class which holds the grid of marks, drops
marks into columns, and answers the terminal questions of the game: has
someone connected four, and is the board full.
"""

from numbers import Integral
from typing import Any, List, Optional, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.utils import (ROWS, COLUMNS, CONNECT_N, EMPTY_SLOT, Direction,
                                DIRECTION_VECTORS, is_valid_position,
                                is_winning_combination, render_grid_text,
                                window_starts)


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the bottom of the board. A mark can be any value that is not
    None; marks are only ever compared with ``==``. The grid is private,
    moves go through ``update`` so a cell once filled is never changed.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.trace("Initializing new Board", "board")
        self._grid = np.full((ROWS, COLUMNS), EMPTY_SLOT, dtype=object)
        # Index of the next free row in each column
        self._next_available_row = np.zeros(COLUMNS, dtype=int)

    def update(self, column: int, mark: Any) -> bool:
        """
        Drop a mark into a column.

        Args:
            column: The column to drop into (1-indexed, as shown to players)
            mark: The mark of the player making the move

        Returns:
            True if the mark was placed, False if the move is not allowed
        """
        if mark is EMPTY_SLOT:
            debug.debug("Invalid move: no mark given", "board")
            return False

        if not _is_index(column) or not (1 <= column <= COLUMNS):
            debug.debug(f"Invalid move: column {column!r} out of range", "board")
            return False

        array_column = int(column) - 1
        if not self.is_placeable(array_column):
            debug.debug(f"Invalid move: column {column} is full", "board")
            return False

        row = int(self._next_available_row[array_column])
        self._grid[row, array_column] = mark
        self._next_available_row[array_column] += 1
        debug.trace(f"Placed {mark!r} at ({row}, {array_column})", "board")

        return True

    def is_placeable(self, column: int) -> bool:
        """
        Check if a mark can be dropped into a column.

        Args:
            column: The column to check (0-indexed)

        Returns:
            True if the column exists and has a free cell, False otherwise
        """
        if not _is_index(column) or not (0 <= column < COLUMNS):
            return False

        spot = int(self._next_available_row[column])
        return spot < ROWS and self._grid[spot, column] is EMPTY_SLOT

    def is_full(self) -> bool:
        """
        Check if every cell of the board is occupied.

        A full board is only a tie when ``has_win`` is False as well.
        """
        return all(cell is not EMPTY_SLOT for cell in self._grid.flat)

    def has_win(self) -> bool:
        """Check if any four identical marks are connected on the board."""
        debug.start_timer("win_check")
        found = any(self._find_window(direction) for direction in Direction)
        debug.end_timer("win_check", "board")
        return found

    def winning_line(self) -> List[Tuple[int, int]]:
        """
        Get the positions of a winning line.

        Returns:
            List of CONNECT_N (row, col) positions, or an empty list if no win
        """
        for direction in Direction:
            positions = self._find_window(direction)
            if positions:
                return positions
        return []

    def _find_window(self, direction: Direction) -> List[Tuple[int, int]]:
        """Scan one axis and return the first winning window found."""
        rows, cols = self._grid.shape
        dr, dc = DIRECTION_VECTORS[direction]

        for row, col in window_starts(rows, cols, direction):
            positions = [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]
            if is_winning_combination([self._grid[r, c] for r, c in positions]):
                debug.trace(f"{direction.name} win at {positions}", "board")
                return positions

        return []

    def rows(self) -> int:
        return ROWS

    def column_count(self) -> int:
        return COLUMNS

    def column_height(self, column: int) -> int:
        """Number of marks in a column (0-indexed), 0 for columns off the board."""
        if not _is_index(column) or not (0 <= column < COLUMNS):
            return 0
        return int(self._next_available_row[column])

    def move_count(self) -> int:
        return int(self._next_available_row.sum())

    def mark_at(self, row: int, column: int) -> Optional[Any]:
        """
        Get the mark at a position.

        Args:
            row: Row index, 0 is the bottom row
            column: Column index (0-indexed)

        Returns:
            The mark, or None if the cell is empty or off the board
        """
        if not (_is_index(row) and _is_index(column)):
            return None
        if not is_valid_position(row, column):
            return None
        return self._grid[int(row), int(column)]

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy object array, row 0 at the bottom, None for empty cells
        """
        return self._grid.copy()

    def render(self) -> str:
        """
        Render the board as text.

        Returns:
            Column-numbered, bordered grid with the bottom row printed last
        """
        return render_grid_text(self._grid)

    def __len__(self) -> int:
        return self.column_count()

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()


def new_grid() -> Board:
    """Create an empty board."""
    return Board()


def _is_index(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)

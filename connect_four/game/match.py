"""
match.py - Turn loop for a two-player Connect Four match

This module drives a console match on top of the Board: it asks both players
for their names, alternates moves until the board reports a win or a full
grid, and announces the result. Input and output go through injectable
callables so the loop can be driven without a terminal.
"""

import sys
from typing import Callable, List, Optional, Sequence

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.game.player import Player
from connect_four.utils import CLEAR_SCREEN, DEFAULT_SYMBOLS, colorize


def _print_error(message: str) -> None:
    print(message, file=sys.stderr)


class MatchController:
    """
    Runs one match between two players.

    The first symbol in ``create_players`` moves first. The player who made
    the last move is the winner when the board reports a win.
    """

    def __init__(self,
                 player_class: Callable[..., Player] = Player,
                 input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None,
                 error_fn: Optional[Callable[[str], None]] = None,
                 clear_screen: bool = True):
        self.player_class = player_class
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.error_fn = error_fn or _print_error
        self.clear_screen = clear_screen

        self.player_x: Optional[Player] = None
        self.player_o: Optional[Player] = None
        self.board: Optional[Board] = None
        self.winner: Optional[Player] = None

    def play(self, symbols: Sequence = DEFAULT_SYMBOLS) -> Optional[Player]:
        """
        Play a full match.

        Args:
            symbols: The marks for the first and second player

        Returns:
            The winning player, or None on a tie
        """
        self.player_x, self.player_o = self.create_players(symbols)
        self.verify_players()

        self.create_board()
        self._handle_moves()

        return self.winner

    def create_players(self, symbols: Sequence = DEFAULT_SYMBOLS) -> List[Optional[Player]]:
        """
        Ask for a name for every symbol.

        Returns:
            The created players, or [None, None] as soon as a name is empty
        """
        players = []

        for symbol in symbols:
            name = self.input_fn(f"{symbol}: Player Name: ~> ").strip()
            if not name:
                debug.debug(f"Empty name given for symbol {symbol!r}", "match")
                return [None, None]

            players.append(self.player_class(name=name, symbol=symbol))

        return players

    def verify_players(self) -> None:
        """Exit with status 1 unless both players were created."""
        if self.player_x and self.player_o:
            return

        self.error_fn(colorize("Expected two players to play. Try Again!", "red"))
        sys.exit(1)

    def create_board(self, board_class: Callable[[], Board] = Board) -> Board:
        self.board = board_class()
        return self.board

    def update_move_for(self, player: Player) -> bool:
        """
        Prompt a player until they make a legal move.

        Args:
            player: The player whose turn it is

        Returns:
            True once the move has been applied
        """
        self.winner = player

        while True:
            self.output_fn(f"{player.name}'s move. Symbol: {player.symbol}")
            move = self.input_fn(f"Enter the column to insert[1 - {self.board.column_count()}]: ~> ")

            try:
                column = int(move.strip())
            except ValueError:
                debug.debug(f"Non numeric move {move!r} from {player.name}", "match")
                self.error_fn(colorize("Invalid input. Please enter a valid column number.", "red"))
                continue

            if self.board.update(column, player.symbol):
                debug.debug(f"{player.name} played column {column}", "match")
                return True

            self.error_fn(colorize("Enter a valid column number.", "red"))

    def is_over(self) -> bool:
        """The match ends on a win or when the board is full."""
        return self.board.has_win() or self.board.is_full()

    def _handle_moves(self) -> None:
        """Alternate the two players until the match is over."""
        while True:
            self.update_move_for(self.player_x)
            self._display_board()
            if self.is_over():
                break

            self.update_move_for(self.player_o)
            self._display_board()
            if self.is_over():
                break

        self._announce_winner()

    def _display_board(self) -> None:
        if self.clear_screen:
            self.output_fn(CLEAR_SCREEN)
        self.output_fn(self.board.render())

    def _announce_winner(self) -> None:
        if self.board.has_win():
            debug.debug(f"Winning line: {self.board.winning_line()}", "match")
            self.output_fn(f"Congratulations {self.winner.name}, you won!")
        else:
            self.winner = None
            self.output_fn("It was tie")

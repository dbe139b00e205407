"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board with its rules, the player identity and
the turn loop of a console match.
"""

from connect_four.game.board import Board, new_grid
from connect_four.game.match import MatchController
from connect_four.game.player import Player

__all__ = ['Board', 'MatchController', 'Player', 'new_grid']

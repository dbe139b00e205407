"""
connect_four - Connect Four rules engine

This package provides the Connect Four board with its move and win rules,
plus a thin console match that drives two human players through a game.
"""

# Version number
__version__ = '0.1.0'

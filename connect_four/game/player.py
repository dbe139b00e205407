"""
player.py - Player identity for a Connect Four match
"""

from typing import Any


class Player:
    """A named participant and the mark they drop into the board."""

    __slots__ = ('_name', '_symbol')

    def __init__(self, name: str, symbol: Any):
        self._name = name
        self._symbol = symbol

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> Any:
        return self._symbol

    def __eq__(self, other) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.name == other.name and self.symbol == other.symbol

    def __hash__(self) -> int:
        return hash((self.name, self.symbol))

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, symbol={self.symbol!r})"

"""
cli.py - Command-line interface for playing Connect Four

This module parses the command-line options, prints the welcome banner and
runs a single two-player match in the terminal.
"""

import argparse
import sys
from typing import List, Optional

from connect_four.debug import debug, DebugLevel
from connect_four.game.match import MatchController
from connect_four.utils import ROWS, COLUMNS, DEFAULT_SYMBOLS

BANNER = r"""
  CCCC   OOO   N   N  N   N  EEEEE  CCCC  TTTTT     FFFFF  OOO  U   U  RRRR
 C      O   O  NN  N  NN  N  E     C        T       F     O   O U   U  R   R
 C      O   O  N N N  N N N  EEE   C        T       FFF   O   O U   U  RRRR
 C      O   O  N  NN  N  NN  E     C        T       F     O   O U   U  R  R
  CCCC   OOO   N   N  N   N  EEEEE  CCCC    T       F      OOO   UUU   R   R
"""

INSTRUCTIONS = [
    "Welcome to Connect Four!",
    "-------------------------",
    "Instructions:",
    f"1. The game is played on a grid that's {COLUMNS} columns by {ROWS} rows.",
    "2. Two players take turns to drop a disc into a column.",
    "3. The first player to connect four discs in a row wins.",
    "4. The game ends when the board is full and no player has won.",
    "5. Good luck!",
    "-------------------------",
]

EXIT_MESSAGE = "Game exited unexpectedly. Please try again."


class SimpleCLI:
    """Simple command-line interface for a two-player match."""

    def __init__(self, argv: Optional[List[str]] = None):
        """
        Initialize the CLI.

        Args:
            argv: Arguments to parse instead of sys.argv[1:]
        """
        self.argv = argv
        self.args = None

    def parse_args(self) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four for two players')

        parser.add_argument('--symbols', nargs=2, default=list(DEFAULT_SYMBOLS),
                            metavar=('FIRST', 'SECOND'),
                            help='Marks for the first and second player')
        parser.add_argument('--no-clear', action='store_true',
                            help='Do not clear the screen between moves')
        parser.add_argument('--debug', action='store_true', help='Enable debug mode')
        parser.add_argument('--debug-level', default='error',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Debug level')
        parser.add_argument('--debug-components', nargs='*', default=None,
                            metavar='COMPONENT',
                            help='Only log these components (board, match, cli)')
        parser.add_argument('--log-file', type=str, default=None,
                            help='Also write the log to this file')

        self.args = parser.parse_args(self.argv)
        if self.args.symbols[0] == self.args.symbols[1]:
            parser.error("the two players need different symbols")

        self._configure_debug()
        return self.args

    def _configure_debug(self) -> None:
        """Configure debug level based on args.debug or args.debug_level."""
        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        debug.configure(log_file=self.args.log_file, components=self.args.debug_components)

    def run(self) -> int:
        """
        Run one match.

        Returns:
            Process exit status
        """
        if not self.args:
            self.parse_args()

        print(BANNER)
        print("\n".join(INSTRUCTIONS))

        match = MatchController(clear_screen=not self.args.no_clear)
        try:
            winner = match.play(self.args.symbols)
        except (EOFError, KeyboardInterrupt) as e:
            debug.error(f"Match aborted: {type(e).__name__}", "cli")
            print(EXIT_MESSAGE)
            return 1

        debug.info(f"Match finished, winner: {winner!r}", "cli")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI(argv).run()


if __name__ == "__main__":
    sys.exit(main())

"""
cli.py - Command-line interface for DropFour

Two people share one terminal and take turns typing a 1-based column. When
a game ends they can restart with a fresh board or quit. A benchmark command
compares the two win detection strategies on random games.
"""

import argparse
import sys
from typing import List, Optional, TextIO

import numpy as np

from dropfour.debug import debug
from dropfour.game.engine import GameState
from dropfour.game.errors import MoveError
from dropfour.utils import ROWS, COLS, CONNECT_N, Outcome, Player

RESET = "\x1b[0m"
ORANGE = "\x1b[93m"
RED = "\x1b[0;31m"
CLEAR_SCREEN = "\x1b[2J"

COLOR_TOKENS = {None: "⚫", Player.FIRST: "🔴", Player.SECOND: "🟡"}
PLAIN_TOKENS = {None: ".", Player.FIRST: "X", Player.SECOND: "O"}

RULE = "--------------------"


class SimpleCLI:
    """Text shell that drives GameState from line-based input."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.args = None
        self.game: Optional[GameState] = None
        self.use_color = True

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply the logging options."""
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--rows', type=int, default=ROWS, help='Board height')
        common.add_argument('--cols', type=int, default=COLS, help='Board width')
        common.add_argument('--connect', type=int, default=CONNECT_N,
                            help='Tokens in a row needed to win')
        common.add_argument('--debug', metavar='LEVEL', default=None,
                            help='Log level: none, error, warning, info, debug, trace')
        common.add_argument('--log-file', default=None, help='Also write log records here')

        parser = argparse.ArgumentParser(description='DropFour: two-player column-drop game')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', parents=[common], help='Play a game interactively')
        play_parser.add_argument('--no-color', action='store_true',
                                 help='Plain X/O tokens and no terminal escape codes')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                                 help='Time full-scan vs incremental win detection')
        benchmark_parser.add_argument('--iterations', type=int, default=200,
                                      help='Number of random games per strategy')
        benchmark_parser.add_argument('--seed', type=int, default=0, help='Random seed')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', None):
            debug.set_from_string(self.args.debug)
        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the parsed command and return a process exit code."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command is None:
            self.write("Please specify a command. Use --help for options.")
            return 1

        try:
            if self.args.command == 'play':
                return self.play()
            return self.benchmark()
        except ValueError as e:
            self.write(f"Error: {e}")
            return 2

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def colored(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_color else text

    def new_game(self) -> None:
        self.game = GameState(self.args.rows, self.args.cols, self.args.connect)
        debug.info("Starting new game", "cli")

    def play(self) -> int:
        """Alternate turns until a game ends, then offer restart or quit."""
        self.use_color = not self.args.no_color
        self.new_game()
        self.display_board()

        while True:
            while not self.game.is_finished:
                self.write("\n")
                self.write(f"PLAYER {self.game.current_player.number}")
                line = self.read_line(f"Enter a column between 1 and {self.game.cols}:")
                if line is None:
                    return self.quit()
                self.handle_move(line)

            line = self.read_line("Press 'R' to restart or 'Q' to quit the game.")
            if line is None:
                return self.quit()

            choice = line.strip().lower()
            if choice == 'r':
                self.new_game()
                self.display_board()
            elif choice == 'q':
                return self.quit()
            else:
                self.display_error("invalid input")

    def handle_move(self, line: str) -> None:
        text = line.strip()
        try:
            column = int(text)
        except ValueError:
            self.display_error(f"'{text}' is not a column number")
            return

        try:
            self.game.apply_move(column - 1)
        except MoveError as e:
            self.display_error(str(e))
            return

        self.display_board()

    def read_line(self, prompt: str) -> Optional[str]:
        """Show ``prompt`` and read one line; None at end of input."""
        self.write(prompt)
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def quit(self) -> int:
        self.write("Quitting...")
        return 0

    def display_board(self) -> None:
        if self.use_color:
            self.stdout.write(CLEAR_SCREEN)

        tokens = COLOR_TOKENS if self.use_color else PLAIN_TOKENS

        self.write(self.colored(RULE, ORANGE))
        self.write(self.colored(f"DROP FOUR (Move {self.game.move_count})", ORANGE))
        self.write(self.colored(RULE, ORANGE))

        for row in self.game.board_rows():
            self.write(" ".join(tokens[cell] for cell in row))

        self.write(self.colored(RULE, ORANGE))

        if self.game.is_finished:
            if self.game.outcome == Outcome.WON:
                winner = self.game.winner
                message = f"{tokens[winner]} Player {winner.number} has won!"
            else:
                message = "It's a draw!"
            self.write(self.colored(message, ORANGE))
            self.write(self.colored(RULE, ORANGE))

    def display_error(self, message: str) -> None:
        self.display_board()
        self.write(self.colored(f"Error: {message}", RED))

    def benchmark(self) -> int:
        """Play random games with both detection strategies and compare timings."""
        iterations = self.args.iterations
        self.write(f"Benchmarking {iterations} random games on a "
                   f"{self.args.rows}x{self.args.cols} board")

        results = {}
        for incremental in (False, True):
            name = "incremental" if incremental else "full_scan"
            rng = np.random.default_rng(self.args.seed)
            outcomes = []

            debug.start_timer(name)
            for _ in range(iterations):
                game = GameState(self.args.rows, self.args.cols, self.args.connect,
                                 incremental=incremental)
                while not game.is_finished:
                    game.apply_move(int(rng.choice(game.valid_moves())))
                outcomes.append((game.outcome, game.winner, game.move_count))
            elapsed = debug.end_timer(name, "cli")

            results[name] = outcomes
            self.write(f"{name}: {elapsed:.6f} seconds total, "
                       f"{elapsed / max(iterations, 1) * 1000:.6f} ms per game")

        if results["full_scan"] != results["incremental"]:
            self.write("Strategies disagree on at least one game")
            return 1

        self.write("Both strategies agree on every game")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())

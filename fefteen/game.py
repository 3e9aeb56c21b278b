"""The fifteen puzzle: board, rendering and the interactive game loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from itertools import pairwise
from typing import TextIO

from fefteen.keys import Key, read_key as read_terminal_key
from fefteen.moves import motion_for
from fefteen.randomizer import Randomizer

ROWS = 4
COLUMNS = 4
SIZE = ROWS * COLUMNS
BLANK = "*"
BLANK_HOME = (ROWS - 1, COLUMNS - 1)

GREEN = "\033[32;1m"
PURPLE = "\033[35;1m"
RESET = "\033[0m"
CLEAR = "\033[H\033[2J"
BELL = "\a\n"


class MoveError(Exception):
    """Raised when a key cannot be used or the blank would leave the board."""


class Board:
    """A 4x4 board of single-character tiles with one blank."""

    def __init__(self, tiles: Sequence[str], blank: tuple[int, int] = BLANK_HOME) -> None:
        if len(tiles) != SIZE:
            raise ValueError(f"a board holds {SIZE} tiles, got {len(tiles)}")
        row, column = blank
        if not (0 <= row < ROWS and 0 <= column < COLUMNS):
            raise ValueError(f"blank position {blank} is off the board")
        self.tiles = list(tiles)
        if self.tiles[row * COLUMNS + column] != BLANK:
            raise ValueError(f"no blank tile at {blank}")
        self.blank = (row, column)

    @classmethod
    def shuffled(cls, randomizer: Randomizer | None = None) -> Board:
        """Fill the first fifteen cells with distinct random letters; the blank goes last."""
        if randomizer is None:
            randomizer = Randomizer(ord("A"), ord("O"))
        codes: list[int] = []
        while len(codes) < SIZE - 1:
            code = randomizer.element()
            if code not in codes:
                codes.append(code)
        return cls([chr(code) for code in codes] + [BLANK], BLANK_HOME)

    def is_solved(self) -> bool:
        """True when the first fifteen tiles form an ascending run of consecutive characters."""
        codes = [ord(tile) for tile in self.tiles[: SIZE - 1]]
        return all(b - a == 1 for a, b in pairwise(codes))

    def move_blank(self, vertical: int, horizontal: int) -> None:
        """Swap the blank with the tile at the given offset."""
        row, column = self.blank
        new_row, new_column = row + vertical, column + horizontal
        if not (0 <= new_row < ROWS and 0 <= new_column < COLUMNS):
            raise MoveError("Key error!")
        here = row * COLUMNS + column
        there = new_row * COLUMNS + new_column
        self.tiles[here], self.tiles[there] = self.tiles[there], self.tiles[here]
        self.blank = (new_row, new_column)

    def render(self) -> str:
        """Return the board as text, one row per line."""
        rows = (self.tiles[start : start + COLUMNS] for start in range(0, SIZE, COLUMNS))
        return "".join("".join(f"{tile}  " for tile in row) + "\n" for row in rows)


def header() -> str:
    """Return the title block shown above the board."""
    return (
        "===================== GAME 15 =====================\n"
        "<ESC> exit | <F1> restart | <up down left right>\n"
        "===================================================\n"
        "\n"
    )


def score_line(steps: int) -> str:
    """Return the step counter line."""
    return f"\nStep - {steps}\n"


def run_game(
    read_key: Callable[[], Key],
    out: TextIO | None = None,
    randomizer: Randomizer | None = None,
) -> bool:
    """Play until the puzzle is solved (True) or ESC is pressed (False).

    Raises MoveError on an unknown key or a move off the board.
    """
    if out is None:
        out = sys.stdout
    board = Board.shuffled(randomizer)
    steps = 0
    while True:
        out.write(CLEAR + header() + PURPLE + board.render() + score_line(steps) + RESET)
        out.flush()

        key = read_key()
        if key is Key.ERROR:
            raise MoveError("Key error!")
        if key is Key.ESC:
            return False
        if key is Key.F1:
            board = Board.shuffled(randomizer)
            steps = 0
            continue

        shift = motion_for(key)
        board.move_blank(shift.vertical, shift.horizontal)

        if board.is_solved():
            break
        steps += 1

    out.write(BELL + CLEAR + GREEN + board.render() + "You win!\n" + score_line(steps) + RESET)
    out.flush()
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game in the terminal and return the exit status."""
    parser = argparse.ArgumentParser(prog="fefteen", description="The fifteen puzzle in a terminal.")
    parser.parse_args(argv)

    out = sys.stdout
    fd = sys.stdin.fileno()
    try:
        won = run_game(lambda: read_terminal_key(fd), out, Randomizer(ord("A"), ord("O")))
    except MoveError as error:
        out.write(f"{error}\n{BELL}")
        out.flush()
        return -1
    if won:
        sys.stdin.readline()
        out.write(CLEAR)
        out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
# fefteen

The fifteen puzzle in your terminal. The board is a 4×4 grid. It holds the letters
`A` to `O` in random order and one blank square, shown as `*`. You move the blank
with the arrow keys. You win once the letters read `A` to `O` in order.

## Installing

```
pip install .
```

The game needs a POSIX terminal. It reads keys one at a time, with the terminal in
raw mode (no line buffering, no echo), and it uses the `termios` and `fcntl` modules.

## Playing

```
fefteen
```

You can also start it with `python -m fefteen.game`.

| Key        | Action                                  |
|------------|-----------------------------------------|
| Arrow keys | Swap the blank with its neighbour       |
| `Esc`      | Quit                                    |
| `F1`       | Start over with a fresh board and count |

Each move adds one to the step counter. Two things end the game with `Key error!`
and a non-zero exit status:

- pressing any key not listed above;
- moving the blank off the edge of the board.

When you solve the puzzle, the game shows the final board in green with `You win!`
and the step count. Press Enter to leave.

## Using it as a library

`fefteen.game.Board` holds the puzzle state:

```python
import random
from fefteen.game import Board, MoveError
from fefteen.randomizer import Randomizer

board = Board.shuffled(Randomizer(ord("A"), ord("O"), random.Random(1)))
print(board.render())
board.move_blank(-1, 0)   # move the blank up; raises MoveError off the edge
print(board.is_solved())
```

The blank always starts in the bottom-right corner. `Board(tiles, blank)` builds a
board from 16 one-character tiles. `blank` is the `(row, column)` of the `*` tile.

`fefteen.game.run_game(read_key, out, randomizer)` runs the game loop:

- `read_key` is any callable that returns a `fefteen.keys.Key`.
- Output goes to `out` (standard output by default).
- It returns `True` when the puzzle is solved and `False` on `Esc`.
- It raises `MoveError` on an unknown key or on a move off the board.

Other pieces:

- `fefteen.keys.key_for_codes` maps a four-code terminal sequence to a `Key`.
- `fefteen.keys.read_key` waits for a key press on a file descriptor.
- `fefteen.moves.motion_for` turns a `Key` into a `Shift` for the blank.
- `fefteen.randomizer.Randomizer` draws integers from a closed range. By default it
  uses `random.SystemRandom`; pass your own `random.Random` as `rng` for repeatable
  boards.
- `fefteen.terminal` has the `raw_input` and `nonblocking` context managers and the
  `read_char` and `read_codes` readers.

## Running the tests

```
pip install ".[test]"
pytest
```
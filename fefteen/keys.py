"""Recognition of the keys the game reacts to."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from fefteen.terminal import read_codes

CODE_LENGTH = 4


class Key(Enum):
    """A key recognised from a sequence of input codes."""

    UP = "key_up"
    DOWN = "key_down"
    RIGHT = "key_right"
    LEFT = "key_left"
    ESC = "key_esc"
    F1 = "key_f1"
    ERROR = "key_error"


_SEQUENCES = {
    (27, 91, 65, -1): Key.UP,
    (27, 91, 66, -1): Key.DOWN,
    (27, 91, 67, -1): Key.RIGHT,
    (27, 91, 68, -1): Key.LEFT,
    (27, -1, -1, -1): Key.ESC,
    (27, 79, 80, -1): Key.F1,
}


def key_for_codes(codes: Sequence[int]) -> Key:
    """Map a sequence of input codes to a key; unknown sequences give ``Key.ERROR``."""
    return _SEQUENCES.get(tuple(codes), Key.ERROR)


def read_key(fd: int = 0) -> Key:
    """Wait for a key press on ``fd`` and return the key it stands for."""
    return key_for_codes(read_codes(fd, CODE_LENGTH))
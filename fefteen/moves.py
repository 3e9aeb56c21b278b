"""Translation of keys into moves of the blank tile."""

from __future__ import annotations

from dataclasses import dataclass

from fefteen.keys import Key


@dataclass(frozen=True)
class Shift:
    """Offset of the blank tile in rows and columns."""

    vertical: int
    horizontal: int


_SHIFTS = {
    Key.UP: Shift(-1, 0),
    Key.DOWN: Shift(1, 0),
    Key.LEFT: Shift(0, -1),
    Key.RIGHT: Shift(0, 1),
}

_MISTAKE = Shift(-1, -1)


def motion_for(key: Key) -> Shift:
    """Return the shift for an arrow key; any other key yields a diagonal mistake."""
    return _SHIFTS.get(key, _MISTAKE)
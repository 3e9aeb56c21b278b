import pytest

from fefteen.keys import Key
from fefteen.moves import Shift, motion_for


@pytest.mark.parametrize(
    "key, shift",
    [
        (Key.UP, Shift(-1, 0)),
        (Key.DOWN, Shift(1, 0)),
        (Key.LEFT, Shift(0, -1)),
        (Key.RIGHT, Shift(0, 1)),
    ],
)
def test_arrow_keys(key, shift):
    assert motion_for(key) == shift


@pytest.mark.parametrize("key", [Key.ESC, Key.F1, Key.ERROR])
def test_other_keys_are_mistakes(key):
    assert motion_for(key) == Shift(-1, -1)


def test_opposite_arrows_cancel():
    for a, b in [(Key.UP, Key.DOWN), (Key.LEFT, Key.RIGHT)]:
        first, second = motion_for(a), motion_for(b)
        assert first.vertical + second.vertical == 0
        assert first.horizontal + second.horizontal == 0
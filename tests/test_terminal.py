import fcntl
import os
import termios

import pytest

from fefteen.terminal import NO_INPUT, nonblocking, raw_input, read_char, read_codes


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def test_read_codes_collects_escape_sequence(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"\x1b[A")
    assert read_codes(read_fd, 4) == (27, 91, 65, -1)


def test_read_codes_pads_with_no_input(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"x")
    codes = read_codes(read_fd, 4)
    assert codes[0] == ord("x")
    assert codes[1:] == (NO_INPUT, NO_INPUT, NO_INPUT)


def test_read_codes_rejects_zero_count(pipe):
    read_fd, _ = pipe
    with pytest.raises(ValueError):
        read_codes(read_fd, 0)


def test_read_char_returns_no_input_when_nothing_pending(pipe):
    read_fd, _ = pipe
    with nonblocking(read_fd):
        assert read_char(read_fd) == NO_INPUT


def test_read_char_at_end_of_input(pipe):
    read_fd, write_fd = pipe
    os.close(write_fd)
    assert read_char(read_fd) == NO_INPUT


def test_nonblocking_sets_and_clears_flag(pipe):
    read_fd, write_fd = pipe
    with nonblocking(read_fd):
        assert fcntl.fcntl(read_fd, fcntl.F_GETFL) & os.O_NONBLOCK
        assert read_char(read_fd) == NO_INPUT
    assert not fcntl.fcntl(read_fd, fcntl.F_GETFL) & os.O_NONBLOCK
    os.write(write_fd, b"z")
    assert read_char(read_fd) == ord("z")


def test_raw_input_disables_echo_and_restores():
    master, slave = os.openpty()
    try:
        before = termios.tcgetattr(slave)
        with raw_input(slave):
            lflag = termios.tcgetattr(slave)[3]
            assert lflag & termios.ECHO == 0
            assert lflag & termios.ICANON == 0
        assert termios.tcgetattr(slave) == before
    finally:
        os.close(master)
        os.close(slave)
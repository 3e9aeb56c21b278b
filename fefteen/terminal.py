"""Low-level keyboard input: raw mode, non-blocking reads and key code capture."""

from __future__ import annotations

import fcntl
import os
import termios
from collections.abc import Iterator
from contextlib import contextmanager

NO_INPUT = -1
"""Code reported when no byte is available (end of input or nothing pending)."""


@contextmanager
def raw_input(fd: int = 0) -> Iterator[None]:
    """Turn off canonical mode and echo on ``fd`` for the duration of the block.

    Descriptors that are not terminals are left untouched.
    """
    if not os.isatty(fd):
        yield
        return
    saved = termios.tcgetattr(fd)
    changed = termios.tcgetattr(fd)
    changed[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, changed)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


@contextmanager
def nonblocking(fd: int = 0) -> Iterator[None]:
    """Make reads on ``fd`` non-blocking; clear the flag again on exit."""
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
    try:
        yield
    finally:
        fcntl.fcntl(fd, fcntl.F_SETFL, flags & ~os.O_NONBLOCK)


def read_char(fd: int = 0) -> int:
    """Read one byte from ``fd`` in raw mode, or return ``NO_INPUT``."""
    with raw_input(fd):
        try:
            data = os.read(fd, 1)
        except BlockingIOError:
            return NO_INPUT
    return data[0] if data else NO_INPUT


def read_codes(fd: int = 0, count: int = 4) -> tuple[int, ...]:
    """Wait for one byte, then collect whatever else is pending, ``count`` codes in all.

    Missing codes are filled with ``NO_INPUT``.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    codes = [read_char(fd)]
    with nonblocking(fd):
        codes.extend(read_char(fd) for _ in range(count - 1))
    return tuple(codes)
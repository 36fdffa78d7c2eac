"""Reading single key presses from the user."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO


def _read_raw_char(fd: int) -> str:
    import termios

    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    new[6][termios.VMIN] = 1
    new[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)
    return data.decode("utf-8", errors="replace")


def get_char_from_user(stream: Optional[TextIO] = None) -> str:
    """Read one character without waiting for Enter.

    On a terminal, line buffering and echo are switched off for the read and
    restored afterwards. Other streams are simply read one character at a
    time. Returns an empty string at end of input.
    """
    if stream is None:
        stream = sys.stdin
    try:
        interactive = stream.isatty()
    except (AttributeError, ValueError):
        interactive = False
    if interactive:
        try:
            return _read_raw_char(stream.fileno())
        except (ImportError, OSError):
            pass
    return stream.read(1)
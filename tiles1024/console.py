"""Terminal helpers: cursor placement, screen clearing and key reading."""

from __future__ import annotations

import contextlib
import enum
import os
import select
import sys
import time
from typing import Iterator, TextIO

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None


class Key(enum.IntEnum):
    """Codes of the special keys."""

    UP = 38
    DOWN = 40
    RIGHT = 39
    LEFT = 37
    ESC = 27


_ANSI_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}
_SCAN_ARROWS = {72: Key.UP, 80: Key.DOWN, 77: Key.RIGHT, 75: Key.LEFT}
_EXTENDED_PREFIXES = (0x00, 0xE0)


def _stream(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def place_cursor(x: int, y: int, stream: TextIO | None = None) -> None:
    """Move the cursor to column ``x``, row ``y`` (both from 0)."""
    out = _stream(stream)
    out.write(f"\x1b[{y + 1};{x + 1}H")
    out.flush()


def output_string(x: int, y: int, text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` starting at column ``x``, row ``y``."""
    out = _stream(stream)
    place_cursor(x, y, out)
    out.write(text)
    out.flush()


def clear_screen(stream: TextIO | None = None) -> None:
    """Clear the screen, leaving the cursor where it was."""
    out = _stream(stream)
    out.write("\x1b7\x1b[2J\x1b8")
    out.flush()


def decode_key(data: bytes) -> int:
    """Turn the bytes of one key press into a key code; 0 means no key.

    Arrow keys, as terminal escape sequences or as prefixed scan codes,
    become Key members; any other key gives the code of its first byte.
    """
    if not data:
        return 0
    if len(data) >= 3 and data[0] == 0x1B and data[1:2] in (b"[", b"O"):
        arrow = _ANSI_ARROWS.get(chr(data[-1]))
        if arrow is not None:
            return arrow
    if len(data) >= 2 and data[0] in _EXTENDED_PREFIXES:
        return _SCAN_ARROWS.get(data[1], data[1])
    code = data[0]
    try:
        return Key(code)
    except ValueError:
        return code


@contextlib.contextmanager
def _cbreak(fd: int) -> Iterator[None]:
    if termios is None or not os.isatty(fd):
        yield
        return
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _windows_key(wait_time: int) -> int:
    deadline = time.monotonic() + wait_time / 1000
    while not msvcrt.kbhit():
        if time.monotonic() >= deadline:
            return 0
        time.sleep(0.001)
    data = msvcrt.getch()
    if data[0] in _EXTENDED_PREFIXES:
        data += msvcrt.getch()
    while msvcrt.kbhit():
        msvcrt.getch()
    return decode_key(data)


def check_key_pressed(wait_time: int = 20) -> int:
    """Wait up to ``wait_time`` milliseconds for a key and return its code.

    Returns 0 when no key is pressed in time. Pending input is discarded
    after a key is read.
    """
    if msvcrt is not None:
        return _windows_key(wait_time)
    fd = sys.stdin.fileno()
    with _cbreak(fd):
        ready, _, _ = select.select([fd], [], [], max(wait_time, 0) / 1000)
        if not ready:
            return 0
        data = os.read(fd, 16)
        if termios is not None and os.isatty(fd):
            termios.tcflush(fd, termios.TCIFLUSH)
    return decode_key(data)
"""Terminal handling: raw mode, key decoding and window size."""

from __future__ import annotations

import errno
import os
import re
import termios
from collections.abc import Callable

from .structures import Key, Point

_REPORT_RE = re.compile(rb"\s*([+-]?\d+);\s*([+-]?\d+)")
_REPORT_MAX = 31


def read_key(read_byte: Callable[[], bytes]) -> int:
    """Read one key, decoding escape sequences into key codes.

    ``read_byte`` returns one byte, or ``b""`` when nothing arrived in time.
    """
    while True:
        first = read_byte()
        if first:
            break
    c = first[0]
    if c != Key.ESC:
        return c

    seq0 = read_byte()
    if not seq0:
        return Key.ESC
    seq1 = read_byte()
    if not seq1:
        return Key.ESC

    if seq0 == b"[":
        if seq1.isdigit():
            seq2 = read_byte()
            if not seq2:
                return Key.ESC
            if seq2 == b"~":
                code = {b"3": Key.CTRL_D, b"5": Key.PAGE_UP, b"6": Key.PAGE_DOWN}.get(seq1)
                if code is not None:
                    return code
        else:
            code = {
                b"A": Key.CTRL_P,
                b"B": Key.CTRL_N,
                b"C": Key.CTRL_F,
                b"D": Key.CTRL_B,
                b"H": Key.HOME_KEY,
                b"F": Key.END_KEY,
            }.get(seq1)
            if code is not None:
                return code
    elif seq0 == b"O":
        code = {b"H": Key.HOME_KEY, b"F": Key.END_KEY}.get(seq1)
        if code is not None:
            return code
    return Key.ESC


def parse_cursor_report(data: bytes) -> Point:
    """Parse a cursor position report ``ESC [ row ; col R``.

    The trailing ``R`` may be left off. Raises ValueError if malformed.
    """
    end = data.find(b"R")
    if end >= 0:
        data = data[:end]
    if len(data) < 2 or data[0] != Key.ESC or data[1:2] != b"[":
        raise ValueError(f"not a cursor position report: {data!r}")
    match = _REPORT_RE.match(data, 2)
    if match is None:
        raise ValueError(f"not a cursor position report: {data!r}")
    return Point(row=int(match.group(1)), col=int(match.group(2)))


class Terminal:
    """A terminal switched to raw mode for the duration of a ``with`` block."""

    def __init__(self, fd_in: int = 0, fd_out: int = 1) -> None:
        self.fd_in = fd_in
        self.fd_out = fd_out
        self.rawmode = False
        self._saved: list | None = None

    def __enter__(self) -> Terminal:
        if self.rawmode:
            return self
        if not os.isatty(self.fd_in):
            raise OSError(errno.ENOTTY, os.strerror(errno.ENOTTY))
        saved = termios.tcgetattr(self.fd_in)
        raw = list(saved)
        raw[0] &= ~(
            termios.IGNBRK | termios.BRKINT | termios.PARMRK | termios.ISTRIP
            | termios.INLCR | termios.IGNCR | termios.ICRNL | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] &= ~(termios.CSIZE | termios.PARENB)
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN)
        cc = list(saved[6])
        cc[termios.VMIN] = 0
        cc[termios.VTIME] = 1
        raw[6] = cc
        termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, raw)
        self._saved = saved
        self.rawmode = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.rawmode and self._saved is not None:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, self._saved)
            self.rawmode = False
        os.write(self.fd_out, b"\x1b[2J\x1b[H")

    def read_key(self) -> int:
        """Read one key from the terminal; only valid in raw mode."""
        if not self.rawmode:
            raise RuntimeError("terminal is not in raw mode")
        return read_key(lambda: os.read(self.fd_in, 1))

    def _query_cursor(self) -> Point:
        if os.write(self.fd_out, b"\x1b[6n") != 4:
            raise ValueError("cursor query not sent")
        reply = bytearray()
        while len(reply) < _REPORT_MAX:
            byte = os.read(self.fd_in, 1)
            if not byte or byte == b"R":
                break
            reply += byte
        return parse_cursor_report(bytes(reply))

    def window_size(self) -> Point:
        """Return the area available for text: the window less two status rows."""
        rows = cols = 0
        try:
            size = os.get_terminal_size(self.fd_out)
            rows, cols = size.lines, size.columns
        except OSError:
            pass
        found = cols != 0
        if not found:
            try:
                orig = self._query_cursor()
            except ValueError:
                orig = None
            if orig is not None and os.write(self.fd_out, b"\x1b[999C\x1b[999B") == 12:
                try:
                    corner = self._query_cursor()
                    rows, cols = corner.row, corner.col
                    found = True
                except ValueError:
                    pass
                os.write(self.fd_out, f"\x1b[{orig.row};{orig.col}H".encode("ascii"))
        if not found:
            raise OSError("Unable to query the screen for size (columns / rows)")
        return Point(row=rows - 2, col=cols)
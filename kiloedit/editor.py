"""Editor state and the commands bound to keys."""

from __future__ import annotations

import time
from collections.abc import Callable

from .buffer import Buffer
from .structures import Key, Point

QUERY_LEN = 256
QUIT_TIMES = 2
_STATUS_LEN = 79
_HELP = "unknown command. HELP: C-s: save | C-q: quit | C-f: find"


class EditorQuit(Exception):
    """Raised when the user asks to leave the editor."""


def _is_print(c: int) -> bool:
    return 32 <= c <= 126


class Editor:
    """An editor holding one buffer, a window size and a status message.

    ``read_key`` supplies key codes for interactive prompts; ``refresh`` is
    called with the editor whenever a prompt wants the screen redrawn.
    """

    def __init__(
        self,
        buffer: Buffer | None = None,
        winsize: Point | None = None,
        read_key: Callable[[], int] | None = None,
        refresh: Callable[[Editor], None] | None = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else Buffer()
        self.winsize = winsize if winsize is not None else Point(row=24, col=80)
        self.statusmsg = ""
        self.statusmsg_time = 0.0
        self.quit_times = QUIT_TIMES
        self._read_key = read_key
        self._refresh = refresh
        self._handlers: dict[int, Callable[[], None]] = {
            Key.CTRL_N: self.next_line,
            Key.CTRL_P: self.prev_line,
            Key.CTRL_F: self.forward_char,
            Key.CTRL_B: self.backward_char,
            Key.CTRL_D: self.delete_forward_char,
            Key.CTRL_L: self.find_file_interactive,
            Key.CTRL_M: self.insert_newline,
            Key.CTRL_H: self.delete_char,
            Key.DEL: self.delete_char,
            Key.CTRL_S: self.save,
            Key.CTRL_K: self.kill_line,
            Key.CTRL_Q: self.quit,
        }

    def message(self, text: str) -> None:
        """Show ``text`` in the echo area, stamped with the current time."""
        self.statusmsg = text[:_STATUS_LEN]
        self.statusmsg_time = time.time()

    def insert_char(self, c: int | str) -> None:
        """Insert a character at point, creating empty lines as needed."""
        ch = chr(c) if isinstance(c, int) else c
        buf = self.buffer
        filerow, filecol = buf.file_row, buf.file_col
        while len(buf.lines) <= filerow:
            buf.insert_line(len(buf.lines), "")
        buf.row_insert_char(filerow, filecol, ch)
        if buf.point.row == self.winsize.col - 1:
            buf.offset.col += 1
        else:
            buf.point.col += 1
        buf.dirty += 1

    def insert_newline(self) -> None:
        """Split the line at point, or open a line at the end of the file."""
        buf = self.buffer
        filerow, filecol = buf.file_row, buf.file_col
        line = buf.current_line()
        if line is None:
            if filerow != len(buf.lines):
                return
            buf.insert_line(filerow, "")
        else:
            filecol = min(filecol, len(line))
            if filecol == 0:
                buf.insert_line(filerow, "")
            else:
                buf.insert_line(filerow + 1, line.chars[filecol:])
                buf.lines[filerow].chars = buf.lines[filerow].chars[:filecol]
                buf.render_line(filerow)
        if buf.point.row == self.winsize.row - 1:
            buf.offset.row += 1
        else:
            buf.point.row += 1
        buf.point.col = 0
        buf.offset.col = 0

    def next_line(self) -> None:
        buf = self.buffer
        if buf.file_row < len(buf.lines):
            if buf.point.row == self.winsize.row - 1:
                buf.offset.row += 1
            else:
                buf.point.row += 1
        buf.fix_point()

    def prev_line(self) -> None:
        buf = self.buffer
        if buf.point.row == 0:
            if buf.offset.row:
                buf.offset.row -= 1
        else:
            buf.point.row -= 1
        buf.fix_point()

    def forward_char(self) -> None:
        buf = self.buffer
        line = buf.current_line()
        filecol = buf.file_col
        if line is not None and filecol < len(line):
            if buf.point.col == self.winsize.col - 1:
                buf.offset.col += 1
            else:
                buf.point.col += 1
        elif line is not None and filecol == len(line):
            buf.point.col = 0
            buf.offset.col = 0
            if buf.point.row == self.winsize.row - 1:
                buf.offset.row += 1
            else:
                buf.point.row += 1
        buf.fix_point()

    def backward_char(self) -> None:
        buf = self.buffer
        filerow = buf.file_row
        if buf.point.col == 0:
            if buf.offset.col:
                buf.offset.col -= 1
            elif filerow > 0:
                buf.point.row -= 1
                buf.point.col = len(buf.lines[filerow - 1])
                if buf.point.col > self.winsize.col - 1:
                    buf.offset.col = buf.point.col - self.winsize.col + 1
                    buf.point.col = self.winsize.col - 1
        else:
            buf.point.col -= 1
        buf.fix_point()

    def delete_char(self) -> None:
        """Delete the character before point, joining lines at column zero."""
        buf = self.buffer
        filerow, filecol = buf.file_row, buf.file_col
        line = buf.current_line()
        if line is None or (filecol == 0 and filerow == 0):
            return
        if filecol == 0:
            filecol = len(buf.lines[filerow - 1])
            buf.row_append_string(filerow - 1, line.chars)
            buf.kill_line(filerow)
            if buf.point.row == 0:
                buf.offset.row -= 1
            else:
                buf.point.row -= 1
            buf.point.col = filecol
            if buf.point.col >= self.winsize.col:
                shift = (self.winsize.col - buf.point.col) + 1
                buf.point.col -= shift
                buf.offset.col += shift
        else:
            buf.row_delete_char(filerow, filecol - 1)
            if buf.point.col == 0 and buf.offset.col:
                buf.offset.col -= 1
            else:
                buf.point.col -= 1
        buf.dirty += 1

    def delete_forward_char(self) -> None:
        self.forward_char()
        self.delete_char()

    def kill_line(self) -> None:
        self.buffer.kill_line(self.buffer.file_row)

    def save(self) -> None:
        """Write the buffer to disk and report the outcome in the echo area."""
        try:
            written = self.buffer.write()
        except OSError as exc:
            self.message(f"Can't save! I/O error: {exc.strerror}")
            return
        self.message(f"{written} bytes written on disk")

    def find_file_interactive(self) -> None:
        """Prompt for a file name and load it into the buffer."""
        if self.buffer.dirty:
            self.message("You must first write or discard the current changes")
            return
        if self._read_key is None:
            raise RuntimeError("no key source for the prompt")
        query = ""
        while True:
            self.message(f"File name: {query} (Use ESC/Enter)")
            if self._refresh is not None:
                self._refresh(self)
            c = self._read_key()
            if c in (Key.CTRL_H, Key.DEL):
                query = query[:-1]
            elif c == Key.ESC:
                self.message("")
                return
            elif c == Key.CTRL_M:
                self.message(f"Opening {query}")
                self.buffer.find_file(query)
                return
            elif _is_print(c) and len(query) < QUERY_LEN:
                query += chr(c)

    def quit(self) -> None:
        """Leave, asking for repeated presses while there are unsaved changes."""
        if not self.buffer.dirty or not self.quit_times:
            raise EditorQuit
        self.message(
            f"WARNING!!! unsaved changes. Press C-q {self.quit_times} more times to quit."
        )
        self.quit_times -= 1

    def process(self, c: int) -> None:
        """Handle one key code."""
        if _is_print(c):
            self.insert_char(c)
        else:
            handler = self._handlers.get(c)
            if handler is not None:
                handler()
            else:
                self.message(_HELP)
        if c != Key.CTRL_Q:
            self.quit_times = QUIT_TIMES
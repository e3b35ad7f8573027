"""A text buffer: lines of a file, point, scroll offset and file I/O."""

from __future__ import annotations

from dataclasses import dataclass, field

from .highlights import select_syntax, update_syntax
from .structures import Line, Point, Syntax

_MAX_RENDER = 2**31 - 1
_ENCODING = "latin-1"


@dataclass
class Buffer:
    """The lines of one file together with the cursor and scroll state.

    ``point`` is the cursor position on screen; ``offset`` is the position
    in the file of the top-left corner of the screen.
    """

    lines: list[Line] = field(default_factory=list)
    point: Point = field(default_factory=Point)
    offset: Point = field(default_factory=Point)
    dirty: int = 0
    filename: str = ""
    syntax: Syntax | None = None

    @property
    def file_row(self) -> int:
        return self.offset.row + self.point.row

    @property
    def file_col(self) -> int:
        return self.offset.col + self.point.col

    def current_line(self) -> Line | None:
        """Return the line under point, or None past the end of the file."""
        row = self.file_row
        return self.lines[row] if row < len(self.lines) else None

    def render_line(self, index: int) -> None:
        """Rebuild the rendered form of a line (tabs expanded) and its highlights."""
        line = self.lines[index]
        tabs = line.chars.count("\t")
        if len(line.chars) + tabs * 8 + 1 > _MAX_RENDER:
            raise ValueError("file lines are too long")
        parts: list[str] = []
        col = 0
        for ch in line.chars:
            if ch == "\t":
                parts.append(" ")
                col += 1
                while (col + 1) % 8:
                    parts.append(" ")
                    col += 1
            else:
                parts.append(ch)
                col += 1
        line.render = "".join(parts)
        update_syntax(self.lines, index, self.syntax)

    def insert_line(self, at: int, text: str) -> None:
        """Insert a new line before index ``at``; ignored past the end."""
        if at > len(self.lines):
            return
        self.lines.insert(at, Line(chars=text))
        self.render_line(at)
        self.dirty += 1

    def clear(self) -> None:
        """Drop all lines and reset point, offset and the modified flag."""
        self.point = Point()
        self.offset = Point()
        self.dirty = 0
        self.lines.clear()

    def kill_line(self, at: int) -> None:
        """Remove the line at index ``at``, if it exists."""
        if at >= len(self.lines):
            return
        del self.lines[at]
        self.dirty += 1
        self.fix_point()

    def row_insert_char(self, index: int, at: int, char: str) -> None:
        """Insert ``char`` at column ``at``, padding with spaces past the end."""
        line = self.lines[index]
        chars = line.chars
        if at > len(chars):
            line.chars = chars + " " * (at - len(chars)) + char
        else:
            line.chars = chars[:at] + char + chars[at:]
        self.render_line(index)
        self.dirty += 1

    def row_append_string(self, index: int, text: str) -> None:
        """Append ``text`` to the end of a line."""
        self.lines[index].chars += text
        self.render_line(index)
        self.dirty += 1

    def row_delete_char(self, index: int, at: int) -> None:
        """Delete the character at column ``at``; ignored past the end."""
        line = self.lines[index]
        if len(line.chars) <= at:
            return
        line.chars = line.chars[:at] + line.chars[at + 1:]
        self.render_line(index)
        self.dirty += 1

    def fix_point(self) -> None:
        """Pull point back when it lies past the end of its line."""
        line = self.current_line()
        rowlen = len(line) if line is not None else 0
        filecol = self.file_col
        if filecol > rowlen:
            self.point.col -= filecol - rowlen
            if self.point.col < 0:
                self.offset.col += self.point.col
                self.point.col = 0

    def to_text(self) -> str:
        """Join all lines, each terminated by a newline."""
        return "".join(line.chars + "\n" for line in self.lines)

    def write(self) -> int:
        """Save the buffer to its file and return the number of bytes written."""
        text = self.to_text()
        with open(self.filename, "w", encoding=_ENCODING, newline="") as fh:
            fh.write(text)
        self.dirty = 0
        return len(text)

    def find_file(self, filename: str) -> bool:
        """Load ``filename`` into the buffer.

        Returns False when the file does not exist (the buffer is left empty
        but takes the name); other I/O errors are raised.
        """
        self.clear()
        syntax = select_syntax(filename)
        if syntax is not None:
            self.syntax = syntax
        self.filename = filename
        try:
            with open(filename, "rb") as fh:
                data = fh.read().decode(_ENCODING)
        except FileNotFoundError:
            return False
        pieces = data.split("\n")
        last = pieces.pop()
        for piece in pieces:
            self.insert_line(len(self.lines), piece)
        if last:
            if last.endswith("\r"):
                last = last[:-1]
            self.insert_line(len(self.lines), last)
        self.dirty = 0
        return True
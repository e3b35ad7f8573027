"""Screen drawing: turn editor state into one terminal update."""

from __future__ import annotations

import sys
import time
from typing import BinaryIO

from .editor import Editor
from .highlights import syntax_to_color
from .structures import Highlight

_STATUS_LEN = 79
_MESSAGE_TIMEOUT = 2


def _render_text_row(parts: list[str], render: str, hl: list[Highlight], start: int, ncols: int) -> None:
    current_color = -1
    for ch, kind in zip(render[start:start + ncols], hl[start:start + ncols]):
        if kind == Highlight.NONPRINT:
            sym = chr(ord("@") + ord(ch)) if ord(ch) <= 26 else "?"
            parts.append(f"\x1b[7m{sym}\x1b[0m")
        elif kind == Highlight.NORMAL:
            if current_color != -1:
                parts.append("\x1b[39m")
                current_color = -1
            parts.append(ch)
        else:
            color = syntax_to_color(kind)
            if color != current_color:
                parts.append(f"\x1b[{color}m")
                current_color = color
            parts.append(ch)


def render_screen(editor: Editor, now: float) -> str:
    """Build the escape sequence that redraws the whole screen.

    A status message older than two seconds (relative to ``now``) is cleared
    from the editor as a side effect.
    """
    buf = editor.buffer
    winsize = editor.winsize
    parts: list[str] = ["\x1b[?25l", "\x1b[H"]

    for screen_row in range(winsize.row):
        filerow = buf.offset.row + screen_row
        if filerow >= len(buf.lines):
            parts.append("~\x1b[0K\r\n")
            continue
        line = buf.lines[filerow]
        ncols = max(0, min(len(line.render) - buf.offset.col, winsize.col))
        _render_text_row(parts, line.render, line.hl, buf.offset.col, ncols)
        parts.append("\x1b[39m\x1b[0K\r\n")

    # mode line
    parts.append("\x1b[0K\x1b[7m")
    modified = "(modified)" if buf.dirty else ""
    status = f"{buf.filename[:20]} - {len(buf.lines)} lines {modified}"[:_STATUS_LEN]
    rstatus = f"{buf.offset.row + buf.point.row + 1}/{len(buf.lines)}"[:_STATUS_LEN]
    length = min(len(status), winsize.col)
    parts.append(status[:length])
    while length < winsize.col:
        if winsize.col - length == len(rstatus):
            parts.append(rstatus)
            break
        parts.append(" ")
        length += 1
    parts.append("\x1b[0m\r\n")

    # echo area
    parts.append("\x1b[0K")
    if now > editor.statusmsg_time + _MESSAGE_TIMEOUT:
        editor.statusmsg = ""
    parts.append(editor.statusmsg[:winsize.col])

    # cursor: the screen column differs from point.col where tabs expand
    point_col = 1
    line = buf.current_line()
    if line is not None:
        for j in range(buf.offset.col, buf.offset.col + buf.point.col):
            if j < len(line.chars) and line.chars[j] == "\t":
                point_col += 7 - point_col % 8
            point_col += 1
    parts.append(f"\x1b[{buf.point.row + 1};{point_col}H")
    parts.append("\x1b[?25h")
    return "".join(parts)


def refresh(editor: Editor, out: BinaryIO | None = None) -> None:
    """Redraw the screen on ``out`` (standard output by default)."""
    if out is None:
        out = sys.stdout.buffer
    data = render_screen(editor, time.time()).encode("latin-1", errors="replace")
    out.write(data)
    out.flush()
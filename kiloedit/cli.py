"""Command line entry point: edit one file in the terminal."""

from __future__ import annotations

import signal
import sys

from .draw import refresh
from .editor import Editor, EditorQuit
from .term import Terminal

_USAGE = "Usage: editor <filename>"


def _resize(editor: Editor, term: Terminal) -> None:
    size = term.window_size()
    editor.winsize = size
    point = editor.buffer.point
    if point.row > size.row:
        point.row = size.row - 1
    if point.col > size.col:
        point.col = size.col - 1


def main(argv: list[str] | None = None) -> int:
    """Run the editor on the single file named in ``argv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        with Terminal() as term:
            out = sys.stdout.buffer
            editor = Editor(read_key=term.read_key, refresh=lambda ed: refresh(ed, out))
            _resize(editor, term)

            def on_winch(signum, frame):
                _resize(editor, term)
                refresh(editor, out)

            previous = signal.signal(signal.SIGWINCH, on_winch)
            try:
                editor.buffer.find_file(args[0])
                while True:
                    refresh(editor, out)
                    editor.process(term.read_key())
            except EditorQuit:
                return 0
            finally:
                signal.signal(signal.SIGWINCH, previous)
    except ValueError:
        print("file lines are too long ... quiting", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"editor: {exc}", file=sys.stderr)
        return 1
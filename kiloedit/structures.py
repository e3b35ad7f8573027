"""Core data types shared by the editor: highlight classes, keys, lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

HIGHLIGHT_STRINGS = 1 << 0
HIGHLIGHT_NUMBERS = 1 << 1


class Highlight(IntEnum):
    """Syntactic class of one rendered character."""

    NORMAL = 0
    NONPRINT = 1
    COMMENT = 2
    MLCOMMENT = 3
    KEYWORD1 = 4
    KEYWORD2 = 5
    STRING = 6
    NUMBER = 7
    MATCH = 8


class Key(IntEnum):
    """Key codes reported by the terminal, plus a few synthetic ones."""

    KEY_NULL = 0
    CTRL_B = 2
    CTRL_C = 3
    CTRL_D = 4
    CTRL_F = 6
    CTRL_H = 8
    TAB = 9
    CTRL_K = 11
    CTRL_L = 12
    CTRL_M = 13
    CTRL_N = 14
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_S = 19
    CTRL_U = 21
    CTRL_Y = 25
    ESC = 27
    DEL = 127
    META_F = 230
    HOME_KEY = 1005
    END_KEY = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


@dataclass
class Point:
    """A row/column pair on screen or in the buffer."""

    row: int = 0
    col: int = 0


@dataclass(frozen=True)
class Syntax:
    """Highlighting rules for one family of file types.

    Keywords ending in ``|`` are highlighted as secondary keywords.
    An empty comment delimiter disables that kind of comment.
    """

    name: str
    filematch: tuple[str, ...]
    keywords: tuple[str, ...]
    singleline_comment_start: str = ""
    multiline_comment_start: str = ""
    multiline_comment_end: str = ""
    flags: int = 0


@dataclass
class Line:
    """One line of a file with its rendered form and highlight classes."""

    chars: str = ""
    render: str = ""
    hl: list[Highlight] = field(default_factory=list)
    hl_oc: bool = False

    def __len__(self) -> int:
        return len(self.chars)
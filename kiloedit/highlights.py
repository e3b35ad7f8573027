"""Syntax highlighting of rendered lines."""

from __future__ import annotations

from collections.abc import Sequence

from .structures import (
    HIGHLIGHT_NUMBERS,
    HIGHLIGHT_STRINGS,
    Highlight,
    Line,
    Syntax,
)

_C_SPACE = " \t\n\v\f\r"
_SEPARATORS = ",.()+-/*=~%[];"
_DIGITS = "0123456789"

C_SYNTAX = Syntax(
    name="c",
    filematch=(".c", ".h", ".cpp", ".hpp", ".cc"),
    keywords=(
        # C keywords
        "auto", "break", "case", "continue", "default", "do", "else", "enum",
        "extern", "for", "goto", "if", "register", "return", "sizeof", "static",
        "struct", "switch", "typedef", "union", "volatile", "while", "NULL",
        # C++ keywords
        "alignas", "alignof", "and", "and_eq", "asm", "bitand", "bitor", "class",
        "compl", "constexpr", "const_cast", "deltype", "delete", "dynamic_cast",
        "explicit", "export", "false", "friend", "inline", "mutable", "namespace",
        "new", "noexcept", "not", "not_eq", "nullptr", "operator", "or", "or_eq",
        "private", "protected", "public", "reinterpret_cast", "static_assert",
        "static_cast", "template", "this", "thread_local", "throw", "true", "try",
        "typeid", "typename", "virtual", "xor", "xor_eq",
        # C types
        "int|", "long|", "double|", "float|", "char|", "unsigned|", "signed|",
        "void|", "short|", "auto|", "const|", "bool|",
    ),
    singleline_comment_start="//",
    multiline_comment_start="/*",
    multiline_comment_end="*/",
    flags=HIGHLIGHT_STRINGS | HIGHLIGHT_NUMBERS,
)

PYTHON_SYNTAX = Syntax(
    name="python",
    filematch=(".py",),
    keywords=("def", "return", "lambda"),
    singleline_comment_start="##",
    flags=HIGHLIGHT_STRINGS | HIGHLIGHT_NUMBERS,
)

SYNTAX_DB: tuple[Syntax, ...] = (C_SYNTAX, PYTHON_SYNTAX)

_COLORS = {
    Highlight.COMMENT: 36,
    Highlight.MLCOMMENT: 36,
    Highlight.KEYWORD1: 33,
    Highlight.KEYWORD2: 32,
    Highlight.STRING: 35,
    Highlight.NUMBER: 31,
    Highlight.MATCH: 34,
}
_DEFAULT_COLOR = 37


def is_separator(c: str) -> bool:
    """Return True if ``c`` ends a word; the empty string counts as end of line."""
    if c in ("", "\0"):
        return True
    return len(c) == 1 and (c in _C_SPACE or c in _SEPARATORS)


def _is_printable(c: str) -> bool:
    return " " <= c <= "~"


def row_has_open_comment(line: Line) -> bool:
    """Return True if the line ends inside an unterminated multi-line comment."""
    n = len(line.render)
    if n == 0 or len(line.hl) < n:
        return False
    if line.hl[n - 1] != Highlight.MLCOMMENT:
        return False
    return n < 2 or line.render[n - 2:n] != "*/"


def _highlight_row(lines: Sequence[Line], index: int, syntax: Syntax | None) -> bool | None:
    """Recompute one row's highlights.

    Returns the row's open-comment state, or None when the row was finished
    early (no syntax, or a single-line comment) and no propagation applies.
    """
    row = lines[index]
    render = row.render
    nul = render.find("\0")
    text = render if nul < 0 else render[:nul]
    hl = [Highlight.NORMAL] * len(render)
    row.hl = hl
    if syntax is None:
        return None

    scs = syntax.singleline_comment_start
    mcs = syntax.multiline_comment_start
    mce = syntax.multiline_comment_end
    strings = bool(syntax.flags & HIGHLIGHT_STRINGS)
    numbers = bool(syntax.flags & HIGHLIGHT_NUMBERS)
    keywords = [
        (kw[:-1], Highlight.KEYWORD2) if kw.endswith("|") else (kw, Highlight.KEYWORD1)
        for kw in syntax.keywords
    ]

    end = len(text)
    i = 0
    while i < end and text[i] in _C_SPACE:
        i += 1

    prev_sep = True
    in_string = ""
    in_comment = index > 0 and row_has_open_comment(lines[index - 1])

    while i < end:
        c = text[i]

        if prev_sep and scs and text.startswith(scs, i):
            for k in range(i, min(len(row.chars), len(hl))):
                hl[k] = Highlight.COMMENT
            return None

        if in_comment:
            hl[i] = Highlight.MLCOMMENT
            if mce and text.startswith(mce, i):
                for k in range(i, i + len(mce)):
                    hl[k] = Highlight.MLCOMMENT
                i += len(mce)
                in_comment = False
                prev_sep = True
            else:
                prev_sep = False
                i += 1
            continue
        if mcs and text.startswith(mcs, i):
            for k in range(i, i + len(mcs)):
                hl[k] = Highlight.MLCOMMENT
            i += len(mcs)
            in_comment = True
            prev_sep = False
            continue

        if in_string:
            hl[i] = Highlight.STRING
            if c == "\\":
                if i + 1 < len(hl):
                    hl[i + 1] = Highlight.STRING
                i += 2
                prev_sep = False
                continue
            if c == in_string:
                in_string = ""
            i += 1
            continue
        if strings and c in "\"'":
            in_string = c
            hl[i] = Highlight.STRING
            i += 1
            prev_sep = False
            continue

        if not _is_printable(c):
            hl[i] = Highlight.NONPRINT
            i += 1
            prev_sep = False
            continue

        after_number = i > 0 and hl[i - 1] == Highlight.NUMBER
        if numbers and ((c in _DIGITS and (prev_sep or after_number)) or (c == "." and after_number)):
            hl[i] = Highlight.NUMBER
            i += 1
            prev_sep = False
            continue

        if prev_sep:
            matched = False
            for word, kind in keywords:
                if text.startswith(word, i) and is_separator(text[i + len(word):i + len(word) + 1]):
                    for k in range(i, i + len(word)):
                        hl[k] = kind
                    i += len(word)
                    matched = True
                    break
            if matched:
                prev_sep = False
                continue

        prev_sep = is_separator(c)
        i += 1

    return row_has_open_comment(row)


def update_syntax(lines: Sequence[Line], index: int, syntax: Syntax | None) -> None:
    """Recompute ``lines[index].hl`` from its render.

    A change in the row's open-comment state is carried on to the following
    rows for as long as their state keeps changing.
    """
    while True:
        oc = _highlight_row(lines, index, syntax)
        if oc is None:
            return
        row = lines[index]
        changed = row.hl_oc != oc
        row.hl_oc = oc
        if not changed or index + 1 >= len(lines):
            return
        index += 1


def syntax_to_color(hl: int) -> int:
    """Return the ANSI foreground colour code for a highlight class."""
    return _COLORS.get(hl, _DEFAULT_COLOR)


def select_syntax(filename: str) -> Syntax | None:
    """Pick the syntax whose file pattern matches ``filename``, if any.

    Patterns starting with a dot must match at the end of the name; others
    may appear anywhere. Only the first occurrence of a pattern is tried.
    """
    for syntax in SYNTAX_DB:
        for pattern in syntax.filematch:
            pos = filename.find(pattern)
            if pos < 0:
                continue
            if not pattern.startswith(".") or pos + len(pattern) == len(filename):
                return syntax
    return None
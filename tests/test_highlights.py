import pytest

from kiloedit.highlights import (
    C_SYNTAX,
    PYTHON_SYNTAX,
    is_separator,
    row_has_open_comment,
    select_syntax,
    syntax_to_color,
    update_syntax,
)
from kiloedit.structures import Highlight, Line


def make_lines(*texts):
    return [Line(chars=t, render=t) for t in texts]


def highlight(text, syntax=C_SYNTAX):
    lines = make_lines(text)
    update_syntax(lines, 0, syntax)
    return lines[0].hl


@pytest.mark.parametrize("c", ["", "\0", " ", "\t", ",", ".", "(", ")", "+", "-", "/", "*", "=", "~", "%", "[", "]", ";"])
def test_separators(c):
    assert is_separator(c) is True


@pytest.mark.parametrize("c", ["a", "Z", "0", "_", "{", "\"", "#"])
def test_non_separators(c):
    assert is_separator(c) is False


@pytest.mark.parametrize("text", ["", "int x = 1;", "/* a */", "\"str\\\"\"", "a\x01b", "  // c", "x\\"])
def test_highlight_length_matches_render(text):
    assert len(highlight(text)) == len(text)


def test_no_syntax_is_all_normal():
    lines = make_lines("int x = \"y\"; // z")
    update_syntax(lines, 0, None)
    assert set(lines[0].hl) == {Highlight.NORMAL}


def test_primary_keyword():
    hl = highlight("return x")
    assert hl[:6] == [Highlight.KEYWORD1] * 6
    assert set(hl[6:]) == {Highlight.NORMAL}


def test_keyword_needs_trailing_separator():
    assert set(highlight("returned")) == {Highlight.NORMAL}


def test_type_keyword_after_leading_space():
    hl = highlight("   int y")
    assert set(hl[:3]) == {Highlight.NORMAL}
    assert hl[3:6] == [Highlight.KEYWORD2] * 3
    assert set(hl[6:]) == {Highlight.NORMAL}


def test_string_with_escape():
    text = 'a = "x\\"y";'
    hl = highlight(text)
    start = text.index('"')
    end = text.rindex('"')
    assert set(hl[start:end + 1]) == {Highlight.STRING}
    assert hl[end + 1] == Highlight.NORMAL
    assert set(hl[:start]) == {Highlight.NORMAL}


def test_single_quoted_string():
    text = "c = 'q';"
    hl = highlight(text)
    start = text.index("'")
    assert set(hl[start:start + 3]) == {Highlight.STRING}


def test_numbers_with_decimal_point():
    text = "x = 12.5;"
    hl = highlight(text)
    start = text.index("1")
    assert set(hl[start:start + 4]) == {Highlight.NUMBER}
    assert hl[-1] == Highlight.NORMAL


def test_digit_inside_word_is_not_number():
    assert Highlight.NUMBER not in highlight("abc1")


def test_nonprintable_character():
    hl = highlight("a\x01b")
    assert hl[1] == Highlight.NONPRINT
    assert hl[0] == hl[2] == Highlight.NORMAL


def test_single_line_comment_does_not_touch_open_state():
    lines = make_lines("x // note")
    update_syntax(lines, 0, C_SYNTAX)
    start = "x // note".index("/")
    assert set(lines[0].hl[start:]) == {Highlight.COMMENT}
    assert lines[0].hl_oc is False


def test_comment_marker_inside_word_is_ignored():
    text = "a//b"
    hl = highlight(text)
    assert Highlight.COMMENT not in hl


def test_multiline_comment_spans_rows():
    lines = make_lines("/* start", "middle", "end */ x")
    for i in range(len(lines)):
        update_syntax(lines, i, C_SYNTAX)
    assert set(lines[0].hl) == {Highlight.MLCOMMENT}
    assert set(lines[1].hl) == {Highlight.MLCOMMENT}
    close = "end */ x".index("/") + 1
    assert set(lines[2].hl[:close]) == {Highlight.MLCOMMENT}
    assert lines[2].hl[-1] == Highlight.NORMAL
    assert [row_has_open_comment(line) for line in lines] == [True, True, False]
    assert [line.hl_oc for line in lines] == [True, True, False]


def test_closing_comment_propagates_to_following_rows():
    lines = make_lines("/* start", "middle", "tail")
    for i in range(len(lines)):
        update_syntax(lines, i, C_SYNTAX)
    assert Highlight.MLCOMMENT in lines[2].hl

    lines[0].chars = lines[0].render = "int a;"
    update_syntax(lines, 0, C_SYNTAX)
    assert Highlight.MLCOMMENT not in lines[1].hl
    assert Highlight.MLCOMMENT not in lines[2].hl
    assert not any(line.hl_oc for line in lines)


def test_opening_comment_propagates_to_following_rows():
    lines = make_lines("int a;", "b", "c")
    for i in range(len(lines)):
        update_syntax(lines, i, C_SYNTAX)
    lines[0].chars = lines[0].render = "/* open"
    update_syntax(lines, 0, C_SYNTAX)
    assert all(set(line.hl) == {Highlight.MLCOMMENT} for line in lines)


def test_closed_comment_on_one_line_is_not_open():
    lines = make_lines("/* done */")
    update_syntax(lines, 0, C_SYNTAX)
    assert set(lines[0].hl) == {Highlight.MLCOMMENT}
    assert row_has_open_comment(lines[0]) is False


def test_row_without_highlights_is_not_open():
    assert row_has_open_comment(Line(chars="abc", render="abc")) is False


def test_python_keywords_and_comment():
    hl = highlight("def f", PYTHON_SYNTAX)
    assert hl[:3] == [Highlight.KEYWORD1] * 3
    assert set(highlight("## note", PYTHON_SYNTAX)) == {Highlight.COMMENT}


def test_python_single_hash_is_not_comment():
    assert Highlight.COMMENT not in highlight("# note", PYTHON_SYNTAX)


def test_python_has_no_multiline_comments():
    assert Highlight.MLCOMMENT not in highlight("/* x */", PYTHON_SYNTAX)


@pytest.mark.parametrize(
    "hl, color",
    [
        (Highlight.COMMENT, 36),
        (Highlight.MLCOMMENT, 36),
        (Highlight.KEYWORD1, 33),
        (Highlight.KEYWORD2, 32),
        (Highlight.STRING, 35),
        (Highlight.NUMBER, 31),
        (Highlight.MATCH, 34),
        (Highlight.NORMAL, 37),
        (Highlight.NONPRINT, 37),
    ],
)
def test_syntax_to_color(hl, color):
    assert syntax_to_color(hl) == color


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("main.c", C_SYNTAX),
        ("dir/x.h", C_SYNTAX),
        ("x.cpp", C_SYNTAX),
        ("x.cc", C_SYNTAX),
        ("script.py", PYTHON_SYNTAX),
        ("notes.txt", None),
        ("x.c.bak", None),
        ("a.c.c", None),
    ],
)
def test_select_syntax(filename, expected):
    assert select_syntax(filename) is expected
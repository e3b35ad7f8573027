# kiloedit

A small terminal text editor. It opens a single file, shows it with syntax
highlighting for C/C++ and Python sources, and is driven by Emacs-style
control keys. It needs a POSIX terminal (it uses `termios` for raw mode).

## Installation

```
pip install .
```

## Usage

```
kiloedit <filename>
```

Exactly one file name must be given; otherwise a usage message is printed
and the command exits with status 1. If the file does not exist you start
with an empty buffer, and the file is created when you save. Files are read
and written as Latin-1, one line per `\n`, and every line is written back
with a trailing newline.

## Keys

| Key               | Action                                              |
|-------------------|-----------------------------------------------------|
| printable chars   | insert at the cursor                                |
| Enter (C-m)       | split the line / insert a new line                  |
| C-f / Right       | move forward one character (wraps to next line)     |
| C-b / Left        | move backward one character (wraps to previous line)|
| C-n / Down        | move to the next line                               |
| C-p / Up          | move to the previous line                           |
| Backspace, C-h    | delete the character before the cursor              |
| C-d / Delete      | delete the character under the cursor               |
| C-k               | kill the current line                               |
| C-s               | save the file                                       |
| C-l               | open another file (prompts for a name)              |
| C-q               | quit                                                |

C-l refuses to run while the buffer has unsaved changes. At the file name
prompt, Backspace deletes, Enter opens the file and ESC cancels.

With unsaved changes, C-q only prints a warning; pressing it two more times
in a row quits. Any other key in between resets the count.

Any other key, including Home, End, Page Up and Page Down, just shows a help
message in the echo area.

The mode line shows the first 20 characters of the file name, the number of
lines, `(modified)` when there are unsaved changes, and `current/total` line
on the right. Messages appear in the echo area below it and are cleared once
they are more than two seconds old.

## Syntax highlighting

Files whose names end in `.c`, `.h`, `.cpp`, `.hpp` or `.cc` get C/C++
highlighting: keywords, type names (in a second colour), single- and
double-quoted strings, numbers, `//` comments and `/* ... */` comments
spanning several lines.

Files ending in `.py` get highlighting for the keywords `def`, `return` and
`lambda`, strings and numbers; a comment is recognised only when it starts
with `##`.

Other files are shown without highlighting. Tabs are expanded to the next
multiple of eight columns; non-printable characters are shown in reverse
video.

## Using it as a library

The editing model can be driven without a terminal:

```python
from kiloedit.editor import Editor

editor = Editor()
editor.buffer.find_file("notes.txt")
for ch in "hello":
    editor.process(ord(ch))
editor.save()
```

- `kiloedit.editor.Editor` holds a `Buffer`, a window size and the status
  message; `process(key)` handles one key code, and `quit()` raises
  `EditorQuit` when the editor should leave.
- `kiloedit.buffer.Buffer` holds the lines, cursor and scroll offset, and
  reads and writes files with `find_file()` and `write()`.
- `kiloedit.highlights` provides `select_syntax()`, `update_syntax()` and
  `syntax_to_color()`.
- `kiloedit.draw.render_screen(editor, now)` returns the escape sequences
  for one screen refresh; `refresh(editor, out)` writes them.
- `kiloedit.term.Terminal` is a context manager that puts the terminal in
  raw mode and restores it on exit; `read_key()` decodes arrow and Delete
  escape sequences into key codes.

## What it does not do

There is no search, no undo, no cut-and-paste beyond killing a whole line,
and only one buffer at a time. Home, End, Page Up and Page Down are
recognised but not bound to any command.

## Tests

```
pip install ".[test]"
pytest
```
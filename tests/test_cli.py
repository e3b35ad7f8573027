import sys
from unittest import mock

import pytest

from kiloedit.cli import main


@pytest.mark.parametrize("argv", [[], ["a.txt", "b.txt"]])
def test_usage_error(argv, capsys):
    assert main(argv) == 1
    assert "Usage: editor <filename>" in capsys.readouterr().err


def test_usage_error_from_sys_argv(capsys):
    with mock.patch.object(sys, "argv", ["kiloedit"]):
        assert main() == 1
    assert "Usage: editor <filename>" in capsys.readouterr().err


def test_not_a_terminal_fails(tmp_path, capsys):
    target = tmp_path / "file.txt"
    with mock.patch("os.isatty", return_value=False):
        assert main([str(target)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("editor: ")
    assert not target.exists()
"""Tests for the ascii-unicode command line."""

from click.testing import CliRunner

from ascii_unicode.__main__ import main


def test_renders_stdin():
    runner = CliRunner()
    result = runner.invoke(main, [], input="+---+\n|   |\n+---+")
    assert result.exit_code == 0
    assert result.output == "┌───┐\n│   │\n└───┘\n"


def test_trailing_newline_in_input_is_kept():
    runner = CliRunner()
    result = runner.invoke(main, [], input="++\n++\n")
    assert result.exit_code == 0
    assert result.output == "┌┐\n└┘\n\n"


def test_empty_stdin():
    runner = CliRunner()
    result = runner.invoke(main, [], input="")
    assert result.exit_code == 0
    assert result.output == "\n"


def test_renders_file(tmp_path):
    src = tmp_path / "box.txt"
    src.write_text("+--+\n|  |\n+--+", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(main, [str(src)])
    assert result.exit_code == 0
    assert result.output == "┌──┐\n│  │\n└──┘\n"


def test_missing_file_is_rejected():
    runner = CliRunner()
    result = runner.invoke(main, ["does-not-exist.txt"])
    assert result.exit_code == 2


def test_undecodable_file_is_fatal(tmp_path):
    src = tmp_path / "bad.txt"
    src.write_bytes(b"+--+\n\xff\xfe\n")
    runner = CliRunner()
    result = runner.invoke(main, [str(src)])
    assert result.exit_code == 1
    assert "cannot read" in result.output
    assert "┌" not in result.output


def test_undecodable_stdin_is_fatal():
    runner = CliRunner()
    result = runner.invoke(main, [], input=b"+--+\n\xff\n")
    assert result.exit_code == 1
    assert "cannot read standard input" in result.output

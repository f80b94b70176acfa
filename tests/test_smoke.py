"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from ascii_unicode.__main__ import main


def test_import():
    import ascii_unicode

    assert ascii_unicode.render is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "ASCII box drawings" in result.output

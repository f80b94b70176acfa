"""CLI entry point for ascii-unicode."""

import sys

import click

from ascii_unicode.render import render


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True, dir_okay=False))
def main(input: str | None) -> None:
    """ASCII box drawings to Unicode box-drawing output.

    Reads INPUT, or standard input when no file is given, and writes the
    rendered drawing to standard output.
    """
    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        try:
            text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"error: cannot read standard input: {e}", err=True)
            sys.exit(1)

    click.echo(render(text))


if __name__ == "__main__":
    main()

"""Box-drawing alphabet and the connects-like relation between glyphs."""

from __future__ import annotations

BLANK = " "

LIGHT_HORIZONTAL = "─"
DOUBLE_HORIZONTAL = "═"
LIGHT_VERTICAL = "│"
DOTTED_VERTICAL = "┆"
BLOCK = "█"

# Every rendered glyph that behaves like an ASCII "+".
JUNCTIONS = frozenset("└┘┌┐╘╛╒╕├┤┬┴┼╞╡╤╧╪")
ROUNDED_CORNERS = frozenset("╭╮╯╰")

_HORIZONTAL = frozenset({"-", ">", "<", LIGHT_HORIZONTAL})
_DOUBLE = frozenset({"=", ">", "<", DOUBLE_HORIZONTAL})
_VERTICAL = frozenset({"|", "^", "v", LIGHT_VERTICAL})
_DOTTED = frozenset({":", DOTTED_VERTICAL})
_CORNER = frozenset({"'", "."}) | ROUNDED_CORNERS


def connects_like(char: str, slot: str) -> bool:
    """Whether the actual ``char`` satisfies the template ``slot``.

    A ``+`` connects both horizontally (like ``-``) and vertically (like
    ``|``), so it connects like ``-``, ``|`` and of course like itself. The
    relation only goes one way: ``+`` connects like ``-`` but ``-`` does not
    connect like ``+``.
    """
    match slot:
        case " ":
            return True
        case "-":
            return char in _HORIZONTAL or connects_like(char, "+")
        case "=":
            return char in _DOUBLE or connects_like(char, "+")
        case "|":
            return char in _VERTICAL or connects_like(char, ":") or connects_like(char, "+")
        case ":":
            return char in _DOTTED
        case "+":
            return char == "+" or char in JUNCTIONS or connects_like(char, ".")
        case ".":
            return char in _CORNER
        case "'":
            return connects_like(char, ".")
        case _:
            return char == slot

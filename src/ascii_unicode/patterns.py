"""Neighborhood patterns and the first-match lookup over them."""

from __future__ import annotations

from dataclasses import dataclass

from ascii_unicode.charset import connects_like

PATTERN_SIZE = 9
CENTER = 4


@dataclass(frozen=True)
class Pattern:
    """A 3x3 template, read row by row, and the glyph its center becomes.

    A space in the template matches anything; every other slot is tested with
    ``connects_like``.
    """

    template: str
    char: str

    def __post_init__(self) -> None:
        if len(self.template) != PATTERN_SIZE:
            raise ValueError(
                f"Pattern template must have {PATTERN_SIZE} slots, got {len(self.template)}: {self.template!r}"
            )

    def matches(self, neighborhood: str) -> bool:
        return all(connects_like(c, slot) for c, slot in zip(neighborhood, self.template))


# Arrowheads and blocks first, then corners and junctions, then the plain
# line segments. A cell is matched against the most specific pattern before
# it can fall through to a simpler one and lose a connection.
PATTERNS: tuple[Pattern, ...] = (
    # ─── Arrowheads ─────────────────────────────────────────────────────────
    Pattern(" | " + " v " + "   ", "▽"),
    Pattern("   " + " ^ " + " | ", "△"),
    Pattern("   " + " <-" + "   ", "◁"),
    Pattern("   " + "-> " + "   ", "▷"),
    # ─── Shadows ────────────────────────────────────────────────────────────
    Pattern(" # " + " # " + "   ", "█"),
    Pattern("   " + " ##" + "   ", "█"),
    Pattern("   " + "## " + "   ", "█"),
    Pattern("   " + " # " + " # ", "█"),
    # ─── Rounded corners ────────────────────────────────────────────────────
    Pattern(" | " + " '-" + "   ", "╰"),
    Pattern(" | " + "-' " + "   ", "╯"),
    Pattern("   " + "-. " + " | ", "╮"),
    Pattern("   " + " .-" + " | ", "╭"),
    # ─── Single-stroke junctions ────────────────────────────────────────────
    Pattern(" | " + "-+-" + " | ", "┼"),
    Pattern(" | " + "-+-" + "   ", "┴"),
    Pattern("   " + "-+-" + " | ", "┬"),
    Pattern(" | " + "-+ " + " | ", "┤"),
    Pattern(" | " + " +-" + " | ", "├"),
    Pattern("   " + "-+ " + " | ", "┐"),
    Pattern("   " + " +-" + " | ", "┌"),
    Pattern(" | " + " +-" + "   ", "└"),
    Pattern(" | " + "-+ " + "   ", "┘"),
    # ─── Double-stroke junctions ────────────────────────────────────────────
    Pattern(" | " + "=+=" + " | ", "╪"),
    Pattern(" | " + "=+=" + "   ", "╧"),
    Pattern("   " + "=+=" + " | ", "╤"),
    Pattern(" | " + "=+ " + " | ", "╡"),
    Pattern(" | " + " +=" + " | ", "╞"),
    Pattern("   " + "=+ " + " | ", "╕"),
    Pattern("   " + " +=" + " | ", "╒"),
    Pattern(" | " + " +=" + "   ", "╘"),
    Pattern(" | " + "=+ " + "   ", "╛"),
    # ─── Dotted lines ───────────────────────────────────────────────────────
    Pattern(" : " + " : " + "   ", "┆"),
    Pattern("   " + " : " + " : ", "┆"),
    Pattern(" | " + " : " + "   ", "┆"),
    Pattern("   " + " : " + " | ", "┆"),
    # ─── Lines ──────────────────────────────────────────────────────────────
    Pattern(" | " + " | " + "   ", "│"),
    Pattern("   " + " | " + " | ", "│"),
    Pattern("   " + "== " + "   ", "═"),
    Pattern("   " + " ==" + "   ", "═"),
    Pattern("   " + "-- " + "   ", "─"),
    Pattern("   " + " --" + "   ", "─"),
)


def lookup_pattern(neighborhood: str, patterns: tuple[Pattern, ...] = PATTERNS) -> str:
    """Return the glyph for the center of ``neighborhood``.

    The first pattern that matches wins. When none does, the center character
    is returned unchanged, which is how plain text survives rendering.
    """
    for pattern in patterns:
        if pattern.matches(neighborhood):
            return pattern.char
    return neighborhood[CENTER]

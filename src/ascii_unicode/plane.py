"""Plane — ragged 2D character grid read by the pattern lookup."""

from __future__ import annotations

from ascii_unicode.charset import BLANK

# Row-major offsets of a 3x3 neighborhood, top-left to bottom-right.
_OFFSETS: tuple[tuple[int, int], ...] = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1))


class Plane:
    """Lines of text addressed by (row, col), one cell per character.

    Rows may have different lengths. Anything outside the text reads as a
    blank, so drawings at the edge behave as if surrounded by spaces.
    """

    def __init__(self, rows: list[str]) -> None:
        self.rows = rows

    @classmethod
    def from_text(cls, text: str) -> Plane:
        return cls(text.split("\n"))

    def height(self) -> int:
        return len(self.rows)

    def width(self, row: int) -> int:
        if 0 <= row < len(self.rows):
            return len(self.rows[row])
        return 0

    def char_at(self, row: int, col: int) -> str:
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return BLANK

    def neighborhood(self, row: int, col: int) -> str:
        """The 9 characters around (row, col), center included, row by row."""
        return "".join(self.char_at(row + dr, col + dc) for dr, dc in _OFFSETS)

"""ascii-unicode: ASCII box drawings to Unicode box-drawing glyphs."""

from ascii_unicode.charset import connects_like
from ascii_unicode.config import RenderConfig
from ascii_unicode.patterns import PATTERNS, Pattern, lookup_pattern
from ascii_unicode.plane import Plane
from ascii_unicode.render import render

__all__ = [
    "PATTERNS",
    "Pattern",
    "Plane",
    "RenderConfig",
    "connects_like",
    "lookup_pattern",
    "render",
    "render_text",
]


def render_text(src: str, patterns: tuple[Pattern, ...] | None = None) -> str:
    """Render ASCII box drawings in a string to Unicode box-drawing glyphs.

    Args:
        src: Text holding ASCII drawings, lines separated by "\\n".
        patterns: Rule table to use instead of the built-in one; None keeps PATTERNS.

    Returns:
        The rendered text, with the same number of lines and characters per line.
    """
    config = RenderConfig() if patterns is None else RenderConfig(patterns=patterns)
    return render(src, config)

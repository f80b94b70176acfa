"""Render ASCII box drawings to their Unicode counterparts."""

from __future__ import annotations

import logging

from ascii_unicode.config import RenderConfig
from ascii_unicode.patterns import lookup_pattern
from ascii_unicode.plane import Plane

logger = logging.getLogger(__name__)


def render_row(plane: Plane, row: int, config: RenderConfig) -> str:
    return "".join(lookup_pattern(plane.neighborhood(row, col), config.patterns) for col in range(plane.width(row)))


def render(text: str, config: RenderConfig | None = None) -> str:
    """Replace every ASCII box drawing in ``text`` by Unicode glyphs.

    Each cell is decided from the original text only, never from cells that
    were already rewritten, so the output has exactly the shape of the input.
    """
    if config is None:
        config = RenderConfig()
    plane = Plane.from_text(text)
    rendered = [render_row(plane, row, config) for row in range(plane.height())]
    logger.debug("rendered %d rows, %d cells", plane.height(), sum(len(r) for r in rendered))
    return "\n".join(rendered)

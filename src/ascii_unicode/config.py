"""Centralized configuration for ascii-unicode."""

from __future__ import annotations

from dataclasses import dataclass

from ascii_unicode.patterns import PATTERNS, Pattern


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""

    patterns: tuple[Pattern, ...] = PATTERNS

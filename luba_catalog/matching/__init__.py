"""Matchers for numeric scales, colors, typography and keyword tables."""

from .color import ColorCandidate, ColorMatch, color_distance, match_color, parse_hex
from .keywords import (
    COMPONENT_KEYWORDS,
    PRIMITIVE_KEYWORDS,
    KeywordMatch,
    KeywordRule,
    match_keywords,
)
from .scale import ScaleMatch, ensure_number, format_number, match_scale, on_grid
from .typography import TypographyMatch, match_typography

__all__ = [
    "COMPONENT_KEYWORDS",
    "PRIMITIVE_KEYWORDS",
    "ColorCandidate",
    "ColorMatch",
    "KeywordMatch",
    "KeywordRule",
    "ScaleMatch",
    "TypographyMatch",
    "color_distance",
    "ensure_number",
    "format_number",
    "match_color",
    "match_keywords",
    "match_scale",
    "match_typography",
    "on_grid",
    "parse_hex",
]

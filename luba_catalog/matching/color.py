"""Perceptual nearest-color matching against catalog colors."""

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..catalog_logging import LogCategory, get_category_logger
from ..errors import EmptyCatalogError, InvalidColorError, MalformedInputError
from ..models import ColorEntry, ColorMode

logger = get_category_logger(LogCategory.MATCHING)

RGB = tuple[int, int, int]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")

DEFAULT_CANDIDATES = 3


def parse_hex(value: Any) -> RGB:
    """Parse ``#RRGGBB`` or ``RRGGBB`` into an (r, g, b) triple.

    Raises:
        InvalidColorError: For anything other than six hex digits.
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise InvalidColorError(value)
    n = int(match.group(1), 16)
    return (n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF


def color_distance(a: RGB, b: RGB) -> float:
    """Weighted Euclidean RGB distance, green weighted highest."""
    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return math.sqrt(2 * dr * dr + 4 * dg * dg + 3 * db * db)


@dataclass(frozen=True)
class ColorCandidate:
    """A catalog color and its unrounded distance from the query."""

    entry: ColorEntry
    distance: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary; distance is rounded for readability."""
        return {
            "api": self.entry.api,
            "light": self.entry.light,
            "dark": self.entry.dark,
            "distance": round(self.distance),
            "description": self.entry.description,
        }


@dataclass(frozen=True)
class ColorMatch:
    """Ranked result of matching one hex value."""

    query: str
    mode: ColorMode
    candidates: tuple[ColorCandidate, ...]

    @property
    def nearest(self) -> ColorCandidate | None:
        return self.candidates[0] if self.candidates else None

    @property
    def exact(self) -> ColorCandidate | None:
        """The nearest candidate, only when it is identical to the query."""
        nearest = self.nearest
        return nearest if nearest is not None and nearest.distance == 0 else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "query": self.query,
            "mode": self.mode.value,
            "exact": self.exact.to_dict() if self.exact else None,
            "nearest": self.nearest.to_dict() if self.nearest else None,
            "alternatives": [c.to_dict() for c in self.candidates],
        }


def match_color(
    hex_value: str,
    mode: ColorMode | str,
    catalog: Sequence[ColorEntry],
    limit: int = DEFAULT_CANDIDATES,
) -> ColorMatch:
    """Rank catalog colors by distance from hex_value in the given mode.

    Entries with no hex for the mode are skipped. Ties keep catalog order,
    so ``LubaColors.accent`` wins over entries aliasing it.

    Raises:
        InvalidColorError: If hex_value is not a 6-digit hex color.
        EmptyCatalogError: If catalog holds no colors at all.
    """
    if not catalog:
        raise EmptyCatalogError("colors")
    try:
        mode = ColorMode(mode)
    except ValueError as e:
        raise MalformedInputError(
            f"Unknown color mode: {mode!r}",
            suggestion="Use 'light' or 'dark'",
        ) from e
    source = parse_hex(hex_value)

    scored: list[ColorCandidate] = []
    for entry in catalog:
        target_hex = entry.hex_for(mode)
        if not target_hex:
            continue
        try:
            target = parse_hex(target_hex)
        except InvalidColorError:
            logger.debug(f"Skipping {entry.api}: unparsable {mode.value} hex {target_hex!r}")
            continue
        scored.append(ColorCandidate(entry, color_distance(source, target)))

    scored.sort(key=lambda c: c.distance)
    result = ColorMatch(query=hex_value, mode=mode, candidates=tuple(scored[:limit]))
    logger.debug(
        f"color {hex_value} ({mode.value}): "
        f"nearest={result.nearest.entry.api if result.nearest else None}"
    )
    return result

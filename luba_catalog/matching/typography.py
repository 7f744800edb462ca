"""Size-first typography matching."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..errors import EmptyCatalogError
from ..models import TypographyEntry
from .scale import ensure_number


@dataclass(frozen=True)
class TypographyMatch:
    """Result of matching a size and optional weight.

    ``alternatives`` lists every entry sharing the queried size; it is
    empty when the match fell back to the nearest size.
    """

    size: float
    weight: str | None
    exact: TypographyEntry | None
    nearest: TypographyEntry
    alternatives: tuple[TypographyEntry, ...]

    @property
    def same_size(self) -> bool:
        return bool(self.alternatives)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "size": self.size,
            "weight": self.weight,
            "exact": self.exact.to_dict() if self.exact else None,
            "nearest": self.nearest.to_dict(),
            "alternatives": [a.to_dict() for a in self.alternatives],
        }


def match_typography(
    size: float,
    weight: str | None,
    catalog: Sequence[TypographyEntry],
) -> TypographyMatch:
    """Match a text style by size, then weight.

    - Entries at the exact size: a matching weight is exact; without a
      weight the first entry at that size is exact. All same-size entries
      are returned as alternatives.
    - A weight that no same-size entry has is not exact; the first
      same-size entry is nearest.
    - No entry at the size: nearest by size, lower size on ties.
    """
    size = ensure_number(size, "size")
    if not catalog:
        raise EmptyCatalogError("typography")
    weight = weight.strip() if isinstance(weight, str) and weight.strip() else None

    same_size = tuple(t for t in catalog if t.size == size)
    if same_size:
        if weight is None:
            return TypographyMatch(size, None, same_size[0], same_size[0], same_size)
        wanted = weight.casefold()
        both = next((t for t in same_size if t.weight.casefold() == wanted), None)
        return TypographyMatch(size, weight, both, both or same_size[0], same_size)

    nearest = catalog[0]
    best = abs(size - nearest.size)
    for entry in catalog[1:]:
        distance = abs(size - entry.size)
        if distance < best or (distance == best and entry.size < nearest.size):
            nearest, best = entry, distance
    return TypographyMatch(size, weight, None, nearest, ())

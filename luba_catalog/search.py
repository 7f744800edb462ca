"""Ranked free-text search over flattened catalog entries.

Ranking tiers, best first:

1. exact match against the name or an alias
2. name or alias starts with the query
3. name or alias contains the query
4. a query word appears inside a word of the name or an alias
5. the description contains the query or one of its words
   (only when ``include_description`` is set)

Words split on whitespace, punctuation and camelCase boundaries,
so ``"spacing large"`` shares ``spacing`` with ``LubaSpacing.lg``.
Entries within a tier keep catalog order.
"""

import re
from collections.abc import Iterable, Sequence
from enum import IntEnum
from typing import Any

from .catalog_logging import LogCategory, get_category_logger
from .models import CatalogEntry, ComponentSpec, EntryCategory, PrimitiveSpec

logger = get_category_logger(LogCategory.SEARCH)

DEFAULT_MAX_RESULTS = 10

_CAMEL_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_CAMEL_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_SEPARATORS = re.compile(r"[\s._\-()]+")

# Query words shorter than these never match on their own
_MIN_QUERY_WORD = 2
_MIN_DESCRIPTION_WORD = 3


class MatchTier(IntEnum):
    """How well an entry matched a query. Higher is better."""

    DESCRIPTION = 1
    WORD = 2
    CONTAINS = 3
    PREFIX = 4
    EXACT = 5


def normalize(text: str) -> str:
    return text.strip().casefold()


def split_words(text: str) -> list[str]:
    """Split an identifier or phrase into lowercase words.

    >>> split_words("LubaSpacing.lg")
    ['luba', 'spacing', 'lg']
    """
    spaced = _CAMEL_LOWER_UPPER.sub(r"\1 \2", text)
    spaced = _CAMEL_ACRONYM.sub(r"\1 \2", spaced)
    return [w for w in _WORD_SEPARATORS.split(spaced.casefold()) if w]


def match_tier(
    entry: CatalogEntry, query: str, include_description: bool = False
) -> MatchTier | None:
    """Best tier an entry reaches for a query, or None when it does not match."""
    q = normalize(query)
    if not q:
        return None

    targets = [entry.name, *entry.aliases]
    folded = [normalize(t) for t in targets]

    if q in folded:
        return MatchTier.EXACT
    if any(t.startswith(q) for t in folded):
        return MatchTier.PREFIX
    if any(q in t for t in folded):
        return MatchTier.CONTAINS

    query_words = split_words(query)
    target_words = {w for t in targets for w in split_words(t)}
    if any(
        qw in tw
        for qw in query_words
        if len(qw) >= _MIN_QUERY_WORD
        for tw in target_words
    ):
        return MatchTier.WORD

    if include_description and entry.description:
        description = normalize(entry.description)
        if q in description:
            return MatchTier.DESCRIPTION
        description_words = set(split_words(entry.description))
        if any(
            qw in description_words
            for qw in query_words
            if len(qw) >= _MIN_DESCRIPTION_WORD
        ):
            return MatchTier.DESCRIPTION

    return None


def search(
    items: Sequence[CatalogEntry],
    query: str,
    *,
    category: str | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
    include_description: bool = False,
) -> list[CatalogEntry]:
    """Rank entries against a free-text query.

    Args:
        items: Entries to search, in catalog order.
        query: Free text. Blank queries match nothing.
        category: Optional case-insensitive category filter, applied before ranking.
        max_results: Maximum number of entries to return.
        include_description: Also match against descriptions as the lowest tier.

    Returns:
        Matching entries, best tier first, catalog order within a tier.
    """
    if not normalize(query) or max_results <= 0:
        return []

    candidates: Iterable[CatalogEntry] = items
    if category:
        wanted = normalize(category)
        candidates = [item for item in items if item.category.casefold() == wanted]

    scored: list[tuple[MatchTier, CatalogEntry]] = []
    for item in candidates:
        tier = match_tier(item, query, include_description)
        if tier is not None:
            scored.append((tier, item))

    # sort is stable, so catalog order survives within a tier
    scored.sort(key=lambda pair: pair[0], reverse=True)
    results = [item for _, item in scored[:max_results]]
    logger.debug(
        f"search {query!r} category={category!r}: "
        f"{len(scored)} matched, returning {len(results)}"
    )
    return results


def _token_payload(
    raw: dict[str, Any], category: str, subcategory: str | None, value: Any
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": raw["name"],
        "api": raw["api"],
        "value": value,
        "tier": raw.get("tier"),
        "category": category,
        "subcategory": subcategory,
        "description": raw.get("description", raw["name"]),
    }
    for key in ("light", "dark", "primitive", "aliasOf"):
        if raw.get(key):
            payload[key] = raw[key]
    return payload


def _token_entry(
    raw: dict[str, Any],
    category: EntryCategory,
    subcategory: str | None = None,
    value: Any = None,
) -> CatalogEntry:
    payload = _token_payload(
        raw, category.value, subcategory, raw.get("value") if value is None else value
    )
    return CatalogEntry(
        name=raw["name"],
        aliases=(raw["api"],),
        category=category.value,
        subcategory=subcategory,
        description=payload["description"],
        payload=payload,
    )


COLOR_GROUPS: tuple[str, ...] = (
    "greyscale",
    "surfaces",
    "accent",
    "text",
    "semantic",
    "border",
    "glass",
)

MOTION_GROUPS: tuple[str, ...] = ("pressScales", "animations", "other")


def flatten_tokens(tokens_data: dict[str, Any]) -> list[CatalogEntry]:
    """Flatten the token catalog into searchable entries, in catalog order."""
    flat: list[CatalogEntry] = []

    for raw in tokens_data["spacing"]["tokens"]:
        flat.append(_token_entry(raw, EntryCategory.SPACING))

    for raw in tokens_data["radius"]["tokens"]:
        flat.append(_token_entry(raw, EntryCategory.RADIUS))

    colors = tokens_data["colors"]
    for group in COLOR_GROUPS:
        for raw in colors.get(group, []):
            flat.append(_token_entry(raw, EntryCategory.COLOR, group))

    for raw in tokens_data["typography"]["tokens"]:
        flat.append(
            _token_entry(
                raw,
                EntryCategory.TYPOGRAPHY,
                value=f"{raw['size']}pt {raw['weight']}",
            )
        )

    motion = tokens_data.get("motion", {})
    constants = motion.get("constants", {})
    for group in MOTION_GROUPS:
        for raw in constants.get(group, []):
            flat.append(_token_entry(raw, EntryCategory.MOTION, group))
    for raw in motion.get("appliedAnimations", []):
        flat.append(_token_entry(raw, EntryCategory.MOTION, "applied"))

    glass = tokens_data.get("glass", {})
    for raw in glass.get("styles", []):
        flat.append(_token_entry(raw, EntryCategory.GLASS))
    for raw in glass.get("tokens", []):
        flat.append(_token_entry(raw, EntryCategory.GLASS))

    return flat


def component_entries(components: Sequence[ComponentSpec]) -> list[CatalogEntry]:
    """Searchable entries for components; ``Button`` finds ``LubaButton``."""
    return [
        CatalogEntry(
            name=c.name,
            aliases=(c.short_name, c.name),
            category=EntryCategory.COMPONENT.value,
            description=c.description,
            payload=c.to_dict(),
        )
        for c in components
    ]


def primitive_entries(primitives: Sequence[PrimitiveSpec]) -> list[CatalogEntry]:
    """Searchable entries for primitives, aliased by short name and modifier."""
    return [
        CatalogEntry(
            name=p.name,
            aliases=(p.short_name, p.modifier),
            category=EntryCategory.PRIMITIVE.value,
            description=p.description,
            payload=p.to_dict(),
        )
        for p in primitives
    ]

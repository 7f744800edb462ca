"""Map an external design system's tokens and components onto LubaUI.

Each of the five input sections is optional and handled independently.
A section that is absent or empty produces no mapping section. A
malformed item produces a mapping record carrying an ``error`` instead
of aborting the whole plan.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .catalog_logging import LogCategory, get_category_logger
from .errors import CatalogError, EmptyCatalogError, MalformedInputError
from .matching import (
    COMPONENT_KEYWORDS,
    PRIMITIVE_KEYWORDS,
    ensure_number,
    format_number,
    match_color,
    match_keywords,
    match_scale,
    match_typography,
)
from .models import ColorMode, Scale
from .store import CatalogStore

logger = get_category_logger(LogCategory.MIGRATION)

MAX_COMPONENT_CANDIDATES = 3
MAX_PRIMITIVE_CANDIDATES = 3

NO_MAPPINGS_TIP = (
    "Provide token arrays (colors, spacing, radii, typography, components) "
    "for detailed mappings. Or read lubaui://reference/full for the complete "
    "system reference."
)
FAILED_TIP = (
    "No items could be mapped. Fix the items reported with an 'error' and "
    "plan again."
)
REVIEW_TIP = (
    "Review the mappings above. 'exact' matches are direct replacements. "
    "'nearest' matches may need visual review."
)

SECTIONS = ("colors", "spacing", "radii", "typography", "components")


@dataclass(frozen=True)
class MigrationRequest:
    """Source-system items grouped by kind. None means the kind was not supplied."""

    colors: tuple[Any, ...] | None = None
    spacing: tuple[Any, ...] | None = None
    radii: tuple[Any, ...] | None = None
    typography: tuple[Any, ...] | None = None
    components: tuple[Any, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "MigrationRequest":
        """Create from dictionary; empty sections count as absent."""
        data = data or {}
        sections: dict[str, tuple[Any, ...] | None] = {}
        for name in SECTIONS:
            items = data.get(name)
            if items is None or (isinstance(items, Sequence) and not items):
                sections[name] = None
            elif isinstance(items, Sequence) and not isinstance(items, (str, bytes)):
                sections[name] = tuple(items)
            else:
                raise MalformedInputError(
                    f"'{name}' must be an array of items",
                    details={"section": name},
                )
        return cls(**sections)


def _points(value: float) -> str:
    return f"{format_number(value)}pt"


def _require_item(item: Any) -> Mapping[str, Any]:
    if not isinstance(item, Mapping):
        raise MalformedInputError(
            f"Migration item must be an object, got {type(item).__name__}"
        )
    return item


def _source(item: Any, *keys: str) -> dict[str, Any]:
    if not isinstance(item, Mapping):
        return {"item": item}
    return {key: item[key] for key in ("name", *keys) if key in item}


def _map_items(
    items: Sequence[Any],
    keys: tuple[str, ...],
    mapper: Callable[[Mapping[str, Any]], dict[str, Any]],
    empty_result: str = "lubaUI",
) -> list[dict[str, Any]]:
    records = []
    for item in items:
        source = _source(item, *keys)
        try:
            records.append({"source": source, **mapper(_require_item(item))})
        except CatalogError as e:
            logger.debug(f"Migration item {source} failed: {e.message}")
            records.append(
                {"source": source, empty_result: None, "error": e.to_dict()}
            )
    return records


def _tally(records: Sequence[dict[str, Any]]) -> tuple[int, int]:
    """Count mapped and failed records."""
    failed = sum(1 for record in records if "error" in record)
    return len(records) - failed, failed


def _map_color(store: CatalogStore, item: Mapping[str, Any]) -> dict[str, Any]:
    # Paired light/dark catalog entries carry the dark value along
    match = match_color(item.get("value"), ColorMode.LIGHT, store.migration_colors)
    nearest = match.nearest
    if nearest is None:
        raise EmptyCatalogError("colors")
    entry = nearest.entry
    if match.exact is not None:
        return {
            "lubaUI": {
                "api": entry.api,
                "light": entry.light,
                "dark": entry.dark,
                "match": "exact",
            }
        }
    return {
        "lubaUI": {
            "api": entry.api,
            "light": entry.light,
            "dark": entry.dark,
            "match": "nearest",
            "distance": round(nearest.distance),
            "alternatives": [c.to_dict() for c in match.candidates],
        }
    }


def _map_scale_value(
    scale: Scale, item: Mapping[str, Any], note: Callable[[float, Any], str]
) -> dict[str, Any]:
    value = ensure_number(item.get("value"))
    match = match_scale(value, scale)
    if match.exact is not None:
        return {
            "lubaUI": {
                "api": match.exact.api,
                "value": match.exact.value,
                "match": "exact",
            }
        }
    return {
        "lubaUI": {
            "api": match.nearest.api,
            "value": match.nearest.value,
            "match": "nearest",
            "delta": _points(match.delta),
            "note": note(value, match),
        }
    }


def _spacing_note(store: CatalogStore) -> Callable[[float, Any], str]:
    scale = store.spacing
    custom_api = scale.custom_api or "LubaSpacing.custom"

    def note(value: float, match: Any) -> str:
        if match.on_grid:
            return (
                f"On {format_number(scale.base_unit)}pt grid. Use "
                f"{custom_api}({format_number(value / scale.base_unit)}) for exact value."
            )
        return (
            f"Not on {format_number(scale.base_unit)}pt grid. Consider rounding to "
            f"{_points(match.nearest.value)}."
        )

    return note


def _radius_note(store: CatalogStore) -> Callable[[float, Any], str]:
    scale = store.radius

    def note(value: float, match: Any) -> str:
        if match.on_grid:
            return (
                f"On {format_number(scale.base_unit)}pt grid but not a named radius. "
                f"{match.nearest.api} is the closest step."
            )
        return (
            f"Not on {format_number(scale.base_unit)}pt grid. Consider rounding to "
            f"{_points(match.nearest.value)}."
        )

    return note


def _map_typography(store: CatalogStore, item: Mapping[str, Any]) -> dict[str, Any]:
    weight = item.get("weight")
    if weight is not None and not isinstance(weight, str):
        raise MalformedInputError(f"Typography weight must be a string, got {weight!r}")
    match = match_typography(item.get("size"), weight, store.typography)

    if match.exact is not None:
        mapping: dict[str, Any] = {
            **match.exact.to_dict(),
            "match": "exact",
        }
        if len(match.alternatives) > 1:
            mapping["alternatives"] = [a.api for a in match.alternatives]
        return {"lubaUI": mapping}

    nearest = match.nearest
    mapping = {**nearest.to_dict(), "match": "nearest"}
    if match.same_size:
        mapping["note"] = "Multiple tokens at this size: " + ", ".join(
            a.api for a in match.alternatives
        )
    else:
        mapping["delta"] = _points(match.size - nearest.size)
        mapping["note"] = (
            f"Nearest size. Use LubaTypography.custom(size: {format_number(match.size)}, "
            f"weight: .{match.weight or 'regular'}) for exact match."
        )
    return {"lubaUI": mapping}


def _map_component(store: CatalogStore, item: Mapping[str, Any]) -> dict[str, Any]:
    description = item.get("description", item.get("name"))
    if not isinstance(description, str):
        raise MalformedInputError(
            "Component items need a 'description' string",
            details={"name": item.get("name")},
        )

    components = []
    for match in match_keywords(description, COMPONENT_KEYWORDS, len(COMPONENT_KEYWORDS)):
        spec = store.find_component(match.target)
        if spec is None:
            continue
        components.append(
            {
                "lubaComponent": spec.name,
                "confidence": match.confidence,
                "matchedKeywords": list(match.matched_keywords),
                "description": spec.description,
                "example": spec.example,
                "parameters": [p.to_dict() for p in spec.parameters],
                "notes": spec.notes,
            }
        )
        if len(components) == MAX_COMPONENT_CANDIDATES:
            break

    primitives = []
    for match in match_keywords(description, PRIMITIVE_KEYWORDS, len(PRIMITIVE_KEYWORDS)):
        spec = store.find_primitive(match.target)
        if spec is None:
            continue
        primitives.append(
            {
                "lubaPrimitive": spec.name,
                "modifier": spec.modifier,
                "matchedKeywords": list(match.matched_keywords),
                "description": spec.description,
                "example": spec.example,
            }
        )
        if len(primitives) == MAX_PRIMITIVE_CANDIDATES:
            break

    result: dict[str, Any] = {"lubaComponents": components}
    if primitives:
        result["lubaPrimitives"] = primitives
    return result


def plan_migration(
    store: CatalogStore,
    source_system: str,
    request: MigrationRequest | None = None,
) -> dict[str, Any]:
    """Plan a migration from a source design system onto the catalog.

    Args:
        store: Loaded catalog.
        source_system: Free-text label of the system being migrated.
        request: Source items per kind. None plans nothing.

    Returns:
        ``sourceSystem``, one ``*Mappings`` list per supplied kind and a
        ``summary`` with per-kind mapped and failed counts and a review tip.
    """
    request = request or MigrationRequest()
    result: dict[str, Any] = {"sourceSystem": source_system}
    counts = dict.fromkeys(SECTIONS, 0)
    failed = dict.fromkeys(SECTIONS, 0)

    if request.colors:
        result["colorMappings"] = _map_items(
            request.colors, ("value", "usage"), lambda i: _map_color(store, i)
        )
        counts["colors"], failed["colors"] = _tally(result["colorMappings"])

    if request.spacing:
        spacing_note = _spacing_note(store)
        result["spacingMappings"] = _map_items(
            request.spacing,
            ("value",),
            lambda i: _map_scale_value(store.spacing, i, spacing_note),
        )
        counts["spacing"], failed["spacing"] = _tally(result["spacingMappings"])

    if request.radii:
        radius_note = _radius_note(store)
        result["radiusMappings"] = _map_items(
            request.radii,
            ("value",),
            lambda i: _map_scale_value(store.radius, i, radius_note),
        )
        counts["radii"], failed["radii"] = _tally(result["radiusMappings"])

    if request.typography:
        result["typographyMappings"] = _map_items(
            request.typography,
            ("size", "weight"),
            lambda i: _map_typography(store, i),
        )
        counts["typography"], failed["typography"] = _tally(result["typographyMappings"])

    if request.components:
        result["componentMappings"] = _map_items(
            request.components,
            ("description",),
            lambda i: _map_component(store, i),
            empty_result="lubaComponents",
        )
        counts["components"], failed["components"] = _tally(result["componentMappings"])

    total = sum(counts.values())
    total_failed = sum(failed.values())
    if total:
        tip = REVIEW_TIP
    elif total_failed:
        tip = FAILED_TIP
    else:
        tip = NO_MAPPINGS_TIP
    result["summary"] = {
        "totalMappings": total,
        "mappingCounts": counts,
        "failed": total_failed,
        "failedCounts": failed,
        "tip": tip,
    }
    logger.info(
        f"Planned migration from {source_system!r}: {total} mappings, "
        f"{total_failed} failed"
    )
    return result

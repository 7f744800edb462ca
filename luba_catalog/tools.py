"""Tool operations exposed by the server and the CLI.

Each operation takes the catalog store explicitly and returns a
JSON-ready dict. Failures never escape: the ``tool_boundary`` decorator
turns them into ``{"found": False, "error": {...}}`` payloads, while
"no match" is an ordinary payload with ``found`` false and a list of
what does exist.
"""

import copy
import functools
import time
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from . import migrate
from .catalog_logging import LogCategory, get_category_logger
from .errors import CatalogError, ErrorCategory, MalformedInputError
from .matching import ensure_number, format_number, match_scale
from .models import TOKEN_CATEGORIES, EntryCategory, Scale
from .search import COLOR_GROUPS, search
from .store import CatalogStore
from .suggest import suggest_for

logger = get_category_logger(LogCategory.SERVER)

F = TypeVar("F", bound=Callable[..., dict[str, Any]])


def failure_payload(error: CatalogError) -> dict[str, Any]:
    return {"found": False, "error": error.to_dict()}


def tool_boundary(func: F) -> F:
    """Convert any error raised by a tool into a failure payload."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> dict[str, Any]:
        operation = func.__name__
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except CatalogError as e:
            logger.warning(
                f"{operation} failed: {e.message}",
                extra={"operation": operation, "duration_ms": _elapsed_ms(start_time)},
            )
            return failure_payload(e)
        except Exception as e:
            logger.exception(
                f"{operation} raised unexpectedly",
                extra={"operation": operation, "duration_ms": _elapsed_ms(start_time)},
            )
            return failure_payload(
                CatalogError(
                    category=ErrorCategory.RUNTIME,
                    message=f"Unexpected error in {operation}: {e}",
                    suggestion="Re-run with --verbose and report the log output",
                )
            )

        duration_ms = _elapsed_ms(start_time)
        logger.debug(
            f"{operation} completed in {duration_ms:.2f}ms",
            extra={"operation": operation, "duration_ms": duration_ms},
        )
        return result

    return wrapper  # type: ignore[return-value]


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


def _require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise MalformedInputError(
            f"{field_name} must be a string, got {type(value).__name__}",
            details={"field": field_name},
        )
    return value


def _require_list(value: Any, field_name: str) -> list[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MalformedInputError(
            f"{field_name} must be an array, got {type(value).__name__}",
            details={"field": field_name},
        )
    return list(value)


def _token_category(category: Any) -> str | None:
    if category is None or category == "":
        return None
    if isinstance(category, str) and category.strip().casefold() in TOKEN_CATEGORIES:
        return category.strip().casefold()
    raise MalformedInputError(
        f"Unknown token category: {category!r}",
        suggestion=f"Use one of: {', '.join(TOKEN_CATEGORIES)}",
        details={"validCategories": list(TOKEN_CATEGORIES)},
    )


@tool_boundary
def lookup_token(
    store: CatalogStore,
    query: str,
    category: str | None = None,
    *,
    max_results: int = 8,
) -> dict[str, Any]:
    """Search design tokens by name, API identifier or description."""
    query = _require_text(query, "query")
    category = _token_category(category)

    results = search(
        store.token_entries,
        query,
        category=category,
        max_results=max_results,
        include_description=True,
    )
    logger.debug(
        f"lookup_token {query!r} category={category}: {len(results)} results",
        extra={"operation": "lookup_token", "query": query, "result_count": len(results)},
    )

    if not results:
        scope = f' in category "{category}"' if category else ""
        return {
            "found": False,
            "message": f'No tokens matching "{query}"{scope}',
            "categories": list(TOKEN_CATEGORIES),
        }
    return {
        "found": True,
        "count": len(results),
        "tokens": [entry.to_dict() for entry in results],
    }


@tool_boundary
def lookup_component(
    store: CatalogStore, query: str, *, max_results: int = 3
) -> dict[str, Any]:
    """Find components by name (with or without the Luba prefix) or purpose."""
    query = _require_text(query, "query")
    results = search(
        store.component_search_entries,
        query,
        max_results=max_results,
        include_description=True,
    )
    logger.debug(
        f"lookup_component {query!r}: {len(results)} results",
        extra={"operation": "lookup_component", "query": query, "result_count": len(results)},
    )

    if not results:
        available = [c.name for c in store.components]
        return {
            "found": False,
            "message": f'No component matching "{query}". Available: {", ".join(available)}',
            "available": available,
        }
    return {"found": True, "components": [entry.to_dict() for entry in results]}


@tool_boundary
def lookup_primitive(
    store: CatalogStore, query: str, *, max_results: int = 3
) -> dict[str, Any]:
    """Find primitives by name, short name or modifier."""
    query = _require_text(query, "query")
    results = search(
        store.primitive_search_entries,
        query,
        max_results=max_results,
        include_description=True,
    )
    logger.debug(
        f"lookup_primitive {query!r}: {len(results)} results",
        extra={"operation": "lookup_primitive", "query": query, "result_count": len(results)},
    )

    if not results:
        available = [p.name for p in store.primitives]
        return {
            "found": False,
            "message": f'No primitive matching "{query}". Available: {", ".join(available)}',
            "available": available,
        }
    return {"found": True, "primitives": [entry.to_dict() for entry in results]}


def _step_label(step: Any) -> str:
    return f"{step.api} ({format_number(step.value)}pt)" if step else "none"


def _validate_on_scale(scale: Scale, value: Any) -> tuple[Any, dict[str, Any]]:
    value = ensure_number(value)
    match = match_scale(value, scale)
    if match.exact is not None:
        return match, {
            "valid": True,
            "onGrid": match.on_grid,
            "token": match.exact.to_dict(),
            "message": f"{format_number(value)}pt is {match.exact.api} ({match.exact.name})",
        }
    return match, {
        "valid": False,
        "onGrid": match.on_grid,
        "value": value,
        "suggestion": match.nearest.to_dict(),
        "nearest": {
            "below": match.below.to_dict() if match.below else None,
            "above": match.above.to_dict() if match.above else None,
        },
    }


@tool_boundary
def validate_spacing(store: CatalogStore, value: float) -> dict[str, Any]:
    """Check a spacing value against the LubaSpacing scale and the 4pt grid."""
    scale = store.spacing
    match, result = _validate_on_scale(scale, value)
    if result["valid"]:
        return result

    shown = format_number(match.value)
    grid = format_number(scale.base_unit)
    if match.on_grid:
        custom_api = scale.custom_api or "LubaSpacing.custom"
        result["message"] = (
            f"{shown}pt is on the {grid}pt grid but not a named token. "
            f"Nearest: {_step_label(match.nearest)}. Use "
            f"{custom_api}({format_number(match.value / scale.base_unit)}) "
            "for grid-aligned custom values."
        )
    else:
        result["message"] = (
            f"{shown}pt is NOT on the {grid}pt grid. Nearest named tokens: "
            f"{_step_label(match.below)} and {_step_label(match.above)}."
        )
    return result


@tool_boundary
def validate_radius(store: CatalogStore, value: float) -> dict[str, Any]:
    """Check a corner radius against the LubaRadius scale."""
    scale = store.radius
    match, result = _validate_on_scale(scale, value)
    if result["valid"]:
        return result

    valid_radii = ", ".join(f"{s.name}({format_number(s.value)})" for s in scale.steps)
    result["message"] = (
        f"{format_number(match.value)}pt is not on the LubaRadius scale. "
        f"Nearest: {_step_label(match.nearest)}. Valid radii: {valid_radii}."
    )
    return result


@tool_boundary
def get_color_palette(
    store: CatalogStore, query: str, *, max_results: int = 10
) -> dict[str, Any]:
    """Return a whole color group, or colors matching a free-text query."""
    query = _require_text(query, "query")
    wanted = query.strip().casefold()

    if wanted:
        group = next(
            (g for g in COLOR_GROUPS if g == wanted or g.startswith(wanted)), None
        )
        if group is not None:
            return {
                "found": True,
                "category": group,
                "description": store.tokens_data["colors"].get("description", ""),
                "colors": copy.deepcopy(store.tokens_data["colors"].get(group, [])),
            }

    color_entries = [
        e for e in store.token_entries if e.category == EntryCategory.COLOR.value
    ]
    results = search(
        color_entries, query, max_results=max_results, include_description=True
    )
    if not results:
        return {
            "found": False,
            "message": f'No colors matching "{query}". Categories: {", ".join(COLOR_GROUPS)}',
            "categories": list(COLOR_GROUPS),
        }

    colors = []
    for entry in results:
        payload = entry.payload
        color = {
            "name": payload["name"],
            "api": payload["api"],
            "light": payload.get("light"),
            "dark": payload.get("dark"),
            "description": payload["description"],
            "subcategory": payload["subcategory"],
        }
        if payload.get("aliasOf"):
            color["aliasOf"] = payload["aliasOf"]
        colors.append(color)
    return {"found": True, "count": len(colors), "colors": colors}


@tool_boundary
def suggest_tokens(
    store: CatalogStore,
    description: str,
    *,
    max_components: int = 5,
    max_primitives: int = 3,
) -> dict[str, Any]:
    """Suggest tokens, components and primitives for a UI description."""
    description = _require_text(description, "description")
    return suggest_for(
        store,
        description,
        max_components=max_components,
        max_primitives=max_primitives,
    )


def _batch(
    queries: Any, single: Callable[[Any], dict[str, Any]]
) -> dict[str, Any]:
    queries = _require_list(queries, "queries")
    results = [{"query": query, **single(query)} for query in queries]
    return {"count": len(results), "results": results}


@tool_boundary
def batch_lookup_tokens(
    store: CatalogStore,
    queries: Sequence[str],
    category: str | None = None,
    *,
    max_results: int = 8,
) -> dict[str, Any]:
    """Look up several tokens at once; one result per query, in order."""
    return _batch(
        queries,
        lambda q: lookup_token(store, q, category, max_results=max_results),
    )


@tool_boundary
def batch_lookup_components(
    store: CatalogStore,
    queries: Sequence[str],
    *,
    max_results: int = 3,
) -> dict[str, Any]:
    """Look up several components at once; one result per query, in order."""
    return _batch(
        queries,
        lambda q: lookup_component(store, q, max_results=max_results),
    )


@tool_boundary
def plan_migration(
    store: CatalogStore,
    source_system: str,
    colors: Sequence[dict[str, Any]] | None = None,
    spacing: Sequence[dict[str, Any]] | None = None,
    radii: Sequence[dict[str, Any]] | None = None,
    typography: Sequence[dict[str, Any]] | None = None,
    components: Sequence[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Map another design system's tokens and components onto LubaUI."""
    source_system = _require_text(source_system, "source_system")
    request = migrate.MigrationRequest.from_dict(
        {
            "colors": colors,
            "spacing": spacing,
            "radii": radii,
            "typography": typography,
            "components": components,
        }
    )
    return migrate.plan_migration(store, source_system, request)

"""Pattern-based token and component suggestions for a UI description.

Each pattern is a data record; adding a pattern never needs new code.
A pattern matches when any of its keywords occurs as a substring of the
lowercased description. Matched patterns are merged with set semantics
in table order, so the result does not depend on word order in the input.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .catalog_logging import LogCategory, get_category_logger
from .search import search
from .store import CatalogStore

logger = get_category_logger(LogCategory.SEARCH)

FALLBACK_NOTE = (
    "No exact pattern match. Showing relevant components and primitives "
    "based on your description."
)

GENERAL_GUIDANCE = {
    "spacing": (
        "Use LubaSpacing tokens (xs=4, sm=8, md=12, lg=16, xl=24, xxl=32, "
        "xxxl=48, huge=64). All on the 4pt grid."
    ),
    "colors": (
        "Use LubaColors semantic tokens. textPrimary for main text, "
        "textSecondary for descriptions, accent for interactive, surface "
        "for backgrounds."
    ),
    "radius": (
        "Use LubaRadius tokens (none=0, xs=4, sm=8, md=12, lg=16, xl=24, "
        "full=9999). md is the most common for components."
    ),
    "typography": (
        "Use LubaTypography tokens. headline for titles, body for content, "
        "caption for metadata, button for actions."
    ),
}

SUGGESTION_KINDS = ("spacing", "colors", "radius", "typography")


@dataclass(frozen=True)
class UIPattern:
    """A UI intent and the catalog pieces it calls for."""

    name: str
    keywords: tuple[str, ...]
    spacing: tuple[str, ...] = ()
    colors: tuple[str, ...] = ()
    radius: tuple[str, ...] = ()
    typography: tuple[str, ...] = ()
    components: tuple[str, ...] = ()
    primitives: tuple[str, ...] = ()

    def matches(self, description: str) -> bool:
        lower = description.lower()
        return any(keyword in lower for keyword in self.keywords)


PATTERNS: tuple[UIPattern, ...] = (
    UIPattern(
        name="form",
        keywords=("form", "sign up", "signup", "login", "checkout"),
        spacing=("LubaSpacing.sm (8pt) between fields", "LubaSpacing.lg (16pt) section gaps"),
        colors=(
            "LubaColors.surface for field background",
            "LubaColors.border for field borders",
            "LubaColors.error for validation",
        ),
        radius=("LubaRadius.md (12pt) for fields",),
        typography=(
            "LubaTypography.body for field text",
            "LubaTypography.caption for helper text",
            "LubaTypography.button for submit",
        ),
        components=(
            "LubaTextField",
            "LubaTextArea",
            "LubaCheckbox",
            "LubaRadio",
            "LubaToggle",
            "LubaButton",
        ),
    ),
    UIPattern(
        name="notification",
        keywords=("notification", "toast", "snackbar"),
        spacing=("LubaSpacing.md (12pt) internal padding", "LubaSpacing.lg (16pt) horizontal padding"),
        colors=("LubaColors.success/warning/error for status", "LubaColors.surface for background"),
        radius=("LubaRadius.md (12pt) for toast/alert",),
        typography=("LubaTypography.subheadline for message", "LubaTypography.buttonSmall for action"),
        components=("LubaToast", "LubaAlert"),
        primitives=("lubaGlass for frosted effect",),
    ),
    UIPattern(
        name="banner",
        keywords=("banner", "alert"),
        spacing=("LubaSpacing.md (12pt) vertical padding", "LubaSpacing.lg (16pt) horizontal padding"),
        colors=("LubaColors.success/warning/error for status", "LubaColors.surface for background"),
        radius=("LubaRadius.md (12pt)",),
        typography=("LubaTypography.headline for title", "LubaTypography.body for message"),
        components=("LubaAlert",),
        primitives=("lubaGlass for frosted effect",),
    ),
    UIPattern(
        name="card",
        keywords=("card", "tile"),
        spacing=("LubaSpacing.lg (16pt) card padding", "LubaSpacing.sm (8pt) content gaps"),
        colors=(
            "LubaColors.surface for background",
            "LubaColors.textPrimary for title",
            "LubaColors.textSecondary for description",
        ),
        radius=("LubaRadius.md (12pt) card corners",),
        typography=(
            "LubaTypography.headline for title",
            "LubaTypography.body for content",
            "LubaTypography.caption for metadata",
        ),
        components=("LubaCard",),
        primitives=(
            "lubaPressable for tappable cards",
            "lubaExpandable for expandable cards",
            "lubaGlass for glass cards",
        ),
    ),
    UIPattern(
        name="list",
        keywords=("list", "feed"),
        spacing=("LubaSpacing.sm (8pt) between items", "LubaSpacing.lg (16pt) row padding"),
        colors=("LubaColors.surface for row background", "LubaColors.border for separators"),
        radius=("LubaRadius.md (12pt) for row cards",),
        typography=("LubaTypography.body for primary text", "LubaTypography.bodySmall for secondary"),
        components=("LubaCard", "LubaDivider", "LubaAvatar"),
        primitives=("lubaSwipeable for swipe actions", "lubaPressable for tap actions"),
    ),
    UIPattern(
        name="loading",
        keywords=("loading", "skeleton", "spinner"),
        spacing=("LubaSpacing.md (12pt) around loading indicators",),
        colors=("LubaColors.accent for active indicators", "LubaColors.gray200 for tracks"),
        radius=("LubaRadius.xs (4pt) for skeleton elements",),
        typography=("LubaTypography.caption for loading labels",),
        components=("LubaSpinner", "LubaProgressBar", "LubaCircularProgress", "LubaSkeleton"),
        primitives=("lubaShimmerable for shimmer effect",),
    ),
    UIPattern(
        name="navigation",
        keywords=("navigation", "tab bar"),
        spacing=("LubaSpacing.lg (16pt) tab padding", "LubaSpacing.xs (4pt) icon-label gap"),
        colors=("LubaColors.accent for selected", "LubaColors.textSecondary for unselected"),
        radius=("LubaRadius.sm (8pt) for tab indicators",),
        typography=("LubaTypography.footnote for tab labels",),
        components=("LubaTabs", "LubaSearchBar"),
        primitives=("lubaGlass for glass tab bar",),
    ),
    UIPattern(
        name="profile",
        keywords=("profile", "account"),
        spacing=("LubaSpacing.lg (16pt) between elements", "LubaSpacing.xl (24pt) section gaps"),
        colors=(
            "LubaColors.surface for card",
            "LubaColors.textPrimary for name",
            "LubaColors.textSecondary for details",
        ),
        radius=("LubaRadius.full (9999) for avatar",),
        typography=(
            "LubaTypography.title2 for name",
            "LubaTypography.body for details",
            "LubaTypography.caption for metadata",
        ),
        components=("LubaAvatar", "LubaCard", "LubaBadge", "LubaButton"),
    ),
    UIPattern(
        name="modal",
        keywords=("modal", "sheet", "dialog"),
        spacing=("LubaSpacing.lg (16pt) header/content padding", "LubaSpacing.xl (24pt) between sections"),
        colors=("LubaColors.surface for background", "LubaColors.textPrimary for title"),
        radius=("LubaRadius.lg (16pt) for sheet corners",),
        typography=("LubaTypography.title3 for sheet title", "LubaTypography.body for content"),
        components=("LubaSheet", "LubaButton"),
        primitives=("lubaGlass for glass header",),
    ),
    UIPattern(
        name="settings",
        keywords=("settings", "preferences"),
        spacing=("LubaSpacing.lg (16pt) row padding", "LubaSpacing.sm (8pt) label-control gap"),
        colors=("LubaColors.surface for rows", "LubaColors.textPrimary for labels"),
        radius=("LubaRadius.md (12pt) for grouped sections",),
        typography=("LubaTypography.body for labels", "LubaTypography.bodySmall for descriptions"),
        components=("LubaToggle", "LubaSlider", "LubaStepper", "LubaCard", "LubaDivider"),
        primitives=("lubaExpandable for expandable settings",),
    ),
)


def match_patterns(
    description: str, patterns: Iterable[UIPattern] = PATTERNS
) -> list[UIPattern]:
    """Patterns with at least one keyword in the description, in table order."""
    return [p for p in patterns if p.matches(description)]


def _union(groups: Iterable[Iterable[str]]) -> list[str]:
    seen: dict[str, None] = {}
    for group in groups:
        for item in group:
            seen.setdefault(item, None)
    return list(seen)


def _resolve_components(store: CatalogStore, names: Iterable[str]) -> list[dict[str, Any]]:
    resolved: dict[str, dict[str, Any]] = {}
    for name in names:
        spec = store.find_component(name)
        if spec is None:
            logger.debug(f"Pattern component {name!r} not in catalog, omitted")
            continue
        resolved.setdefault(spec.name, spec.to_dict())
    return list(resolved.values())


def _resolve_primitives(store: CatalogStore, references: Iterable[str]) -> list[dict[str, Any]]:
    resolved: dict[str, dict[str, Any]] = {}
    for reference in references:
        spec = store.find_primitive(reference)
        if spec is None:
            logger.debug(f"Pattern primitive {reference!r} not in catalog, omitted")
            continue
        resolved.setdefault(spec.name, spec.to_dict())
    return list(resolved.values())


def suggest_for(
    store: CatalogStore,
    description: str,
    *,
    max_components: int = 5,
    max_primitives: int = 3,
    patterns: Iterable[UIPattern] = PATTERNS,
) -> dict[str, Any]:
    """Suggest tokens, components and primitives for a UI description.

    Returns the merged recommendations of every matched pattern, or a
    search-based fallback with general guidance when none match.
    """
    matched = match_patterns(description, patterns)

    if matched:
        logger.debug(f"Matched patterns: {[p.name for p in matched]}")
        return {
            "matchedPatterns": [p.name for p in matched],
            "suggestions": {
                kind: _union(getattr(p, kind) for p in matched)
                for kind in SUGGESTION_KINDS
            },
            "recommendedComponents": _resolve_components(
                store, _union(p.components for p in matched)
            ),
            "recommendedPrimitives": _resolve_primitives(
                store, _union(p.primitives for p in matched)
            ),
        }

    components = search(
        store.component_search_entries,
        description,
        max_results=max_components,
        include_description=True,
    )
    primitives = search(
        store.primitive_search_entries,
        description,
        max_results=max_primitives,
        include_description=True,
    )
    return {
        "matchedPatterns": [],
        "note": FALLBACK_NOTE,
        "recommendedComponents": [c.to_dict() for c in components],
        "recommendedPrimitives": [p.to_dict() for p in primitives],
        "generalGuidance": dict(GENERAL_GUIDANCE),
    }

"""Read-only bulk exports of the catalog."""

import copy
from typing import Any

from .store import CatalogStore

ARCHITECTURE: dict[str, Any] = {
    "philosophy": (
        "Composability over inheritance. Behaviors are extracted into primitives "
        "so any view can gain interactive powers through modifiers, not "
        "subclassing. Every magic number has a name, a token, and documented "
        "rationale."
    ),
    "tokenSystem": {
        "tier1": {
            "name": "Primitives (LubaPrimitives)",
            "rule": (
                "Raw hex values and numbers. The DNA. NEVER reference directly "
                "in component code."
            ),
            "examples": [
                "LubaPrimitives.grey900Light → Color(hex: 0x1A1A1A)",
                "LubaPrimitives.space4 → 4",
            ],
        },
        "tier2": {
            "name": "Semantic Tokens",
            "rule": "Human-readable, context-aware names. USE THESE in components.",
            "modules": [
                "LubaColors",
                "LubaSpacing",
                "LubaRadius",
                "LubaTypography",
                "LubaMotion",
                "LubaAnimations",
            ],
            "examples": [
                "LubaColors.textPrimary → adaptive grey900",
                "LubaSpacing.lg → 16pt",
                "LubaMotion.pressScale → 0.97",
            ],
        },
        "tier3": {
            "name": "Component Tokens",
            "rule": "Per-component configuration enums. Reference tier 2 tokens internally.",
            "modules": [
                "LubaCardTokens",
                "LubaFieldTokens",
                "LubaButtonSize",
                "LubaToastTokens",
                "LubaTabsTokens",
                "etc.",
            ],
        },
    },
    "colorSystem": {
        "approach": "Greyscale-first with organic sage green accent",
        "adaptive": (
            "All colors use LubaColors.adaptive(light:dark:) for automatic "
            "light/dark mode"
        ),
        "surfaceHierarchy": "background → surface → surfaceSecondary → surfaceTertiary",
        "accentColor": "Sage green (#5F7360 light / #9AB897 dark), WCAG AA compliant",
    },
    "spacingGrid": (
        "4pt base grid. Named tokens: xs(4), sm(8), md(12), lg(16), xl(24), "
        "xxl(32), xxxl(48), huge(64)"
    ),
    "radiusScale": "none(0), xs(4), sm(8), md(12), lg(16), xl(24), full(9999)",
    "typography": "SF Rounded by default. Config-aware via LubaConfig.shared.useRoundedFont",
    "motionSystems": {
        "LubaMotion": (
            "Raw constants (scale values, animation parameters). Use with "
            ".scaleEffect(), .opacity()"
        ),
        "LubaAnimations": (
            "Applied Animation objects. Use with withAnimation(), .animation(), "
            ".transition()"
        ),
    },
    "platforms": "iOS 16+, macOS 13+, watchOS 9+, tvOS 16+, visionOS 1.0+",
    "configuration": {
        "environment": (
            "@Environment(\\.lubaConfig) for runtime settings, "
            "@Environment(\\.lubaTheme) for theming"
        ),
        "presets": [".minimal", ".accessible", ".debug"],
    },
}


def architecture_overview() -> dict[str, Any]:
    """Design philosophy, token tiers and conventions."""
    return copy.deepcopy(ARCHITECTURE)


def all_tokens(store: CatalogStore) -> dict[str, Any]:
    """A copy of the token catalog as loaded."""
    return copy.deepcopy(store.tokens_data)


def component_directory(store: CatalogStore) -> dict[str, Any]:
    """Name and description of every component and primitive, with totals."""
    components = [{"name": c.name, "description": c.description} for c in store.components]
    primitives = [
        {"name": p.name, "modifier": p.modifier, "description": p.description}
        for p in store.primitives
    ]
    return {
        "components": components,
        "primitives": primitives,
        "total": {"components": len(components), "primitives": len(primitives)},
    }


def full_reference(store: CatalogStore) -> dict[str, Any]:
    """Everything in one document: architecture, tokens, components, primitives."""
    return {
        "architecture": architecture_overview(),
        "tokens": all_tokens(store),
        "components": [c.to_dict() for c in store.components],
        "primitives": [p.to_dict() for p in store.primitives],
    }

"""MCP server exposing the catalog tools and read-only resources.

Tools wrap the operations in :mod:`luba_catalog.tools` and return their
payloads as indented JSON text. The server speaks stdio by default, so
nothing but protocol frames may be written to stdout.
"""

import json
from typing import Annotated, Any, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, Field

from . import reference, tools
from .catalog_logging import LogCategory, get_category_logger
from .config import CatalogConfig
from .store import CatalogStore

logger = get_category_logger(LogCategory.SERVER)

TokenCategory = Literal["spacing", "radius", "color", "typography", "motion", "glass"]

INSTRUCTIONS = (
    "LubaUI design system reference. Look up tokens, components and "
    "primitives, validate spacing and radius values, and plan migrations "
    "from other design systems."
)


class ColorItem(BaseModel):
    name: str | None = Field(default=None, description="Source token name")
    value: str = Field(description="Hex color, e.g. '#5F7360'")
    usage: str | None = Field(default=None, description="Where the color is used")


class ScaleItem(BaseModel):
    name: str | None = Field(default=None, description="Source token name")
    value: float = Field(description="Value in points")


class TypographyItem(BaseModel):
    name: str | None = Field(default=None, description="Source style name")
    size: float = Field(description="Font size in points")
    weight: str | None = Field(
        default=None, description="Font weight, e.g. 'regular' or 'semibold'"
    )


class ComponentItem(BaseModel):
    name: str = Field(description="Source component name")
    description: str | None = Field(
        default=None, description="What the component does; defaults to its name"
    )


def to_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2)


def _dump(items: list[BaseModel] | None) -> list[dict[str, Any]] | None:
    if items is None:
        return None
    return [item.model_dump(exclude_none=True) for item in items]


def create_server(store: CatalogStore, config: CatalogConfig) -> FastMCP:
    """Build a FastMCP server bound to a loaded catalog.

    Args:
        store: Catalog every tool reads from.
        config: Supplies the server name and per-tool result limits.

    Returns:
        Server with ten tools and four ``lubaui://`` resources registered.
    """
    mcp = FastMCP(config.server_name, instructions=INSTRUCTIONS)

    @mcp.tool(
        description=(
            "Look up a LubaUI design token by name or description. Returns "
            "token name, API, value, tier, and usage guidance."
        )
    )
    def lookup_token(
        query: Annotated[
            str,
            Field(
                description="Token name, API path, or description "
                "(e.g. 'spacing large', 'lg', 'card padding')"
            ),
        ],
        category: Annotated[
            TokenCategory | None, Field(description="Filter by token category")
        ] = None,
    ) -> str:
        return to_json(
            tools.lookup_token(
                store, query, category, max_results=config.max_token_results
            )
        )

    @mcp.tool(
        description=(
            "Look up a LubaUI component by name. Returns init parameters, "
            "styles, code example, and related tokens."
        )
    )
    def lookup_component(
        query: Annotated[
            str,
            Field(description="Component name (e.g. 'Button', 'LubaTextField', 'toast')"),
        ],
    ) -> str:
        return to_json(
            tools.lookup_component(
                store, query, max_results=config.max_component_results
            )
        )

    @mcp.tool(
        description=(
            "Look up a LubaUI interaction primitive by name. Returns modifier "
            "signature, parameters, presets, and code example."
        )
    )
    def lookup_primitive(
        query: Annotated[
            str,
            Field(
                description="Primitive name (e.g. 'pressable', 'swipeable', "
                "'glass', 'expandable')"
            ),
        ],
    ) -> str:
        return to_json(
            tools.lookup_primitive(
                store, query, max_results=config.max_primitive_results
            )
        )

    @mcp.tool(
        description=(
            "Check if a spacing value is on the LubaUI 4pt grid and maps to a "
            "named token. Suggests nearest tokens if not."
        )
    )
    def validate_spacing(
        value: Annotated[float, Field(description="Spacing value in points to validate")],
    ) -> str:
        return to_json(tools.validate_spacing(store, value))

    @mcp.tool(
        description=(
            "Check if a corner radius value is on the LubaUI radius scale. "
            "Suggests nearest token if not."
        )
    )
    def validate_radius(
        value: Annotated[float, Field(description="Radius value in points to validate")],
    ) -> str:
        return to_json(tools.validate_radius(store, value))

    @mcp.tool(
        description=(
            "Get LubaUI colors by category or search. Returns light/dark hex "
            "values and usage context."
        )
    )
    def get_color_palette(
        query: Annotated[
            str,
            Field(
                description="Color category (greyscale, surfaces, accent, text, "
                "semantic, border, glass) or search term (e.g. 'error', 'background')"
            ),
        ],
    ) -> str:
        return to_json(
            tools.get_color_palette(store, query, max_results=config.max_color_results)
        )

    @mcp.tool(
        description=(
            "Suggest LubaUI tokens, components, and primitives for a UI you're "
            "building. Describe what you're building and get recommendations."
        )
    )
    def suggest_tokens(
        description: Annotated[
            str,
            Field(
                description="Description of what you're building (e.g. "
                "'notification banner', 'settings page', 'profile card')"
            ),
        ],
    ) -> str:
        return to_json(
            tools.suggest_tokens(
                store,
                description,
                max_components=config.max_suggested_components,
                max_primitives=config.max_suggested_primitives,
            )
        )

    @mcp.tool(
        description=(
            "Look up several LubaUI design tokens in one call. Returns one "
            "result per query, in order."
        )
    )
    def batch_lookup_tokens(
        queries: Annotated[list[str], Field(description="Token queries to look up")],
        category: Annotated[
            TokenCategory | None,
            Field(description="Filter every query by token category"),
        ] = None,
    ) -> str:
        return to_json(
            tools.batch_lookup_tokens(
                store, queries, category, max_results=config.max_token_results
            )
        )

    @mcp.tool(
        description=(
            "Look up several LubaUI components in one call. Returns one result "
            "per query, in order."
        )
    )
    def batch_lookup_components(
        queries: Annotated[list[str], Field(description="Component names to look up")],
    ) -> str:
        return to_json(
            tools.batch_lookup_components(
                store, queries, max_results=config.max_component_results
            )
        )

    @mcp.tool(
        description=(
            "Plan a migration from another design system to LubaUI. Maps "
            "colors, spacing, radii, typography and components to their "
            "closest LubaUI equivalents."
        )
    )
    def plan_migration(
        source_system: Annotated[
            str,
            Field(description="Name of the design system being migrated (e.g. 'Material')"),
        ],
        colors: Annotated[list[ColorItem] | None, Field(description="Source colors")] = None,
        spacing: Annotated[
            list[ScaleItem] | None, Field(description="Source spacing values")
        ] = None,
        radii: Annotated[
            list[ScaleItem] | None, Field(description="Source corner radii")
        ] = None,
        typography: Annotated[
            list[TypographyItem] | None, Field(description="Source text styles")
        ] = None,
        components: Annotated[
            list[ComponentItem] | None, Field(description="Source components")
        ] = None,
    ) -> str:
        return to_json(
            tools.plan_migration(
                store,
                source_system,
                colors=_dump(colors),
                spacing=_dump(spacing),
                radii=_dump(radii),
                typography=_dump(typography),
                components=_dump(components),
            )
        )

    @mcp.resource(
        "lubaui://tokens/all",
        description=(
            "Complete LubaUI token catalog: spacing, radius, colors, "
            "typography, motion, and glass tokens"
        ),
        mime_type="application/json",
    )
    def tokens_resource() -> str:
        return to_json(reference.all_tokens(store))

    @mcp.resource(
        "lubaui://architecture",
        description=(
            "LubaUI design system architecture: three-tier token system, "
            "design philosophy, and conventions"
        ),
        mime_type="application/json",
    )
    def architecture_resource() -> str:
        return to_json(reference.architecture_overview())

    @mcp.resource(
        "lubaui://components",
        description="LubaUI component directory with descriptions",
        mime_type="application/json",
    )
    def components_resource() -> str:
        return to_json(reference.component_directory(store))

    @mcp.resource(
        "lubaui://reference/full",
        description="Architecture, every token, every component and every primitive",
        mime_type="application/json",
    )
    def full_reference_resource() -> str:
        return to_json(reference.full_reference(store))

    logger.debug(
        f"Created server {config.server_name!r} with {len(store.components)} "
        f"components and {len(store.primitives)} primitives"
    )
    return mcp


def run_server(store: CatalogStore, config: CatalogConfig, transport: str = "stdio") -> None:
    """Serve until the client disconnects."""
    server = create_server(store, config)
    logger.info(f"Starting {config.server_name} server over {transport}")
    server.run(transport=transport)

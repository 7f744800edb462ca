"""Immutable in-memory catalog, loaded once and passed to every operation."""

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .catalog_logging import LogCategory, get_category_logger
from .errors import CatalogLoadError
from .models import (
    CatalogEntry,
    ColorEntry,
    ComponentSpec,
    PrimitiveSpec,
    Scale,
    ScaleStep,
    TypographyEntry,
)
from .search import COLOR_GROUPS, component_entries, flatten_tokens, primitive_entries

logger = get_category_logger(LogCategory.CATALOG)

TOKENS_FILE = "tokens.json"
COMPONENTS_FILE = "components.json"
PRIMITIVES_FILE = "primitives.json"
PACKAGED_DATA_DIR = Path(__file__).parent / "data"

# Groups whose colors stand in for a source system's palette
MIGRATION_COLOR_GROUPS: tuple[str, ...] = tuple(g for g in COLOR_GROUPS if g != "glass")


@dataclass(frozen=True)
class CatalogStore:
    """Read-only view over the token, component and primitive catalogs."""

    tokens_data: dict[str, Any] = field(repr=False)
    spacing: Scale
    radius: Scale
    color_groups: dict[str, tuple[ColorEntry, ...]] = field(repr=False)
    typography: tuple[TypographyEntry, ...] = field(repr=False)
    components: tuple[ComponentSpec, ...] = field(repr=False)
    primitives: tuple[PrimitiveSpec, ...] = field(repr=False)
    token_entries: tuple[CatalogEntry, ...] = field(repr=False)
    component_search_entries: tuple[CatalogEntry, ...] = field(repr=False)
    primitive_search_entries: tuple[CatalogEntry, ...] = field(repr=False)

    @classmethod
    def from_data(
        cls,
        tokens: dict[str, Any],
        components: list[dict[str, Any]],
        primitives: list[dict[str, Any]],
    ) -> "CatalogStore":
        """Build a store from already-parsed catalog documents.

        Raises:
            CatalogLoadError: If a section is missing or malformed.
        """
        try:
            spacing = _build_scale("spacing", tokens["spacing"])
            radius = _build_scale("radius", tokens["radius"])
            color_groups = {
                group: tuple(
                    ColorEntry.from_dict(raw, group)
                    for raw in tokens["colors"].get(group, [])
                )
                for group in COLOR_GROUPS
            }
            typography = tuple(
                TypographyEntry.from_dict(raw) for raw in tokens["typography"]["tokens"]
            )
            component_specs = tuple(ComponentSpec.from_dict(c) for c in components)
            primitive_specs = tuple(PrimitiveSpec.from_dict(p) for p in primitives)
            token_entries = tuple(flatten_tokens(tokens))
            store = cls(
                tokens_data=copy.deepcopy(tokens),
                spacing=spacing,
                radius=radius,
                color_groups=color_groups,
                typography=typography,
                components=component_specs,
                primitives=primitive_specs,
                token_entries=token_entries,
                component_search_entries=tuple(component_entries(component_specs)),
                primitive_search_entries=tuple(primitive_entries(primitive_specs)),
            )
        except KeyError as e:
            raise CatalogLoadError(f"Catalog is missing required key: {e}") from e
        except (TypeError, ValueError) as e:
            raise CatalogLoadError(f"Catalog data is malformed: {e}") from e

        logger.debug(
            f"Catalog built: {len(store.token_entries)} tokens, "
            f"{len(store.components)} components, {len(store.primitives)} primitives"
        )
        return store

    @classmethod
    def load(cls, data_dir: Path | str | None = None) -> "CatalogStore":
        """Read the three catalog files, by default from the packaged data."""
        if data_dir is None:
            base = PACKAGED_DATA_DIR
            source = "packaged data"
        else:
            base = Path(data_dir)
            source = str(base)

        documents = [
            _read_json(base / name)
            for name in (TOKENS_FILE, COMPONENTS_FILE, PRIMITIVES_FILE)
        ]
        store = cls.from_data(*documents)
        logger.info(
            f"Loaded catalog from {source}: {len(store.token_entries)} tokens, "
            f"{len(store.components)} components, {len(store.primitives)} primitives"
        )
        return store

    @property
    def colors(self) -> tuple[ColorEntry, ...]:
        """Every color entry, glass edges included, in catalog order."""
        return tuple(c for group in COLOR_GROUPS for c in self.color_groups[group])

    @property
    def migration_colors(self) -> tuple[ColorEntry, ...]:
        """Palette colors a source system's colors are matched against."""
        return tuple(
            c for group in MIGRATION_COLOR_GROUPS for c in self.color_groups[group]
        )

    def find_component(self, name: str) -> ComponentSpec | None:
        """Resolve ``LubaButton``, ``Button`` or ``lubabutton`` to a spec."""
        for spec in self.components:
            if (
                spec.name == name
                or spec.name == f"Luba{name}"
                or spec.name.casefold() == name.casefold()
            ):
                return spec
        return None

    def find_primitive(self, reference: str) -> PrimitiveSpec | None:
        """Resolve a primitive from its name or a phrase that starts with it.

        ``"lubaGlass for frosted effect"`` and ``"Pressable"`` both resolve.
        """
        words = reference.split()
        if not words:
            return None
        wanted = words[0].casefold()
        for spec in self.primitives:
            name = spec.name.casefold()
            if wanted in (name, name.replace("luba", "", 1)) or name == f"luba{wanted}":
                return spec
        return None


def _build_scale(name: str, section: dict[str, Any]) -> Scale:
    steps = tuple(ScaleStep.from_dict(raw) for raw in section["tokens"])
    if not steps:
        raise CatalogLoadError(f"Catalog scale {name!r} has no steps")
    return Scale(
        name=name,
        steps=steps,
        base_unit=section.get("baseUnit", 4),
        sentinel=section.get("sentinel"),
        custom_api=section.get("customApi"),
    )


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {path}", path=str(path)) from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(
            f"Catalog file is not valid JSON: {e}", path=str(path)
        ) from e

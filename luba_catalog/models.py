"""Catalog data models.

Every record here is built once from the packaged JSON and never mutated.
Serialized forms use the camelCase keys of the catalog files so that tool
payloads can be handed back to callers unchanged.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntryCategory(Enum):
    """Category of a searchable catalog entry."""

    SPACING = "spacing"
    RADIUS = "radius"
    COLOR = "color"
    TYPOGRAPHY = "typography"
    MOTION = "motion"
    GLASS = "glass"
    COMPONENT = "component"
    PRIMITIVE = "primitive"


TOKEN_CATEGORIES: tuple[str, ...] = (
    EntryCategory.SPACING.value,
    EntryCategory.RADIUS.value,
    EntryCategory.COLOR.value,
    EntryCategory.TYPOGRAPHY.value,
    EntryCategory.MOTION.value,
    EntryCategory.GLASS.value,
)


class ColorMode(Enum):
    """Appearance a hex value belongs to."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class CatalogEntry:
    """Uniform searchable record for tokens, components and primitives.

    ``payload`` holds the serialized record returned by lookup tools.
    """

    name: str
    aliases: tuple[str, ...]
    category: str
    subcategory: str | None = None
    description: str = ""
    payload: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        if not self.aliases:
            raise ValueError(f"Catalog entry {self.name!r} has no aliases")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return copy.deepcopy(self.payload)


@dataclass(frozen=True)
class ScaleStep:
    """A named value on an ordinal scale, e.g. LubaSpacing.lg = 16."""

    name: str
    api: str
    value: float
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"name": self.name, "api": self.api, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScaleStep":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            api=data["api"],
            value=data["value"],
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class Scale:
    """Ascending, duplicate-free sequence of steps sharing a base unit.

    ``sentinel`` marks a step meaning "effectively infinite" (a pill
    radius). It can be hit exactly but never counts as a nearest value.
    """

    name: str
    steps: tuple[ScaleStep, ...]
    base_unit: float = 4
    sentinel: float | None = None
    custom_api: str | None = None

    def __post_init__(self) -> None:
        if self.base_unit <= 0:
            raise ValueError(f"Scale {self.name!r} needs a positive base unit")
        for previous, current in zip(self.steps, self.steps[1:]):
            if current.value <= previous.value:
                raise ValueError(
                    f"Scale {self.name!r} is not strictly ascending at "
                    f"{previous.api} -> {current.api}"
                )

    def is_sentinel(self, step: ScaleStep) -> bool:
        return self.sentinel is not None and step.value == self.sentinel

    @property
    def measurable_steps(self) -> tuple[ScaleStep, ...]:
        """Steps that take part in nearest-distance computation."""
        return tuple(s for s in self.steps if not self.is_sentinel(s))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "baseUnit": self.base_unit,
            "sentinel": self.sentinel,
            "steps": [s.to_dict() for s in self.steps],
        }


@dataclass(frozen=True)
class ColorEntry:
    """A color token with per-mode hex values."""

    name: str
    api: str
    light: str | None = None
    dark: str | None = None
    group: str | None = None
    description: str = ""
    alias_of: str | None = None

    def hex_for(self, mode: ColorMode) -> str | None:
        """Return the hex defined for a mode, or None when it has none."""
        return self.light if mode is ColorMode.LIGHT else self.dark

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "api": self.api,
            "light": self.light,
            "dark": self.dark,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], group: str | None = None) -> "ColorEntry":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            api=data["api"],
            light=data.get("light"),
            dark=data.get("dark"),
            group=group,
            description=data.get("description", ""),
            alias_of=data.get("aliasOf"),
        )


@dataclass(frozen=True)
class TypographyEntry:
    """A text style. Several entries may share a size with different weights."""

    name: str
    api: str
    size: float
    weight: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "api": self.api,
            "size": self.size,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypographyEntry":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            api=data["api"],
            size=data["size"],
            weight=data["weight"],
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class ParameterSpec:
    """One initializer or modifier parameter."""

    name: str
    type: str
    description: str = ""
    required: bool = False
    default: str | None = None
    options: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.required:
            result["required"] = True
        if self.default is not None:
            result["default"] = self.default
        if self.options is not None:
            result["options"] = list(self.options)
        result["description"] = self.description
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParameterSpec":
        """Create from dictionary."""
        options = data.get("options")
        return cls(
            name=data["name"],
            type=data["type"],
            description=data.get("description", ""),
            required=bool(data.get("required", False)),
            default=data.get("default"),
            options=tuple(options) if options is not None else None,
        )


@dataclass(frozen=True)
class ComponentSpec:
    """Reference description of a LubaUI component."""

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()
    example: str = ""
    tokens: tuple[str, ...] = ()
    notes: str = ""

    @property
    def short_name(self) -> str:
        """Name without the Luba prefix, e.g. ``Button``."""
        return self.name.replace("Luba", "", 1)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [p.to_dict() for p in self.parameters],
            "example": self.example,
            "tokens": list(self.tokens),
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComponentSpec":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            parameters=tuple(
                ParameterSpec.from_dict(p) for p in data.get("parameters", [])
            ),
            example=data.get("example", ""),
            tokens=tuple(data.get("tokens", [])),
            notes=data.get("notes", ""),
        )


@dataclass(frozen=True)
class PrimitiveSpec:
    """Reference description of a LubaUI view-modifier primitive."""

    name: str
    modifier: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()
    example: str = ""
    tokens: tuple[str, ...] = ()
    composability: str = ""
    presets: tuple[str, ...] | None = None
    variants: tuple[str, ...] | None = None
    built_in_styles: tuple[str, ...] | None = None
    haptic_styles: tuple[str, ...] | None = None

    @property
    def short_name(self) -> str:
        """Name without the luba prefix, e.g. ``Pressable``."""
        return self.name.replace("luba", "", 1)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Optional enumerations are only present when the primitive defines them.
        """
        result: dict[str, Any] = {
            "name": self.name,
            "modifier": self.modifier,
            "description": self.description,
            "parameters": [p.to_dict() for p in self.parameters],
            "example": self.example,
            "tokens": list(self.tokens),
            "composability": self.composability,
        }
        optional = {
            "presets": self.presets,
            "variants": self.variants,
            "builtInStyles": self.built_in_styles,
            "hapticStyles": self.haptic_styles,
        }
        for key, values in optional.items():
            if values is not None:
                result[key] = list(values)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PrimitiveSpec":
        """Create from dictionary."""

        def _optional(key: str) -> tuple[str, ...] | None:
            values = data.get(key)
            return tuple(values) if values is not None else None

        return cls(
            name=data["name"],
            modifier=data["modifier"],
            description=data.get("description", ""),
            parameters=tuple(
                ParameterSpec.from_dict(p) for p in data.get("parameters", [])
            ),
            example=data.get("example", ""),
            tokens=tuple(data.get("tokens", [])),
            composability=data.get("composability", ""),
            presets=_optional("presets"),
            variants=_optional("variants"),
            built_in_styles=_optional("builtInStyles"),
            haptic_styles=_optional("hapticStyles"),
        )

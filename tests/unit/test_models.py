"""Tests for catalog data models."""

import pytest

from luba_catalog.models import (
    CatalogEntry,
    ColorEntry,
    ColorMode,
    ComponentSpec,
    ParameterSpec,
    PrimitiveSpec,
)


class TestCatalogEntry:
    """Tests for CatalogEntry."""

    def test_requires_alias(self):
        """Test entries without aliases are rejected."""
        with pytest.raises(ValueError):
            CatalogEntry(name="lg", aliases=(), category="spacing")

    def test_to_dict_copies_payload(self):
        """Test callers cannot mutate the stored payload."""
        entry = CatalogEntry("lg", ("LubaSpacing.lg",), "spacing", payload={"value": 16})
        entry.to_dict()["value"] = 0
        assert entry.payload["value"] == 16

    def test_to_dict_copies_nested_values(self):
        """Test nested payload values are copied too."""
        entry = CatalogEntry(
            "spring", ("LubaAnimations.spring",), "motion", payload={"value": {"response": 0.3}}
        )
        entry.to_dict()["value"]["response"] = 9
        assert entry.payload["value"]["response"] == 0.3


class TestColorEntry:
    """Tests for ColorEntry."""

    def test_hex_for_mode(self):
        """Test per-mode hex lookup."""
        entry = ColorEntry.from_dict(
            {"name": "accent", "api": "LubaColors.accent", "light": "#5F7360"}, "accent"
        )
        assert entry.hex_for(ColorMode.LIGHT) == "#5F7360"
        assert entry.hex_for(ColorMode.DARK) is None
        assert entry.group == "accent"


class TestSpecs:
    """Tests for component and primitive specs."""

    def test_parameter_optional_keys(self):
        """Test optional parameter keys appear only when set."""
        minimal = ParameterSpec.from_dict({"name": "title", "type": "String"})
        assert minimal.to_dict() == {"name": "title", "type": "String", "description": ""}
        full = ParameterSpec.from_dict(
            {"name": "style", "type": "Style", "default": ".primary", "options": [".primary"]}
        )
        assert full.to_dict()["options"] == [".primary"]

    def test_component_short_name(self):
        """Test the Luba prefix is stripped once."""
        assert ComponentSpec("LubaButton", "Button").short_name == "Button"

    def test_primitive_camel_case_keys(self):
        """Test optional enumerations serialize with catalog keys."""
        spec = PrimitiveSpec.from_dict(
            {
                "name": "lubaPressable",
                "modifier": ".lubaPressable()",
                "description": "Press feedback.",
                "builtInStyles": ["LubaPrimaryStyle"],
            }
        )
        data = spec.to_dict()
        assert data["builtInStyles"] == ["LubaPrimaryStyle"]
        assert "presets" not in data
        assert spec.short_name == "Pressable"

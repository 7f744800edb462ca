"""Tests for catalog loading and lookups."""

import dataclasses

import pytest

from luba_catalog.errors import CatalogLoadError
from luba_catalog.store import CatalogStore


class TestLoad:
    """Tests for CatalogStore.load."""

    def test_packaged_catalog(self, store):
        """Test the packaged catalog loads in full."""
        assert len(store.components) == 27
        assert len(store.primitives) == 6
        assert len(store.typography) == 15
        assert [s.name for s in store.spacing.steps][:3] == ["xs", "sm", "md"]
        assert store.radius.sentinel == 9999

    def test_custom_directory(self, data_dir):
        """Test loading from an explicit directory."""
        loaded = CatalogStore.load(data_dir)
        assert [s.api for s in loaded.spacing.steps] == ["LubaSpacing.sm", "LubaSpacing.lg"]
        assert loaded.components == ()

    def test_missing_file(self, data_dir):
        """Test a missing catalog file raises CatalogLoadError."""
        (data_dir / "primitives.json").unlink()
        with pytest.raises(CatalogLoadError) as exc_info:
            CatalogStore.load(data_dir)
        assert "primitives.json" in exc_info.value.message

    def test_invalid_json(self, data_dir):
        """Test malformed JSON raises CatalogLoadError."""
        (data_dir / "tokens.json").write_text("{not json")
        with pytest.raises(CatalogLoadError):
            CatalogStore.load(data_dir)


class TestFromData:
    """Tests for CatalogStore.from_data."""

    def test_missing_section(self, mini_tokens):
        """Test a missing required section raises."""
        del mini_tokens["typography"]
        with pytest.raises(CatalogLoadError) as exc_info:
            CatalogStore.from_data(mini_tokens, [], [])
        assert "typography" in exc_info.value.message

    def test_non_ascending_scale(self, mini_tokens):
        """Test scales out of order are rejected."""
        mini_tokens["spacing"]["tokens"].reverse()
        with pytest.raises(CatalogLoadError):
            CatalogStore.from_data(mini_tokens, [], [])

    def test_empty_scale(self, mini_tokens):
        """Test a scale without steps is rejected."""
        mini_tokens["spacing"]["tokens"] = []
        with pytest.raises(CatalogLoadError):
            CatalogStore.from_data(mini_tokens, [], [])

    def test_component_without_name(self, mini_tokens):
        """Test malformed component records are rejected."""
        with pytest.raises(CatalogLoadError):
            CatalogStore.from_data(mini_tokens, [{"description": "nameless"}], [])

    def test_frozen(self, mini_store):
        """Test the store cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            mini_store.components = ()


class TestLookups:
    """Tests for store lookup helpers."""

    @pytest.mark.parametrize("name", ["LubaButton", "Button", "lubabutton"])
    def test_find_component(self, store, name):
        """Test component resolution with and without prefix."""
        assert store.find_component(name).name == "LubaButton"

    def test_find_component_missing(self, store):
        """Test unknown components resolve to None."""
        assert store.find_component("Carousel") is None

    @pytest.mark.parametrize(
        "reference", ["lubaGlass for frosted effect", "Pressable", "swipeable", "lubaexpandable"]
    )
    def test_find_primitive(self, store, reference):
        """Test primitive resolution from names and phrases."""
        assert store.find_primitive(reference) is not None

    def test_find_primitive_blank(self, store):
        """Test a blank reference resolves to None."""
        assert store.find_primitive("  ") is None

    def test_migration_colors_exclude_glass(self, store):
        """Test glass edges are not migration targets."""
        assert all(c.group != "glass" for c in store.migration_colors)
        assert any(c.group == "glass" for c in store.colors)

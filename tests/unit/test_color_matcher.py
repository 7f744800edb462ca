"""Tests for hex parsing and nearest-color matching."""

import pytest

from luba_catalog.errors import EmptyCatalogError, InvalidColorError, MalformedInputError
from luba_catalog.matching import color_distance, match_color, parse_hex
from luba_catalog.models import ColorEntry, ColorMode


class TestParseHex:
    """Tests for parse_hex."""

    def test_with_and_without_hash(self):
        """Test both #RRGGBB and RRGGBB forms."""
        assert parse_hex("#5F7360") == (0x5F, 0x73, 0x60)
        assert parse_hex("5f7360") == (0x5F, 0x73, 0x60)

    def test_surrounding_whitespace(self):
        """Test that whitespace around the value is ignored."""
        assert parse_hex("  #FFFFFF ") == (255, 255, 255)

    @pytest.mark.parametrize("value", ["#FFF", "#GGGGGG", "#12345678", "", None, 0x5F7360])
    def test_invalid(self, value):
        """Test malformed values raise InvalidColorError."""
        with pytest.raises(InvalidColorError):
            parse_hex(value)

    def test_invalid_is_malformed_input(self):
        """Test color errors belong to the malformed input category."""
        with pytest.raises(MalformedInputError) as exc_info:
            parse_hex("red")
        assert exc_info.value.exit_code == 2


class TestColorDistance:
    """Tests for the weighted distance."""

    def test_identical_is_zero(self):
        """Test distance to itself is zero."""
        assert color_distance((10, 20, 30), (10, 20, 30)) == 0

    @pytest.mark.parametrize(
        "a,b",
        [((0, 0, 0), (255, 255, 255)), ((95, 115, 96), (167, 139, 250)), ((1, 0, 0), (0, 0, 0))],
    )
    def test_symmetric_and_positive(self, a, b):
        """Test symmetry and positivity for distinct colors."""
        assert color_distance(a, b) == color_distance(b, a)
        assert color_distance(a, b) > 0

    def test_green_weighted_highest(self):
        """Test a green shift costs more than the same red or blue shift."""
        base = (100, 100, 100)
        green = color_distance(base, (100, 110, 100))
        red = color_distance(base, (110, 100, 100))
        blue = color_distance(base, (100, 100, 110))
        assert green > blue > red


class TestMatchColor:
    """Tests for match_color against the catalog."""

    def test_accent_exact(self, store):
        """Test the sage accent resolves to LubaColors.accent, not its alias."""
        match = match_color("#5F7360", "light", store.colors)
        assert match.exact is not None
        assert match.exact.entry.api == "LubaColors.accent"
        assert match.exact.distance == 0

    def test_alias_is_runner_up(self, store):
        """Test the aliasing border token ties and follows in catalog order."""
        match = match_color("#5F7360", ColorMode.LIGHT, store.colors)
        assert match.candidates[1].entry.api == "LubaColors.borderFocused"
        assert match.candidates[1].distance == 0

    def test_nearest_without_exact(self, store):
        """Test a color absent from the palette has no exact match."""
        match = match_color("#A78BFA", "light", store.colors)
        assert match.exact is None
        assert match.nearest is not None
        distances = [c.distance for c in match.candidates]
        assert distances == sorted(distances)
        assert len(match.candidates) <= 3

    def test_dark_mode_only_entry(self, store):
        """Test entries defined only for dark mode match in dark mode."""
        match = match_color("#8C8C8C", "dark", store.colors)
        assert match.exact.entry.api == "LubaGlassTokens.borderLuminanceDark"

    def test_entries_without_mode_skipped(self):
        """Test that colors with no hex for the mode never appear."""
        catalog = [
            ColorEntry("lightOnly", "T.lightOnly", light="#000000"),
            ColorEntry("both", "T.both", light="#FFFFFF", dark="#FFFFFF"),
        ]
        match = match_color("#000000", "dark", catalog)
        assert [c.entry.api for c in match.candidates] == ["T.both"]

    def test_empty_catalog_raises(self):
        """Test an empty catalog is a failure, not an empty match."""
        with pytest.raises(EmptyCatalogError):
            match_color("#5F7360", "light", [])

    def test_malformed_catalog_entry_skipped(self):
        """Test a broken catalog hex does not break matching."""
        catalog = [
            ColorEntry("broken", "T.broken", light="not-a-color"),
            ColorEntry("ok", "T.ok", light="#010101"),
        ]
        match = match_color("#000000", "light", catalog)
        assert [c.entry.api for c in match.candidates] == ["T.ok"]

    def test_limit(self, store):
        """Test candidate count honors the limit."""
        match = match_color("#808080", "light", store.colors, limit=5)
        assert len(match.candidates) == 5

    def test_invalid_mode(self, store):
        """Test unknown modes are malformed input."""
        with pytest.raises(MalformedInputError):
            match_color("#000000", "sepia", store.colors)

    def test_invalid_query(self, store):
        """Test malformed query hex raises."""
        with pytest.raises(InvalidColorError):
            match_color("#12", "light", store.colors)

    def test_to_dict_rounds_distance(self, store):
        """Test serialized candidates carry rounded integer distances."""
        data = match_color("#A78BFA", "light", store.colors).to_dict()
        assert data["mode"] == "light"
        assert data["exact"] is None
        assert all(isinstance(c["distance"], int) for c in data["alternatives"])

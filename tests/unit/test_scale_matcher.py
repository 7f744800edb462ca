"""Tests for scale matching and grid checks."""

import math

import pytest

from luba_catalog.errors import EmptyCatalogError, InvalidNumberError, MalformedInputError
from luba_catalog.matching import ensure_number, format_number, match_scale, on_grid
from luba_catalog.models import Scale, ScaleStep


def _scale(*values, sentinel=None):
    steps = tuple(ScaleStep(f"s{v}", f"Test.s{v}", v) for v in values)
    return Scale("test", steps, sentinel=sentinel)


class TestOnGrid:
    """Tests for the grid check."""

    def test_examples(self):
        """Test the canonical 4pt examples."""
        assert on_grid(20, 4) is True
        assert on_grid(18, 4) is False

    @pytest.mark.parametrize("value", [0, 4, 64, -8, 12.0])
    def test_multiples(self, value):
        """Test that multiples of the base unit are on grid."""
        assert on_grid(value, 4)

    def test_fractional(self):
        """Test fractional values are off grid."""
        assert not on_grid(2.5, 4)

    def test_non_positive_base_unit(self):
        """Test that a zero base unit is rejected."""
        with pytest.raises(MalformedInputError):
            on_grid(8, 0)


class TestEnsureNumber:
    """Tests for numeric input validation."""

    @pytest.mark.parametrize("value", ["16", None, True, [16], math.nan, math.inf])
    def test_rejects(self, value):
        """Test that non-finite and non-numeric values are rejected."""
        with pytest.raises(InvalidNumberError):
            ensure_number(value)

    def test_accepts_int_and_float(self):
        """Test plain numbers pass through."""
        assert ensure_number(16) == 16
        assert ensure_number(2.5) == 2.5

    def test_format_number(self):
        """Test integral floats render without a decimal point."""
        assert format_number(16.0) == "16"
        assert format_number(2.5) == "2.5"
        assert format_number(-4) == "-4"


class TestMatchScale:
    """Tests for match_scale against spacing and radius."""

    def test_every_step_matches_itself(self, store):
        """Test that each step value is an exact hit and its own nearest."""
        for scale in (store.spacing, store.radius):
            for step in scale.steps:
                match = match_scale(step.value, scale)
                assert match.exact == step
                assert match.nearest == match.exact

    @pytest.mark.parametrize("value", [-10, 0, 2, 5, 18, 20, 30, 63, 100, 500])
    def test_bracket_contains_value(self, store, value):
        """Test below <= value <= above whenever both exist."""
        match = match_scale(value, store.spacing)
        if match.below is not None and match.above is not None:
            assert match.below.value <= value <= match.above.value

    def test_off_grid_value(self, store):
        """Test 18 is off grid and nearest to lg."""
        match = match_scale(18, store.spacing)
        assert match.exact is None
        assert match.on_grid is False
        assert match.nearest.api == "LubaSpacing.lg"
        assert match.below.api == "LubaSpacing.lg"
        assert match.above.api == "LubaSpacing.xl"
        assert match.delta == 2

    def test_tie_goes_to_lower_step(self, store):
        """Test a value halfway between two steps picks the lower one."""
        match = match_scale(20, store.spacing)
        assert match.on_grid is True
        assert match.nearest.api == "LubaSpacing.lg"

    def test_below_smallest_step(self, store):
        """Test values under the scale have no lower bracket."""
        match = match_scale(-5, store.spacing)
        assert match.below is None
        assert match.above.api == "LubaSpacing.xs"
        assert match.nearest.api == "LubaSpacing.xs"

    def test_sentinel_exact(self, store):
        """Test the pill radius sentinel matches exactly."""
        match = match_scale(9999, store.radius)
        assert match.exact.api == "LubaRadius.full"
        assert match.nearest.api == "LubaRadius.full"

    def test_sentinel_never_nearest(self, store):
        """Test large radii snap to xl rather than the sentinel."""
        match = match_scale(5000, store.radius)
        assert match.exact is None
        assert match.nearest.api == "LubaRadius.xl"
        assert match.above is None

    def test_only_sentinel_is_empty(self):
        """Test a scale of only a sentinel has nothing to match."""
        with pytest.raises(EmptyCatalogError):
            match_scale(4, _scale(9999, sentinel=9999))

    def test_rejects_non_numbers(self, store):
        """Test malformed values raise before matching."""
        with pytest.raises(InvalidNumberError):
            match_scale("16", store.spacing)

    def test_to_dict(self):
        """Test serialized form uses camelCase."""
        data = match_scale(6, _scale(4, 8)).to_dict()
        assert data["onGrid"] is False
        assert data["exact"] is None
        assert data["nearest"]["api"] == "Test.s4"


class TestScaleModel:
    """Tests for Scale construction."""

    def test_rejects_descending(self):
        """Test that scales must be strictly ascending."""
        with pytest.raises(ValueError):
            _scale(8, 4)

    def test_rejects_duplicates(self):
        """Test duplicate values are rejected."""
        with pytest.raises(ValueError):
            _scale(4, 4)

    def test_measurable_steps_exclude_sentinel(self, store):
        """Test full is not a measurable radius."""
        apis = [s.api for s in store.radius.measurable_steps]
        assert "LubaRadius.full" not in apis
        assert len(apis) == len(store.radius.steps) - 1

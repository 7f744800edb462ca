"""Nearest-step matching on ordinal scales such as spacing and radius."""

import math
from dataclasses import dataclass
from typing import Any

from ..catalog_logging import LogCategory, get_category_logger
from ..errors import EmptyCatalogError, InvalidNumberError, MalformedInputError
from ..models import Scale, ScaleStep

logger = get_category_logger(LogCategory.MATCHING)


def ensure_number(value: Any, field_name: str = "value") -> float:
    """Accept ints and finite floats; reject bools, strings, NaN and infinity."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidNumberError(value, field_name)
    if not math.isfinite(value):
        raise InvalidNumberError(value, field_name)
    return value


def format_number(value: float) -> str:
    """Render 16.0 as "16" and 2.5 as "2.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def on_grid(value: float, base_unit: float) -> bool:
    """True when value is an integer multiple of base_unit.

    >>> on_grid(20, 4), on_grid(18, 4)
    (True, False)
    """
    if base_unit <= 0:
        raise MalformedInputError(
            f"Grid base unit must be positive, got {base_unit!r}",
            details={"base_unit": base_unit},
        )
    return value % base_unit == 0


@dataclass(frozen=True)
class ScaleMatch:
    """Result of matching a value against a scale.

    Attributes:
        value: The queried value.
        exact: Step whose value equals the query, if any.
        nearest: Closest measurable step (the exact step when there is one).
        below: Greatest step at or under the value.
        above: Least step at or over the value.
        on_grid: Whether the value is a multiple of the scale's base unit.
    """

    value: float
    exact: ScaleStep | None
    nearest: ScaleStep
    below: ScaleStep | None
    above: ScaleStep | None
    on_grid: bool

    @property
    def delta(self) -> float:
        """Signed distance from the nearest step to the value."""
        return self.value - self.nearest.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "value": self.value,
            "exact": self.exact.to_dict() if self.exact else None,
            "nearest": self.nearest.to_dict(),
            "below": self.below.to_dict() if self.below else None,
            "above": self.above.to_dict() if self.above else None,
            "onGrid": self.on_grid,
        }


def match_scale(value: float, scale: Scale) -> ScaleMatch:
    """Find the exact or nearest step for a value.

    Ties between two equidistant steps go to the lower step. The sentinel
    step can be an exact hit but is never nearest, below or above for any
    other value.

    Raises:
        InvalidNumberError: If value is not a finite number.
        EmptyCatalogError: If the scale has no measurable steps.
    """
    value = ensure_number(value)
    measurable = scale.measurable_steps
    if not measurable:
        raise EmptyCatalogError(scale.name)

    exact = next((s for s in scale.steps if s.value == value), None)

    if exact is not None:
        nearest = exact
    else:
        nearest = measurable[0]
        best = abs(value - nearest.value)
        for step in measurable[1:]:
            distance = abs(value - step.value)
            # strict comparison keeps the lower step on ties
            if distance < best:
                nearest, best = step, distance

    bracket = list(measurable)
    if exact is not None and scale.is_sentinel(exact):
        bracket.append(exact)
    below = next((s for s in reversed(bracket) if s.value <= value), None)
    above = next((s for s in bracket if s.value >= value), None)

    match = ScaleMatch(
        value=value,
        exact=exact,
        nearest=nearest,
        below=below,
        above=above,
        on_grid=on_grid(value, scale.base_unit),
    )
    logger.debug(
        f"{scale.name} {value}: exact={exact.api if exact else None} "
        f"nearest={nearest.api}"
    )
    return match

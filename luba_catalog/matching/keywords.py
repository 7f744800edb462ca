"""Substring keyword matching of free-text descriptions to catalog names."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

DEFAULT_LIMIT = 3
HIGH_CONFIDENCE_HITS = 2


@dataclass(frozen=True)
class KeywordRule:
    """Catalog name and the phrases that suggest it."""

    target: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class KeywordMatch:
    target: str
    matched_keywords: tuple[str, ...]

    @property
    def score(self) -> int:
        return len(self.matched_keywords)

    @property
    def confidence(self) -> str:
        return "high" if self.score >= HIGH_CONFIDENCE_HITS else "medium"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "target": self.target,
            "confidence": self.confidence,
            "matchedKeywords": list(self.matched_keywords),
        }


def _rules(table: dict[str, list[str]]) -> tuple[KeywordRule, ...]:
    return tuple(KeywordRule(name, tuple(words)) for name, words in table.items())


COMPONENT_KEYWORDS = _rules(
    {
        "LubaButton": ["button", "action", "submit", "cta", "tap"],
        "LubaCard": ["card", "container", "panel", "box", "section", "hero", "tile"],
        "LubaTextField": ["input", "field", "text field", "text input", "url", "email"],
        "LubaTextArea": ["textarea", "multiline", "text area", "comment", "notes"],
        "LubaSearchBar": ["search", "search bar", "filter"],
        "LubaCheckbox": ["checkbox", "check", "checkmark"],
        "LubaRadio": ["radio", "option", "select one"],
        "LubaToggle": ["toggle", "switch", "on off"],
        "LubaSlider": ["slider", "range", "volume"],
        "LubaStepper": ["stepper", "increment", "decrement", "quantity"],
        "LubaRating": ["rating", "star", "stars", "review"],
        "LubaTabs": ["tab", "tabs", "segment", "segmented", "picker"],
        "LubaToast": ["toast", "snackbar", "notification", "flash"],
        "LubaAlert": ["alert", "banner", "warning", "error message", "info", "notice"],
        "LubaProgressBar": ["progress", "progress bar", "loading bar"],
        "LubaCircularProgress": ["circular progress", "ring", "progress ring"],
        "LubaSpinner": ["spinner", "loading", "activity indicator"],
        "LubaSkeleton": ["skeleton", "placeholder", "shimmer", "loading placeholder"],
        "LubaSheet": ["sheet", "bottom sheet", "modal", "drawer"],
        "LubaAvatar": ["avatar", "profile image", "user image", "initials"],
        "LubaBadge": ["badge", "label", "tag", "status", "verdict", "pill", "indicator"],
        "LubaDivider": ["divider", "separator", "line", "hr"],
        "LubaIcon": ["icon", "symbol", "sf symbol"],
        "LubaChip": ["chip", "tag", "filter chip", "hashtag"],
        "LubaMenu": ["menu", "dropdown", "context menu", "popover menu"],
        "LubaTooltip": ["tooltip", "hint", "help text", "info popup"],
        "LubaLink": ["link", "hyperlink", "url link", "text link"],
    }
)

PRIMITIVE_KEYWORDS = _rules(
    {
        "lubaPressable": [
            "pressable",
            "tappable",
            "tap",
            "press",
            "scale button",
            "bounce button",
            "button style",
        ],
        "lubaExpandable": [
            "expandable",
            "collapsible",
            "expand",
            "collapse",
            "accordion",
            "disclosure",
        ],
        "lubaSwipeable": ["swipeable", "swipe", "swipe to delete", "swipe action"],
        "lubaShimmerable": ["shimmer", "loading effect", "shimmer effect"],
        "lubaLongPressable": ["long press", "hold", "press and hold"],
        "lubaGlass": [
            "glass",
            "frosted",
            "blur",
            "material",
            "translucent",
            "transparent",
            "vibrancy",
        ],
    }
)


def match_keywords(
    description: str,
    rules: Sequence[KeywordRule],
    limit: int = DEFAULT_LIMIT,
) -> list[KeywordMatch]:
    """Rank rules by how many of their keywords occur in the description.

    Matching is a plain substring test on the lowercased description.
    Equal scores keep table order.
    """
    lower = description.lower()
    matches = []
    for rule in rules:
        hits = tuple(k for k in rule.keywords if k in lower)
        if hits:
            matches.append(KeywordMatch(rule.target, hits))
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches[:limit]

"""Structured error types for catalog queries with recovery suggestions.

Every tool operation converts these into a failure payload at its
boundary; the CLI renders them with ``format`` and exits with
``exit_code``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Categories of catalog errors for organization and handling."""

    MALFORMED_INPUT = "malformed_input"  # Unparsable hex, non-numeric values
    CATALOG = "catalog"  # Empty or broken catalog data
    CONFIGURATION = "configuration"  # Invalid config file or env values
    RUNTIME = "runtime"  # Unexpected errors


@dataclass
class CatalogError(Exception):
    """Base class for structured catalog errors with recovery suggestions.

    Attributes:
        category: Error category for grouping.
        message: Human-readable error message.
        suggestion: Optional actionable recovery suggestion.
        details: Optional additional details dict.
        exit_code: Exit code to use when this error causes termination.
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = field(default_factory=dict)
    exit_code: int = 1

    def __post_init__(self) -> None:
        """Initialize the exception with the message."""
        super().__init__(self.message)

    def format(self, use_color: bool = True) -> str:
        """Format the error for display.

        Args:
            use_color: Whether to include ANSI color codes.

        Returns:
            Formatted error string with suggestion if available.
        """
        red = "\033[91m" if use_color else ""
        cyan = "\033[96m" if use_color else ""
        dim = "\033[2m" if use_color else ""
        reset = "\033[0m" if use_color else ""

        lines = [f"{red}Error:{reset} {self.message}"]

        if self.suggestion:
            lines.append(f"{cyan}Suggestion:{reset} {self.suggestion}")

        if self.details:
            for key, value in self.details.items():
                lines.append(f"{dim}  {key}: {value}{reset}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for a tool failure payload."""
        return {
            "category": self.category.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": dict(self.details or {}),
        }

    def __str__(self) -> str:
        """Return the formatted error message."""
        return self.format(use_color=False)


class MalformedInputError(CatalogError):
    """Input that does not fit the operation's contract."""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            category=ErrorCategory.MALFORMED_INPUT,
            message=message,
            suggestion=suggestion or "Check the parameter types with --help",
            details=details,
            exit_code=2,
        )


class InvalidColorError(MalformedInputError):
    """Hex color that cannot be parsed into an RGB triple."""

    def __init__(self, value: Any):
        super().__init__(
            message=f"Invalid hex color: {value!r}",
            suggestion="Use a 6-digit hex color such as #5F7360 or 5F7360",
            details={"value": value if isinstance(value, str) else repr(value)},
        )
        self.value = value


class InvalidNumberError(MalformedInputError):
    """Value that should be a finite number but is not."""

    def __init__(self, value: Any, field_name: str = "value"):
        super().__init__(
            message=f"{field_name} must be a finite number, got {value!r}",
            suggestion="Pass a plain number in points, e.g. 16",
            details={"field": field_name, "value": repr(value)},
        )
        self.value = value


class EmptyCatalogError(CatalogError):
    """Operation invoked against a catalog section with no entries."""

    def __init__(self, section: str):
        super().__init__(
            category=ErrorCategory.CATALOG,
            message=f"Catalog section is empty: {section}",
            suggestion="Check the catalog data directory contains the full token set",
            details={"section": section},
            exit_code=1,
        )


class CatalogLoadError(CatalogError):
    """Catalog data that is missing or does not have the expected shape."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        suggestion: str | None = None,
    ):
        default_suggestion = (
            "Check the data directory holds tokens.json, components.json "
            "and primitives.json"
        )
        super().__init__(
            category=ErrorCategory.CATALOG,
            message=message,
            suggestion=suggestion or default_suggestion,
            details={"path": path} if path else None,
            exit_code=1,
        )


class ConfigurationError(CatalogError):
    """Error in configuration file or settings."""

    def __init__(
        self,
        message: str,
        config_file: str | None = None,
        suggestion: str | None = None,
    ):
        default_suggestion = (
            "Check your configuration file syntax and LUBAUI_* environment variables"
        )
        super().__init__(
            category=ErrorCategory.CONFIGURATION,
            message=message,
            suggestion=suggestion or default_suggestion,
            details={"config_file": config_file} if config_file else None,
            exit_code=1,
        )


def handle_exception(
    error: Exception,
    use_color: bool = True,
    verbose: bool = False,
) -> tuple[str, int]:
    """Convert any exception to formatted output and exit code.

    Args:
        error: The exception to handle.
        use_color: Whether to use color in output.
        verbose: Whether to include full traceback.

    Returns:
        Tuple of (formatted_message, exit_code).
    """
    import traceback

    if isinstance(error, CatalogError):
        message = error.format(use_color=use_color)
        exit_code = error.exit_code
    else:
        red = "\033[91m" if use_color else ""
        reset = "\033[0m" if use_color else ""
        message = f"{red}Error:{reset} {str(error)}"
        exit_code = 1

    if verbose:
        message += "\n\nTraceback:\n" + traceback.format_exc()

    return message, exit_code

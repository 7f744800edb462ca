"""Output handling for the CLI with color and quiet mode support.

Payloads go to stdout as JSON so they can be piped; status lines and
errors go to stderr. Respects the NO_COLOR convention: https://no-color.org/
"""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

import click


def should_use_color(
    explicit_flag: bool | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Determine if color output should be used.

    Priority order:
    1. Explicit flag (if passed)
    2. NO_COLOR, then FORCE_COLOR environment variables
    3. TTY detection

    Args:
        explicit_flag: True forces colors, False disables them, None auto-detects.
        stream: Stream to check for TTY. Defaults to stderr.
    """
    if explicit_flag is not None:
        return explicit_flag

    # Any value, including empty, means "no color"
    if "NO_COLOR" in os.environ:
        return False

    if "FORCE_COLOR" in os.environ:
        return True

    if stream is None:
        stream = sys.stderr
    if hasattr(stream, "isatty") and not stream.isatty():
        return False

    return True


@dataclass
class OutputConfig:
    """Configuration for CLI output behavior.

    Attributes:
        use_color: Whether to use ANSI color codes on stderr.
        quiet: Suppress status lines; payloads and errors still print.
        verbose: Include tracebacks with errors.
        indent: JSON indentation for payloads.
    """

    use_color: bool = True
    quiet: bool = False
    verbose: bool = False
    indent: int = 2
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    err_stream: TextIO = field(default_factory=lambda: sys.stderr)

    @classmethod
    def from_flags(
        cls,
        verbose: bool = False,
        quiet: bool = False,
        no_color: bool = False,
    ) -> OutputConfig:
        """Create OutputConfig from CLI flags."""
        use_color = should_use_color(explicit_flag=False if no_color else None)
        return cls(use_color=use_color, quiet=quiet, verbose=verbose)


class OutputManager:
    """Writes tool payloads, status lines and errors for CLI commands."""

    SYMBOLS = {
        "success": {"color": "\033[92m✓\033[0m", "plain": "[OK]"},
        "warning": {"color": "\033[93m⚠\033[0m", "plain": "[WARN]"},
    }

    def __init__(self, config: OutputConfig | None = None):
        self.config = config or OutputConfig()

    def _symbol(self, name: str) -> str:
        variant = "color" if self.config.use_color else "plain"
        return self.SYMBOLS[name][variant]

    def payload(self, data: Any) -> None:
        """Print a JSON payload to stdout."""
        click.echo(json.dumps(data, indent=self.config.indent), file=self.config.stream)

    def status(self, message: str, ok: bool = True) -> None:
        """Print a one-line status to stderr unless quiet."""
        if self.config.quiet:
            return
        symbol = self._symbol("success" if ok else "warning")
        click.echo(f"{symbol} {message}", file=self.config.err_stream)

    def error(self, message: str) -> None:
        """Print a preformatted error to stderr, even in quiet mode."""
        click.echo(message, file=self.config.err_stream)

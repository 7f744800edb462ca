"""Tests for the declared package metadata."""

import tomllib
from pathlib import Path

from luba_catalog import __version__

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _project() -> dict:
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


class TestDependencies:
    """Tests for dependency declarations."""

    def test_mcp_stays_on_fastmcp_major(self):
        """Test mcp is capped below 2, which no longer ships mcp.server.fastmcp."""
        mcp = next(d for d in _project()["dependencies"] if d.startswith("mcp"))
        assert "<2" in mcp.replace(" ", "")

    def test_version_matches_package(self):
        """Test the distribution version matches the import package."""
        assert _project()["version"] == __version__

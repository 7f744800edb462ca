"""
Shared fixtures for the LubaUI catalog test suite.

Provides test fixtures for:
- The packaged catalog store
- A small in-memory catalog for edge cases
- Configuration with isolated environment
"""

import json
from pathlib import Path
from typing import Any

import pytest

from luba_catalog.config import ENV_PREFIX, CatalogConfig
from luba_catalog.store import CatalogStore


@pytest.fixture(scope="session")
def store() -> CatalogStore:
    """The catalog shipped with the package, loaded once per session."""
    return CatalogStore.load()


@pytest.fixture()
def mini_tokens() -> dict[str, Any]:
    """A minimal token document with every required section."""
    return {
        "spacing": {
            "baseUnit": 4,
            "customApi": "LubaSpacing.custom",
            "tokens": [
                {"name": "sm", "api": "LubaSpacing.sm", "value": 8, "tier": 2},
                {"name": "lg", "api": "LubaSpacing.lg", "value": 16, "tier": 2},
            ],
        },
        "radius": {
            "baseUnit": 4,
            "sentinel": 9999,
            "tokens": [
                {"name": "none", "api": "LubaRadius.none", "value": 0, "tier": 2},
                {"name": "md", "api": "LubaRadius.md", "value": 12, "tier": 2},
                {"name": "full", "api": "LubaRadius.full", "value": 9999, "tier": 2},
            ],
        },
        "colors": {
            "description": "Test palette",
            "accent": [
                {
                    "name": "accent",
                    "api": "LubaColors.accent",
                    "light": "#5F7360",
                    "dark": "#9AB897",
                    "tier": 2,
                    "description": "Sage accent.",
                }
            ],
        },
        "typography": {
            "tokens": [
                {"name": "body", "api": "LubaTypography.body", "size": 16, "weight": "regular"},
            ]
        },
    }


@pytest.fixture()
def mini_store(mini_tokens: dict[str, Any]) -> CatalogStore:
    """Store built from the minimal token document, with one component."""
    components = [
        {
            "name": "LubaButton",
            "description": "Primary action button.",
            "parameters": [{"name": "title", "type": "String", "required": True}],
            "example": 'LubaButton("Save") { }',
        }
    ]
    primitives = [
        {
            "name": "lubaPressable",
            "modifier": ".lubaPressable()",
            "description": "Press feedback for any view.",
        }
    ]
    return CatalogStore.from_data(mini_tokens, components, primitives)


@pytest.fixture()
def data_dir(tmp_path: Path, mini_tokens: dict[str, Any]) -> Path:
    """A catalog data directory holding the minimal documents."""
    (tmp_path / "tokens.json").write_text(json.dumps(mini_tokens))
    (tmp_path / "components.json").write_text("[]")
    (tmp_path / "primitives.json").write_text("[]")
    return tmp_path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LUBAUI_* variables so tests never see the host's settings."""
    for name in CatalogConfig.model_fields:
        monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture()
def config() -> CatalogConfig:
    """Default configuration."""
    return CatalogConfig()

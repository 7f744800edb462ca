"""Configuration model and loader for the catalog engine."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from .catalog_logging import get_logger
from .errors import ConfigurationError

logger = get_logger()

ENV_PREFIX = "LUBAUI_"


class CatalogConfig(BaseModel):
    """Runtime configuration with validation."""

    # Catalog source; None means the packaged data
    data_dir: Path | None = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")
    log_file: Path | None = Field(default=None)

    # Server
    server_name: str = Field(default="lubaui")

    # Result limits per tool
    max_token_results: int = Field(default=8, ge=1, le=100)
    max_component_results: int = Field(default=3, ge=1, le=50)
    max_primitive_results: int = Field(default=3, ge=1, le=50)
    max_color_results: int = Field(default=10, ge=1, le=100)
    max_suggested_components: int = Field(default=5, ge=1, le=50)
    max_suggested_primitives: int = Field(default=3, ge=1, le=50)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in {"text", "json"}:
            raise ValueError("log_format must be 'text' or 'json'")
        return v


class ConfigLoader:
    """Configuration loader merging file, environment and explicit overrides."""

    def __init__(self, config_file: Path | None = None):
        self.config_file = Path(config_file) if config_file else None

    def load(self, **overrides: Any) -> CatalogConfig:
        """Load configuration from all sources.

        Precedence (highest to lowest):
        1. Explicit overrides
        2. Environment variables (LUBAUI_*)
        3. JSON config file
        4. Defaults
        """
        config_dict: dict[str, Any] = {}

        if self.config_file is not None:
            file_settings = self._read_config_file(self.config_file)
            config_dict.update(file_settings)
            logger.debug(
                f"Loaded {len(file_settings)} settings from {self.config_file}"
            )

        env_settings = self._read_environment()
        config_dict.update(env_settings)
        if env_settings:
            logger.debug(f"Applied {len(env_settings)} environment variables")

        explicit = {k: v for k, v in overrides.items() if v is not None}
        config_dict.update(explicit)
        if explicit:
            logger.debug(f"Applied {len(explicit)} explicit overrides")

        try:
            return CatalogConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.errors()[0]['msg']}",
                config_file=str(self.config_file) if self.config_file else None,
            ) from e

    def _read_config_file(self, path: Path) -> dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(
                f"Config file not found: {path}", config_file=str(path)
            )
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Config file is not valid JSON: {e}", config_file=str(path)
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object", config_file=str(path)
            )
        return data

    def _read_environment(self) -> dict[str, Any]:
        settings = {}
        for name in CatalogConfig.model_fields:
            value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None:
                settings[name] = value
        return settings


def load_config(config_file: Path | None = None, **overrides: Any) -> CatalogConfig:
    """Load configuration from multiple sources with precedence.

    Args:
        config_file: Optional JSON config file.
        **overrides: Explicit configuration overrides. None values are ignored.

    Returns:
        Validated CatalogConfig instance.
    """
    return ConfigLoader(config_file).load(**overrides)

"""Tests for configuration loading and precedence."""

import json
from pathlib import Path

import pytest

from luba_catalog.config import CatalogConfig, ConfigLoader, load_config
from luba_catalog.errors import ConfigurationError


class TestCatalogConfig:
    """Tests for the configuration model."""

    def test_defaults(self):
        """Test default values."""
        config = CatalogConfig()
        assert config.data_dir is None
        assert config.log_level == "INFO"
        assert config.server_name == "lubaui"
        assert config.max_token_results == 8
        assert config.max_component_results == 3
        assert config.max_color_results == 10

    def test_log_level_normalized(self):
        """Test log levels are upper-cased."""
        assert CatalogConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("field,value", [("log_level", "LOUD"), ("log_format", "xml")])
    def test_invalid_values(self, field, value):
        """Test validators reject unknown values."""
        with pytest.raises(ValueError):
            CatalogConfig(**{field: value})


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_no_sources(self):
        """Test loading with nothing configured gives defaults."""
        assert load_config() == CatalogConfig()

    def test_file(self, tmp_path: Path):
        """Test values from a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"max_token_results": 6, "server_name": "luba-dev"}))
        config = load_config(path)
        assert config.max_token_results == 6
        assert config.server_name == "luba-dev"

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch):
        """Test LUBAUI_* variables win over the file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"max_token_results": 6}))
        monkeypatch.setenv("LUBAUI_MAX_TOKEN_RESULTS", "5")
        assert load_config(path).max_token_results == 5

    def test_overrides_win(self, tmp_path: Path, monkeypatch):
        """Test explicit overrides beat environment and file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"max_token_results": 6}))
        monkeypatch.setenv("LUBAUI_MAX_TOKEN_RESULTS", "5")
        assert load_config(path, max_token_results=4).max_token_results == 4

    def test_none_overrides_ignored(self, monkeypatch):
        """Test None overrides do not clobber lower layers."""
        monkeypatch.setenv("LUBAUI_LOG_FORMAT", "json")
        assert load_config(log_format=None).log_format == "json"

    def test_data_dir_from_environment(self, monkeypatch, tmp_path: Path):
        """Test paths from the environment become Path objects."""
        monkeypatch.setenv("LUBAUI_DATA_DIR", str(tmp_path))
        assert load_config().data_dir == tmp_path

    def test_missing_file(self, tmp_path: Path):
        """Test a missing config file raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ConfigLoader(tmp_path / "absent.json").load()

    def test_invalid_json(self, tmp_path: Path):
        """Test unparsable config raises ConfigurationError."""
        path = tmp_path / "config.json"
        path.write_text("{oops")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_object(self, tmp_path: Path):
        """Test a JSON array is not a valid config."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_invalid_value(self, monkeypatch):
        """Test validation failures become ConfigurationError."""
        monkeypatch.setenv("LUBAUI_MAX_TOKEN_RESULTS", "0")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()
        assert exc_info.value.category.value == "configuration"

"""Tests for the configuration manager and schemas."""

import json

import pytest

from src.config.manager import ConfigurationManager
from src.config.schemas import AppConfig, CatalogConfig, LoggingConfig, validate_config
from src.domain.core.exceptions import ConfigurationError


class TestConfigurationManager:
    """Test loading, merging and validating configuration."""

    def test_defaults(self):
        config = ConfigurationManager().app_config
        assert config.logging.level == "WARNING"
        assert config.logging.destination == "stderr"
        assert config.logging.file.path == "logs/pattern_catalog.log"
        assert config.catalog.output_format == "table"
        assert config.catalog.enabled_categories == ["behavioral", "creational", "structural"]

    def test_environment_overrides_defaults(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("PATTERN_CATALOG_LOGDIR", "/var/log/catalog")
        logging_config = ConfigurationManager().get_logging_config()
        assert logging_config.level == "DEBUG"
        assert logging_config.file.path == "/var/log/catalog/pattern_catalog.log"

    def test_config_file_is_merged(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"catalog": {"output_format": "json"}}))

        manager = ConfigurationManager(str(config_file))

        assert manager.get_catalog_config().output_format == "json"
        assert manager.get_catalog_config().show_headers is True
        assert manager.get_logging_config().level == "WARNING"

    def test_config_file_from_environment(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"catalog": {"enabled_categories": ["structural"]}}))
        monkeypatch.setenv("PATTERN_CATALOG_CONFIG", str(config_file))

        assert ConfigurationManager().get_catalog_config().enabled_categories == ["structural"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to load configuration"):
            ConfigurationManager(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(config_file))

    def test_non_object_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("[1, 2, 3]")
        with pytest.raises(ConfigurationError, match="JSON object"):
            ConfigurationManager(str(config_file))

    def test_invalid_values_raise_configuration_error(self):
        manager = ConfigurationManager()
        manager.update_config({"logging": {"level": "LOUD"}})
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            manager.app_config

    def test_update_config_invalidates_cached_model(self):
        manager = ConfigurationManager()
        assert manager.app_config.catalog.show_headers is True
        manager.update_config({"catalog": {"show_headers": False}})
        assert manager.app_config.catalog.show_headers is False


class TestSchemas:
    """Test pydantic schema validation."""

    def test_validate_config_defaults(self):
        assert isinstance(validate_config({}), AppConfig)

    def test_log_level_normalised(self):
        assert LoggingConfig(level="info").level == "INFO"

    def test_invalid_destination(self):
        with pytest.raises(ValueError):
            LoggingConfig(destination="syslog")

    def test_invalid_output_format(self):
        with pytest.raises(ValueError):
            CatalogConfig(output_format="xml")

    def test_unknown_category(self):
        with pytest.raises(ValueError, match="Unknown categories"):
            CatalogConfig(enabled_categories=["behavioral", "concurrency"])

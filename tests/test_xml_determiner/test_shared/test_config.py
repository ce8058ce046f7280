"""Tests for the configuration system."""

import json

import pytest

from xml_determiner.shared.config import (
    ConfigError,
    ConfigValidationError,
    ValidatorConfig,
)


class TestValidatorConfig:
    """Test suite for ValidatorConfig."""

    def test_default_configuration(self):
        """Test default validator configuration values."""
        config = ValidatorConfig()

        assert config.trim_input is True
        assert config.encoding == "utf-8"
        assert config.max_input_size_bytes is None
        assert config.correlation_id is None
        assert config.enable_metrics is True

    def test_presets(self):
        """Test preset factory methods."""
        assert ValidatorConfig.default() == ValidatorConfig()
        assert ValidatorConfig.strict().trim_input is False

    def test_validation_failures(self):
        """Test invalid values are rejected on construction."""
        with pytest.raises(ValueError, match="max_input_size_bytes must be > 0 or None"):
            ValidatorConfig(max_input_size_bytes=0)

        with pytest.raises(ValueError, match="unknown encoding"):
            ValidatorConfig(encoding="no-such-codec")

        with pytest.raises(ValueError, match="encoding cannot be empty"):
            ValidatorConfig(encoding="")

    def test_override(self):
        """Test overriding fields keeps the original untouched."""
        config = ValidatorConfig()
        changed = config.override(trim_input=False, encoding="latin-1")

        assert changed.trim_input is False
        assert changed.encoding == "latin-1"
        assert config.trim_input is True

    def test_override_unknown_field(self):
        """Test overriding a field that does not exist."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ValidatorConfig().override(no_such_field=1)
        assert exc_info.value.field_name == "no_such_field"

    def test_non_string_encoding(self):
        """Test an encoding that is not a string is rejected as a value error."""
        with pytest.raises(ValueError, match="encoding must be a string"):
            ValidatorConfig(encoding=5)

        with pytest.raises(ConfigValidationError, match="encoding must be a string"):
            ValidatorConfig().override(encoding=5)

        with pytest.raises(ConfigValidationError):
            ValidatorConfig.from_dict({"encoding": 5})

    def test_override_invalid_value(self):
        """Test overriding with an invalid value."""
        with pytest.raises(ConfigError):
            ValidatorConfig().override(max_input_size_bytes=-5)

    def test_json_serialization(self):
        """Test configuration survives JSON serialization."""
        config = ValidatorConfig(
            trim_input=False,
            max_input_size_bytes=1024,
            correlation_id="req-1",
        )
        data = json.loads(config.to_json())

        assert data["trim_input"] is False
        assert data["max_input_size_bytes"] == 1024
        assert ValidatorConfig.from_json(config.to_json()) == config

    def test_from_dict_ignores_unknown_keys(self):
        """Test unknown keys in data are skipped."""
        config = ValidatorConfig.from_dict({"trim_input": False, "extra": 1})
        assert config.trim_input is False

    def test_from_json_failures(self):
        """Test malformed configuration data."""
        with pytest.raises(ConfigValidationError, match="Invalid configuration JSON"):
            ValidatorConfig.from_json("{not json")

        with pytest.raises(ConfigValidationError, match="must be an object"):
            ValidatorConfig.from_json("[1, 2]")

        with pytest.raises(ConfigValidationError):
            ValidatorConfig.from_json('{"max_input_size_bytes": 0}')

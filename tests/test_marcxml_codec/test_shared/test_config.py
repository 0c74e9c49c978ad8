"""Tests for codec configuration."""

from dataclasses import FrozenInstanceError

import pytest

from marcxml_codec.shared.config import (
    DEFAULT_CONFIG,
    MARC21_NAMESPACE,
    CodecConfig,
    ConfigError,
    ConfigValidationError,
)


class TestCodecConfig:
    """Test suite for CodecConfig."""

    def test_default_configuration(self):
        config = CodecConfig()

        assert config.namespace == MARC21_NAMESPACE
        assert config.pretty_print is True
        assert config.sniff_read_size == 9
        assert config.huge_tree is False
        assert config.resolve_entities is False
        assert config.correlation_id is None
        assert config == DEFAULT_CONFIG

    def test_validation_failures(self):
        with pytest.raises(ValueError, match="namespace cannot be empty"):
            CodecConfig(namespace="")

        with pytest.raises(ValueError, match="sniff_read_size must be > 0"):
            CodecConfig(sniff_read_size=0)

    def test_immutable(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.pretty_print = False

    def test_override(self):
        config = DEFAULT_CONFIG.override(pretty_print=False, correlation_id="req-1")

        assert config.pretty_print is False
        assert config.correlation_id == "req-1"
        assert DEFAULT_CONFIG.pretty_print is True

    def test_override_unknown_field(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            DEFAULT_CONFIG.override(indent=4)

        assert exc_info.value.field_name == "indent"
        assert "pretty_print" in exc_info.value.suggestions
        assert isinstance(exc_info.value, ConfigError)

    def test_override_invalid_value(self):
        with pytest.raises(ConfigValidationError, match="sniff_read_size"):
            DEFAULT_CONFIG.override(sniff_read_size=-1)

    def test_to_dict(self):
        data = CodecConfig(correlation_id="abc").to_dict()

        assert data["correlation_id"] == "abc"
        assert data["namespace"] == MARC21_NAMESPACE
        assert CodecConfig(**data) == CodecConfig(correlation_id="abc")

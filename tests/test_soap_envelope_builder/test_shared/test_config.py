"""Tests for the serializer configuration."""

import json

import pytest

from soap_envelope_builder.shared.config import (
    DEFAULT_INDENT,
    ConfigError,
    ConfigValidationError,
    SerializerConfig,
)


class TestSerializerConfig:
    """Test suite for SerializerConfig."""

    def test_default_configuration(self):
        """Test default serializer configuration values."""
        config = SerializerConfig()

        assert config.pretty_print is True
        assert config.indent == DEFAULT_INDENT == "  "
        assert config.correlation_id is None

    def test_presets(self):
        """Test compact and pretty presets."""
        compact = SerializerConfig.compact()
        assert compact.pretty_print is False
        assert compact.indent == ""

        tabs = SerializerConfig.pretty("\t")
        assert tabs.pretty_print is True
        assert tabs.indent == "\t"

    def test_effective_indent(self):
        """Test that compact output never uses the indent."""
        assert SerializerConfig(indent="    ").effective_indent == "    "
        assert SerializerConfig(pretty_print=False, indent="    ").effective_indent == ""

    def test_immutability(self):
        """Test that configuration is frozen."""
        config = SerializerConfig()
        with pytest.raises(AttributeError):
            config.pretty_print = False

    def test_indent_validation(self):
        """Test indent must be a string."""
        with pytest.raises(ConfigValidationError, match="indent must be a string") as exc_info:
            SerializerConfig(indent=2)
        assert exc_info.value.field_name == "indent"
        assert exc_info.value.suggestions

    def test_any_indent_string_accepted(self):
        """Test indents are not limited to whitespace."""
        assert SerializerConfig(indent="--").indent == "--"
        assert SerializerConfig.pretty(". ").effective_indent == ". "

    def test_pretty_print_validation(self):
        with pytest.raises(ConfigValidationError, match="pretty_print must be a boolean") as exc_info:
            SerializerConfig(pretty_print="yes")
        assert exc_info.value.field_name == "pretty_print"

    def test_validation_error_is_config_error(self):
        """Test exception hierarchy."""
        assert issubclass(ConfigValidationError, ConfigError)
        error = ConfigValidationError("bad")
        assert error.field_name is None
        assert error.suggestions == []

    def test_override(self):
        """Test creating a modified copy."""
        config = SerializerConfig()
        tabbed = config.override(indent="\t", correlation_id="req-1")

        assert tabbed.indent == "\t"
        assert tabbed.correlation_id == "req-1"
        assert config.indent == "  "

    def test_override_validates(self):
        """Test overrides go through validation and reject unknown fields."""
        with pytest.raises(ConfigValidationError):
            SerializerConfig().override(indent=None)
        with pytest.raises(ConfigValidationError, match="Unknown configuration fields: colour"):
            SerializerConfig().override(colour=True)

    def test_serialization(self):
        """Test dict and JSON conversion."""
        config = SerializerConfig(pretty_print=False, indent="", correlation_id="abc")

        assert config.to_dict() == {
            "pretty_print": False,
            "indent": "",
            "correlation_id": "abc",
        }
        assert json.loads(config.to_json()) == config.to_dict()

    def test_from_dict(self):
        """Test building from a dictionary ignores unknown keys."""
        config = SerializerConfig.from_dict({"indent": "\t", "unknown": 1})

        assert config.indent == "\t"
        assert config.pretty_print is True
        assert SerializerConfig.from_dict(config.to_dict()) == config

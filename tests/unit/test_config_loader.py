"""Tests for configuration loader."""

import os

import pytest

from passarg.config import ConfigLoader, ConfigNotFoundError, ConfigParseError
from passarg.exceptions import EnvironmentLookupError
from passarg.resolver import PassArgResolver


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_resolves_literal_and_env(self, tmp_path):
        """Should replace ${passarg:...} patterns with secrets."""
        # Arrange
        os.environ["DB_PASSWORD"] = "supersecret"
        config_file = tmp_path / "app.yaml"
        config_file.write_text(
            """
database:
  host: localhost
  password: "${passarg:env:DB_PASSWORD}"
api:
  key: "${passarg:pass:abc123}"
"""
        )
        loader = ConfigLoader()

        # Act
        config = loader.load(config_file)

        # Assert
        assert config["database"]["host"] == "localhost"
        assert config["database"]["password"] == "supersecret"
        assert config["api"]["key"] == "abc123"

        # Cleanup
        del os.environ["DB_PASSWORD"]

    def test_shared_file_in_document_order(self, tmp_path):
        """Two entries naming one file get its first and second lines."""
        # Arrange
        secrets = tmp_path / "secrets.txt"
        secrets.write_text("in-pass\nout-pass\n")
        config_file = tmp_path / "app.yaml"
        config_file.write_text(
            f"""
keystores:
  - password: "${{passarg:file:{secrets}}}"
  - password: "${{passarg:file:{secrets}}}"
"""
        )

        # Act
        with PassArgResolver() as resolver:
            config = ConfigLoader(resolver=resolver).load(config_file)

        # Assert
        assert [k["password"] for k in config["keystores"]] == ["in-pass", "out-pass"]

    def test_pattern_within_text(self):
        """Should resolve secrets embedded in other text."""
        # Arrange
        loader = ConfigLoader()

        # Act
        result = loader.resolve_value("user:${passarg:pass:pw}@host")

        # Assert
        assert result == "user:pw@host"

    def test_preserves_non_strings(self):
        """Should leave integers, booleans and None alone."""
        # Arrange
        loader = ConfigLoader()
        config = {"port": 5432, "enabled": True, "nothing": None}

        # Act & Assert
        assert loader.resolve_config(config) == config

    def test_empty_file(self, tmp_path):
        """Empty YAML loads as an empty dict."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert ConfigLoader().load(config_file) == {}

    def test_missing_file_raises_error(self, tmp_path):
        """Should raise ConfigNotFoundError for a missing file."""
        with pytest.raises(ConfigNotFoundError) as exc_info:
            ConfigLoader().load(tmp_path / "nope.yaml")

        assert "nope.yaml" in str(exc_info.value)

    def test_invalid_yaml_raises_error(self, tmp_path):
        """Should raise ConfigParseError on invalid YAML."""
        # Arrange
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("invalid: yaml: content: {{")

        # Act & Assert
        with pytest.raises(ConfigParseError):
            ConfigLoader().load(config_file)

    def test_resolution_error_propagates(self, tmp_path):
        """Errors from the resolver are not swallowed."""
        # Arrange
        if "NOT_SET_FOR_CONFIG" in os.environ:
            del os.environ["NOT_SET_FOR_CONFIG"]
        config_file = tmp_path / "app.yaml"
        config_file.write_text('password: "${passarg:env:NOT_SET_FOR_CONFIG}"\n')

        # Act & Assert
        with pytest.raises(EnvironmentLookupError):
            ConfigLoader().load(config_file)

    def test_reads_utf8(self, tmp_path):
        """Config files are UTF-8 whatever the locale says."""
        # Arrange
        config_file = tmp_path / "app.yaml"
        config_file.write_bytes('password: "${passarg:pass:pässwörd}"\n'.encode("utf-8"))

        # Act
        config = ConfigLoader().load(config_file)

        # Assert
        assert config["password"] == "pässwörd"

"""YAML configuration with password argument interpolation."""

from passarg.config.exceptions import ConfigError, ConfigNotFoundError, ConfigParseError
from passarg.config.loader import ConfigLoader

__all__ = [
    "ConfigLoader",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
]

"""Configuration loader - loads YAML and resolves ${passarg:SPEC} patterns."""

import re
from pathlib import Path
from typing import Any, Optional

import yaml

from passarg.config.exceptions import ConfigNotFoundError, ConfigParseError
from passarg.resolver import PassArgResolver
from passarg.utils.logging import get_logger

logger = get_logger(__name__)

PASSARG_PATTERN = re.compile(r"\$\{passarg:([^}]+)\}")


class ConfigLoader:
    """
    Loads a YAML config file and resolves password arguments inside it.

    Every ${passarg:SPEC} occurrence is replaced with the secret SPEC
    resolves to. Values are resolved depth first in document order with a
    single resolver, so two entries naming the same file get its first and
    second lines.

    Usage:
        loader = ConfigLoader()
        config = loader.load("deploy.yaml")
        # keystore:
        #   password: ${passarg:file:secrets.txt}
    """

    def __init__(self, resolver: Optional[PassArgResolver] = None):
        self.resolver = resolver if resolver is not None else PassArgResolver()

    def _load_yaml(self, path: Path) -> Any:
        """Load and parse a YAML file."""
        if not path.exists():
            raise ConfigNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Invalid YAML in {path}: {e}") from e

        logger.debug(f"Loaded config: {path}")
        return {} if content is None else content

    def load(self, path) -> Any:
        """
        Load a config file and resolve its password arguments.

        Args:
            path: Path to the YAML file

        Returns:
            Parsed config with secrets filled in
        """
        path = Path(path)
        config = self.resolve_config(self._load_yaml(path))
        logger.info(f"Resolved password arguments in {path}")
        return config

    def resolve_value(self, value: str) -> str:
        """Resolve ${passarg:SPEC} patterns in a string."""

        def replace_match(match):
            return self.resolver.resolve_arg(match.group(1))

        return PASSARG_PATTERN.sub(replace_match, value)

    def resolve_config(self, config: Any) -> Any:
        """Recursively resolve all password arguments in a config structure."""
        if isinstance(config, dict):
            return {k: self.resolve_config(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self.resolve_config(item) for item in config]
        elif isinstance(config, str):
            return self.resolve_value(config)
        else:
            return config

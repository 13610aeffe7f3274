"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from wildglob.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "MatcherSettings"]

logger = logging.getLogger(__name__)


class MatcherSettings(BaseModel):
    """Validated settings for the ``matcher`` configuration section.

    Attributes:
        case_sensitive: Whether ASCII letters must match in exact case.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    case_sensitive: bool = False


class Config:
    """Configuration accessor with dot-path key support.

    Example YAML::

        matcher:
          case_sensitive: true
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._path: str | None = None

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        An empty file yields an empty configuration.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or its root is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")

        config = cls(data)
        config._path = yaml_path
        logger.debug("Loaded config from %s", yaml_path)
        return config

    @property
    def path(self) -> str | None:
        """The file this config was loaded from, if any."""
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def matcher_settings(self) -> MatcherSettings:
        """Validate and return the ``matcher`` section.

        Raises:
            ConfigError: If the section is not a mapping or fails validation.
        """
        section = self.get("matcher", {})
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(
                f"'matcher' must be a mapping, got {type(section).__name__}"
            )
        try:
            return MatcherSettings.model_validate(section)
        except ValidationError as e:
            raise ConfigError(f"Invalid matcher settings: {e}", cause=e) from e

"""
Configuration System for codepoet.

Settings live in a single JSON or YAML file with one section per concern.
Environment variables override the file for the values most often changed
from a shell.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    DEFAULT_CONVENTION_NAME,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    ENV_IMPORT_CONVENTION,
    ENV_LOG_LEVEL,
    QUALIFIER_SEPARATOR,
)
from .exceptions import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class ImportsConfig:
    """Import allocation configuration."""

    convention: str = DEFAULT_CONVENTION_NAME
    qualifier_separator: str = QUALIFIER_SEPARATOR


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    enable_file_logging: bool = False
    log_file: str = DEFAULT_LOG_FILE


class CodePoetConfig:
    """
    Unified configuration manager for codepoet.

    Loads the optional configuration file once and exposes typed sections.
    A missing file is not an error; defaults are used instead.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to a JSON or YAML configuration file. If None,
                only defaults and environment overrides apply.
        """
        self.config_file = Path(config_file) if config_file else None
        self._config_data = self._load_config()

        self.imports = self._create_imports_config()
        self.logging = self._create_logging_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if self.config_file is None:
            return {}
        if not self.config_file.exists():
            logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in _YAML_SUFFIXES:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration: {e}", {'config_file': str(self.config_file)}
            ) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", {'config_file': str(self.config_file)}
            )

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _invalid(self, message: str) -> ConfigurationError:
        return ConfigurationError(message, {'config_file': str(self.config_file)})

    def _section(self, name: str) -> Dict[str, Any]:
        """Return a top-level section; absent sections are empty."""
        section = self._config_data.get(name)
        if section is None:
            if name in self._config_data:
                raise self._invalid(f"Configuration section '{name}' is empty")
            return {}
        if not isinstance(section, dict):
            raise self._invalid(
                f"Configuration section '{name}' must be a mapping, got {type(section).__name__}"
            )
        return section

    def _value(self, section: Dict[str, Any], section_name: str, key: str, default, kind: type):
        value = section.get(key, default)
        # exact match: bool is an int subclass
        if type(value) is not kind:
            raise self._invalid(
                f"Configuration value '{section_name}.{key}' must be {kind.__name__}, "
                f"got {type(value).__name__}"
            )
        return value

    def _create_imports_config(self) -> ImportsConfig:
        """Create import allocation configuration from loaded data."""
        imports_data = self._section("imports")

        # Check environment variable override
        convention = os.getenv(ENV_IMPORT_CONVENTION) or self._value(
            imports_data, "imports", "convention", DEFAULT_CONVENTION_NAME, str
        )

        return ImportsConfig(
            convention=convention,
            qualifier_separator=self._value(
                imports_data, "imports", "qualifier_separator", QUALIFIER_SEPARATOR, str
            ),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=os.getenv(ENV_LOG_LEVEL)
            or self._value(log_data, "logging", "level", DEFAULT_LOG_LEVEL, str),
            enable_file_logging=self._value(log_data, "logging", "enable_file_logging", False, bool),
            log_file=self._value(log_data, "logging", "log_file", DEFAULT_LOG_FILE, str),
        )

    def naming_convention(self):
        """Resolve the configured naming convention strategy."""
        from ..imports.conventions import get_convention

        return get_convention(self.imports.convention)

    def apply_logging(self) -> None:
        """Reconfigure the codepoet logger from the logging section."""
        from .logging import setup_logging

        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(level=self.logging.level, log_file=log_file)

    def save_config(self, config_file: Optional[str] = None) -> None:
        """Save current configuration as JSON."""
        target = Path(config_file) if config_file else self.config_file
        if target is None:
            raise ConfigurationError("No configuration file to save to")

        config_data = {
            "version": "1.0",
            "description": "codepoet configuration",
            "imports": {
                "convention": self.imports.convention,
                "qualifier_separator": self.imports.qualifier_separator,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

        with open(target, "w", encoding="utf-8") as f:
            json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {target}")


# Global configuration instance
_global_config: Optional[CodePoetConfig] = None


def get_config() -> CodePoetConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = CodePoetConfig()
    return _global_config


def set_config(config: Optional[CodePoetConfig]) -> None:
    """Set the global configuration instance (None resets to defaults)."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> CodePoetConfig:
    """Load configuration from a specific file."""
    return CodePoetConfig(config_file)

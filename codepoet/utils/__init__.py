"""
Utils package for codepoet.

This module provides the constants, identifier helpers, exceptions,
logging and configuration shared across the package.
"""

from .constants import QUALIFIER_SEPARATOR, RESERVED_WORDS
from .exceptions import (
    CodePoetError,
    ConfigurationError,
    ImportRegistryError,
    UnregisteredImportError,
    AliasConflictError,
    InvalidAliasError,
)
from .naming import is_identifier, is_identifier_char, sanitize_identifier, SuffixAllocator
from .config import (
    CodePoetConfig,
    ImportsConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from .logging import get_logger, setup_logging

__all__ = [
    # Constants
    "QUALIFIER_SEPARATOR",
    "RESERVED_WORDS",

    # Exceptions
    "CodePoetError",
    "ConfigurationError",
    "ImportRegistryError",
    "UnregisteredImportError",
    "AliasConflictError",
    "InvalidAliasError",

    # Naming
    "is_identifier",
    "is_identifier_char",
    "sanitize_identifier",
    "SuffixAllocator",

    # Configuration
    "CodePoetConfig",
    "ImportsConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
]

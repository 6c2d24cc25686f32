"""
Constants for the codepoet package.

This module collects the constant values shared by the import allocator,
the configuration layer and logging, providing a single source of truth
for separators, default names and environment variable names.
"""

from __future__ import annotations


# =============================================================================
# Qualifier Constants
# =============================================================================

# Joins a qualifier to the referenced name ("fubar" + "." + "Name").
QUALIFIER_SEPARATOR = "."

# Separates import path segments.
PATH_SEPARATOR = "/"

# Used when an import path yields no usable package name at all.
FALLBACK_PACKAGE_NAME = "pkg"

# Discards an import; never usable as a qualifier.
BLANK_IDENTIFIER = "_"

# Repository-naming prefix stripped by the tool naming convention.
REPOSITORY_PREFIX = "go-"

# Major-version path marker: "v" followed by digits only.
MAJOR_VERSION_PREFIX = "v"

# Keywords of the target language; never legal as a bare qualifier.
RESERVED_WORDS = frozenset({
    "break", "case", "chan", "const", "continue",
    "default", "defer", "else", "fallthrough", "for",
    "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return",
    "select", "struct", "switch", "type", "var",
})


# =============================================================================
# Naming Convention Names
# =============================================================================

CONVENTION_MINIMAL = "minimal"
CONVENTION_TOOL = "tool"
DEFAULT_CONVENTION_NAME = CONVENTION_MINIMAL


# =============================================================================
# Environment and Logging
# =============================================================================

LOGGER_NAME = "codepoet"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "codepoet.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENV_LOG_LEVEL = "CODEPOET_LOG_LEVEL"
ENV_IMPORT_CONVENTION = "CODEPOET_IMPORT_CONVENTION"

"""
codepoet: import qualifier allocation for source code generators.

Generated code that references symbols from other packages needs each of
those packages imported under a qualifier that is unique within the file.
codepoet hands out those qualifiers, preferring each package's natural
name, and produces a deterministic, sorted list of import declarations.

Usage:
    from codepoet import Symbol, SymbolResolver

    resolver = SymbolResolver.for_package("example.com/app/server")
    resolver.ensure_imported(Symbol("example.com/lib/fubar", "fubar", "Config"))
    # -> "fubar.Config"
    specs = resolver.import_specs()
"""

__version__ = "0.1.0"
__author__ = "codepoet developers"

# Public API exports
from .imports import (
    NamingConvention,
    MinimalConvention,
    ToolConvention,
    DEFAULT_CONVENTION,
    get_convention,
    Package,
    Symbol,
    ImportRegistry,
    ImportSpec,
    PackageRecord,
    SymbolResolver,
    new_resolver,
)

from .utils.config import (
    get_config,
    CodePoetConfig,
)

from .utils.exceptions import (
    CodePoetError,
    ImportRegistryError,
)

__all__ = [
    "NamingConvention",
    "MinimalConvention",
    "ToolConvention",
    "DEFAULT_CONVENTION",
    "get_convention",
    "Package",
    "Symbol",
    "ImportRegistry",
    "ImportSpec",
    "PackageRecord",
    "SymbolResolver",
    "new_resolver",
    "get_config",
    "CodePoetConfig",
    "CodePoetError",
    "ImportRegistryError",
]

"""
Import qualifier allocation for generated source files.

This module assigns each package referenced from a generated file a unique
qualifier and produces the sorted import declarations for that file.
"""

from .conventions import (
    NamingConvention,
    MinimalConvention,
    ToolConvention,
    DEFAULT_CONVENTION,
    get_convention,
    available_conventions,
)
from .package import Package, Symbol
from .registry import ImportRegistry, ImportSpec, PackageRecord
from .resolver import SymbolResolver, new_resolver

__all__ = [
    # Naming conventions
    "NamingConvention",
    "MinimalConvention",
    "ToolConvention",
    "DEFAULT_CONVENTION",
    "get_convention",
    "available_conventions",
    # Referenceable elements
    "Package",
    "Symbol",
    # Allocation
    "ImportRegistry",
    "ImportSpec",
    "PackageRecord",
    "SymbolResolver",
    "new_resolver",
]

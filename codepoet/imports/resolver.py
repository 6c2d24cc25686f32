"""
Symbol reference resolution for generated files.

SymbolResolver is what generation code talks to while emitting a file:
every time it needs to refer to a symbol, it asks for the qualified
reference and the resolver registers the defining package on the way.
"""

from __future__ import annotations

from typing import List, Optional

from ..utils.config import CodePoetConfig, get_config
from ..utils.logging import get_logger
from .conventions import NamingConvention
from .package import Package, Symbol
from .registry import ImportRegistry, ImportSpec

logger = get_logger(__name__)


class SymbolResolver:
    """
    Renders qualified references for one generated file.

    Wraps the file's ImportRegistry; all state lives in the registry, so two
    resolvers over the same registry agree on every qualifier.
    """

    def __init__(self, registry: ImportRegistry):
        self._registry = registry

    @classmethod
    def for_package(
        cls, current_package_path: str, convention: Optional[NamingConvention] = None
    ) -> SymbolResolver:
        """Create a resolver with a fresh registry for the given package."""
        return cls(ImportRegistry(current_package_path, convention))

    @property
    def registry(self) -> ImportRegistry:
        return self._registry

    def ensure_imported(self, symbol: Symbol) -> str:
        """
        Return the source text that refers to symbol from the current file.

        The defining package is registered if needed. Symbols of the current
        package come back unqualified.
        """
        prefix = self._registry.register_import(symbol.package_path, symbol.package_name)
        return f"{prefix}{symbol.name}"

    def qualify(self, import_path: str, name: str, package_name: str = "") -> str:
        """Shorthand for ensure_imported(Symbol(import_path, package_name, name))."""
        return self.ensure_imported(Symbol(import_path, package_name, name))

    # Pass-throughs so generation code can pre-seed imports and aliases
    # before the first reference is emitted.

    def register_import(self, import_path: str, name: str = "") -> str:
        return self._registry.register_import(import_path, name)

    def register_import_for_package(self, package: Package) -> str:
        return self._registry.register_import_for_package(package)

    def register_aliased_import(self, import_path: str, alias: str) -> str:
        return self._registry.register_aliased_import(import_path, alias)

    def prefix_for_package(self, import_path: str) -> str:
        return self._registry.prefix_for_package(import_path)

    def import_specs(self) -> List[ImportSpec]:
        """Return the sorted import declarations for the renderer."""
        specs = self._registry.import_specs()
        logger.debug(
            f"{len(specs)} imports for package {self._registry.current_package_path}"
        )
        return specs


def new_resolver(current_package_path: str, config: Optional[CodePoetConfig] = None) -> SymbolResolver:
    """
    Create a resolver whose registry follows the given configuration.

    Args:
        current_package_path: Import path of the package being generated
        config: Configuration to use; the global configuration if None

    Raises:
        ConfigurationError: If the configured naming convention is unknown
    """
    config = config or get_config()
    registry = ImportRegistry(
        current_package_path,
        config.naming_convention(),
        separator=config.imports.qualifier_separator,
    )
    return SymbolResolver(registry)

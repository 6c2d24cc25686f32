"""
Value types describing referenceable packages and symbols.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .conventions import DEFAULT_CONVENTION, NamingConvention


@dataclass(frozen=True)
class Package:
    """A package that generated code can import.

    An empty name means the declared name is unknown.
    """
    name: str
    import_path: str

    @classmethod
    def from_path(cls, import_path: str, convention: Optional[NamingConvention] = None) -> Package:
        """Build a package whose name is assumed from its import path."""
        convention = convention or DEFAULT_CONVENTION
        return cls(name=convention.assumed_name(import_path), import_path=import_path)


@dataclass(frozen=True)
class Symbol:
    """A named, package-level element defined in some package.

    Fields follow the order of a qualified reference: where the defining
    package lives, what it is called ("" if unknown), then the element.
    """
    package_path: str
    package_name: str
    name: str

    @classmethod
    def from_package(cls, package: Package, name: str) -> Symbol:
        return cls(package_path=package.import_path, name=name, package_name=package.name)

    @classmethod
    def from_path(
        cls, import_path: str, name: str, convention: Optional[NamingConvention] = None
    ) -> Symbol:
        """Build a symbol whose package name is assumed from its import path."""
        return cls.from_package(Package.from_path(import_path, convention), name)

    @property
    def package(self) -> Package:
        return Package(name=self.package_name, import_path=self.package_path)

    def __str__(self) -> str:
        return f"{self.package_path}.{self.name}"

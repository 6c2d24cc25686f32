"""
Import registry for one generated source file.

The registry assigns every referenced import path a qualifier that is
unique within the file and never changes once issued. A package keeps its
natural name unless another path already claimed it, in which case a
numbered variant ("fubar1", "fubar2", ...) is issued instead. References to
the package being generated need no import and get an empty qualifier.

A registry is single-use and not thread-safe: build one per output file,
feed it every reference, then hand ``import_specs()`` to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set

from ..utils.constants import QUALIFIER_SEPARATOR
from ..utils.exceptions import AliasConflictError, InvalidAliasError, UnregisteredImportError
from ..utils.logging import get_logger
from ..utils.naming import SuffixAllocator, is_identifier, sanitize_identifier
from .conventions import DEFAULT_CONVENTION, NamingConvention
from .package import Package

logger = get_logger(__name__)


@dataclass(frozen=True)
class PackageRecord:
    """Qualifier assignment for one import path, fixed at first registration."""
    import_path: str
    base_name: str
    qualifier: str
    alias_required: bool = False


@dataclass(frozen=True)
class ImportSpec:
    """One import declaration to emit.

    An empty package_alias means the import is emitted without an alias and
    the package's own declared name is used.
    """
    import_path: str
    package_alias: str = ""


class ImportRegistry:
    """
    Allocates qualifiers for the imports of one generated file.

    Guarantees:
        - every import path resolves to exactly one qualifier for the
          lifetime of the registry
        - the current package resolves to "" and no other path does
        - no two import paths share a qualifier
    """

    def __init__(
        self,
        current_package_path: str,
        convention: Optional[NamingConvention] = None,
        separator: str = QUALIFIER_SEPARATOR,
    ):
        """
        Initialize the registry.

        Args:
            current_package_path: Import path of the package being generated
            convention: Strategy used to assume names for packages registered
                without one; defaults to DEFAULT_CONVENTION
            separator: Appended to a non-empty qualifier to form a prefix
        """
        self._current_package_path = current_package_path
        self._convention = convention or DEFAULT_CONVENTION
        self._separator = separator
        self._records: Dict[str, PackageRecord] = {}
        self._base_names: Set[str] = set()
        self._owners: Dict[str, str] = {}  # qualifier -> import path
        self._suffixes = SuffixAllocator()

    @property
    def current_package_path(self) -> str:
        return self._current_package_path

    @property
    def convention(self) -> NamingConvention:
        return self._convention

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_import(self, import_path: str, name: str = "") -> str:
        """
        Register an import and return the prefix for references into it.

        Registering a path again returns the prefix issued the first time,
        whatever name is passed.

        Args:
            import_path: Path of the referenced package
            name: The package's declared name, or "" if unknown. An unknown
                name is assumed via the naming convention and always gets an
                explicit alias in the import declaration.

        Returns:
            The qualifier followed by the separator, or "" for the current
            package
        """
        if import_path == self._current_package_path:
            return ""

        record = self._records.get(import_path)
        if record is not None:
            return self._prefix(record.qualifier)

        name_unknown = not name
        declared = name or self._convention.assumed_name(import_path)
        base_name = sanitize_identifier(declared)

        if base_name not in self._base_names and base_name not in self._owners:
            qualifier = base_name
            alias_required = name_unknown or base_name != declared
        else:
            qualifier = self._suffixes.next_name(base_name, self._owners)
            alias_required = True
            logger.debug(
                f"Qualifier '{base_name}' already taken, using '{qualifier}' for {import_path}"
            )

        self._store(PackageRecord(import_path, base_name, qualifier, alias_required))
        return self._prefix(qualifier)

    def register_import_for_package(self, package: Package) -> str:
        """Register package using its declared name; see register_import."""
        return self.register_import(package.import_path, package.name)

    def register_aliased_import(self, import_path: str, alias: str) -> str:
        """
        Force the qualifier used for import_path.

        The alias bypasses the naming convention and collision handling and
        is always emitted explicitly. It must be installed before any other
        registration of the path, or match the qualifier already issued.

        Returns:
            The alias followed by the separator

        Raises:
            AliasConflictError: If the path already resolves to a different
                qualifier, is the current package, or another path owns alias
            InvalidAliasError: If alias is not a legal identifier
        """
        if import_path == self._current_package_path:
            logger.error(f"Cannot alias the current package {import_path} as '{alias}'")
            raise AliasConflictError(import_path, "", alias)

        record = self._records.get(import_path)
        if record is not None:
            if record.qualifier == alias:
                return self._prefix(alias)
            logger.error(
                f"Cannot alias {import_path} as '{alias}': already registered as '{record.qualifier}'"
            )
            raise AliasConflictError(import_path, record.qualifier, alias)

        if not is_identifier(alias):
            logger.error(f"Cannot alias {import_path} as '{alias}': not a valid identifier")
            raise InvalidAliasError(import_path, alias)

        owner = self._owners.get(alias)
        if owner is not None:
            logger.error(f"Cannot alias {import_path} as '{alias}': already used by {owner}")
            raise AliasConflictError(import_path, "", alias, owner=owner)

        self._store(PackageRecord(import_path, alias, alias, alias_required=True))
        return self._prefix(alias)

    def _store(self, record: PackageRecord) -> None:
        self._records[record.import_path] = record
        self._base_names.add(record.base_name)
        self._owners[record.qualifier] = record.import_path
        logger.debug(
            f"Registered import {record.import_path} as '{record.qualifier}'"
            f"{' (aliased)' if record.alias_required else ''}"
        )

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def qualifier_for(self, import_path: str) -> str:
        """
        Return the bare qualifier issued for import_path.

        Raises:
            UnregisteredImportError: If import_path was never registered
        """
        if import_path == self._current_package_path:
            return ""
        record = self._records.get(import_path)
        if record is None:
            logger.error(f"No qualifier issued for {import_path}; it was never registered")
            raise UnregisteredImportError(import_path)
        return record.qualifier

    def prefix_for_package(self, import_path: str) -> str:
        """
        Return the prefix for references into import_path.

        Unlike register_import this never registers anything: asking for an
        unknown path means the generator emitted a reference before
        registering its package.

        Raises:
            UnregisteredImportError: If import_path was never registered
        """
        return self._prefix(self.qualifier_for(import_path))

    def is_registered(self, import_path: str) -> bool:
        return import_path == self._current_package_path or import_path in self._records

    def get_record(self, import_path: str) -> Optional[PackageRecord]:
        return self._records.get(import_path)

    def records(self) -> List[PackageRecord]:
        """Return all records in import path order."""
        return sorted(self._records.values(), key=_path_key)

    def import_specs(self) -> List[ImportSpec]:
        """
        Return the import declarations to emit.

        There is one spec per registered path other than the current
        package. Specs are sorted by the byte-wise order of their import
        paths, so the result depends only on what was registered, not on
        the order of registration.
        """
        return [
            ImportSpec(
                import_path=record.import_path,
                package_alias=record.qualifier if record.alias_required else "",
            )
            for record in self.records()
        ]

    def _prefix(self, qualifier: str) -> str:
        return f"{qualifier}{self._separator}" if qualifier else ""

    def __contains__(self, import_path: object) -> bool:
        return isinstance(import_path, str) and self.is_registered(import_path)

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(self.records())

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return (
            f"ImportRegistry(current_package_path={self._current_package_path!r}, "
            f"imports={len(self._records)})"
        )


def _path_key(record: PackageRecord) -> bytes:
    return record.import_path.encode("utf-8", "surrogatepass")

"""
Naming conventions for inferring package names from import paths.

The name a package declares is not recoverable from its import path alone,
so generated code has to assume one. A convention is a stateless strategy
that makes that assumption using string parsing only; the same instance may
be shared by any number of registries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List

from ..utils.constants import (
    CONVENTION_MINIMAL,
    CONVENTION_TOOL,
    MAJOR_VERSION_PREFIX,
    PATH_SEPARATOR,
    REPOSITORY_PREFIX,
)
from ..utils.exceptions import ConfigurationError
from ..utils.naming import is_identifier_char


def _last_segment(import_path: str) -> str:
    """Return the last non-empty path segment, ignoring trailing separators."""
    trimmed = import_path.rstrip(PATH_SEPARATOR)
    if not trimmed:
        return PATH_SEPARATOR if import_path else "."
    return trimmed.rsplit(PATH_SEPARATOR, 1)[-1]


def _parent_path(import_path: str) -> str:
    """Return the path without its last segment, or "" if there is none.

    A segment directly under the root has the root itself as parent.
    """
    trimmed = import_path.rstrip(PATH_SEPARATOR)
    if PATH_SEPARATOR not in trimmed:
        return ""
    parent = trimmed.rsplit(PATH_SEPARATOR, 1)[0].rstrip(PATH_SEPARATOR)
    return parent or PATH_SEPARATOR


def is_major_version(segment: str) -> bool:
    """Report whether segment is a bare major-version marker such as "v2"."""
    digits = segment[len(MAJOR_VERSION_PREFIX):]
    return segment.startswith(MAJOR_VERSION_PREFIX) and digits.isascii() and digits.isdigit()


class NamingConvention(ABC):
    """
    Strategy that maps an import path to an assumed package name.

    Implementations must be pure and total: the same path always yields the
    same name and no input raises.
    """

    name: str = ""

    @abstractmethod
    def assumed_name(self, import_path: str) -> str:
        """Return the package name assumed for import_path."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class MinimalConvention(NamingConvention):
    """Uses the last path segment verbatim."""

    name = CONVENTION_MINIMAL

    def assumed_name(self, import_path: str) -> str:
        return _last_segment(import_path)


class ToolConvention(NamingConvention):
    """
    Mirrors how common toolchains guess a package's name.

    Picks the last path segment that does not look like a major version,
    drops a "go-" repository prefix, then keeps the leading run of
    identifier characters.

    Examples:
        "example.com/foo/v2"        -> "foo"
        "github.com/x/go-yaml"      -> "yaml"
        "gopkg.in/yaml.v3"          -> "yaml"
        "example.com/fizz-buzz"     -> "fizz"
    """

    name = CONVENTION_TOOL

    def assumed_name(self, import_path: str) -> str:
        base = _last_segment(import_path)
        if is_major_version(base):
            parent = _parent_path(import_path)
            if parent:
                base = _last_segment(parent)

        if base.startswith(REPOSITORY_PREFIX):
            base = base[len(REPOSITORY_PREFIX):]

        for i, ch in enumerate(base):
            if not is_identifier_char(ch):
                return base[:i]
        return base


# Documented default; registries built without an explicit convention use it.
DEFAULT_CONVENTION: NamingConvention = MinimalConvention()

_CONVENTIONS: Dict[str, NamingConvention] = {
    CONVENTION_MINIMAL: DEFAULT_CONVENTION,
    CONVENTION_TOOL: ToolConvention(),
}


def get_convention(name: str) -> NamingConvention:
    """
    Look up a built-in naming convention by name.

    Raises:
        ConfigurationError: If no convention is registered under name
    """
    if not isinstance(name, str):
        raise ConfigurationError(
            f"Naming convention must be given by name, got {type(name).__name__}",
            {'available': ", ".join(available_conventions())},
        )
    try:
        return _CONVENTIONS[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown naming convention '{name}'",
            {'available': ", ".join(available_conventions())},
        ) from None


def available_conventions() -> List[str]:
    """Return the names of all built-in conventions."""
    return sorted(_CONVENTIONS)

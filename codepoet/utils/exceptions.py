"""
Custom exception definitions.

This module defines the exception hierarchy for codepoet. Registry misuse
errors signal a generation-ordering bug in the caller: they are fatal to the
file being generated and are never retried.
"""

from typing import Optional


class CodePoetError(Exception):
    """
    Base exception for all codepoet errors.

    Carries a human-readable message and an optional dictionary of
    structured context that is appended to the string form.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize codepoet error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(CodePoetError):
    """Raised for an unknown naming convention or an unreadable config file."""


class ImportRegistryError(CodePoetError):
    """
    Raised when an import registry is used out of order.

    The generated file must be abandoned: the registry is not repaired and
    should be discarded along with any partially emitted source.
    """


class UnregisteredImportError(ImportRegistryError):
    """
    Raised when a prefix is requested for a path that was never registered.
    """

    def __init__(self, import_path: str):
        super().__init__(
            f"Import path '{import_path}' was never registered",
            {'import_path': import_path},
        )
        self.import_path = import_path


class AliasConflictError(ImportRegistryError):
    """
    Raised when a forced alias cannot be installed.

    Either the path already resolves to a different qualifier, or another
    path already owns the requested alias.
    """

    def __init__(self, import_path: str, existing: str, requested: str, owner: Optional[str] = None):
        """
        Initialize alias conflict error.

        Args:
            import_path: Path the alias was requested for
            existing: Qualifier the path already resolves to ("" if none)
            requested: The alias that was requested
            owner: Other import path already holding the alias, if any
        """
        details = {'import_path': import_path, 'existing': existing, 'requested': requested}
        if owner is not None:
            details['owner'] = owner
            message = f"Alias '{requested}' is already used by '{owner}'"
        else:
            message = f"Import path '{import_path}' is already registered as '{existing}'"

        super().__init__(message, details)
        self.import_path = import_path
        self.existing = existing
        self.requested = requested
        self.owner = owner


class InvalidAliasError(ImportRegistryError):
    """
    Raised when a forced alias is not a legal bare identifier.
    """

    def __init__(self, import_path: str, alias: str):
        super().__init__(
            f"Alias '{alias}' is not a valid identifier",
            {'import_path': import_path, 'alias': alias},
        )
        self.import_path = import_path
        self.alias = alias

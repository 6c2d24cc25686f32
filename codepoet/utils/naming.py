"""
Naming Utilities for codepoet.

This module provides identifier validation and sanitization plus the
per-base-name suffix counters used when two packages want the same
qualifier.
"""

from __future__ import annotations

from typing import Container, Dict

from .constants import BLANK_IDENTIFIER, FALLBACK_PACKAGE_NAME, RESERVED_WORDS


# =============================================================================
# Identifier Checks
# =============================================================================

def is_identifier_char(ch: str) -> bool:
    """Report whether ch may appear in an identifier.

    ASCII letters, digits and underscore are allowed, as are non-ASCII
    letters and decimal digits.
    """
    if ch.isascii():
        return ch == "_" or ch.isalnum()
    return ch.isalpha() or ch.isdecimal()


def is_identifier(name: str) -> bool:
    """Report whether name is a legal bare identifier in generated source."""
    if not name or name == BLANK_IDENTIFIER or name in RESERVED_WORDS:
        return False
    if name[0].isdecimal():
        return False
    return all(is_identifier_char(ch) for ch in name)


def sanitize_identifier(name: str, fallback: str = FALLBACK_PACKAGE_NAME) -> str:
    """
    Sanitize a string to be a valid identifier.

    Args:
        name: Candidate name, possibly containing illegal characters
        fallback: Name used when nothing usable remains

    Returns:
        name itself when it is already legal, otherwise a legal variant
    """
    if is_identifier(name):
        return name

    # Replace invalid characters with underscores
    sanitized = "".join(ch if is_identifier_char(ch) else "_" for ch in name)

    # Ensure it doesn't start with a number
    if sanitized and sanitized[0].isdecimal():
        sanitized = f"_{sanitized}"

    if sanitized in RESERVED_WORDS:
        sanitized = f"{sanitized}_"

    # Ensure it's not empty or made only of filler
    if not sanitized.strip("_"):
        sanitized = fallback

    return sanitized


# =============================================================================
# Suffix Allocation
# =============================================================================

class SuffixAllocator:
    """
    Hands out numbered variants of a base name.

    Each base name has its own counter starting at 1, so "fubar" yields
    "fubar1", "fubar2", ... independently of any other base name. Counters
    only move forward; candidates present in the taken set are skipped.
    """

    def __init__(self):
        self._counters: Dict[str, int] = {}

    def next_name(self, base_name: str, taken: Container[str]) -> str:
        """Return the next free numbered variant of base_name."""
        counter = self._counters.get(base_name, 1)
        while True:
            candidate = f"{base_name}{counter}"
            counter += 1
            if candidate not in taken:
                self._counters[base_name] = counter
                return candidate

    def peek(self, base_name: str) -> int:
        """Return the counter value the next allocation for base_name starts at."""
        return self._counters.get(base_name, 1)

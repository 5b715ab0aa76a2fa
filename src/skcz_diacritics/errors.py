"""Exceptions raised for malformed diacritic tables."""

from __future__ import annotations

from typing import Optional

__all__ = ["DiacriticMapError"]


class DiacriticMapError(ValueError):
    """
    A diacritic table entry is not usable as a regex fragment.

    Raised when a DiacriticMap is constructed or loaded with an invalid
    entry, and when a pattern built from a plain-dict table fails to
    compile. Carries enough context to fix the table.

    Attributes:
        key: Offending base letter, if it could be identified
        fragment: Offending regex fragment, if it could be identified
        pattern: Full built pattern that failed to compile, if any
    """

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        fragment: Optional[str] = None,
        pattern: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.fragment = fragment
        self.pattern = pattern

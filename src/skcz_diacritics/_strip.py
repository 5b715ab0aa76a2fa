"""
Stripping and escaping utilities for Slovak and Czech text.

Provides lightweight functions that remove diacritical marks from text
and escape regular-expression metacharacters, used to turn a raw search
term into a literal base-letter skeleton.

No external dependencies: only unicodedata and re.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = ["normalize_diacritics", "escape_literal"]

# Combining Diacritical Marks block (acute, caron, ring, diaeresis, ...)
_COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")

# Characters with special meaning outside a character class
_SPECIAL_CHARS_RE = re.compile(r"[.*+?^${}()|\[\]\\]")


def normalize_diacritics(text: str) -> str:
    """
    Remove diacritical marks, preserving case.

    Decomposes the text to NFD (base letter + combining marks) and drops
    every combining mark. The result is not recomposed.

    Args:
        text: Slovak or Czech text (possibly with diacritics)

    Returns:
        Text with diacritics removed

    Example:
        >>> normalize_diacritics("Košice")
        'Kosice'
        >>> normalize_diacritics("Přerov")
        'Prerov'
    """
    decomposed = unicodedata.normalize("NFD", text)
    return _COMBINING_MARKS_RE.sub("", decomposed)


def escape_literal(text: str) -> str:
    """
    Escape regular-expression metacharacters so text matches literally.

    Only ``. * + ? ^ $ { } ( ) | [ ] \\`` are escaped; letters (including
    non-ASCII ones) pass through. Escaping twice double-escapes.

    Example:
        >>> escape_literal("file.txt")
        'file\\\\.txt'
    """
    return _SPECIAL_CHARS_RE.sub(r"\\\g<0>", text)

"""
Diacritic-insensitive pattern building and search for Slovak and Czech.

A query is reduced to its base-letter skeleton (diacritics stripped,
regex metacharacters escaped), then every letter the table knows is
replaced by the table's character class. The resulting pattern matches
the query with any diacritic variant in place of each mapped letter.

Example:
    >>> from skcz_diacritics.maps import CZECH
    >>> build_pattern("Město", CZECH)
    'M[e,é,ě][s,š][t,ť][o,ó]'
    >>> search("Potřebuji zajít do Plzně", "plzne", CZECH)
    True

Matching cost depends on the regex engine: very large tables or many
query words produce long alternations and gaps that can backtrack
heavily on adversarial text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Optional

from skcz_diacritics._strip import escape_literal, normalize_diacritics
from skcz_diacritics.errors import DiacriticMapError
from skcz_diacritics.maps._tables import SLOVAK_CZECH, DiacriticMap, _compile_fragment

__all__ = [
    "DiacriticMatcher",
    "build_pattern",
    "search",
    "search_multi_word",
]

logger = logging.getLogger(__name__)

# Non-greedy "anything in between" joining the words of a multi-word query
_WORD_GAP = ".*?"

# Word separators: ASCII whitespace, NBSP, Unicode space separators,
# line/paragraph separators and the BOM. U+001C-U+001F do not split.
_WORD_SPLIT_RE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


# =============================================================================
# Pattern Building
# =============================================================================


def _trigger_for(diacritic_map: Mapping[str, str]) -> Optional[re.Pattern[str]]:
    """Return the case-insensitive alternation of the table's keys."""
    if isinstance(diacritic_map, DiacriticMap):
        return diacritic_map.trigger_pattern
    if not diacritic_map:
        return None
    return re.compile(
        "|".join(escape_literal(k) for k in diacritic_map), re.IGNORECASE
    )


def build_pattern(query: str, diacritic_map: Mapping[str, str]) -> str:
    """
    Transform a query into a diacritic-insensitive regex pattern.

    Args:
        query: Search term (may contain diacritics and punctuation)
        diacritic_map: Base letter → regex fragment table

    Returns:
        Pattern string ready for re.compile(); "" for an empty query.
        An empty pattern matches everywhere, so callers using this
        directly must handle that case themselves.

    Example:
        >>> from skcz_diacritics.maps import SLOVAK
        >>> build_pattern("Košice", SLOVAK)
        'K[o,ó,ô][s,š][i,í][c,č][e,é]'
        >>> build_pattern("file.txt", {})
        'file\\\\.txt'
    """
    if not query:
        return ""

    skeleton = escape_literal(normalize_diacritics(query))

    trigger = _trigger_for(diacritic_map)
    if trigger is None:
        return skeleton

    def _replace(match: re.Match[str]) -> str:
        char = match.group(0)
        # Tables are keyed by lowercase letters; fragments go in unescaped
        return diacritic_map.get(char.lower()) or char

    return trigger.sub(_replace, skeleton)


def _find_bad_entry(diacritic_map: Mapping[str, str]) -> tuple[Optional[str], Optional[str]]:
    """Locate the first table entry whose fragment does not compile."""
    for key, fragment in diacritic_map.items():
        try:
            _compile_fragment(fragment)
        except (re.error, TypeError):
            return key, fragment
    return None, None


def _compile(pattern: str, flags: int, diacritic_map: Mapping[str, str]) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        key, fragment = _find_bad_entry(diacritic_map)
        if key is not None:
            message = (
                f"Diacritic table entry {key!r} -> {fragment!r} produced an "
                f"invalid pattern {pattern!r}: {exc}"
            )
        else:
            message = f"Built pattern {pattern!r} does not compile: {exc}"
        raise DiacriticMapError(
            message, key=key, fragment=fragment, pattern=pattern
        ) from exc


# =============================================================================
# Matcher Class
# =============================================================================


class DiacriticMatcher:
    """
    Diacritic-insensitive matcher bound to one table.

    Example:
        >>> matcher = DiacriticMatcher()
        >>> matcher.search("Chcem ísť do Bratislavy", "ist")
        True
        >>> matcher.search_multi_word("hlavné mesto Slovenska", "slovenska hlavne")
        False
    """

    def __init__(
        self,
        diacritic_map: Mapping[str, str] = SLOVAK_CZECH,
        *,
        case_sensitive: bool = False,
    ) -> None:
        self.diacritic_map = diacritic_map
        self.case_sensitive = case_sensitive

    @property
    def flags(self) -> int:
        return 0 if self.case_sensitive else re.IGNORECASE

    def pattern(self, query: str) -> str:
        """Return the single-term pattern for a query."""
        return build_pattern(query, self.diacritic_map)

    def words(self, query: str) -> list[str]:
        """Split a query into words on runs of whitespace."""
        return [word for word in _WORD_SPLIT_RE.split(query) if word]

    def multi_word_pattern(self, query: str) -> str:
        """
        Return the ordered multi-word pattern for a query.

        Words are split on whitespace and joined with a non-greedy gap,
        so "a b" requires "a" before "b" on the same line, with anything
        (or nothing) between them. Returns "" if the query has no words.
        """
        return _WORD_GAP.join(
            build_pattern(word, self.diacritic_map) for word in self.words(query)
        )

    def compile(self, query: str) -> re.Pattern[str]:
        """
        Compile the single-term pattern for a query.

        Raises:
            DiacriticMapError: If a table fragment breaks the pattern
        """
        return _compile(self.pattern(query), self.flags, self.diacritic_map)

    def compile_multi_word(self, query: str) -> re.Pattern[str]:
        """
        Compile the multi-word pattern; the gap does not cross line breaks.

        Raises:
            DiacriticMapError: If a table fragment breaks the pattern
        """
        pattern = self.multi_word_pattern(query)
        logger.debug("Multi-word pattern for %r: %s", query, pattern)
        return _compile(pattern, self.flags, self.diacritic_map)

    def search(self, text: str, query: str) -> bool:
        """
        Check whether the query occurs anywhere in the text.

        Empty text or query never matches.
        """
        if not text or not query:
            return False
        return self.compile(query).search(text) is not None

    def search_multi_word(self, text: str, query: str) -> bool:
        """
        Check whether all query words occur in the text, in order.

        Empty text, empty query or a whitespace-only query never matches.
        """
        if not text or not query:
            return False
        if not self.words(query):
            return False
        return self.compile_multi_word(query).search(text) is not None

    def __repr__(self) -> str:
        name = getattr(self.diacritic_map, "name", "custom")
        return f"DiacriticMatcher(table={name!r}, case_sensitive={self.case_sensitive})"


# =============================================================================
# Module-level Convenience Functions
# =============================================================================


def search(
    text: str,
    query: str,
    diacritic_map: Mapping[str, str],
    case_sensitive: bool = False,
) -> bool:
    """
    Search text for a query, ignoring diacritics.

    Args:
        text: Text to search in
        query: Search term (may contain diacritics)
        diacritic_map: Table to use, e.g. SLOVAK
        case_sensitive: Match case exactly (default: ignore case)

    Returns:
        True if the query occurs anywhere in the text

    Raises:
        DiacriticMapError: If a table fragment breaks the pattern

    Example:
        >>> from skcz_diacritics.maps import CZECH
        >>> search("Potřebuji zajít do Plzně na oběd, v Přerově.", "prerov", CZECH)
        True
    """
    return DiacriticMatcher(diacritic_map, case_sensitive=case_sensitive).search(text, query)


def search_multi_word(
    text: str,
    query: str,
    diacritic_map: Mapping[str, str],
    case_sensitive: bool = False,
) -> bool:
    """
    Search text for several words in order, ignoring diacritics.

    Args:
        text: Text to search in
        query: Whitespace-separated words (may contain diacritics)
        diacritic_map: Table to use, e.g. SLOVAK_CZECH
        case_sensitive: Match case exactly (default: ignore case)

    Returns:
        True if every word occurs, left to right, with anything between

    Raises:
        DiacriticMapError: If a table fragment breaks the pattern

    Example:
        >>> text = "Chcem navštíviť hlavné mesto Slovenska, Bratislavu."
        >>> search_multi_word(text, "hlavne mesto slovenska", SLOVAK_CZECH)
        True
        >>> search_multi_word(text, "slovenska hlavne", SLOVAK_CZECH)
        False
    """
    return DiacriticMatcher(diacritic_map, case_sensitive=case_sensitive).search_multi_word(
        text, query
    )

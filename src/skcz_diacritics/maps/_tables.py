"""
Diacritic tables for Slovak and Czech.

Provides:
- DiacriticMap: immutable base-letter → regex-fragment mapping with
  fail-fast validation, merging and save/load
- SLOVAK, CZECH, SLOVAK_CZECH: the built-in tables
- get_map(): look up a built-in table by name
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Union

from skcz_diacritics._strip import escape_literal
from skcz_diacritics.errors import DiacriticMapError

__all__ = [
    "DiacriticMap",
    "SLOVAK",
    "CZECH",
    "SLOVAK_CZECH",
    "TABLES",
    "get_map",
    "check_entry",
]

logger = logging.getLogger(__name__)

# Separator between letters inside a table fragment, e.g. "[a,á,ä]"
_SEPARATOR = ","


def _compile_fragment(fragment: str) -> "re.Pattern[str]":
    """Compile a fragment alone and embedded (twice, after a literal) in a pattern."""
    re.compile("x" + fragment + fragment)
    return re.compile(fragment)


def check_entry(key: object, fragment: object) -> None:
    """
    Validate a single table entry.

    Args:
        key: Base letter (must be one lowercase letter)
        fragment: Regex fragment enumerating the letter and its variants

    Raises:
        DiacriticMapError: If the key is not a single lowercase letter, or
            the fragment is empty, does not compile (alone or embedded in
            a longer pattern), or does not match its own base letter.
    """
    if not isinstance(key, str) or len(key) != 1 or not key.islower():
        raise DiacriticMapError(
            f"Table key must be a single lowercase letter, got {key!r}",
            key=key if isinstance(key, str) else None,
            fragment=fragment if isinstance(fragment, str) else None,
        )
    if not isinstance(fragment, str) or not fragment:
        raise DiacriticMapError(
            f"Fragment for {key!r} must be a non-empty string, got {fragment!r}",
            key=key,
        )
    try:
        compiled = _compile_fragment(fragment)
    except re.error as exc:
        raise DiacriticMapError(
            f"Fragment for {key!r} is not a valid regex: {fragment!r} ({exc})",
            key=key,
            fragment=fragment,
        ) from exc
    if compiled.fullmatch(key) is None:
        raise DiacriticMapError(
            f"Fragment for {key!r} does not match its own base letter: {fragment!r}",
            key=key,
            fragment=fragment,
        )


def _class_members(key: str, fragment: str) -> list[str]:
    """Return the letters enumerated by a "[x,y,z]" fragment."""
    body = fragment[1:-1]
    if (
        not fragment.startswith("[")
        or not fragment.endswith("]")
        or any(c in body for c in "[]\\^-")
    ):
        raise ValueError(
            f"Fragment for {key!r} is not a plain character class: {fragment!r}"
        )
    return [c for c in body if c != _SEPARATOR]


def _build_fragment(letters: Iterable[str]) -> str:
    return "[" + _SEPARATOR.join(letters) + "]"


class DiacriticMap(Mapping):
    """
    Immutable mapping from a lowercase base letter to a regex fragment.

    Each fragment encodes the base letter and its diacritic variants,
    e.g. ``"a" -> "[a,á,ä]"``. Entries are validated on construction, so a
    broken table fails at import/load time instead of at search time.
    Fragments are inserted into built patterns unescaped.

    Example:
        >>> table = DiacriticMap({"e": "[e,é,ě]"}, name="demo")
        >>> table["e"]
        '[e,é,ě]'
        >>> table.variants("e")
        ['e', 'é', 'ě']
    """

    def __init__(self, patterns: Mapping[str, str], name: str = "custom") -> None:
        for key, fragment in patterns.items():
            check_entry(key, fragment)
        self._patterns = dict(patterns)
        self.name = name

        # Trigger alternation used by the pattern builder
        if self._patterns:
            self._trigger = re.compile(
                "|".join(escape_literal(k) for k in self._patterns), re.IGNORECASE
            )
        else:
            self._trigger = None

    def __getitem__(self, key: str) -> str:
        return self._patterns[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __hash__(self) -> int:
        return hash(frozenset(self._patterns.items()))

    @property
    def trigger_pattern(self) -> "re.Pattern[str] | None":
        """Case-insensitive alternation of all keys (None for an empty table)."""
        return self._trigger

    def variants(self, key: str) -> list[str]:
        """
        Return the letters a character-class fragment enumerates.

        Raises:
            KeyError: If the key is not in the table
            ValueError: If the fragment is not a plain "[x,y,z]" class
        """
        return _class_members(key, self._patterns[key])

    @classmethod
    def from_variants(
        cls,
        variants: Mapping[str, Union[str, Iterable[str]]],
        name: str = "custom",
    ) -> DiacriticMap:
        """
        Build a table from plain variant letters.

        Args:
            variants: Base letter → its diacritic variants, e.g. ``{"a": "áä"}``
            name: Table name

        Returns:
            A DiacriticMap with fragments like ``"[a,á,ä]"``

        Example:
            >>> DiacriticMap.from_variants({"r": "ŕř"})["r"]
            '[r,ŕ,ř]'
        """
        patterns = {}
        for key, letters in variants.items():
            members = [key]
            for letter in letters:
                if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
                    raise DiacriticMapError(
                        f"Variant for {key!r} must be a single letter, got {letter!r}",
                        key=key,
                    )
                if letter not in members:
                    members.append(letter)
            patterns[key] = _build_fragment(members)
        return cls(patterns, name=name)

    @classmethod
    def merge(cls, *maps: DiacriticMap, name: str = "merged") -> DiacriticMap:
        """
        Union the variants of several tables, per base letter.

        Letters keep first-seen order, so ``merge(SLOVAK, CZECH)`` gives
        ``"[r,ŕ,ř]"`` for ``r``.
        """
        merged: dict[str, list[str]] = {}
        for table in maps:
            for key in table:
                members = merged.setdefault(key, [])
                for letter in _class_members(key, table[key]):
                    if letter not in members:
                        members.append(letter)
        return cls({k: _build_fragment(v) for k, v in merged.items()}, name=name)

    def save(self, path: Union[str, Path]) -> None:
        """Save the table to a JSON file."""
        data = {"name": self.name, "patterns": self._patterns}
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        logger.debug("Saved diacritic table %r to %s", self.name, path)

    @classmethod
    def load(cls, path: Union[str, Path]) -> DiacriticMap:
        """
        Load a table from a JSON file written by save().

        Raises:
            DiacriticMapError: If any entry is invalid
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        table = cls(data["patterns"], name=data.get("name", Path(path).stem))
        logger.debug("Loaded diacritic table %r (%d letters) from %s", table.name, len(table), path)
        return table

    def __repr__(self) -> str:
        return f"DiacriticMap(name={self.name!r}, letters={''.join(self._patterns)!r})"


# =============================================================================
# Built-in Tables
# =============================================================================

SLOVAK = DiacriticMap(
    {
        "a": "[a,á,ä]",
        "e": "[e,é]",
        "i": "[i,í]",
        "o": "[o,ó,ô]",
        "u": "[u,ú]",
        "y": "[y,ý]",
        "l": "[l,ľ,ĺ]",
        "r": "[r,ŕ]",
        "c": "[c,č]",
        "d": "[d,ď]",
        "n": "[n,ň]",
        "s": "[s,š]",
        "t": "[t,ť]",
        "z": "[z,ž]",
    },
    name="slovak",
)

CZECH = DiacriticMap(
    {
        "a": "[a,á]",
        "e": "[e,é,ě]",
        "i": "[i,í]",
        "o": "[o,ó]",
        "u": "[u,ú]",
        "y": "[y,ý]",
        "c": "[c,č]",
        "d": "[d,ď]",
        "n": "[n,ň]",
        "r": "[r,ř]",
        "s": "[s,š]",
        "t": "[t,ť]",
        "z": "[z,ž]",
    },
    name="czech",
)

# Every variant from both languages: ä, ô, ľ, ĺ, ŕ (SK) and ě, ř (CZ)
SLOVAK_CZECH = DiacriticMap(
    {
        "a": "[a,á,ä]",
        "e": "[e,é,ě]",
        "i": "[i,í]",
        "o": "[o,ó,ô]",
        "u": "[u,ú]",
        "y": "[y,ý]",
        "l": "[l,ľ,ĺ]",
        "r": "[r,ŕ,ř]",
        "c": "[c,č]",
        "d": "[d,ď]",
        "n": "[n,ň]",
        "s": "[s,š]",
        "t": "[t,ť]",
        "z": "[z,ž]",
    },
    name="slovak_czech",
)

TABLES: dict[str, DiacriticMap] = {
    "slovak": SLOVAK,
    "czech": CZECH,
    "slovak_czech": SLOVAK_CZECH,
}

_ALIASES = {
    "sk": "slovak",
    "cs": "czech",
    "cz": "czech",
    "sk_cz": "slovak_czech",
    "sk_cs": "slovak_czech",
}


def get_map(name: str) -> DiacriticMap:
    """
    Return a built-in table by name.

    Accepts "slovak", "czech", "slovak_czech" and the short aliases
    "sk", "cs"/"cz", "sk_cz" (case-insensitive, "-" treated as "_").

    Raises:
        ValueError: If the name is unknown
    """
    key = name.lower().replace("-", "_")
    key = _ALIASES.get(key, key)
    if key not in TABLES:
        raise ValueError(
            f"Unknown diacritic table: {name!r}. "
            f"Available: {', '.join(sorted(TABLES))}"
        )
    return TABLES[key]

"""
Diacritic-insensitive search submodule.

Re-exports the pattern builder, the matcher class and the module-level
search functions.
"""

from skcz_diacritics.search._rules import (
    DiacriticMatcher,
    build_pattern,
    search,
    search_multi_word,
)

__all__ = [
    "DiacriticMatcher",
    "build_pattern",
    "search",
    "search_multi_word",
]

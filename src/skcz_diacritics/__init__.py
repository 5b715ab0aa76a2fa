"""
skcz-diacritics: diacritic-insensitive search for Slovak and Czech text.

Builds regular expressions that match a search term with any diacritic
variant of its letters, for single terms and ordered multi-word queries.

Basic usage:
    >>> from skcz_diacritics import search, SLOVAK
    >>> search("Chcem ísť do Bratislavy", "ist", SLOVAK)
    True

Multi-word usage:
    >>> from skcz_diacritics import search_multi_word, SLOVAK_CZECH
    >>> search_multi_word("hlavné mesto Slovenska", "hlavne slovenska", SLOVAK_CZECH)
    True

Pattern building:
    >>> from skcz_diacritics import build_pattern, CZECH
    >>> build_pattern("Přerov", CZECH)
    'P[r,ř][e,é,ě][r,ř][o,ó]v'
"""

from skcz_diacritics._strip import escape_literal, normalize_diacritics
from skcz_diacritics.errors import DiacriticMapError
from skcz_diacritics.maps import (
    CZECH,
    SLOVAK,
    SLOVAK_CZECH,
    TABLES,
    DiacriticMap,
    get_map,
)
from skcz_diacritics.search import (
    DiacriticMatcher,
    build_pattern,
    search,
    search_multi_word,
)

__version__ = "0.1.0"
__all__ = [
    "normalize_diacritics",
    "escape_literal",
    "build_pattern",
    "search",
    "search_multi_word",
    "DiacriticMatcher",
    "DiacriticMap",
    "DiacriticMapError",
    "SLOVAK",
    "CZECH",
    "SLOVAK_CZECH",
    "TABLES",
    "get_map",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "DiacriticSearchComponent":
        try:
            from skcz_diacritics.spacy import DiacriticSearchComponent
            return DiacriticSearchComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install skcz-diacritics[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

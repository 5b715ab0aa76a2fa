"""
Diacritic tables submodule.

Provides the DiacriticMap type and the built-in Slovak, Czech and
combined tables.

Basic usage:
    >>> from skcz_diacritics.maps import SLOVAK, get_map
    >>> SLOVAK["o"]
    '[o,ó,ô]'
    >>> get_map("cs")["r"]
    '[r,ř]'
"""

from skcz_diacritics.maps._tables import (
    CZECH,
    SLOVAK,
    SLOVAK_CZECH,
    TABLES,
    DiacriticMap,
    check_entry,
    get_map,
)

__all__ = [
    "DiacriticMap",
    "SLOVAK",
    "CZECH",
    "SLOVAK_CZECH",
    "TABLES",
    "check_entry",
    "get_map",
]

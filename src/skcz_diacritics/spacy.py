"""
spaCy integration for skcz-diacritics.

Provides a pipeline component that flags which configured queries occur
in a document, ignoring diacritics.

Example:
    >>> import spacy
    >>> import skcz_diacritics.spacy
    >>> nlp = spacy.blank("sk")
    >>> nlp.add_pipe("diacritic_search", config={"queries": ["hlavne mesto"]})
    >>> doc = nlp("Bratislava je hlavné mesto.")
    >>> doc._.diacritic_matches
    ['hlavne mesto']
"""

import re
from typing import List, Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from skcz_diacritics._strip import normalize_diacritics
from skcz_diacritics.maps._tables import get_map
from skcz_diacritics.search._rules import DiacriticMatcher

__all__ = [
    "DiacriticSearchComponent",
    "create_diacritic_search",
    "get_search_pipe",
]


@Language.factory(
    "diacritic_search",
    default_config={
        "queries": [],
        "table": "slovak_czech",
        "multi_word": True,
        "case_sensitive": False,
    },
    assigns=["doc._.diacritic_matches", "token._.base_text"],
)
def create_diacritic_search(
    nlp: Language,
    name: str,
    queries: List[str],
    table: str = "slovak_czech",
    multi_word: bool = True,
    case_sensitive: bool = False,
) -> "DiacriticSearchComponent":
    """Create a diacritic-insensitive search pipeline component."""
    return DiacriticSearchComponent(
        nlp,
        name,
        queries=queries,
        table=table,
        multi_word=multi_word,
        case_sensitive=case_sensitive,
    )


class DiacriticSearchComponent:
    """
    spaCy pipeline component for diacritic-insensitive query matching.

    Queries are compiled once when the component is created, so a bad
    table name or table entry fails when the pipe is added.

    Extensions:
        - Doc._.diacritic_matches: Configured queries found in the doc,
          in configuration order.
        - Token._.base_text: Token text with diacritics removed.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        queries: Optional[List[str]] = None,
        table: str = "slovak_czech",
        multi_word: bool = True,
        case_sensitive: bool = False,
    ) -> None:
        self.name = name
        self.queries = list(queries or [])
        self.table = table
        self.multi_word = multi_word
        self.case_sensitive = case_sensitive

        # Raises ValueError for unknown table names
        self._matcher = DiacriticMatcher(get_map(table), case_sensitive=case_sensitive)
        self._patterns: list[tuple[str, re.Pattern]] = []
        for query in self.queries:
            if multi_word:
                if not self._matcher.words(query):
                    continue
                compiled = self._matcher.compile_multi_word(query)
            else:
                if not query:
                    continue
                compiled = self._matcher.compile(query)
            self._patterns.append((query, compiled))

        if not Doc.has_extension("diacritic_matches"):
            Doc.set_extension("diacritic_matches", default=None)
        if not Token.has_extension("base_text"):
            Token.set_extension("base_text", default=None)

    def __call__(self, doc: Doc) -> Doc:
        text = doc.text
        doc._.diacritic_matches = [
            query for query, compiled in self._patterns if text and compiled.search(text)
        ]

        for token in doc:
            token._.base_text = normalize_diacritics(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "DiacriticSearchComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "DiacriticSearchComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_search_pipe(nlp: Language) -> Optional[DiacriticSearchComponent]:
    """Get the diacritic search component from a pipeline."""
    if "diacritic_search" in nlp.pipe_names:
        return nlp.get_pipe("diacritic_search")
    return None

"""Shared fixtures for skcz-diacritics tests."""

import pytest

from skcz_diacritics.maps import CZECH, SLOVAK, SLOVAK_CZECH
from skcz_diacritics.search import DiacriticMatcher


@pytest.fixture
def slovak_text() -> str:
    return "Chcem ísť do Bratislavy, do Múzea."


@pytest.fixture
def czech_text() -> str:
    return "Potřebuji zajít do Plzně na oběd, v Přerově."


@pytest.fixture
def multi_word_text() -> str:
    return "Chcem navštíviť hlavné mesto Slovenska, Bratislavu."


@pytest.fixture
def slovak_matcher() -> DiacriticMatcher:
    """Return a case-insensitive matcher over the Slovak table."""
    return DiacriticMatcher(SLOVAK)


@pytest.fixture
def czech_matcher() -> DiacriticMatcher:
    """Return a case-insensitive matcher over the Czech table."""
    return DiacriticMatcher(CZECH)


@pytest.fixture
def combined_matcher() -> DiacriticMatcher:
    """Return a case-insensitive matcher over the Slovak+Czech table."""
    return DiacriticMatcher(SLOVAK_CZECH)

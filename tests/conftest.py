"""Shared test fixtures for the bibicode test suite.

WHY: Most test modules convert between the same handful of numeral
systems. Centralizing the alphabets here avoids duplication and keeps
the literal digit lists in one place.

HOW: Pytest fixtures build fresh alphabets per test (so prefix mutations
never leak between tests) and an isolated data directory environment.

RULES:
- Fixtures return new instances on every call
- data_home isolates BIBICODE_DATA_DIR and the XDG variables in tmp_path
"""

from typing import List

import pytest

from bibicode.core.alphabet import DigitAlphabet
from bibicode.core.registry import from_tag


BIBI_DIGITS: List[str] = [
    "HO", "HA", "HE", "HI", "BO", "BA", "BE", "BI",
    "KO", "KA", "KE", "KI", "DO", "DA", "DE", "DI",
]

BUDU_DASH_CONSONANTS: List[str] = [
    "B", "K", "D", "F", "G", "J", "L", "M", "N", "P", "R", "S", "T", "V", "X", "Z",
]
BUDU_DASH_VOWELS: List[str] = ["a-", "i-", "o-", "u-"]


@pytest.fixture
def dec():
    return from_tag("dec")


@pytest.fixture
def hex_():
    return from_tag("hex")


@pytest.fixture
def bin_():
    return from_tag("bin")


@pytest.fixture
def bibi():
    """Bibi-binary with two-character digits."""
    return DigitAlphabet("", [BIBI_DIGITS])


@pytest.fixture
def budu_dash():
    """Consonant x dashed-vowel system: 64 digits, three characters wide."""
    return DigitAlphabet("", [BUDU_DASH_CONSONANTS, BUDU_DASH_VOWELS])


@pytest.fixture
def data_home(tmp_path, monkeypatch):
    """Point every description search directory inside tmp_path.

    Returns the BIBICODE_DATA_DIR directory (created, empty).
    """
    override = tmp_path / "override"
    override.mkdir()
    monkeypatch.setenv("BIBICODE_DATA_DIR", str(override))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-home"))
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path / "xdg-system"))
    return override

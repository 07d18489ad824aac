"""Predefined numeral systems selectable by tag name.

WHY: Most conversions involve well-known systems (decimal, hexadecimal,
base58) or the project's showcase systems (Bibi-binary, budu, utf8).
Users pick them by a short tag instead of writing a description file.

HOW: Each tag maps to a builder that constructs a fresh DigitAlphabet.
predefined_alphabets() and from_tag() build on every call, so no caller
ever shares (and possibly mutates the prefix of) another caller's
instance.

RULES:
- Tags: bin, oct, dec, hex, bibi, budu, utf8, base58, chin
- hex digits are lowercase
- Unknown tags raise BadTag listing the available names
- Nothing here is cached; every call returns new alphabets
"""

from __future__ import annotations

from typing import Callable, Dict

from bibicode.core.alphabet import DigitAlphabet
from bibicode.core.errors import BadTag

_DECIMAL = "0123456789"
_HEXADECIMAL = "0123456789abcdef"

# Bibi-binary digits as defined by Boby Lapointe (1968).
_BIBI = ["HO", "HA", "HE", "HI", "BO", "BA", "BE", "BI",
         "KO", "KA", "KE", "KI", "DO", "DA", "DE", "DI"]

_BUDU_CONSONANTS = ["B", "K", "D", "F", "G", "J", "L", "M",
                    "N", "P", "R", "S", "T", "V", "X", "Z"]
_BUDU_VOWELS = ["a", "i", "o", "u"]

# Filled and outlined variants of the same ten symbols.
_UTF8_FILLED = ["■", "◀", "●", "♠", "♥",
                "♦", "♣", "⚑", "◆", "★"]
_UTF8_OUTLINED = ["□", "◁", "○", "♤", "♡",
                  "♢", "♧", "⚐", "◇", "☆"]

# Bitcoin alphabet: no 0, O, I or l.
_BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# Consecutive CJK unified ideographs.
_CHIN_FIRST = 0x4E00
_CHIN_RADIX = 3072

_BUILDERS: Dict[str, Callable[[], DigitAlphabet]] = {
    "bin": lambda: DigitAlphabet("0b", ["01"]),
    "oct": lambda: DigitAlphabet("0o", ["01234567"]),
    "dec": lambda: DigitAlphabet("", [_DECIMAL]),
    "hex": lambda: DigitAlphabet("0x", [_HEXADECIMAL]),
    "bibi": lambda: DigitAlphabet("", [_BIBI]),
    "budu": lambda: DigitAlphabet("", [_BUDU_CONSONANTS, _BUDU_VOWELS]),
    "utf8": lambda: DigitAlphabet("", [_UTF8_FILLED, _UTF8_OUTLINED]),
    "base58": lambda: DigitAlphabet("", [_BASE58]),
    "chin": lambda: DigitAlphabet(
        "", [[chr(code) for code in range(_CHIN_FIRST, _CHIN_FIRST + _CHIN_RADIX)]]
    ),
}

PREDEFINED_TAGS = tuple(_BUILDERS)
"""Names accepted by from_tag(), in display order."""

DESCRIPTIONS: Dict[str, str] = {
    "bin": "binary",
    "oct": "octal",
    "dec": "decimal",
    "hex": "hexadecimal",
    "bibi": "Bibi-binary as defined by Boby Lapointe",
    "budu": "experimental, easy to read (consonant + vowel)",
    "utf8": "experimental, pairs of UTF-8 symbols",
    "base58": "base 58 as used in bitcoin addresses",
    "chin": "experimental, CJK ideographs",
}
"""One-line description per tag, shown by ``bibicode --list``."""


def from_tag(tag: str) -> DigitAlphabet:
    """Build the predefined alphabet named ``tag``.

    Raises:
        BadTag: If ``tag`` is not one of PREDEFINED_TAGS.
    """
    builder = _BUILDERS.get(tag)
    if builder is None:
        raise BadTag(tag, list(PREDEFINED_TAGS))
    return builder()


def predefined_alphabets() -> Dict[str, DigitAlphabet]:
    """Return a freshly built ``{tag: alphabet}`` table."""
    return {tag: builder() for tag, builder in _BUILDERS.items()}

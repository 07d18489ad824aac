"""Core alphabet model and conversion engine.

WHY: The core package contains the stable heart of bibicode: digit
alphabets and the binary-pivoted converter. The CLI, description files,
and formatters all build on it, so it must stay free of I/O.

HOW: alphabet.py defines and validates numeral systems, registry.py
builds the predefined ones, converter.py implements the two-phase
conversion, extractor.py splits free text into numbers, batch.py runs
many conversions sharing one target, ir.py holds the dataclasses that
pass between them, and errors.py the closed error set.

RULES:
- No file, network, or terminal I/O in this package
- No module-level mutable state; registries build fresh alphabets
- Errors are raised, never logged and swallowed
"""

from bibicode.core.alphabet import DigitAlphabet, autodetect
from bibicode.core.converter import RadixConverter, from_binary, to_binary
from bibicode.core.errors import (
    BadAlphabet,
    BadRegularExpression,
    BadTag,
    BibiError,
    EntryMismatch,
    RegexMismatch,
)
from bibicode.core.extractor import extract_numbers
from bibicode.core.registry import PREDEFINED_TAGS, from_tag, predefined_alphabets

__all__ = [
    "DigitAlphabet",
    "autodetect",
    "RadixConverter",
    "to_binary",
    "from_binary",
    "extract_numbers",
    "from_tag",
    "predefined_alphabets",
    "PREDEFINED_TAGS",
    "BibiError",
    "BadAlphabet",
    "EntryMismatch",
    "BadTag",
    "BadRegularExpression",
    "RegexMismatch",
]

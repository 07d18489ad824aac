"""Alphabet sources outside the core: description files and data directories.

WHY: The core only knows how to build alphabets from digit classes. Users
also pick alphabets by file path or by the name of a description stored
in their data directory.

HOW: description.py parses JSON description files, discovery.py locates
them and resolves a user-supplied name to a DigitAlphabet.

RULES:
- All file I/O for alphabets lives here, not in the core
- Failures surface as BadAlphabet or BadTag
"""

from bibicode.sources.description import AlphabetDescription, load_description, parse_description
from bibicode.sources.discovery import data_dirs, discover_descriptions, resolve_alphabet

__all__ = [
    "AlphabetDescription",
    "load_description",
    "parse_description",
    "data_dirs",
    "discover_descriptions",
    "resolve_alphabet",
]

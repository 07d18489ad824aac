"""Typed errors raised by the alphabet model, converter, and extractor.

WHY: Callers (the CLI, batch conversion, library users) need to tell a
malformed alphabet from a bad input number or a broken regex without
parsing messages. A small closed hierarchy gives each failure its own type.

HOW: Every error derives from BibiError, which itself derives from
ValueError. Collaborator layers that already handle ValueError (bad
configuration, bad user input) handle conversion failures the same way.

RULES:
- The set is closed: BadAlphabet, EntryMismatch, BadTag,
  BadRegularExpression, RegexMismatch
- All errors are terminal; nothing in the core retries or falls back
- Messages are complete sentences suitable for "Error: {message}" output
"""

from __future__ import annotations


class BibiError(ValueError):
    """Base class for every error raised by bibicode."""


class BadAlphabet(BibiError):
    """Malformed alphabet: empty class, unequal digit lengths, duplicates,
    fewer than two digits, or an unreadable description file."""


class EntryMismatch(BibiError):
    """An input chunk is not a digit of the source alphabet.

    Attributes:
        entry: The full input string being converted (None for direct
               lookups outside a conversion).
        chunk: The offending chunk or index.
    """

    def __init__(self, message: str, entry: str | None = None, chunk: object = None):
        super().__init__(message)
        self.entry = entry
        self.chunk = chunk


class BadTag(BibiError):
    """Unknown predefined alphabet name."""

    def __init__(self, tag: str, available: list[str] | None = None):
        message = "Unknown numeral system '{}'.".format(tag)
        if available:
            message += " Available: {}".format(", ".join(available))
        super().__init__(message)
        self.tag = tag


class BadRegularExpression(BibiError):
    """The extraction pattern failed to compile."""

    def __init__(self, pattern: str, reason: str):
        super().__init__("Invalid regular expression '{}': {}".format(pattern, reason))
        self.pattern = pattern


class RegexMismatch(BibiError):
    """The extraction pattern compiled but did not match the text."""

    def __init__(self, pattern: str, text: str):
        super().__init__("Regular expression '{}' does not match '{}'".format(pattern, text))
        self.pattern = pattern
        self.text = text

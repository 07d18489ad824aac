"""Digit alphabets: construction, validation, lookup, and prefix autodetection.

WHY: A numeral system is defined entirely by its ordered digits and an
optional literal prefix ("0x", "0b"). Digits may be multi-character and
may be built combinatorially from smaller classes (the Bibi-binary system
is four consonants times four vowels). The converter needs fast lookups
in both directions and a guarantee that the digit set is well formed.

HOW: DigitAlphabet takes an ordered list of digit classes and combines
them by Cartesian product: the first class is the most significant
component and the last class varies fastest. The forward table
(digit -> index) and backward table (index -> digit) are built in a
single pass and never mutated afterwards.

RULES:
- All digits have the same width (sum of the class widths)
- All digits are pairwise distinct after combination
- Radix (number of digits) is at least 2
- Index 0 is the zero digit
- The prefix is the only mutable attribute; use with_prefix() to get an
  independent copy instead of mutating a shared instance
"""

from __future__ import annotations

from itertools import product
from typing import Iterable, Optional, Sequence, Union

from bibicode.core.errors import BadAlphabet, EntryMismatch

# Smallest radix with meaningful conversion semantics.
MIN_RADIX = 2


def _validate_class(position: int, digit_class: Sequence[str]) -> int:
    """Check one digit class and return its digit width.

    RULES:
    - The class must not be empty
    - Digits must be non-empty strings of identical length
    """
    if not digit_class:
        raise BadAlphabet("Digit class {} is empty.".format(position))

    for digit in digit_class:
        if not isinstance(digit, str):
            raise BadAlphabet(
                "Digit class {} contains a non-string digit {!r}.".format(position, digit)
            )

    width = len(digit_class[0])
    if width == 0:
        raise BadAlphabet("Digit class {} contains an empty digit.".format(position))

    for digit in digit_class:
        if len(digit) != width:
            raise BadAlphabet(
                "Digit class {} mixes digit lengths: '{}' is not {} character(s) long.".format(
                    position, digit, width
                )
            )
    return width


class DigitAlphabet:
    """An ordered, uniquely indexed set of equal-width digits plus a prefix.

    WHY: The converter treats an input string as a sequence of fixed-width
    chunks, each chunk being one digit. Both phases of the conversion need
    constant-time lookups: chunk -> index while reading, index -> digit
    while writing.

    HOW: Classes are combined iteratively. Starting from the single empty
    combination, each class in turn extends every combination built so far
    with each of its entries, so earlier classes end up most significant.
    Duplicates are detected while filling the forward table.

    RULES:
    - Construction raises BadAlphabet on any malformed input
    - Index order is the Cartesian-product enumeration order
    - len(alphabet) is the radix

    Args:
        prefix: Literal string tagging this alphabet's numbers ("" for none).
        classes: Ordered digit classes. Each class is an iterable of
                 equal-length strings; a plain string works as a class of
                 single characters.
    """

    def __init__(self, prefix: str, classes: Iterable[Iterable[str]]):
        class_list = [list(digit_class) for digit_class in classes]
        if not class_list:
            raise BadAlphabet("An alphabet needs at least one digit class.")

        width = 0
        for position, digit_class in enumerate(class_list):
            width += _validate_class(position, digit_class)

        digits: list[str] = []
        index: dict[str, int] = {}
        for parts in product(*class_list):
            digit = "".join(parts)
            if digit in index:
                raise BadAlphabet("Digit '{}' appears more than once.".format(digit))
            index[digit] = len(digits)
            digits.append(digit)

        if len(digits) < MIN_RADIX:
            raise BadAlphabet(
                "An alphabet needs at least {} digits, got {}.".format(MIN_RADIX, len(digits))
            )

        self._prefix = prefix
        self._digit_width = width
        self._digits = tuple(digits)
        self._index = index

    @classmethod
    def from_digits(cls, prefix: str, digits: Iterable[str]) -> DigitAlphabet:
        """Build a single-class alphabet, e.g. ``from_digits("0b", "01")``."""
        return cls(prefix, [digits])

    @property
    def prefix(self) -> str:
        return self._prefix

    @prefix.setter
    def prefix(self, value: str) -> None:
        # Not safe while a conversion using this instance is running.
        self._prefix = value

    @property
    def digit_width(self) -> int:
        return self._digit_width

    @property
    def radix(self) -> int:
        return len(self._digits)

    @property
    def digits(self) -> tuple[str, ...]:
        return self._digits

    def with_prefix(self, prefix: str) -> DigitAlphabet:
        """Return an independent copy of this alphabet carrying another prefix.

        The lookup tables are immutable after construction, so the copy
        shares them and only the prefix differs.
        """
        clone = object.__new__(DigitAlphabet)
        clone._prefix = prefix
        clone._digit_width = self._digit_width
        clone._digits = self._digits
        clone._index = self._index
        return clone

    def index_of(self, digit: str) -> int:
        """Return the index of ``digit``; raise EntryMismatch if unknown."""
        try:
            return self._index[digit]
        except KeyError:
            raise EntryMismatch(
                "'{}' is not a digit of this numeral system.".format(digit),
                chunk=digit,
            ) from None

    def digit_at(self, index: int) -> str:
        """Return the digit for ``index``; raise EntryMismatch when out of range."""
        if isinstance(index, int) and 0 <= index < len(self._digits):
            return self._digits[index]
        raise EntryMismatch(
            "Index {!r} is outside this numeral system (radix {}).".format(index, self.radix),
            chunk=index,
        )

    def lookup(self, value: Union[str, int]) -> Union[int, str]:
        """Two-way lookup: digit string -> index, index -> digit string."""
        if isinstance(value, str):
            return self.index_of(value)
        return self.digit_at(value)

    def __contains__(self, digit: object) -> bool:
        return digit in self._index

    def __len__(self) -> int:
        return len(self._digits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitAlphabet):
            return NotImplemented
        return self._prefix == other._prefix and self._digits == other._digits

    def __hash__(self) -> int:
        # The prefix is mutable, so it stays out of the hash.
        return hash(self._digits)

    def __str__(self) -> str:
        return ", ".join(self._digits)

    def __repr__(self) -> str:
        return "DigitAlphabet(prefix={!r}, radix={}, digit_width={})".format(
            self._prefix, self.radix, self._digit_width
        )


def autodetect(candidate: str, alphabets: Iterable[DigitAlphabet]) -> Optional[DigitAlphabet]:
    """Find the single alphabet whose prefix starts ``candidate``.

    WHY: Numbers like "0x4324ae34" announce their numeral system. When the
    caller does not know the source alphabet, the prefix is the only clue.

    HOW: Keep every alphabet with a non-empty prefix that is a literal
    leading substring of the candidate.

    RULES:
    - Alphabets with an empty prefix never match
    - Exactly one match -> that alphabet
    - Zero or several matches -> None (ambiguity is not an error)
    """
    matches = [
        alphabet for alphabet in alphabets
        if alphabet.prefix and candidate.startswith(alphabet.prefix)
    ]
    if len(matches) == 1:
        return matches[0]
    return None

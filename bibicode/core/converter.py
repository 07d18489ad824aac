"""Arbitrary-radix conversion through a binary pivot.

WHY: Inputs can be thousands of digits long and alphabets can have any
radix, so neither fixed-width integers nor a per-alphabet special case
will do. Binary is a convenient pivot: every radix can be reached from
it, and moving one bit at a time needs only small-integer arithmetic.

HOW: Two phases, both digit-wise and carry-propagating:
  to_binary   repeated long division by two of the source digit array
                (reverse double dabble). Each pass yields one remainder
                bit; later passes yield more significant bits.
  from_binary shift-and-add into a growable target digit array
                (double dabble). Each bit doubles the array and adds
                itself, carrying one radix into the next position.

RULES:
- The source prefix is stripped when the entry starts with it
- Entries are cut into chunks of source.digit_width characters; a
  trailing fragment shorter than one digit is rejected with EntryMismatch
- Unknown chunks raise EntryMismatch
- Leading zero digits in the input do not reach the output
- Zero (including an entry with no digits) converts to one zero digit
- Output is target.prefix followed by digits, most significant first
- Converters never mutate their alphabets; every call recomputes
"""

from __future__ import annotations

from typing import List

from bibicode.core.alphabet import DigitAlphabet
from bibicode.core.errors import EntryMismatch
from bibicode.core.ir import PivotBinary


def strip_prefix(entry: str, alphabet: DigitAlphabet) -> str:
    """Remove ``alphabet.prefix`` from the front of ``entry`` when present."""
    prefix = alphabet.prefix
    if prefix and entry.startswith(prefix):
        return entry[len(prefix):]
    return entry


def split_digits(entry: str, alphabet: DigitAlphabet) -> List[int]:
    """Cut an unprefixed entry into digit indices, most significant first.

    Raises:
        EntryMismatch: On a trailing partial digit or an unknown chunk.
    """
    width = alphabet.digit_width
    count, leftover = divmod(len(entry), width)
    if leftover:
        raise EntryMismatch(
            "'{}' ends with a partial digit '{}' (digits are {} character(s) long).".format(
                entry, entry[count * width:], width
            ),
            entry=entry,
            chunk=entry[count * width:],
        )

    indices: List[int] = []
    for position in range(count):
        chunk = entry[position * width:(position + 1) * width]
        if chunk not in alphabet:
            raise EntryMismatch(
                "'{}' in '{}' is not a digit of the source numeral system.".format(chunk, entry),
                entry=entry,
                chunk=chunk,
            )
        indices.append(alphabet.index_of(chunk))
    return indices


def to_binary(entry: str, source: DigitAlphabet) -> PivotBinary:
    """Convert a digit string of ``source`` into its binary pivot.

    WHY: First half of the conversion. The digit array is a number in
    radix ``source.radix``; dividing it by two digit by digit exposes
    its bits one at a time, least significant first.

    HOW: Each pass walks the digits from most to least significant,
    carrying the remainder of every position into the next one as
    ``remainder * radix``. The remainder left after the last position
    is the next bit. Leading zero digits are skipped as they appear,
    and the loop ends once every digit is zero.

    RULES:
    - Cost is O(input digits x output bits)
    - The returned bits are most significant first, without leading zeros
    """
    radix = source.radix
    digits = split_digits(strip_prefix(entry, source), source)

    bits: List[int] = []
    start = 0
    while True:
        while start < len(digits) and digits[start] == 0:
            start += 1
        if start == len(digits):
            break

        remainder = 0
        for position in range(start, len(digits)):
            value = digits[position] + remainder * radix
            digits[position], remainder = divmod(value, 2)
        bits.append(remainder)

    bits.reverse()
    return PivotBinary(bits)


def from_binary(pivot: PivotBinary, target: DigitAlphabet) -> str:
    """Render a binary pivot as a digit string of ``target``.

    WHY: Second half of the conversion. Feeding bits most significant
    first into a "double and add" over the target digit array builds the
    number directly in radix ``target.radix``.

    HOW: The array is least significant first and starts as one zero
    digit. For every bit, each position becomes ``digit * 2 + carry``
    (the incoming bit is the first carry); values reaching the radix
    drop by one radix and carry 1 onwards. A carry that survives the
    last position becomes a new most significant digit.

    RULES:
    - Cost is O(pivot bits x output digits)
    - Zero yields exactly one zero digit
    """
    radix = target.radix
    digits: List[int] = [0]

    for bit in pivot.bits:
        carry = bit
        for position, digit in enumerate(digits):
            value = digit * 2 + carry
            if value >= radix:
                value -= radix
                carry = 1
            else:
                carry = 0
            digits[position] = value
        if carry:
            digits.append(1)

    return target.prefix + "".join(target.digit_at(index) for index in reversed(digits))


class RadixConverter:
    """Convert numbers from one DigitAlphabet to another.

    WHY: Callers usually convert many numbers between the same pair of
    numeral systems; holding both alphabets keeps call sites short.

    HOW: convert() runs to_binary() with the source alphabet, then
    from_binary() with the target alphabet. reverse() gives the converter
    for the opposite direction.

    RULES:
    - Stateless apart from the two alphabets it holds
    - Safe to share between threads as long as no one mutates the
      alphabets' prefixes meanwhile
    """

    def __init__(self, source: DigitAlphabet, target: DigitAlphabet):
        self.source = source
        self.target = target

    def to_binary(self, entry: str) -> PivotBinary:
        return to_binary(entry, self.source)

    def from_binary(self, pivot: PivotBinary) -> str:
        return from_binary(pivot, self.target)

    def convert(self, entry: str) -> str:
        """Convert ``entry`` (a number in the source alphabet) to the target alphabet.

        Raises:
            EntryMismatch: If the entry is not a valid number of the source.
        """
        return self.from_binary(self.to_binary(entry))

    def reverse(self) -> RadixConverter:
        return RadixConverter(self.target, self.source)

    def __repr__(self) -> str:
        return "RadixConverter(source={!r}, target={!r})".format(self.source, self.target)

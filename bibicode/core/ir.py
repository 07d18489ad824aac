"""Intermediate representation dataclasses for conversions.

WHY: The converter bridges two arbitrary alphabets through binary, and
the output layer needs converted numbers without having to know how they
were produced. Small typed containers keep those seams explicit.

HOW: Three dataclasses:
  PivotBinary      the binary pivot between the two conversion phases
  ConvertedNumber  one input entry and its converted digits
  ConversionBatch  the converted numbers of one run plus the target
                     prefix, attached once by the formatter

RULES:
- PivotBinary.bits is most significant bit first, no leading zero bits
- An empty PivotBinary is the value zero
- ConvertedNumber.digits never carries the target prefix
- ConversionBatch.numbers keeps input order
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class PivotBinary:
    """Value-equivalent bit sequence shared by both conversion phases.

    Attributes:
        bits: 0/1 integers, most significant first, minimal length.
    """

    bits: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.bits)

    def __str__(self) -> str:
        return "".join(str(bit) for bit in self.bits) or "0"

    @property
    def is_zero(self) -> bool:
        return not self.bits


@dataclass
class ConvertedNumber:
    """One converted input.

    Attributes:
        entry: The raw input string as given (source prefix included, if any).
        digits: The converted digit string, without the target prefix.
    """

    entry: str
    digits: str


@dataclass
class ConversionBatch:
    """All numbers converted in one run.

    WHY: When several numbers are printed together the target prefix is
    either repeated per number or attached once to a concatenated result.
    Keeping it apart from the digits lets each formatter choose.

    RULES:
    - prefix: the target alphabet's prefix ("" when it has none)
    - numbers: ConvertedNumber objects in input order
    """

    prefix: str
    numbers: List[ConvertedNumber] = field(default_factory=list)

    def outputs(self) -> List[str]:
        """Each number with the prefix attached, as a standalone conversion prints it."""
        return [self.prefix + number.digits for number in self.numbers]

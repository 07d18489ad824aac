"""Concatenated formatter: all numbers glued into one.

WHY: Long values are sometimes supplied in pieces (one argument per
block of digits). Concatenating the converted pieces behind a single
target prefix rebuilds one number, e.g. ``0x`` + ``7d0`` + ``ff``.

RULES:
- The target prefix appears exactly once, in front
- No separator is inserted between numbers
- Each piece keeps its own leading-zero suppression; pieces are not
  padded to a common width
"""

from __future__ import annotations

from bibicode.core.ir import ConversionBatch
from bibicode.formatters.base import BaseFormatter, OutputOptions


class ConcatenatedFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Concatenated"

    def render(self, batch: ConversionBatch, options: OutputOptions) -> str:
        return batch.prefix + "".join(number.digits for number in batch.numbers)

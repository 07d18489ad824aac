"""Separated formatter: one prefixed number per input.

WHY: The default output mirrors a plain conversion of each number, so
``bibicode -t hex 2000 255`` prints ``0x7d0 0xff``.

RULES:
- Every number carries the target prefix
- Numbers are joined with options.separator (default: one space)
"""

from __future__ import annotations

from bibicode.core.ir import ConversionBatch
from bibicode.formatters.base import BaseFormatter, OutputOptions


class SeparatedFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Separated"

    def render(self, batch: ConversionBatch, options: OutputOptions) -> str:
        return options.separator.join(batch.outputs())

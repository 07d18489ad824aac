"""Output formatter registry.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["concat"]()``.

RULES:
- Keys are short lowercase identifiers (used as --format values)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bibicode.formatters.concatenated import ConcatenatedFormatter
from bibicode.formatters.json_output import JSONFormatter
from bibicode.formatters.separated import SeparatedFormatter

if TYPE_CHECKING:
    from bibicode.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "separated": SeparatedFormatter,
    "concat": ConcatenatedFormatter,
    "json": JSONFormatter,
}

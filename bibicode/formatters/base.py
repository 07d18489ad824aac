"""Abstract base formatter and output options.

WHY: Converted numbers can be printed several ways (separated,
concatenated into one number, machine-readable JSON). This base class
enforces a consistent interface so the CLI can work with any formatter
generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``render()`` method producing the body. ``format()`` wraps that
body in the user's output prefix and suffix. OutputOptions is a plain
dataclass bundling the separator, prefix, and suffix.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``render()``
- Formatters never convert; they only arrange a ConversionBatch
- ``options.prefix`` / ``options.suffix`` wrap the whole output, they are
  unrelated to the target alphabet's prefix (``batch.prefix``)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from bibicode.config import DEFAULT_SEPARATOR
from bibicode.core.ir import ConversionBatch


@dataclass
class OutputOptions:
    """How the CLI wants the result printed.

    Attributes:
        separator: Placed between numbers by formatters that list them.
        prefix: Added once before the whole output.
        suffix: Added once after the whole output.
    """

    separator: str = DEFAULT_SEPARATOR
    prefix: str = ""
    suffix: str = ""


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement render() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Concatenated'."""

    @abstractmethod
    def render(self, batch: ConversionBatch, options: OutputOptions) -> str:
        """Arrange the converted numbers into the output body."""

    def format(self, batch: ConversionBatch, options: OutputOptions | None = None) -> str:
        """Render ``batch`` and wrap it in the output prefix and suffix.

        Args:
            batch: Converted numbers and the target prefix.
            options: Separator/prefix/suffix; defaults to OutputOptions().

        Returns:
            The complete output string, without a trailing newline.
        """
        if options is None:
            options = OutputOptions()
        return options.prefix + self.render(batch, options) + options.suffix

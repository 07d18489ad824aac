"""bibicode: convert natural numbers of any length between numeral systems.

WHY: Numbers are written in many numeral systems (decimal, hexadecimal,
base58, Boby Lapointe's Bibi-binary, or any user-defined alphabet with
multi-character digits). This package converts a number of unbounded
length from one system to another without native big-integer arithmetic.

HOW: Three layers: alphabets (core.alphabet, core.registry, sources),
conversion (core.converter, a binary-pivoted double dabble and its
reverse), and output (formatters, cli). Each layer is independently
testable.

RULES:
- Alphabets are validated once at construction and never mutated by
  conversions
- The core does no I/O; description files and data directories are
  handled by bibicode.sources
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"

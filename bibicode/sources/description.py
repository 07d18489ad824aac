"""Alphabet description files (JSON).

WHY: Users define their own numeral systems without writing Python. A
description file states the digits (optionally as several classes that
combine like the Bibi-binary consonants and vowels) and an optional
prefix.

HOW: The file is read as UTF-8 JSON and parsed into the pydantic
AlphabetDescription model, which accepts ``digits`` either as a flat
list of strings (one class) or as a list of lists (several classes).
build() then hands the classes to DigitAlphabet for validation.

RULES:
- ``prefix`` is optional and defaults to ""
- ``digits`` is required: list[str] or list[list[str]]
- Unknown keys are ignored
- Any failure (missing file, bad JSON, wrong shape, malformed alphabet)
  raises BadAlphabet, chained to the underlying exception

Example (bibi-binary)::

    {"digits": [["H", "B", "K", "D"], ["O", "A", "E", "I"]]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from pydantic import BaseModel, Field, ValidationError

from bibicode.core.alphabet import DigitAlphabet
from bibicode.core.errors import BadAlphabet

logger = logging.getLogger(__name__)


class AlphabetDescription(BaseModel):
    """Schema of an alphabet description file.

    RULES:
    - A list of lists is tried first, so ``[["0", "1"]]`` is one class
      and ``["0", "1"]`` is also one class
    """

    prefix: str = Field(
        default="",
        description="Literal prefix of numbers in this system, e.g. '0x'.",
    )
    digits: Union[List[List[str]], List[str]] = Field(
        description="Digits, or digit classes combined by Cartesian product.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"prefix": "0b", "digits": ["0", "1"]},
            {"digits": [["H", "B", "K", "D"], ["O", "A", "E", "I"]]},
        ]
    }}

    def classes(self) -> List[List[str]]:
        """Return the digits as a list of classes."""
        if self.digits and isinstance(self.digits[0], list):
            return [list(digit_class) for digit_class in self.digits]
        return [list(self.digits)]

    def build(self) -> DigitAlphabet:
        """Construct the DigitAlphabet; raises BadAlphabet when malformed."""
        return DigitAlphabet(self.prefix, self.classes())


def parse_description(data: Any) -> DigitAlphabet:
    """Build an alphabet from already-decoded JSON data.

    Raises:
        BadAlphabet: If the data does not match AlphabetDescription or
                     describes a malformed alphabet.
    """
    try:
        description = AlphabetDescription.model_validate(data)
    except ValidationError as exc:
        raise BadAlphabet(
            "Invalid numeral system description: {}".format(exc.errors()[0]["msg"])
        ) from exc
    return description.build()


def load_description(path: str | Path) -> DigitAlphabet:
    """Load an alphabet from a JSON description file.

    Args:
        path: Path to a UTF-8 JSON file.

    Returns:
        The described DigitAlphabet.

    Raises:
        BadAlphabet: If the file cannot be read, is not JSON, or does not
                     describe a valid alphabet.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BadAlphabet("Cannot read numeral system file {}: {}".format(file_path, exc)) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BadAlphabet("Numeral system file {} is not valid JSON: {}".format(file_path, exc)) from exc

    alphabet = parse_description(data)
    logger.debug("Loaded numeral system from %s (radix %d)", file_path, alphabet.radix)
    return alphabet

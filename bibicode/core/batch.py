"""Batch conversion with the target prefix kept apart.

WHY: The CLI converts several numbers per run and may print them joined
or concatenated into a single number. Concatenation only makes sense if
the target prefix is written once, so conversions must run against a
prefix-less target and the prefix travels separately.

HOW: convert_batch() clones the target without its prefix, converts each
entry, and returns a ConversionBatch carrying the original prefix. When
candidate alphabets are given, each entry's source is autodetected by
prefix first, with the explicit source as the fallback.

RULES:
- The caller's target alphabet is never mutated (with_prefix() clones)
- Entries are converted in order; the first failure propagates and no
  partial batch is returned
- Autodetection falls back to ``source`` on zero or ambiguous matches
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from bibicode.core.alphabet import DigitAlphabet, autodetect
from bibicode.core.converter import RadixConverter
from bibicode.core.ir import ConversionBatch, ConvertedNumber

logger = logging.getLogger(__name__)


def convert_batch(
    entries: Iterable[str],
    source: DigitAlphabet,
    target: DigitAlphabet,
    candidates: Optional[Sequence[DigitAlphabet]] = None,
) -> ConversionBatch:
    """Convert every entry from ``source`` (or a detected alphabet) to ``target``.

    Args:
        entries: Input numbers, each possibly carrying a source prefix.
        source: Source alphabet, or the fallback when autodetecting.
        target: Target alphabet; its prefix goes to the batch, not the digits.
        candidates: Alphabets to autodetect from, or None to always use ``source``.

    Returns:
        ConversionBatch with ``target.prefix`` and one ConvertedNumber per entry.

    Raises:
        EntryMismatch: On the first entry that is not a valid number.
    """
    bare_target = target.with_prefix("")
    default = RadixConverter(source, bare_target)

    batch = ConversionBatch(prefix=target.prefix)
    for entry in entries:
        converter = default
        if candidates:
            detected = autodetect(entry, candidates)
            if detected is not None:
                logger.debug("Detected prefix '%s' in %s", detected.prefix, entry)
                converter = RadixConverter(detected, bare_target)
            else:
                logger.debug("No unique prefix match for %s, using default source", entry)
        batch.numbers.append(ConvertedNumber(entry=entry, digits=converter.convert(entry)))

    logger.debug("Converted %d number(s)", len(batch.numbers))
    return batch

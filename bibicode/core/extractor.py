"""Regex-based extraction of numbers from free text.

WHY: Numbers often arrive embedded in other text ("id=0x2b86e0e;",
"2000-01-31"). A user-supplied pattern with capture groups pulls the
digit strings out before conversion.

HOW: The pattern is compiled, searched once in the text, and the
non-empty capture groups are returned in order.

RULES:
- Empty pattern -> the text itself, unchanged, as the only candidate
- Invalid pattern -> BadRegularExpression
- No match -> RegexMismatch
- Group 0 (the whole match) is never returned
- Groups that did not participate or captured "" are skipped
"""

from __future__ import annotations

import re
from typing import List

from bibicode.core.errors import BadRegularExpression, RegexMismatch


def extract_numbers(text: str, pattern: str) -> List[str]:
    """Split ``text`` into candidate digit strings with ``pattern``.

    Args:
        text: Raw input, e.g. one command-line argument.
        pattern: Regular expression with one capture group per number,
                 or "" to take ``text`` as is.

    Returns:
        Captured strings in group order.
    """
    if not pattern:
        return [text]

    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise BadRegularExpression(pattern, str(exc)) from exc

    match = regex.search(text)
    if match is None:
        raise RegexMismatch(pattern, text)

    return [group for group in match.groups() if group]

"""Description file discovery and alphabet name resolution.

WHY: Users keep their own numeral systems in a data directory and refer
to them by name (``-t mysystem``) just like the predefined tags. The CLI
also accepts a direct path to a description file.

HOW: data_dirs() lists the search directories in priority order.
discover_descriptions() maps each ``*.json`` file stem found there to
its path. resolve_alphabet() tries, in order: an existing file path,
a predefined tag, a discovered description.

RULES:
- Search order: $BIBICODE_DATA_DIR, $XDG_DATA_HOME/bibicode, then
  <dir>/bibicode for each $XDG_DATA_DIRS entry
- Missing directories are skipped silently
- On duplicate stems the first directory wins
- Predefined tags shadow discovered descriptions with the same stem
- An unresolvable name raises BadTag
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

from bibicode.config import (
    APP_DIR_NAME,
    DESCRIPTION_SUFFIX,
    data_dir_override,
    xdg_data_dirs,
    xdg_data_home,
)
from bibicode.core.alphabet import DigitAlphabet
from bibicode.core.errors import BadTag
from bibicode.core.registry import PREDEFINED_TAGS, from_tag
from bibicode.sources.description import load_description

logger = logging.getLogger(__name__)


def data_dirs() -> List[Path]:
    """Return the description search directories, highest priority first."""
    dirs: List[Path] = []
    override = data_dir_override()
    if override is not None:
        dirs.append(override)
    dirs.append(xdg_data_home() / APP_DIR_NAME)
    for base in xdg_data_dirs():
        dirs.append(base / APP_DIR_NAME)
    return dirs


def discover_descriptions() -> Dict[str, Path]:
    """Map description stems to file paths across all data directories.

    Returns:
        Ordered dict ``{stem: path}``; earlier directories take precedence.
    """
    found: Dict[str, Path] = {}
    for directory in data_dirs():
        if not directory.is_dir():
            continue
        for path in sorted(directory.glob("*" + DESCRIPTION_SUFFIX)):
            if path.is_file() and path.stem not in found:
                found[path.stem] = path
    return found


def resolve_alphabet(name: str) -> DigitAlphabet:
    """Turn a user-supplied numeral system name into a DigitAlphabet.

    WHY: One option value covers three sources: a file path, a
    predefined tag, or a description stored in a data directory.

    HOW: An existing file wins (so ``./hex`` can shadow the tag), then
    the predefined registry, then discovered descriptions.

    Raises:
        BadAlphabet: If a matched description file is malformed.
        BadTag: If nothing matches ``name``.
    """
    path = Path(name).expanduser()
    if path.is_file():
        logger.debug("Using numeral system file %s", path)
        return load_description(path)

    if name in PREDEFINED_TAGS:
        return from_tag(name)

    discovered = discover_descriptions()
    if name in discovered:
        logger.debug("Using discovered numeral system %s from %s", name, discovered[name])
        return load_description(discovered[name])

    raise BadTag(name, list(PREDEFINED_TAGS) + [s for s in discovered if s not in PREDEFINED_TAGS])

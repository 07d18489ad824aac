"""Configuration defaults, data directory names, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Default numeral systems, the output separator and
format, and where description files are searched are plain data, not
buried in the CLI.

HOW: python-dotenv loads the .env file on import. Constants are
module-level strings read from the environment with a fallback.
XDG base directory variables are read on demand by the discovery
module through the helpers below, so tests can change them at runtime.

RULES:
- Every default can be overridden via an environment variable
- BIBICODE_FROM / BIBICODE_TO default to "dec"
- BIBICODE_SEPARATOR defaults to a single space
- BIBICODE_FORMAT defaults to "separated"
- BIBICODE_DATA_DIR, when set, is searched before the XDG directories
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load .env from the project root (where the command is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Conversion defaults
# ---------------------------------------------------------------------------

DEFAULT_FROM = os.getenv("BIBICODE_FROM", "dec")
DEFAULT_TO = os.getenv("BIBICODE_TO", "dec")
DEFAULT_SEPARATOR = os.getenv("BIBICODE_SEPARATOR", " ")
DEFAULT_FORMAT = os.getenv("BIBICODE_FORMAT", "separated")

AUTODETECT_TAG = "auto"
"""Special --from value: detect each number's alphabet from its prefix."""

# ---------------------------------------------------------------------------
# Description file discovery
# ---------------------------------------------------------------------------

APP_DIR_NAME = "bibicode"
"""Subdirectory of each XDG data directory holding description files."""

DESCRIPTION_SUFFIX = ".json"

_DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"


def data_dir_override() -> Optional[Path]:
    """Return BIBICODE_DATA_DIR as a Path, or None when unset or empty."""
    value = os.getenv("BIBICODE_DATA_DIR", "").strip()
    return Path(value).expanduser() if value else None


def xdg_data_home() -> Path:
    """Return $XDG_DATA_HOME, defaulting to ~/.local/share."""
    value = os.getenv("XDG_DATA_HOME", "").strip()
    if value:
        return Path(value).expanduser()
    return Path.home() / ".local" / "share"


def xdg_data_dirs() -> List[Path]:
    """Return the entries of $XDG_DATA_DIRS, defaulting to /usr/local/share:/usr/share."""
    value = os.getenv("XDG_DATA_DIRS", "").strip() or _DEFAULT_DATA_DIRS
    return [Path(entry).expanduser() for entry in value.split(os.pathsep) if entry]

"""Configuration constants, reading-speed limits, and .env loading.

WHY: Centralizes every tunable value (WPM limits and step sizes, the
context-window half width, truncation length, fetch timeout, the file
types the picker offers) so they are easy to find and override without
digging through rendering or playback logic.

HOW: python-dotenv loads the .env file on import. Fixed limits are plain
module-level constants; user-facing defaults are read from environment
variables with a fallback when the value is missing or malformed.

RULES:
- WPM is always clamped to [MIN_WPM, MAX_WPM]; clamp_wpm() is the one helper
- Malformed numeric environment values fall back to the default (logged)
- SKIM_LOG_FILE unset means "log warnings to stderr"
- TEXT_FILE_EXTENSIONS are lowercase/with dot, except the few dotfile names
"""

from __future__ import annotations

import logging
import os
from typing import FrozenSet

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad input."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", name, raw, default)
        return default


def _env_float(name: str, default: float) -> float:
    """Read a float environment variable, falling back on bad input."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number), using %s", name, raw, default)
        return default


# ---------------------------------------------------------------------------
# Reading speed
# ---------------------------------------------------------------------------

MIN_WPM = 50
MAX_WPM = 1000
WPM_STEP = 25
"""Speed change applied by one faster/slower command."""

JUMP_SIZE = 10
"""Words skipped by one jump back/forward command."""


def clamp_wpm(wpm: int) -> int:
    """Clamp a words-per-minute value into [MIN_WPM, MAX_WPM]."""
    return max(MIN_WPM, min(MAX_WPM, int(wpm)))


DEFAULT_WPM = clamp_wpm(_env_int("SKIM_DEFAULT_WPM", 500))

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

HALF_WIDTH = max(1, _env_int("SKIM_HALF_WIDTH", 30))
"""Display columns of context drawn on each side of the ORP glyph."""

MAX_WORD_LENGTH = 32
TRUNCATED_WORD_LENGTH = 31
ELLIPSIS = "..."

RIGHT_CONTEXT_OVERSCAN = 20
"""Extra characters gathered past the right budget before the scan stops."""

PROGRESS_BAR_WIDTH = 40
BOTTOM_SECTION_HEIGHT = 8
"""Rows reserved below the word line for progress, status and help."""

# ---------------------------------------------------------------------------
# Input acquisition
# ---------------------------------------------------------------------------

BINARY_SNIFF_BYTES = 8192
FETCH_TIMEOUT_S = _env_float("SKIM_FETCH_TIMEOUT", 30.0)

TEXT_FILE_EXTENSIONS: FrozenSet[str] = frozenset({
    ".txt", ".md", ".markdown",
    ".go", ".js", ".ts", ".jsx", ".tsx",
    ".py", ".rb", ".rs", ".c", ".h", ".cpp", ".hpp",
    ".java", ".kt", ".swift", ".cs",
    ".html", ".css", ".scss", ".sass", ".less",
    ".json", ".yaml", ".yml", ".toml", ".xml",
    ".sh", ".bash", ".zsh", ".fish",
    ".sql", ".graphql",
    ".vim", ".lua", ".el", ".lisp", ".clj",
    ".r", ".jl",
    ".tex", ".org", ".rst", ".adoc",
    ".conf", ".cfg", ".ini", ".env",
    ".gitignore", ".dockerignore", ".editorconfig",
})
"""File types the file picker offers (matched case-insensitively)."""

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FILE = os.getenv("SKIM_LOG_FILE", "").strip() or None
LOG_LEVEL = os.getenv("SKIM_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

"""Configuration constants, pacing tunables, and .env loading.

WHY: Centralizes all tunable values — timing multipliers, ORP search
bounds, screen columns, the vowel set — so they are easy to find and
adjust without digging through the loop or the renderer. User-facing
defaults (initial pace, merge mode, control terminal) can be overridden
per machine through environment variables or a .env file.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values. The load_default_*() functions read and validate
the environment and give a clear error when a value is malformed.

RULES:
- All durations are in "relative units" scaled by 60 / wpm, except
  FIRST_WORD_MIN_S which is in seconds
- ORP fractions are of (length - 1), the last valid index
- SPEEDREAD_WPM must be a positive integer when set
- SPEEDREAD_MULTIWORD accepts true/false/1/0/yes/no (case-insensitive)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the reader is started from)
load_dotenv()

# ---------------------------------------------------------------------------
# Timing model (relative units, scaled by 60 / wpm)
# ---------------------------------------------------------------------------

WORD_TIME = 0.9
"""Base display time for an ordinary word."""

FULL_STOP_TIME = 1.2
"""Display time for a word ending a sentence with a period."""

MULTI_WORD_TIME = 1.2
"""Display time for two short words merged into one unit."""

LENGTH_TIME = 0.04
"""Extra time per sqrt(character) of word length."""

FIRST_WORD_MIN_S = 0.2
"""Minimum time in seconds for the first word, to let the eye settle."""

# ---------------------------------------------------------------------------
# ORP locator
# ---------------------------------------------------------------------------

ORP_LOCATION = 0.35
ORP_MIN = 0.2
ORP_MAX = 0.8

VOWELS: frozenset[str] = frozenset(
    "aeiouy"
    "áéíóúý"
    "àèìòù"
    "âêîôû"
    "äëïöüÿ"
)
"""Lowercase vowels; the locator lowercases before lookup."""

# ---------------------------------------------------------------------------
# Rendering columns
# ---------------------------------------------------------------------------

ORP_VISUAL_POS = 20
"""Screen column where every pivot character is drawn."""

CURSOR_POS = 64
"""Screen column where the wpm indicator starts."""

# ---------------------------------------------------------------------------
# Interaction
# ---------------------------------------------------------------------------

POLL_INTERVAL_S = 0.05
"""Longest uninterrupted sleep between keyboard polls."""

KEY_SLOWER = "["
KEY_FASTER = "]"
KEY_PAUSE = " "

DEFAULT_WPM = 250
DEFAULT_TTY = os.getenv("SPEEDREAD_TTY", "/dev/tty")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def load_default_wpm() -> int:
    """Load the initial words-per-minute from the environment.

    WHY: Readers settle on a personal pace; typing ``-w 400`` every time
    gets old, so SPEEDREAD_WPM in .env sets the default.

    HOW: Reads SPEEDREAD_WPM, falls back to DEFAULT_WPM when unset.

    RULES:
    - Raises ValueError if the value is not a positive integer
    """
    raw = os.getenv("SPEEDREAD_WPM", "").strip()
    if not raw:
        return DEFAULT_WPM
    try:
        wpm = int(raw)
    except ValueError:
        raise ValueError(
            "SPEEDREAD_WPM must be a positive integer, got {!r}".format(raw)
        ) from None
    if wpm < 1:
        raise ValueError(
            "SPEEDREAD_WPM must be a positive integer, got {!r}".format(raw)
        )
    return wpm


def load_default_multiword() -> bool:
    """Load the multi-word merge default from SPEEDREAD_MULTIWORD.

    Raises ValueError for values that are neither truthy nor falsy.
    """
    raw = os.getenv("SPEEDREAD_MULTIWORD", "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(
        "SPEEDREAD_MULTIWORD must be true or false, got {!r}".format(raw)
    )

"""Per-word display duration model.

WHY: A constant interval per word feels rushed on long words and on
sentence ends, and sluggish on short ones. Scaling the interval by word
length and giving sentence ends and merged pairs a longer base keeps the
perceived pace even.

HOW: Pick a base in relative units (0.9 ordinary, 1.2 for a word ending
with a period or a merged multi-word unit), add 0.04 * sqrt(length),
then scale by 60 / wpm to get seconds.

RULES:
- The period check wins over the multi-word check
- The whole sum scales with 60 / wpm, so doubling wpm halves the result
- The very first displayed word of a run is held for at least 0.2 s;
  the caller decides which word is first, and says so only once
- wpm < 1 is a programming error (the pace clamp lives in PaceState)
"""

from __future__ import annotations

import math

from speedread.config import (
    FIRST_WORD_MIN_S,
    FULL_STOP_TIME,
    LENGTH_TIME,
    MULTI_WORD_TIME,
    WORD_TIME,
)


def duration(word: str, wpm: int, first: bool = False) -> float:
    """Return how many seconds ``word`` stays on screen at ``wpm``.

    Args:
        word: The display unit.
        wpm: Current pace, at least 1.
        first: True only for the first displayed word of the run.

    Raises:
        ValueError: If wpm is below 1.
    """
    if wpm < 1:
        raise ValueError("wpm must be at least 1, got {}".format(wpm))

    if word.endswith("."):
        units = FULL_STOP_TIME
    elif " " in word:
        units = MULTI_WORD_TIME
    else:
        units = WORD_TIME
    units += LENGTH_TIME * math.sqrt(len(word))

    seconds = units * 60 / wpm
    if first and seconds < FIRST_WORD_MIN_S:
        seconds = FIRST_WORD_MIN_S
    return seconds

"""Split input lines into display units.

WHY: RSVP shows one unit at a time. Hyphenated compounds read better as
separate flashes, and very short function words ("to", "of", "a") can
ride along with a neighbor so the stream spends less time on them.

HOW: tokenize() splits on runs of hyphens and whitespace. With
multi-word mode on, join_short_words() makes one forward pass and glues
each adjacent pair of short tokens into a single unit. segment_indexed()
also remembers which original tokens each unit came from, so the pause
context can highlight the right part of the source line.

RULES:
- Delimiters: any run of "-" and/or whitespace; empty tokens dropped
- A token is short when it has at most 3 characters
- Merging is a single pass, never a fixed point: a merged pair is not
  merged again with the following token
- Merged units are joined with exactly one space
- token_index counts pre-merge tokens within the current line only
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

_TOKEN_RE = re.compile(r"[^\s-]+")

SHORT_WORD_MAX = 3


@dataclass(frozen=True)
class Unit:
    """One display unit and the source tokens it covers.

    RULES:
    - word: the text to display (may hold one interior space)
    - token_index: position of its first token within the line
    - token_count: 1, or 2 for a merged pair
    """

    word: str
    token_index: int
    token_count: int = 1


def tokenize(line: str) -> List[str]:
    return _TOKEN_RE.findall(line)


def token_spans(line: str) -> List[Tuple[int, int]]:
    """Character ``(start, end)`` spans of the tokens of ``line``."""
    return [m.span() for m in _TOKEN_RE.finditer(line)]


def _is_short(token: str) -> bool:
    return len(token) <= SHORT_WORD_MAX


def join_short_units(tokens: List[str]) -> List[Unit]:
    """Merge adjacent short tokens pairwise in one left-to-right pass."""
    units: List[Unit] = []
    i = 0
    while i < len(tokens):
        if i + 1 < len(tokens) and _is_short(tokens[i]) and _is_short(tokens[i + 1]):
            units.append(Unit("{} {}".format(tokens[i], tokens[i + 1]), i, 2))
            i += 2
        else:
            units.append(Unit(tokens[i], i))
            i += 1
    return units


def join_short_words(tokens: List[str]) -> List[str]:
    """Merge adjacent short tokens, returning only the display text."""
    return [unit.word for unit in join_short_units(tokens)]


def segment_indexed(line: str, multiword: bool = False) -> List[Unit]:
    tokens = tokenize(line)
    if multiword:
        return join_short_units(tokens)
    return [Unit(token, i) for i, token in enumerate(tokens)]


def segment(line: str, multiword: bool = False) -> List[str]:
    """Split ``line`` into the words shown one at a time."""
    return [unit.word for unit in segment_indexed(line, multiword)]

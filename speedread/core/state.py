"""Mutable run state: pace, counters, and recent-line history.

WHY: The presentation loop, the key handler, and the final report all
need to see the same pace and the same counts. Keeping them in small
dataclasses owned by the Reader (instead of module globals) makes the
ownership explicit and lets tests build a fresh state per case.

HOW: Four containers:
  PaceState      — current wpm and the pause flag
  StreamCounters — words/letters shown, words skipped, start timestamp
  LineHistory    — the two most recently read lines, newest first
  RunStats       — an immutable snapshot for the statistics report

RULES:
- wpm never drops below 1; slower() floors at 1
- Pace steps are exact integer arithmetic: slower = floor(wpm * 0.9),
  faster = ceil(wpm * 1.1); the two are deliberately not inverses
- Counters only ever increase
- LineHistory keeps at most two lines
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional


@dataclass
class PaceState:
    """Current reading pace and pause flag.

    RULES:
    - wpm is a positive integer
    - Only the key handler mutates it, through the methods below
    """

    wpm: int
    paused: bool = False

    def slower(self) -> int:
        """Drop the pace by 10 %, never below 1 wpm."""
        self.wpm = max(1, self.wpm * 9 // 10)
        return self.wpm

    def faster(self) -> int:
        """Raise the pace by 10 %, rounding up."""
        self.wpm = -(-self.wpm * 11 // 10)
        return self.wpm

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused


@dataclass
class StreamCounters:
    """Cumulative counts for the end-of-run report.

    WHY: The report shows how much was actually read, so counts advance
    only after a word's full display time has passed.

    RULES:
    - words / letters count displayed units after their wait completes
    - skipped counts units passed over by --resume (never displayed)
    - started is a clock reading fixed when the run begins
    """

    started: float
    words: int = 0
    letters: int = 0
    skipped: int = 0

    def record(self, word: str) -> None:
        self.words += 1
        self.letters += len(word)


@dataclass
class LineHistory:
    """The two most recently consumed input lines, newest first."""

    lines: Deque[str] = field(default_factory=lambda: deque(maxlen=2))

    def push(self, line: str) -> None:
        self.lines.appendleft(line)

    @property
    def latest(self) -> Optional[str]:
        return self.lines[0] if self.lines else None

    @property
    def previous(self) -> Optional[str]:
        return self.lines[1] if len(self.lines) > 1 else None


@dataclass(frozen=True)
class RunStats:
    """Snapshot of a run for the statistics report.

    RULES:
    - true_wpm is words per elapsed minute, 0.0 when no time has passed
    - resume_position is the --resume value that continues after the
      last fully displayed word
    """

    elapsed_s: float
    words: int
    letters: int
    resume_position: int

    @property
    def true_wpm(self) -> float:
        if self.elapsed_s <= 0:
            return 0.0
        return self.words / (self.elapsed_s / 60)

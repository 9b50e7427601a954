"""The presentation loop: pull lines, flash words, honor control keys.

WHY: This is where pacing meets interaction. Each word must stay on
screen for its computed duration, yet a keypress has to feel instant —
a pace change shows up right away and a pause freezes the stream on the
current word with its surrounding text visible.

HOW: Reader.run() walks the input line by line, segments each line,
and for every unit draws it, computes its duration from the current
pace, then waits. The wait sleeps in short ticks and polls the keyboard
between ticks. Keys are applied to PaceState as they arrive. While
paused the keyboard read blocks (there is nothing else to do) and the
time spent paused is added back onto the word's deadline. Counters
advance only after a word's wait completes.

RULES:
- One thread; the keyboard is polled, never read from a second thread
- The first displayed word gets the minimum-duration floor, once per run
- "[" / "]" redraw the current word with the new pace at once, but only
  the next word's duration uses it; the running deadline is untouched
- Space toggles pause; entering pause shows the context and redraws the
  word in the paused style, leaving it redraws the word normally
- Any other key is consumed and ignored
- End of file on the keyboard disables it and clears the pause
- --resume skips the first N units without displaying or counting them
- stats() is safe to call at any instant, including from an interrupt
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from speedread.config import (
    DEFAULT_WPM,
    KEY_FASTER,
    KEY_PAUSE,
    KEY_SLOWER,
    POLL_INTERVAL_S,
)
from speedread.core.orp import locate
from speedread.core.segmenter import Unit, segment_indexed
from speedread.core.state import (
    LineHistory,
    PaceState,
    RunStats,
    StreamCounters,
)
from speedread.core.timing import duration
from speedread.terminal.keyboard import Keyboard
from speedread.terminal.render import Renderer

logger = logging.getLogger(__name__)


class Reader:
    """Drives one reading run.

    Args:
        renderer: Where words, context, and guides are drawn.
        keyboard: Open control channel, or None for a fixed-pace run.
        wpm: Initial pace, at least 1.
        multiword: Merge adjacent short words into one unit.
        resume: Number of leading units to skip.
        clock: Monotonic clock in seconds.
        sleep: Sleep function taking seconds.
        tick: Longest single sleep between keyboard polls.

    Raises:
        ValueError: If wpm < 1 or resume < 0.
    """

    def __init__(
        self,
        renderer: Renderer,
        keyboard: Optional[Keyboard] = None,
        wpm: int = DEFAULT_WPM,
        multiword: bool = False,
        resume: int = 0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        tick: float = POLL_INTERVAL_S,
    ) -> None:
        if wpm < 1:
            raise ValueError("wpm must be at least 1, got {}".format(wpm))
        if resume < 0:
            raise ValueError("resume must not be negative, got {}".format(resume))

        self.renderer = renderer
        self.keyboard = keyboard
        self.multiword = multiword
        self.resume = resume
        self._clock = clock
        self._sleep = sleep
        self._tick = tick

        self.pace = PaceState(wpm=wpm)
        self.counters = StreamCounters(started=clock())
        self.history = LineHistory()
        self._shown_any = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, lines: Iterable[str]) -> RunStats:
        """Present every line of ``lines`` and return the final stats."""
        for line in lines:
            line = line.rstrip("\r\n")
            self.history.push(line)
            for unit in segment_indexed(line, self.multiword):
                if self.counters.skipped < self.resume:
                    self.counters.skipped += 1
                    continue
                self._present(unit)
        return self.stats()

    def stats(self) -> RunStats:
        """Snapshot the counters against the clock right now."""
        return RunStats(
            elapsed_s=self._clock() - self.counters.started,
            words=self.counters.words,
            letters=self.counters.letters,
            resume_position=self.counters.skipped + self.counters.words,
        )

    # ------------------------------------------------------------------
    # Per-word steps
    # ------------------------------------------------------------------

    def _present(self, unit: Unit) -> None:
        if not self._shown_any:
            self.renderer.guide()
        pivot = locate(unit.word)
        self.renderer.word(unit.word, pivot, self.pace.wpm, self.pace.paused)

        seconds = duration(unit.word, self.pace.wpm, first=not self._shown_any)
        self._shown_any = True
        self._wait(unit, pivot, seconds)
        self.counters.record(unit.word)

    def _wait(self, unit: Unit, pivot: int, seconds: float) -> None:
        """Let ``seconds`` of unpaused time pass, polling keys each tick."""
        deadline = self._clock() + seconds
        while True:
            deadline += self._sample(unit, pivot)
            remaining = deadline - self._clock()
            if remaining <= 0:
                return
            self._sleep(min(self._tick, remaining))

    def _sample(self, unit: Unit, pivot: int) -> float:
        """Apply all pending keys; block for keys while paused.

        Returns the number of seconds spent paused.
        """
        if self.keyboard is None:
            return 0.0

        frozen = 0.0
        paused_at: Optional[float] = None
        while self.keyboard is not None and (self.pace.paused or self.keyboard.pending()):
            key = self.keyboard.read()
            if not key:
                self._lose_keyboard()
            else:
                self._apply_key(key, unit, pivot)

            if self.pace.paused and paused_at is None:
                paused_at = self._clock()
            elif not self.pace.paused and paused_at is not None:
                frozen += self._clock() - paused_at
                paused_at = None
        return frozen

    def _apply_key(self, key: str, unit: Unit, pivot: int) -> None:
        if key == KEY_SLOWER:
            logger.debug("Pace down to %d wpm", self.pace.slower())
        elif key == KEY_FASTER:
            logger.debug("Pace up to %d wpm", self.pace.faster())
        elif key == KEY_PAUSE:
            if self.pace.toggle_pause():
                self.renderer.context(self.history, unit.token_index, unit.token_count)
        else:
            return
        self.renderer.word(unit.word, pivot, self.pace.wpm, self.pace.paused)

    def _lose_keyboard(self) -> None:
        logger.warning("Control keys closed; continuing at %d wpm", self.pace.wpm)
        self.keyboard = None
        self.pace.paused = False

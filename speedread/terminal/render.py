"""ANSI rendering of words, pause context, and the statistics line.

WHY: The whole point of RSVP is that the pivot letter never moves. The
renderer pads every word so its pivot lands on the same column, marks
that column with a guide, and shows the pace off to the right where it
does not distract.

HOW: Renderer writes to a text stream using colorama's escape
constants (Style, Fore, Cursor, clear_line). The word line is redrawn
in place with a carriage return and clear-line, never scrolled. On
pause the two most recent source lines are printed above the word with
the current token highlighted, followed by a fresh guide.

RULES:
- Pivot is drawn at column ORP_VISUAL_POS; words whose pivot lies past
  that column are drawn flush left
- A space pivot (merged units) is drawn as a middle dot
- The wpm indicator starts at column CURSOR_POS, at least one space
  after the word
- Pause context highlights pre-merge tokens of the latest line only
- Every write is flushed immediately
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from colorama import Cursor, Fore, Style
from colorama.ansi import clear_line

from speedread.config import CURSOR_POS, ORP_VISUAL_POS
from speedread.core.segmenter import token_spans
from speedread.core.state import LineHistory, RunStats

PIVOT_COLOR = Fore.RED
CONTEXT_COLOR = Fore.YELLOW
PAUSED_COLOR = Fore.YELLOW
MUTED = Style.DIM
BOLD = Style.BRIGHT
RESET = Style.RESET_ALL


def highlight_tokens(line: str, token_index: int, token_count: int = 1) -> str:
    """Return ``line`` with tokens ``[token_index, token_index + token_count)``
    wrapped in the context color. Out-of-range indexes leave it unchanged."""
    spans = token_spans(line)
    if token_index < 0 or token_index >= len(spans):
        return line
    start = spans[token_index][0]
    end = spans[min(token_index + token_count, len(spans)) - 1][1]
    return "{}{}{}{}{}".format(line[:start], CONTEXT_COLOR, line[start:end], RESET, line[end:])


class Renderer:
    """Draws the reading display on a terminal-like stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def guide(self) -> None:
        """Mark the pivot column on its own line above the word."""
        self._write("{}{}v{}{}\n".format(" " * ORP_VISUAL_POS, PIVOT_COLOR, RESET, clear_line(0)))

    def word(self, word: str, pivot: int, wpm: int, paused: bool = False) -> None:
        """Redraw the word line with the pivot on the guide column."""
        pivot_ch = word[pivot:pivot + 1]
        if pivot_ch == " ":
            pivot_ch = "·"
        indent = max(0, ORP_VISUAL_POS - pivot)
        fill = max(1, CURSOR_POS - (indent + len(word)))

        parts = [
            "\r",
            clear_line(),
            " " * indent,
            BOLD, word[:pivot],
            PIVOT_COLOR, pivot_ch, RESET,
            BOLD, word[pivot + 1:], RESET,
            " " * fill,
            MUTED, "{} wpm".format(wpm), RESET,
        ]
        if paused:
            parts.extend([PAUSED_COLOR, "  PAUSED", RESET])
        self._write("".join(parts))

    def context(self, history: LineHistory, token_index: int, token_count: int = 1) -> None:
        """Show the last two source lines, current token highlighted.

        Clears the word line and the guide above it first, so the
        context replaces them; the caller redraws guide and word after.
        """
        out = ["\r", clear_line(), Cursor.UP(1), clear_line()]
        if history.previous is not None:
            out.append(history.previous + "\n")
        if history.latest is not None:
            out.append(highlight_tokens(history.latest, token_index, token_count) + "\n")
        self._write("".join(out))
        self.guide()

    def stats(self, stats: RunStats) -> None:
        self._write(
            "\n {:.2f}s, {} words, {} letters, {}{}{:.2f}{} true wpm\n".format(
                stats.elapsed_s,
                stats.words,
                stats.letters,
                BOLD,
                Fore.GREEN,
                stats.true_wpm,
                RESET,
            )
        )

    def resume_hint(self, position: int) -> None:
        self._write(" To resume from this point run with argument -r {}\n".format(position))

"""speedread — terminal RSVP speed reader.

WHY: Normal reading spends most of its time on saccades, the jumps of
the eye from word to word. Rapid serial visual presentation (RSVP)
flashes text one word at a time at a fixed screen column, with one
"pivot" letter highlighted, so the eye never moves and reading speed is
limited only by recognition.

HOW: Four layers — core (pure ORP, timing and segmentation logic plus
the run state), terminal (raw keyboard channel and ANSI rendering),
reader (the presentation loop) and cli (flags, line input, signals and
the final statistics report). Core is independently testable without a
terminal.

RULES:
- Core modules never touch the terminal
- The Reader is the only driver; everything else is called from it
- Pace and counters live in state objects owned by the Reader, never in
  module globals
"""

__version__ = "0.1.0"

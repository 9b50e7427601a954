"""Core pacing and text-analysis modules.

WHY: The core package is the heart of the reader — the pivot picker,
the display-duration model, the line segmenter, and the run state. None
of it needs a terminal, so all of it is testable as plain functions and
dataclasses.

HOW: orp.py picks the pivot letter, timing.py computes how long a word
stays on screen, segmenter.py turns a line into display units, and
state.py holds the pace, counters, and recent-line history.

RULES:
- No terminal I/O in this package
- Pure functions stay pure; only state.py holds mutable objects
"""

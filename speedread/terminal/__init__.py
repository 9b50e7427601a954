"""Terminal-facing modules: the control keyboard and the renderer.

WHY: Everything that touches a real terminal lives here, so the core
stays pure and the Reader can be driven by fakes in tests.

HOW: keyboard.py owns the raw control channel (/dev/tty in cbreak
mode); render.py turns words, context, and statistics into ANSI output
with colorama.
"""

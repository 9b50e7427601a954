"""Raw keyboard control channel.

WHY: The text being read usually arrives on stdin (a pipe or a file),
so control keys must come from somewhere else — the controlling
terminal. Keys have to be seen the moment they are pressed, without
Enter and without echo, and polling them must never stall the reading
clock.

HOW: Keyboard opens the control device (``/dev/tty`` by default) and,
as a context manager, switches it to cbreak mode, restoring the saved
attributes on exit. pending() is a zero-timeout select(); read() takes
exactly one byte. open_keyboard() turns an unavailable terminal into
``None`` so the reader can carry on without interactive control.

RULES:
- cbreak, not full raw: Ctrl-C must still raise SIGINT in the process
- Terminal attributes are restored with TCSADRAIN on every exit path
- pending() never blocks; read() blocks only when nothing is pending
- read() returns "" at end of file
- An unavailable control channel is logged once, never retried
"""

from __future__ import annotations

import logging
import os
import select
import termios
import tty
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class Keyboard:
    """Single-byte reader over a terminal in cbreak mode.

    Args:
        path: Terminal device to open for reading.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._fd: Optional[int] = None
        self._saved: Optional[List[Any]] = None

    def __enter__(self) -> "Keyboard":
        fd = os.open(self.path, os.O_RDONLY | os.O_NOCTTY)
        try:
            self._saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except BaseException:
            os.close(fd)
            raise
        self._fd = fd
        logger.debug("Control keys read from %s", self.path)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Restore the saved terminal mode and release the device."""
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        try:
            if self._saved is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, self._saved)
        finally:
            os.close(fd)

    def fileno(self) -> int:
        if self._fd is None:
            raise ValueError("keyboard is not open")
        return self._fd

    def pending(self) -> bool:
        """True when at least one byte can be read without blocking."""
        ready, _, _ = select.select([self.fileno()], [], [], 0)
        return bool(ready)

    def read(self) -> str:
        """Consume and return one byte ("" at end of file)."""
        data = os.read(self.fileno(), 1)
        return data.decode("latin-1")


def open_keyboard(path: str) -> Optional[Keyboard]:
    """Open the control channel, or return None when it is unavailable.

    WHY: Reading from a pipe inside a job without a terminal (cron, CI,
    an editor's output pane) should still work, just without the pace
    and pause keys.

    HOW: Enters the Keyboard context; on OSError or termios.error logs a
    single warning and returns None. The caller must close() the
    returned keyboard (or use it through contextlib.ExitStack).
    """
    keyboard = Keyboard(path)
    try:
        keyboard.__enter__()
    except (OSError, termios.error) as e:
        logger.warning(
            "Control keys unavailable (%s: %s); reading at a fixed pace", path, e
        )
        return None
    return keyboard

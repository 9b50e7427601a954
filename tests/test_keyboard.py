"""Tests for the raw keyboard control channel.

WHY: A keyboard that blocks when nothing is pending freezes the reading
clock; one that forgets to restore the terminal leaves the user's shell
without echo. Both are checked against a real pseudo-terminal.

HOW: os.openpty() provides a master/slave pair. The Keyboard opens the
slave by path; bytes written to the master become readable on it. The
unavailable-terminal cases use a missing path and a regular file.

RULES:
- Skipped where pseudo-terminals are unavailable.
"""

import logging
import os
import termios

import pytest

from speedread.terminal.keyboard import Keyboard, open_keyboard


@pytest.fixture
def pty_pair():
    try:
        master, slave = os.openpty()
    except OSError:
        pytest.skip("pseudo-terminals unavailable")
    path = os.ttyname(slave)
    yield master, slave, path
    os.close(master)
    os.close(slave)


class TestKeyboard:
    def test_nothing_pending_does_not_block(self, pty_pair):
        _, _, path = pty_pair
        with Keyboard(path) as kb:
            assert kb.pending() is False

    def test_reads_single_bytes(self, pty_pair):
        master, _, path = pty_pair
        with Keyboard(path) as kb:
            os.write(master, b"[ ")
            assert kb.pending() is True
            assert kb.read() == "["
            assert kb.read() == " "

    def test_cbreak_mode_disables_echo_and_canonical_input(self, pty_pair):
        _, slave, path = pty_pair
        with Keyboard(path):
            lflag = termios.tcgetattr(slave)[3]
            assert not lflag & termios.ECHO
            assert not lflag & termios.ICANON
            assert lflag & termios.ISIG

    def test_restores_mode_on_exit(self, pty_pair):
        _, slave, path = pty_pair
        before = termios.tcgetattr(slave)
        with pytest.raises(RuntimeError):
            with Keyboard(path):
                raise RuntimeError("boom")
        assert termios.tcgetattr(slave) == before

    def test_close_is_idempotent(self, pty_pair):
        _, _, path = pty_pair
        kb = Keyboard(path)
        kb.__enter__()
        kb.close()
        kb.close()
        with pytest.raises(ValueError):
            kb.fileno()


class TestOpenKeyboard:
    def test_opens_terminal(self, pty_pair):
        _, _, path = pty_pair
        kb = open_keyboard(path)
        try:
            assert kb is not None
            assert kb.pending() is False
        finally:
            kb.close()

    def test_missing_device_returns_none(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="speedread.terminal.keyboard"):
            assert open_keyboard(str(tmp_path / "no-such-tty")) is None
        assert len(caplog.records) == 1
        assert "fixed pace" in caplog.records[0].getMessage()

    def test_non_terminal_returns_none(self, tmp_path):
        f = tmp_path / "plain.txt"
        f.write_text("not a tty", encoding="utf-8")
        assert open_keyboard(str(f)) is None

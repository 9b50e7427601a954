"""Command-line interface for the speedread RSVP reader.

WHY: Users want to point the reader at a file (or pipe text into it)
and start reading. The CLI wires together line input, the control
keyboard, the renderer, and the Reader behind a single command, and
makes sure the terminal is restored and the statistics are printed no
matter how the run ends.

HOW: Uses argparse for pace, merge mode, resume position, and control
device. Lines come from fileinput (named files, or stdin). The keyboard
is opened inside a contextlib.ExitStack so its terminal mode is restored
on every exit path. SIGTERM is turned into KeyboardInterrupt so both
interrupt signals unwind the same way as Ctrl-C; a single finalization
routine prints the report for normal and interrupted runs alike.

RULES:
- Positional arguments: input files; none (or "-") means stdin
- Defaults come from config (SPEEDREAD_WPM, SPEEDREAD_MULTIWORD,
  SPEEDREAD_TTY, optionally via .env)
- Status and errors go to stderr; the reading display goes to stdout
- Exit 0 at end of input, 130 when interrupted, 1 on input/config errors
- The resume hint is printed only for interrupted runs
"""

from __future__ import annotations

import argparse
import contextlib
import fileinput
import logging
import signal
import sys
from typing import Any, List, Optional

import colorama

from speedread.config import DEFAULT_TTY, load_default_multiword, load_default_wpm
from speedread.core.state import RunStats
from speedread.reader import Reader
from speedread.terminal.keyboard import open_keyboard
from speedread.terminal.render import Renderer

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed."""
    print(msg, file=sys.stderr, flush=True)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("expected a positive integer, got {!r}".format(value)) from None
    if number < 1:
        raise argparse.ArgumentTypeError("expected a positive integer, got {!r}".format(value))
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("expected a non-negative integer, got {!r}".format(value)) from None
    if number < 0:
        raise argparse.ArgumentTypeError("expected a non-negative integer, got {!r}".format(value))
    return number


def _raise_interrupt(signum: int, frame: Any) -> None:
    raise KeyboardInterrupt


def _finish(renderer: Renderer, stats: RunStats, interrupted: bool) -> int:
    """Print the end-of-run report and return the process exit code.

    WHY: A reader who hits Ctrl-C mid-book wants the same report as one
    who reached the end, plus a way to pick up where they stopped.

    RULES:
    - Same statistics line for both paths
    - Interrupted runs also print the --resume hint and exit with 130
    """
    renderer.stats(stats)
    if interrupted:
        renderer.resume_hint(stats.resume_position)
        return 130
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without starting a run.

    RULES:
    - Positional: files (zero or more)
    - Optional: --wpm/-w, --multiword/-m, --resume/-r, --tty, --no-keys,
      --verbose/-v

    Raises:
        ValueError: If an environment default is malformed.
    """
    parser = argparse.ArgumentParser(
        prog="speedread",
        description="Read text one word at a time with a fixed focus point. "
                    "Keys while reading: '[' slower, ']' faster, space pause.",
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Text files to read (default: standard input).",
    )

    parser.add_argument(
        "-w", "--wpm",
        type=_positive_int,
        default=load_default_wpm(),
        help="Initial words per minute (default: %(default)s).",
    )

    parser.add_argument(
        "-m", "--multiword",
        action=argparse.BooleanOptionalAction,
        default=load_default_multiword(),
        help="Show adjacent short words together (default: %(default)s).",
    )

    parser.add_argument(
        "-r", "--resume",
        type=_non_negative_int,
        default=0,
        help="Skip this many words before starting (default: %(default)s).",
    )

    parser.add_argument(
        "--tty",
        default=DEFAULT_TTY,
        help="Terminal device to read control keys from (default: %(default)s).",
    )

    parser.add_argument(
        "--no-keys",
        action="store_true",
        help="Disable interactive control keys.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )

    return parser


def run(args: argparse.Namespace, renderer: Optional[Renderer] = None) -> int:
    """Execute one reading run and return the exit code.

    WHY: This is the synchronous core of the CLI, separated from main()
    so tests can drive it with a custom renderer.

    HOW: Opens the keyboard (unless disabled) inside an ExitStack,
    builds the Reader, and runs it over fileinput. KeyboardInterrupt is
    caught once here, after the ExitStack has restored the terminal.
    """
    renderer = renderer if renderer is not None else Renderer()
    reader: Optional[Reader] = None
    interrupted = False

    try:
        with contextlib.ExitStack() as stack:
            keyboard = None
            if not args.no_keys:
                keyboard = open_keyboard(args.tty)
                if keyboard is not None:
                    stack.callback(keyboard.close)

            reader = Reader(
                renderer,
                keyboard=keyboard,
                wpm=args.wpm,
                multiword=args.multiword,
                resume=args.resume,
            )
            logger.debug(
                "Reading %s at %d wpm (multiword=%s, resume=%d)",
                ", ".join(args.files) or "stdin", args.wpm, args.multiword, args.resume,
            )
            lines = stack.enter_context(
                fileinput.input(files=args.files or ("-",), encoding="utf-8", errors="replace")
            )
            reader.run(lines)
    except KeyboardInterrupt:
        interrupted = True
    except OSError as e:
        _status("\nError: {}".format(e))
        return 1

    if reader is None:
        return 130 if interrupted else 1
    return _finish(renderer, reader.stats(), interrupted)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    try:
        parser = build_parser()
    except ValueError as e:
        # Config errors (malformed SPEEDREAD_* values)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    colorama.just_fix_windows_console()
    signal.signal(signal.SIGTERM, _raise_interrupt)

    sys.exit(run(args))


if __name__ == "__main__":
    main()

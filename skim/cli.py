"""Command-line interface for the skim speed reader.

WHY: Reading should start with one command, whatever the text's origin:
a file, a web page, or the output of another program piped in. The CLI
turns that source into words before the TUI takes over the terminal, so
source errors are reported as plain messages instead of inside a
half-drawn screen.

HOW: build_parser() accepts an optional source (path or URL) and the
reading rate. load_words() picks the source: piped stdin first, then a
URL (fetched with asyncio.run around the async httpx fetch), then a file
path. With no source the app starts on the file picker. When stdin was
consumed, the controlling terminal is re-attached to fd 0 so the TUI can
still read keys.

RULES:
- Piped stdin wins over a positional source
- --wpm is clamped to [MIN_WPM, MAX_WPM], never rejected
- Every SourceError prints "Error: <reason>" to stderr and exits 1
- Status output goes to stderr (not stdout)
- Logging goes to --log-file / SKIM_LOG_FILE when set, else WARNING+ to stderr
  until the TUI starts; nothing is logged to stderr while the app runs
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, List, Optional

from skim import __version__
from skim.config import DEFAULT_WPM, LOG_FILE, LOG_LEVEL, MAX_WPM, MIN_WPM, clamp_wpm
from skim.sources import (
    SourceError,
    fetch_url,
    is_url,
    read_file,
    read_stdin,
    words_from_text,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _configure_logging(log_file: Optional[str], verbose: bool) -> Optional[logging.Handler]:
    """Set up root logging before the TUI owns the terminal.

    RULES:
    - With a log file: LOG_LEVEL (DEBUG with --verbose) into that file
    - Without one: WARNING and above to stderr, until the TUI starts

    Returns:
        The stderr handler to detach before the app runs, or None when
        logging goes to a file.
    """
    if log_file:
        level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)
        return None

    handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, handlers=[handler])
    return handler


def _detach_stderr_logging(handler: Optional[logging.Handler]) -> None:
    """Stop logging to stderr; Textual draws on that terminal from now on."""
    if handler is None:
        return
    root = logging.getLogger()
    root.removeHandler(handler)
    if not root.handlers:
        # Keeps logging's last-resort handler from writing to stderr
        root.addHandler(logging.NullHandler())


def _stdin_is_piped() -> bool:
    stdin = sys.stdin
    if stdin is None:
        return False
    try:
        return not stdin.isatty()
    except ValueError:
        # Closed stream
        return False


def _reattach_tty() -> None:
    """Point fd 0 at the controlling terminal after stdin was consumed.

    Raises:
        OSError: If /dev/tty can't be opened (no controlling terminal).
    """
    fd = os.open("/dev/tty", os.O_RDONLY)
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)


def load_words(source: Optional[str], stdin: Optional[BinaryIO] = None) -> List[str]:
    """Read and tokenize the chosen source.

    Args:
        source: Positional CLI argument (URL or file path), or None.
        stdin: Piped binary stream; when given it wins over ``source``.

    Returns:
        The word list; empty only when there is no source at all.

    Raises:
        SourceError: Any read, fetch, binary or empty-content failure.
    """
    if stdin is not None:
        if source:
            logger.info("Ignoring %s, reading piped stdin", source)
        return words_from_text(read_stdin(stdin), "No words found in stdin")

    if not source:
        return []

    if is_url(source):
        _status("Fetching content from URL: {}".format(source))
        text = asyncio.run(fetch_url(source))
        return words_from_text(text, "No words found in URL content")

    return words_from_text(read_file(source), "No words found in file")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: source (optional; file path or http(s) URL)
    - Optional: --wpm, --log-file, --verbose, --version
    """
    parser = argparse.ArgumentParser(
        prog="skim",
        description="Speed-read text in the terminal, one word at a time. "
                    "Reads a file, a web page, or piped stdin.",
    )

    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Text file path or http(s) URL. Omit to pick a file interactively.",
    )

    parser.add_argument(
        "--wpm",
        type=int,
        default=DEFAULT_WPM,
        help="Words per minute, {}-{} (default: %(default)s).".format(MIN_WPM, MAX_WPM),
    )

    parser.add_argument(
        "--log-file",
        default=LOG_FILE,
        help="Write logs to this file (default: $SKIM_LOG_FILE, else warnings to stderr).",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug detail (only with a log file).",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``skim`` and ``python -m skim``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    stderr_handler = _configure_logging(args.log_file, args.verbose)

    try:
        wpm = clamp_wpm(args.wpm)
        if wpm != args.wpm:
            logger.info("Clamped --wpm %d to %d", args.wpm, wpm)

        piped = _stdin_is_piped()
        try:
            words = load_words(args.source, sys.stdin.buffer if piped else None)
        except SourceError as e:
            print("Error: {}".format(e.reason), file=sys.stderr)
            sys.exit(1)

        if piped:
            try:
                _reattach_tty()
            except OSError as e:
                print("Error: Cannot open /dev/tty for input: {}".format(e), file=sys.stderr)
                sys.exit(1)
    finally:
        _detach_stderr_logging(stderr_handler)

    # Imported late so argument errors don't pay for loading Textual
    from skim.tui.app import SkimApp

    app = SkimApp(words, wpm=wpm, start_path=Path.cwd())
    app.run()


if __name__ == "__main__":
    main()

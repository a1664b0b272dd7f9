"""Local text sources: files, piped stdin and the binary sniff.

WHY: The reader only makes sense for text. Opening an image or an
executable would fill the screen with mojibake, so content is checked
for NUL bytes before it is decoded. Failures must reach the user as one
short sentence, not a traceback.

HOW: read_file() and read_stdin() read raw bytes, reject binary content,
and decode UTF-8 with replacement characters. load_file() is the
never-raising variant used by the file picker: it returns a LoadResult
carrying either words or a short error reason.

RULES:
- Binary = a NUL byte within the first BINARY_SNIFF_BYTES bytes
- Decoding is UTF-8 with errors="replace" (never fails)
- SourceError.reason is a short, user-facing sentence fragment
- load_file() never raises for I/O problems
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from skim.config import BINARY_SNIFF_BYTES
from skim.core.tokenizer import tokenize

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """Raised when a text source can't be turned into readable text.

    WHY: The CLI and the file picker both need a message fit for the
    user, independent of which low-level failure happened.

    RULES:
    - reason: short user-facing text, e.g. "Cannot open binary file"
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class BinaryContentError(SourceError):
    """Raised when content looks binary (contains a NUL byte)."""


class EmptySourceError(SourceError):
    """Raised when a source holds no words at all."""


@dataclass
class LoadResult:
    """Outcome of loading a source: words, or the reason there are none.

    RULES:
    - ok is True exactly when words is non-empty
    - error is None when ok, a short message otherwise
    """

    words: List[str] = field(default_factory=list)
    error: Optional[str] = None
    path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return bool(self.words)


def is_binary(content: bytes) -> bool:
    """True when a NUL byte appears in the first BINARY_SNIFF_BYTES bytes."""
    return b"\x00" in content[:BINARY_SNIFF_BYTES]


def decode_text(content: bytes, binary_reason: str = "Cannot open binary file") -> str:
    """Decode bytes as UTF-8 after rejecting binary content.

    Raises:
        BinaryContentError: If the content contains a NUL byte early on.
    """
    if is_binary(content):
        raise BinaryContentError(binary_reason)
    return content.decode("utf-8", errors="replace")


def read_file(path: Union[str, Path]) -> str:
    """Read a local text file.

    Raises:
        SourceError: If the file can't be read ("Error reading file").
        BinaryContentError: If the file is binary.
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        raise SourceError("Error reading file") from e
    return decode_text(content)


def read_stdin(stream: BinaryIO) -> str:
    """Read all of piped stdin as text.

    Args:
        stream: A binary stream, normally ``sys.stdin.buffer``.

    Raises:
        SourceError: If reading fails.
        BinaryContentError: If the piped content is binary.
    """
    try:
        content = stream.read()
    except OSError as e:
        logger.warning("Failed to read stdin: %s", e)
        raise SourceError("Error reading from stdin") from e
    return decode_text(content, binary_reason="Cannot read binary content from stdin")


def words_from_text(text: str, empty_reason: str) -> List[str]:
    """Tokenize text, raising EmptySourceError when it holds no words."""
    words = tokenize(text)
    if not words:
        raise EmptySourceError(empty_reason)
    return words


def load_file(path: Union[str, Path]) -> LoadResult:
    """Load and tokenize a file for the reader, reporting failures as text.

    WHY: The file picker runs inside the TUI, where an exception would
    tear down the screen. It needs a result it can show.

    HOW: Wraps read_file() + tokenize(); any SourceError becomes the
    result's error message.
    """
    path = Path(path)
    try:
        words = words_from_text(read_file(path), "No words found in file")
    except SourceError as e:
        return LoadResult(error=e.reason, path=path)
    logger.info("Loaded %d words from %s", len(words), path)
    return LoadResult(words=words, path=path)

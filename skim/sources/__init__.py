"""Input acquisition — where the words come from.

WHY: The engine consumes an already-tokenized word list. Everything
before that (reading stdin or a file, fetching a URL, sniffing for
binary content, stripping HTML) lives here, behind one small exception
hierarchy whose messages can be shown to the user as they are.

HOW: loader.py handles local files and stdin, web.py handles http(s)
URLs via httpx and BeautifulSoup.

RULES:
- Every failure is a SourceError with a short user-facing reason
- Callers that must not raise (the file picker) use load_file()
"""

from skim.sources.loader import (
    BinaryContentError,
    EmptySourceError,
    LoadResult,
    SourceError,
    is_binary,
    load_file,
    read_file,
    read_stdin,
    words_from_text,
)
from skim.sources.web import FetchError, fetch_url, html_to_text, is_url

__all__ = [
    "BinaryContentError",
    "EmptySourceError",
    "FetchError",
    "LoadResult",
    "SourceError",
    "fetch_url",
    "html_to_text",
    "is_binary",
    "is_url",
    "load_file",
    "read_file",
    "read_stdin",
    "words_from_text",
]

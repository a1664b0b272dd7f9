"""HTTP(S) source — fetch a page and reduce it to readable text.

WHY: Articles are the most common thing people want to speed-read, and
they live on the web as HTML. The reader needs the prose, not the
markup, scripts or navigation chrome.

HOW: is_url() decides whether a CLI argument is a URL or a path.
fetch_url() GETs the page with httpx.AsyncClient (redirects followed,
30s timeout, an identifying User-Agent). HTML responses go through
html_to_text(), which uses BeautifulSoup to drop non-content elements
and join the remaining text blocks with newlines.

RULES:
- Only http and https URLs with a host count as URLs
- Any status other than 200 raises FetchError("HTTP <code>: <reason>")
- Network errors and timeouts raise FetchError, never raw httpx errors
- Binary bodies raise BinaryContentError
- Non-HTML text bodies are returned as-is
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from skim import __version__
from skim.config import FETCH_TIMEOUT_S
from skim.sources.loader import BinaryContentError, SourceError, is_binary

logger = logging.getLogger(__name__)

USER_AGENT = "skim/{}".format(__version__)

_NON_CONTENT_TAGS = ["script", "style", "noscript", "template", "svg", "head"]


class FetchError(SourceError):
    """Raised when a URL can't be fetched.

    RULES:
    - reason is "HTTP <code>: <phrase>" for bad statuses
    - reason is the transport error summary otherwise
    """


def is_url(value: str) -> bool:
    """True for absolute http(s) URLs with a host, e.g. ``https://a.b/c``."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def looks_like_html(text: str, content_type: str = "") -> bool:
    """Decide whether a response body should be treated as HTML."""
    if "html" in content_type.lower():
        return True
    if content_type and not content_type.lower().startswith("text/"):
        return False
    head = text.lstrip()[:512].lower()
    return head.startswith("<!doctype html") or "<html" in head


def html_to_text(html: str) -> str:
    """Extract the readable text from an HTML document.

    Script, style and similar elements are removed entirely; remaining
    text nodes are joined with newlines so block boundaries survive as
    whitespace for the tokenizer.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_NON_CONTENT_TAGS):
        tag.decompose()
    return soup.get_text("\n", strip=True)


async def fetch_url(
    url: str,
    timeout: float = FETCH_TIMEOUT_S,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Fetch a URL and return its readable text.

    Args:
        url: An http(s) URL.
        timeout: Overall request timeout in seconds.
        transport: Optional httpx transport (tests pass a MockTransport).

    Returns:
        Plain text: extracted from HTML, or the body itself for text.

    Raises:
        FetchError: On non-200 statuses or transport failures.
        BinaryContentError: If the body is binary.
    """
    logger.info("Fetching %s", url)
    try:
        async with httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        ) as client:
            resp = await client.get(url)
    except httpx.HTTPError as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        raise FetchError(str(e) or e.__class__.__name__) from e

    if resp.status_code != 200:
        raise FetchError("HTTP {}: {}".format(resp.status_code, resp.reason_phrase))

    if is_binary(resp.content):
        raise BinaryContentError("Cannot read binary content from URL")
    text = resp.text
    if looks_like_html(text, resp.headers.get("content-type", "")):
        return html_to_text(text)
    return text

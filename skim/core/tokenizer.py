"""Whitespace tokenizer that turns plain text into display words.

WHY: The reader shows exactly what the text contains, one token at a
time. Punctuation stays attached to its word ("today?") and case and
Unicode are left untouched, so splitting on whitespace is all that is
needed.

HOW: Splits on runs of Unicode White_Space characters. str.split() is
not used because Python also treats the ASCII separators U+001C..U+001F
as whitespace; those stay inside words.

RULES:
- Empty or whitespace-only text yields [] ("no words"), never [""]
- Separators are exactly the Unicode White_Space set
- Order is preserved; nothing is normalized
"""

from __future__ import annotations

import re
from typing import List

# Unicode White_Space property (PropList.txt)
_WHITESPACE = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def tokenize(text: str) -> List[str]:
    """Split text into an ordered list of non-empty words.

    Args:
        text: Plain text, already extracted from its source format.

    Returns:
        The words in reading order. An empty list means the text holds
        nothing to read; callers treat it as the idle "no content" state.
    """
    if not text:
        return []
    return [word for word in _WHITESPACE.split(text) if word]

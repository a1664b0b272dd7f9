"""Word truncation and Optimal Recognition Point (ORP) calculation.

WHY: The eye recognizes a word fastest when it fixates slightly left of
the word's centre. Highlighting that character and pinning it to a fixed
screen column is what makes RSVP reading comfortable. Very long tokens
(URLs, hashes) would push the layout off screen, so they are shortened
first and the ORP is taken on what is actually drawn.

HOW: orp_offset() is a length table over codepoints. truncate_word()
keeps the first 31 codepoints of anything longer than 32 and appends
"...". display_word() applies both in the right order.

RULES:
- Lengths are codepoint counts (len(str)), never byte counts
- Truncate first, then compute the ORP on the truncated text
- The ORP index is always inside the displayed text
"""

from __future__ import annotations

from dataclasses import dataclass

from skim.config import ELLIPSIS, MAX_WORD_LENGTH, TRUNCATED_WORD_LENGTH


def orp_offset(word: str) -> int:
    """Return the zero-based ORP index for a word.

    ====== ======
    length offset
    ====== ======
    <= 1   0
    <= 5   1
    <= 9   2
    <= 13  3
    > 13   4
    ====== ======
    """
    length = len(word)
    if length <= 1:
        return 0
    if length <= 5:
        return 1
    if length <= 9:
        return 2
    if length <= 13:
        return 3
    return 4


def truncate_word(word: str) -> str:
    """Shorten words longer than MAX_WORD_LENGTH codepoints, adding an ellipsis."""
    if len(word) <= MAX_WORD_LENGTH:
        return word
    return word[:TRUNCATED_WORD_LENGTH] + ELLIPSIS


@dataclass(frozen=True)
class DisplayWord:
    """A word as drawn on screen, with the index of its highlighted glyph."""

    text: str
    orp: int

    @property
    def before(self) -> int:
        """Glyphs drawn left of the ORP glyph."""
        return self.orp

    @property
    def after(self) -> int:
        """Glyphs drawn from the ORP glyph to the end of the word."""
        return len(self.text) - self.orp


def display_word(word: str) -> DisplayWord:
    """Truncate a word for display and compute the ORP on the result."""
    text = truncate_word(word)
    return DisplayWord(text=text, orp=orp_offset(text))

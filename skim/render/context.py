"""Context window renderer — the word line with its ORP glyph pinned in place.

WHY: The one thing RSVP layout must get right is that the highlighted
ORP character never moves. Short and long words alike are positioned so
the ORP glyph sits on the focus column, with dimmed surrounding words on
either side to give a sense of place in the text.

HOW: For the current (truncated) word, ``before`` glyphs precede the ORP
and ``after`` glyphs follow from it. The left context gets ``H - before``
columns and the right context ``H - after`` columns, so left + word +
right is always 2H wide. Left context is the tail of all previous words;
right context is the head of the following words, gathered with a
bounded forward scan.

RULES:
- Budgets are max(0, H - before) and max(0, H - after)
- Left context: trailing N codepoints, left-padded with spaces to N
- Right context: leading N codepoints, right-padded with spaces to N
- The right scan stops once budget + RIGHT_CONTEXT_OVERSCAN chars are in
- leading pad = max(0, focus_column - H)
- Exactly one glyph (the ORP) is highlighted
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from rich.text import Text

from skim.config import HALF_WIDTH, RIGHT_CONTEXT_OVERSCAN
from skim.core.words import display_word

CONTEXT_STYLE = "color(238)"
WORD_STYLE = "color(252)"
HIGHLIGHT_STYLE = "bold color(196)"


@dataclass(frozen=True)
class WordLine:
    """One rendered word line, kept as parts so styling can't shift glyphs.

    Attributes:
        left_padding: Blank columns before the left context.
        left_context: Exactly ``left budget`` characters of preceding text.
        glyphs: The displayed word as (char, highlighted) pairs.
        right_context: Exactly ``right budget`` characters of following text.
    """

    left_padding: int
    left_context: str
    glyphs: Tuple[Tuple[str, bool], ...]
    right_context: str

    @property
    def word(self) -> str:
        return "".join(char for char, _ in self.glyphs)

    @property
    def orp_column(self) -> int:
        """Screen column of the highlighted glyph."""
        for offset, (_, highlighted) in enumerate(self.glyphs):
            if highlighted:
                return self.left_padding + len(self.left_context) + offset
        return self.left_padding + len(self.left_context)

    @property
    def plain(self) -> str:
        return " " * self.left_padding + self.left_context + self.word + self.right_context

    @property
    def width(self) -> int:
        return len(self.plain)

    def to_text(self) -> Text:
        """Style the line: dim context, light word, bold red ORP glyph."""
        text = Text(" " * self.left_padding, no_wrap=True, overflow="crop")
        text.append(self.left_context, style=CONTEXT_STYLE)
        for char, highlighted in self.glyphs:
            text.append(char, style=HIGHLIGHT_STYLE if highlighted else WORD_STYLE)
        text.append(self.right_context, style=CONTEXT_STYLE)
        return text


def left_context(words: Sequence[str], index: int, budget: int) -> str:
    """Tail of the words before ``index``, exactly ``budget`` characters wide."""
    if budget <= 0:
        return ""
    before = "".join(word + " " for word in words[:index])
    if len(before) > budget:
        return before[-budget:]
    return before.rjust(budget)


def right_context(words: Sequence[str], index: int, budget: int) -> str:
    """Head of the words after ``index``, exactly ``budget`` characters wide.

    Only as many following words are visited as it takes to fill the
    budget plus the overscan margin.
    """
    if budget <= 0:
        return ""
    limit = budget + RIGHT_CONTEXT_OVERSCAN
    parts = []
    gathered = 0
    position = index + 1
    while position < len(words) and gathered < limit:
        chunk = " " + words[position]
        parts.append(chunk)
        gathered += len(chunk)
        position += 1
    after = "".join(parts)
    if len(after) > budget:
        return after[:budget]
    return after.ljust(budget)


def build_word_line(
    words: Sequence[str],
    index: int,
    focus_column: int,
    half_width: int = HALF_WIDTH,
) -> WordLine:
    """Build the word line for ``words[index]`` centred on ``focus_column``.

    Args:
        words: The whole word sequence (must be non-empty).
        index: Current read position, within range.
        focus_column: Screen column where the ORP glyph belongs.
        half_width: Columns of context on each side of the ORP glyph.

    Returns:
        A WordLine whose plain width is ``left_padding + 2 * half_width``
        for every word the formatter can produce.
    """
    shown = display_word(words[index])
    left_budget = max(0, half_width - shown.before)
    right_budget = max(0, half_width - shown.after)

    glyphs = tuple((char, offset == shown.orp) for offset, char in enumerate(shown.text))

    return WordLine(
        left_padding=max(0, focus_column - half_width),
        left_context=left_context(words, index, left_budget),
        glyphs=glyphs,
        right_context=right_context(words, index, right_budget),
    )

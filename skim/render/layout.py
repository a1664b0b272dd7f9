"""Layout composer — the full reader frame for the current terminal size.

WHY: The word line must sit at the vertical centre of whatever terminal
the reader runs in, with the focus marker above it and progress, status
and help packed at the bottom. Terminals get resized to tiny sizes, so
every offset has to stay non-negative rather than crash or wrap.

HOW: compose_frame() stacks rows top to bottom: blank rows, the focus
marker, the word line (row height // 2 - 1), a stretchable gap, then the
progress bar, status line and help legend, each centred on its own
width. The result is one Rich Text with newline-separated rows.

RULES:
- width or height of 0 means "not measured yet" → "Loading..."
- No words → a no-content message, never an empty word line
- All repeat counts are clamped with max(0, ...)
- The focus marker "│" is drawn exactly at geometry.focus_column
- Under 4 rows the word row height // 2 - 1 is <= 0, so the marker and
  word line pin to rows 0 and 1 and the frame overflows at the bottom
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from rich.text import Text

from skim.config import BOTTOM_SECTION_HEIGHT, HALF_WIDTH, PROGRESS_BAR_WIDTH
from skim.core.eta import estimate_remaining
from skim.core.playback import PlaybackState
from skim.render.context import build_word_line

FOCUS_MARKER = "│"
FOCUS_STYLE = "color(240)"
STATUS_STYLE = "color(245)"
HELP_STYLE = "color(241)"
MESSAGE_STYLE = "color(245)"
PROGRESS_FILLED_STYLE = "#7d56f4"
PROGRESS_EMPTY_STYLE = "color(238)"

NO_CONTENT_MESSAGE = "No words to display"
NO_CONTENT_HINT = "Press 'o' to open a text file or provide a URL as an argument."


@dataclass(frozen=True)
class ViewportGeometry:
    """Terminal size and the column the ORP glyph is pinned to."""

    width: int
    height: int
    focus_column: int

    @classmethod
    def from_size(cls, width: int, height: int) -> "ViewportGeometry":
        width = max(0, width)
        height = max(0, height)
        return cls(width=width, height=height, focus_column=width // 2)

    @property
    def measured(self) -> bool:
        return self.width > 0 and self.height > 0


def center(text: Text, width: int) -> Text:
    """Left-pad ``text`` so it sits centred in ``width`` columns."""
    pad = max(0, (width - text.cell_len) // 2)
    return Text(" " * pad) + text


def render_progress_bar(fraction: float, width: int = PROGRESS_BAR_WIDTH) -> Text:
    """A fixed-width bar filled to ``fraction`` (clamped to [0, 1])."""
    fraction = max(0.0, min(1.0, fraction))
    filled = int(round(fraction * width))
    bar = Text(no_wrap=True)
    bar.append("█" * filled, style=PROGRESS_FILLED_STYLE)
    bar.append("░" * (width - filled), style=PROGRESS_EMPTY_STYLE)
    return bar


def render_status_line(state: PlaybackState) -> Text:
    return Text(
        "{} WPM │ ~{} remaining".format(state.wpm, estimate_remaining(state)),
        style=STATUS_STYLE,
    )


def _no_content_frame(geometry: ViewportGeometry, message: Optional[str]) -> Text:
    headline = message or NO_CONTENT_MESSAGE
    rows: List[Text] = [Text() for _ in range(max(0, geometry.height // 2 - 1))]
    rows.append(center(Text(headline + ".", style=MESSAGE_STYLE), geometry.width))
    rows.append(center(Text(NO_CONTENT_HINT, style=HELP_STYLE), geometry.width))
    return Text("\n", no_wrap=True, overflow="crop").join(rows)


def compose_frame(
    state: PlaybackState,
    words: Sequence[str],
    geometry: ViewportGeometry,
    help_lines: Sequence[str] = (),
    message: Optional[str] = None,
    half_width: int = HALF_WIDTH,
) -> Text:
    """Assemble the whole screen for one playback snapshot.

    Args:
        state: Snapshot from PlaybackMachine.snapshot().
        words: The loaded word sequence (same one the snapshot describes).
        geometry: Current terminal geometry.
        help_lines: Pre-rendered help legend rows, drawn last.
        message: Upstream error to show instead of "No words to display".
        half_width: Context columns on each side of the ORP glyph.

    Returns:
        The frame as newline-separated Rich Text.
    """
    if not geometry.measured:
        return Text("Loading...")

    if state.is_empty or not words:
        return _no_content_frame(geometry, message)

    word_row = geometry.height // 2 - 1
    rows: List[Text] = [Text() for _ in range(max(0, word_row - 1))]

    rows.append(Text(" " * geometry.focus_column) + Text(FOCUS_MARKER, style=FOCUS_STYLE))
    line = build_word_line(words, state.current_index, geometry.focus_column, half_width)
    rows.append(line.to_text())

    gap = geometry.height - word_row - 2 - BOTTOM_SECTION_HEIGHT
    rows.extend(Text() for _ in range(max(0, gap)))

    rows.append(center(render_progress_bar(state.progress), geometry.width))
    rows.append(Text())
    rows.append(center(render_status_line(state), geometry.width))
    rows.append(Text())
    for help_line in help_lines:
        rows.append(center(Text(help_line, style=HELP_STYLE), geometry.width))

    return Text("\n", no_wrap=True, overflow="crop").join(rows)

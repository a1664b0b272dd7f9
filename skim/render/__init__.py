"""Frame rendering — context window and full-screen layout.

WHY: Turning a playback snapshot into what the terminal shows is pure
string work with its own invariants (fixed ORP column, constant line
width, non-negative padding). Keeping it out of the Textual app lets
tests check every row without a terminal.

HOW: context.py builds the word line around the ORP glyph; layout.py
stacks the focus marker, word line, progress bar, status and help into
one Rich Text frame.

RULES:
- Inputs are read-only snapshots; nothing here mutates playback state
- Output is Rich Text; no Textual imports
"""

from skim.render.context import WordLine, build_word_line
from skim.render.layout import ViewportGeometry, compose_frame

__all__ = ["WordLine", "ViewportGeometry", "build_word_line", "compose_frame"]

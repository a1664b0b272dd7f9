"""skim — a terminal RSVP speed reader.

WHY: Reading one word at a time in a fixed screen position, with the
Optimal Recognition Point (ORP) of each word highlighted, removes most
eye movement and lets a reader hold a steady pace well above normal
reading speed. skim brings that to any terminal.

HOW: Four layers: sources (stdin, file, URL), core (tokenizer, ORP,
pacing clock, playback state machine, ETA), render (context window and
full-frame layout as Rich text) and tui (the Textual app wiring keys,
timers and resize events to the core).

RULES:
- core and render never import Textual; they are pure and testable
- Only the playback state machine mutates playback state
- The ORP glyph is always drawn at the focus column, whatever the word
"""

__version__ = "0.1.0"

"""Remaining reading time estimate for the status line.

WHY: Readers want to know how long the rest of the document takes at
the current speed, and the answer must update the moment they change
speed or jump around.

HOW: Derived purely from a PlaybackState snapshot: words after the
current one, times one minute, divided by the current WPM. No elapsed
time is tracked.

RULES:
- remaining words = total - index - 1 (0 for an empty document)
- Seconds are truncated, never rounded up
- "42s" below a minute, "3m 5s" below an hour, "1h 2m" otherwise
"""

from __future__ import annotations

from skim.core.clock import MS_PER_MINUTE
from skim.core.playback import PlaybackState


def remaining_words(state: PlaybackState) -> int:
    """Words still to be shown after the current one."""
    if state.total_words == 0:
        return 0
    return max(0, state.total_words - state.current_index - 1)


def remaining_seconds(words: int, wpm: int) -> int:
    """Whole seconds needed to show ``words`` more words at ``wpm``."""
    if words <= 0 or wpm <= 0:
        return 0
    return (words * MS_PER_MINUTE // wpm) // 1000


def format_duration(seconds: int) -> str:
    """Format a duration compactly: ``42s``, ``3m 5s`` or ``1h 2m``."""
    seconds = max(0, int(seconds))
    if seconds < 60:
        return "{}s".format(seconds)
    if seconds < 3600:
        return "{}m {}s".format(seconds // 60, seconds % 60)
    return "{}h {}m".format(seconds // 3600, (seconds // 60) % 60)


def estimate_remaining(state: PlaybackState) -> str:
    """Formatted time left for the rest of the document at the current WPM."""
    return format_duration(remaining_seconds(remaining_words(state), state.wpm))

"""Playback state machine — the single owner of the read position.

WHY: Timer ticks and key commands both move the read position and both
can race each other in a naive design (a tick arriving right after a
restart, a resume while an old tick is still pending). Funnelling every
mutation through one object with explicit states keeps the invariants
in one place: the index is always in range, WPM is always clamped, and
the clock only runs while the machine is PLAYING.

HOW: PlaybackMachine holds the word tuple, index, WPM and status.
Commands (toggle_play, step, jump, set_speed, restart, load) mutate it
and arm/disarm an attached PacingClock. Renderers never see the machine
itself, only the frozen PlaybackState returned by snapshot().

RULES:
- IDLE: no words. PAUSED: words, clock stopped. PLAYING: clock armed
- load() resets to index 0 and PAUSED (IDLE when the list is empty)
- Entering PLAYING arms the clock; tick() re-arms while words remain
- A tick on the last word transitions to PAUSED and does not re-arm
- toggle_play() at the last word rewinds to 0 and plays
  (a one-word document stays PAUSED)
- step/jump clamp to [0, len-1] and never touch play/pause
- set_speed clamps to [MIN_WPM, MAX_WPM]
- restart() always ends at index 0, PAUSED
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from skim.config import DEFAULT_WPM, clamp_wpm
from skim.core.clock import PacingClock

logger = logging.getLogger(__name__)


class PlaybackStatus(str, enum.Enum):
    """The three playback states.

    - idle: no words loaded
    - paused: words loaded, clock not advancing
    - playing: clock armed and advancing one word per interval
    """

    IDLE = "idle"
    PAUSED = "paused"
    PLAYING = "playing"


@dataclass(frozen=True)
class PlaybackState:
    """Read-only snapshot of playback handed to renderers.

    RULES:
    - 0 <= current_index < total_words whenever total_words > 0
    - current_index == 0 when total_words == 0
    - MIN_WPM <= wpm <= MAX_WPM
    """

    current_index: int
    wpm: int
    paused: bool
    total_words: int

    @property
    def is_empty(self) -> bool:
        return self.total_words == 0

    @property
    def progress(self) -> float:
        """Fraction of the document shown so far, (index + 1) / total."""
        if self.total_words == 0:
            return 0.0
        return (self.current_index + 1) / self.total_words


class PlaybackMachine:
    """State machine for RSVP playback.

    Args:
        words: Initial word sequence (may be empty).
        wpm: Initial reading rate; clamped on entry.
        clock: Optional PacingClock; can be attached later with
               attach_clock() when the clock needs the machine's tick.
    """

    def __init__(
        self,
        words: Iterable[str] = (),
        wpm: int = DEFAULT_WPM,
        clock: Optional[PacingClock] = None,
    ) -> None:
        self._words: Tuple[str, ...] = ()
        self._index = 0
        self._wpm = clamp_wpm(wpm)
        self._status = PlaybackStatus.IDLE
        self._clock = clock
        self.load(words)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def status(self) -> PlaybackStatus:
        return self._status

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def wpm(self) -> int:
        return self._wpm

    @property
    def current_word(self) -> Optional[str]:
        if not self._words:
            return None
        return self._words[self._index]

    def snapshot(self) -> PlaybackState:
        """Return an immutable view of the current playback state."""
        return PlaybackState(
            current_index=self._index,
            wpm=self._wpm,
            paused=self._status is not PlaybackStatus.PLAYING,
            total_words=len(self._words),
        )

    def attach_clock(self, clock: PacingClock) -> None:
        """Attach the pacing clock; arms it at once if already PLAYING."""
        self._clock = clock
        if self._status is PlaybackStatus.PLAYING:
            clock.arm(self._wpm)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def load(self, words: Iterable[str]) -> PlaybackStatus:
        """Replace the word sequence; resets to index 0, PAUSED or IDLE."""
        self._disarm()
        self._words = tuple(words)
        self._index = 0
        self._status = PlaybackStatus.PAUSED if self._words else PlaybackStatus.IDLE
        logger.info("Loaded %d words (%s)", len(self._words), self._status.value)
        return self._status

    def toggle_play(self) -> PlaybackStatus:
        """Switch between PAUSED and PLAYING. No-op while IDLE."""
        if self._status is PlaybackStatus.IDLE:
            return self._status

        if self._status is PlaybackStatus.PLAYING:
            self.pause()
            return self._status

        if self._index >= len(self._words) - 1:
            # Finished document: start over from the first word
            self._index = 0
            if len(self._words) == 1:
                logger.debug("Single-word document, staying paused")
                return self._status

        self._status = PlaybackStatus.PLAYING
        logger.debug("Playing from index %d at %d WPM", self._index, self._wpm)
        self._arm()
        return self._status

    def pause(self) -> None:
        """Force PAUSED (no-op while IDLE)."""
        if self._status is PlaybackStatus.PLAYING:
            self._status = PlaybackStatus.PAUSED
            logger.debug("Paused at index %d", self._index)
        self._disarm()

    def tick(self) -> bool:
        """Advance one word on a clock wake-up.

        Returns:
            True when the clock was re-armed for another word, False when
            the tick was ignored or the document just finished.
        """
        if self._status is not PlaybackStatus.PLAYING:
            return False

        if self._index < len(self._words) - 1:
            self._index += 1
            self._arm()
            return True

        # Tick on the last word: stop without scheduling another one
        self._status = PlaybackStatus.PAUSED
        self._disarm()
        logger.info("Reached end of document (%d words)", len(self._words))
        return False

    def step(self, delta: int) -> int:
        """Move the read position by ``delta`` words, clamped to the document."""
        return self._move(delta)

    def jump(self, delta: int) -> int:
        """Move the read position by a jump (±JUMP_SIZE), clamped to the document."""
        return self._move(delta)

    def set_speed(self, delta: int) -> int:
        """Adjust WPM by ``delta``; applies from the next scheduled tick."""
        self._wpm = clamp_wpm(self._wpm + delta)
        logger.debug("Speed set to %d WPM", self._wpm)
        return self._wpm

    def restart(self) -> None:
        """Go back to the first word and pause."""
        self._index = 0
        if self._status is PlaybackStatus.PLAYING:
            self._status = PlaybackStatus.PAUSED
        self._disarm()
        logger.debug("Restarted")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _move(self, delta: int) -> int:
        if not self._words:
            return self._index
        self._index = max(0, min(len(self._words) - 1, self._index + delta))
        return self._index

    def _arm(self) -> None:
        if self._clock is not None:
            self._clock.arm(self._wpm)

    def _disarm(self) -> None:
        if self._clock is not None:
            self._clock.disarm()

"""One-shot pacing clock that turns a WPM rate into word advances.

WHY: Each word stays on screen for one minute divided by the reading
rate. A free-running interval would keep firing at a stale rate after a
speed change and needs cancelling on pause; re-arming a single one-shot
wake-up after every word makes a new WPM apply cleanly at the next word
boundary, and pausing simply means "don't re-arm".

HOW: PacingClock wraps a scheduler callable, ``schedule(delay_s,
callback)``, which is Textual's ``App.set_timer`` in the running app and
a recording fake in tests. arm() schedules exactly one wake-up that
calls on_tick(). Whoever handles the tick decides whether to arm again.

RULES:
- Interval is 60_000 // wpm milliseconds (integer minute / rate)
- One arm() == at most one on_tick() call
- A wake-up from an earlier arm() is dropped once the clock is re-armed
  or disarmed, so pause/resume never leaves two tick chains running
- No preemption: a WPM change never shortens the wait already in flight
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

MS_PER_MINUTE = 60_000

Scheduler = Callable[[float, Callable[[], None]], Any]
"""``schedule(delay_s, callback)`` registers a one-shot callback."""


def tick_interval_ms(wpm: int) -> int:
    """Milliseconds between word advances at the given rate.

    Raises:
        ValueError: If wpm is not positive.
    """
    if wpm <= 0:
        raise ValueError(f"WPM must be positive, got {wpm}")
    return MS_PER_MINUTE // wpm


def tick_interval_s(wpm: int) -> float:
    """Seconds between word advances, for schedulers that take seconds."""
    return tick_interval_ms(wpm) / 1000.0


class PacingClock:
    """Re-armed one-shot timer driving the playback state machine.

    WHY: The state machine must not know about the event loop, and the
    event loop must not know about playback rules. The clock sits between
    them: it only knows how long to wait and whom to call.

    HOW: Every arm() bumps a generation counter and schedules a callback
    bound to that generation. When a callback fires with an outdated
    generation it does nothing.

    RULES:
    - arm(wpm) reads the rate at scheduling time only
    - disarm() makes any pending wake-up a no-op
    - armed is True from arm() until its wake-up fires or disarm()
    """

    def __init__(self, schedule: Scheduler, on_tick: Callable[[], None]) -> None:
        self._schedule = schedule
        self._on_tick = on_tick
        self._generation = 0
        self._armed = False

    @property
    def armed(self) -> bool:
        return self._armed

    def arm(self, wpm: int) -> None:
        """Schedule exactly one wake-up after the interval for ``wpm``."""
        self._generation += 1
        generation = self._generation
        self._armed = True
        delay_s = tick_interval_s(wpm)
        logger.debug("Clock armed (generation %d, %.3fs)", generation, delay_s)
        self._schedule(delay_s, lambda: self._fire(generation))

    def disarm(self) -> None:
        """Invalidate the pending wake-up, if any."""
        if self._armed:
            logger.debug("Clock disarmed (generation %d)", self._generation)
        self._generation += 1
        self._armed = False

    def _fire(self, generation: int) -> None:
        if generation != self._generation:
            logger.debug("Dropping stale wake-up (generation %d)", generation)
            return
        self._armed = False
        self._on_tick()

"""Shared test fixtures for the skim test suite.

WHY: Playback, clock and layout tests all need the same short document
and a way to drive the pacing clock without real time passing.

HOW: FakeScheduler stands in for Textual's App.set_timer: it records
every (delay, callback) pair and lets a test fire them by hand. Fixtures
build a PlaybackMachine wired to a PacingClock on that scheduler.

RULES:
- SAMPLE_WORDS is the four-word document used across the suite
- Nothing here sleeps or touches a real event loop
"""

from typing import Callable, List, Tuple

import pytest

from skim.core.clock import PacingClock
from skim.core.playback import PlaybackMachine

SAMPLE_WORDS: List[str] = ["The", "quick", "brown", "fox"]


class FakeScheduler:
    """Records scheduled one-shot callbacks; tests fire them explicitly."""

    def __init__(self) -> None:
        self.calls: List[Tuple[float, Callable[[], None]]] = []

    def __call__(self, delay_s: float, callback: Callable[[], None]) -> None:
        self.calls.append((delay_s, callback))

    @property
    def delays(self) -> List[float]:
        return [delay for delay, _ in self.calls]

    def fire_next(self) -> None:
        """Run the oldest pending callback."""
        _, callback = self.calls.pop(0)
        callback()

    def fire_all(self) -> None:
        """Run every callback pending right now (not ones they schedule)."""
        pending, self.calls = self.calls, []
        for _, callback in pending:
            callback()


@pytest.fixture
def sample_words():
    """The four-word sample document."""
    return list(SAMPLE_WORDS)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def machine(sample_words, scheduler):
    """PlaybackMachine at 500 WPM with a clock on the fake scheduler."""
    m = PlaybackMachine(sample_words, wpm=500)
    m.attach_clock(PacingClock(scheduler, m.tick))
    return m


@pytest.fixture
def empty_machine(scheduler):
    m = PlaybackMachine([], wpm=500)
    m.attach_clock(PacingClock(scheduler, m.tick))
    return m

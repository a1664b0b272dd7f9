"""The reader application: Textual glue around playback and layout.

WHY: Playback rules, pacing and layout are plain Python and know nothing
about terminals. Something has to own the event loop, turn key presses
into commands, forward terminal resizes, and redraw after every change.

HOW: SkimApp owns one PlaybackMachine and one PacingClock whose scheduler
is App.set_timer. Every action calls a machine command and then
_refresh_frame(), which renders compose_frame() into a single Static.
Opening a file pauses playback and pushes FilePickerScreen; its result is
loaded with load_file().

RULES:
- All playback mutations go through the PlaybackMachine
- Reader commands are disabled while the file picker is on screen
- A picker failure is kept as the no-content message; with words already
  loaded it is shown as a notification and the old words stay
- Starting without words opens the picker immediately
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from skim.config import DEFAULT_WPM, HALF_WIDTH, JUMP_SIZE, WPM_STEP
from skim.core.clock import PacingClock
from skim.core.playback import PlaybackMachine
from skim.render.layout import ViewportGeometry, compose_frame
from skim.sources.loader import load_file
from skim.tui.keys import BINDINGS as READER_BINDINGS, help_lines
from skim.tui.picker import FilePickerScreen

logger = logging.getLogger(__name__)

_READER_ACTIONS = frozenset({
    "toggle_play", "prev_word", "next_word", "faster", "slower",
    "jump_back", "jump_forward", "restart", "open_file",
})


class ReaderView(Static):
    """Full-screen frame; never wraps, content is pre-laid-out."""

    DEFAULT_CSS = """
    ReaderView {
        width: 100%;
        height: 100%;
        overflow: hidden hidden;
    }
    """


class SkimApp(App):
    """Terminal RSVP reader.

    Args:
        words: Words to read; empty opens the file picker on start.
        wpm: Initial reading rate (clamped by the machine).
        start_path: Directory the file picker opens in.
        half_width: Context columns on each side of the ORP glyph.
    """

    TITLE = "skim"
    BINDINGS = READER_BINDINGS

    CSS = """
    Screen {
        background: $background;
    }
    """

    def __init__(
        self,
        words: Iterable[str] = (),
        wpm: int = DEFAULT_WPM,
        start_path: Union[str, Path] = ".",
        half_width: int = HALF_WIDTH,
    ) -> None:
        super().__init__()
        self.machine = PlaybackMachine(words, wpm=wpm)
        self.clock = PacingClock(self._schedule, self._on_clock_tick)
        self.machine.attach_clock(self.clock)
        self.geometry = ViewportGeometry.from_size(0, 0)
        self.start_path = Path(start_path)
        self.half_width = half_width
        self.message: Optional[str] = None
        self._help = help_lines()
        self.reader: Optional[ReaderView] = None

    def compose(self) -> ComposeResult:
        self.reader = ReaderView(id="reader")
        yield self.reader

    def on_mount(self) -> None:
        self.geometry = ViewportGeometry.from_size(self.size.width, self.size.height)
        self._refresh_frame()
        if not self.machine.words:
            self.action_open_file()

    def on_resize(self, event: events.Resize) -> None:
        self.geometry = ViewportGeometry.from_size(event.size.width, event.size.height)
        self._refresh_frame()

    # ------------------------------------------------------------------
    # Clock plumbing
    # ------------------------------------------------------------------

    def _schedule(self, delay_s: float, callback) -> None:
        self.set_timer(delay_s, callback)

    def _on_clock_tick(self) -> None:
        self.machine.tick()
        self._refresh_frame()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_frame(self):
        """The current frame as Rich Text (also used by tests)."""
        return compose_frame(
            self.machine.snapshot(),
            self.machine.words,
            self.geometry,
            help_lines=self._help,
            message=self.message,
            half_width=self.half_width,
        )

    def _refresh_frame(self) -> None:
        if self.reader is None:
            return
        self.reader.update(self.render_frame())

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def check_action(self, action: str, parameters: Tuple[object, ...]) -> Optional[bool]:
        if action in _READER_ACTIONS and isinstance(self.screen, FilePickerScreen):
            return False
        return True

    def action_toggle_play(self) -> None:
        self.machine.toggle_play()
        self._refresh_frame()

    def action_prev_word(self) -> None:
        self.machine.step(-1)
        self._refresh_frame()

    def action_next_word(self) -> None:
        self.machine.step(1)
        self._refresh_frame()

    def action_faster(self) -> None:
        self.machine.set_speed(WPM_STEP)
        self._refresh_frame()

    def action_slower(self) -> None:
        self.machine.set_speed(-WPM_STEP)
        self._refresh_frame()

    def action_jump_back(self) -> None:
        self.machine.jump(-JUMP_SIZE)
        self._refresh_frame()

    def action_jump_forward(self) -> None:
        self.machine.jump(JUMP_SIZE)
        self._refresh_frame()

    def action_restart(self) -> None:
        self.machine.restart()
        self._refresh_frame()

    def action_open_file(self) -> None:
        self.machine.pause()
        self._refresh_frame()
        self.push_screen(FilePickerScreen(self.start_path), callback=self._on_file_picked)

    def _on_file_picked(self, path: Optional[Path]) -> None:
        if path is None:
            logger.debug("File picker cancelled")
            return

        result = load_file(path)
        if result.ok:
            self.machine.load(result.words)
            self.message = None
            self.sub_title = result.path.name if result.path else ""
        else:
            logger.warning("Could not open %s: %s", path, result.error)
            self.message = result.error
            if self.machine.words:
                self.notify(result.error or "Could not open file", severity="error")
        self._refresh_frame()

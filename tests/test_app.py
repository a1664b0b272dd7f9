"""Smoke tests for the Textual reader app.

WHY: The engine is tested in isolation elsewhere; these tests check the
wiring: keys reach the right commands, the clock drives playback through
App.set_timer, and the file picker opens, pauses and hands back files.

HOW: Each test drives SkimApp headless through App.run_test() and its
Pilot, wrapped in asyncio.run() so no async pytest plugin is needed.

RULES:
- The picker is always rooted in tmp_path, never the real cwd
- Timing assertions use generous pauses relative to the 60ms interval
"""

import asyncio

from skim.config import JUMP_SIZE, WPM_STEP
from skim.core.playback import PlaybackStatus
from skim.tui.app import SkimApp
from skim.tui.picker import FilePickerScreen, is_text_file

SIZE = (100, 30)


def _run(app, scenario):
    async def runner():
        async with app.run_test(size=SIZE) as pilot:
            await scenario(app, pilot)

    asyncio.run(runner())


class TestKeys:
    """Key presses map onto playback commands."""

    def test_space_toggles_play(self, sample_words, tmp_path):
        app = SkimApp(sample_words, wpm=500, start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.press("space")
            assert app.machine.status is PlaybackStatus.PLAYING
            await pilot.press("space")
            assert app.machine.status is PlaybackStatus.PAUSED

        _run(app, scenario)

    def test_navigation_keys(self, tmp_path):
        words = ["w{}".format(i) for i in range(30)]
        app = SkimApp(words, wpm=500, start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.press("right", "l")
            assert app.machine.current_index == 2
            await pilot.press("left")
            assert app.machine.current_index == 1
            await pilot.press("right_square_bracket")
            assert app.machine.current_index == 1 + JUMP_SIZE
            await pilot.press("left_square_bracket", "left_square_bracket")
            assert app.machine.current_index == 0
            await pilot.press("right", "r")
            assert app.machine.current_index == 0

        _run(app, scenario)

    def test_speed_keys(self, sample_words, tmp_path):
        app = SkimApp(sample_words, wpm=500, start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.press("up", "k")
            assert app.machine.wpm == 500 + 2 * WPM_STEP
            await pilot.press("down")
            assert app.machine.wpm == 500 + WPM_STEP
            assert "525 WPM" in app.render_frame().plain

        _run(app, scenario)

    def test_frame_shows_current_word(self, sample_words, tmp_path):
        app = SkimApp(sample_words, wpm=500, start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.press("right")
            rows = app.render_frame().plain.split("\n")
            word_row = SIZE[1] // 2 - 1
            assert "quick" in rows[word_row]
            assert rows[word_row][SIZE[0] // 2] == "u"

        _run(app, scenario)


class TestPlayback:
    def test_clock_advances_words(self, tmp_path):
        words = ["w{}".format(i) for i in range(200)]
        app = SkimApp(words, wpm=1000, start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.press("space")
            await pilot.pause(0.5)
            assert app.machine.current_index > 0
            await pilot.press("space")
            stopped_at = app.machine.current_index
            await pilot.pause(0.3)
            assert app.machine.current_index == stopped_at

        _run(app, scenario)


class TestFilePicker:
    """The picker opens without words and on "o", and loads what it returns."""

    def test_opens_when_no_words(self, tmp_path):
        app = SkimApp([], start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.pause()
            assert isinstance(app.screen, FilePickerScreen)
            await pilot.press("escape")
            assert not isinstance(app.screen, FilePickerScreen)
            assert "No words to display." in app.render_frame().plain

        _run(app, scenario)

    def test_open_pauses_and_blocks_reader_keys(self, sample_words, tmp_path):
        app = SkimApp(sample_words, wpm=500, start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.press("space")
            await pilot.press("o")
            assert isinstance(app.screen, FilePickerScreen)
            assert app.machine.status is PlaybackStatus.PAUSED
            index = app.machine.current_index
            await pilot.press("r", "right_square_bracket")
            assert app.machine.current_index == index
            await pilot.press("escape")
            assert not isinstance(app.screen, FilePickerScreen)

        _run(app, scenario)

    def test_picked_file_is_loaded(self, tmp_path):
        path = tmp_path / "chapter.txt"
        path.write_text("It was a dark and stormy night", encoding="utf-8")
        app = SkimApp([], start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.press("escape")
            app._on_file_picked(path)
            assert app.machine.words[0] == "It"
            assert app.machine.status is PlaybackStatus.PAUSED
            assert app.message is None
            assert app.sub_title == "chapter.txt"

        _run(app, scenario)

    def test_bad_pick_keeps_current_words(self, sample_words, tmp_path):
        path = tmp_path / "data.txt"
        path.write_bytes(b"\x00\x00")
        app = SkimApp(sample_words, start_path=tmp_path)

        async def scenario(app, pilot):
            app._on_file_picked(path)
            assert list(app.machine.words) == sample_words
            assert app.message == "Cannot open binary file"

        _run(app, scenario)

    def test_bad_pick_without_words_shows_reason(self, tmp_path):
        path = tmp_path / "blank.md"
        path.write_text("\n\n", encoding="utf-8")
        app = SkimApp([], start_path=tmp_path)

        async def scenario(app, pilot):
            await pilot.press("escape")
            app._on_file_picked(path)
            assert "No words found in file." in app.render_frame().plain

        _run(app, scenario)


class TestTextFileFilter:
    def test_extensions(self, tmp_path):
        assert is_text_file(tmp_path / "README.MD")
        assert is_text_file(tmp_path / "main.py")
        assert is_text_file(tmp_path / ".gitignore")
        assert not is_text_file(tmp_path / "photo.jpg")
        assert not is_text_file(tmp_path / "Makefile")

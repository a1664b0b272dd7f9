"""Tests for the command-line interface.

WHY: The CLI decides which source to read and is the only place source
errors are printed. Wrong precedence (a file argument beating piped
stdin) or a traceback instead of "Error: ..." would be user-visible.

HOW: build_parser() is inspected directly. load_words() is called with
BytesIO stdin and tmp_path files. main() is run with _stdin_is_piped and
SkimApp patched out so no terminal is needed.

RULES:
- main() never starts a real Textual app in these tests
"""

import asyncio
import io
import logging
from unittest.mock import patch

import pytest

from skim import cli
from skim.config import MAX_WPM, MIN_WPM
from skim.sources import EmptySourceError


class TestParser:
    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        assert args.source is None
        assert args.wpm == cli.DEFAULT_WPM
        assert args.verbose is False

    def test_source_and_wpm(self):
        args = cli.build_parser().parse_args(["notes.md", "--wpm", "300"])
        assert args.source == "notes.md"
        assert args.wpm == 300

    def test_non_integer_wpm_rejected(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--wpm", "fast"])


class TestLoadWords:
    """load_words picks stdin, then URL, then file."""

    def test_no_source(self):
        assert cli.load_words(None) == []

    def test_file(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("one two three", encoding="utf-8")
        assert cli.load_words(str(path)) == ["one", "two", "three"]

    def test_stdin_wins_over_file(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("from file", encoding="utf-8")
        words = cli.load_words(str(path), stdin=io.BytesIO(b"from stdin"))
        assert words == ["from", "stdin"]

    def test_empty_stdin(self):
        with pytest.raises(EmptySourceError) as exc:
            cli.load_words(None, stdin=io.BytesIO(b"  \n"))
        assert exc.value.reason == "No words found in stdin"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(EmptySourceError) as exc:
            cli.load_words(str(path))
        assert exc.value.reason == "No words found in file"

    def test_url_fetch(self, capsys):
        async def fake_fetch(url):
            return "<p>ignored</p> web words"

        with patch.object(cli, "fetch_url", new=fake_fetch):
            words = cli.load_words("https://example.com/post")

        assert words == ["<p>ignored</p>", "web", "words"]
        assert "Fetching content from URL: https://example.com/post" in capsys.readouterr().err

    def test_empty_url_content(self):
        async def fake_fetch(url):
            return ""

        with patch.object(cli, "fetch_url", new=fake_fetch):
            with pytest.raises(EmptySourceError) as exc:
                cli.load_words("https://example.com/empty")
        assert exc.value.reason == "No words found in URL content"


class TestMain:
    """main prints source errors and exits 1, or hands words to the app."""

    def test_missing_file_exits_1(self, tmp_path, capsys):
        with patch.object(cli, "_stdin_is_piped", return_value=False):
            with pytest.raises(SystemExit) as exc:
                cli.main([str(tmp_path / "missing.txt")])
        assert exc.value.code == 1
        assert "Error: Error reading file" in capsys.readouterr().err

    def test_binary_file_exits_1(self, tmp_path, capsys):
        path = tmp_path / "blob.bin"
        path.write_bytes(b"\x00\xff\x00")
        with patch.object(cli, "_stdin_is_piped", return_value=False):
            with pytest.raises(SystemExit) as exc:
                cli.main([str(path)])
        assert exc.value.code == 1
        assert "Error: Cannot open binary file" in capsys.readouterr().err

    def test_runs_app_with_clamped_wpm(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("alpha beta", encoding="utf-8")
        with patch.object(cli, "_stdin_is_piped", return_value=False), \
                patch("skim.tui.app.SkimApp") as app_cls:
            cli.main([str(path), "--wpm", "5000"])

        args, kwargs = app_cls.call_args
        assert args[0] == ["alpha", "beta"]
        assert kwargs["wpm"] == MAX_WPM
        app_cls.return_value.run.assert_called_once()

    def test_low_wpm_clamped(self):
        with patch.object(cli, "_stdin_is_piped", return_value=False), \
                patch("skim.tui.app.SkimApp") as app_cls:
            cli.main(["--wpm", "1"])
        assert app_cls.call_args[1]["wpm"] == MIN_WPM
        assert app_cls.call_args[0][0] == []

    def test_tty_failure_exits_1(self, capsys):
        fake_stdin = io.TextIOWrapper(io.BytesIO(b"piped text"))
        with patch.object(cli, "_stdin_is_piped", return_value=True), \
                patch.object(cli.sys, "stdin", fake_stdin), \
                patch.object(cli, "_reattach_tty", side_effect=OSError("no tty")), \
                patch("skim.tui.app.SkimApp") as app_cls:
            with pytest.raises(SystemExit) as exc:
                cli.main([])
        assert exc.value.code == 1
        assert "Cannot open /dev/tty" in capsys.readouterr().err
        app_cls.assert_not_called()


class TestLogging:
    """Log records never reach the terminal once the TUI is drawing on it."""

    def test_detached_handler_drops_tui_warnings(self, tmp_path):
        terminal = io.StringIO()
        handler = logging.StreamHandler(terminal)
        root = logging.getLogger()
        root.addHandler(handler)
        try:
            logging.getLogger("skim.tui.app").warning("before the app starts")
            cli._detach_stderr_logging(handler)

            from skim.tui.app import SkimApp

            path = tmp_path / "data.txt"
            path.write_bytes(b"\x00\x00")
            app = SkimApp(["some", "words"], start_path=tmp_path)

            async def runner():
                async with app.run_test():
                    app._on_file_picked(path)

            asyncio.run(runner())
        finally:
            root.removeHandler(handler)

        assert app.message == "Cannot open binary file"
        assert terminal.getvalue().count("\n") == 1
        assert "Could not open" not in terminal.getvalue()
        assert handler not in root.handlers

    def test_detach_without_handler_is_noop(self):
        before = list(logging.getLogger().handlers)
        cli._detach_stderr_logging(None)
        assert logging.getLogger().handlers == before

    def test_main_detaches_before_running_app(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("alpha beta", encoding="utf-8")
        terminal = io.StringIO()
        handler = logging.StreamHandler(terminal)
        seen = {}

        def run():
            seen["attached"] = handler in logging.getLogger().handlers
            logging.getLogger("skim.tui.app").warning("Could not open x: Cannot open binary file")

        with patch.object(cli, "_configure_logging", return_value=handler), \
                patch.object(cli, "_stdin_is_piped", return_value=False), \
                patch("skim.tui.app.SkimApp") as app_cls:
            logging.getLogger().addHandler(handler)
            app_cls.return_value.run.side_effect = run
            cli.main([str(path)])

        assert seen["attached"] is False
        assert terminal.getvalue() == ""

    def test_handler_detached_on_source_error(self, tmp_path):
        terminal = io.StringIO()
        handler = logging.StreamHandler(terminal)
        with patch.object(cli, "_configure_logging", return_value=handler), \
                patch.object(cli, "_stdin_is_piped", return_value=False):
            logging.getLogger().addHandler(handler)
            with pytest.raises(SystemExit):
                cli.main([str(tmp_path / "missing.txt")])
        assert handler not in logging.getLogger().handlers

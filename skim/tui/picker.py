"""File picker — a modal directory browser limited to text files.

WHY: When skim starts without a source (or the user presses "o") there
has to be a way to choose something to read without leaving the TUI.
Offering only text-like files keeps binaries out of the list.

HOW: TextFileTree is a DirectoryTree whose filter_paths() keeps
directories and files whose suffix or name is in TEXT_FILE_EXTENSIONS.
FilePickerScreen wraps it in a ModalScreen that dismisses with the
selected Path, or None when cancelled.

RULES:
- Hidden entries (leading ".") are not listed, except known dotfile names
- Extension match is case-insensitive
- escape and q cancel; enter on a file selects it
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import DirectoryTree, Static

from skim.config import TEXT_FILE_EXTENSIONS


def is_text_file(path: Path) -> bool:
    """True when the picker should offer ``path`` as a readable file."""
    return path.suffix.lower() in TEXT_FILE_EXTENSIONS or path.name.lower() in TEXT_FILE_EXTENSIONS


class TextFileTree(DirectoryTree):
    """DirectoryTree showing only directories and text files."""

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        kept = []
        for path in paths:
            if path.is_dir():
                if not path.name.startswith("."):
                    kept.append(path)
            elif is_text_file(path):
                if not path.name.startswith(".") or path.name.lower() in TEXT_FILE_EXTENSIONS:
                    kept.append(path)
        return kept


class FilePickerScreen(ModalScreen[Optional[Path]]):
    """Modal screen for choosing a text file to read."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("q", "cancel", "Cancel", show=False),
    ]

    DEFAULT_CSS = """
    FilePickerScreen {
        align: center middle;
    }

    #picker-dialog {
        width: 80%;
        height: 80%;
        border: round $primary;
        padding: 0 1;
    }

    #picker-title {
        color: $text-muted;
        padding-bottom: 1;
    }

    #picker-tree {
        height: 1fr;
    }
    """

    def __init__(self, start_path: Union[str, Path] = ".") -> None:
        super().__init__()
        self.start_path = Path(start_path)

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static("Select a text file (enter to open, esc to cancel)", id="picker-title"),
            TextFileTree(self.start_path, id="picker-tree"),
            id="picker-dialog",
        )

    def on_mount(self) -> None:
        self.query_one("#picker-tree", TextFileTree).focus()

    @on(DirectoryTree.FileSelected)
    def on_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        event.stop()
        self.dismiss(Path(event.path))

    def action_cancel(self) -> None:
        self.dismiss(None)

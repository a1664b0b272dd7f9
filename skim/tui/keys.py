"""Key bindings and the help legend for the reader screen.

WHY: The command set is small and fixed. The keys for each live in one
table so the bindings and the on-screen legend can never disagree.

HOW: COMMANDS lists one KeyCommand per action with its keys, the label
shown in the legend, and a description. BINDINGS is derived from it for
Textual; help_lines() renders HELP_ROWS as legend rows.

RULES:
- Every reader command appears exactly once in COMMANDS
- Vim-style letters mirror the arrow keys (h/j/k/l)
- Legend rows: play/prev/next, faster/slower/restart, back/forward/open
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from textual.binding import Binding


@dataclass(frozen=True)
class KeyCommand:
    action: str
    keys: Tuple[str, ...]
    label: str
    description: str


COMMANDS: Tuple[KeyCommand, ...] = (
    KeyCommand("toggle_play", ("space",), "space", "play/pause"),
    KeyCommand("prev_word", ("left", "h"), "←/h", "prev word"),
    KeyCommand("next_word", ("right", "l"), "→/l", "next word"),
    KeyCommand("faster", ("up", "k", "plus", "equals_sign"), "↑/k", "faster"),
    KeyCommand("slower", ("down", "j", "minus", "underscore"), "↓/j", "slower"),
    KeyCommand("jump_back", ("left_square_bracket",), "[", "-10 words"),
    KeyCommand("jump_forward", ("right_square_bracket",), "]", "+10 words"),
    KeyCommand("restart", ("r",), "r", "restart"),
    KeyCommand("open_file", ("o",), "o", "open file"),
    KeyCommand("quit", ("q", "escape", "ctrl+c"), "q", "quit"),
)

_BY_ACTION: Dict[str, KeyCommand] = {command.action: command for command in COMMANDS}

HELP_ROWS: Tuple[Tuple[str, ...], ...] = (
    ("toggle_play", "prev_word", "next_word"),
    ("faster", "slower", "restart"),
    ("jump_back", "jump_forward", "open_file"),
)

BINDINGS: List[Binding] = [
    Binding(key, command.action, command.description, show=False, priority=key == "ctrl+c")
    for command in COMMANDS
    for key in command.keys
]


def help_lines(separator: str = " • ") -> List[str]:
    """Render the legend, one string per HELP_ROWS row.

    >>> help_lines()[0]
    'space play/pause • ←/h prev word • →/l next word'
    """
    lines = []
    for row in HELP_ROWS:
        entries = [
            "{} {}".format(_BY_ACTION[action].label, _BY_ACTION[action].description)
            for action in row
        ]
        lines.append(separator.join(entries))
    lines.append("{} {}".format(_BY_ACTION["quit"].label, _BY_ACTION["quit"].description))
    return lines

"""Pure layout helpers turning an EditorView into screen content.

The layout is a line-number gutter on the left, the buffer, a status line,
and a help line::

    1 │ hello
    2 │ world
     [No Name] - Line 2/2, Col 6                         Insert MODE
     CTRL-Q: Quit | i: Insert Mode | ESC: Normal Mode
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Tuple

from rich.text import Text

from tinyvi.config import (
    DEFAULT_FILENAME,
    DEFAULT_HELP_TEXT,
    MODE_CONFIGS,
    EditorMode,
    ModeConfig,
)
from tinyvi.session import EditorView

GUTTER_SEPARATOR = " │ "


def line_number_width(line_count: int) -> int:
    return max(1, len(str(line_count)))


def gutter_width(line_count: int, *, show_line_numbers: bool = True) -> int:
    if not show_line_numbers:
        return 0
    return line_number_width(line_count) + len(GUTTER_SEPARATOR)


def render_lines(view: EditorView, *, show_line_numbers: bool = True) -> List[str]:
    if not show_line_numbers:
        return list(view.lines)
    width = line_number_width(view.line_count)
    return [
        f"{number:>{width}}{GUTTER_SEPARATOR}{line}"
        for number, line in enumerate(view.lines, start=1)
    ]


def status_line(
    view: EditorView,
    width: int,
    *,
    filename: str = DEFAULT_FILENAME,
    mode_configs: Optional[Mapping[EditorMode, ModeConfig]] = None,
) -> str:
    left, padding, mode = _status_parts(view, width, filename, mode_configs)
    return left + padding + mode


def status_renderable(
    view: EditorView,
    width: int,
    *,
    filename: str = DEFAULT_FILENAME,
    mode_configs: Optional[Mapping[EditorMode, ModeConfig]] = None,
) -> Text:
    """Status line with the mode segment drawn in the mode's accent color."""

    configs = mode_configs or MODE_CONFIGS
    left, padding, mode = _status_parts(view, width, filename, configs)
    text = Text(left + padding, no_wrap=True)
    text.append(mode, style=f"bold black on {configs[view.mode].color}")
    return text


def _status_parts(
    view: EditorView,
    width: int,
    filename: str,
    mode_configs: Optional[Mapping[EditorMode, ModeConfig]],
) -> Tuple[str, str, str]:
    configs = mode_configs or MODE_CONFIGS
    row, col = view.cursor
    left = f" {filename} - Line {row + 1}/{view.line_count}, Col {col + 1} "
    mode = f" {configs[view.mode].label} MODE "
    padding = " " * max(0, width - len(left) - len(mode))
    return left, padding, mode


def help_line(text: str = DEFAULT_HELP_TEXT, *, status: str = "") -> str:
    """Help text, led by a transient status such as ``-- INSERT --``."""

    if not status:
        return text
    return f" {status}{text}"


def cursor_screen_position(
    view: EditorView, *, show_line_numbers: bool = True
) -> Tuple[int, int]:
    """``(x, y)`` cell of the cursor, counting the gutter."""

    row, col = view.cursor
    offset = gutter_width(view.line_count, show_line_numbers=show_line_numbers)
    return (offset + col, row)


def buffer_renderable(view: EditorView, *, show_line_numbers: bool = True) -> Text:
    """Rich text for the buffer area with the cursor cell highlighted."""

    text = Text(no_wrap=True)
    gutter = gutter_width(view.line_count, show_line_numbers=show_line_numbers)
    cursor_x, cursor_y = cursor_screen_position(
        view, show_line_numbers=show_line_numbers
    )
    for row, line in enumerate(render_lines(view, show_line_numbers=show_line_numbers)):
        if row:
            text.append("\n")
        if row == cursor_y:
            # Past-the-end cursor gets a blank cell to sit on.
            line = line.ljust(cursor_x + 1)
        start = len(text)
        text.append(line)
        if gutter:
            text.stylize("dim", start, start + gutter)
        if row == cursor_y:
            text.stylize("reverse", start + cursor_x, start + cursor_x + 1)
    return text


__all__ = [
    "GUTTER_SEPARATOR",
    "line_number_width",
    "gutter_width",
    "render_lines",
    "status_line",
    "status_renderable",
    "help_line",
    "cursor_screen_position",
    "buffer_renderable",
]

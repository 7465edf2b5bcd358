"""Editing verbs the keymap bindings point to."""

from .core import enter_insert_mode, exit_to_normal_mode, request_quit
from .edit import backspace, insert_char, split_line
from .motion import move_down, move_left, move_right, move_up

__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "request_quit",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "insert_char",
    "split_line",
    "backspace",
]

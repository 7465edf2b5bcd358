"""Insert mode: printable keys become text, a few keys stay commands."""

from __future__ import annotations

from tinyvi.actions import edit as edit_actions
from tinyvi.config import EditorMode
from tinyvi.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import (
    execute_match,
    is_text_input,
    key_to_token,
    require_keymap_resolver,
)


class InsertMode(Mode):
    name = EditorMode.INSERT

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("tinyvi.modes.insert")
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, key_to_token(key))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)

        if key.text is not None and is_text_input(key):
            return edit_actions.insert_char(self.context, key.text)

        return ModeResult(consumed=False, status="miss", message="unhandled")

"""Normal mode: every key is a command."""

from __future__ import annotations

from tinyvi.config import EditorMode
from tinyvi.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class NormalMode(Mode):
    name = EditorMode.NORMAL

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("tinyvi.modes.normal")
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, key_to_token(key))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)
        return ModeResult(consumed=False, status="miss", message="unbound")

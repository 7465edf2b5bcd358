"""Textual-facing adapter: key normalization plus UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from tinyvi.config import EditorMode
from tinyvi.keymaps import BACKSPACE, DOWN, ENTER, ESCAPE, LEFT, RIGHT, UP, KeyStroke
from tinyvi.modes import KeyInput
from tinyvi.session import EditorSession, EditorView, KeyOutcome

_SPECIAL_KEYS: Dict[str, str] = {
    "escape": ESCAPE,
    "enter": ENTER,
    "return": ENTER,
    "backspace": BACKSPACE,
    "left": LEFT,
    "right": RIGHT,
    "up": UP,
    "down": DOWN,
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_textual_key(key: str, character: Optional[str] = None) -> KeyInput:
    """Translate a Textual key name (``"ctrl+q"``, ``"escape"``...) to KeyInput."""

    stroke = KeyStroke.parse(key)
    special = _SPECIAL_KEYS.get(stroke.key.lower())
    if special is not None:
        return KeyInput(key=special, modifiers=stroke.modifiers)
    if character and len(character) == 1 and character.isprintable():
        modifiers = tuple(m for m in stroke.modifiers if m != "shift")
        return KeyInput(key=character, modifiers=modifiers, text=character)
    if len(stroke.key) == 1:
        return KeyInput(key=stroke.key, modifiers=stroke.modifiers)
    return KeyInput(key=stroke.key.upper(), modifiers=stroke.modifiers)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[EditorView], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an EditorSession and its bus events to a Textual surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_view()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> KeyOutcome:
        return self.handle_key(normalize_textual_key(key, character))

    def handle_key(self, key: KeyInput) -> KeyOutcome:
        self._log_state("key ->", key=key.key, text=key.text, mods=key.modifiers)
        outcome = self.session.handle_key(key)
        self._refresh_view()
        self._log_state("result <-", outcome=outcome.value)
        return outcome

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in ("buffer.edit", "cursor.move", "mode.switch", "session.quit"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        if name == "mode.switch" and isinstance(payload, dict):
            mode = payload["mode"]
            # Normal mode shows no message.
            message = "" if mode is EditorMode.NORMAL else f"-- {mode.value.upper()} --"
            self.hooks.update_status(message)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.session.view())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        return {
            "mode": self.session.mode.value,
            "cursor": buffer.cursor,
            "lines": buffer.document.line_count,
            "version": buffer.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_textual_key"]

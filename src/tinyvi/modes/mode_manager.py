"""Mode manager coordinating the Normal/Insert state machine."""

from __future__ import annotations

from typing import Dict, Optional, Type

from tinyvi.config import EditorMode
from tinyvi.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from tinyvi.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Owns the active mode, handles transitions, and dispatches key events.

    The first registered mode becomes active. A mode reports a transition by
    setting ``ModeResult.switch_to``; the manager applies it after the
    handler returns, so a key is always interpreted by the mode that was
    active when it arrived.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[EditorMode, Mode] = {}
        self._active: Optional[EditorMode] = None
        self.logger = telemetry.get_logger("tinyvi.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="tinyvi.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="tinyvi.keymaps"
        )
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def active_name(self) -> Optional[EditorMode]:
        return self._active

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: EditorMode | str) -> None:
        try:
            name = EditorMode(name)
        except ValueError as exc:
            raise KeyError(f"Unknown mode '{name}'") from exc
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        self.context.bus.emit(
            "mode.switch",
            {"mode": name, "previous": previous.name if previous else None},
        )
        telemetry.record_event(
            "mode.switch",
            mode=name,
            previous=previous.name if previous else None,
            cursor=self.context.buffer.cursor,
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            f"mode::{mode.name.value}",
            component="modes",
            mode=mode.name,
            key=key.key,
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]

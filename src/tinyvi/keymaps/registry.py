"""Keymap registry: the built-in actions and the ``(mode, token)`` index."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from tinyvi.runtime.telemetry import span

from .models import ActionRef, Binding, mode_key


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a keystroke another binding owns."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and the ``(mode, token) -> binding`` index.

    The table is filled once at start-up; a keystroke belongs to at most one
    binding per mode.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name

    def __len__(self) -> int:
        return len(self._bindings)

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def lookup(self, mode: object, token: str) -> Optional[Binding]:
        binding_id = self._mode_index.get(mode_key(mode), {}).get(token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def modes(self) -> tuple[str, ...]:
        return tuple(sorted(self._mode_index))

    def register_action(self, action: ActionRef) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            action_id=action.id,
        ):
            if action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            mode=binding.mode,
            binding_id=binding.id,
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add(missing_action=binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )
            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            existing = self.lookup(binding.mode, binding.token)
            if existing is not None:
                handle.add(conflicts=existing.id)
                raise KeymapConflictError(binding, (existing,))

            self._bindings[binding.id] = binding
            self._mode_index.setdefault(binding.mode, {})[binding.token] = binding.id
            return binding


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
]

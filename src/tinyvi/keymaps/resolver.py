"""Keystroke resolution against the registry, with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from tinyvi.runtime.telemetry import span

from .models import ActionRef, Binding, mode_key
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None
    token: str = ""


class KeymapResolver:
    """Maps ``(mode, token)`` to the bound action.

    Resolution is a pure lookup: it never touches the buffer, so the keymap
    table stays the one place that says what a key does in a mode.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: object, token: str) -> ResolutionResult:
        mode_name = mode_key(mode)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            mode=mode_name,
            key=token,
        ) as handle:
            binding = self._registry.lookup(mode_name, token)
            if binding is None:
                handle.add(status="miss")
                return ResolutionResult(status="miss", token=token)

            action = self._registry.get_action(binding.action_id)
            handle.add(status="match", binding_id=binding.id)
            return ResolutionResult(
                status="match",
                match=ResolutionMatch(binding=binding, action=action),
                token=token,
            )


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]

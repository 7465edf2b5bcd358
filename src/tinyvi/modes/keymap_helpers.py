"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from tinyvi.keymaps.models import ALT, CTRL, KeyStroke
from tinyvi.keymaps.resolver import KeymapResolver, ResolutionMatch
from tinyvi.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    return KeyStroke(key.key, key.modifiers).token


def is_text_input(key: KeyInput) -> bool:
    """True for a printable character typed without ctrl/alt held."""

    if not key.text or len(key.text) != 1 or not key.text.isprintable():
        return False
    modifiers = {modifier.lower() for modifier in key.modifiers}
    return not modifiers & {CTRL, ALT}


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        mode=match.binding.mode,
        cursor=context.buffer.cursor,
        binding_id=match.binding.id,
        action=match.action.id,
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


__all__ = [
    "key_to_token",
    "is_text_input",
    "require_keymap_resolver",
    "execute_match",
]

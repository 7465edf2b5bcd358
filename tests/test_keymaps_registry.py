import pytest

from tinyvi.keymaps import (
    DEFAULT_BINDINGS,
    ActionRef,
    Binding,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    stroke: KeyStroke | None = None,
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        stroke=stroke or KeyStroke("g"),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.g")

    registry.register_binding(binding)

    assert len(registry) == 1
    assert registry.lookup("normal", "g") == binding
    assert registry.lookup("normal", "x") is None


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.g"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="normal.g.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["normal.g"]
    assert registry.lookup("normal", "g").id == "normal.g"


def test_same_key_in_other_mode_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.g"))
    registry.register_binding(make_binding(binding_id="insert.g", mode="insert"))

    assert registry.modes() == ("insert", "normal")


def test_duplicate_binding_id_is_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.g"))

    with pytest.raises(ValueError):
        registry.register_binding(
            make_binding(binding_id="normal.g", stroke=KeyStroke("x"))
        )


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.g"))


def test_register_action_twice_is_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_get_action_unknown_raises_key_error() -> None:
    with pytest.raises(KeyError):
        KeymapRegistry().get_action("core.missing")


def test_binding_validates_fields() -> None:
    with pytest.raises(ValueError):
        Binding(id="", mode="normal", stroke=KeyStroke("g"), action_id="x")
    with pytest.raises(ValueError):
        Binding(id="b", mode="", stroke=KeyStroke("g"), action_id="x")
    with pytest.raises(ValueError):
        KeyStroke("")


def test_keystroke_normalizes_modifiers() -> None:
    stroke = KeyStroke("q", (" CTRL ", "ctrl"))

    assert stroke.modifiers == ("ctrl",)
    assert stroke.token == "ctrl+q"
    assert KeyStroke.parse("ctrl+q") == stroke
    assert KeyStroke.parse("+") == KeyStroke("+")
    assert KeyStroke.parse("ctrl++") == KeyStroke("+", ("ctrl",))


def test_load_default_keymaps_registers_transition_table() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert len(registry) == len(DEFAULT_BINDINGS)
    assert registry.modes() == ("insert", "normal")
    assert registry.lookup("normal", "ctrl+q").action_id == "core.quit"
    assert registry.lookup("insert", "ctrl+q") is None
    assert registry.lookup("insert", "h") is None


def test_load_default_keymaps_twice_is_rejected() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    with pytest.raises(ValueError):
        load_default_keymaps(registry)

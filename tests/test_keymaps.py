import pytest

from rtt.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    key: str = "ctrl+g",
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(key), action_id=action_id)


def test_keystroke_tokens_are_normalized() -> None:
    assert KeyStroke("Q", ("CTRL",)).token == "ctrl+q"
    assert KeyStroke.parse("ctrl+s").token == "ctrl+s"
    assert KeyStroke.parse("UP").token == "UP"
    assert KeyStroke.parse("+").token == "+"
    assert KeyStroke("x", ("SHIFT", "ctrl", "CTRL")).modifiers == ("ctrl", "shift")


def test_keystroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="go")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert registry.binding_for("ctrl+g") == binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="go"))

    with pytest.raises(KeymapConflictError) as info:
        registry.register_binding(make_binding(binding_id="go.duplicate"))

    assert info.value.existing.id == "go"


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    first = make_binding(binding_id="go")
    second = make_binding(binding_id="go.again")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="go"))


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="go")
    registry.register_binding(binding)

    removed = registry.unregister_binding("go")

    assert removed == binding
    assert registry.binding_for("ctrl+g") is None
    assert registry.unregister_binding("go") is None


def test_default_keymaps_cover_dispatch_table() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    keys = set(registry.stats().keys)
    assert {
        "ctrl+q",
        "ctrl+s",
        "UP",
        "DOWN",
        "LEFT",
        "RIGHT",
        "PAGEUP",
        "PAGEDOWN",
        "HOME",
        "END",
        "ENTER",
        "BACKSPACE",
        "DELETE",
    } <= keys
    assert registry.binding_for("ctrl+q").action_id == "editor.quit"


def test_default_keymaps_exclusions_and_extras() -> None:
    registry = KeymapRegistry()
    extra = Binding(id="save_f2", stroke=KeyStroke("F2"), action_id="editor.save")

    load_default_keymaps(registry, exclude_bindings=("ctrl_h",), extra_bindings=(extra,))

    assert registry.binding_for("ctrl+h") is None
    assert registry.binding_for("F2") == extra


def test_resolver_matches_and_misses() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="go"))
    resolver = KeymapResolver(registry)

    hit = resolver.resolve("ctrl+g")
    miss = resolver.resolve("g")

    assert hit.status == "match"
    assert hit.match is not None
    assert hit.match.action.id == "core.test"
    assert miss.status == "miss"
    assert miss.match is None


def test_resolver_cache_refreshes_on_revision() -> None:
    registry = KeymapRegistry()
    resolver = KeymapResolver(registry)

    assert resolver.resolve("ctrl+x").status == "miss"

    registry.register_action(make_action("core.x"))
    registry.register_binding(
        make_binding(binding_id="x", key="ctrl+x", action_id="core.x")
    )

    match = resolver.resolve("ctrl+x")
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == "x"


def test_action_telemetry_name_defaults_to_id() -> None:
    assert make_action("core.x").telemetry_name == "core.x"
    named = ActionRef(id="core.y", handler=print, telemetry_name="y")
    assert named.telemetry_name == "y"

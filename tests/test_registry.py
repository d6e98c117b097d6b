import pytest

from textobj_engine.buffer import Buffer
from textobj_engine.registry import (
    DEFAULT_SELECTORS,
    SelectorConflictError,
    SelectorRef,
    SelectorRegistry,
    load_default_selectors,
)
from textobj_engine.selectors import SelectionContext, SelectionResult


def make_ref(selector_id: str = "select.test", **kwargs) -> SelectorRef:
    return SelectorRef(
        id=selector_id,
        handler=kwargs.pop("handler", lambda context: SelectionResult(ok=True)),
        **kwargs,
    )


def test_register_and_get() -> None:
    registry = SelectorRegistry()
    ref = make_ref()

    registry.register(ref)

    assert "select.test" in registry
    assert registry.get("select.test") is ref
    assert registry.revision() == 1


def test_register_conflict_raises() -> None:
    registry = SelectorRegistry()
    registry.register(make_ref())

    with pytest.raises(SelectorConflictError):
        registry.register(make_ref())


def test_register_replace_overrides() -> None:
    registry = SelectorRegistry()
    registry.register(make_ref(description="old"))

    registry.register(make_ref(description="new"), replace=True)

    assert registry.get("select.test").description == "new"


def test_unregister_removes_selector() -> None:
    registry = SelectorRegistry()
    registry.register(make_ref())

    removed = registry.unregister("select.test")

    assert removed is not None
    assert "select.test" not in registry
    assert registry.unregister("select.test") is None


def test_get_unknown_raises_key_error() -> None:
    registry = SelectorRegistry()

    with pytest.raises(KeyError):
        registry.get("select.missing")


def test_selector_ref_validation() -> None:
    with pytest.raises(ValueError):
        SelectorRef(id="", handler=lambda context: None)
    with pytest.raises(ValueError):
        SelectorRef(id="word", handler=lambda context: None)
    with pytest.raises(TypeError):
        SelectorRef(id="select.bad", handler="nope")  # type: ignore[arg-type]


def test_selector_ref_normalizes_tags_and_defaults() -> None:
    ref = make_ref(tags=(" pair ", "pair", "", "inner"))

    assert ref.tags == ("pair", "inner")
    assert ref.telemetry_name == "select.test"
    assert ref.namespace == "select"


def test_load_default_selectors() -> None:
    registry = SelectorRegistry()

    load_default_selectors(registry)

    assert registry.stats().selector_count == len(DEFAULT_SELECTORS)
    assert registry.stats().namespaces == ("cursor", "select")
    assert "select.outer_paren" in registry
    assert "cursor.exchange" in registry


def test_load_default_selectors_filters() -> None:
    registry = SelectorRegistry()

    load_default_selectors(
        registry,
        include=["select.word", "select.line"],
        exclude=["select.line"],
        extra_selectors=[make_ref()],
    )

    assert sorted(ref.id for ref in registry.iter_selectors()) == [
        "select.test",
        "select.word",
    ]


def test_iter_selectors_by_namespace() -> None:
    registry = SelectorRegistry()
    load_default_selectors(registry)

    cursor_ids = {ref.id for ref in registry.iter_selectors("cursor")}

    assert cursor_ids == {
        "cursor.trim",
        "cursor.collapse_to_front",
        "cursor.collapse_to_back",
        "cursor.exchange",
    }


def test_iter_selectors_by_tag() -> None:
    registry = SelectorRegistry()
    load_default_selectors(registry)

    string_ids = {ref.id for ref in registry.iter_selectors("select", tag="string")}

    assert string_ids == {"select.inner_string", "select.outer_string"}


def test_dispatch_runs_selector() -> None:
    registry = SelectorRegistry()
    load_default_selectors(registry)
    buffer = Buffer.from_text("f(a, g(b, c), d)", point=7)

    result = registry.dispatch("select.argument", SelectionContext.for_buffer(buffer))

    assert result.ok is True
    assert buffer.selected_text() == "b"


def test_dispatch_rejects_non_result() -> None:
    registry = SelectorRegistry()
    registry.register(make_ref(handler=lambda context: "oops"))
    buffer = Buffer.from_text("abc")

    with pytest.raises(TypeError):
        registry.dispatch("select.test", SelectionContext.for_buffer(buffer))

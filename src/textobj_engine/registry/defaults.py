"""Built-in selectors and cursor actions exposed by name."""

from __future__ import annotations

from typing import Iterable, Sequence

from textobj_engine.actions import cursor as cursor_actions
from textobj_engine.selectors import (
    arguments,
    function,
    indent,
    linear,
    pairs,
    strings,
)

from .models import SelectorRef
from .registry import SelectorRegistry

DEFAULT_SELECTORS: tuple[SelectorRef, ...] = (
    SelectorRef(
        id="select.word",
        handler=linear.select_word,
        description="Select the word at or after point",
        tags=("linear",),
    ),
    SelectorRef(
        id="select.within_whitespace",
        handler=linear.select_within_whitespace,
        description="Select the run of non-blank text around point",
        tags=("linear",),
    ),
    SelectorRef(
        id="select.line",
        handler=linear.select_line,
        description="Select the current line from its indentation",
        tags=("linear",),
    ),
    SelectorRef(
        id="select.inc_newline",
        handler=linear.select_inc_newline,
        description="Select the current line including its newline",
        tags=("linear",),
    ),
    SelectorRef(
        id="select.sentence",
        handler=linear.select_sentence,
        description="Select the sentence around point",
        tags=("linear",),
    ),
    SelectorRef(
        id="select.paragraph",
        handler=linear.select_paragraph,
        description="Select the paragraph around point",
        tags=("linear",),
    ),
    SelectorRef(
        id="select.buffer",
        handler=linear.select_buffer,
        description="Select the whole buffer",
        tags=("linear",),
    ),
    SelectorRef(
        id="select.inner_paren",
        handler=pairs.select_inner_paren,
        description="Select inside the enclosing ( )",
        tags=("pair", "inner"),
    ),
    SelectorRef(
        id="select.outer_paren",
        handler=pairs.select_outer_paren,
        description="Select the enclosing ( ) pair",
        tags=("pair", "outer"),
    ),
    SelectorRef(
        id="select.inner_bracket",
        handler=pairs.select_inner_bracket,
        description="Select inside the enclosing [ ]",
        tags=("pair", "inner"),
    ),
    SelectorRef(
        id="select.outer_bracket",
        handler=pairs.select_outer_bracket,
        description="Select the enclosing [ ] pair",
        tags=("pair", "outer"),
    ),
    SelectorRef(
        id="select.inner_brace",
        handler=pairs.select_inner_brace,
        description="Select inside the enclosing { }",
        tags=("pair", "inner"),
    ),
    SelectorRef(
        id="select.outer_brace",
        handler=pairs.select_outer_brace,
        description="Select the enclosing { } pair",
        tags=("pair", "outer"),
    ),
    SelectorRef(
        id="select.inner_angle",
        handler=pairs.select_inner_angle,
        description="Select inside the enclosing < >",
        tags=("pair", "inner"),
    ),
    SelectorRef(
        id="select.outer_angle",
        handler=pairs.select_outer_angle,
        description="Select the enclosing < > pair",
        tags=("pair", "outer"),
    ),
    SelectorRef(
        id="select.inner_string",
        handler=strings.select_inner_string,
        description="Select inside the string at point",
        tags=("string", "inner"),
    ),
    SelectorRef(
        id="select.outer_string",
        handler=strings.select_outer_string,
        description="Select the string at point including quotes",
        tags=("string", "outer"),
    ),
    SelectorRef(
        id="select.indent",
        handler=indent.select_indent,
        description="Select lines sharing the current indentation",
        tags=("block",),
    ),
    SelectorRef(
        id="select.argument",
        handler=arguments.select_argument,
        description="Select the call argument at point",
        tags=("block",),
    ),
    SelectorRef(
        id="select.function",
        handler=function.select_function,
        description="Select the top-level definition around point",
        tags=("block",),
    ),
    SelectorRef(
        id="cursor.trim",
        handler=cursor_actions.trim_selection,
        description="Trim blanks from both ends of the selection",
    ),
    SelectorRef(
        id="cursor.collapse_to_front",
        handler=cursor_actions.collapse_to_front,
        description="Move point to the selection start and deselect",
    ),
    SelectorRef(
        id="cursor.collapse_to_back",
        handler=cursor_actions.collapse_to_back,
        description="Move point to the selection end and deselect",
    ),
    SelectorRef(
        id="cursor.exchange",
        handler=cursor_actions.exchange_point_and_mark,
        description="Swap point and mark",
    ),
)


def load_default_selectors(
    registry: SelectorRegistry,
    *,
    replace: bool = False,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    extra_selectors: Iterable[SelectorRef] | None = None,
) -> None:
    """Register the built-in selectors, optionally filtered by id."""

    allowed = _build_filters(include, exclude)
    for selector in DEFAULT_SELECTORS:
        if not _selected(selector.id, allowed):
            continue
        registry.register(selector, replace=replace)

    if extra_selectors:
        for selector in extra_selectors:
            registry.register(selector, replace=replace)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = ["DEFAULT_SELECTORS", "load_default_selectors"]

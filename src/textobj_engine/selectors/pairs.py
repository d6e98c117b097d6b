"""Delimiter-pair matching and the bracket text objects built on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from textobj_engine.buffer import BufferCapability, Span

from .base import NoEnclosingPair, SelectionContext, SelectionResult, run_selector


@dataclass(frozen=True, slots=True)
class DelimiterPair:
    """Opening and closing delimiters of a bracket-like pair.

    ``ARGUMENT`` reuses the shape with several characters on each side; it is
    only scanned by the argument selector, never by ``find_enclosing_pair``.
    """

    name: str
    opening: str
    closing: str

    def __post_init__(self) -> None:
        if not self.opening or not self.closing:
            raise ValueError("opening and closing cannot be empty")


PAREN = DelimiterPair("paren", "(", ")")
BRACKET = DelimiterPair("bracket", "[", "]")
BRACE = DelimiterPair("brace", "{", "}")
ANGLE = DelimiterPair("angle", "<", ">")
ARGUMENT = DelimiterPair("argument", ",([{", ",)]}")


def find_enclosing_pair(
    buffer: BufferCapability, point: int, opening: str, closing: str
) -> Span:
    """Locate the innermost ``opening``...``closing`` pair around ``point``.

    Scans backward with a nesting counter: each ``closing`` seen enters a
    sibling pair that must be skipped, each ``opening`` leaves one. The first
    ``opening`` met with the counter at zero starts the pair. A forward
    balanced scan from there finds its partner. Both scans stop at the
    buffer edges and raise ``NoEnclosingPair`` instead of running past them.
    """

    if len(opening) != 1 or len(closing) != 1:
        raise ValueError("find_enclosing_pair expects single-character delimiters")

    start = _find_opening(buffer, point, opening, closing)
    end = _find_closing(buffer, start, opening, closing)
    return Span(start, end)


def _find_opening(
    buffer: BufferCapability, point: int, opening: str, closing: str
) -> int:
    if buffer.char_at(point) == opening:
        return point

    depth = 0
    index = point - 1
    while index >= 0:
        char = buffer.char_at(index)
        if char == closing:
            depth += 1
        elif char == opening:
            if depth == 0:
                return index
            depth -= 1
        index -= 1
    raise NoEnclosingPair(f"no unmatched '{opening}' before offset {point}")


def _find_closing(
    buffer: BufferCapability, start: int, opening: str, closing: str
) -> int:
    depth = 0
    length = buffer.length()
    index = start
    while index < length:
        char = buffer.char_at(index)
        if char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == 0:
                return index + 1
        index += 1
    raise NoEnclosingPair(f"'{opening}' at offset {start} is never closed")


def inner_span(outer: Span) -> Span:
    """Strip one delimiter from each end; empty interiors collapse at ``start + 1``."""

    if outer.end - 1 > outer.start + 1:
        return Span(outer.start + 1, outer.end - 1)
    return Span(outer.start + 1, outer.start + 1)


def outer_pair_span(context: SelectionContext, pair: DelimiterPair) -> Span:
    return find_enclosing_pair(context.buffer, context.point, pair.opening, pair.closing)


def inner_pair_span(context: SelectionContext, pair: DelimiterPair) -> Span:
    return inner_span(outer_pair_span(context, pair))


PairSelector = Callable[[SelectionContext], SelectionResult]


def _make_pair_selector(pair: DelimiterPair, *, inner: bool) -> PairSelector:
    variant = "inner" if inner else "outer"
    label = f"{variant}_{pair.name}"
    compute = inner_pair_span if inner else outer_pair_span

    def selector(context: SelectionContext) -> SelectionResult:
        return run_selector(context, label, lambda ctx: compute(ctx, pair))

    selector.__name__ = f"select_{label}"
    selector.__doc__ = f"Select the {variant} {pair.opening}{pair.closing} pair around point."
    return selector


select_inner_paren = _make_pair_selector(PAREN, inner=True)
select_outer_paren = _make_pair_selector(PAREN, inner=False)
select_inner_bracket = _make_pair_selector(BRACKET, inner=True)
select_outer_bracket = _make_pair_selector(BRACKET, inner=False)
select_inner_brace = _make_pair_selector(BRACE, inner=True)
select_outer_brace = _make_pair_selector(BRACE, inner=False)
select_inner_angle = _make_pair_selector(ANGLE, inner=True)
select_outer_angle = _make_pair_selector(ANGLE, inner=False)


__all__ = [
    "DelimiterPair",
    "PAREN",
    "BRACKET",
    "BRACE",
    "ANGLE",
    "ARGUMENT",
    "find_enclosing_pair",
    "inner_span",
    "outer_pair_span",
    "inner_pair_span",
    "select_inner_paren",
    "select_outer_paren",
    "select_inner_bracket",
    "select_outer_bracket",
    "select_inner_brace",
    "select_outer_brace",
    "select_inner_angle",
    "select_outer_angle",
]

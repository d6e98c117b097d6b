"""Argument text object for comma-separated call arguments."""

from __future__ import annotations

from textobj_engine.buffer import Span

from .base import SelectionContext, SelectionResult, run_selector
from .pairs import ARGUMENT
from .scan import skip_backward, skip_forward
from .trim import trim_span


def argument_span(context: SelectionContext) -> Span:
    """Text between the nearest separator/opener before point and the next
    separator/closer after it.

    There is no nesting awareness: the first ``,`` or bracket met in either
    direction bounds the argument, even inside a nested call.
    """

    buffer = context.buffer
    start = skip_backward(
        buffer, context.point, lambda char: char not in ARGUMENT.opening
    )
    end = skip_forward(buffer, context.point, lambda char: char not in ARGUMENT.closing)
    return trim_span(buffer, Span(start, end))


def select_argument(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "argument", argument_span)


__all__ = ["argument_span", "select_argument"]

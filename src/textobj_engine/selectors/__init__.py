"""Cursor-relative text-object selectors."""

from .arguments import argument_span, select_argument
from .base import (
    NoDefinition,
    NoEnclosingPair,
    NoStringContext,
    NoWord,
    SelectionBus,
    SelectionContext,
    SelectionError,
    SelectionResult,
    run_selector,
)
from .classifier import DefaultClassifier, TextClassifier
from .function import definition_span, select_function
from .indent import indent_span, select_indent
from .linear import (
    select_buffer,
    select_inc_newline,
    select_line,
    select_paragraph,
    select_sentence,
    select_within_whitespace,
    select_word,
)
from .pairs import (
    ANGLE,
    ARGUMENT,
    BRACE,
    BRACKET,
    PAREN,
    DelimiterPair,
    find_enclosing_pair,
    inner_span,
    select_inner_angle,
    select_inner_brace,
    select_inner_bracket,
    select_inner_paren,
    select_outer_angle,
    select_outer_brace,
    select_outer_bracket,
    select_outer_paren,
)
from .strings import select_inner_string, select_outer_string, string_span
from .trim import trim_span

__all__ = [
    "SelectionError",
    "NoEnclosingPair",
    "NoStringContext",
    "NoWord",
    "NoDefinition",
    "SelectionBus",
    "SelectionContext",
    "SelectionResult",
    "run_selector",
    "TextClassifier",
    "DefaultClassifier",
    "DelimiterPair",
    "PAREN",
    "BRACKET",
    "BRACE",
    "ANGLE",
    "ARGUMENT",
    "find_enclosing_pair",
    "inner_span",
    "trim_span",
    "argument_span",
    "definition_span",
    "indent_span",
    "string_span",
    "select_word",
    "select_within_whitespace",
    "select_line",
    "select_inc_newline",
    "select_sentence",
    "select_paragraph",
    "select_buffer",
    "select_inner_paren",
    "select_outer_paren",
    "select_inner_bracket",
    "select_outer_bracket",
    "select_inner_brace",
    "select_outer_brace",
    "select_inner_angle",
    "select_outer_angle",
    "select_inner_string",
    "select_outer_string",
    "select_indent",
    "select_argument",
    "select_function",
]

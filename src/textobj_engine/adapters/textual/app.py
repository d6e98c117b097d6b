"""Executable Textual app that demonstrates the selection engine."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static, TextArea

from .controller import TextualSelectionAdapter, TextualUIHooks

SAMPLE_TEXT = """\
def greet(name, greeting="Hello"):
    message = format(greeting, name)
    if message:
        print(message.strip())
    return message


call(alpha, beta(1, 2), [gamma, delta])
"""


class SelectionDemoApp(App[None]):
    """Minimal Textual UI wiring a TextArea to the selector registry."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("alt+w", "select('select.word')", "Word"),
        Binding("alt+l", "select('select.line')", "Line"),
        Binding("alt+s", "select('select.sentence')", "Sentence"),
        Binding("alt+p", "select('select.paragraph')", "Paragraph"),
        Binding("alt+i", "select('select.indent')", "Indent"),
        Binding("alt+a", "select('select.argument')", "Argument"),
        Binding("alt+f", "select('select.function')", "Function"),
        Binding("alt+b", "select('select.outer_paren')", "( )"),
        Binding("alt+q", "select('select.inner_string')", "String"),
        Binding("alt+comma", "select('cursor.collapse_to_front')", "Front"),
        Binding("alt+full_stop", "select('cursor.collapse_to_back')", "Back"),
    ]

    def __init__(self, text: str = SAMPLE_TEXT) -> None:
        super().__init__()
        self._initial_text = text
        self.adapter: TextualSelectionAdapter | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield TextArea(self._initial_text, id="editor")
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        editor = self.query_one("#editor", TextArea)
        hooks = TextualUIHooks(
            update_status=self._update_status,
            handle_event=self._handle_event,
        )
        self.adapter = TextualSelectionAdapter(editor, hooks)
        editor.focus()

    def action_select(self, selector_id: str) -> None:
        if self.adapter:
            self.adapter.run(selector_id)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if isinstance(payload, dict) and "start" in payload:
            self._update_status(f"{name} [{payload['start']}, {payload['end']})")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the text-object selection Textual demo."
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="File to load into the editor (default: built-in sample)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = args.path.read_text(encoding="utf-8") if args.path else SAMPLE_TEXT
    SelectionDemoApp(text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()

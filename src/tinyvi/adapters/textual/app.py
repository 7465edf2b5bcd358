"""Executable Textual app that hosts the editor core."""

from __future__ import annotations

import argparse
import os
from dataclasses import replace
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use tinyvi.adapters.textual.app"
    ) from exc

from tinyvi.config import EditorSettings, load_settings
from tinyvi.runtime import telemetry
from tinyvi.session import EditorSession, EditorView, KeyOutcome

from . import render
from .controller import TextualEditorAdapter, TextualUIHooks


class TinyviApp(App[None], inherit_bindings=False):
    """Full-screen editor; the session decides when to quit (Normal + Ctrl-Q)."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-area {
		height: 1fr;
	}

	#buffer-view {
		width: auto;
		padding: 0 0;
	}

	#status-line {
		height: 1;
		background: $foreground;
		color: $background;
	}

	#help-line {
		height: 1;
		color: $text-muted;
	}
	"""

    BINDINGS: list[Any] = []

    def __init__(
        self,
        *,
        session: Optional[EditorSession] = None,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        super().__init__()
        self.session = session or EditorSession()
        self.settings = settings or load_settings()
        self.adapter: TextualEditorAdapter | None = None
        self._view: EditorView | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._help_widget: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        self._help_widget = Static(
            render.help_line(self.settings.help_text), id="help-line"
        )
        yield self._status_widget
        yield self._help_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)

    def on_resize(self, event: events.Resize) -> None:
        del event
        if self._view is not None:
            self._update_view(self._view)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        event.stop()
        outcome = self.adapter.handle_textual_key(event.key, character=event.character)
        if outcome is KeyOutcome.QUIT:
            self.exit()

    def _update_view(self, view: EditorView) -> None:
        self._view = view
        show_numbers = self.settings.show_line_numbers
        if self._buffer_widget:
            self._buffer_widget.update(
                render.buffer_renderable(view, show_line_numbers=show_numbers)
            )
        if self._status_widget:
            self._status_widget.update(
                render.status_renderable(
                    view,
                    self.size.width,
                    filename=self.settings.filename_placeholder,
                )
            )

    def _update_status(self, message: str) -> None:
        if self._help_widget:
            self._help_widget.update(
                render.help_line(self.settings.help_text, status=message)
            )

    def _log_line(self, line: str) -> None:
        self.log(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the tinyvi modal editor.")
    parser.add_argument(
        "--telemetry-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("TINYVI_TELEMETRY_PRESET", "tui"),
        help="Logging preset (default: tui, which keeps the console clean)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (overrides TINYVI_LOG_FILE)",
    )
    parser.add_argument(
        "--no-line-numbers",
        action="store_true",
        help="Hide the line-number gutter",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_file:
        os.environ["TINYVI_LOG_FILE"] = args.log_file
    telemetry.configure(preset=args.telemetry_preset)
    settings = load_settings()
    if args.no_line_numbers:
        settings = replace(settings, show_line_numbers=False)
    app = TinyviApp(settings=settings)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()

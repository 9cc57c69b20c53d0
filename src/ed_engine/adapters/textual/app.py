"""Executable Textual app that hosts the ed palette over a source."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use ed_engine.adapters.textual.app"
    ) from exc

from ed_engine.buffer import BufferSource
from ed_engine.errors import EdError
from ed_engine.host.highlight import HighlightSpan, Highlighter, TextSegment
from ed_engine.host.messaging import HIGHLIGHT_EVENT, WRITE_EVENT, PalettePayload
from ed_engine.host.sources import ClipboardSource, FileBackedSource, open_session
from ed_engine.runtime import SessionConfig, telemetry

from .controller import PaletteController, PaletteUIHooks

GROUP_STYLES = ("on yellow", "on light_sky_blue1", "on pale_green1")


def build_source(
    *, file: Optional[Path] = None, html: Optional[Path] = None
) -> BufferSource:
    if file is not None and html is not None:
        raise ValueError("Choose either a text file or an HTML file, not both.")
    if file is not None:
        return FileBackedSource(file)
    if html is not None:
        return FileBackedSource(html, editable=True)
    return ClipboardSource()


def render_page(lines: List[str], spans: Sequence[HighlightSpan]) -> Text:
    text = Text("\n".join(lines))
    for span in spans:
        style = GROUP_STYLES[(span.group - 1) % len(GROUP_STYLES)]
        text.stylize(style, span.start, span.end)
    return text


class EdPaletteApp(App[None]):
    """Shows the source as a page and opens the ed palette over it."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#page-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		overflow: auto;
	}

	#palette-container {
		height: auto;
		max-height: 50%;
		border: heavy $secondary;
	}

	#palette-output {
		display: none;
		max-height: 20;
		padding: 0 1;
		overflow: auto;
	}

	#palette-container.is-showing-output #palette-output {
		display: block;
	}
	"""

    BINDINGS = [
        ("ctrl+e", "toggle_palette", "Palette"),
        ("escape", "dismiss_palette", "Close palette"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, source: BufferSource, *, config: SessionConfig) -> None:
        super().__init__()
        self.source = source
        self.config = config
        self.controller: PaletteController | None = None
        self.highlighter = Highlighter()
        self.logger = telemetry.get_logger("ed_engine.adapters.textual")
        self._page_lines: List[str] = []
        self._spans: List[HighlightSpan] = []

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Static("", id="page-view")
        with Vertical(id="palette-container"):
            yield Static("", id="palette-output")
            yield Input(id="palette-input")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_page()
        self.action_toggle_palette()

    def action_toggle_palette(self) -> None:
        if self.controller is not None and not self.controller.closed:
            return
        session = open_session(self.source, self.config)
        hooks = PaletteUIHooks(
            render_output=self._render_output,
            set_prompt=self._set_prompt,
            close=self._close_palette,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.controller = PaletteController(session, hooks)
        container = self.query_one("#palette-container", Vertical)
        container.display = True
        self.query_one("#palette-input", Input).focus()

    def action_dismiss_palette(self) -> None:
        if self.controller is not None:
            self.controller.dismiss()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.controller is None or self.controller.closed:
            return
        line = event.value
        event.input.value = ""
        self.controller.submit(line)

    def _render_output(self, text: Optional[str]) -> None:
        container = self.query_one("#palette-container", Vertical)
        output = self.query_one("#palette-output", Static)
        if text:
            container.add_class("is-showing-output")
            output.update(text)
        else:
            container.remove_class("is-showing-output")
            output.update("")

    def _set_prompt(self, prompt: str) -> None:
        self.query_one("#palette-input", Input).placeholder = prompt

    def _close_palette(self) -> None:
        self._render_output(None)
        self.query_one("#palette-container", Vertical).display = False
        self._refresh_page()

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == HIGHLIGHT_EVENT and isinstance(payload, PalettePayload):
            self.highlighter.remove()
            try:
                self._spans = self.highlighter.apply(
                    payload.regex_string or "", self._segments()
                )
            except EdError as exc:
                self._spans = []
                self.notify(f"? {exc.kind.message}", severity="error")
        elif name == WRITE_EVENT and isinstance(payload, PalettePayload):
            self.notify(f"Wrote {len(payload.buffer)} lines to {payload.session_mode.value}")

    def _segments(self) -> List[TextSegment]:
        last = len(self._page_lines) - 1
        return [
            TextSegment(line + ("\n" if index < last else ""))
            for index, line in enumerate(self._page_lines)
        ]

    def _refresh_page(self) -> None:
        self._page_lines = self.source.read_lines()
        self._spans = self.highlighter.reapply(self._segments())
        self.query_one("#page-view", Static).update(
            render_page(self._page_lines, self._spans)
        )

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit text with ed commands.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", type=Path, help="Edit a plain-text file")
    source.add_argument("--html", type=Path, help="Edit an HTML fragment")
    parser.add_argument(
        "--terse",
        action="store_true",
        help="Report errors as a bare '?' instead of '? <message>'",
    )
    parser.add_argument(
        "--no-prompt", action="store_true", help="Start with the '*' prompt hidden"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    overrides = {"verbose_errors": not args.terse}
    if args.no_prompt:
        overrides["show_prompt"] = False
    config = SessionConfig.from_env(**overrides)
    app = EdPaletteApp(build_source(file=args.file, html=args.html), config=config)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()

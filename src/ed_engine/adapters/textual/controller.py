"""Palette controller wiring an ed session into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ed_engine.host.messaging import (
    CLOSE_EVENT,
    HIGHLIGHT_EVENT,
    OUTPUT_EVENT,
    PALETTE_EVENTS,
    WRITE_EVENT,
    PalettePayload,
    broadcast,
    highlight_request,
)
from ed_engine.host.sources import PaletteSession
from ed_engine.modes import EdResult, ModeBus


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class PaletteUIHooks:
    """Callbacks invoked by the controller to update palette widgets."""

    render_output: Callable[[Optional[str]], None]
    set_prompt: Callable[[str], None] = _noop
    close: Callable[[], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class PaletteController:
    """Feeds palette input to the interpreter and reacts to result shapes."""

    def __init__(
        self,
        session: PaletteSession,
        hooks: PaletteUIHooks,
        *,
        bus: ModeBus | None = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.bus = bus or session.ed.bus
        self.closed = False
        self._subscribe_events()
        self.hooks.set_prompt(self.session.ed.get_prompt())

    def submit(self, line: str) -> Optional[EdResult]:
        """Handle one line typed into the palette.

        Returns ``None`` when the line was a highlight request, which never
        reaches the interpreter.
        """

        if self.closed:
            raise RuntimeError("palette session is closed")

        ed = self.session.ed
        self._log_state("line ->", line=line)

        regex_string = None if ed.input_mode else highlight_request(line)
        if regex_string is not None:
            broadcast(self.bus, HIGHLIGHT_EVENT, PalettePayload.highlight(regex_string))
            self._close()
            return None

        result = ed.process(line)
        self._log_state("result <-", **result.as_dict())

        if result.awaits_input:
            self.hooks.set_prompt("")
            self.hooks.render_output(None)
            return result

        if result.buffer is not None:
            payload = PalettePayload.write(result.buffer, self.session.mode)
            broadcast(self.bus, WRITE_EVENT, payload)
            self.session.write_back(result.buffer)
            self._close()
            return result

        text = result.error if result.is_error else result.output
        self.hooks.render_output(text or None)
        if text:
            broadcast(self.bus, OUTPUT_EVENT, text)
        self.hooks.set_prompt(ed.get_prompt())
        return result

    def dismiss(self) -> None:
        """Close the palette without writing anything back."""

        if not self.closed:
            self._close()

    def _close(self) -> None:
        self.closed = True
        broadcast(self.bus, CLOSE_EVENT, None)
        self.hooks.close()

    def _subscribe_events(self) -> None:
        for event in PALETTE_EVENTS:
            self.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        ed = self.session.ed
        return {
            "mode": ed.state.name,
            "cursor": ed.current_line,
            "lines": len(ed.buffer),
            "source": self.session.mode.value,
        }


__all__ = ["PaletteController", "PaletteUIHooks"]

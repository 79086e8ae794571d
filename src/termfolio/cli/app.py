"""
Full-screen terminal front end built on prompt_toolkit.

The session owns all state; this module only turns key presses into
``KeyPress`` events and redraws the scrollback, prompt and cursor
whenever the session reports a change.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from termfolio.commands.context import OPEN_ADMIN_GUI
from termfolio.core.datamodels import KeyPress, Line, LineKind, Tone
from termfolio.core.exceptions import ClipboardUnavailable

if TYPE_CHECKING:
    from termfolio.terminal import TerminalSession

logger = logging.getLogger(__name__)

GUI_NOTICE = "Admin GUI is not available in the terminal; use 'view <type>' instead."
HELP_BAR = " Enter: run | ↑/↓: history | Ctrl+C: interrupt | Ctrl+D: quit"


def get_style() -> Style:
    """Get the terminal style."""
    return Style.from_dict({
        "prompt": "ansigreen bold",
        "admin-prompt": "ansired bold",
        "command": "ansiwhite",
        "output": "",
        "error": "ansired",
        "guidance": "ansiyellow",
        "loading": "ansicyan",
        "cursor": "reverse",
        "toolbar": "bg:#333333 ansigray",
    })


def line_style(line: Line) -> str:
    """Style class for a scrollback line."""
    if line.kind == LineKind.ERROR:
        return "class:guidance" if line.tone == Tone.GUIDANCE else "class:error"
    if line.kind == LineKind.LOADING:
        return "class:loading"
    if line.kind == LineKind.COMMAND:
        return "class:command"
    return "class:output"


def render_scrollback(session: "TerminalSession") -> StyleAndTextTuples:
    """Formatted text for the scrollback followed by the live input line."""
    fragments: StyleAndTextTuples = []
    for line in session.scrollback:
        if line.kind == LineKind.COMMAND and line.prompt:
            prompt_class = "class:admin-prompt" if line.prompt.endswith("# ") else "class:prompt"
            fragments.append((prompt_class, line.prompt))
            fragments.append((line_style(line), line.text[len(line.prompt):]))
        else:
            fragments.append((line_style(line), line.text))
        fragments.append(("", "\n"))

    if not session.processing:
        fragments.append(("class:admin-prompt" if session.is_admin else "class:prompt", session.prompt))
        fragments.append(("class:command", session.input_buffer))
        fragments.append(("class:cursor" if session.cursor_visible else "", " "))
    return fragments


class TerminalApp:
    """prompt_toolkit Application wrapped around a ``TerminalSession``."""

    def __init__(self, session: "TerminalSession"):
        self.session = session
        self.status: Optional[str] = None

        self.control = FormattedTextControl(
            lambda: render_scrollback(self.session),
            get_cursor_position=self._cursor_position,
            focusable=True,
            show_cursor=False,
        )
        toolbar = FormattedTextControl(lambda: [("class:toolbar", self.status or HELP_BAR)])
        self.app: Application = Application(
            layout=Layout(HSplit([
                Window(self.control, wrap_lines=True),
                Window(toolbar, height=1),
            ])),
            key_bindings=self._bindings(),
            style=get_style(),
            full_screen=True,
        )

        session.on_change = self.app.invalidate
        session.on_event = self.on_event
        session.clipboard = self.read_clipboard

    def _cursor_position(self) -> Point:
        # Keep the window scrolled to the input line
        rows = sum(line.text.count("\n") + 1 for line in self.session.scrollback)
        return Point(x=0, y=rows)

    def on_event(self, name: str) -> None:
        if name == OPEN_ADMIN_GUI:
            self.status = " " + GUI_NOTICE
        else:
            logger.debug(f"Ignoring front-end event: {name}")
        self.app.invalidate()

    async def read_clipboard(self) -> str:
        text = self.app.clipboard.get_data().text
        if not text:
            raise ClipboardUnavailable("clipboard is empty")
        return text

    def _send(self, event, key: str, ctrl: bool = False) -> None:
        self.status = None
        event.app.create_background_task(self.session.handle_key(KeyPress(key=key, ctrl=ctrl)))

    def _bindings(self) -> KeyBindings:
        bindings = KeyBindings()

        @bindings.add("enter")
        def _(event):
            self._send(event, "Enter")

        @bindings.add("backspace")
        def _(event):
            self._send(event, "Backspace")

        @bindings.add("up")
        def _(event):
            self._send(event, "ArrowUp")

        @bindings.add("down")
        def _(event):
            self._send(event, "ArrowDown")

        @bindings.add("tab")
        def _(event):
            self._send(event, "Tab")

        @bindings.add("c-c")
        def _(event):
            """Handle Ctrl+C - interrupt the command or clear the input."""
            self._send(event, "c", ctrl=True)

        @bindings.add("c-v")
        def _(event):
            self._send(event, "v", ctrl=True)

        @bindings.add("c-d")
        def _(event):
            """Handle Ctrl+D - quit."""
            event.app.exit()

        @bindings.add(Keys.BracketedPaste)
        def _(event):
            self.session.paste(event.data)

        @bindings.add(Keys.Any)
        def _(event):
            if len(event.data) == 1 and event.data.isprintable():
                self._send(event, event.data)

        return bindings

    async def run(self) -> None:
        """Run until Ctrl+D."""
        self.session.start()
        try:
            await self.app.run_async()
        finally:
            await self.session.close()

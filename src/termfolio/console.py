"""Local TTY front-end.

Runs an ``InteractiveTerminal`` inside a full-screen prompt_toolkit
application. Every key press is routed to ``InteractiveTerminal.handle_key``;
the screen is the bottom-anchored tail of the output log followed by the
prompt line, redrawn whenever the log changes.
"""

from __future__ import annotations

import logging

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import FormattedTextControl, Layout, Window
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from termfolio.endpoint.terminal import InteractiveTerminal
from termfolio.render.output import LogEvent

logger = logging.getLogger(__name__)


STYLE = Style.from_dict({
    "line.plain": "",
    "line.system": "#22c55e",           # Green headings and messages
    "line.command": "bold",             # Echoed command lines
    "line.link": "#5f87ff underline",   # Blue link targets
    "prompt": "#00d7ff bold",
})

# prompt_toolkit key -> key name understood by handle_key
KEY_NAMES = {
    "enter": "Enter",
    "tab": "Tab",
    "up": "Up",
    "down": "Down",
    "backspace": "Backspace",
}


class ConsoleFrontend:
    """Runs an ``InteractiveTerminal`` in the local TTY.

    Example usage::

        terminal = InteractiveTerminal.from_settings(settings)
        await ConsoleFrontend(terminal).run()
    """

    def __init__(
        self,
        terminal: InteractiveTerminal,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self._terminal = terminal
        self._key_bindings = self._build_key_bindings()
        self._app: Application[None] = Application(
            layout=Layout(
                Window(
                    FormattedTextControl(self.fragments, focusable=True, show_cursor=True),
                    wrap_lines=True,
                )
            ),
            key_bindings=self._key_bindings,
            style=STYLE,
            full_screen=True,
            input=input,
            output=output,
        )

    @property
    def app(self) -> Application[None]:
        return self._app

    @property
    def key_bindings(self) -> KeyBindings:
        return self._key_bindings

    async def run(self) -> None:
        """Run until Ctrl+D on an empty line or Ctrl+C."""
        unsubscribe = self._terminal.session.output.subscribe(self.on_event)
        try:
            await self._terminal.start()
            await self._app.run_async()
        finally:
            unsubscribe()
            self._terminal.close()
            logger.info("Console closed")

    def on_event(self, event: LogEvent) -> None:
        """Output log listener: schedule a redraw."""
        self._app.invalidate()

    def fragments(self, rows: int | None = None) -> StyleAndTextTuples:
        """Formatted text for the screen: the log tail, then the prompt line."""
        if rows is None:
            rows = self._app.output.get_size().rows

        result: StyleAndTextTuples = []
        for entry in self._terminal.session.output.tail(rows - 1):
            style = f"class:line.{entry.style.value}"
            if entry.href is not None:
                result.append(("class:line.plain", entry.label))
                result.append((style, entry.text))
            else:
                result.append((style, entry.display_text))
            result.append(("", "\n"))

        result.append(("class:prompt", f"{self._terminal.config.prompt_text} "))
        result.append(("", self._terminal.session.buffer))
        result.append(("[SetCursorPosition]", ""))
        return result

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        terminal = self._terminal

        def forward(name: str) -> None:
            @kb.add(name)
            def _(event) -> None:
                terminal.handle_key(KEY_NAMES[name])

        for name in KEY_NAMES:
            forward(name)

        @kb.add("c-d")
        def _(event) -> None:
            """Exit on an empty line, like a shell."""
            if not terminal.session.buffer:
                event.app.exit()

        @kb.add("c-c")
        def _(event) -> None:
            event.app.exit()

        @kb.add(Keys.Any)
        def _(event) -> None:
            if not terminal.handle_key(event.data):
                logger.debug("Unbound key %r", event.data)

        return kb

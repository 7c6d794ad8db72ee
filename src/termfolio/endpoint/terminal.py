"""Interactive terminal session for the command endpoint.

``InteractiveTerminal`` is the single input path of a session: every key
press arrives through ``handle_key``, which plays the click, edits the
live buffer, and routes Enter, Tab and Up/Down to the dispatcher, the
completion resolver and the history navigator. All methods must be
called from the event loop thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from termfolio.audio.base import AudioBackend, NullAudioBackend
from termfolio.audio.feedback import KeystrokeFeedback
from termfolio.config.settings import Settings, SoundConfig, TerminalConfig
from termfolio.content.store import ContentStore, load_content
from termfolio.interpreter.base import CommandContext, RenderActions
from termfolio.interpreter.commands import build_command_table
from termfolio.interpreter.completion import CompletionResolver, apply_completion
from termfolio.interpreter.dispatcher import CommandDispatcher
from termfolio.interpreter.history import HistoryDirection
from termfolio.interpreter.session import Session
from termfolio.interpreter.tokenizer import tokenize_for_completion
from termfolio.render.models import AnimatedLine, RenderStyle, line
from termfolio.render.scheduler import LineRenderer

logger = logging.getLogger(__name__)

WELCOME_TEXT = 'Welcome to my terminal portfolio — type "help" for a list of commands.'
TIP_TEXT = "Tip: press Up / Down to cycle command history. Use clear to reset the screen."

# Alternative key names -> canonical key name
KEY_ALIASES = {
    "Return": "Enter",
    "\n": "Enter",
    "\r": "Enter",
    "\t": "Tab",
    "ArrowUp": "Up",
    "ArrowDown": "Down",
    "Space": " ",
}

HISTORY_KEYS = {
    "Up": HistoryDirection.UP,
    "Down": HistoryDirection.DOWN,
}


def make_audio_backend(config: SoundConfig) -> AudioBackend:
    """Build the audio backend named in the sound configuration."""
    if config.backend == "pygame":
        from termfolio.audio.pygame_backend import PygameAudioBackend
        return PygameAudioBackend()
    return NullAudioBackend()


class InteractiveTerminal:
    """One terminal: session state, interpreter and keystroke feedback.

    Example usage::

        terminal = InteractiveTerminal()
        await terminal.start()
        terminal.type_text("open project1\\n")
        await terminal.renderer.wait_idle()
        print(terminal.get_screen_content())
    """

    def __init__(
        self,
        config: TerminalConfig | None = None,
        sound: SoundConfig | None = None,
        content: ContentStore | None = None,
        session: Session | None = None,
        audio_backend: AudioBackend | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._config = config if config is not None else TerminalConfig()
        sound = sound if sound is not None else SoundConfig(backend="null")

        self.session = session if session is not None else Session(sound_enabled=sound.enabled)
        self.content = content if content is not None else ContentStore()
        self.table = build_command_table()
        self.renderer = LineRenderer(self.session.output, typing_delay=self._config.typing_delay)
        self.completer = CompletionResolver(self.table, self.content)
        self.dispatcher = CommandDispatcher(
            CommandContext(self.session, self.content, self.table, self._config, clock),
            self.renderer,
        )
        self.feedback = KeystrokeFeedback(
            self.session,
            backend=audio_backend if audio_backend is not None else make_audio_backend(sound),
            volume=sound.volume,
            sample_rate=sound.sample_rate,
            click_duration=sound.click_duration,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> InteractiveTerminal:
        return cls(
            config=settings.terminal,
            sound=settings.sound,
            content=load_content(settings.content.path),
        )

    @property
    def config(self) -> TerminalConfig:
        return self._config

    @property
    def prompt_line(self) -> str:
        return f"{self._config.prompt_text} {self.session.buffer}"

    async def start(self) -> None:
        """Queue the intro animation; returns without waiting for it."""
        if not self._config.intro_enabled:
            return
        self.renderer.submit(AnimatedLine(text=WELCOME_TEXT, style=RenderStyle.SYSTEM))
        self.renderer.submit(AnimatedLine(text=TIP_TEXT))
        self.renderer.submit(line(""))
        logger.info("Terminal started")

    def close(self) -> None:
        self.feedback.close()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Process one key press.

        Args:
            key: ``Enter``, ``Tab``, ``Up``, ``Down``, ``Backspace``,
                 ``Escape`` (or one of their aliases) or a single
                 printable character.

        Returns:
            False if the key was not recognised and nothing happened.
        """
        key = KEY_ALIASES.get(key, key)
        self.feedback.start_soon()

        if key == "Enter":
            self.submit()
        elif key == "Tab":
            self.complete()
        elif key in HISTORY_KEYS:
            self.recall(HISTORY_KEYS[key])
        elif key == "Backspace":
            self.session.buffer = self.session.buffer[:-1]
        elif key == "Escape":
            pass
        elif len(key) == 1 and key.isprintable():
            self.feedback.play_click()
            self.session.buffer += key
        else:
            logger.debug("Ignoring key %r", key)
            return False
        return True

    def type_text(self, text: str) -> None:
        """Feed each character of ``text`` through ``handle_key``."""
        for char in text:
            self.handle_key(char)

    def submit(self) -> RenderActions:
        """Accept the edit buffer as one command line."""
        text = self.session.buffer.strip()
        self.session.buffer = ""
        if text:
            self.session.history.record(text)
        return self.dispatcher.dispatch(text)

    def complete(self) -> list[str]:
        """Complete the last token of the edit buffer.

        One candidate replaces the token (plus a trailing space), several
        are listed on one line, none does nothing.
        """
        tokens = tokenize_for_completion(self.session.buffer)
        matches = self.completer.complete(tokens)
        if len(matches) == 1:
            self.session.buffer = apply_completion(tokens, matches[0])
        elif len(matches) > 1:
            self.renderer.submit(line("   ".join(matches), RenderStyle.SYSTEM))
        return matches

    def recall(self, direction: HistoryDirection) -> None:
        """Replace the edit buffer with the neighbouring history entry."""
        text = self.session.history.navigate(direction)
        if text is not None:
            self.session.buffer = text

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def get_screen_content(self, rows: int | None = None) -> str:
        """The bottom-anchored view: the newest log lines plus the prompt line."""
        rows = rows if rows is not None else self._config.screen_rows
        visible = [entry.display_text for entry in self.session.output.tail(rows - 1)]
        visible.append(self.prompt_line)
        return "\n".join(visible)

"""pygame display surface for the terminal.

Draws the bottom-anchored tail of the output log plus the prompt line
in a monospace font, one color per line style, with a blinking block
cursor after the prompt. The window runs in its own thread so it never
blocks the event loop that drives the interpreter.
"""

from __future__ import annotations

import logging
import threading
import time

from termfolio.render.models import OutputLine, RenderStyle

logger = logging.getLogger(__name__)

STYLE_COLORS: dict[RenderStyle, tuple[int, int, int]] = {
    RenderStyle.SYSTEM: (120, 220, 140),
    RenderStyle.COMMAND: (240, 240, 240),
    RenderStyle.LINK: (110, 170, 255),
}

ScreenRow = tuple[str, RenderStyle]


def layout_rows(lines: list[OutputLine], prompt_line: str, rows: int, cols: int) -> list[ScreenRow]:
    """Fit log lines plus the prompt into a ``rows`` x ``cols`` grid.

    Long lines wrap at ``cols``. When everything does not fit, the oldest
    rows scroll off the top so the prompt stays on the last row.
    """
    screen: list[ScreenRow] = []
    for entry in lines:
        screen.extend(_wrap(entry.display_text, entry.style, cols))
    screen.extend(_wrap(prompt_line, RenderStyle.COMMAND, cols))
    return screen[-rows:] if rows > 0 else []


def _wrap(text: str, style: RenderStyle, cols: int) -> list[ScreenRow]:
    if not text:
        return [("", style)]
    return [(text[i:i + cols], style) for i in range(0, len(text), cols)]


class TerminalDisplay:
    """Renders the terminal in a pygame window.

    Content is pushed with ``update_content`` from the event loop thread
    and read by the render thread under a lock.
    """

    def __init__(
        self,
        rows: int = 24,
        cols: int = 100,
        font_size: int = 20,
        bg_color: tuple[int, int, int] = (12, 12, 12),
        fg_color: tuple[int, int, int] = (204, 204, 204),
        window_title: str = "termfolio",
        fullscreen: bool = False,
    ) -> None:
        self._rows = rows
        self._cols = cols
        self._font_size = font_size
        self._bg_color = bg_color
        self._fg_color = fg_color
        self._window_title = window_title
        self._fullscreen = fullscreen
        self._screen: list[ScreenRow] = []
        self._running = False
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def is_active(self) -> bool:
        return self._running

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def start(self) -> None:
        """Start the display window in a background thread."""
        if self._running:
            return
        self._running = True
        self._thread = threading.Thread(
            target=self._render_loop, daemon=True, name="terminal-display"
        )
        self._thread.start()
        logger.info("Terminal display started")

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._thread is not None:
            self._thread.join(timeout=3.0)
            self._thread = None
        logger.info("Terminal display stopped")

    def update_content(self, lines: list[OutputLine], prompt_line: str) -> None:
        """Replace what the window shows (thread-safe)."""
        screen = layout_rows(lines, prompt_line, self._rows, self._cols)
        with self._lock:
            self._screen = screen

    def _render_loop(self) -> None:
        import pygame

        pygame.init()

        font = self._find_mono_font(pygame, self._font_size)
        char_w, char_h = font.size("M")
        line_height = int(char_h * 1.2)
        padding = 20
        size = (self._cols * char_w + padding * 2, self._rows * line_height + padding * 2)

        flags = pygame.FULLSCREEN if self._fullscreen else 0
        screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption(self._window_title)
        logger.info("Display %dx%d, font %d", size[0], size[1], self._font_size)

        clock = pygame.time.Clock()
        cursor_visible = True
        cursor_timer = 0.0
        last_time = time.time()

        while self._running:
            now = time.time()
            cursor_timer += now - last_time
            last_time = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                    break

            screen.fill(self._bg_color)

            with self._lock:
                rows = list(self._screen)

            for i, (text, style) in enumerate(rows):
                if text:
                    color = STYLE_COLORS.get(style, self._fg_color)
                    surface = font.render(text, True, color)
                    screen.blit(surface, (padding, padding + i * line_height))

            if cursor_timer >= 0.5:
                cursor_visible = not cursor_visible
                cursor_timer = 0.0

            if cursor_visible and rows:
                last = len(rows) - 1
                col = min(len(rows[last][0]), self._cols - 1)
                cursor_rect = pygame.Rect(
                    padding + col * char_w, padding + last * line_height, char_w, line_height,
                )
                pygame.draw.rect(screen, self._fg_color, cursor_rect)

            pygame.display.flip()
            clock.tick(30)

        pygame.quit()

    @staticmethod
    def _find_mono_font(pygame, size: int):
        for name in ["dejavusansmono", "liberationmono", "couriernew", "monospace", "courier"]:
            path = pygame.font.match_font(name)
            if path:
                return pygame.font.Font(path, size)
        return pygame.font.SysFont("monospace", size)

"""FastAPI HTTP server: the terminal's document surface.

Receives key presses over HTTP, feeds them to the interactive terminal,
and serves the output log as plain text, as JSON lines, or as an HTML
document. Optionally mirrors the screen into a pygame display window.

The HTML page at ``/`` is a static snapshot of the log and the live
buffer; it does not take keyboard input. Key presses arrive through
``/keystroke`` and ``/text``.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from html import escape
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from termfolio import __version__
from termfolio.config.settings import Settings, load_settings
from termfolio.endpoint.display import TerminalDisplay
from termfolio.endpoint.terminal import InteractiveTerminal
from termfolio.render.models import RenderStyle

logger = logging.getLogger(__name__)


class KeystrokeRequest(BaseModel):
    key: str = Field(description="Key name (e.g., 'Enter', 'Tab', 'Up', 'a')")
    wait: bool = Field(default=False, description="Respond only after rendering has finished")


class TextInputRequest(BaseModel):
    text: str = Field(description="Text to type; '\\n' presses Enter, '\\t' presses Tab")
    wait: bool = Field(default=False, description="Respond only after rendering has finished")


class EndpointStatus(BaseModel):
    status: str = "ok"
    renderer_state: str = "idle"
    sound_enabled: bool = True
    history_length: int = 0
    display_active: bool = False


class LineModel(BaseModel):
    text: str
    style: RenderStyle
    label: str = ""
    href: str | None = None
    html: str


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
<div id="terminal">
<div id="output">
{lines}
</div>
<div class="line prompt"><span id="prompt">{prompt}</span> <span id="cmd">{buffer}</span></div>
</div>
</body>
</html>
"""


def create_app(
    terminal: InteractiveTerminal | None = None,
    display: TerminalDisplay | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings if settings is not None else Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Startup
        t = app.state.terminal
        d = app.state.display
        if t is None:
            t = InteractiveTerminal.from_settings(settings)
            app.state.terminal = t
        ep = settings.endpoint
        if d is None and ep.display_enabled:
            d = TerminalDisplay(
                rows=t.config.screen_rows, cols=ep.cols,
                font_size=ep.font_size, bg_color=ep.bg_color, fg_color=ep.fg_color,
                fullscreen=ep.fullscreen,
            )
            app.state.display = d
        await t.start()
        app.state.refresh_task = None
        if d is not None:
            d.start()
            app.state.refresh_task = asyncio.create_task(_refresh_display(t, d))
        logger.info("Endpoint started")
        yield
        # Shutdown
        if app.state.refresh_task is not None:
            app.state.refresh_task.cancel()
            try:
                await app.state.refresh_task
            except asyncio.CancelledError:
                pass
        if d is not None:
            d.stop()
        t.close()
        logger.info("Endpoint stopped")

    app = FastAPI(
        title="termfolio Endpoint",
        description="Interactive portfolio terminal over HTTP",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.terminal = terminal
    app.state.display = display

    @app.get("/health")
    async def health_check() -> EndpointStatus:
        t: InteractiveTerminal = app.state.terminal
        return EndpointStatus(
            status="ok",
            renderer_state=t.renderer.state.value,
            sound_enabled=t.session.sound_enabled,
            history_length=len(t.session.history),
            display_active=app.state.display.is_active if app.state.display else False,
        )

    @app.post("/keystroke")
    async def receive_keystroke(request: KeystrokeRequest) -> dict[str, str]:
        t: InteractiveTerminal = app.state.terminal
        if not t.handle_key(request.key):
            return {"status": "ignored", "reason": f"Unknown key: {request.key}"}
        if request.wait:
            await t.renderer.wait_idle()
        return {"status": "ok", "key": request.key}

    @app.post("/text")
    async def receive_text(request: TextInputRequest) -> dict[str, str]:
        t: InteractiveTerminal = app.state.terminal
        t.type_text(request.text)
        if request.wait:
            await t.renderer.wait_idle()
        return {"status": "ok", "length": str(len(request.text))}

    @app.get("/screen")
    async def get_screen_content() -> dict[str, str]:
        t: InteractiveTerminal = app.state.terminal
        return {"content": t.get_screen_content()}

    @app.get("/lines")
    async def get_lines() -> list[LineModel]:
        t: InteractiveTerminal = app.state.terminal
        return [
            LineModel(
                text=entry.text, style=entry.style, label=entry.label,
                href=entry.href, html=entry.to_html(),
            )
            for entry in t.session.output.lines
        ]

    @app.get("/", response_class=HTMLResponse)
    async def get_page() -> str:
        t: InteractiveTerminal = app.state.terminal
        return PAGE_TEMPLATE.format(
            title=escape(t.config.prompt_text),
            lines="\n".join(entry.to_html() for entry in t.session.output.lines),
            prompt=escape(t.config.prompt_text),
            buffer=escape(t.session.buffer),
        )

    return app


async def _refresh_display(terminal: InteractiveTerminal, display: TerminalDisplay) -> None:
    """Periodically push the terminal's tail into the display window."""
    while True:
        try:
            lines = terminal.session.output.tail(display.rows)
            display.update_content(lines, terminal.prompt_line)
            await asyncio.sleep(0.05)
        except asyncio.CancelledError:
            break
        except Exception as e:
            logger.debug("Display refresh error: %s", e)
            await asyncio.sleep(0.5)


def main() -> None:
    """Entry point for running the endpoint server standalone."""
    settings = load_settings()
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.endpoint.host, port=settings.endpoint.port)


if __name__ == "__main__":
    main()

"""Line rendering for termfolio.

Render actions (immediate, animated, clear), the append-only output log
they write to, and the scheduler that keeps them in issuance order.
"""

from termfolio.render.models import (
    AnimatedLine,
    ClearScreen,
    ImmediateLine,
    OutputLine,
    RenderAction,
    RenderStyle,
)
from termfolio.render.output import LogEvent, LogEventKind, OutputLog
from termfolio.render.scheduler import LineRenderer, RendererState

__all__ = [
    "AnimatedLine",
    "ClearScreen",
    "ImmediateLine",
    "LineRenderer",
    "LogEvent",
    "LogEventKind",
    "OutputLine",
    "OutputLog",
    "RenderAction",
    "RenderStyle",
    "RendererState",
]

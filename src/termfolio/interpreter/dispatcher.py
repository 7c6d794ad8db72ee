"""Command dispatch: from a submitted line to render actions.

Every non-blank line is echoed after the prompt before anything else
happens, then the first token (lower-cased) is looked up in the command
table and the rest of the line is handed to its handler.
"""

from __future__ import annotations

import logging

from termfolio.interpreter.base import (
    CommandContext,
    CommandError,
    NotFoundError,
    RenderActions,
)
from termfolio.interpreter.tokenizer import tokenize
from termfolio.render.models import RenderStyle, line
from termfolio.render.scheduler import LineRenderer

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Resolves command names to handlers and feeds the renderer."""

    def __init__(self, context: CommandContext, renderer: LineRenderer) -> None:
        self._context = context
        self._renderer = renderer

    @property
    def context(self) -> CommandContext:
        return self._context

    def dispatch(self, raw: str) -> RenderActions:
        """Run one command line.

        The produced actions are submitted to the renderer in order and
        also returned. Handler errors never propagate: ``CommandError``
        becomes its message on one line, anything else is logged and
        reported as an internal error line.
        """
        text = raw.strip()
        if not text:
            return []

        actions: RenderActions = [
            line(f"{self._context.config.prompt_text} {text}", RenderStyle.COMMAND)
        ]
        tokens = tokenize(text)
        name = tokens[0].lower()
        arg = " ".join(tokens[1:])

        try:
            spec = self._context.table.get(name)
            if spec is None:
                raise NotFoundError(f"command not found: {name}", command=name)
            actions.extend(spec.handler(self._context, arg))
        except CommandError as e:
            logger.debug("Command %r failed: %s", name, e)
            actions.append(line(str(e)))
        except Exception:
            logger.exception("Handler for %r raised", name)
            actions.append(line(f"{name}: internal error"))

        logger.debug("Dispatched %r -> %d actions", text, len(actions))
        self._renderer.submit_all(actions)
        return actions

"""Command interpreter for termfolio.

Tokenizer, command table, dispatcher, completion resolver and history
navigator. Everything here runs on the event loop thread and never
blocks; the only suspension point is an animated render.
"""

from termfolio.interpreter.base import (
    CommandContext,
    CommandError,
    CommandSpec,
    CommandTable,
    CompletionSource,
    NotFoundError,
    UsageError,
)
from termfolio.interpreter.commands import build_command_table
from termfolio.interpreter.completion import CompletionResolver, apply_completion
from termfolio.interpreter.dispatcher import CommandDispatcher
from termfolio.interpreter.history import HistoryDirection, HistoryNavigator
from termfolio.interpreter.session import Session
from termfolio.interpreter.tokenizer import tokenize, tokenize_for_completion

__all__ = [
    "CommandContext",
    "CommandDispatcher",
    "CommandError",
    "CommandSpec",
    "CommandTable",
    "CompletionResolver",
    "CompletionSource",
    "HistoryDirection",
    "HistoryNavigator",
    "NotFoundError",
    "Session",
    "UsageError",
    "apply_completion",
    "build_command_table",
    "tokenize",
    "tokenize_for_completion",
]

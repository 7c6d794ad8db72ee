"""Prefix completion for the edit buffer.

The first token completes against command names. Later tokens complete
against whatever the command's ``CompletionSource`` names: project ids
from the content store, or a fixed literal set. Matching is a plain,
case-sensitive ``startswith``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from termfolio.content.store import ContentStore
from termfolio.interpreter.base import CommandTable, CompletionSource

logger = logging.getLogger(__name__)


class CompletionResolver:
    """Computes completion candidates; never touches the buffer itself."""

    def __init__(self, table: CommandTable, content: ContentStore) -> None:
        self._table = table
        self._content = content

    def complete(self, tokens: Sequence[str]) -> list[str]:
        """Candidates for the last token, in table / content order.

        Args:
            tokens: Tokens typed so far; the last one (possibly empty) is
                    the one being completed.
        """
        if len(tokens) <= 1:
            prefix = tokens[0] if tokens else ""
            return [name for name in self._table.names() if name.startswith(prefix)]

        prefix = tokens[-1]
        spec = self._table.get(tokens[0].lower())
        if spec is None:
            return []

        if spec.completion == CompletionSource.PROJECT_IDS:
            candidates: Sequence[str] = self._content.project_ids()
        elif spec.completion == CompletionSource.LITERALS:
            candidates = spec.literals
        else:
            return []

        matches = [c for c in candidates if c.startswith(prefix)]
        logger.debug("Completions for %r after %r: %s", prefix, spec.name, matches)
        return matches


def apply_completion(tokens: Sequence[str], completion: str) -> str:
    """New edit buffer: the last token replaced and a separator appended."""
    return " ".join([*tokens[:-1], completion]) + " "

"""Whitespace tokenizer for command lines.

There is no shell grammar here: no quoting, escaping, pipes or
expansion. A token is simply a maximal run of non-whitespace characters.
"""

from __future__ import annotations


def tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace; blank input yields ``[]``."""
    return line.split()


def tokenize_for_completion(buffer: str) -> list[str]:
    """Tokens of the live edit buffer as the completion resolver sees them.

    The last token is the one being completed, so the result is never
    empty: a blank buffer yields ``[""]`` and trailing whitespace yields
    an empty trailing token (``"open "`` -> ``["open", ""]``).
    """
    tokens = tokenize(buffer)
    if not tokens or buffer[-1:].isspace():
        tokens.append("")
    return tokens

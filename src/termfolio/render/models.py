"""Render models: output lines and the actions that produce them.

Command handlers never touch the output log directly. They return
render actions, which the ``LineRenderer`` applies strictly in the order
they were issued.
"""

from __future__ import annotations

import enum
from html import escape
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class RenderStyle(str, enum.Enum):
    """Visual class of an output line."""

    PLAIN = "plain"
    SYSTEM = "system"  # Headings and interpreter messages
    COMMAND = "command"  # Echo of the submitted command line
    LINK = "link"


# ---------------------------------------------------------------------------
# Output lines
# ---------------------------------------------------------------------------


class OutputLine(BaseModel):
    """One line of the output log.

    Link lines carry a plain-text ``label`` that is rendered outside the
    hyperlink and an ``href`` for the anchor; ``text`` is the anchor text.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    style: RenderStyle = RenderStyle.PLAIN
    label: str = ""
    href: str | None = None

    @property
    def display_text(self) -> str:
        return self.label + self.text

    def to_html(self) -> str:
        """Render the line as a document-surface element."""
        if self.href is None:
            body = escape(self.display_text, quote=False)
        else:
            body = (
                f'{escape(self.label, quote=False)}<a class="terminal-link" '
                f'href="{escape(self.href)}" target="_blank" rel="noopener noreferrer">'
                f"{escape(self.text, quote=False)}</a>"
            )
        return f'<div class="line {self.style.value}">{body}</div>'


# ---------------------------------------------------------------------------
# Render actions (discriminated union)
# ---------------------------------------------------------------------------


class ImmediateLine(BaseModel):
    """Append a fully formed line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["immediate"] = "immediate"
    text: str = ""
    style: RenderStyle = RenderStyle.PLAIN
    label: str = ""
    href: str | None = None

    def to_line(self) -> OutputLine:
        return OutputLine(text=self.text, style=self.style, label=self.label, href=self.href)


class AnimatedLine(BaseModel):
    """Append a line and reveal it one character at a time."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["animated"] = "animated"
    text: str = ""
    style: RenderStyle = RenderStyle.PLAIN
    per_character_delay: float | None = Field(
        default=None, ge=0, description="Seconds per character; None uses the renderer default"
    )


class ClearScreen(BaseModel):
    """Empty the output log."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["clear"] = "clear"


RenderAction = Annotated[
    Union[ImmediateLine, AnimatedLine, ClearScreen],
    Field(discriminator="kind"),
]


def line(text: str = "", style: RenderStyle = RenderStyle.PLAIN) -> ImmediateLine:
    """Shorthand for an immediate line."""
    return ImmediateLine(text=text, style=style)


def link(label: str, url: str) -> ImmediateLine:
    """Shorthand for an immediate link line; ``label`` stays outside the anchor."""
    return ImmediateLine(text=url, style=RenderStyle.LINK, label=label, href=url)

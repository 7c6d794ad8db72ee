"""The command table and its handlers.

Each handler takes the ``CommandContext`` and the argument string (every
token after the command name, re-joined with single spaces) and returns
the render actions to show. Bad input is reported by raising
``UsageError`` or ``NotFoundError``; the dispatcher turns those into a
single output line.
"""

from __future__ import annotations

from datetime import datetime

from termfolio.interpreter.base import (
    CommandContext,
    CommandSpec,
    CommandTable,
    CompletionSource,
    NotFoundError,
    RenderActions,
    UsageError,
)
from termfolio.render.models import AnimatedLine, ClearScreen, RenderStyle, line, link

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

LS_FLAGS = ("-al", "-la", "-a", "-l")
SOUND_ARGS = ("on", "off")

OPEN_USAGE = 'Usage: open <project-id>  (try "ls" to see ids)'
SOUND_USAGE = "Usage: sound on|off"
ABOUT_HINT = 'Type "ls | ls -al" to see projects or "help" for commands.'


def format_mtime(moment: datetime) -> str:
    """``Mon DD HH:MM`` with a space-padded day, independent of locale."""
    return f"{MONTHS[moment.month - 1]} {moment.day:>2} {moment.hour:02d}:{moment.minute:02d}"


def synthetic_size(description: str) -> int:
    """Fake file size for the detailed listing, derived from the description."""
    return max(128, len(description) * 6)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def cmd_help(ctx: CommandContext, arg: str) -> RenderActions:
    actions: RenderActions = [line("Available commands:", RenderStyle.SYSTEM)]
    for spec in ctx.table:
        actions.append(line(f"  {spec.usage:<14} {spec.summary}"))
    return actions


def cmd_ls(ctx: CommandContext, arg: str) -> RenderActions:
    projects = ctx.content.portfolio.projects

    if "-a" not in arg and "-l" not in arg:
        return [line(f"{p.id}  - {p.title}") for p in projects]

    mtime = format_mtime(ctx.clock())
    owner = ctx.config.owner
    group = ctx.config.group
    actions: RenderActions = [line(f"total {len(projects) * 4}", RenderStyle.SYSTEM)]
    for p in projects:
        size = synthetic_size(p.description)
        actions.append(
            line(f"-rw-r--r-- 1 {owner} {group} {size:>6} {mtime} {p.id}  - {p.title}")
        )
    return actions


def cmd_about(ctx: CommandContext, arg: str) -> RenderActions:
    about = ctx.content.portfolio.about
    actions: RenderActions = []
    if about.summary:
        actions.append(AnimatedLine(text=about.summary, style=RenderStyle.SYSTEM))
    if about.skills:
        actions.append(line(f"Skills: {', '.join(about.skills)}"))
    if about.location:
        actions.append(line(f"Location: {about.location}"))
    actions.append(line(ABOUT_HINT))
    return actions


def cmd_open(ctx: CommandContext, arg: str) -> RenderActions:
    if not arg:
        raise UsageError(OPEN_USAGE, command="open")

    project_id = arg.lower()
    project = ctx.content.find_project(project_id)
    if project is None:
        raise NotFoundError(f"Project not found: {project_id}", command="open")

    return [
        line(project.title, RenderStyle.SYSTEM),
        line(project.description),
        link("Repo: ", project.repo),
        link("Demo: ", project.demo),
    ]


def cmd_clear(ctx: CommandContext, arg: str) -> RenderActions:
    return [ClearScreen()]


def cmd_sound(ctx: CommandContext, arg: str) -> RenderActions:
    value = arg.strip().lower()
    if value == "on":
        ctx.session.sound_enabled = True
        return [line("Sound: ON")]
    if value == "off":
        ctx.session.sound_enabled = False
        return [line("Sound: OFF")]
    raise UsageError(SOUND_USAGE, command="sound")


def cmd_experience(ctx: CommandContext, arg: str) -> RenderActions:
    actions: RenderActions = [line("Work Experience:", RenderStyle.SYSTEM)]
    for e in ctx.content.portfolio.experiences:
        actions.append(line(f"{e.company} — {e.title} ({e.period})"))
        actions.extend(line(f"  - {bullet}") for bullet in e.bullets)
    return actions


def cmd_involvement(ctx: CommandContext, arg: str) -> RenderActions:
    actions: RenderActions = [line("Involvement:", RenderStyle.SYSTEM)]
    for i in ctx.content.portfolio.involvement:
        actions.append(line(f"{i.org} — {i.role}"))
        actions.append(line(f"  {i.details}"))
        if i.url is not None:
            actions.append(link("  Link: ", i.url))
    return actions


def cmd_education(ctx: CommandContext, arg: str) -> RenderActions:
    actions: RenderActions = [line("Education:", RenderStyle.SYSTEM)]
    for ed in ctx.content.portfolio.education:
        actions.append(line(f"{ed.school} — {ed.degree} ({ed.period})"))
        if ed.notes is not None:
            actions.append(line(f"  {ed.notes}"))
    return actions


def cmd_resume(ctx: CommandContext, arg: str) -> RenderActions:
    return cmd_experience(ctx, "") + cmd_education(ctx, "")


def cmd_contact(ctx: CommandContext, arg: str) -> RenderActions:
    contact = ctx.content.portfolio.contact
    actions: RenderActions = [line("Contact:", RenderStyle.SYSTEM)]
    if contact.email:
        actions.append(line(f"Email: {contact.email}"))
    for entry in contact.links:
        actions.append(link(f"{entry.label}: ", entry.url))
    if contact.repo:
        actions.append(link("Source: ", contact.repo))
    return actions


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


def build_command_table() -> CommandTable:
    """Build the command table; order drives both help output and completion."""
    return CommandTable([
        CommandSpec(name="help", handler=cmd_help, usage="help", summary="Show this help message"),
        CommandSpec(
            name="ls", handler=cmd_ls, usage="ls | ls -al",
            summary="List projects (simple | detailed)",
            completion=CompletionSource.LITERALS, literals=LS_FLAGS,
        ),
        CommandSpec(
            name="open", handler=cmd_open, usage="open <project>",
            summary="Open project by id (e.g. open project1)",
            completion=CompletionSource.PROJECT_IDS,
        ),
        CommandSpec(name="about", handler=cmd_about, usage="about", summary="About me"),
        CommandSpec(name="clear", handler=cmd_clear, usage="clear", summary="Clear the screen"),
        CommandSpec(
            name="sound", handler=cmd_sound, usage="sound on|off",
            summary="Enable or disable typing sounds",
            completion=CompletionSource.LITERALS, literals=SOUND_ARGS,
        ),
        CommandSpec(
            name="experience", handler=cmd_experience, usage="experience",
            summary="Show work experience",
        ),
        CommandSpec(
            name="involvement", handler=cmd_involvement, usage="involvement",
            summary="Show community involvement",
        ),
        CommandSpec(
            name="education", handler=cmd_education, usage="education",
            summary="Show university / education info",
        ),
        CommandSpec(
            name="resume", handler=cmd_resume, usage="resume",
            summary="Show experience, then education",
        ),
        CommandSpec(name="contact", handler=cmd_contact, usage="contact", summary="Show contact links"),
    ])

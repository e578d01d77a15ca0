"""The built-in ``exit`` and ``help`` commands.

Every menu that enters its loop answers to one ``exit`` and one
``help`` command, either inherited from the nearest ancestor that owns
them or synthesized here and attached locally.

The help rendering is split into pure line builders
(:func:`align_rows`, :func:`format_overview`,
:func:`format_command_help`) and the action that prints them.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable

from cmdtree.core.command import Command
from cmdtree.core.models import Parameter
from cmdtree.core.protocols import OutputSink

EXIT_NAME: str = "exit"
EXIT_HELP: str = "Exit from this menu"

HELP_NAME: str = "help"
HELP_HELP: str = "Show an overview help"
HELP_LONG_HELP: str = (
    "Without arguments, list the commands of the current menu. "
    "With a command name, describe that command and its parameters."
)

OPTIONAL_MARKER: str = " (optional)"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def make_exit(parent: Command) -> Command:
    """Create the standard ``exit`` command under *parent*."""
    cmd = Command(EXIT_NAME, short_help=EXIT_HELP)
    parent.add_children(cmd)
    parent.exit_node = cmd
    return cmd


def make_help(parent: Command, output: OutputSink) -> Command:
    """Create the standard ``help`` command under *parent*.

    The command prints to *output*, the sink of the loop that
    synthesized it.
    """
    cmd = Command(
        HELP_NAME,
        short_help=HELP_HELP,
        long_help=HELP_LONG_HELP,
        parameters=(
            Parameter(
                "command",
                help="Show help of specified command",
                optional=True,
            ),
        ),
        action=functools.partial(default_help, output=output),
    )
    parent.add_children(cmd)
    parent.help_node = cmd
    return cmd


# ---------------------------------------------------------------------------
# Formatting (pure)
# ---------------------------------------------------------------------------

def align_rows(rows: Iterable[tuple[str, str]]) -> list[str]:
    """Render ``(name, text)`` pairs with names padded to the longest one.

    >>> align_rows([("ls", "List"), ("status", "Show status")])
    ['  ls      List', '  status  Show status']
    """
    materialized = list(rows)
    if not materialized:
        return []
    width = max(len(name) for name, _ in materialized)
    return [f"  {name:<{width}}  {text}".rstrip() for name, text in materialized]


def format_overview(menu: Command) -> list[str]:
    """Lines listing every command reachable from *menu*."""
    lines: list[str] = []
    header = menu.long_help or menu.short_help
    if header:
        lines.extend((header, ""))
    lines.append("Available commands:")
    lines.extend(
        align_rows((cmd.name, cmd.short_help) for cmd in menu.visible_commands()),
    )
    return lines


def format_command_help(cmd: Command) -> list[str]:
    """Lines describing *cmd* and its declared parameters."""
    lines: list[str] = []
    description = cmd.long_help or cmd.short_help
    if description:
        lines.append(description)
    if not cmd.parameters:
        return lines

    if lines:
        lines.append("")
    lines.append("Available parameters:")
    lines.extend(
        align_rows(
            (param.name, param.help + (OPTIONAL_MARKER if param.optional else ""))
            for param in cmd.parameters
        ),
    )
    return lines


# ---------------------------------------------------------------------------
# Action
# ---------------------------------------------------------------------------

def default_help(cmd: Command, args: list[str], *, output: OutputSink) -> None:
    """Action of the synthesized ``help`` command.

    Describes the menu the command was typed in, which for an inherited
    ``help`` differs from the menu that owns it.
    """
    menu = cmd.invoked_from or cmd.parent or cmd

    if len(args) > 1:
        output.print(f"The {cmd.name} command cannot take more than 1 parameter")
        return

    if not args:
        lines = format_overview(menu)
    else:
        selected = menu.resolve(args[0])
        if selected is None:
            output.print(f"The command {args[0]} cannot be found")
            return
        lines = format_command_help(selected)

    for line in lines:
        output.print(line)

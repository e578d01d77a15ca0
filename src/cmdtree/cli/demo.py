"""Sample command tree served by the ``cmdtree`` console script.

It doubles as a usage example of the host-facing API: build commands,
compose them with :meth:`~cmdtree.core.command.Command.add_children`,
and hand the root to the engine.
"""

from __future__ import annotations

from cmdtree.core.command import Command
from cmdtree.core.models import Parameter
from cmdtree.core.protocols import OutputSink


def build_demo_tree(output: OutputSink, name: str = "root") -> Command:
    """Return a root with ``status``, ``echo`` and a ``config`` menu."""
    settings: dict[str, str] = {}

    def _status(cmd: Command, args: list[str]) -> None:
        output.print("OK")

    def _echo(cmd: Command, args: list[str]) -> None:
        output.print(" ".join(args))

    def _show(cmd: Command, args: list[str]) -> None:
        output.print("cfg")
        for key, value in settings.items():
            output.print(f"  {key} = {value}")

    def _set(cmd: Command, args: list[str]) -> None:
        if len(args) != 2:
            output.print(f"Usage: {cmd.name} <key> <value>")
            return
        key, value = args
        settings[key] = value

    config = Command(
        "config",
        short_help="Configuration menu",
        long_help="Inspect and change session settings.",
    )
    config.add_children(
        Command("show", short_help="Show the current settings", action=_show),
        Command(
            "set",
            short_help="Change a setting",
            long_help='Store a setting; quote values containing spaces, e.g. set motd "hello there".',
            parameters=(
                Parameter("key", help="Setting name"),
                Parameter("value", help="New value"),
            ),
            action=_set,
        ),
    )

    root = Command(name, short_help="cmdtree demo shell")
    root.add_children(
        Command("status", short_help="Print the service status", action=_status),
        Command(
            "echo",
            short_help="Print the arguments back",
            parameters=(Parameter("words", help="Text to print", optional=True),),
            action=_echo,
        ),
        config,
    )
    return root

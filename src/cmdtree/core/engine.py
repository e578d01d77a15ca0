"""The read-eval-print loop that drives a command tree.

State machine
-------------
1. **Validate** the menu (and run its ``on_enter`` hook).
2. **Resolve built-ins**: inherit ``help`` / ``exit`` from the nearest
   ancestor or synthesize them locally.
3. **Loop**: prompt, read, tokenize, dispatch:

   * unknown name → message, re-prompt;
   * the menu's exit command → return to the caller;
   * a sub-menu → recurse into :func:`execute`; on its return, re-prompt;
   * a leaf → run its action, re-prompt.

Configuration errors raise and unwind every enclosing loop.  Typing
mistakes are reported on the output sink and never raise.
"""

from __future__ import annotations

from collections.abc import Callable

from cmdtree.core.builtins import make_exit, make_help
from cmdtree.core.command import Command
from cmdtree.core.protocols import LineSource, OutputSink
from cmdtree.core.tokenizer import tokenize
from cmdtree.core.walker import build_prompt, walk_up
from cmdtree.exceptions import (
    ActionWithChildrenError,
    ActionWithOnEnterError,
    EmptyCommandError,
    LeafEntryError,
    LineSourceError,
    MissingActionError,
)


# ---------------------------------------------------------------------------
# Entry validation
# ---------------------------------------------------------------------------

def validate_entry(menu: Command) -> None:
    """Check *menu* can run a loop, running its ``on_enter`` hook first use.

    Raises
    ------
    ActionWithChildrenError
        The command declares an action and has children.
    ActionWithOnEnterError
        The command declares both an action and an on-enter hook.
    EmptyCommandError
        The command has neither an action nor children after ``on_enter``.
    LeafEntryError
        The command is a leaf and has no loop of its own.
    """
    if menu.action is not None and menu.children:
        raise ActionWithChildrenError(
            f"Command {menu.name} should not define an action and have children",
        )
    if menu.on_enter is not None and menu.action is not None:
        raise ActionWithOnEnterError(
            f"Command {menu.name} should define either an action or "
            "an on_enter hook, not both",
        )

    menu.run_on_enter()

    if menu.action is None and not menu.children:
        raise EmptyCommandError(
            f"Command {menu.name} has neither an action nor children",
            hint="Attach children or populate them from on_enter.",
        )
    if menu.action is not None:
        raise LeafEntryError(
            f"Command {menu.name} is a leaf and cannot open a menu",
            hint="Call its action directly or give it children instead.",
        )


# ---------------------------------------------------------------------------
# Built-in resolution
# ---------------------------------------------------------------------------

def _inherit(menu: Command, get: Callable[[Command], Command | None]) -> Command | None:
    """Return the built-in *get* yields for the nearest command in the chain."""
    found: Command | None = None

    def _visit(cmd: Command, _first: bool, _last: bool) -> bool:
        nonlocal found
        found = get(cmd)
        return found is not None

    walk_up(menu, _visit)
    return found


def resolve_builtins(menu: Command, output: OutputSink) -> Command:
    """Give *menu* a ``help`` and an ``exit`` command, inherited or new.

    Returns the help command the loop names in its error messages.
    """
    help_node = _inherit(menu, lambda cmd: cmd.help_node)
    if help_node is None:
        help_node = make_help(menu, output)
    else:
        menu.help_node = help_node

    inherited_exit = _inherit(menu, lambda cmd: cmd.exit_node)
    if inherited_exit is None:
        make_exit(menu)
    else:
        menu.exit_node = inherited_exit
    return help_node


# ---------------------------------------------------------------------------
# Loop
# ---------------------------------------------------------------------------

def _read(menu: Command, source: LineSource) -> str | None:
    """Read one line for *menu*; ``None`` means a clean end of input."""
    prompt = build_prompt(menu)
    completions = [cmd.name for cmd in menu.visible_commands()]
    try:
        return source.read_line(prompt, completions)
    except EOFError:
        return None
    except OSError as exc:
        raise LineSourceError(
            f"Failed to read input: {exc}",
            hint="Check that the input stream is still open.",
        ) from exc


def execute(menu: Command, source: LineSource, output: OutputSink) -> None:
    """Run *menu*'s interactive loop until its exit command is typed.

    Parameters
    ----------
    menu:
        The command whose children are offered at the prompt.
    source:
        Supplies input lines; end of input ends the loop like ``exit``.
    output:
        Receives error messages and help text.

    Raises
    ------
    ConfigurationError
        When *menu* or a selected command is misconfigured, from this
        loop or any nested one.
    LineSourceError
        When *source* fails with anything but end of input.
    """
    validate_entry(menu)
    help_node = resolve_builtins(menu, output)

    while True:
        raw = _read(menu, source)
        if raw is None:
            return

        line = raw.strip()
        if not line:
            continue

        args = tokenize(line)
        selected = menu.resolve(args[0])
        if selected is None:
            output.print(
                f"Invalid command, type {help_node.name} for available commands",
            )
            continue

        if selected is menu.exit_node:
            return

        if selected.action is None and not selected.is_menu:
            raise MissingActionError(selected.name)

        selected.invoked_from = menu
        if selected.action is None:
            execute(selected, source, output)
            continue

        selected.action(selected, args[1:])

"""CLI application entry point for the ``cmdtree`` demo shell.

This module is the **sole error boundary** for the console script.
It catches :class:`~cmdtree.exceptions.CmdTreeError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No interpreter logic lives here; the loop belongs to the core layer.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from cmdtree.cli import exit_codes
from cmdtree.cli.console import console, error_console
from cmdtree.exceptions import CmdTreeError, LineSourceError
from cmdtree.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``cmdtree``                 — interactive demo shell
    * ``cmdtree --script FILE``   — replay commands from a file
    * ``cmdtree --version``
    """
    parser = argparse.ArgumentParser(
        prog="cmdtree",
        description="Interactive command-tree shell.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-s",
        "--script",
        type=Path,
        default=None,
        metavar="FILE",
        help="Read commands from FILE instead of the terminal.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Read lines with a plain Rich prompt (no completion).",
    )
    parser.add_argument(
        "--name",
        default="root",
        help="Name of the root command shown in the prompt (default: root).",
    )
    return parser


# ---------------------------------------------------------------------------
# Session dispatch
# ---------------------------------------------------------------------------

def _run_script(name: str, script: Path) -> int:
    """Replay the lines of *script* against the demo tree."""
    from cmdtree.cli.demo import build_demo_tree
    from cmdtree.cli.shell import run_shell
    from cmdtree.infra.line_sources import StreamLineSource

    try:
        handle = script.open(encoding="utf-8")
    except OSError as exc:
        raise LineSourceError(
            f"Cannot open script {script}: {exc.strerror or exc}",
            hint="Pass an existing, readable file to --script.",
        ) from exc

    with handle:
        root = build_demo_tree(console, name)
        run_shell(root, source=StreamLineSource(handle, console), output=console)
    console.print()
    return exit_codes.SUCCESS


def _run_interactive(name: str, *, plain: bool) -> int:
    """Run the demo tree against the terminal."""
    from cmdtree.cli.console import get_rich_console
    from cmdtree.cli.demo import build_demo_tree
    from cmdtree.cli.shell import run_shell
    from cmdtree.infra.line_sources import RichLineSource

    root = build_demo_tree(console, name)
    source = RichLineSource(get_rich_console()) if plain else None
    run_shell(root, source=source, output=console)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cmdtree CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.script is not None:
        return _run_script(args.name, args.script)

    return _run_interactive(args.name, plain=args.plain)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CmdTreeError as exc:
        error_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            error_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        error_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

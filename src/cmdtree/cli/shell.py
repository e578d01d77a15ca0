"""Wire default collaborators around the engine.

:func:`run_shell` is the convenience entry point for host programs
that just want a terminal session: output goes to the Rich console
proxy and input comes from questionary on a terminal, or from standard
input otherwise.
"""

from __future__ import annotations

import sys

from cmdtree.cli.console import console
from cmdtree.core.command import Command
from cmdtree.core.protocols import LineSource, OutputSink
from cmdtree.infra.line_sources import QuestionaryLineSource, StreamLineSource


def default_line_source(output: OutputSink) -> LineSource:
    """Pick questionary for an interactive terminal, stdin otherwise."""
    if sys.stdin.isatty():
        return QuestionaryLineSource()
    return StreamLineSource(sys.stdin, output)


def run_shell(
    root: Command,
    *,
    source: LineSource | None = None,
    output: OutputSink | None = None,
) -> None:
    """Run *root*'s loop until the session ends.

    Raises whatever :meth:`Command.execute` raises; rendering those
    errors is left to the caller.
    """
    sink: OutputSink = output if output is not None else console
    line_source = source if source is not None else default_line_source(sink)
    root.execute(line_source, sink)

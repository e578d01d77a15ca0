"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the infrastructure and CLI layers must
satisfy.  The engine depends ONLY on these protocols, never on a
concrete terminal, stream or console.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class LineSource(Protocol):
    """Contract for anything that can supply one line of user input."""

    def read_line(self, prompt: str, completions: Sequence[str] = ()) -> str:
        """Display *prompt* and return the next line of input.

        Parameters
        ----------
        prompt:
            Fully built prompt text, e.g. ``"root(config)>"``.
        completions:
            Command names available in the current menu.  Sources
            without completion support ignore it.

        Returns
        -------
        str
            The line with any trailing newline / carriage return removed.

        Raises
        ------
        EOFError
            At a clean end of input.
        OSError
            When the underlying stream fails.
        """
        ...  # pragma: no cover


class OutputSink(Protocol):
    """Contract for text output.

    ``rich.console.Console`` satisfies it structurally, as does the
    console proxy of the CLI layer.
    """

    def print(self, *objects: object, end: str = "\n") -> None:
        """Write *objects* separated by spaces, followed by *end*."""
        ...  # pragma: no cover

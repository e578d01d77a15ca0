"""Line sources backed by streams, Rich and questionary.

Each class satisfies :class:`~cmdtree.core.protocols.LineSource`
structurally: it displays the prompt, returns one line without its
line terminator, and raises ``EOFError`` at a clean end of input.
Stream failures surface as ``OSError`` and are translated by the engine.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TextIO

from cmdtree.core.protocols import OutputSink
from cmdtree.exceptions import EnvironmentError
from cmdtree.utils.optional_deps import load_rich_console_class


def _import_questionary() -> Any:
    """Import questionary lazily for interactive reading."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


# ---------------------------------------------------------------------------
# Plain stream
# ---------------------------------------------------------------------------

class StreamLineSource:
    """Read lines from a text stream, writing prompts to an output sink.

    Suited to scripted sessions: feed it an open file or ``io.StringIO``.
    """

    def __init__(self, stream: TextIO, output: OutputSink) -> None:
        self._stream = stream
        self._output = output

    def read_line(self, prompt: str, completions: Sequence[str] = ()) -> str:
        self._output.print(prompt, end="")
        line = self._stream.readline()
        if line == "":
            raise EOFError
        return _strip_terminator(line)


# ---------------------------------------------------------------------------
# Rich
# ---------------------------------------------------------------------------

class RichLineSource:
    """Read lines with :meth:`rich.console.Console.input`.

    Parameters
    ----------
    console:
        Rich console used to render the prompt.  A new one is created
        when omitted.
    stream:
        Optional stream to read from instead of ``input()``.
    """

    def __init__(self, console: Any | None = None, stream: TextIO | None = None) -> None:
        if console is None:
            console = load_rich_console_class()()
        self._console = console
        self._stream = stream

    def read_line(self, prompt: str, completions: Sequence[str] = ()) -> str:
        line: str = self._console.input(prompt, markup=False, stream=self._stream)
        if self._stream is not None and line == "":
            raise EOFError
        return _strip_terminator(line)


# ---------------------------------------------------------------------------
# questionary
# ---------------------------------------------------------------------------

class QuestionaryLineSource:
    """Read lines with a questionary prompt completing command names.

    ``Ctrl+C`` propagates as ``KeyboardInterrupt``; ``Ctrl+D`` ends the
    input like the end of a stream.
    """

    def __init__(self) -> None:
        self._questionary = _import_questionary()

    def read_line(self, prompt: str, completions: Sequence[str] = ()) -> str:
        if completions:
            question = self._questionary.autocomplete(
                prompt,
                choices=list(completions),
                qmark="",
            )
        else:
            question = self._questionary.text(prompt, qmark="")

        answer: str | None = question.unsafe_ask()
        if answer is None:
            raise EOFError
        return _strip_terminator(answer)

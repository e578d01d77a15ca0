"""Shared pytest fixtures and configuration for the cmdtree test suite.

Guidelines
----------
* No terminal interaction in any test: input comes from
  :class:`ScriptedSource`, output goes to :class:`RecordingOutput`.
* questionary and Rich are mocked or pointed at in-memory streams.
* Keep every root command referenced for the duration of a test:
  children only hold weak references to their parents.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest


class ScriptedSource:
    """Line source replaying a fixed list of lines.

    Records every prompt and completion list it was asked to display.
    Once exhausted it raises *final* (``EOFError`` by default).
    """

    def __init__(self, lines: Sequence[str], final: BaseException | None = None) -> None:
        self._lines = list(lines)
        self._final = final
        self.prompts: list[str] = []
        self.completions: list[list[str]] = []

    def read_line(self, prompt: str, completions: Sequence[str] = ()) -> str:
        self.prompts.append(prompt)
        self.completions.append(list(completions))
        if not self._lines:
            if self._final is not None:
                raise self._final
            raise EOFError
        return self._lines.pop(0)


class RecordingOutput:
    """Output sink collecting everything printed into a string."""

    def __init__(self) -> None:
        self.text = ""

    def print(self, *objects: object, end: str = "\n") -> None:
        self.text += " ".join(str(obj) for obj in objects) + end

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


@pytest.fixture()
def output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture()
def script():
    """Factory fixture: ``script("a", "b")`` builds a :class:`ScriptedSource`."""

    def _make(*lines: str, final: BaseException | None = None) -> ScriptedSource:
        return ScriptedSource(lines, final=final)

    return _make

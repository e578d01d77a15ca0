"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from cmdtree.exceptions import EnvironmentError
from cmdtree.utils.optional_deps import load_rich_console_class


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout (or stderr)."""
	console_class = load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Satisfies :class:`~cmdtree.core.protocols.OutputSink`, so it can be
	handed straight to the engine.  With ``markup=False`` text is printed
	verbatim: no markup, highlighting or emoji codes, and no wrapping at
	the console width.
	"""

	def __init__(self, *, stderr: bool = False, markup: bool = True) -> None:
		self._stderr = stderr
		self._markup = markup

	def print(self, *objects: object, end: str = "\n") -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			print(*objects, end=end, file=stream, flush=True)
			return
		if self._markup:
			rich_console.print(*objects, end=end)
			return
		rich_console.print(
			*objects,
			end=end,
			markup=False,
			highlight=False,
			emoji=False,
			soft_wrap=True,
		)


console = _ConsoleProxy(markup=False)
"""Interactive output: prompts, command output and help text, printed verbatim."""

error_console = _ConsoleProxy(stderr=True)
"""Error-boundary output, rendered with Rich markup."""

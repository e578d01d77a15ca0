"""Lazy loaders for optional UI dependencies.

Both the CLI console proxy and the infra line sources render through
Rich; they share this loader so neither layer imports the other.
"""

from __future__ import annotations

from typing import Any

from cmdtree.exceptions import EnvironmentError


def load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console

"""Value objects and callable aliases shared by the core layer.

Models are **frozen** dataclasses — immutable values with no behaviour
beyond data access.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from cmdtree.core.command import Command


# ---------------------------------------------------------------------------
# Parameter descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Parameter:
    """A parameter a command accepts.

    Purely descriptive: the engine never validates arguments against
    it, the help command only displays it.
    """

    name: str
    """Parameter name as shown in help output."""

    help: str = ""
    """One-line description."""

    optional: bool = False
    """Whether the parameter may be omitted."""


# ---------------------------------------------------------------------------
# Callables attached to commands
# ---------------------------------------------------------------------------

Action: TypeAlias = "Callable[[Command, list[str]], None]"
"""Leaf behaviour: receives the command itself and the argument tokens."""

OnEnter: TypeAlias = "Callable[[Command], None]"
"""Hook run before a menu's loop starts for the first time."""

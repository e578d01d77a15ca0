"""Custom exception hierarchy for cmdtree.

All exceptions raised by the interpreter inherit from
:class:`CmdTreeError`.  Configuration errors describe a tree the host
program assembled incorrectly; they propagate out of every enclosing
loop and end the session.  Mistakes typed by the user are never
raised: the engine reports them on the output sink and keeps going.

Hierarchy
---------
CmdTreeError
├── ConfigurationError
│   ├── CycleError
│   │   └── SelfParentingError
│   ├── ActionWithChildrenError
│   ├── ActionWithOnEnterError
│   ├── EmptyCommandError
│   ├── LeafEntryError
│   └── MissingActionError
├── LineSourceError
└── EnvironmentError
"""

from __future__ import annotations


class CmdTreeError(Exception):
    """Base exception for all cmdtree errors.

    Every error condition maps to a subclass of this exception so that
    the CLI error boundary can render a clean message without leaking
    internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Tree configuration ----------------------------------------------------

class ConfigurationError(CmdTreeError):
    """Raised when the command tree was assembled incorrectly."""


class CycleError(ConfigurationError):
    """Raised when attaching a node would make the tree cyclic."""


class SelfParentingError(CycleError):
    """Raised when a command is attached as a child of itself."""


class ActionWithChildrenError(ConfigurationError):
    """Raised when a command declares both an action and children."""


class ActionWithOnEnterError(ConfigurationError):
    """Raised when a command declares both an action and an on-enter hook."""


class EmptyCommandError(ConfigurationError):
    """Raised when a menu has neither an action nor children on entry."""


class LeafEntryError(ConfigurationError):
    """Raised when a leaf command is asked to run its own loop."""


class MissingActionError(ConfigurationError):
    """Raised when a selected command has nothing to run."""

    def __init__(self, command_name: str) -> None:
        super().__init__(
            f"Missing action for {command_name} command",
            hint="Give the command an action, children or an on_enter hook.",
        )
        self.command_name: str = command_name


# --- Input -----------------------------------------------------------------

class LineSourceError(CmdTreeError):
    """Raised when the line source fails for a reason other than end-of-input."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CmdTreeError):
    """Raised when an optional runtime dependency is not available."""

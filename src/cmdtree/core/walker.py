"""Parent-chain traversal and the breadcrumb prompt built on top of it.

:func:`walk_up` is the single upward-traversal primitive of the core
layer.  It backs prompt construction, inheritance of the built-in
``exit`` / ``help`` commands and cycle detection during composition.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdtree.core.command import Command

Visitor = Callable[["Command", bool, bool], bool]
"""``visit(current, is_first, is_last) -> found``."""


def walk_up(node: Command, visit: Visitor) -> bool:
    """Visit *node* and then each of its ancestors up to the root.

    ``is_first`` is true for *node* itself, ``is_last`` for the command
    without a parent (a lone root is both).  The walk stops as soon as
    *visit* returns true.

    Returns
    -------
    bool
        ``True`` if *visit* reported success, ``False`` once the root
        was visited without it.
    """
    current: Command | None = node
    is_first = True
    while current is not None:
        parent = current.parent
        if visit(current, is_first, parent is None):
            return True
        current = parent
        is_first = False
    return False


# ---------------------------------------------------------------------------
# Prompt construction
# ---------------------------------------------------------------------------

def breadcrumb(node: Command) -> str:
    """Render the path-shaped prompt of a nested command.

    ``C`` under ``B`` under root ``A`` renders as ``"A(B/C)>"``.
    """
    prompt = ""

    def _accumulate(cmd: Command, is_first: bool, is_last: bool) -> bool:
        nonlocal prompt
        if is_first:
            prompt = f"{cmd.name})>"
        elif is_last:
            prompt = f"{cmd.name}({prompt}"
        else:
            prompt = f"{cmd.name}/{prompt}"
        return False

    walk_up(node, _accumulate)
    return prompt


def build_prompt(node: Command) -> str:
    """Return ``"<name>>"`` for a root and the breadcrumb otherwise."""
    if node.parent is None:
        return f"{node.name}>"
    return breadcrumb(node)

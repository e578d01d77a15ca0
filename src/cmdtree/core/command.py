"""The command node and tree composition.

A :class:`Command` is either a *leaf* (it has an ``action``) or a *menu*
(it has children, possibly produced lazily by ``on_enter``).  Ownership
flows strictly from parent to children: a child keeps only weak
references to its parent and to the built-in ``exit`` / ``help``
commands it inherits, so the tree never forms a reference cycle.
"""

from __future__ import annotations

import weakref
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cmdtree.core.models import Action, OnEnter, Parameter
from cmdtree.core.walker import walk_up
from cmdtree.exceptions import CycleError, SelfParentingError

if TYPE_CHECKING:
    from cmdtree.core.protocols import LineSource, OutputSink


def _deref(ref: weakref.ref[Command] | None) -> Command | None:
    return ref() if ref is not None else None


def _weak(cmd: Command | None) -> weakref.ref[Command] | None:
    return weakref.ref(cmd) if cmd is not None else None


@dataclass(eq=False)
class Command:
    """One entry of the command tree.

    Identity matters: two commands with the same name are still
    distinct nodes, hence ``eq=False``.

    Examples
    --------
    ::

        root = Command("root")
        config = Command("config", short_help="Configuration menu")
        config.add_children(Command("show", action=show_config))
        root.add_children(config)
        root.execute(source, output)
    """

    name: str
    """Identifier typed by the user; matched case-sensitively."""

    short_help: str = ""
    """One-line summary shown in command listings."""

    long_help: str = ""
    """Detailed description shown by ``help <command>``."""

    parameters: Sequence[Parameter] = ()
    """Descriptive parameter list, never enforced by the engine."""

    action: Action | None = None
    """Leaf behaviour; mutually exclusive with children."""

    on_enter: OnEnter | None = None
    """Hook run once before this menu's loop first starts."""

    _children: list[Command] = field(default_factory=list, init=False, repr=False)
    _parent_ref: weakref.ref[Command] | None = field(default=None, init=False, repr=False)
    _exit_ref: weakref.ref[Command] | None = field(default=None, init=False, repr=False)
    _help_ref: weakref.ref[Command] | None = field(default=None, init=False, repr=False)
    _invoked_from_ref: weakref.ref[Command] | None = field(
        default=None, init=False, repr=False,
    )
    _entered: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Command name must not be empty")
        self.parameters = tuple(self.parameters)

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    @property
    def children(self) -> tuple[Command, ...]:
        """Child commands in insertion order."""
        return tuple(self._children)

    @property
    def parent(self) -> Command | None:
        return _deref(self._parent_ref)

    @property
    def exit_node(self) -> Command | None:
        """The ``exit`` command this menu answers to, own or inherited."""
        return _deref(self._exit_ref)

    @exit_node.setter
    def exit_node(self, cmd: Command | None) -> None:
        self._exit_ref = _weak(cmd)

    @property
    def help_node(self) -> Command | None:
        """The ``help`` command this menu answers to, own or inherited."""
        return _deref(self._help_ref)

    @help_node.setter
    def help_node(self, cmd: Command | None) -> None:
        self._help_ref = _weak(cmd)

    @property
    def invoked_from(self) -> Command | None:
        """Menu whose loop most recently dispatched this command."""
        return _deref(self._invoked_from_ref)

    @invoked_from.setter
    def invoked_from(self, menu: Command | None) -> None:
        self._invoked_from_ref = _weak(menu)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return self.action is not None

    @property
    def is_menu(self) -> bool:
        return bool(self._children) or self.on_enter is not None

    @property
    def path(self) -> list[str]:
        """Command names from the root down to this command."""
        names: list[str] = []

        def _collect(cmd: Command, _first: bool, _last: bool) -> bool:
            names.append(cmd.name)
            return False

        walk_up(self, _collect)
        names.reverse()
        return names

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def add_children(self, *nodes: Command) -> Command:
        """Attach *nodes* under this command, preserving their order.

        A node that already has a parent is detached from it first, so
        a command is never reachable from two parents.

        Raises
        ------
        SelfParentingError
            If a node is this command itself.
        CycleError
            If a node is an ancestor of this command.
        """
        for node in nodes:
            if node is self:
                raise SelfParentingError(
                    f"Command {self.name} can't be a child of itself",
                )
            if walk_up(self, lambda cmd, _first, _last: cmd is node):
                raise CycleError(
                    f"Command {node.name} is an ancestor of {self.name}",
                    hint="A command tree must not contain cycles.",
                )

            previous = node.parent
            if previous is not None:
                previous.remove_child(node)
            node._parent_ref = weakref.ref(self)
            self._children.append(node)
        return self

    def remove_child(self, node: Command) -> None:
        """Detach *node* from this command.

        Raises
        ------
        ValueError
            If *node* is not a child of this command.
        """
        for index, child in enumerate(self._children):
            if child is node:
                del self._children[index]
                node._parent_ref = None
                return
        raise ValueError(f"{node.name} is not a child of {self.name}")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, name: str) -> Command | None:
        """Return the first child called *name*, or ``None``."""
        for child in self._children:
            if child.name == name:
                return child
        return None

    def resolve(self, name: str) -> Command | None:
        """Find *name* among the children, then the inherited built-ins."""
        found = self.find(name)
        if found is not None:
            return found
        for builtin in (self.exit_node, self.help_node):
            if builtin is not None and builtin.name == name:
                return builtin
        return None

    def visible_commands(self) -> list[Command]:
        """Children followed by inherited built-ins not among them."""
        visible = list(self._children)
        for builtin in (self.help_node, self.exit_node):
            if builtin is not None and not any(c is builtin for c in visible):
                visible.append(builtin)
        return visible

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def run_on_enter(self) -> bool:
        """Run the ``on_enter`` hook unless it already completed once.

        Returns whether the hook ran during this call.
        """
        if self.on_enter is None or self._entered:
            return False
        self.on_enter(self)
        self._entered = True
        return True

    def execute(self, source: LineSource, output: OutputSink) -> None:
        """Run this menu's interactive loop until its exit command is typed.

        See :func:`cmdtree.core.engine.execute`.
        """
        from cmdtree.core.engine import execute

        execute(self, source, output)


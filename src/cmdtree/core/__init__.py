"""Core layer — the command tree and the engine that drives it.

Rules
-----
* No ``print()`` calls; all output goes through an injected
  :class:`~cmdtree.core.protocols.OutputSink`.
* No direct terminal or stream reads; input comes from a
  :class:`~cmdtree.core.protocols.LineSource`.
* No imports from ``cli`` or ``infra``.
"""

from cmdtree.core.builtins import make_exit, make_help
from cmdtree.core.command import Command
from cmdtree.core.engine import execute
from cmdtree.core.models import Action, OnEnter, Parameter
from cmdtree.core.protocols import LineSource, OutputSink
from cmdtree.core.tokenizer import tokenize
from cmdtree.core.walker import breadcrumb, build_prompt, walk_up

__all__: list[str] = [
    "Action",
    "Command",
    "LineSource",
    "OnEnter",
    "OutputSink",
    "Parameter",
    "breadcrumb",
    "build_prompt",
    "execute",
    "make_exit",
    "make_help",
    "tokenize",
    "walk_up",
]

"""Allow ``python -m cmdtree`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cmdtree`` behaves identically to the ``cmdtree``
console script.
"""

from __future__ import annotations

from cmdtree.cli.app import cli

if __name__ == "__main__":
    cli()

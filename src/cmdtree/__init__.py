"""cmdtree — embeddable interactive command-tree interpreter.

Declare a tree of named commands, then hand the root to a
read-eval-print loop that resolves typed lines against it.
"""

from cmdtree.core.command import Command
from cmdtree.core.models import Parameter
from cmdtree.version import __version__

__all__: list[str] = ["Command", "Parameter", "__version__"]

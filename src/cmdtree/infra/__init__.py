"""Infrastructure layer — concrete line sources.

Adapters that satisfy :class:`~cmdtree.core.protocols.LineSource` on
top of plain streams, Rich and questionary.  Third-party packages are
imported lazily so that merely importing this layer never requires
them.

Rules
-----
* No imports from ``cli``.
* The only output produced here is the prompt a source displays.
"""

from cmdtree.infra.line_sources import (
    QuestionaryLineSource,
    RichLineSource,
    StreamLineSource,
)

__all__: list[str] = [
    "QuestionaryLineSource",
    "RichLineSource",
    "StreamLineSource",
]

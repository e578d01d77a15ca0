"""Quote-aware splitting of one input line into argument tokens.

A token is either the verbatim content of a double-quoted span (quotes
stripped, inner whitespace kept) or a run of non-whitespace characters.
Embedded quotes cannot be escaped; an unmatched quote simply stays part
of the whitespace-delimited token it appears in.
"""

from __future__ import annotations

import re

_TOKEN_PATTERN = re.compile(r'"([^"]*)"|(\S+)')


def tokenize(line: str) -> list[str]:
    """Split *line* into tokens.

    The caller is expected to have stripped surrounding whitespace and
    discarded empty lines.  When no token can be matched at all, the
    whole line is returned as a single token.

    >>> tokenize('set name "John Smith" now')
    ['set', 'name', 'John Smith', 'now']
    """
    tokens: list[str] = []
    for match in _TOKEN_PATTERN.finditer(line):
        quoted, bare = match.groups()
        tokens.append(quoted if quoted is not None else bare)
    if not tokens:
        return [line]
    return tokens

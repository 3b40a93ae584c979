from __future__ import annotations

import re

from .tokens import LineToken


_WS_RE = re.compile(r"\s+")


def split_fields(line: str) -> list[LineToken]:
    """Split ``line`` on whitespace runs, keeping each field's offsets.

    Leading and trailing whitespace produce no empty fields.
    """
    tokens: list[LineToken] = []
    last_end = 0
    for m in _WS_RE.finditer(line):
        start = m.start()
        if start > last_end:
            tokens.append(LineToken(line[last_end:start], last_end, start))
        last_end = m.end()
    if last_end < len(line):
        tokens.append(LineToken(line[last_end:], last_end, len(line)))
    return tokens

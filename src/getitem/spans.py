from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single piece of text.

    Offsets are 0-based; ``format()`` reports the 1-based column for
    user-facing messages.
    """

    source: str
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    def format(self) -> str:
        return f"{self.source!r}:{self.start + 1}"

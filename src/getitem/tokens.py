from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineToken:
    """One whitespace-delimited field of a line.

    ``start``/``end`` are offsets into the original line, so
    ``line[start:end] == text``.
    """

    text: str
    start: int
    end: int

    def __repr__(self) -> str:
        return f"LineToken({self.text!r}, {self.start}:{self.end})"

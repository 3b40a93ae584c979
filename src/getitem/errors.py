from __future__ import annotations

from dataclasses import dataclass

from .spans import Span


@dataclass(slots=True)
class ParseError(Exception):
    """A row or column spec that could not be parsed.

    ``what`` names the spec ("row spec", "column spec") so the message can
    stay about the text itself.
    """

    span: Span
    message: str
    what: str = "slice spec"
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.what} {self.span.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ParseError
from .spans import Span


_INT_RE = re.compile(r"[+-]?[0-9]+")

# Bounds must fit a signed 64-bit integer.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class SliceSpec:
    """A ``start:end`` slice where either bound may be absent or negative."""

    start: int | None = None
    end: int | None = None

    @property
    def has_negative(self) -> bool:
        return (self.start is not None and self.start < 0) or (self.end is not None and self.end < 0)

    def __str__(self) -> str:
        a = "" if self.start is None else str(self.start)
        b = "" if self.end is None else str(self.end)
        return f"{a}:{b}"


def _parse_bound(text: str, offset: int, length: int, *, what: str) -> int:
    chunk = text[offset : offset + length]
    if not _INT_RE.fullmatch(chunk):
        raise ParseError(
            span=Span(source=text, start=offset, end=offset + length),
            message=f"invalid integer {chunk!r}",
            what=what,
            hint="use a base-10 integer such as 3 or -2",
        )
    value = int(chunk)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(
            span=Span(source=text, start=offset, end=offset + length),
            message=f"integer {chunk} out of range",
            what=what,
            hint="indices must fit in a signed 64-bit integer",
        )
    return value


def parse_slice_spec(text: str, *, what: str = "slice spec") -> SliceSpec:
    """Parse ``"a:b"``, ``"a:"``, ``":b"``, ``":"`` or a single index ``"p"``.

    A single index ``p`` means ``[p, p+1)``, except ``-1`` which means
    "last element to the end".
    """
    if text == "":
        raise ParseError(
            span=Span(source=text, start=0, end=0),
            message="nothing to parse",
            what=what,
            hint='use an index like 0 or a slice like "1:3"',
        )

    colon = text.find(":")
    if colon < 0:
        pos = _parse_bound(text, 0, len(text), what=what)
        if pos == -1:
            return SliceSpec(start=-1, end=None)
        return SliceSpec(start=pos, end=pos + 1)

    extra = text.find(":", colon + 1)
    if extra >= 0:
        raise ParseError(
            span=Span(source=text, start=extra, end=extra + 1),
            message="too many ':'",
            what=what,
            hint="slice steps are not supported; use start:end",
        )

    start = None
    if colon > 0:
        start = _parse_bound(text, 0, colon, what=what)
    end = None
    if colon + 1 < len(text):
        end = _parse_bound(text, colon + 1, len(text) - colon - 1, what=what)
    return SliceSpec(start=start, end=end)

from __future__ import annotations

from .lexer import split_fields
from .ranges import normalize_indices
from .slicespec import SliceSpec
from .tokens import LineToken


def slice_fields(tokens: list[LineToken], spec: SliceSpec) -> list[LineToken]:
    """The tokens selected by ``spec``; the field count resolves negative bounds."""
    rng = normalize_indices(spec.start or 0, spec.end, len(tokens))
    if rng.is_empty(len(tokens)):
        return []
    lo, hi = rng.bounds(len(tokens))
    return tokens[lo:hi]


def filtered_line(line: str, spec: SliceSpec) -> str | None:
    """Keep only the fields of ``line`` selected by ``spec``.

    Text before the first kept field becomes spaces so the kept fields stay in
    their original columns. Whitespace between kept fields is copied as is,
    anything after the last kept field is dropped, and a trailing newline
    survives. Returns None when nothing is selected.
    """
    eol = "\n" if line.endswith("\n") else ""
    selected = slice_fields(split_fields(line), spec)
    if not selected:
        return None
    start = selected[0].start
    end = selected[-1].end
    return " " * start + line[start:end] + eol

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, Union

from .fields import filtered_line
from .rows import islice_rows
from .slicespec import SliceSpec, parse_slice_spec


log = logging.getLogger(__name__)

SpecLike = Union[str, SliceSpec]


def _as_spec(spec: SpecLike, what: str) -> SliceSpec:
    if isinstance(spec, SliceSpec):
        return spec
    return parse_slice_spec(spec, what=what)


def pick(
    lines: Iterable[str],
    row_spec: SpecLike,
    col_spec: SpecLike,
    line_count: int | None = None,
) -> Iterator[str]:
    """Lazily select rows of ``lines`` and fields within each row.

    Both specs are parsed before returning, so a bad spec raises
    ``ParseError`` before any line is pulled from ``lines``.
    """
    rows = _as_spec(row_spec, "row spec")
    cols = _as_spec(col_spec, "column spec")
    return _pick(lines, rows, cols, line_count)


def _pick(lines: Iterable[str], rows: SliceSpec, cols: SliceSpec, line_count: int | None) -> Iterator[str]:
    for line in islice_rows(lines, rows, line_count):
        out = filtered_line(line, cols)
        if out is not None:
            yield out


def read_lines(path: str | Path) -> Iterator[str]:
    """Lines of a UTF-8 text file, newlines kept.

    The file is opened immediately so a missing file fails here rather than
    on the first pull.
    """
    f = Path(path).expanduser().open(encoding="utf-8")
    return _drain(f)


def _drain(f: IO[str]) -> Iterator[str]:
    with f:
        yield from f


def count_lines(path: str | Path) -> int | None:
    """Number of lines in ``path``, or None if it cannot be read."""
    try:
        with Path(path).expanduser().open(encoding="utf-8") as f:
            return sum(1 for _ in f)
    except (OSError, UnicodeDecodeError) as e:
        log.debug("line count unavailable for %s: %s", path, e)
        return None


def pick_file(path: str | Path, row_spec: SpecLike, col_spec: SpecLike) -> Iterator[str]:
    """``pick`` over a file, counting its lines first so it never buffers."""
    rows = _as_spec(row_spec, "row spec")
    cols = _as_spec(col_spec, "column spec")
    n = count_lines(path)
    log.debug("%s: %s lines", path, "unknown" if n is None else n)
    return _pick(read_lines(path), rows, cols, n)


def pick_stream(stream: IO[str], row_spec: SpecLike, col_spec: SpecLike) -> Iterator[str]:
    """``pick`` over a text stream of unknown length, such as stdin."""
    return pick(stream, row_spec, col_spec, None)

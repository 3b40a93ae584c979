from __future__ import annotations

from .api import count_lines, pick, pick_file, pick_stream, read_lines
from .errors import ParseError
from .fields import filtered_line, slice_fields
from .lexer import split_fields
from .ranges import NormalizedRange, normalize_indices
from .rows import BufferedSource, DirectSource, RowSlice, islice_rows
from .slicespec import SliceSpec, parse_slice_spec
from .tokens import LineToken

__all__ = [
    "BufferedSource",
    "DirectSource",
    "LineToken",
    "NormalizedRange",
    "ParseError",
    "RowSlice",
    "SliceSpec",
    "count_lines",
    "filtered_line",
    "islice_rows",
    "normalize_indices",
    "parse_slice_spec",
    "pick",
    "pick_file",
    "pick_stream",
    "read_lines",
    "slice_fields",
    "split_fields",
]

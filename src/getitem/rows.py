from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, Protocol, TypeVar

from .ranges import NormalizedRange, normalize_indices
from .slicespec import SliceSpec


log = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PositionedSource(Protocol[T_co]):
    """Single-pass iterator of ``(position, item)`` pairs."""

    mode: str

    def __iter__(self) -> Iterator[tuple[int, T_co]]: ...

    def __next__(self) -> tuple[int, T_co]: ...


class DirectSource(Generic[T]):
    """Forward cursor over the input; nothing is retained."""

    mode = "direct"

    def __init__(self, items: Iterable[T]) -> None:
        self._it = enumerate(items)

    def __iter__(self) -> DirectSource[T]:
        return self

    def __next__(self) -> tuple[int, T]:
        return next(self._it)


class BufferedSource(Generic[T]):
    """The whole input drained up front, then popped in order."""

    mode = "buffered"

    def __init__(self, items: Iterable[T]) -> None:
        self._queue: deque[tuple[int, T]] = deque(enumerate(items))
        self.length = len(self._queue)

    def __iter__(self) -> BufferedSource[T]:
        return self

    def __next__(self) -> tuple[int, T]:
        if not self._queue:
            raise StopIteration
        return self._queue.popleft()


class RowSlice(Generic[T]):
    """Items of ``items`` whose 0-based position falls inside ``spec``.

    Negative bounds need the total length. When ``length`` is not supplied
    the input is buffered once to learn it; otherwise it is streamed.
    """

    def __init__(self, items: Iterable[T], spec: SliceSpec, length: int | None = None) -> None:
        source: PositionedSource[T]
        if spec.has_negative and length is None:
            buffered = BufferedSource(items)
            length = buffered.length
            source = buffered
        else:
            source = DirectSource(items)

        self.spec = spec
        self.length = length
        self.range: NormalizedRange = normalize_indices(spec.start or 0, spec.end, length)
        self.mode = source.mode
        self._source: PositionedSource[T] | None = source
        log.debug(
            "row slice %s: mode=%s length=%s range=%s",
            spec,
            self.mode,
            length,
            self.range,
        )
        if self.range.is_empty(length):
            self._source = None

    def __iter__(self) -> RowSlice[T]:
        return self

    def __next__(self) -> T:
        if self._source is None:
            raise StopIteration
        rng = self.range
        for pos, item in self._source:
            if rng.end is not None and pos >= rng.end:
                break
            if pos >= rng.start:
                return item
        # Exhausted or past the end bound; release whatever is left.
        self._source = None
        raise StopIteration


def islice_rows(items: Iterable[T], spec: SliceSpec, length: int | None = None) -> RowSlice[T]:
    return RowSlice(items, spec, length)

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NormalizedRange:
    """A 0-based half-open range; ``end=None`` means unbounded.

    ``start`` may still be negative when a negative bound was larger than the
    sequence it was resolved against. Such a start lies below the first
    element and behaves like 0.
    """

    start: int
    end: int | None = None

    def contains(self, pos: int) -> bool:
        return pos >= self.start and (self.end is None or pos < self.end)

    def is_empty(self, length: int | None = None) -> bool:
        lo = max(self.start, 0)
        if self.end is not None and self.end <= lo:
            return True
        return length is not None and lo >= length

    def bounds(self, length: int) -> tuple[int, int]:
        """Clamp to ``[0, length]``. The result may have ``lo >= hi``."""
        lo = max(self.start, 0)
        hi = length if self.end is None else min(self.end, length)
        return lo, hi


def normalize_indices(start: int, end: int | None, length: int | None) -> NormalizedRange:
    """Resolve negative bounds against ``length``.

    With ``length=None`` the bounds pass through untouched; callers must only
    do that when neither bound is negative.
    """
    if length is None:
        return NormalizedRange(start=start, end=end)
    if start < 0:
        start = length + start
    if end is not None and end < 0:
        end = length + end
    return NormalizedRange(start=start, end=end)

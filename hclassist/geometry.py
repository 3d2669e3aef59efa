"""Source positions and ranges, with containment and union helpers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pos:
    """A position in a source file: line and column (1-based) and byte offset."""

    line: int = 0
    column: int = 0
    byte: int = 0


@dataclass(frozen=True)
class Range:
    """A span of source text between two positions."""

    filename: str = ""
    start: Pos = field(default_factory=Pos)
    end: Pos = field(default_factory=Pos)

    def is_empty(self) -> bool:
        """Return True when the range covers no bytes."""
        return self.start.byte == self.end.byte


def contains_pos(r: Range, pos: Pos) -> bool:
    """Return True when ``pos`` lies within ``r``, both ends included."""
    after_start = pos.line > r.start.line or (
        pos.line == r.start.line and pos.column >= r.start.column
    )
    before_end = pos.line < r.end.line or (
        pos.line == r.end.line and pos.column <= r.end.column
    )
    return after_start and before_end


def range_over(a: Range, b: Range) -> Range:
    """Return the smallest range that covers both ``a`` and ``b``.

    An empty range is ignored in favour of the other one.
    """
    if a.is_empty():
        return b
    if b.is_empty():
        return a

    if a.start.line < b.start.line or (
        a.start.line == b.start.line and a.start.column < b.start.column
    ):
        start = a.start
    else:
        start = b.start

    if a.end.line > b.end.line or (
        a.end.line == b.end.line and a.end.column > b.end.column
    ):
        end = a.end
    else:
        end = b.end

    return Range(filename=a.filename, start=start, end=end)
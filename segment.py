"""Axis-aligned segments on the integer grid."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from core import Pos
from errors import DegenerateSegment, InvalidOrientation, InvalidSegment


class Orientation(Enum):
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


@dataclass(frozen=True)
class Segment:
    """A straight run of grid points, inclusive at both ends.

    `start` is always the lower endpoint along the segment's axis, so a
    segment drawn right-to-left equals the same segment drawn left-to-right.
    Build these with `Segment.between` rather than calling the constructor.
    """

    orientation: Orientation
    start: Pos
    length: int

    def __post_init__(self) -> None:
        if self.length == 0:
            raise DegenerateSegment()
        if self.length < 0:
            raise InvalidSegment(f"segment length must be positive, got {self.length}")

    @classmethod
    def between(cls, start: Pos, end: Pos) -> Segment:
        if start == end:
            raise DegenerateSegment()

        if start.x == end.x:
            return cls(
                orientation=Orientation.VERTICAL,
                start=Pos(start.x, min(start.y, end.y)),
                length=abs(end.y - start.y),
            )
        elif start.y == end.y:
            return cls(
                orientation=Orientation.HORIZONTAL,
                start=Pos(min(start.x, end.x), start.y),
                length=abs(end.x - start.x),
            )
        else:
            raise InvalidOrientation()

    @property
    def end(self) -> Pos:
        return self._at(self.length)

    def contains(self, pos: Pos) -> bool:
        """Check if position lies on the segment, endpoints included."""
        if self.orientation == Orientation.HORIZONTAL:
            if pos.y != self.start.y:
                return False
            d = pos.x - self.start.x
        else:
            if pos.x != self.start.x:
                return False
            d = pos.y - self.start.y
        return 0 <= d <= self.length

    def points(self) -> Iterator[Pos]:
        """Yield every covered grid point, from `start` to `end`."""
        for d in range(self.length + 1):
            yield self._at(d)

    def __iter__(self) -> Iterator[Pos]:
        return self.points()

    def _at(self, d: int) -> Pos:
        if self.orientation == Orientation.HORIZONTAL:
            return self.start.offset(d, 0)
        return self.start.offset(0, d)

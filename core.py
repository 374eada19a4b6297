"""Core data structures and utilities."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Pos:
    x: int
    y: int

    def manhattan_distance(self, other: Pos | None = None) -> int:
        """Distance to `other`, or to the origin when no other position is given."""
        if other is None:
            return abs(self.x) + abs(self.y)
        return abs(self.x - other.x) + abs(self.y - other.y)

    def offset(self, dx: int, dy: int) -> Pos:
        return Pos(self.x + dx, self.y + dy)


ORIGIN = Pos(0, 0)

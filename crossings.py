"""Finding where two wires cross and which crossing is nearest the origin."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable

from core import ORIGIN, Pos
from path import Path, lies_on_path

logger = logging.getLogger(__name__)


def find_intersections(path1: Path, path2: Path) -> set[Pos]:
    """Every grid point lying on some segment of both paths.

    The shared starting point is included; callers filter it out.
    """
    crossings: set[Pos] = set()
    for segment in path1:
        for pos in segment.points():
            if lies_on_path(pos, path2):
                crossings.add(pos)
    logger.debug("found %d raw intersections", len(crossings))
    return crossings


def closest_crossing(points: Iterable[Pos]) -> Pos | None:
    """The point nearest the origin, ignoring the origin itself.

    Ties may resolve to any of the tied points.
    """
    candidates = [p for p in points if p != ORIGIN]
    if not candidates:
        return None
    return min(candidates, key=lambda p: p.manhattan_distance())


@dataclass(frozen=True)
class CrossingReport:
    crossings: frozenset[Pos]
    closest: Pos | None

    @property
    def distance(self) -> int | None:
        return self.closest.manhattan_distance() if self.closest is not None else None

    @property
    def has_crossings(self) -> bool:
        return self.closest is not None


def analyze(path1: Path, path2: Path) -> CrossingReport:
    crossings = find_intersections(path1, path2)
    closest = closest_crossing(crossings)
    if closest is None and crossings:
        logger.debug("paths only meet at the origin")
    return CrossingReport(crossings=frozenset(crossings), closest=closest)

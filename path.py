"""Parsing wire descriptions and turning them into chains of segments."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from core import ORIGIN, Pos
from errors import FileReadError, InvalidMoveToken, WrongLineCountError
from segment import Segment

logger = logging.getLogger(__name__)


Path = list[Segment]


class Direction(Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def step(self) -> tuple[int, int]:
        return _STEPS[self]


_STEPS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Move:
    direction: Direction
    length: int

    @property
    def description(self) -> str:
        return f"{self.direction.value}{self.length}"

    def apply(self, pos: Pos) -> Pos:
        dx, dy = self.direction.step
        return pos.offset(dx * self.length, dy * self.length)


def parse_move(token: str) -> Move:
    """Parse one token such as `R75` into a Move."""
    if not token.isascii():
        raise InvalidMoveToken(token, "path data must be ascii encoded")
    if not token:
        raise InvalidMoveToken(token, "empty move found")

    try:
        direction = Direction(token[0])
    except ValueError:
        raise InvalidMoveToken(token, "invalid direction") from None

    digits = token[1:]
    if not digits.isdigit():
        raise InvalidMoveToken(token, "invalid length")
    length = int(digits)
    if length == 0:
        raise InvalidMoveToken(token, "length must be positive")

    return Move(direction=direction, length=length)


def parse_path(line: str) -> list[Move]:
    return [parse_move(token) for token in line.split(",")]


def parse_input(text: str) -> tuple[list[Move], list[Move]]:
    """Parse the two comma-separated paths of an input file.

    A single trailing newline is allowed; any other blank line counts as a path.
    """
    lines = text.splitlines()
    if len(lines) != 2:
        raise WrongLineCountError(len(lines))
    return parse_path(lines[0]), parse_path(lines[1])


def read_input(filename: str) -> tuple[list[Move], list[Move]]:
    try:
        with open(filename, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(filename, str(e)) from e
    return parse_input(text)


def build_path(moves: Iterable[Move]) -> Path:
    """Lay the moves end to end starting from the origin.

    Any segment that can't be built aborts the whole path.
    """
    path: Path = []
    pos = ORIGIN
    for move in moves:
        end = move.apply(pos)
        path.append(Segment.between(pos, end))
        pos = end
    logger.debug("built path of %d segments ending at (%d, %d)", len(path), pos.x, pos.y)
    return path


def lies_on_path(pos: Pos, path: Path) -> bool:
    return any(segment.contains(pos) for segment in path)

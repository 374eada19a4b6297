"""Errors raised while reading wire paths and building their segments."""

from __future__ import annotations


class WireError(ValueError):
    """Base class for every error this package raises on bad input."""


class ArgumentCountError(WireError):
    """The command line did not name exactly one input file."""

    def __init__(self, count: int):
        super().__init__(f"expecting 1 argument (input file path), got {count}")
        self.count = count


class FileReadError(WireError):
    def __init__(self, filename: str, reason: str):
        super().__init__(f"can't read {filename}: {reason}")
        self.filename = filename


class WrongLineCountError(WireError):
    def __init__(self, count: int):
        super().__init__(f"input must contain exactly 2 paths, found {count}")
        self.count = count


class InvalidMoveToken(WireError):
    """A single comma-separated move could not be parsed."""

    def __init__(self, token: str, reason: str):
        super().__init__(f"{reason}: {token!r}")
        self.token = token
        self.reason = reason


class InvalidSegment(WireError):
    """Two positions do not describe a usable segment."""


class DegenerateSegment(InvalidSegment):
    def __init__(self) -> None:
        super().__init__("identical points can not make a segment")


class InvalidOrientation(InvalidSegment):
    def __init__(self) -> None:
        super().__init__("segment must be horizontal or vertical")

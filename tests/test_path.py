"""Tests for move parsing and path building."""

from pathlib import Path as FilePath

import pytest
from core import ORIGIN, Pos
from errors import (
    DegenerateSegment,
    FileReadError,
    InvalidMoveToken,
    WrongLineCountError,
)
from path import (
    Direction,
    Move,
    build_path,
    lies_on_path,
    parse_input,
    parse_move,
    parse_path,
    read_input,
)
from segment import Orientation, Segment
from test_utils import path_from


class TestParseMove:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("U7", Move(Direction.UP, 7)),
            ("D30", Move(Direction.DOWN, 30)),
            ("L12", Move(Direction.LEFT, 12)),
            ("R1000", Move(Direction.RIGHT, 1000)),
        ],
    )
    def test_parses_each_direction(self, token: str, expected: Move) -> None:
        assert parse_move(token) == expected

    def test_rejects_leading_whitespace(self) -> None:
        with pytest.raises(InvalidMoveToken, match="invalid direction"):
            parse_move(" R8")

    def test_rejects_trailing_whitespace(self) -> None:
        with pytest.raises(InvalidMoveToken, match="invalid length"):
            parse_move("R8 ")

    def test_rejects_empty_token(self) -> None:
        with pytest.raises(InvalidMoveToken, match="empty"):
            parse_move("")

    def test_rejects_non_ascii(self) -> None:
        with pytest.raises(InvalidMoveToken, match="ascii"):
            parse_move("R８")

    def test_rejects_unknown_direction(self) -> None:
        with pytest.raises(InvalidMoveToken, match="invalid direction") as exc_info:
            parse_move("X5")
        assert exc_info.value.token == "X5"

    @pytest.mark.parametrize("token", ["R", "Rx", "R-3", "R+3", "R1.5"])
    def test_rejects_unparseable_length(self, token: str) -> None:
        with pytest.raises(InvalidMoveToken, match="invalid length"):
            parse_move(token)

    def test_rejects_zero_length(self) -> None:
        with pytest.raises(InvalidMoveToken, match="positive"):
            parse_move("U0")

    def test_description_round_trips_token(self) -> None:
        assert parse_move("L72").description == "L72"


class TestParseInput:
    def test_parses_two_paths(self) -> None:
        moves1, moves2 = parse_input("R8,U5\nU7,R6,D4\n")
        assert moves1 == [Move(Direction.RIGHT, 8), Move(Direction.UP, 5)]
        assert len(moves2) == 3

    def test_accepts_single_trailing_newline(self) -> None:
        moves1, moves2 = parse_input("R1\r\nU1\r\n")
        assert moves1 == [Move(Direction.RIGHT, 1)]
        assert moves2 == [Move(Direction.UP, 1)]

    @pytest.mark.parametrize("text", ["R8,U5\n\n\nU7\n", "R8,U5\n \nU7\n", "R1\nU1\n\n"])
    def test_rejects_blank_line_between_or_after_paths(self, text: str) -> None:
        with pytest.raises(WrongLineCountError):
            parse_input(text)

    def test_rejects_space_after_comma(self) -> None:
        with pytest.raises(InvalidMoveToken):
            parse_path("R8, U5")

    @pytest.mark.parametrize("text", ["", "R1\n", "R1\nU1\nL1\n"])
    def test_rejects_wrong_line_count(self, text: str) -> None:
        with pytest.raises(WrongLineCountError):
            parse_input(text)

    def test_rejects_empty_token_between_commas(self) -> None:
        with pytest.raises(InvalidMoveToken):
            parse_path("R1,,U1")

    def test_reads_from_file(self, tmp_path: FilePath) -> None:
        input_file = tmp_path / "input.txt"
        input_file.write_text("R8,U5,L5,D3\nU7,R6,D4,L4\n")
        moves1, moves2 = read_input(str(input_file))
        assert len(moves1) == 4
        assert len(moves2) == 4

    def test_missing_file_raises_file_read_error(self, tmp_path: FilePath) -> None:
        with pytest.raises(FileReadError):
            read_input(str(tmp_path / "missing.txt"))


class TestBuildPath:
    def test_empty_moves_build_empty_path(self) -> None:
        assert build_path([]) == []

    def test_builds_one_segment_per_move(self) -> None:
        moves = parse_path("R8,U5,L5,D3")
        assert len(build_path(moves)) == 4

    def test_segments_follow_running_position(self) -> None:
        path = path_from("R8,U5,L5,D3")
        assert path == [
            Segment(Orientation.HORIZONTAL, Pos(0, 0), 8),
            Segment(Orientation.VERTICAL, Pos(8, 0), 5),
            Segment(Orientation.HORIZONTAL, Pos(3, 5), 5),
            Segment(Orientation.VERTICAL, Pos(3, 2), 3),
        ]

    def test_each_segment_touches_the_position_before_its_move(self) -> None:
        moves = parse_path("U62,R66,U55,R34,D71,R55,D58,R83")
        pos = ORIGIN
        for move, segment in zip(moves, build_path(moves)):
            assert segment.contains(pos)
            if move.direction in (Direction.UP, Direction.RIGHT):
                assert segment.start == pos
            else:
                assert segment.end == pos
            pos = move.apply(pos)

    def test_zero_length_move_aborts_whole_build(self) -> None:
        moves = [Move(Direction.RIGHT, 3), Move(Direction.UP, 0), Move(Direction.LEFT, 1)]
        with pytest.raises(DegenerateSegment):
            build_path(moves)


class TestLiesOnPath:
    def test_detects_point_on_any_segment(self) -> None:
        path = path_from("R8,U5")
        assert lies_on_path(Pos(8, 3), path)
        assert lies_on_path(ORIGIN, path)

    def test_rejects_point_off_path(self) -> None:
        path = path_from("R8,U5")
        assert not lies_on_path(Pos(3, 3), path)

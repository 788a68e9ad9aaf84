"""Tests for move application: captures, suicide and rejections."""

import pytest

from kifudojo.core.enums import Color
from kifudojo.core.errors import (
    IllegalMoveError,
    OccupiedCellError,
    OutOfBoundsError,
    SuicideMoveError,
)
from kifudojo.core.move import Move
from kifudojo.core.notation import position_from_diagram
from kifudojo.core.position import Position
from kifudojo.core.rules import apply_move, captured_by, is_legal, place_stone
from kifudojo.core.types import Point


class TestApplyMoveBasics:
    def test_places_stone(self) -> None:
        pos, move = apply_move(Position(9), Point(2, 2), Color.BLACK)
        assert pos[Point(2, 2)] == Color.BLACK
        assert move == Move(Point(2, 2), Color.BLACK, 0)

    def test_input_position_untouched(self) -> None:
        original = Position(9)
        apply_move(original, Point(2, 2), Color.BLACK)
        assert len(original) == 0

    def test_self_atari_is_legal(self) -> None:
        pos = position_from_diagram(
            """
            . O . . .
            O . . . .
            . . . . .
            . . . . .
            . . . . .
            """
        )
        # Black at (0,0) would be suicide; (1,1) still has two liberties.
        new_pos, _ = apply_move(pos, Point(1, 1), Color.BLACK)
        assert new_pos[Point(1, 1)] == Color.BLACK


class TestApplyMoveRejections:
    def test_occupied_cell(self) -> None:
        pos = Position(9, {Point(3, 3): Color.WHITE})
        before = pos.copy()
        with pytest.raises(OccupiedCellError) as exc_info:
            apply_move(pos, Point(3, 3), Color.BLACK)
        assert exc_info.value.point == Point(3, 3)
        assert exc_info.value.color == Color.BLACK
        assert pos == before

    def test_occupied_by_own_color(self) -> None:
        pos = Position(9, {Point(3, 3): Color.BLACK})
        with pytest.raises(OccupiedCellError):
            apply_move(pos, Point(3, 3), Color.BLACK)

    @pytest.mark.parametrize(
        "point", [Point(-1, 0), Point(0, -1), Point(9, 0), Point(0, 9)]
    )
    def test_out_of_bounds(self, point: Point) -> None:
        pos = Position(9)
        with pytest.raises(OutOfBoundsError):
            apply_move(pos, point, Color.WHITE)
        assert len(pos) == 0

    def test_single_stone_suicide(self) -> None:
        pos = position_from_diagram(
            """
            . O . . .
            O . . . .
            . . . . .
            . . . . .
            . . . . .
            """
        )
        before = pos.copy()
        with pytest.raises(SuicideMoveError):
            apply_move(pos, Point(0, 0), Color.BLACK)
        assert pos == before

    def test_center_suicide(self) -> None:
        pos = position_from_diagram(
            """
            . . . . .
            . . O . .
            . O . O .
            . . O . .
            . . . . .
            """
        )
        before = pos.copy()
        with pytest.raises(SuicideMoveError):
            apply_move(pos, Point(2, 2), Color.BLACK)
        assert pos == before

    def test_group_suicide(self) -> None:
        pos = position_from_diagram(
            """
            . X O . .
            X O . . .
            O . . . .
            . . . . .
            . . . . .
            """
        )
        before = pos.copy()
        with pytest.raises(SuicideMoveError):
            apply_move(pos, Point(0, 0), Color.BLACK)
        assert pos == before

    def test_errors_share_base_class(self) -> None:
        for cls in (OccupiedCellError, SuicideMoveError, OutOfBoundsError):
            assert issubclass(cls, IllegalMoveError)
            assert issubclass(cls, ValueError)


class TestCaptures:
    def test_corner_capture(self) -> None:
        pos = Position(9, {Point(0, 0): Color.WHITE, Point(1, 0): Color.BLACK})
        new_pos, move = apply_move(pos, Point(0, 1), Color.BLACK)
        assert move.captured == 1
        assert new_pos.is_empty(Point(0, 0))
        assert new_pos[Point(1, 0)] == Color.BLACK
        assert new_pos[Point(0, 1)] == Color.BLACK

    def test_center_capture(self) -> None:
        pos = position_from_diagram(
            """
            . . . . .
            . . X . .
            . X O X .
            . . . . .
            . . . . .
            """
        )
        new_pos, move = apply_move(pos, Point(2, 3), Color.BLACK)
        assert move.captured == 1
        assert new_pos.is_empty(Point(2, 2))

    def test_multi_stone_group_captured(self) -> None:
        pos = position_from_diagram(
            """
            . O O X .
            . X X . .
            . . . . .
            . . . . .
            . . . . .
            """
        )
        new_pos, move = apply_move(pos, Point(0, 0), Color.BLACK)
        assert move.captured == 2
        assert new_pos.is_empty(Point(1, 0))
        assert new_pos.is_empty(Point(2, 0))

    def test_capture_beats_suicide(self) -> None:
        pos = position_from_diagram(
            """
            . O X . .
            O X . . .
            X . . . .
            . . . . .
            . . . . .
            """
        )
        # (0,0) has no empty neighbours, but both white stones die first.
        new_pos, move = apply_move(pos, Point(0, 0), Color.BLACK)
        assert move.captured == 2
        assert new_pos.is_empty(Point(1, 0))
        assert new_pos.is_empty(Point(0, 1))
        assert new_pos[Point(0, 0)] == Color.BLACK

    def test_only_adjacent_groups_are_captured(self) -> None:
        pos = position_from_diagram(
            """
            O X . . .
            X . . . .
            . . . . .
            . . . X O
            . . . O .
            """
        )
        # The dead white corner stone does not touch the played stone.
        new_pos, move = apply_move(pos, Point(2, 2), Color.BLACK)
        assert move.captured == 0
        assert new_pos[Point(0, 0)] == Color.WHITE

    def test_ko_shape_can_be_retaken(self) -> None:
        pos = position_from_diagram(
            """
            . X O . .
            X O . O .
            . X O . .
            . . . . .
            . . . . .
            """
        )
        after_black, black_move = apply_move(pos, Point(2, 1), Color.BLACK)
        assert black_move.captured == 1
        assert after_black.is_empty(Point(1, 1))

        after_white, white_move = apply_move(after_black, Point(1, 1), Color.WHITE)
        assert white_move.captured == 1
        # No ko rule: the original position comes straight back.
        assert after_white == pos


class TestHelpers:
    def test_place_stone_in_place(self) -> None:
        pos = Position(9, {Point(0, 0): Color.WHITE, Point(1, 0): Color.BLACK})
        captured = place_stone(pos, Point(0, 1), Color.BLACK)
        assert captured == 1
        assert pos.is_empty(Point(0, 0))

    def test_place_stone_off_board(self) -> None:
        with pytest.raises(OutOfBoundsError):
            place_stone(Position(9), Point(9, 9), Color.BLACK)

    def test_captured_by_preview(self) -> None:
        pos = position_from_diagram(
            """
            . O X . .
            O X . . .
            X . . . .
            . . . . .
            . . . . .
            """
        )
        before = pos.copy()
        assert captured_by(pos, Point(0, 0), Color.BLACK) == {Point(1, 0), Point(0, 1)}
        assert pos == before

    def test_captured_by_nothing(self) -> None:
        assert captured_by(Position(9), Point(4, 4), Color.WHITE) == frozenset()

    def test_is_legal(self) -> None:
        pos = position_from_diagram(
            """
            . O .
            O . .
            . . .
            """
        )
        assert not is_legal(pos, Point(0, 0), Color.BLACK)
        assert is_legal(pos, Point(0, 0), Color.WHITE)
        assert not is_legal(pos, Point(1, 0), Color.BLACK)
        assert is_legal(pos, Point(2, 2), Color.BLACK)

"""Tests for colors and board-size constants."""

import pytest

from kifudojo.core.enums import STAR_POINTS, SUPPORTED_SIZES, Color
from kifudojo.core.types import Point, is_on_board


class TestColor:
    def test_opposite(self) -> None:
        assert Color.BLACK.opposite == Color.WHITE
        assert Color.WHITE.opposite == Color.BLACK

    def test_str(self) -> None:
        assert str(Color.WHITE) == "white"

    @pytest.mark.parametrize("text", ["black", "BLACK", " Black "])
    def test_parse(self, text: str) -> None:
        assert Color.parse(text) == Color.BLACK

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid stone color"):
            Color.parse("red")


class TestStarPoints:
    def test_every_supported_size_has_star_points(self) -> None:
        assert set(STAR_POINTS) == set(SUPPORTED_SIZES)

    @pytest.mark.parametrize("size", SUPPORTED_SIZES)
    def test_points_on_board_and_distinct(self, size: int) -> None:
        points = [Point(c, r) for c, r in STAR_POINTS[size]]
        assert len(set(points)) == len(points)
        assert all(is_on_board(p, size) for p in points)

    @pytest.mark.parametrize("size", SUPPORTED_SIZES)
    def test_includes_tengen(self, size: int) -> None:
        assert (size // 2, size // 2) in STAR_POINTS[size]

    def test_counts(self) -> None:
        assert {size: len(pts) for size, pts in STAR_POINTS.items()} == {
            9: 5,
            13: 5,
            19: 9,
        }

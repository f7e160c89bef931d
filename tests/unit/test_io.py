"""Unit tests for the point notation layer."""

import json

import pytest

from shapekit.domain import Point
from shapekit.exceptions import InputError, PointParseError, ShapekitError
from shapekit.io import format_point, parse_point, parse_points, points_to_json


class TestParsePoint:
    """Tests for parse_point."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("3,4", Point(3.0, 4.0)),
            ("-1.5,2", Point(-1.5, 2.0)),
            (" 1 , 2 ", Point(1.0, 2.0)),
            ("(0.5, -0.25)", Point(0.5, -0.25)),
            ("1e3,0", Point(1000.0, 0.0)),
        ],
    )
    def test_valid_tokens(self, token, expected):
        assert parse_point(token) == expected

    @pytest.mark.parametrize("token", ["", "3", "1,2,3", "a,b", "1;2", "(1,2"])
    def test_invalid_tokens(self, token):
        with pytest.raises(PointParseError):
            parse_point(token)

    @pytest.mark.parametrize("token", ["nan,0", "0,inf", "-inf,1"])
    def test_non_finite_rejected(self, token):
        with pytest.raises(PointParseError, match="finite"):
            parse_point(token)

    def test_error_carries_token(self):
        with pytest.raises(PointParseError) as exc_info:
            parse_point("x,1")
        assert exc_info.value.token == "x,1"
        assert "numbers" in exc_info.value.reason
        assert str(exc_info.value) == "Invalid point 'x,1': coordinates must be numbers"

    def test_error_hierarchy(self):
        with pytest.raises(InputError):
            parse_point("oops")
        with pytest.raises(ShapekitError):
            parse_point("oops")


class TestParsePoints:
    """Tests for parse_points."""

    def test_preserves_order(self):
        assert parse_points(["1,1", "0,0", "1,1"]) == [
            Point(1.0, 1.0),
            Point(0.0, 0.0),
            Point(1.0, 1.0),
        ]

    def test_empty(self):
        assert parse_points([]) == []

    def test_stops_at_first_bad_token(self):
        with pytest.raises(PointParseError) as exc_info:
            parse_points(["1,1", "bad", "also bad"])
        assert exc_info.value.token == "bad"


class TestFormatting:
    """Tests for point rendering."""

    def test_format_point(self):
        assert format_point(Point(1.0, -2.5), precision=2) == "1.00,-2.50"

    def test_format_point_round_trips_through_parser(self):
        p = Point(3.25, 4.5)
        assert parse_point(format_point(p)) == p

    def test_points_to_json(self):
        data = json.loads(points_to_json([Point(1 / 3, 2.0)], precision=3))
        assert data == [{"x": 0.333, "y": 2.0}]

    def test_points_to_json_empty(self):
        assert json.loads(points_to_json([])) == []

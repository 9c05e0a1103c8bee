"""
Geometry Primitive Tests
========================

Run with:
    pytest tests/test_geometry_primitives.py -v
"""
import pytest

from pathbeam.model.geometry_primitives import (
    Arc,
    Circle,
    Line,
    Model,
    PathType,
    Point,
    Vector,
    path_from_dict,
)


class TestPointVector:
    """Point/Vector arithmetic."""

    def test_point_plus_vector(self):
        assert Point(1.0, 2.0) + Vector(3.0, 4.0) == Point(4.0, 6.0)

    def test_point_minus_point_is_vector(self):
        result = Point(5.0, 5.0) - Point(1.0, 2.0)
        assert isinstance(result, Vector)
        assert result == Vector(4.0, 3.0)

    def test_point_minus_vector_is_point(self):
        assert Point(5.0, 5.0) - Vector(1.0, 2.0) == Point(4.0, 3.0)

    def test_point_plus_point_rejected(self):
        with pytest.raises(TypeError):
            Point(1.0, 1.0) + Point(1.0, 1.0)

    def test_scale_about_origin(self):
        assert Point(4.0, -2.0).scale(0.5) == Point(2.0, -1.0)

    def test_vector_magnitude_and_cross(self):
        assert Vector(3.0, 4.0).magnitude == pytest.approx(5.0)
        assert Vector(1.0, 0.0).cross(Vector(0.0, 1.0)) == pytest.approx(1.0)


class TestPaths:
    """Clone / move / scale semantics."""

    def test_clone_is_independent(self, horizontal_line):
        copy = horizontal_line.clone().move_relative(Vector(0.0, 5.0))
        assert copy is not horizontal_line
        assert horizontal_line.start == Point(0.0, 0.0)
        assert copy.start == Point(0.0, 5.0)

    def test_line_scale(self, horizontal_line):
        scaled = horizontal_line.clone().scale(0.5)
        assert scaled.end == Point(5.0, 0.0)

    def test_arc_scale_keeps_angles(self, upper_half_arc):
        scaled = upper_half_arc.clone().move_relative(Vector(2.0, 0.0)).scale(2.0)
        assert scaled.center == Point(4.0, 0.0)
        assert scaled.radius == pytest.approx(20.0)
        assert (scaled.start_angle, scaled.end_angle) == (0.0, 180.0)

    def test_arc_end_points(self, upper_half_arc):
        start, end = upper_half_arc.end_points()
        assert (start.x, start.y) == pytest.approx((10.0, 0.0))
        assert (end.x, end.y) == pytest.approx((-10.0, 0.0), abs=1e-9)

    def test_type_tags(self, horizontal_line, upper_half_arc, unit_circle_10):
        assert horizontal_line.type == PathType.LINE
        assert upper_half_arc.type == PathType.ARC
        assert unit_circle_10.type == PathType.CIRCLE


class TestSerialisation:
    """maker.js style dictionaries."""

    def test_arc_to_dict(self, upper_half_arc):
        assert upper_half_arc.to_dict() == {
            "type": "arc",
            "origin": [0.0, 0.0],
            "radius": 10.0,
            "startAngle": 0.0,
            "endAngle": 180.0,
        }

    def test_model_from_dict(self):
        model = Model.from_dict({
            "paths": {"l": {"type": "line", "origin": [0, 0], "end": [1, 1]}},
            "models": {
                "child": {
                    "origin": [5, 0],
                    "paths": {"c": {"type": "circle", "origin": [0, 0], "radius": 2, "layer": "red"}},
                }
            },
        })
        assert isinstance(model.paths["l"], Line)
        child = model.models["child"]
        assert child.origin == Point(5.0, 0.0)
        assert isinstance(child.paths["c"], Circle)
        assert child.paths["c"].layer == "red"

    def test_model_to_dict_omits_empty_parts(self, horizontal_line):
        data = Model(paths={"l": horizontal_line}, layer="0").to_dict()
        assert set(data) == {"paths", "layer"}

    def test_unknown_path_type(self):
        with pytest.raises(ValueError, match="Unknown path type"):
            path_from_dict({"type": "bezier"})

    def test_arc_from_dict(self):
        arc = path_from_dict({"type": "arc", "origin": [1, 2], "radius": 3, "startAngle": 10, "endAngle": 20})
        assert arc == Arc(center=Point(1.0, 2.0), radius=3.0, start_angle=10.0, end_angle=20.0)
